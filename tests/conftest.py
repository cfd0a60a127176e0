import pygame
import pytest


class FakeClock:
    def __init__(self, now: int = 0) -> None:
        self.now = now

    def __call__(self) -> int:
        return self.now

    def advance(self, ms: int) -> None:
        self.now += ms


class FakeSound:
    def __init__(self, fail: bool = False) -> None:
        self.fail = fail
        self.plays = 0
        self.stops = 0

    def stop(self) -> None:
        self.stops += 1

    def play(self) -> None:
        if self.fail:
            raise pygame.error("no audio device")
        self.plays += 1


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def sound():
    return FakeSound()


@pytest.fixture
def failing_sound():
    return FakeSound(fail=True)
