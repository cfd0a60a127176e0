from __future__ import annotations

from typing import Callable, Optional


class TickScheduler:
    """Holds at most one pending one-shot tick against a millisecond clock.

    The tick interval changes as the game speeds up, so there is no fixed
    period: after every tick the caller schedules the next one explicitly,
    with ``reschedule`` measuring from when the consumed tick was due rather
    than from when the frame loop got round to polling it.
    """

    def __init__(self, clock: Callable[[], int]) -> None:
        self.clock = clock
        self._due_at: Optional[int] = None
        self._last_due: Optional[int] = None

    @property
    def pending(self) -> bool:
        return self._due_at is not None

    @property
    def due_at(self) -> Optional[int]:
        return self._due_at

    def schedule(self, interval: int) -> None:
        _check_interval(interval)
        self._due_at = self.clock() + interval

    def reschedule(self, interval: int) -> None:
        if self._last_due is None:
            self.schedule(interval)
            return
        _check_interval(interval)
        # After a stall, fire once on the next poll instead of bursting to catch up.
        self._due_at = max(self._last_due + interval, self.clock())

    def cancel(self) -> None:
        self._due_at = None
        self._last_due = None

    def poll(self) -> bool:
        if self._due_at is None or self.clock() < self._due_at:
            return False
        self._last_due = self._due_at
        self._due_at = None
        return True


def _check_interval(interval: int) -> None:
    if interval <= 0:
        raise ValueError(f"tick interval must be positive, got {interval}")
