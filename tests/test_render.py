import dataclasses

import pygame
import pytest

from snakegame.game import Direction, Engine, Phase
from snakegame.render import (
    BACKGROUND,
    CELL_SIZE,
    FOOD_COLOR,
    GAME_OVER_BANNER,
    HEADER_HEIGHT,
    SNAKE_COLOR,
    SOUND_OFF,
    SOUND_ON,
    START_BANNER,
    Renderer,
    banner_text,
)


@pytest.fixture
def renderer(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    r = Renderer(20, 20)
    yield r
    r.close()


def pixel(cell_x, cell_y, dx=5, dy=5):
    color = pygame.display.get_surface().get_at((cell_x * CELL_SIZE + dx, HEADER_HEIGHT + cell_y * CELL_SIZE + dy))
    return tuple(color)[:3]


def test_banner_follows_phase():
    assert banner_text(Phase.NOT_STARTED) == START_BANNER
    assert banner_text(Phase.GAME_OVER) == GAME_OVER_BANNER
    assert banner_text(Phase.RUNNING) is None


def test_draw_paints_snake_and_food(renderer):
    snapshot = Engine().snapshot()
    renderer.draw(snapshot, sound_enabled=True)
    assert pixel(5, 5) == SNAKE_COLOR
    assert pixel(3, 5) == SNAKE_COLOR
    assert pixel(15, 15) == FOOD_COLOR
    # Gap between neighbouring snake cells.
    assert pixel(4, 5, dx=CELL_SIZE - 2) == BACKGROUND
    button = renderer.sound_button
    assert tuple(pygame.display.get_surface().get_at((button.left + 3, button.centery)))[:3] == SOUND_ON


def test_draw_without_food(renderer):
    engine = Engine()
    engine.set_intent(Direction.RIGHT)
    snapshot = dataclasses.replace(engine.snapshot(), food=None, speed=50, speed_level=11)
    renderer.draw(snapshot, sound_enabled=False)
    assert pixel(15, 15) == BACKGROUND
    assert pixel(5, 5) == SNAKE_COLOR
    button = renderer.sound_button
    assert tuple(pygame.display.get_surface().get_at((button.left + 3, button.centery)))[:3] == SOUND_OFF
