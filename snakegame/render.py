from __future__ import annotations

from typing import Optional

import pygame

from snakegame.game import Phase, Snapshot

CELL_SIZE = 20
CELL_GAP = 2
HEADER_HEIGHT = 70
FOOTER_HEIGHT = 36

BACKGROUND = (0, 0, 0)
GRID_LINE = (51, 51, 51)
SNAKE_COLOR = (76, 175, 80)
FOOD_COLOR = (231, 76, 60)
TEXT_COLOR = (255, 255, 255)
BORDER_COLOR = (255, 255, 255)
SOUND_ON = (76, 175, 80)
SOUND_OFF = (102, 102, 102)

START_BANNER = "Press an arrow key to start"
GAME_OVER_BANNER = "Game over! Press an arrow key to restart"


def banner_text(phase: Phase) -> Optional[str]:
    if phase is Phase.NOT_STARTED:
        return START_BANNER
    if phase is Phase.GAME_OVER:
        return GAME_OVER_BANNER
    return None


class Renderer:
    def __init__(self, grid_width: int, grid_height: int, cell_size: int = CELL_SIZE) -> None:
        self.grid_width = grid_width
        self.grid_height = grid_height
        self.cell_size = cell_size
        self.board_width = grid_width * cell_size
        self.board_height = grid_height * cell_size

        pygame.init()
        self._window = pygame.display.set_mode(
            (self.board_width, HEADER_HEIGHT + self.board_height + FOOTER_HEIGHT)
        )
        pygame.display.set_caption("Snake")
        self._font = pygame.font.Font(None, 24)
        self.sound_button = pygame.Rect(self.board_width // 2 - 50, 42, 100, 22)

    def draw(self, snapshot: Snapshot, sound_enabled: bool) -> None:
        self._window.fill(BACKGROUND)
        self._draw_header(snapshot, sound_enabled)
        self._draw_board(snapshot)

        text = banner_text(snapshot.phase)
        if text:
            self._blit_centered(text, HEADER_HEIGHT + self.board_height + FOOTER_HEIGHT // 2)

        pygame.display.flip()

    def _draw_header(self, snapshot: Snapshot, sound_enabled: bool) -> None:
        self._blit_centered(f"Score: {snapshot.score}", 12)
        self._blit_centered(f"Speed level: {snapshot.speed_level}", 30)

        pygame.draw.rect(
            self._window,
            SOUND_ON if sound_enabled else SOUND_OFF,
            self.sound_button,
            border_radius=4,
        )
        label = f"Sound: {'on' if sound_enabled else 'off'}"
        self._blit_centered(label, self.sound_button.centery)

    def _draw_board(self, snapshot: Snapshot) -> None:
        top = HEADER_HEIGHT
        for i in range(self.grid_width + 1):
            x = i * self.cell_size
            pygame.draw.line(self._window, GRID_LINE, (x, top), (x, top + self.board_height))
        for j in range(self.grid_height + 1):
            y = top + j * self.cell_size
            pygame.draw.line(self._window, GRID_LINE, (0, y), (self.board_width, y))

        for cell in snapshot.snake:
            pygame.draw.rect(self._window, SNAKE_COLOR, self._cell_rect(cell))

        if snapshot.food is not None:
            pygame.draw.rect(self._window, FOOD_COLOR, self._cell_rect(snapshot.food))

        border = pygame.Rect(0, top, self.board_width, self.board_height)
        pygame.draw.rect(self._window, BORDER_COLOR, border, 2)

    def _cell_rect(self, cell) -> pygame.Rect:
        x, y = cell
        size = self.cell_size - CELL_GAP
        return pygame.Rect(x * self.cell_size, HEADER_HEIGHT + y * self.cell_size, size, size)

    def _blit_centered(self, text: str, center_y: int) -> None:
        surface = self._font.render(text, True, TEXT_COLOR)
        rect = surface.get_rect(center=(self.board_width // 2, center_y))
        self._window.blit(surface, rect)

    def close(self) -> None:
        pygame.quit()
