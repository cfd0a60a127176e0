from __future__ import annotations

import random
from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import Deque, Optional, Tuple

Cell = Tuple[int, int]


class Direction(Enum):
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def opposite(self) -> "Direction":
        dx, dy = self.value
        return Direction((-dx, -dy))


class Phase(Enum):
    NOT_STARTED = "not_started"
    RUNNING = "running"
    GAME_OVER = "game_over"


class TickResult(Enum):
    IDLE = "idle"  # tick delivered outside RUNNING
    MOVED = "moved"
    FOOD_EATEN = "food_eaten"
    GAME_OVER = "game_over"


def add_pos(a: Cell, b: Cell) -> Cell:
    return a[0] + b[0], a[1] + b[1]


@dataclass(frozen=True)
class EngineConfig:
    grid_width: int = 20
    grid_height: int = 20
    base_interval: int = 150
    interval_step: int = 10
    min_interval: int = 50
    points_per_level: int = 5
    initial_snake: Tuple[Cell, ...] = ((5, 5), (4, 5), (3, 5))
    initial_direction: Direction = Direction.RIGHT
    initial_food: Cell = (15, 15)

    def __post_init__(self) -> None:
        if self.grid_width <= 0 or self.grid_height <= 0:
            raise ValueError("grid dimensions must be positive")
        if self.min_interval <= 0 or self.interval_step < 0:
            raise ValueError("min_interval must be positive and interval_step non-negative")
        if self.base_interval < self.min_interval:
            raise ValueError("base_interval must not be below min_interval")
        if self.points_per_level <= 0:
            raise ValueError("points_per_level must be positive")
        if not self.initial_snake:
            raise ValueError("initial_snake needs at least one cell")
        if len(set(self.initial_snake)) != len(self.initial_snake):
            raise ValueError("initial_snake has duplicate cells")
        for cell in (*self.initial_snake, self.initial_food):
            if not self.in_bounds(cell):
                raise ValueError(f"cell {cell} is outside the {self.grid_width}x{self.grid_height} grid")
        if self.initial_food in self.initial_snake:
            raise ValueError("initial_food lies on the initial snake")

    def in_bounds(self, pos: Cell) -> bool:
        x, y = pos
        return 0 <= x < self.grid_width and 0 <= y < self.grid_height

    def interval_for(self, score: int) -> int:
        steps = score // self.points_per_level
        return max(self.base_interval - steps * self.interval_step, self.min_interval)


@dataclass(frozen=True)
class Snapshot:
    snake: Tuple[Cell, ...]
    food: Optional[Cell]
    grid_width: int
    grid_height: int
    score: int
    speed: int
    speed_level: int
    phase: Phase


class Engine:
    """Discrete-time snake simulation.

    The engine performs no I/O. Callers feed it intents via ``set_intent`` and
    advance it with ``tick`` at an interval equal to ``speed`` milliseconds,
    re-reading ``speed`` after each tick since eating food can shorten it.
    """

    def __init__(self, config: Optional[EngineConfig] = None, seed: Optional[int] = None) -> None:
        self.config = config or EngineConfig()
        self.random = random.Random(seed)

        self.snake: Deque[Cell] = deque()
        self.direction: Direction = self.config.initial_direction
        self.pending: Optional[Direction] = None
        self.food: Optional[Cell] = None
        self.score = 0
        self.speed = self.config.base_interval
        self.phase = Phase.NOT_STARTED

        self.reset()

    @property
    def alive(self) -> bool:
        return self.phase is not Phase.GAME_OVER

    @property
    def speed_level(self) -> int:
        cfg = self.config
        if cfg.interval_step == 0:
            return 1
        return (cfg.base_interval - self.speed) // cfg.interval_step + 1

    def reset(self) -> Snapshot:
        cfg = self.config
        self.snake = deque(cfg.initial_snake)
        self.direction = cfg.initial_direction
        self.pending = None
        self.food = cfg.initial_food
        self.score = 0
        self.speed = cfg.base_interval
        self.phase = Phase.NOT_STARTED
        return self.snapshot()

    def set_intent(self, requested: Direction) -> None:
        if self.phase is not Phase.RUNNING:
            # Any direction key (re)starts the game; the key itself is not a turn.
            self.reset()
            self.phase = Phase.RUNNING
            return
        if requested is self.direction.opposite:
            return
        self.pending = requested

    def tick(self) -> TickResult:
        if self.phase is not Phase.RUNNING:
            return TickResult.IDLE

        if self.pending is not None:
            self.direction = self.pending
            self.pending = None

        new_head = add_pos(self.snake[0], self.direction.value)
        if not self.config.in_bounds(new_head):
            self.phase = Phase.GAME_OVER
            return TickResult.GAME_OVER

        growing = new_head == self.food
        if self._hits_body(new_head, growing):
            self.phase = Phase.GAME_OVER
            return TickResult.GAME_OVER

        self.snake.appendleft(new_head)
        if not growing:
            self.snake.pop()
            return TickResult.MOVED

        self.score += 1
        self.speed = self.config.interval_for(self.score)
        self.food = self._random_food()
        return TickResult.FOOD_EATEN

    def _hits_body(self, pos: Cell, growing: bool) -> bool:
        body = list(self.snake)
        if not growing:
            # The tail moves out of its cell on this same step.
            body = body[:-1]
        return pos in body

    def _random_food(self) -> Optional[Cell]:
        occupied = set(self.snake)
        available = [
            (x, y)
            for x in range(self.config.grid_width)
            for y in range(self.config.grid_height)
            if (x, y) not in occupied
        ]
        return self.random.choice(available) if available else None

    def snapshot(self) -> Snapshot:
        return Snapshot(
            snake=tuple(self.snake),
            food=self.food,
            grid_width=self.config.grid_width,
            grid_height=self.config.grid_height,
            score=self.score,
            speed=self.speed,
            speed_level=self.speed_level,
            phase=self.phase,
        )
