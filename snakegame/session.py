from __future__ import annotations

import logging
from typing import Optional

from snakegame.audio import EatSound
from snakegame.game import Direction, Engine, Phase, TickResult
from snakegame.scheduler import TickScheduler

logger = logging.getLogger(__name__)


class GameSession:
    """Wires one engine to its tick scheduler and sound.

    Each window owns its own session; nothing here is shared across games.
    """

    def __init__(self, engine: Engine, scheduler: TickScheduler, audio: Optional[EatSound] = None) -> None:
        self.engine = engine
        self.scheduler = scheduler
        self.audio = audio

    def handle_intent(self, direction: Direction) -> None:
        was_running = self.engine.phase is Phase.RUNNING
        self.engine.set_intent(direction)
        if not was_running and self.engine.phase is Phase.RUNNING:
            logger.info("Game started")
            self.scheduler.cancel()
            self.scheduler.schedule(self.engine.speed)

    def update(self) -> Optional[TickResult]:
        if not self.scheduler.poll():
            return None

        previous_speed = self.engine.speed
        result = self.engine.tick()

        if result is TickResult.GAME_OVER:
            self.scheduler.cancel()
            logger.info("Game over with score %d", self.engine.score)
            return result
        if result is TickResult.FOOD_EATEN:
            if self.audio is not None:
                self.audio.play()
            if self.engine.speed != previous_speed:
                logger.debug("Speed up: interval %d ms (level %d)", self.engine.speed, self.engine.speed_level)
        if result is not TickResult.IDLE:
            self.scheduler.reschedule(self.engine.speed)
        return result

    def stop(self) -> None:
        self.scheduler.cancel()

    def toggle_sound(self) -> bool:
        if self.audio is None:
            return False
        return self.audio.toggle()

    @property
    def sound_enabled(self) -> bool:
        return self.audio is not None and self.audio.enabled
