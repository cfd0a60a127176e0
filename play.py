from __future__ import annotations

import argparse
import logging
import sys

import pygame

from snakegame.audio import EatSound
from snakegame.game import Direction, Engine, EngineConfig
from snakegame.render import Renderer
from snakegame.scheduler import TickScheduler
from snakegame.session import GameSession

KEY_TO_DIRECTION = {
    pygame.K_UP: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
}

FRAME_RATE = 60


def parse_args():
    defaults = EngineConfig()
    parser = argparse.ArgumentParser(description="Play Snake")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--base-interval", type=int, default=defaults.base_interval, help="Starting tick interval in ms")
    parser.add_argument("--interval-step", type=int, default=defaults.interval_step, help="Interval decrease per speed-up in ms")
    parser.add_argument("--min-interval", type=int, default=defaults.min_interval, help="Fastest tick interval in ms")
    parser.add_argument("--eat-sound", type=str, default=None, help="Audio file played when food is eaten")
    parser.add_argument("--mute", action="store_true", help="Start with sound off")
    parser.add_argument("--log-level", type=str, default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    logging.basicConfig(level=args.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    try:
        config = EngineConfig(
            base_interval=args.base_interval,
            interval_step=args.interval_step,
            min_interval=args.min_interval,
        )
    except ValueError as exc:
        sys.exit(f"Invalid configuration: {exc}")

    engine = Engine(config, seed=args.seed)
    renderer = Renderer(config.grid_width, config.grid_height)
    audio = EatSound.load(args.eat_sound, enabled=not args.mute)
    session = GameSession(engine, TickScheduler(pygame.time.get_ticks), audio)
    clock = pygame.time.Clock()

    running = True
    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN and event.key in KEY_TO_DIRECTION:
                session.handle_intent(KEY_TO_DIRECTION[event.key])
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                if renderer.sound_button.collidepoint(event.pos):
                    session.toggle_sound()

        session.update()
        renderer.draw(engine.snapshot(), session.sound_enabled)
        clock.tick(FRAME_RATE)

    session.stop()
    print(f"Final score: {engine.score}")
    renderer.close()


if __name__ == "__main__":
    main()
