"""Just Breathe - Box-breathing visual aid.

A circle grows while you breathe in, holds, shrinks while you breathe out,
and holds again, four seconds per phase.

Controls:
  Q       Quit
  Esc     Quit
"""
from __future__ import annotations

import argparse
import logging
import sys

import pygame

from just_breathe.colour import cycle_colour
from just_breathe.config import BreatheConfig
from just_breathe.easing import EASINGS
from just_breathe.types import ConfigError
from just_breathe.ui.constants import FPS, TITLE, WINDOW_SIZE
from just_breathe.ui.orb import draw_breath

logger = logging.getLogger(__name__)

QUIT_KEYS = (pygame.K_q, pygame.K_ESCAPE)


class BreatheSession:
    """Holds the breathing cycle and the loop's running flag."""

    def __init__(self, config: BreatheConfig) -> None:
        self.config = config
        self.cycle = config.make_cycle()
        self.running = True

    def handle_event(self, event: pygame.event.Event) -> None:
        if event.type == pygame.QUIT:
            self.running = False
        elif event.type == pygame.KEYDOWN and event.key in QUIT_KEYS:
            self.running = False

    def update(self, dt: float) -> None:
        self.cycle.advance(dt)

    def radius(self) -> float:
        return self.cycle.current_radius(self.config.min_radius, self.config.max_radius)

    def colour(self) -> pygame.Color:
        return cycle_colour(self.cycle)

    def render(self, surface: pygame.Surface) -> None:
        draw_breath(surface, self.radius(), self.colour())


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Just Breathe - box-breathing visual aid")
    p.add_argument("--easing", choices=sorted(EASINGS), default="linear",
                   help="Curve used to grow and shrink the circle (default: linear)")
    p.add_argument("--decorated", action="store_true",
                   help="Show the window frame (default: frameless)")
    p.add_argument("-v", "--verbose", action="store_true",
                   help="Log every phase change")
    return p.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = BreatheConfig(easing=args.easing)
    except ConfigError as exc:
        logger.error("Invalid configuration: %s", exc)
        sys.exit(1)

    session = BreatheSession(config)
    logger.info(
        "Breathing cycle of %.1fs, radius %.0f..%.0f, easing %s",
        config.cycle_seconds, config.min_radius, config.max_radius, config.easing,
    )

    pygame.init()
    try:
        flags = 0 if args.decorated else pygame.NOFRAME
        screen = pygame.display.set_mode((WINDOW_SIZE, WINDOW_SIZE), flags)
        pygame.display.set_caption(TITLE)
        clock = pygame.time.Clock()

        while session.running:
            dt = clock.tick(FPS) / 1000.0

            # --- Events ---
            for event in pygame.event.get():
                session.handle_event(event)
            if not session.running:
                break

            # --- Tick ---
            session.update(dt)

            # --- Render ---
            session.render(screen)
            pygame.display.flip()
    finally:
        logger.info("Completed %d cycles", session.cycle.cycles)
        pygame.quit()


if __name__ == "__main__":
    main()
