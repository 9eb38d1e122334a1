#!/usr/bin/env python3
"""
Typing Tug - Main Entry Point

A typing tug of war. Type the word under the rope to pull the marker
toward the win line while the opponent keeps pulling it back.
The match lasts 60 seconds.

Usage:
    typing-tug [--tick-ms MS] [--seed N] [--log-level LEVEL]

Controls:
    Type + Enter: Submit the word (Enter also starts the first match)
    F1: Power Grip (correct answers pull twice as hard, 5s)
    F2: Anchor (the opponent barely pulls, 3s)
    F3: Blind (the word is masked, 3s)
    F5: Start / restart
    Escape: Quit
"""
import argparse
import logging
import random
from typing import Optional, Sequence

import pygame

from typing_tug.config import Settings, get_settings
from typing_tug.gameplay.engine import TugOfWarEngine
from typing_tug.ui.renderer import Renderer
from typing_tug.ui.input_handler import InputHandler

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Typing tug of war")
    parser.add_argument("--tick-ms", type=int, default=None,
                        help="Milliseconds of game time per tick")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for reproducible word selection")
    parser.add_argument("--log-level", default=None,
                        help="Logging level (DEBUG, INFO, ...)")
    return parser.parse_args(argv)


def apply_overrides(settings: Settings, args: argparse.Namespace) -> Settings:
    """Command line options win over environment settings."""
    overrides = {}
    if args.tick_ms is not None:
        overrides["tick_rate_ms"] = args.tick_ms
    if args.seed is not None:
        overrides["seed"] = args.seed
    if args.log_level is not None:
        overrides["log_level"] = args.log_level
    if not overrides:
        return settings
    return Settings(**{**settings.model_dump(), **overrides})


def build_engine(settings: Settings) -> TugOfWarEngine:
    return TugOfWarEngine(
        rng=random.Random(settings.seed),
        match_duration_ms=settings.match_duration_ms,
    )


def main(argv: Optional[Sequence[str]] = None):
    """Main entry point."""
    settings = apply_overrides(get_settings(), parse_args(argv))

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    engine = build_engine(settings)

    pygame.init()
    screen = pygame.display.set_mode((settings.window_width, settings.window_height))
    pygame.display.set_caption("Typing Tug of War")

    renderer = Renderer(engine, font_name=settings.font_name)
    renderer.init_fonts()
    input_handler = InputHandler(engine, renderer)

    clock = pygame.time.Clock()
    tick_accumulator = 0
    should_quit = False

    logger.info(f"Starting game loop (tick: {settings.tick_rate_ms}ms, fps: {settings.fps})")
    try:
        while not should_quit:
            frame_ms = clock.tick(settings.fps)

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    should_quit = True
                elif event.type == pygame.KEYDOWN:
                    should_quit = input_handler.handle_key(event.key, event.unicode) or should_quit

            # Fixed-cadence simulation, independent of frame rate
            if engine.running:
                tick_accumulator += frame_ms
                while tick_accumulator >= settings.tick_rate_ms and engine.running:
                    engine.tick(settings.tick_rate_ms)
                    tick_accumulator -= settings.tick_rate_ms
            else:
                tick_accumulator = 0

            now_ms = pygame.time.get_ticks()
            renderer.react(engine.pop_events(), now_ms)
            renderer.render(screen, now_ms)
            pygame.display.flip()
    finally:
        pygame.quit()
        logger.info("Typing Tug stopped.")


if __name__ == "__main__":
    main()
