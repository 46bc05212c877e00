#!/usr/bin/env python3
"""
Asteroid Dodge - Standalone entry point.

Usage:
    python main.py
    python main.py --fullscreen
    python main.py --width 1024 --height 768 --profile frantic
    python main.py --headless 5400 --seed 42
"""

import argparse
import os
import sys
from pathlib import Path
from typing import List, Optional

import pygame

# Support running from any directory - add project root to path
_project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..', '..'))
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

from models import DodgeSettings, Resolution, TickReport
from arcade.input import (
    InputManager,
    InputSource,
    KeyboardInputSource,
    PointerInputSource,
    ScriptedInputSource,
    UnifiedInputSource,
)
from arcade.logging import close_all_sinks, create_sink_for_module, register_sink
from arcade.persistence import JsonBestScoreStore
from games.AsteroidDodge import config
from games.AsteroidDodge.audio import DodgeAudio
from games.AsteroidDodge.game_mode import AsteroidDodgeMode
from games.AsteroidDodge.renderer import DodgeRenderer
from games.AsteroidDodge.settings_loader import SettingsProfileLoader
from games.AsteroidDodge.simulation import SimulationEngine


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Asteroid Dodge")
    parser.add_argument('--width', type=int, default=config.SCREEN_WIDTH, help='Window width')
    parser.add_argument('--height', type=int, default=config.SCREEN_HEIGHT, help='Window height')
    parser.add_argument('--fullscreen', action='store_true', help='Run fullscreen')
    parser.add_argument('--seed', type=int, default=None, help='Random seed for a reproducible run')
    parser.add_argument('--profile', type=str, default=None,
                        help='Settings profile from profiles/ (e.g. classic, relaxed, frantic)')
    parser.add_argument('--best-score-file', type=Path, default=config.BEST_SCORE_FILE,
                        help='Where the best score is kept')
    parser.add_argument('--no-audio', action='store_true', help='Disable sound effects')
    parser.add_argument('--headless', type=int, default=None, metavar='N',
                        help='Run N ticks without a window and print the result')
    return parser


def load_settings(profile: Optional[str]) -> DodgeSettings:
    if profile is None:
        return config.DEFAULT_SETTINGS
    return SettingsProfileLoader().load_settings(profile, base=config.DEFAULT_SETTINGS)


def run_headless(engine: SimulationEngine, ticks: int,
                 source: Optional[InputSource] = None) -> TickReport:
    """
    Run one game without a display at a fixed logical tick rate.

    Stops early if the run ends.

    Args:
        engine: Engine to drive; a run is started on it
        ticks: Maximum number of ticks
        source: Input source (default: idle)

    Returns:
        Report after the last tick
    """
    manager = InputManager(source or ScriptedInputSource())
    dt = 1.0 / engine.settings.tick_rate
    engine.start()
    report = engine.report()
    for _ in range(ticks):
        manager.update(dt)
        report = engine.tick(manager.current_intent())
        if report.run_ended:
            break
    return report


def main(argv: Optional[List[str]] = None) -> int:
    """Run Asteroid Dodge."""
    args = build_parser().parse_args(argv)

    store = JsonBestScoreStore(args.best_score_file)
    try:
        settings = load_settings(args.profile)
        viewport = Resolution(width=args.width, height=args.height)
        engine = SimulationEngine(settings=settings, store=store, seed=args.seed, viewport=viewport)
    except (FileNotFoundError, ValueError) as e:
        print(f"Error: {e}")
        return 2

    register_sink('runs', create_sink_for_module('runs'))

    if args.headless is not None:
        report = run_headless(engine, args.headless)
        print(f"Ticks: {report.frame_count}  Score: {report.score}  Health: {report.health}  "
              f"Level: {report.level}  Difficulty: {report.difficulty:.3f}  "
              f"Best: {report.best_score}  Phase: {report.phase.value}")
        close_all_sinks()
        return 0

    pygame.init()

    if args.fullscreen:
        screen = pygame.display.set_mode((0, 0), pygame.FULLSCREEN)
        width, height = screen.get_size()
        viewport = Resolution(width=width, height=height)
        engine.set_viewport(viewport)
    else:
        screen = pygame.display.set_mode((viewport.width, viewport.height), pygame.RESIZABLE)

    pygame.display.set_caption("Asteroid Dodge")

    input_manager = InputManager(UnifiedInputSource(KeyboardInputSource(), PointerInputSource(viewport)))
    audio = DodgeAudio(audio_enabled=config.AUDIO_ENABLED and not args.no_audio,
                       volume=config.AUDIO_VOLUME)
    game = AsteroidDodgeMode(engine, input_manager, DodgeRenderer(), audio)

    clock = pygame.time.Clock()

    print("=" * 50)
    print("ASTEROID DODGE")
    print("=" * 50)
    print("\nDodge the asteroids, collect shields and stars!")
    print("\nControls:")
    print("  - Arrows / WASD to move")
    print("  - Hold mouse button or finger to steer")
    print("  - SPACE to start, R to restart")
    print("  - ESC to quit")
    print("=" * 50)

    while not game.quit_requested:
        dt = clock.tick(settings.tick_rate) / 1000.0

        for event in pygame.event.get():
            game.handle_event(event)

        game.update(dt)
        game.render(screen)
        pygame.display.flip()

    print(f"\nBest score: {engine.best_score}")
    close_all_sinks()
    pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())
