#!/usr/bin/env python3
"""
Letter Rush - Uyghur Typing Game

Main application: letters appear in a row, type each one on a Uyghur
keyboard layout before it falls. Runs in a pygame window, or in a terminal
with --console.
"""

import argparse
import logging
import random
import signal
import sys
from pathlib import Path
from typing import List, Optional

# Add src to path for imports when run as a script
sys.path.insert(0, str(Path(__file__).parent))

from game_system import (GameConfig, GameManager, SequenceGenerator, SequenceLayout,
                         SessionConfig, SessionEngine, TimerScheduler)
from input_system import TerminalKeySource
from render_system import ConsoleRenderer
from score_system import JsonFileScoreStorage, MemoryScoreStorage, ScoreLedger
from utils import HybridLogger

# Global logger reference for signal handlers
_global_logger = None


def emergency_flush_and_log(sig=None, frame=None):
    """Flush logs before the process is terminated"""
    if _global_logger:
        try:
            _global_logger.critical(f"Signal received: {sig} - process terminating")
        except Exception:
            pass
    # Let the frame loop unwind and clean up the terminal/window
    raise KeyboardInterrupt


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    defaults = SessionConfig()
    parser = argparse.ArgumentParser(
        description="Letter Rush - type each Uyghur letter before it falls",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    parser.add_argument("--console", action="store_true",
                        help="Play in the terminal instead of a pygame window")
    parser.add_argument("--sequence-length", type=int, default=defaults.sequence_length,
                        help="Letters per sequence")
    parser.add_argument("--advance-limit", type=int, default=None,
                        help="Letters consumed before game over (default: sequence length)")
    parser.add_argument("--warning-ms", type=int, default=defaults.warning_delay_ms,
                        help="Delay before the active letter starts blinking")
    parser.add_argument("--expiry-ms", type=int, default=defaults.expiry_delay_ms,
                        help="Delay before the active letter falls off")
    parser.add_argument("--points", type=int, default=defaults.points_per_match,
                        help="Points per correctly typed letter")
    parser.add_argument("--score-file", default=GameConfig.score_file,
                        help="JSON file holding the total score")
    parser.add_argument("--no-save", action="store_true",
                        help="Do not read or write the total score file")
    parser.add_argument("--log-dir", default=GameConfig.log_dir,
                        help="Directory for log files")
    parser.add_argument("--images-dir", default=GameConfig.images_dir,
                        help="Directory with letter/ and bg/ images")
    parser.add_argument("--fonts-dir", default=GameConfig.fonts_dir,
                        help="Directory with a font covering Uyghur letters")
    parser.add_argument("--seed", type=int, default=None,
                        help="Random seed for reproducible sequences")
    parser.add_argument("--debug", action="store_true",
                        help="Debug level logging")
    return parser.parse_args(argv)


def create_game_config(args: argparse.Namespace) -> GameConfig:
    """Build the configuration from command line arguments"""
    session = SessionConfig(
        sequence_length=args.sequence_length,
        advance_limit=args.advance_limit if args.advance_limit is not None else args.sequence_length,
        warning_delay_ms=args.warning_ms,
        expiry_delay_ms=args.expiry_ms,
        points_per_match=args.points,
    )
    return GameConfig(
        session=session,
        score_file=args.score_file,
        persist_scores=not args.no_save,
        renderer="console" if args.console else "pygame",
        images_dir=args.images_dir,
        fonts_dir=args.fonts_dir,
        log_dir=args.log_dir,
    )


def create_game_system(config: GameConfig, main_logger: HybridLogger, level: int,
                       seed: Optional[int] = None) -> GameManager:
    """
    Create and wire the complete game.

    Args:
        config: Validated game configuration
        main_logger: HybridLogger providing per-class loggers
        level: Log level for the component loggers
        seed: Optional random seed for the sequence generator

    Returns:
        GameManager: Configured game manager ready to run
    """
    game_manager_logger = main_logger.get_class_logger("GameManager", level)
    engine_logger = main_logger.get_class_logger("SessionEngine", level)
    score_logger = main_logger.get_class_logger("ScoreLedger", level)
    render_logger = main_logger.get_class_logger("Renderer", level)
    input_logger = main_logger.get_class_logger("KeySource", level)

    if config.persist_scores:
        storage = JsonFileScoreStorage(config.score_file, score_logger)
    else:
        storage = MemoryScoreStorage()
    ledger = ScoreLedger(storage, score_logger)

    if config.renderer == "console":
        renderer = ConsoleRenderer(render_logger)
        key_source = TerminalKeySource(input_logger)
    else:
        # Only the window mode needs pygame
        from render_system.pygame_renderer import PygameRenderer
        from input_system.pygame_key_source import PygameKeySource
        renderer = PygameRenderer(config.layout, render_logger,
                                  images_dir=config.images_dir, fonts_dir=config.fonts_dir)
        key_source = PygameKeySource(input_logger)

    renderer.setup()
    try:
        key_source.setup()
    except Exception:
        # GameManager.stop() never runs for a half-built game
        renderer.cleanup()
        raise

    scheduler = TimerScheduler()
    engine = SessionEngine(
        config=config.session,
        ledger=ledger,
        renderer=renderer,
        scheduler=scheduler,
        layout=SequenceLayout(config.layout),
        logger=engine_logger,
        generator=SequenceGenerator(config.session.alphabet, rng=random.Random(seed)),
    )

    return GameManager(
        key_source=key_source,
        renderer=renderer,
        engine=engine,
        ledger=ledger,
        scheduler=scheduler,
        logger=game_manager_logger,
        frame_duration_ms=config.frame_duration_ms,
    )


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main function - sets up and runs the game.
    """
    args = parse_args(argv)
    config = create_game_config(args)
    config.validate()

    level = logging.DEBUG if args.debug else logging.INFO
    # Console mode draws through the log, so the stdout handler stays on
    main_logger = HybridLogger("LetterRush", log_dir=config.log_dir)
    app_logger = main_logger.get_class_logger("LetterRush", level)

    global _global_logger
    _global_logger = app_logger
    signal.signal(signal.SIGTERM, emergency_flush_and_log)

    app_logger.info("LETTER RUSH - Uyghur typing game")
    app_logger.info(
        f"Session: {config.session.sequence_length} letters, game over after {config.session.advance_limit}, "
        f"warning {config.session.warning_delay_ms}ms, expiry {config.session.expiry_delay_ms}ms, "
        f"{config.session.points_per_match} points per letter"
    )
    app_logger.info(f"Renderer: {config.renderer} | Frame: {config.frame_duration_ms}ms ({config.target_fps:.1f} FPS)")

    try:
        game_manager = create_game_system(config, main_logger, level, seed=args.seed)
        game_manager.run_game_loop()
    except KeyboardInterrupt:
        app_logger.info("Letter Rush stopped by user")
    except Exception as e:
        app_logger.error(f"Letter Rush error: {e}", exception=e)
        raise
    finally:
        app_logger.info("Letter Rush shut down")
        app_logger.flush()
        main_logger.cleanup()

    return 0


if __name__ == "__main__":
    sys.exit(main())
