"""
Main game manager - orchestrates screen states, key input, timers and rendering
"""

import time
from typing import List, Optional, TYPE_CHECKING

import psutil

from input_system.key_event import QUIT
from utils import OnceInMs

from .states import GameState, HomeState

if TYPE_CHECKING:
    from input_system.interfaces import IKeySource
    from input_system.key_event import KeyEvent
    from render_system.interfaces import IRenderer
    from score_system.score_ledger import ScoreLedger
    from utils import ClassLogger
    from .session_engine import SessionEngine
    from .timers import TimerScheduler


class GameManager:
    """
    Main game manager that orchestrates the entire game.

    Responsibilities:
    - Manage screen state transitions
    - Feed key presses to the current state
    - Tick the timer scheduler that drives the session countdowns
    - Maintain consistent frame timing
    """

    def __init__(self,
                 key_source: 'IKeySource',
                 renderer: 'IRenderer',
                 engine: 'SessionEngine',
                 ledger: 'ScoreLedger',
                 scheduler: 'TimerScheduler',
                 logger: 'ClassLogger',
                 frame_duration_ms: int = 20):
        """
        Initialize the game manager.

        Args:
            key_source: Source of key presses
            renderer: Presentation of the game
            engine: Session engine driving one play session
            ledger: Shared score ledger
            scheduler: Timer scheduler, ticked once per frame
            logger: Logger for debugging and monitoring
            frame_duration_ms: Target frame duration in milliseconds (int)
        """
        self.key_source = key_source
        self.renderer = renderer
        self.engine = engine
        self.ledger = ledger
        self.scheduler = scheduler
        self.target_frame_duration = frame_duration_ms / 1000.0
        self.logger = logger
        self.running = True
        self.games_played = 0

        # Resource monitoring using OnceInMs
        self._memory_monitor = OnceInMs(60000)  # Log every 60 seconds
        self._process = psutil.Process()

        self.ledger.add_listener(self.renderer.update_score)
        self.engine.on_game_over(self._on_game_over)

        self.current_state: GameState = HomeState(self)
        self.current_state.on_enter()

        self.logger.info(f"GameManager initialized: {frame_duration_ms}ms frame duration")

    def run_game_loop(self) -> None:
        """
        Run the game loop with automatic frame duration limiting.

        Call this from your main() function for automatic frame management.
        """
        self.logger.info(f"Starting game loop with {int(self.target_frame_duration * 1000)}ms frame duration")

        try:
            while self.running:
                frame_start = time.time()

                self.update()

                # Frame duration limiting
                frame_duration = time.time() - frame_start
                sleep_time = self.target_frame_duration - frame_duration

                if sleep_time > 0:
                    time.sleep(sleep_time)

        except KeyboardInterrupt:
            self.logger.info("Game stopped by user (Ctrl+C)")
            self.logger.flush()
        except Exception as e:
            self.logger.error(f"Game loop error: {e}", exception=e)
            raise
        finally:
            self.stop()

    def update(self) -> None:
        """
        One frame: input, state logic, timers, drawing.
        """
        if self._memory_monitor.should_execute():
            self._log_memory_usage()

        # 1. Collect key presses
        key_events = self.key_source.poll()
        if any(event.name == QUIT for event in key_events):
            self.logger.info("Quit requested")
            self.running = False
            return

        # 2. Let state handle keys and check for state transitions.
        # Every polled key was typed before this frame's timers are due.
        self.process_keys(key_events)

        # 3. Fire due countdown timers, then let the state react to them
        if self.scheduler.update():
            self.process_keys([])

        # 4. Draw
        self.renderer.present()

    def process_keys(self, key_events: List['KeyEvent']) -> None:
        """Run the current state on the given keys, following any transition"""
        new_state = self.current_state.state_update(key_events)
        if new_state:
            self._transition_to_state(new_state)

    def stop(self) -> None:
        """Stop the game and clean up resources."""
        self.running = False

        self.engine.reset()
        self.scheduler.cancel_all()
        self.ledger.save_cumulative_score()

        self.key_source.cleanup()
        self.renderer.cleanup()

        self.logger.info(f"Game stopped after {self.games_played} games, total score {self.ledger.get_cumulative_score()}")

    def _on_game_over(self, final_score: int) -> None:
        self.games_played += 1
        self.logger.info(f"Game {self.games_played} over with score {final_score}")

    def _log_memory_usage(self) -> None:
        """Log current memory and CPU usage of the process"""
        try:
            mem_info = self._process.memory_info()
            process_mb = mem_info.rss / 1024 / 1024
            process_cpu_percent = self._process.cpu_percent(interval=None)
            sys_mem = psutil.virtual_memory()

            self.logger.info(
                f"Memory - Process: {process_mb:.1f}MB | "
                f"System: {sys_mem.percent:.1f}% used | "
                f"CPU - Process: {process_cpu_percent:.1f}%"
            )
        except psutil.Error as e:
            self.logger.warning(f"Failed to log system usage: {e}")

    def _transition_to_state(self, new_state: GameState) -> None:
        """
        Handle transition to a new screen state.

        Args:
            new_state: The new state to transition to
        """
        self.current_state.on_exit()

        old_state_name = self.current_state.__class__.__name__
        new_state_name = new_state.__class__.__name__
        self.logger.info(f"State transition: {old_state_name} → {new_state_name}")

        self.current_state = new_state
        self.current_state.on_enter()

    def get_current_state_name(self) -> str:
        """Get the name of the current screen state."""
        return self.current_state.__class__.__name__
