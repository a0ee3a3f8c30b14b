"""
Screen state base class and concrete implementations
"""

from abc import ABC, abstractmethod
from typing import List, Optional, TYPE_CHECKING

from input_system.key_event import ENTER, ESCAPE, HELP, SPACE

from .session_engine import SessionPhase

if TYPE_CHECKING:
    from input_system.key_event import KeyEvent
    from game_system.game_manager import GameManager


class GameState(ABC):
    """
    Abstract base class for all screen states.

    Each state represents one screen of the game with its own:
    - Key handling logic
    - Renderer setup on enter
    - State transition conditions
    """

    def __init__(self, game_manager: 'GameManager'):
        """Initialize the game state"""
        self.game_manager: 'GameManager' = game_manager
        self.logger = game_manager.logger.create_class_logger(self.__class__.__name__)

    @abstractmethod
    def state_update(self, key_events: List['KeyEvent']) -> Optional['GameState']:
        """
        State-specific update logic (override in subclasses).

        Args:
            key_events: Key presses since the previous frame

        Returns:
            New GameState instance if transition needed, None to stay
        """
        pass

    def on_enter(self) -> None:
        """Called when entering this state"""
        self.custom_on_enter()

    def on_exit(self) -> None:
        """Called when exiting this state"""
        self.custom_on_exit()

    @abstractmethod
    def custom_on_enter(self) -> None:
        pass

    def custom_on_exit(self) -> None:
        """Custom exit logic (override if needed)"""
        pass


class HomeState(GameState):
    """
    Home screen - shows the cumulative score.

    Transitions:
    - Enter / Space / '?' → HelpState
    - Escape → quit the game
    """

    def custom_on_enter(self) -> None:
        self.game_manager.renderer.show_home(self.game_manager.ledger.get_cumulative_score())

    def state_update(self, key_events: List['KeyEvent']) -> Optional['GameState']:
        for event in key_events:
            if event.name in (ENTER, SPACE, HELP):
                return HelpState(self.game_manager)
            if event.name == ESCAPE:
                self.logger.info("Quit requested from home screen")
                self.game_manager.running = False
                return None
        return None


class HelpState(GameState):
    """
    Keyboard guide shown before every game.

    Transitions:
    - Enter → PlayingState
    - Escape → HomeState (closed without starting)
    """

    def custom_on_enter(self) -> None:
        self.game_manager.renderer.show_help()

    def state_update(self, key_events: List['KeyEvent']) -> Optional['GameState']:
        for event in key_events:
            if event.name == ENTER:
                return PlayingState(self.game_manager)
            if event.name == ESCAPE:
                return HomeState(self.game_manager)
        return None


class PlayingState(GameState):
    """
    One play session.

    Every key press except Escape is offered to the session engine.

    Transitions:
    - Session engine reports game over → EndScreenState
    - Escape (back) → HomeState, session abandoned without game over
    """

    def custom_on_enter(self) -> None:
        manager = self.game_manager
        manager.renderer.clear_sequence()
        manager.ledger.reset()
        manager.renderer.show_game()
        manager.engine.start()

    def state_update(self, key_events: List['KeyEvent']) -> Optional['GameState']:
        manager = self.game_manager

        for event in key_events:
            if event.name == ESCAPE:
                self.logger.info("Back to home, session abandoned")
                manager.ledger.save_cumulative_score()
                manager.engine.reset()
                manager.renderer.clear_sequence()
                return HomeState(manager)

            manager.engine.handle_input(event.key)

        # Game over may have fired from a key press above or from a timer
        if manager.engine.phase is SessionPhase.ENDED:
            return EndScreenState(manager, manager.ledger.get_session_score())

        return None


class EndScreenState(GameState):
    """
    Game over popup with the session and cumulative scores.

    Transitions:
    - Enter / Space (back to home) → HomeState
    """

    def __init__(self, game_manager: 'GameManager', final_score: int):
        super().__init__(game_manager)
        self.final_score = final_score

    def custom_on_enter(self) -> None:
        ledger = self.game_manager.ledger
        ledger.save_cumulative_score()
        self.game_manager.renderer.show_end_screen(self.final_score, ledger.get_cumulative_score())
        self.logger.info(
            f"Game over: score {self.final_score}, total {ledger.get_cumulative_score()}"
        )

    def custom_on_exit(self) -> None:
        self.game_manager.engine.reset()
        self.game_manager.renderer.clear_sequence()

    def state_update(self, key_events: List['KeyEvent']) -> Optional['GameState']:
        for event in key_events:
            if event.name in (ENTER, SPACE):
                return HomeState(self.game_manager)
        return None
