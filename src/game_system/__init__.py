"""
Game System - State machine based typing game

This module provides the core of the game: the session engine with its
letter countdowns, the timer scheduler ticked by the frame loop, and the
screen states run by the game manager.
"""

from .alphabet import UYGHUR_LETTERS, get_letter_image_path
from .config import GameConfig, SessionConfig, LayoutConfig
from .layout import SequenceLayout
from .sequence_generator import SequenceGenerator
from .timers import TimerScheduler, ScheduledTask, TimerPair
from .session_engine import SessionEngine, SessionPhase
from .states import GameState, HomeState, HelpState, PlayingState, EndScreenState
from .game_manager import GameManager

__all__ = [
    # Letters
    "UYGHUR_LETTERS",
    "get_letter_image_path",
    # Configuration
    "GameConfig",
    "SessionConfig",
    "LayoutConfig",
    # Session core
    "SequenceLayout",
    "SequenceGenerator",
    "TimerScheduler",
    "ScheduledTask",
    "TimerPair",
    "SessionEngine",
    "SessionPhase",
    # Screens
    "GameState",
    "HomeState",
    "HelpState",
    "PlayingState",
    "EndScreenState",
    "GameManager"
]
