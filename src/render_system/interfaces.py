#!/usr/bin/env python3
"""
Renderer Interface - Abstract base class for drawing the game

Separates what the game wants to show from how it is shown, so the session
engine can run against a pygame window, a terminal or a test recorder.
"""
from abc import ABC, abstractmethod
from typing import List, Sequence


class IRenderer(ABC):
    """Abstract interface for game presentation

    The session engine only calls the sequence methods (render_sequence,
    request_shift, request_*_effect, request_warning). The screen methods are
    called by the host's screen states. Every call is a request: the
    renderer owns its own animation timing and never feeds anything back
    into the game.
    """

    # --- Sequence requests (session engine) ---

    @abstractmethod
    def render_sequence(self, symbols: Sequence[str], positions: List[float]) -> None:
        """Draw a new sequence at its initial positions, replacing any previous one.

        Args:
            symbols: Letters of the sequence, in order
            positions: Left edge (px) of each letter
        """
        pass

    @abstractmethod
    def request_shift(self, from_position: int) -> None:
        """Move every letter from `from_position` onward one spacing unit toward the consumed side."""
        pass

    @abstractmethod
    def request_consumed_effect(self, position: int) -> None:
        """Letter at `position` was typed correctly."""
        pass

    @abstractmethod
    def request_missed_effect(self, position: int) -> None:
        """Letter at `position` expired without a match."""
        pass

    @abstractmethod
    def request_warning(self, position: int, on: bool) -> None:
        """Warning blink for the letter at `position` (on = dimmed phase)."""
        pass

    # --- Screens (host application) ---

    @abstractmethod
    def show_home(self, cumulative_score: int) -> None:
        pass

    @abstractmethod
    def show_help(self) -> None:
        pass

    @abstractmethod
    def show_game(self) -> None:
        pass

    @abstractmethod
    def show_end_screen(self, session_score: int, cumulative_score: int) -> None:
        pass

    @abstractmethod
    def update_score(self, session_score: int, cumulative_score: int, animate: bool = False) -> None:
        """Refresh the score display, optionally with a pulse."""
        pass

    @abstractmethod
    def clear_sequence(self) -> None:
        """Remove every letter from the play area."""
        pass

    # --- Lifecycle ---

    @abstractmethod
    def setup(self) -> None:
        pass

    @abstractmethod
    def present(self) -> None:
        """Draw one frame (called once per frame by the frame loop)."""
        pass

    @abstractmethod
    def cleanup(self) -> None:
        pass
