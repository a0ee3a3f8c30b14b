"""
Abstract interfaces for key input
"""

from abc import ABC, abstractmethod
from typing import List

from .key_event import KeyEvent


class IKeySource(ABC):
    """
    Abstract interface for reading key presses.

    Separates where key presses come from (pygame window, terminal, test
    script) from how the game reacts to them.
    """

    @abstractmethod
    def setup(self) -> None:
        """Initialize the input resources"""
        pass

    @abstractmethod
    def poll(self) -> List[KeyEvent]:
        """
        Collect key presses since the last call without blocking.

        Returns:
            Key events in the order they were typed (may be empty)
        """
        pass

    @abstractmethod
    def cleanup(self) -> None:
        """Release input resources"""
        pass
