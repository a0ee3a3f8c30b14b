"""
Abstract interface for durable score storage
"""

from abc import ABC, abstractmethod


class IScoreStorage(ABC):
    """
    Durable home of the cumulative score.

    Implementations must never fail on load: a missing or malformed value
    reads as 0.
    """

    @abstractmethod
    def load_cumulative_score(self) -> int:
        """
        Returns:
            Stored cumulative score, 0 if absent or unparsable
        """
        pass

    @abstractmethod
    def save_cumulative_score(self, score: int) -> None:
        pass
