"""
Score ledger - session and cumulative score counters
"""

from typing import Callable, List

from .interfaces import IScoreStorage

ScoreListener = Callable[[int, int, bool], None]


class ScoreLedger:
    """
    Owns the session score and the persisted cumulative score.

    Both counters only change through increment() and reset(); the session
    engine and the screens share one ledger instance.

    Example:
        ledger = ScoreLedger(JsonFileScoreStorage(path, logger), logger)
        ledger.increment(10)         # session 10, cumulative +10, saved
        ledger.reset()               # session 0, cumulative kept
    """

    def __init__(self, storage: IScoreStorage, logger):
        """
        Args:
            storage: Durable storage of the cumulative score
            logger: ClassLogger instance for logging
        """
        self.storage = storage
        self.logger = logger
        self._session_score = 0
        self._cumulative_score = storage.load_cumulative_score()
        self._listeners: List[ScoreListener] = []

        self.logger.info(f"ScoreLedger initialized: cumulative score {self._cumulative_score}")

    def add_listener(self, listener: ScoreListener) -> None:
        """Register listener(session_score, cumulative_score, animate) called on every change"""
        self._listeners.append(listener)

    def _notify(self, animate: bool) -> None:
        for listener in self._listeners:
            listener(self._session_score, self._cumulative_score, animate)

    def increment(self, points: int = 10) -> None:
        """
        Add points to both counters and persist the cumulative one.

        Args:
            points: Non-negative number of points
        """
        self._session_score += points
        self._cumulative_score += points
        self.logger.debug(f"+{points} points: session {self._session_score}, cumulative {self._cumulative_score}")

        self._notify(animate=True)
        self.storage.save_cumulative_score(self._cumulative_score)

    def reset(self) -> None:
        """Zero the session score; the cumulative score is untouched"""
        self._session_score = 0
        self._notify(animate=False)

    def save_cumulative_score(self) -> None:
        """Write the cumulative score to storage again"""
        self.storage.save_cumulative_score(self._cumulative_score)

    def get_session_score(self) -> int:
        return self._session_score

    def get_cumulative_score(self) -> int:
        return self._cumulative_score

    def __str__(self) -> str:
        return f"ScoreLedger(session={self._session_score}, cumulative={self._cumulative_score})"
