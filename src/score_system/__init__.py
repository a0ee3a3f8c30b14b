"""
Score System Package

Session/cumulative score ledger and durable storage of the cumulative score.
"""

from .interfaces import IScoreStorage
from .storage import JsonFileScoreStorage, MemoryScoreStorage, TOTAL_SCORE_KEY
from .score_ledger import ScoreLedger

__all__ = [
    "IScoreStorage",
    "JsonFileScoreStorage",
    "MemoryScoreStorage",
    "TOTAL_SCORE_KEY",
    "ScoreLedger"
]
