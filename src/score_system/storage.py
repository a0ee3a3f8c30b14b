"""
Score storage implementations - JSON file and in-memory
"""

import json
import os
import tempfile
from contextlib import suppress
from pathlib import Path
from typing import Any, Dict, Optional

from .interfaces import IScoreStorage

TOTAL_SCORE_KEY = "uyghurTypingTotalScore"


def parse_score(value: Any) -> Optional[int]:
    """
    Interpret a stored value as a score.

    Accepts ints and integer strings ("120", " 40 "); bools, floats with a
    fraction and anything else return None.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return None
    return None


class JsonFileScoreStorage(IScoreStorage):
    """
    Keeps the cumulative score in a small JSON object file.

    Other keys in the file are preserved on save.

    Example:
        storage = JsonFileScoreStorage("~/.letter_rush/score.json", logger)
        storage.load_cumulative_score()   # 0 on first run
        storage.save_cumulative_score(130)
        # file content: {"uyghurTypingTotalScore": 130}
    """

    def __init__(self, path: str, logger, key: str = TOTAL_SCORE_KEY):
        """
        Args:
            path: JSON file location ('~' is expanded)
            logger: ClassLogger instance for logging
            key: Name of the score entry inside the JSON object
        """
        self.path = Path(os.path.expanduser(path))
        self.key = key
        self.logger = logger

    def _read(self) -> Dict[str, Any]:
        """Whole JSON object, {} when missing or malformed"""
        if not self.path.exists():
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            self.logger.warning(f"Could not read score file {self.path}: {e}")
            return {}
        if not isinstance(data, dict):
            self.logger.warning(f"Score file {self.path} does not hold a JSON object, ignoring it")
            return {}
        return data

    def load_cumulative_score(self) -> int:
        data = self._read()
        if self.key not in data:
            self.logger.debug(f"No stored score in {self.path}, starting from 0")
            return 0

        score = parse_score(data[self.key])
        if score is None:
            self.logger.warning(f"Malformed stored score {data[self.key]!r} in {self.path}, using 0")
            return 0
        return score

    def save_cumulative_score(self, score: int) -> None:
        data = self._read()
        data[self.key] = score
        temp_path = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, temp_path = tempfile.mkstemp(dir=str(self.path.parent), suffix=".tmp")
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data, f, ensure_ascii=False)
            os.replace(temp_path, self.path)
            temp_path = None
        except OSError as e:
            # The game keeps running without persistence
            self.logger.error(f"Failed to save score to {self.path}: {e}", exception=e)
        finally:
            if temp_path is not None:
                with suppress(OSError):
                    os.unlink(temp_path)


class MemoryScoreStorage(IScoreStorage):
    """In-memory storage for tests and --no-save runs"""

    def __init__(self, initial: Any = None):
        """
        Args:
            initial: Raw stored value (None = absent), parsed like file content
        """
        self.value: Any = initial
        self.save_count = 0

    def load_cumulative_score(self) -> int:
        if self.value is None:
            return 0
        score = parse_score(self.value)
        return 0 if score is None else score

    def save_cumulative_score(self, score: int) -> None:
        self.value = score
        self.save_count += 1
