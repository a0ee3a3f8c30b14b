"""
Console Renderer - Headless presentation through the class logger
"""

from typing import List, Optional, Sequence

from .interfaces import IRenderer


class ConsoleRenderer(IRenderer):
    """
    Renders the game as log lines, for playing in a terminal without a window.

    Pairs with TerminalKeySource. Letters still waiting are shown in brackets,
    consumed ones as '+', missed ones as '-'.

    Example:
        [INFO] [ConsoleRenderer] Sequence: [ب] [پ] [ت] ...
        [INFO] [ConsoleRenderer] + [پ] [ت] ...   (score 10)
    """

    def __init__(self, logger):
        """
        Args:
            logger: ClassLogger instance for output
        """
        self.logger = logger
        self._symbols: List[str] = []
        self._marks: List[str] = []
        self._warning_position: Optional[int] = None

    def _row(self) -> str:
        cells = []
        for i, symbol in enumerate(self._symbols):
            mark = self._marks[i]
            if mark:
                cells.append(mark)
            elif i == self._warning_position:
                cells.append(f"!{symbol}!")
            else:
                cells.append(f"[{symbol}]")
        return " ".join(cells)

    def render_sequence(self, symbols: Sequence[str], positions: List[float]) -> None:
        self._symbols = list(symbols)
        self._marks = [""] * len(self._symbols)
        self._warning_position = None
        self.logger.info(f"Sequence: {self._row()}")

    def request_shift(self, from_position: int) -> None:
        self.logger.debug(f"Shift from position {from_position}")
        self.logger.info(self._row())

    def request_consumed_effect(self, position: int) -> None:
        if 0 <= position < len(self._marks):
            self._marks[position] = "+"
        self._warning_position = None

    def request_missed_effect(self, position: int) -> None:
        if 0 <= position < len(self._marks):
            self._marks[position] = "-"
        self._warning_position = None
        self.logger.info(f"Missed letter {position + 1}")

    def request_warning(self, position: int, on: bool) -> None:
        # Only the first blink is worth a line in a terminal
        if self._warning_position != position:
            self._warning_position = position
            self.logger.warning(f"Hurry! {self._row()}")

    def show_home(self, cumulative_score: int) -> None:
        self.logger.info(f"=== Letter Rush === Total score: {cumulative_score}")
        self.logger.info("Press Enter to start, Escape to quit")

    def show_help(self) -> None:
        self.logger.info("Type each letter on your Uyghur keyboard layout before it falls")
        self.logger.info("Press Enter to play, Escape to go back")

    def show_game(self) -> None:
        self.logger.info("Game started - Escape returns home")

    def show_end_screen(self, session_score: int, cumulative_score: int) -> None:
        self.logger.info(f"Well done! Score: {session_score} | Total score: {cumulative_score}")
        self.logger.info("Press Enter to return home")

    def update_score(self, session_score: int, cumulative_score: int, animate: bool = False) -> None:
        if animate:
            self.logger.info(f"Score: {session_score}")

    def clear_sequence(self) -> None:
        self._symbols = []
        self._marks = []
        self._warning_position = None

    def setup(self) -> None:
        self.logger.info("Console renderer ready")

    def present(self) -> None:
        pass

    def cleanup(self) -> None:
        self.logger.debug("Console renderer cleaned up")
