"""
Mock Renderer - Records requests instead of drawing
"""

from typing import Any, List, Sequence, Tuple

from .interfaces import IRenderer


class MockRenderer(IRenderer):
    """
    No-op renderer that keeps a log of every request.

    Used by tests and for running the game logic without any display.

    Example:
        renderer = MockRenderer()
        engine = SessionEngine(config, ledger, renderer, scheduler, logger)
        engine.start()
        renderer.calls_named("render_sequence")  # [(['ب', ...], [80.0, ...])]
    """

    def __init__(self, logger=None):
        self.logger = logger
        self.calls: List[Tuple[str, Tuple[Any, ...]]] = []
        self.frames_presented = 0
        self.screen = "none"

    def _record(self, name: str, *args: Any) -> None:
        self.calls.append((name, args))
        if self.logger:
            self.logger.debug(f"Mock: {name}{args}")

    def calls_named(self, name: str) -> List[Tuple[Any, ...]]:
        """Arguments of every recorded call with the given method name"""
        return [args for call_name, args in self.calls if call_name == name]

    def clear(self) -> None:
        self.calls.clear()

    def render_sequence(self, symbols: Sequence[str], positions: List[float]) -> None:
        self._record("render_sequence", list(symbols), list(positions))

    def request_shift(self, from_position: int) -> None:
        self._record("request_shift", from_position)

    def request_consumed_effect(self, position: int) -> None:
        self._record("request_consumed_effect", position)

    def request_missed_effect(self, position: int) -> None:
        self._record("request_missed_effect", position)

    def request_warning(self, position: int, on: bool) -> None:
        self._record("request_warning", position, on)

    def show_home(self, cumulative_score: int) -> None:
        self.screen = "home"
        self._record("show_home", cumulative_score)

    def show_help(self) -> None:
        self.screen = "help"
        self._record("show_help")

    def show_game(self) -> None:
        self.screen = "game"
        self._record("show_game")

    def show_end_screen(self, session_score: int, cumulative_score: int) -> None:
        self.screen = "end"
        self._record("show_end_screen", session_score, cumulative_score)

    def update_score(self, session_score: int, cumulative_score: int, animate: bool = False) -> None:
        self._record("update_score", session_score, cumulative_score, animate)

    def clear_sequence(self) -> None:
        self._record("clear_sequence")

    def setup(self) -> None:
        self._record("setup")

    def present(self) -> None:
        self.frames_presented += 1

    def cleanup(self) -> None:
        self._record("cleanup")
