"""
Terminal key source for playing without a window
"""

import select
import sys
import termios
import tty
from typing import List

from .interfaces import IKeySource
from .key_event import KeyEvent, events_from_text


class TerminalKeySource(IKeySource):
    """
    Raw-mode stdin reader.

    Works over SSH using stdin (non-blocking select). Each typed character
    becomes one KeyEvent, while arrow and function key escape sequences are
    dropped. Switch the terminal to a Uyghur keyboard layout to type the
    letters.

    Example:
        keys = TerminalKeySource(logger)
        keys.setup()
        for event in keys.poll():
            ...
        keys.cleanup()  # restores the terminal
    """

    def __init__(self, logger, stream=None):
        """
        Args:
            logger: ClassLogger instance for logging
            stream: Text stream to read, defaults to sys.stdin
        """
        self._logger = logger
        self._stream = stream if stream is not None else sys.stdin
        self._stdin_available = False
        self._original_terminal_settings = None
        self._raw_mode_enabled = False

    def _check_stdin_available(self) -> bool:
        """Check if stdin is an interactive terminal"""
        try:
            if not self._stream.isatty():
                return False
            select.select([self._stream], [], [], 0)
            return True
        except (OSError, ValueError):
            return False

    def _enable_raw_mode(self) -> bool:
        """
        Enable raw terminal mode for immediate key capture.

        Returns:
            True if raw mode enabled successfully, False otherwise
        """
        try:
            self._original_terminal_settings = termios.tcgetattr(self._stream)
            tty.setraw(self._stream.fileno())
            self._raw_mode_enabled = True
            return True
        except (termios.error, OSError) as e:
            self._logger.warning(f"Could not enable raw terminal mode: {e}")
            return False

    def _disable_raw_mode(self) -> None:
        """Restore original terminal settings"""
        try:
            if self._raw_mode_enabled and self._original_terminal_settings:
                termios.tcsetattr(
                    self._stream.fileno(),
                    termios.TCSADRAIN,
                    self._original_terminal_settings
                )
                self._raw_mode_enabled = False
        except Exception:
            pass  # Silent fail during cleanup

    def setup(self) -> None:
        """Initialize keyboard input"""
        self._stdin_available = self._check_stdin_available()

        if not self._stdin_available:
            self._logger.error("Keyboard input not available (stdin not accessible or not a TTY)")
            raise RuntimeError("Keyboard input not available")

        if not self._enable_raw_mode():
            self._logger.error("Could not enable raw terminal mode")
            raise RuntimeError("Failed to enable raw terminal mode")

        self._logger.info("Terminal key source initialized (raw mode)")

    def poll(self) -> List[KeyEvent]:
        """Read every character waiting on stdin"""
        events: List[KeyEvent] = []
        if not self._stdin_available:
            return events

        # Read everything waiting so escape sequences are parsed whole
        chars = []
        try:
            while select.select([self._stream], [], [], 0) == ([self._stream], [], []):
                char = self._stream.read(1)
                if not char:
                    break
                chars.append(char)
        except (OSError, ValueError) as e:
            # Keep the frame loop running
            self._logger.warning(f"Keyboard input error: {e}")

        for event in events_from_text("".join(chars)):
            self._logger.debug(f"Key: {event}")
            events.append(event)
        return events

    def cleanup(self) -> None:
        """Restore the terminal"""
        try:
            self._disable_raw_mode()
            self._stdin_available = False
            if self._logger:
                self._logger.info("Terminal key source cleaned up")
        except Exception:
            pass  # Silent fail during cleanup

    def __del__(self):
        """Automatic cleanup when object is destroyed"""
        self.cleanup()
