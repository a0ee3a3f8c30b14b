"""
KeyEvent - One key press delivered to the game
"""

from dataclasses import dataclass
from typing import List

# Control names
ENTER = "enter"
ESCAPE = "escape"
SPACE = "space"
HELP = "help"
QUIT = "quit"


@dataclass(frozen=True)
class KeyEvent:
    """
    Immutable key press.

    Usage:
        event = KeyEvent(key="ب")          # letter typed
        event = KeyEvent(key="", name=ENTER)
        event.is_control                     # True for Enter/Escape/Space/?/quit
    """
    key: str          # Produced character, compared against the sequence letters
    name: str = ""    # Control name, "" for plain characters

    @property
    def is_control(self) -> bool:
        return bool(self.name)

    def __str__(self) -> str:
        if self.name:
            return f"KeyEvent(<{self.name}>)"
        return f"KeyEvent('{self.key}')"


def from_character(char: str) -> KeyEvent:
    """
    Build a KeyEvent from a single typed character.

    Enter, Escape, Space and '?' become control events; every other
    character is passed through as a plain key.
    """
    if char in ("\r", "\n"):
        return KeyEvent(key=char, name=ENTER)
    if char == "\x1b":
        return KeyEvent(key=char, name=ESCAPE)
    if char == " ":
        return KeyEvent(key=char, name=SPACE)
    if char == "?":
        return KeyEvent(key=char, name=HELP)
    if char == "\x03":  # Ctrl+C in raw mode
        return KeyEvent(key=char, name=QUIT)
    return KeyEvent(key=char)


def _escape_sequence_length(text: str, start: int) -> int:
    """
    Length of the terminal escape sequence beginning at text[start] ('\\x1b').

    Arrow, Home, Delete and function keys arrive as CSI ('\\x1b[' ... final
    byte) or SS3 ('\\x1bO' + one byte) sequences. Returns 1 for a bare Escape.
    """
    if start + 1 >= len(text):
        return 1

    introducer = text[start + 1]
    if introducer == "O":
        return min(3, len(text) - start)
    if introducer != "[":
        return 1

    # CSI: parameter/intermediate bytes up to a final byte in '@'..'~'
    end = start + 2
    while end < len(text):
        if "@" <= text[end] <= "~":
            return end - start + 1
        end += 1
    return len(text) - start  # truncated sequence


def events_from_text(text: str) -> List[KeyEvent]:
    """
    Convert characters read from a raw-mode terminal into KeyEvents.

    Escape sequences of navigation and function keys are dropped whole, so
    only a bare Escape key produces an ESCAPE event.
    """
    events: List[KeyEvent] = []
    i = 0
    while i < len(text):
        if text[i] == "\x1b":
            length = _escape_sequence_length(text, i)
            if length == 1:
                events.append(from_character("\x1b"))
            i += length
            continue
        events.append(from_character(text[i]))
        i += 1
    return events
