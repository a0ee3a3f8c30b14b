"""
Input System Package

Key press sources for the typing game: the pygame window and a raw-mode
terminal. PygameKeySource lives in input_system.pygame_key_source and is
not imported here so the package loads without pygame.
"""

from .key_event import KeyEvent, from_character, events_from_text, ENTER, ESCAPE, SPACE, HELP, QUIT
from .interfaces import IKeySource
from .terminal_key_source import TerminalKeySource

__all__ = [
    "KeyEvent",
    "from_character",
    "events_from_text",
    "ENTER",
    "ESCAPE",
    "SPACE",
    "HELP",
    "QUIT",
    "IKeySource",
    "TerminalKeySource"
]
