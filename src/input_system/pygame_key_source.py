"""
Pygame key source - key presses from the game window
"""

from typing import Callable, Iterable, List, Optional

import pygame

from .interfaces import IKeySource
from .key_event import ENTER, ESCAPE, HELP, QUIT, SPACE, KeyEvent

CONTROL_KEYS = {
    pygame.K_RETURN: ENTER,
    pygame.K_KP_ENTER: ENTER,
    pygame.K_ESCAPE: ESCAPE,
    pygame.K_SPACE: SPACE,
    pygame.K_F1: HELP,
}


class PygameKeySource(IKeySource):
    """
    Translates pygame KEYDOWN and QUIT events into KeyEvents.

    The key identity is the produced character (event.unicode), so the
    operating system's Uyghur keyboard layout decides which letter a key
    types.

    Example:
        keys = PygameKeySource(logger)
        keys.setup()          # after the renderer opened the window
        events = keys.poll()  # once per frame
    """

    def __init__(self, logger, event_getter: Optional[Callable[[], Iterable]] = None):
        """
        Args:
            logger: ClassLogger instance for logging
            event_getter: Source of pygame events, defaults to pygame.event.get
        """
        self._logger = logger
        self._event_getter = event_getter or pygame.event.get

    def setup(self) -> None:
        self._logger.info("Pygame key source initialized")

    def translate(self, event) -> Optional[KeyEvent]:
        """Convert one pygame event, None for events the game ignores"""
        if event.type == pygame.QUIT:
            return KeyEvent(key="", name=QUIT)

        if event.type != pygame.KEYDOWN:
            return None

        name = CONTROL_KEYS.get(event.key)
        char = getattr(event, "unicode", "") or ""
        if name is None and char == "?":
            name = HELP
        if name:
            return KeyEvent(key=char, name=name)
        if not char:
            return None  # modifier or dead key
        return KeyEvent(key=char)

    def poll(self) -> List[KeyEvent]:
        events: List[KeyEvent] = []
        for raw_event in self._event_getter():
            event = self.translate(raw_event)
            if event is not None:
                self._logger.debug(f"Key: {event}")
                events.append(event)
        return events

    def cleanup(self) -> None:
        if self._logger:
            self._logger.info("Pygame key source cleaned up")
