"""
Render System Package

Presentation of the typing game behind a single IRenderer interface.

PygameRenderer is not imported here so that the game logic and the tests
can load this package without initialising pygame; import it from
render_system.pygame_renderer.
"""

from .interfaces import IRenderer
from .console_renderer import ConsoleRenderer
from .mock_renderer import MockRenderer

__all__ = [
    "IRenderer",
    "ConsoleRenderer",
    "MockRenderer"
]
