"""
Pygame Renderer - Window presentation of the typing game
"""

import math
import os
import random
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Dict, List, Optional, Sequence, Tuple

import pygame

from game_system.alphabet import get_letter_image_path
from game_system.config import LayoutConfig
from game_system.layout import SequenceLayout

from .interfaces import IRenderer

# Colors
BACKGROUND = (18, 24, 38)
TEXT = (240, 240, 240)
ACCENT = (255, 196, 0)
OVERLAY = (0, 0, 0, 170)
PARTICLE = (255, 255, 255)

# Effect timing (ms)
FADE_IN_BASE_MS = 100
FADE_IN_STEP_MS = 100
FADE_IN_DURATION_MS = 300
SHIFT_DURATION_MS = 250
CONSUMED_DURATION_MS = 400
MISSED_DURATION_MS = 1000
BURST_DURATION_MS = 600
SCORE_PULSE_MS = 300

BURST_PARTICLES = 10
WARNING_DIM_ALPHA = 0.3


@dataclass
class LetterSprite:
    """Drawing state of one letter of the sequence"""
    symbol: str
    surface: pygame.Surface
    x: float
    target_x: float
    y: float
    appear_at: float
    alpha: float = 0.0
    scale: float = 1.0
    dimmed: bool = False
    effect: str = ""          # "", "consumed" or "missed"
    effect_start: float = 0.0
    removed: bool = False


@dataclass
class BurstParticle:
    x: float
    y: float
    dx: float
    dy: float
    start: float
    radius: int = field(default=4)


class PygameRenderer(IRenderer):
    """
    Draws the letter row, effects, score HUD and the home/help/end overlays.

    All animation is time based and advanced in present(); requests from the
    session engine only record what should happen.

    Example:
        renderer = PygameRenderer(LayoutConfig(), logger, images_dir="images")
        renderer.setup()
        renderer.render_sequence(['ب', 'پ'], [496.0, 656.0])
        renderer.present()  # once per frame
    """

    def __init__(self, layout: LayoutConfig, logger, images_dir: str = "images",
                 fonts_dir: str = "fonts", clock: Callable[[], float] = time.time):
        """
        Args:
            layout: Play area and letter geometry
            logger: ClassLogger instance for logging
            images_dir: Folder containing letter/<letter>.png and bg/ images
            fonts_dir: Folder searched for a .ttf/.otf font with Uyghur glyphs
            clock: Time source in seconds
        """
        self.layout = layout
        self.sequence_layout = SequenceLayout(layout)
        self.logger = logger
        self.images_dir = images_dir
        self.fonts_dir = fonts_dir
        self._clock = clock

        self.screen: Optional[pygame.Surface] = None
        self.letter_font: Optional[pygame.font.Font] = None
        self.ui_font: Optional[pygame.font.Font] = None
        self._image_cache: Dict[str, pygame.Surface] = {}

        self.sprites: List[LetterSprite] = []
        self.particles: List[BurstParticle] = []

        self.view = "home"
        self.session_score = 0
        self.cumulative_score = 0
        self._score_pulse_start: Optional[float] = None
        self._end_scores: Tuple[int, int] = (0, 0)
        self._help_image: Optional[pygame.Surface] = None

    # --- Lifecycle ---

    def setup(self) -> None:
        """Open the window and load fonts"""
        pygame.init()
        pygame.display.set_caption("Letter Rush")
        try:
            self.screen = pygame.display.set_mode(
                (self.layout.area_width_px, self.layout.area_height_px)
            )
        except pygame.error as e:
            self.logger.error(f"Could not open game window: {e}", exception=e)
            raise RuntimeError("Failed to open game window") from e

        font_path = self._find_font()
        if font_path:
            self.logger.info(f"Using font: {font_path}")
        else:
            self.logger.warning(f"No font found in '{self.fonts_dir}', Uyghur glyphs may not render")
        self.letter_font = pygame.font.Font(font_path, self.layout.item_width_px)
        self.ui_font = pygame.font.Font(font_path, 36)

        help_path = Path(self.images_dir) / "bg" / "utg_helpbox.png"
        if help_path.exists():
            self._help_image = pygame.image.load(str(help_path)).convert_alpha()

        self.logger.info(
            f"Pygame renderer initialized: {self.layout.area_width_px}x{self.layout.area_height_px}"
        )

    def cleanup(self) -> None:
        try:
            self.sprites.clear()
            self.particles.clear()
            self._image_cache.clear()
            pygame.quit()
            self.logger.info("Pygame renderer cleaned up")
        except Exception:
            pass  # Silent fail during cleanup

    def _find_font(self) -> Optional[str]:
        """First .ttf/.otf file in the fonts folder"""
        if not os.path.isdir(self.fonts_dir):
            return None
        for name in sorted(os.listdir(self.fonts_dir)):
            if name.lower().endswith(('.ttf', '.otf')):
                return os.path.join(self.fonts_dir, name)
        return None

    def _letter_surface(self, symbol: str) -> pygame.Surface:
        """Letter image if available, otherwise the font glyph"""
        if symbol in self._image_cache:
            return self._image_cache[symbol]

        surface = None
        image_path = get_letter_image_path(symbol, str(Path(self.images_dir) / "letter"))
        if image_path and os.path.exists(image_path):
            try:
                image = pygame.image.load(image_path).convert_alpha()
                size = self.layout.item_width_px
                surface = pygame.transform.smoothscale(image, (size, size))
            except pygame.error as e:
                self.logger.warning(f"Failed to load letter image {image_path}: {e}")

        if surface is None:
            surface = self.letter_font.render(symbol, True, TEXT)

        self._image_cache[symbol] = surface
        return surface

    # --- Sequence requests ---

    def render_sequence(self, symbols: Sequence[str], positions: List[float]) -> None:
        now = self._clock()
        y = self.sequence_layout.baseline_y() - self.layout.item_width_px / 2
        self.sprites = []
        for i, (symbol, x) in enumerate(zip(symbols, positions)):
            self.sprites.append(LetterSprite(
                symbol=symbol,
                surface=self._letter_surface(symbol),
                x=x,
                target_x=x,
                y=y,
                appear_at=now + (FADE_IN_BASE_MS + i * FADE_IN_STEP_MS) / 1000.0,
            ))

    def request_shift(self, from_position: int) -> None:
        targets = self.sequence_layout.shifted([sprite.target_x for sprite in self.sprites], from_position)
        for sprite, target_x in zip(self.sprites, targets):
            sprite.target_x = target_x

    def request_consumed_effect(self, position: int) -> None:
        sprite = self._sprite_at(position)
        if sprite is None:
            return
        now = self._clock()
        sprite.effect = "consumed"
        sprite.effect_start = now
        sprite.dimmed = False

        center_x = sprite.x + self.layout.item_width_px / 2
        center_y = sprite.y + self.layout.item_width_px / 2
        for _ in range(BURST_PARTICLES):
            angle = random.random() * 2 * math.pi
            radius = random.random() * 40 + 20
            self.particles.append(BurstParticle(
                x=center_x, y=center_y,
                dx=math.cos(angle) * radius, dy=math.sin(angle) * radius,
                start=now,
            ))

    def request_missed_effect(self, position: int) -> None:
        sprite = self._sprite_at(position)
        if sprite is None:
            return
        sprite.effect = "missed"
        sprite.effect_start = self._clock()
        sprite.dimmed = False

    def request_warning(self, position: int, on: bool) -> None:
        sprite = self._sprite_at(position)
        if sprite is not None and not sprite.effect:
            sprite.dimmed = on

    def _sprite_at(self, position: int) -> Optional[LetterSprite]:
        if 0 <= position < len(self.sprites):
            return self.sprites[position]
        return None

    # --- Screens ---

    def show_home(self, cumulative_score: int) -> None:
        self.view = "home"
        self.cumulative_score = cumulative_score

    def show_help(self) -> None:
        self.view = "help"

    def show_game(self) -> None:
        self.view = "game"

    def show_end_screen(self, session_score: int, cumulative_score: int) -> None:
        self.view = "end"
        self._end_scores = (session_score, cumulative_score)

    def update_score(self, session_score: int, cumulative_score: int, animate: bool = False) -> None:
        self.session_score = session_score
        self.cumulative_score = cumulative_score
        if animate:
            self._score_pulse_start = self._clock()

    def clear_sequence(self) -> None:
        self.sprites.clear()
        self.particles.clear()

    # --- Frame drawing ---

    def present(self) -> None:
        if self.screen is None:
            return
        now = self._clock()
        self.screen.fill(BACKGROUND)

        if self.view in ("game", "end"):
            self._draw_sprites(now)
            self._draw_particles(now)

        if self.view == "game":
            self._draw_score(f"Score: {self.session_score}", now)
        elif self.view == "home":
            self._draw_home()
        elif self.view == "help":
            self._draw_home()
            self._draw_help()
        elif self.view == "end":
            self._draw_end_screen()

        pygame.display.flip()

    def _draw_sprites(self, now: float) -> None:
        step = self.sequence_layout.spacing * (1000.0 / SHIFT_DURATION_MS) / 50  # px per frame at 50 FPS
        for sprite in self.sprites:
            if sprite.removed:
                continue

            # Slide toward target position
            if sprite.x != sprite.target_x:
                delta = sprite.target_x - sprite.x
                sprite.x += max(-step, min(step, delta))

            alpha = min(1.0, max(0.0, (now - sprite.appear_at) * 1000 / FADE_IN_DURATION_MS))
            scale = 1.0
            y = sprite.y

            if sprite.effect == "consumed":
                progress = (now - sprite.effect_start) * 1000 / CONSUMED_DURATION_MS
                if progress >= 1.0:
                    sprite.removed = True
                    continue
                scale = 1.0 + 0.4 * progress
                alpha = 1.0 - progress
            elif sprite.effect == "missed":
                progress = (now - sprite.effect_start) * 1000 / MISSED_DURATION_MS
                if progress >= 1.0:
                    sprite.removed = True
                    continue
                y = sprite.y + (self.layout.area_height_px + 150 - sprite.y) * progress
                alpha = 1.0 - progress
            elif sprite.dimmed:
                alpha = min(alpha, WARNING_DIM_ALPHA)

            surface = sprite.surface
            if scale != 1.0:
                width = int(surface.get_width() * scale)
                height = int(surface.get_height() * scale)
                surface = pygame.transform.smoothscale(surface, (width, height))
            surface = surface.copy()
            surface.set_alpha(int(255 * alpha))

            offset = (surface.get_width() - sprite.surface.get_width()) / 2
            self.screen.blit(surface, (sprite.x - offset, y - offset))

    def _draw_particles(self, now: float) -> None:
        alive = []
        for particle in self.particles:
            progress = (now - particle.start) * 1000 / BURST_DURATION_MS
            if progress >= 1.0:
                continue
            eased = 1 - (1 - progress) ** 2  # ease-out
            x = particle.x + particle.dx * eased
            y = particle.y + particle.dy * eased
            dot = pygame.Surface((particle.radius * 2, particle.radius * 2), pygame.SRCALPHA)
            pygame.draw.circle(dot, PARTICLE + (int(255 * (1 - progress)),),
                               (particle.radius, particle.radius), particle.radius)
            self.screen.blit(dot, (x - particle.radius, y - particle.radius))
            alive.append(particle)
        self.particles = alive

    def _draw_text(self, text: str, center: Tuple[float, float], color=TEXT,
                   scale: float = 1.0) -> None:
        surface = self.ui_font.render(text, True, color)
        if scale != 1.0:
            surface = pygame.transform.smoothscale(
                surface, (int(surface.get_width() * scale), int(surface.get_height() * scale))
            )
        rect = surface.get_rect(center=(int(center[0]), int(center[1])))
        self.screen.blit(surface, rect)

    def _draw_score(self, text: str, now: float) -> None:
        scale = 1.0
        color = TEXT
        if self._score_pulse_start is not None:
            progress = (now - self._score_pulse_start) * 1000 / SCORE_PULSE_MS
            if progress >= 1.0:
                self._score_pulse_start = None
            else:
                scale = 1.2 - 0.2 * progress
                color = ACCENT
        self._draw_text(text, (self.layout.area_width_px / 2, 40), color, scale)

    def _draw_overlay(self) -> None:
        overlay = pygame.Surface(self.screen.get_size(), pygame.SRCALPHA)
        overlay.fill(OVERLAY)
        self.screen.blit(overlay, (0, 0))

    def _draw_home(self) -> None:
        center_x = self.layout.area_width_px / 2
        center_y = self.layout.area_height_px / 2
        self._draw_text("Letter Rush", (center_x, center_y - 80), ACCENT, 1.5)
        self._draw_text(f"Total score: {self.cumulative_score}", (center_x, center_y))
        self._draw_text("Enter: start    ?: help    Esc: quit", (center_x, center_y + 80))

    def _draw_help(self) -> None:
        self._draw_overlay()
        center_x = self.layout.area_width_px / 2
        if self._help_image is not None:
            rect = self._help_image.get_rect(center=(int(center_x), int(self.layout.area_height_px / 2) - 40))
            self.screen.blit(self._help_image, rect)
        else:
            self._draw_text("Type each letter before it falls", (center_x, self.layout.area_height_px / 2 - 40))
        self._draw_text("Enter: start    Esc: close", (center_x, self.layout.area_height_px - 60), ACCENT)

    def _draw_end_screen(self) -> None:
        self._draw_overlay()
        session_score, cumulative_score = self._end_scores
        center_x = self.layout.area_width_px / 2
        center_y = self.layout.area_height_px / 2
        self._draw_text("Well done!", (center_x, center_y - 90), ACCENT, 1.5)
        self._draw_text(f"Score: {session_score}", (center_x, center_y - 10))
        self._draw_text(f"Total score: {cumulative_score}", (center_x, center_y + 40))
        self._draw_text("Enter: back to home", (center_x, center_y + 110))
