"""
Game system configuration
"""

from dataclasses import dataclass, field
from typing import List

from .alphabet import UYGHUR_LETTERS


@dataclass
class SessionConfig:
    """Rules of one play session"""
    sequence_length: int = 7
    advance_limit: int = 7          # Session ends once this many letters are consumed
    warning_delay_ms: int = 7000    # Letter starts blinking
    expiry_delay_ms: int = 10000    # Letter falls off, counted as missed
    points_per_match: int = 10
    warning_blink_ms: int = 250
    alphabet: List[str] = field(default_factory=lambda: list(UYGHUR_LETTERS))

    def validate(self) -> None:
        """Basic validation of session rules"""
        if self.sequence_length < 1:
            raise ValueError(f"Sequence length must be positive, got {self.sequence_length}")

        if not (1 <= self.advance_limit <= self.sequence_length):
            raise ValueError(
                f"Advance limit must be between 1 and sequence length ({self.sequence_length}), "
                f"got {self.advance_limit}"
            )

        if self.warning_delay_ms <= 0:
            raise ValueError(f"Warning delay must be positive, got {self.warning_delay_ms}")

        if self.expiry_delay_ms <= self.warning_delay_ms:
            raise ValueError(
                f"Expiry delay ({self.expiry_delay_ms}ms) must be longer than "
                f"warning delay ({self.warning_delay_ms}ms)"
            )

        if self.warning_blink_ms <= 0:
            raise ValueError(f"Warning blink interval must be positive, got {self.warning_blink_ms}")

        if self.points_per_match < 0:
            raise ValueError(f"Points per match must not be negative, got {self.points_per_match}")

        if not self.alphabet:
            raise ValueError("Alphabet must contain at least one letter")


@dataclass
class LayoutConfig:
    """Letter placement on the play area (pixels)"""
    spacing_px: int = 160
    item_width_px: int = 128
    area_width_px: int = 1280
    area_height_px: int = 720

    def validate(self) -> None:
        if self.spacing_px <= 0:
            raise ValueError(f"Spacing must be positive, got {self.spacing_px}")
        if self.item_width_px <= 0:
            raise ValueError(f"Item width must be positive, got {self.item_width_px}")
        if self.area_width_px <= 0 or self.area_height_px <= 0:
            raise ValueError(
                f"Play area must be positive, got {self.area_width_px}x{self.area_height_px}"
            )


@dataclass
class GameConfig:
    """Main game configuration"""

    session: SessionConfig = field(default_factory=SessionConfig)
    layout: LayoutConfig = field(default_factory=LayoutConfig)

    # Timing configuration
    frame_duration_ms: int = 20  # 50 FPS

    # Persistence
    score_file: str = "~/.letter_rush/score.json"
    persist_scores: bool = True

    # Presentation
    renderer: str = "pygame"  # "pygame" or "console"
    images_dir: str = "images"
    fonts_dir: str = "fonts"

    log_dir: str = "logs"

    @property
    def target_fps(self) -> float:
        """Target FPS derived from frame duration"""
        return 1000.0 / self.frame_duration_ms

    def validate(self) -> None:
        """Validate the whole configuration tree"""
        self.session.validate()
        self.layout.validate()

        if self.frame_duration_ms <= 0:
            raise ValueError("Frame duration must be positive")

        if self.renderer not in ("pygame", "console"):
            raise ValueError(f"Unknown renderer '{self.renderer}' (expected 'pygame' or 'console')")
