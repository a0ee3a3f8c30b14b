"""
Horizontal placement of the sequence on the play area
"""

from typing import List

from .config import LayoutConfig


class SequenceLayout:
    """
    Centres a row of letters and computes shift offsets.

    Example:
        layout = SequenceLayout(LayoutConfig(area_width_px=1280))
        layout.initial_positions(7)  # [96.0, 256.0, ..., 1056.0]
    """

    def __init__(self, config: LayoutConfig):
        self.config = config

    @property
    def spacing(self) -> int:
        return self.config.spacing_px

    def row_width(self, count: int) -> float:
        """Width occupied by `count` letters"""
        if count <= 0:
            return 0.0
        return (count - 1) * self.config.spacing_px + self.config.item_width_px

    def initial_positions(self, count: int) -> List[float]:
        """Left edge of each letter, row centred on the play area"""
        start_x = (self.config.area_width_px - self.row_width(count)) / 2
        return [start_x + self.config.spacing_px * i for i in range(count)]

    def shifted(self, positions: List[float], from_position: int) -> List[float]:
        """Move every letter from `from_position` onward one spacing unit to the left"""
        return [
            x - self.config.spacing_px if i >= from_position else x
            for i, x in enumerate(positions)
        ]

    def baseline_y(self) -> float:
        return self.config.area_height_px / 2
