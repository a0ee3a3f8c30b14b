"""
Uyghur letters used as practice symbols and their image assets
"""

from pathlib import Path
from typing import Dict, Optional

IMAGE_BASE_PATH = "images/letter"

UYGHUR_LETTERS = (
    'ب', 'پ', 'ت', 'ج', 'چ', 'خ', 'د', 'ر', 'ز', 'ژ', 'س', 'ش',
    'غ', 'ف', 'ق', 'ك', 'گ', 'ڭ', 'م', 'ن', 'ھ', 'ي', 'ا',
    'و', 'ۇ', 'ۆ', 'ۈ', 'ې', 'ى', 'ۋ',
    # 'ە' has no image asset yet
)

LETTER_IMAGES: Dict[str, str] = {letter: f"{letter}.png" for letter in UYGHUR_LETTERS}


def get_letter_image_path(letter: str, base_path: str = IMAGE_BASE_PATH) -> Optional[str]:
    """
    Get the image path for a letter.

    Args:
        letter: Letter character
        base_path: Directory holding the letter images

    Returns:
        Path to the letter's image file, or None for letters outside the alphabet
    """
    filename = LETTER_IMAGES.get(letter)
    if filename is None:
        return None
    return str(Path(base_path) / filename)
