"""
Random letter sequence generation
"""

import random
from typing import List, Optional, Sequence


class SequenceGenerator:
    """
    Draws fixed-length letter sequences by independent uniform sampling.

    Repeated letters (adjacent or not) are allowed.

    Example:
        generator = SequenceGenerator(['x', 'y'], rng=random.Random(1))
        generator.generate(3)  # e.g. ['x', 'x', 'y']
    """

    def __init__(self, alphabet: Sequence[str], rng: Optional[random.Random] = None):
        if not alphabet:
            raise ValueError("Alphabet must contain at least one letter")
        self.alphabet: List[str] = list(alphabet)
        self._rng = rng or random.Random()

    def generate(self, length: int) -> List[str]:
        """Draw `length` letters with replacement"""
        return [self._rng.choice(self.alphabet) for _ in range(length)]
