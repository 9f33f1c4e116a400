"""
Short code generation strategies for URL shortener.
Uses Strategy Pattern so the store never depends on a concrete generator.
"""

import string
import random
from abc import ABC, abstractmethod
from typing import Optional


class ShortCodeStrategy(ABC):
    """Abstract base class for short code generation strategies"""

    characters = string.ascii_letters + string.digits

    def __init__(self, length: int = 6):
        if not isinstance(length, int) or isinstance(length, bool) or length < 1:
            raise ValueError(f"Short code length must be a positive integer (given: {length!r})")
        self.length = length

    @abstractmethod
    def generate(self) -> str:
        """
        Generate a candidate short code.

        Strategies know nothing about codes already in use;
        collision checking belongs to the store.

        Returns:
            A code of exactly `self.length` alphabet characters
        """
        pass

    def is_valid(self, code: str) -> bool:
        """Check that a code has the configured length and only alphabet characters"""
        return (
            isinstance(code, str)
            and len(code) == self.length
            and all(char in self.characters for char in code)
        )


class RandomShortCodeStrategy(ShortCodeStrategy):
    """
    Random generation strategy.
    Each character is drawn uniformly from the 62-symbol alphabet.

    Pros: Simple, unpredictable, no coordination needed
    Cons: Collision risk grows with the number of stored codes

    The random source is injectable so tests can make
    generation deterministic.
    """

    def __init__(self, length: int = 6, rng: Optional[random.Random] = None):
        super().__init__(length)
        self.rng = rng or random.Random()

    def generate(self) -> str:
        """Generate random short code"""
        return ''.join(self.rng.choice(self.characters) for _ in range(self.length))
