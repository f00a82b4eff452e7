"""
Alias generation for URLs saved without a caller-chosen alias.
"""

import random
import string
from abc import ABC, abstractmethod
from typing import Optional


class AliasGenerator(ABC):
    """Abstract base class for alias generators"""

    @abstractmethod
    def generate(self) -> str:
        """
        Generate an alias.

        Uniqueness is not guaranteed here; the store rejects duplicates and
        the caller regenerates.
        """
        pass


class RandomAliasGenerator(AliasGenerator):
    """
    Fixed-length random alias from a fixed alphabet.

    Uses a non-cryptographic PRNG: aliases only need to be spread out, not
    unguessable. With the default 62-char alphabet and length 6 there are
    ~5.7e10 aliases, so collisions stay rare at expected table sizes.
    """

    def __init__(
        self,
        length: int = 6,
        alphabet: str = string.ascii_letters + string.digits,
        seed: Optional[int] = None,
    ):
        if length < 1:
            raise ValueError("length must be at least 1")
        if not alphabet:
            raise ValueError("alphabet must not be empty")
        self.length = length
        self.alphabet = alphabet
        self._random = random.Random(seed)

    def generate(self) -> str:
        return "".join(self._random.choices(self.alphabet, k=self.length))
