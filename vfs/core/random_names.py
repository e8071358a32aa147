# vfs/core/random_names.py
from __future__ import annotations

import random

ALPHABET = "abcdefghijklmnopqrstuvwxyz0123456789"


class RandomNames:
    """Random lowercase/digit sequences for temp filenames and salts.

    Takes its random source from the caller so tests can seed it.
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng or random.SystemRandom()

    def sequence(self, n: int) -> str:
        return "".join(self._rng.choice(ALPHABET) for _ in range(n))
