"""
Sources of randomness for decks.

A deck never touches the global ``random`` module. Each deck holds a
``RandomSource`` which only has to pick a uniform integer in ``[0, upper]`` and
apply a uniform permutation to a mutable sequence. Tests inject a seeded or
scripted source to make shuffles and sparse insertion reproducible.
"""

import random
from typing import MutableSequence, Protocol, runtime_checkable

import numpy as np


@runtime_checkable
class RandomSource(Protocol):
    def pick(self, upper: int) -> int:
        """Return a uniformly random integer in ``[0, upper]``."""
        ...

    def shuffle(self, items: MutableSequence) -> None:
        """Permute ``items`` in place, every permutation equally likely."""
        ...


def _check_upper(upper: int) -> None:
    if upper < 0:
        raise ValueError(f"Upper bound must be non-negative, got {upper}")


class StdlibRandomSource:
    """
    Random source backed by a private ``random.Random`` instance.

    ``random.Random.shuffle`` is a Fisher-Yates shuffle, so every permutation
    is equally likely.
    """

    def __init__(self, seed: int | None = None):
        self.seed = seed
        self._rng = random.Random(seed)

    def pick(self, upper: int) -> int:
        _check_upper(upper)
        return self._rng.randint(0, upper)

    def shuffle(self, items: MutableSequence) -> None:
        self._rng.shuffle(items)

    def __repr__(self) -> str:
        return f"StdlibRandomSource(seed={self.seed!r})"


class NumpyRandomSource:
    """Random source backed by a ``numpy.random.Generator`` (PCG64)."""

    def __init__(self, seed: int | None = None):
        self.seed = seed
        self._rng = np.random.default_rng(seed)

    def pick(self, upper: int) -> int:
        _check_upper(upper)
        return int(self._rng.integers(0, upper, endpoint=True))

    def shuffle(self, items: MutableSequence) -> None:
        permuted = [items[int(i)] for i in self._rng.permutation(len(items))]
        for i, x in enumerate(permuted):
            items[i] = x

    def __repr__(self) -> str:
        return f"NumpyRandomSource(seed={self.seed!r})"
