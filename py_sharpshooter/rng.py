"""Seeded pseudo-random source and seed derivation.

Every stochastic computation of the library (dispersion, shotgun pellets, wind
gusts) builds its own ``Mulberry32`` instance from an explicit seed, so a shot
can be replayed bit for bit and independent shots can run on separate threads
without sharing generator state.

Classes:
    Mulberry32: 32-bit state PRNG returning floats in [0, 1)

Functions:
    string_hash: DJB2 hash of free-text seeds (e.g. daily challenge ids)
    combine_seed: Derive a per-shot / per-pellet seed from a base seed
    to_seed: Normalize an int or str seed to an unsigned 32-bit integer

Examples:
    >>> rng = Mulberry32(42)
    >>> 0.0 <= rng.next() < 1.0
    True
    >>> string_hash("daily-2026-10-18") == string_hash("daily-2026-10-18")
    True
"""
from typing_extensions import Union

from py_sharpshooter.constants import (
    cDjb2Initial,
    cMulberryIncrement,
    cSeedMultiplier,
    cUint32Mask,
)

__all__ = (
    'Mulberry32',
    'SeedT',
    'string_hash',
    'combine_seed',
    'to_seed',
)

SeedT = Union[int, str]

_UINT32_RANGE = 4294967296.0


def _imul(a: int, b: int) -> int:
    """Low 32 bits of the product of two 32-bit integers."""
    return (a * b) & cUint32Mask


class Mulberry32:
    """Mulberry32 generator.

    The state is a single unsigned 32-bit integer. Each draw advances the state
    by a fixed odd increment and mixes it with two xorshift/multiply rounds.

    Attributes:
        state: Current unsigned 32-bit state.
    """

    __slots__ = ('state',)

    def __init__(self, seed: int):
        self.state: int = int(seed) & cUint32Mask

    def next(self) -> float:
        """Return the next float in [0, 1)."""
        self.state = (self.state + cMulberryIncrement) & cUint32Mask
        a = self.state
        t = _imul(a ^ (a >> 15), a | 1)
        t = ((t + _imul(t ^ (t >> 7), t | 61)) & cUint32Mask) ^ t
        return ((t ^ (t >> 14)) & cUint32Mask) / _UINT32_RANGE

    def uniform(self, low: float, high: float) -> float:
        """Return a float in [low, high)."""
        return low + self.next() * (high - low)

    def symmetric(self, spread: float) -> float:
        """Return a float in [-spread, spread)."""
        return (self.next() * 2.0 - 1.0) * spread


def string_hash(text: str) -> int:
    """Hash a string to an unsigned 32-bit integer (DJB2, ``h * 33 + c``).

    Characters are consumed as UTF-16 code units so that seeds typed in a
    browser hash to the same value.
    """
    data = text.encode('utf-16-le', 'surrogatepass')
    h = cDjb2Initial
    for i in range(0, len(data), 2):
        h = (h * 33 + (data[i] | (data[i + 1] << 8))) & cUint32Mask
    return h


def combine_seed(base_seed: int, index: int, stride: int = 1) -> int:
    """Derive a distinct seed for the ``index``-th shot, segment or pellet.

    Args:
        base_seed: Seed of the level, challenge or shot.
        index: Zero-based shot or pellet number.
        stride: Multiplier applied to ``index`` before mixing.

    Returns:
        Unsigned 32-bit seed.
    """
    return (int(base_seed) * cSeedMultiplier + int(index) * stride) & cUint32Mask


def to_seed(seed: SeedT) -> int:
    """Normalize a numeric or free-text seed to an unsigned 32-bit integer."""
    if isinstance(seed, str):
        return string_hash(seed)
    return int(seed) & cUint32Mask
