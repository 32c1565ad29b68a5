"""
Random number generation utilities.

The engine never touches a global generator directly: every component takes
a random source as a dependency. A random source is any object with a
``random()`` method returning a float in [0, 1), so ``AleaPRNG``,
``random.Random`` and scripted test doubles are all interchangeable.
When no source is injected, the shared Alea instance from this module is used.
"""

from typing import Optional, Protocol, Sequence, TypeVar

from .alea_prng import AleaPRNG

T = TypeVar("T")

# Global PRNG instance
_prng = None


class RandomSource(Protocol):
    """Anything that yields uniform floats in [0, 1)."""

    def random(self) -> float: ...


def set_random_seed(seed: str) -> None:
    """
    Reseed the shared Alea PRNG.

    Args:
        seed: Seed string to use
    """
    global _prng
    _prng = AleaPRNG(seed)


def get_prng() -> AleaPRNG:
    """
    Get the shared Alea PRNG instance, creating it on first use.

    Returns:
        AleaPRNG instance
    """
    global _prng
    if _prng is None:
        _prng = AleaPRNG("default")
    return _prng


def resolve_prng(prng: Optional[RandomSource]) -> RandomSource:
    """Return ``prng`` if given, otherwise the shared instance."""
    return prng if prng is not None else get_prng()


def random_int(prng: RandomSource, low: int, high: int) -> int:
    """
    Uniform integer in the closed range [low, high].

    Args:
        prng: Random source
        low: Smallest value that may be returned
        high: Largest value that may be returned
    """
    if high < low:
        raise ValueError(f"Empty range: [{low}, {high}]")
    value = low + int(prng.random() * (high - low + 1))
    # guards against sources that can return exactly 1.0
    return min(value, high)


def random_choice(prng: RandomSource, seq: Sequence[T]) -> T:
    """Uniformly pick one element of a non-empty sequence."""
    if not seq:
        raise IndexError("Cannot choose from an empty sequence")
    return seq[random_int(prng, 0, len(seq) - 1)]
