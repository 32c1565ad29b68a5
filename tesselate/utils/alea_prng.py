"""
Alea pseudo-random number generator.

Based on Johannes Baagøe's Alea algorithm. Used as the default random source
for dice rolls and layout selection, so that a game can be replayed from a
seed string.
"""

TWO_POW_32 = 0x100000000
TWO_POW_NEG_32 = 2.3283064365386963e-10


def _uint32(n):
    """Convert to unsigned 32-bit integer."""
    return int(n) & 0xFFFFFFFF


class _Mash:
    """Hash that turns arbitrary seed values into floats in [0, 1)."""

    def __init__(self):
        self.n = 0xEFC8249D

    def __call__(self, data):
        for char in str(data):
            self.n += ord(char)
            h = 0.02519603282416938 * self.n
            self.n = _uint32(h)
            h -= self.n
            h *= self.n
            self.n = _uint32(h)
            h -= self.n
            self.n += h * TWO_POW_32
        return _uint32(self.n) * TWO_POW_NEG_32


class AleaPRNG:
    """
    Seedable Alea generator.

    Only ``random()`` is required by the game engine; ``choice`` is a
    convenience built on top of it.
    """

    def __init__(self, seed="tesselate"):
        """Initialize with a seed string, number, or iterable of either."""
        self.call_count = 0

        if hasattr(seed, "__iter__") and not isinstance(seed, str):
            parts = list(seed)
        else:
            parts = [seed]

        mash = _Mash()
        self.s0 = mash(" ")
        self.s1 = mash(" ")
        self.s2 = mash(" ")
        self.c = 1

        for part in parts:
            self.s0 = self._wrap(self.s0 - mash(part))
            self.s1 = self._wrap(self.s1 - mash(part))
            self.s2 = self._wrap(self.s2 - mash(part))

    @staticmethod
    def _wrap(value):
        return value + 1 if value < 0 else value

    def random(self):
        """Generate next random number in [0, 1)."""
        self.call_count += 1
        t = 2091639 * self.s0 + self.c * TWO_POW_NEG_32
        self.s0 = self.s1
        self.s1 = self.s2
        self.c = int(t)
        self.s2 = t - self.c
        return self.s2

    def choice(self, seq):
        """Choose a random element from a non-empty sequence."""
        if not seq:
            raise IndexError("Cannot choose from an empty sequence")
        return seq[int(self.random() * len(seq))]
