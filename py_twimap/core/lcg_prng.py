"""
Seeded linear congruential generator for reproducible coastlines.

The generator and the string hash feeding it are part of the map's
contract: the same landmass name must always produce the same stream,
so both use exact integer arithmetic with fixed constants.
"""

LCG_MULTIPLIER = 1103515245
LCG_INCREMENT = 12345
LCG_MASK = 0x7FFFFFFF  # 2^31 - 1


def _fold_signed(n, bits):
    """Wrap an integer into a signed two's complement value of ``bits`` width."""
    n &= (1 << bits) - 1
    if n >= 1 << (bits - 1):
        n -= 1 << bits
    return n


def hash_string(text: str, bits: int = 32) -> int:
    """
    Multiply-accumulate string hash (``h = h * 31 + ord(c)``).

    The running value wraps like a signed integer of ``bits`` width and the
    absolute value of the result is returned.

    Args:
        text: String to hash
        bits: Width of the accumulator (32 for coastline seeds, 64 for
            coordinate jitter)

    Returns:
        Non-negative hash value
    """
    h = 0
    for char in text:
        h = _fold_signed(h * 31 + ord(char), bits)
    return abs(h)


def hash_offset(name: str, axis: str, spread: float) -> float:
    """Map ``name:axis`` deterministically onto ``[-spread, +spread)``."""
    h = hash_string(f"{name}:{axis}", bits=64)
    return (h % 1000 / 500.0 - 1.0) * spread


class LCGPRNG:
    """
    Linear congruential generator producing floats in ``[0, 1]``.

    Each step computes ``s = (s * 1103515245 + 12345) & 0x7fffffff`` and
    returns ``s / 0x7fffffff``.
    """

    def __init__(self, seed):
        """Initialize with an integer seed or a string (hashed)."""
        self.call_count = 0
        if isinstance(seed, str):
            seed = hash_string(seed)
        self.state = int(seed) & LCG_MASK

    @classmethod
    def for_key(cls, key: str) -> "LCGPRNG":
        """Generator seeded from a landmass key."""
        return cls(hash_string(key))

    def random(self):
        """Generate the next number in ``[0, 1]``."""
        self.call_count += 1
        self.state = (self.state * LCG_MULTIPLIER + LCG_INCREMENT) & LCG_MASK
        return self.state / LCG_MASK

    def __call__(self):
        return self.random()
