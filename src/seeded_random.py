#!/usr/bin/env python3
"""
SEEDED RANDOM
mulberry32 with explicit 32-bit wrapping, so a seed gives the same
stream of floats on every platform and matches the JavaScript game.
"""
from typing import Mapping, Sequence, List, TypeVar

T = TypeVar('T')

MASK32 = 0xFFFFFFFF
TWO_32 = 4294967296

# Per-mode (multiplier, offset); distinct so the two modes never share a seed.
SEED_CONSTANTS = {
    'thinking': (7919, 1337),
    'relaxing': (6271, 4219),
}


def imul(a: int, b: int) -> int:
    """Low 32 bits of a * b (Math.imul, unsigned view)."""
    return ((a & MASK32) * (b & MASK32)) & MASK32


class Mulberry32:
    def __init__(self, seed: int):
        self.seed = seed
        self.state = seed & MASK32

    def random(self) -> float:
        """Next float in [0, 1)."""
        self.state = (self.state + 0x6D2B79F5) & MASK32
        s = self.state
        t = imul(s ^ (s >> 15), 1 | s)
        t = ((t + imul(t ^ (t >> 7), 61 | t)) & MASK32) ^ t
        return ((t ^ (t >> 14)) & MASK32) / TWO_32

    def randint(self, lo: int, hi: int) -> int:
        """Integer in [lo, hi], one draw."""
        return lo + int(self.random() * (hi - lo + 1))

    def uniform(self, lo: float, hi: float) -> float:
        return lo + self.random() * (hi - lo)

    def choice(self, seq: Sequence[T]) -> T:
        if not seq:
            raise ValueError("choice from empty sequence")
        return seq[int(self.random() * len(seq))]

    def shuffled(self, seq: Sequence[T]) -> List[T]:
        """Fisher-Yates on a copy."""
        a = list(seq)
        for i in range(len(a) - 1, 0, -1):
            j = int(self.random() * (i + 1))
            a[i], a[j] = a[j], a[i]
        return a

    def weighted_choice(self, weights: Mapping[str, float]) -> str:
        """One roll against the cumulative weights, in mapping order."""
        total = sum(weights.values())
        roll = self.random() * total
        acc = 0.0
        last = None
        for name, w in weights.items():
            acc += w
            last = name
            if roll < acc:
                return name
        if last is None:
            raise ValueError("weighted choice from empty mapping")
        return last


def level_seed(level_id: int, mode: str) -> int:
    try:
        multiplier, offset = SEED_CONSTANTS[mode]
    except KeyError:
        raise ValueError(f"unknown mode {mode!r}") from None
    return level_id * multiplier + offset


if __name__ == '__main__':
    rng = Mulberry32(level_seed(1, 'thinking'))
    print([round(rng.random(), 6) for _ in range(5)])
