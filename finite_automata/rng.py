"""
Seeded, reproducible random source consumed by the generators.

Any object exposing `float`, `int`, `choice` and `shuffle` with the same
contracts can be passed in its place.
"""
import hashlib

import numpy as np


SEED_LENGTH = 7

_BASE36 = '0123456789abcdefghijklmnopqrstuvwxyz'


def _seed_to_int(seed):
    if isinstance(seed, (int, np.integer)) and not isinstance(seed, bool):
        return int(seed) % 2**64
    digest = hashlib.sha256(str(seed).encode('utf-8')).digest()
    return int.from_bytes(digest[:8], 'little')


def sample_random_seed():
    "A fresh base36 seed of length `SEED_LENGTH`."
    return Random(np.random.SeedSequence().entropy).base36string(SEED_LENGTH)


class Random:

    def __init__(self, seed):
        self.seed = seed
        self._rng = np.random.default_rng(_seed_to_int(seed))

    def __repr__(self):
        return f'{self.__class__.__name__}({self.seed!r})'

    def uniform(self):
        "Number in [0, 1)."
        return float(self._rng.random())

    def float(self, min, max):
        "Number in [min, max)."
        return self.uniform() * (max - min) + min

    def bool(self, chance=0.5):
        return self.uniform() < chance

    def int(self, min, max):
        "Integer in [min, max]; both ends inclusive."
        if min > max:
            raise ValueError(f'min > max: {min} > {max}')
        if min == max:
            return min
        return int(self._rng.integers(min, max, endpoint=True))

    def choice(self, seq):
        if len(seq) == 0:
            raise ValueError('cannot choose from an empty sequence')
        return seq[self.int(0, len(seq) - 1)]

    def subset(self, seq, size):
        "`size` distinct elements of `seq`, uniformly at random."
        if size > len(seq):
            raise ValueError('subset size cannot be larger than the sequence')
        return self.shuffle(list(seq))[:size]

    def shuffle(self, xs):
        """
        Durstenfeld shuffle, in place; returns `xs`.

        Every swap draws through `self.int(0, i)`, for i from the top down, so
        a shuffle consumes the same stream as those `int` calls would.  The
        generators' draw order is defined in terms of it; `self._rng.shuffle`
        would draw differently.
        """
        for i in range(len(xs) - 1, 0, -1):
            j = self.int(0, i)
            xs[i], xs[j] = xs[j], xs[i]
        return xs

    def base36string(self, length=SEED_LENGTH):
        return ''.join(_BASE36[self.int(0, 35)] for _ in range(length))
