# Minimal MT19937 PRNG for seeded, replayable draws (no external deps)
# Source: Matsumoto & Nishimura reference implementation, init_genrand seeding
from dataclasses import dataclass, field
from typing import List

N = 624
M = 397
MATRIX_A = 0x9908B0DF
UPPER_MASK = 0x80000000
LOWER_MASK = 0x7FFFFFFF
MASK32 = 0xFFFFFFFF


@dataclass
class MT19937:
    seed: int = 5489
    mt: List[int] = field(default_factory=list, init=False, repr=False)
    index: int = field(default=N, init=False)

    def __post_init__(self) -> None:
        self.reseed(self.seed)

    def reseed(self, seed: int) -> None:
        """Same seeding as std::mt19937(seed): the seed is taken modulo 2**32."""
        self.seed = seed & MASK32
        self.mt = [0] * N
        self.mt[0] = self.seed
        for i in range(1, N):
            prev = self.mt[i - 1]
            self.mt[i] = (1812433253 * (prev ^ (prev >> 30)) + i) & MASK32
        self.index = N

    def _twist(self) -> None:
        mt = self.mt
        for kk in range(N):
            y = (mt[kk] & UPPER_MASK) | (mt[(kk + 1) % N] & LOWER_MASK)
            mt[kk] = mt[(kk + M) % N] ^ (y >> 1) ^ (MATRIX_A if y & 1 else 0)
        self.index = 0

    def next_u32(self) -> int:
        if self.index >= N:
            self._twist()
        y = self.mt[self.index]
        self.index += 1

        # tempering
        y ^= y >> 11
        y ^= (y << 7) & 0x9D2C5680
        y ^= (y << 15) & 0xEFC60000
        y ^= y >> 18
        return y & MASK32

    def discard(self, count: int) -> None:
        # tempering only shapes output, so skipped words never need it
        remaining = max(0, int(count))
        while remaining > 0:
            if self.index >= N:
                self._twist()
            step = min(remaining, N - self.index)
            self.index += step
            remaining -= step

    def random(self) -> float:
        # [0, 1)
        return self.next_u32() / 2**32

    def random_inclusive(self) -> float:
        # [0, 1]
        return self.next_u32() / MASK32

    def randint(self, a: int, b: int) -> int:
        # inclusive a..b, one word per call
        span = b - a + 1
        return a + ((self.next_u32() * span) >> 32)
