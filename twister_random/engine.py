"""Seeded generation engine: counted draws on top of MT19937."""

from __future__ import annotations

import logging
import random
import secrets
import uuid
from statistics import NormalDist
from typing import Optional, Sequence

from .curves import FloatCurve
from .prng import MASK32, MT19937

logger = logging.getLogger(__name__)

DEFAULT_BIAS_FORCE = 2
DEFAULT_BOOL_BIAS_FORCE = 3
DEFAULT_GAUSSIAN_ATTEMPTS = 5
TRUNCATED_ATTEMPTS = 5


def _clamp(value: float, minimum: float, maximum: float) -> float:
    return max(minimum, min(maximum, value))


def _to_int32(value: int) -> int:
    value = int(value) & MASK32
    return value - (1 << 32) if value & 0x80000000 else value


class SeededEngine:
    """
    Reproducible random source with a consumption counter.

    Every primitive draw maps exactly one 32-bit generator word and bumps
    ``generated_count`` by one, so ``(seed, generated_count)`` is the whole
    serialisable state: ``SeededEngine(seed).advance(count)`` lands on the
    same position.

    Bad arguments never raise. Ranges, probabilities and forces are clamped,
    and empty inputs return the documented sentinel.
    """

    def __init__(self, seed: Optional[int] = None) -> None:
        if seed is None:
            seed = SeededEngine.static_new_seed()
        self._seed = _to_int32(seed)
        self._generator = MT19937(self._seed)
        self._generated_count = 0

    def __repr__(self) -> str:
        return f"SeededEngine(seed={self._seed}, generated_count={self._generated_count})"

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def generated_count(self) -> int:
        return self._generated_count

    def get_root_seed(self) -> int:
        return self._seed

    def get_current_state(self) -> int:
        return self._generated_count

    # ------------------------------------------------------------------
    # word mapping
    # ------------------------------------------------------------------
    def _next_word(self) -> int:
        self._generated_count += 1
        return self._generator.next_u32()

    def _uniform01(self) -> float:
        # [0, 1]
        return self._next_word() / MASK32

    def _unit_interval(self) -> float:
        # [0, 1)
        return self._next_word() / 2**32

    # ------------------------------------------------------------------
    # primitive draws
    # ------------------------------------------------------------------
    def rand_int(self, minimum: int = 0, maximum: int = 1000) -> int:
        """Integer in the inclusive range ``[minimum, maximum]``."""
        low, high = int(minimum), int(maximum)
        if low > high:
            low, high = high, low
        span = high - low + 1
        return low + ((self._next_word() * span) >> 32)

    def rand_float(self, minimum: float = 0.0, maximum: float = 1.0) -> float:
        """Float in ``[minimum, maximum]``; both ends are reachable."""
        return minimum + (maximum - minimum) * self._uniform01()

    def rand_bool(self, probability: float = 0.5) -> bool:
        p = _clamp(probability, 0.0, 1.0)
        return self._unit_interval() < p

    def rand_percentage(self) -> float:
        return self.rand_float(0.0, 100.0)

    def rand_percentage01(self) -> float:
        return self.rand_float(0.0, 1.0)

    def rand_gaussian(self, mean: float = 0.0, stddev: float = 1.0) -> float:
        """Normal sample by inverse CDF of a single word."""
        word = self._next_word()
        sigma = abs(stddev)
        if sigma == 0.0:
            return float(mean)
        u = (word + 0.5) / 2**32
        return NormalDist(mean, sigma).inv_cdf(u)

    # ------------------------------------------------------------------
    # biased draws
    # ------------------------------------------------------------------
    def rand_float_biased(
        self,
        minimum: float,
        maximum: float,
        biased_toward: float,
        bias_force: int = DEFAULT_BIAS_FORCE,
    ) -> float:
        """
        Best of ``bias_force`` uniform draws, judged by distance to the target.

        Consumes ``bias_force`` units. Ties keep the earliest draw.
        """
        target = _clamp(biased_toward, minimum, maximum)
        force = max(1, int(bias_force))

        best = self.rand_float(minimum, maximum)
        if force == 1:
            return best

        best_distance = abs(best - target)
        for _ in range(1, force):
            candidate = self.rand_float(minimum, maximum)
            distance = abs(candidate - target)
            if distance < best_distance:
                best, best_distance = candidate, distance
        return best

    def rand_bool_biased(
        self,
        probability: float = 0.5,
        bias_toward_true: bool = True,
        bias_force: int = DEFAULT_BOOL_BIAS_FORCE,
    ) -> bool:
        p = _clamp(probability, 0.0, 1.0)
        force = max(1, int(bias_force))
        if force == 1:
            return self.rand_bool(p)

        # midpoint of the [0, p) "true" band or of the [p, 1] "false" band
        if bias_toward_true:
            target = p * 0.5
        else:
            target = p + (1.0 - p) * 0.5
        return self.rand_float_biased(0.0, 1.0, target, force) < p

    # ------------------------------------------------------------------
    # gaussian helpers
    # ------------------------------------------------------------------
    def rand_gaussian_clamped(
        self,
        minimum: float,
        maximum: float,
        bias: float = 0.0,
        spread: float = 1.0,
        attempts: int = DEFAULT_GAUSSIAN_ATTEMPTS,
    ) -> float:
        """
        Gaussian around ``bias`` inside ``[minimum, maximum]``.

        ``spread=1`` puts six sigma across the range. After ``attempts``
        misses the last draw is clamped into the range.
        """
        center = _clamp(bias, minimum, maximum)
        stddev = (maximum - minimum) * spread / 6.0

        value = 0.0
        for _ in range(max(int(attempts), 1)):
            value = self.rand_gaussian(center, stddev)
            if minimum <= value <= maximum:
                return value
        return _clamp(value, minimum, maximum)

    def rand_gaussian_truncated(
        self, minimum: float, maximum: float, bias: float = 0.0, spread: float = 1.0
    ) -> float:
        """Like ``rand_gaussian_clamped`` but falls back to a uniform draw."""
        center = _clamp(bias, minimum, maximum)
        stddev = (maximum - minimum) * spread / 6.0

        for _ in range(TRUNCATED_ATTEMPTS):
            value = self.rand_gaussian(center, stddev)
            if minimum <= value <= maximum:
                return value
        return self.rand_float(minimum, maximum)

    # ------------------------------------------------------------------
    # selection and dice
    # ------------------------------------------------------------------
    def rand_weighted(self, weights: Sequence[float]) -> int:
        """Index picked proportionally to its positive weight, or -1."""
        if not weights:
            return -1

        total = 0.0
        last_valid = -1
        for i, weight in enumerate(weights):
            if weight > 0.0:
                total += weight
                last_valid = i
        if total <= 0.0:
            return -1

        roll = self.rand_float(0.0, total)
        cumulative = 0.0
        for i, weight in enumerate(weights):
            if weight > 0.0:
                cumulative += weight
                if roll <= cumulative:
                    return i
        return last_valid

    def roll_dice(self, num_dice: int, sides: int = 6) -> int:
        if num_dice <= 0 or sides <= 0:
            return 0
        return sum(self.rand_int(1, sides) for _ in range(num_dice))

    def roll_dice_array(self, sides: Sequence[int]) -> int:
        """One die per entry; entries below 1 are skipped without a draw."""
        total = 0
        for side_count in sides:
            if side_count >= 1:
                total += self.rand_int(1, side_count)
        return total

    # ------------------------------------------------------------------
    # curves
    # ------------------------------------------------------------------
    def rand_curve_value(self, curve: FloatCurve) -> float:
        if curve.is_empty():
            return 0.0
        start, end = curve.time_range()
        return curve.eval(self.rand_float(start, end))

    def rand_curve_range(self, curve: FloatCurve, minimum: float, maximum: float) -> float:
        if curve.is_empty():
            return 0.0
        return curve.eval(self.rand_float(minimum, maximum))

    # ------------------------------------------------------------------
    # state control
    # ------------------------------------------------------------------
    def discard(self, count: int) -> None:
        count = max(0, int(count))
        self._generator.discard(count)
        self._generated_count += count

    def advance(self, steps: int) -> None:
        self.discard(steps)

    def reset(self) -> None:
        logger.debug("reset engine seed=%d from state %d", self._seed, self._generated_count)
        self._generator.reseed(self._seed)
        self._generated_count = 0

    def jump_to_state(self, target_state: int) -> None:
        """Move to ``target_state`` units consumed; rewinding replays from the seed."""
        target = max(0, int(target_state))
        if target == self._generated_count:
            return
        if target > self._generated_count:
            self.advance(target - self._generated_count)
            return
        logger.debug("rewinding engine seed=%d to state %d", self._seed, target)
        self.reset()
        self.advance(target)

    # ------------------------------------------------------------------
    # one-shot helpers
    # ------------------------------------------------------------------
    @staticmethod
    def static_new_seed() -> int:
        """Signed 32-bit seed from the OS entropy pool."""
        return _to_int32(secrets.randbits(32))

    @staticmethod
    def static_rand_int(minimum: int, maximum: int) -> int:
        return SeededEngine(SeededEngine.static_new_seed()).rand_int(minimum, maximum)

    @staticmethod
    def static_rand_float(minimum: float, maximum: float) -> float:
        return SeededEngine(SeededEngine.static_new_seed()).rand_float(minimum, maximum)

    @staticmethod
    def static_new_guid() -> uuid.UUID:
        engine = SeededEngine(SeededEngine.static_new_seed())
        a, b, c, d = (engine.rand_int(0, MASK32) for _ in range(4))
        return uuid.UUID(int=(a << 96) | (b << 64) | (c << 32) | d)

    # Python's module-level generator, no reproducibility guarantee
    @staticmethod
    def static_rand_int_builtin(minimum: int, maximum: int) -> int:
        low, high = (minimum, maximum) if minimum <= maximum else (maximum, minimum)
        return random.randint(low, high)

    @staticmethod
    def static_rand_float_builtin(minimum: float, maximum: float) -> float:
        return random.uniform(minimum, maximum)

    @staticmethod
    def static_rand_bool_builtin(probability: float = 0.5) -> bool:
        return random.uniform(0.0, 1.0) < _clamp(probability, 0.0, 1.0)
