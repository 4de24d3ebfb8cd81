"""Keyed float curves mapping a time domain onto a value domain."""

from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, List, Optional, Tuple


def _clamp(value: float, minimum: float, maximum: float) -> float:
    """Clamp helper shared by every curve lookup."""
    return max(minimum, min(maximum, value))


class CurveInterp(str, Enum):
    CONSTANT = "constant"   # hold the left key's value until the next key
    LINEAR = "linear"
    CUBIC = "cubic"         # hermite with auto tangents


@dataclass(frozen=True)
class CurveKey:
    time: float
    value: float
    interp: CurveInterp = CurveInterp.LINEAR


@dataclass
class FloatCurve:
    """
    Ordered set of keys evaluated piecewise.

    Outside the key range the curve holds the first/last value. The
    interpolation mode of a segment is taken from its left key.
    """

    keys: List[CurveKey] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.keys = sorted(self.keys, key=lambda k: k.time)

    @classmethod
    def from_points(
        cls,
        points: Iterable[Tuple[float, float]],
        interp: CurveInterp = CurveInterp.LINEAR,
    ) -> "FloatCurve":
        return cls([CurveKey(float(t), float(v), interp) for t, v in points])

    def add_key(
        self, time: float, value: float, interp: CurveInterp = CurveInterp.LINEAR
    ) -> CurveKey:
        key = CurveKey(float(time), float(value), interp)
        times = [k.time for k in self.keys]
        self.keys.insert(bisect_right(times, key.time), key)
        return key

    def is_empty(self) -> bool:
        return not self.keys

    def first_key(self) -> Optional[CurveKey]:
        return self.keys[0] if self.keys else None

    def last_key(self) -> Optional[CurveKey]:
        return self.keys[-1] if self.keys else None

    def time_range(self) -> Tuple[float, float]:
        if not self.keys:
            return 0.0, 0.0
        return self.keys[0].time, self.keys[-1].time

    def _auto_tangent(self, i: int) -> float:
        # flat at the ends, centred difference elsewhere
        if i <= 0 or i >= len(self.keys) - 1:
            return 0.0
        prev_key, next_key = self.keys[i - 1], self.keys[i + 1]
        dt = next_key.time - prev_key.time
        if dt <= 0.0:
            return 0.0
        return (next_key.value - prev_key.value) / dt

    def eval(self, time: float, default: float = 0.0) -> float:
        """Value of the curve at ``time``; ``default`` for an empty curve."""
        if not self.keys:
            return default

        first, last = self.keys[0], self.keys[-1]
        if time <= first.time:
            return first.value
        if time >= last.time:
            return last.value

        times = [k.time for k in self.keys]
        right = bisect_right(times, time)
        left = right - 1
        k0, k1 = self.keys[left], self.keys[right]
        span = k1.time - k0.time
        if span <= 0.0:
            return k1.value

        alpha = (time - k0.time) / span
        if k0.interp is CurveInterp.CONSTANT:
            return k0.value
        if k0.interp is CurveInterp.LINEAR:
            return k0.value + (k1.value - k0.value) * alpha

        # cubic hermite, tangents scaled to the segment length
        m0 = self._auto_tangent(left) * span
        m1 = self._auto_tangent(right) * span
        a2 = alpha * alpha
        a3 = a2 * alpha
        h00 = 2 * a3 - 3 * a2 + 1
        h10 = a3 - 2 * a2 + alpha
        h01 = -2 * a3 + 3 * a2
        h11 = a3 - a2
        return h00 * k0.value + h10 * m0 + h01 * k1.value + h11 * m1

    def eval_normalized(self, alpha: float) -> float:
        """Evaluate at a ``[0, 1]`` position across the key range."""
        start, end = self.time_range()
        return self.eval(start + _clamp(alpha, 0.0, 1.0) * (end - start))

    def value_range(self, samples: int = 100) -> Tuple[float, float]:
        """Min/max value seen at both endpoints and ``samples`` even steps."""
        if not self.keys:
            return 0.0, 0.0
        start, end = self.time_range()
        low = min(self.eval(start), self.eval(end))
        high = max(self.eval(start), self.eval(end))
        if samples > 1 and end > start:
            step = (end - start) / (samples - 1)
            for i in range(samples):
                value = self.eval(start + i * step)
                low = min(low, value)
                high = max(high, value)
        return low, high
