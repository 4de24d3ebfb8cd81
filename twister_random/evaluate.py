"""Luck scoring for values that were already rolled.

Every evaluator returns a factor in [0, 1]: 0 is the rarest, luckiest
outcome and 1 the most common one. Degenerate inputs score a neutral 0.5
(or 1.0 for an empty uniform range) instead of raising.
"""

from .curves import FloatCurve

SMALL_NUMBER = 1e-8
CURVE_SAMPLE_COUNT = 100


def _clamp(value: float, minimum: float, maximum: float) -> float:
    return max(minimum, min(maximum, value))


def eval_float_max(value: float, minimum: float = 0.0, maximum: float = 1.0) -> float:
    """Uniform range where ``maximum`` is the luckiest roll."""
    span = maximum - minimum
    if span <= 0.0:
        return 1.0
    normalized = (value - minimum) / span
    return _clamp(1.0 - normalized, 0.0, 1.0)


def eval_bool_true(value: bool, probability: float = 0.5) -> float:
    """Score of a boolean outcome given its chance of being true."""
    p = _clamp(probability, 0.0, 1.0)
    return p if value else 1.0 - p


def _rarest_value(curve: FloatCurve, rarity_time: float) -> float:
    start, end = curve.time_range()
    return curve.eval(start + _clamp(rarity_time, 0.0, 1.0) * (end - start))


def eval_curve(value: float, curve: FloatCurve, rarity_time: float = 0.0) -> float:
    """
    Distance of ``value`` from the curve's rarest output.

    The reachable value range is estimated from the endpoints plus
    ``CURVE_SAMPLE_COUNT`` evenly spaced samples. The distance ratio goes
    through a square root so values near the rarest one score very low.
    """
    if curve.is_empty():
        return 0.5

    start, end = curve.time_range()
    if end - start <= 0.0:
        return 0.5

    rarest = _rarest_value(curve, rarity_time)
    low, high = curve.value_range(CURVE_SAMPLE_COUNT)
    if high - low <= SMALL_NUMBER:
        return 0.5

    max_distance = max(abs(low - rarest), abs(high - rarest))
    if max_distance <= SMALL_NUMBER:
        return 0.5

    ratio = abs(value - rarest) / max_distance
    return _clamp(ratio ** 0.5, 0.0, 1.0)


def eval_curve_fast(value: float, curve: FloatCurve, rarity_time: float = 0.0) -> float:
    """Cheaper ``eval_curve``: endpoint range only and a linear ratio."""
    if curve.is_empty():
        return 0.5

    start, end = curve.time_range()
    if end - start <= SMALL_NUMBER:
        return 0.5

    rarest = _rarest_value(curve, rarity_time)
    value_span = abs(curve.eval(end) - curve.eval(start))
    if value_span <= SMALL_NUMBER:
        return 0.5

    return _clamp(abs(value - rarest) / value_span, 0.0, 1.0)
