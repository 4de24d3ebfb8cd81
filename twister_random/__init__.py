"""Public package surface for the seeded Mersenne-Twister random toolkit."""

from .curves import CurveInterp, CurveKey, FloatCurve
from .engine import SeededEngine
from .evaluate import eval_bool_true, eval_curve, eval_curve_fast, eval_float_max
from .models import Color, Quat, Rotator, Vector, Vector2D
from .prng import MT19937
from .report import DrawConfig, run_draws
from .strings import CharacterType, RandomString
from .utility import RandomUtility

__all__ = [
    "CharacterType",
    "Color",
    "CurveInterp",
    "CurveKey",
    "DrawConfig",
    "FloatCurve",
    "MT19937",
    "Quat",
    "RandomString",
    "RandomUtility",
    "Rotator",
    "SeededEngine",
    "Vector",
    "Vector2D",
    "eval_bool_true",
    "eval_curve",
    "eval_curve_fast",
    "eval_float_max",
    "run_draws",
]
