"""Geometry, color and sequence helpers driven by a seeded engine."""

from __future__ import annotations

import logging
import math
from typing import MutableSequence, Optional, Sequence, TypeVar

from .curves import FloatCurve
from .engine import SeededEngine
from .models import Color, Quat, Rotator, Vector, Vector2D

logger = logging.getLogger(__name__)

T = TypeVar("T")

TWO_PI = 2.0 * math.pi


class RandomUtility:
    """Composite draws; each component is one engine call, in a fixed order."""

    def __init__(self, seed: Optional[int] = None, engine: Optional[SeededEngine] = None) -> None:
        self.engine = engine if engine is not None else SeededEngine(seed)

    def get_seed(self) -> int:
        return self.engine.get_root_seed()

    # colors
    def rand_color(self) -> Color:
        r, g, b = (self.engine.rand_int(0, 255) for _ in range(3))
        return Color(r, g, b)

    def rand_color_alpha(self) -> Color:
        r, g, b, a = (self.engine.rand_int(0, 255) for _ in range(4))
        return Color(r, g, b, a)

    # vectors
    def _unit_sphere(self) -> Vector:
        # azimuth plus cos(polar) keeps the density uniform over the sphere
        theta = self.engine.rand_float(0.0, TWO_PI)
        cos_polar = self.engine.rand_float(-1.0, 1.0)
        sin_polar = math.sqrt(max(0.0, 1.0 - cos_polar * cos_polar))
        return Vector(sin_polar * math.cos(theta), sin_polar * math.sin(theta), cos_polar)

    def rand_vector(self, minimum: float, maximum: float) -> Vector:
        x = self.engine.rand_float(minimum, maximum)
        y = self.engine.rand_float(minimum, maximum)
        z = self.engine.rand_float(minimum, maximum)
        return Vector(x, y, z)

    def rand_vector_normalized(self) -> Vector:
        return self._unit_sphere()

    def rand_vector2d(self, minimum: float = -1.0, maximum: float = 1.0) -> Vector2D:
        x = self.engine.rand_float(minimum, maximum)
        y = self.engine.rand_float(minimum, maximum)
        return Vector2D(x, y)

    def rand_vector2d_normalized(self) -> Vector2D:
        angle = self.engine.rand_float(0.0, TWO_PI)
        return Vector2D(math.cos(angle), math.sin(angle))

    def rand_vector2d_in_circle(self, radius: float = 1.0) -> Vector2D:
        angle = self.engine.rand_float(0.0, TWO_PI)
        r = math.sqrt(self.engine.rand_float(0.0, 1.0)) * radius
        return Vector2D(r * math.cos(angle), r * math.sin(angle))

    def rand_vector2d_on_circle(self, radius: float = 1.0) -> Vector2D:
        return self.rand_vector2d_normalized() * radius

    def rand_point_in_sphere(self, radius: float = 1.0) -> Vector:
        unit = self._unit_sphere()
        r = self.engine.rand_float(0.0, 1.0) ** (1.0 / 3.0)
        return unit * (r * radius)

    def rand_point_on_sphere(self, radius: float = 1.0) -> Vector:
        return self._unit_sphere() * radius

    def rand_point_in_circle(self, radius: float = 1.0) -> Vector:
        point = self.rand_vector2d_in_circle(radius)
        return Vector(point.x, point.y, 0.0)

    def rand_point_on_circle(self, radius: float = 1.0) -> Vector:
        point = self.rand_vector2d_on_circle(radius)
        return Vector(point.x, point.y, 0.0)

    # rotations
    def rand_rotator(self) -> Rotator:
        pitch = self.engine.rand_float(-90.0, 90.0)
        yaw = self.engine.rand_float(-180.0, 180.0)
        roll = self.engine.rand_float(-180.0, 180.0)
        return Rotator(pitch, yaw, roll)

    def rand_quat(self) -> Quat:
        """Uniform unit quaternion (Shoemake)."""
        u1 = self.engine.rand_float(0.0, 1.0)
        u2 = self.engine.rand_float(0.0, TWO_PI)
        u3 = self.engine.rand_float(0.0, TWO_PI)
        s1 = math.sqrt(1.0 - u1)
        s2 = math.sqrt(u1)
        return Quat(s1 * math.sin(u2), s1 * math.cos(u2), s2 * math.sin(u3), s2 * math.cos(u3))

    # sequences
    def rand_element(self, items: Sequence[T]) -> Optional[T]:
        if not items:
            logger.warning("rand_element called with an empty sequence")
            return None
        return items[self.engine.rand_int(0, len(items) - 1)]

    def shuffle(self, items: MutableSequence[T]) -> None:
        """In-place Fisher-Yates, walking down from the last slot."""
        for i in range(len(items) - 1, 0, -1):
            j = self.engine.rand_int(0, i)
            items[i], items[j] = items[j], items[i]

    # curves
    def rand_curve_value(self, curve: FloatCurve) -> float:
        return self.engine.rand_curve_value(curve)

    def rand_curve_range(self, curve: FloatCurve, minimum: float, maximum: float) -> float:
        return self.engine.rand_curve_range(curve, minimum, maximum)
