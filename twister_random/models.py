from dataclasses import dataclass


@dataclass(frozen=True)
class Color:
    r: int
    g: int
    b: int
    a: int = 255


@dataclass(frozen=True)
class Vector2D:
    x: float = 0.0
    y: float = 0.0

    def __mul__(self, scale: float) -> "Vector2D":
        return Vector2D(self.x * scale, self.y * scale)


@dataclass(frozen=True)
class Vector:
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __mul__(self, scale: float) -> "Vector":
        return Vector(self.x * scale, self.y * scale, self.z * scale)

    def length(self) -> float:
        return (self.x * self.x + self.y * self.y + self.z * self.z) ** 0.5


@dataclass(frozen=True)
class Rotator:
    pitch: float = 0.0
    yaw: float = 0.0
    roll: float = 0.0


@dataclass(frozen=True)
class Quat:
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 1.0

    def size(self) -> float:
        return (self.x * self.x + self.y * self.y + self.z * self.z + self.w * self.w) ** 0.5
