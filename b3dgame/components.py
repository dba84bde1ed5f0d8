"""Vector and rotation math plus the components that make up the game world."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import ClassVar, Iterator, Union

_ARC_EPSILON = 1e-6
_SLERP_THRESHOLD = 1.0 - 1e-7


@dataclass(frozen=True)
class Vec3:
    """An immutable three-component vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    ZERO: ClassVar[Vec3]
    X: ClassVar[Vec3]
    Y: ClassVar[Vec3]
    Z: ClassVar[Vec3]
    NEG_X: ClassVar[Vec3]
    NEG_Y: ClassVar[Vec3]
    NEG_Z: ClassVar[Vec3]

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __add__(self, other: Vec3) -> Vec3:
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> Vec3:
        return Vec3(self.x * scalar, self.y * scalar, self.z * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vec3:
        return Vec3(self.x / scalar, self.y / scalar, self.z / scalar)

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)

    def length(self) -> float:
        return math.sqrt(self.dot(self))

    def normalize(self) -> Vec3:
        """Return the unit vector in this direction; a zero vector has none."""
        length = self.length()
        if length == 0.0 or not math.isfinite(length):
            raise ValueError(f"cannot normalize {self!r}")
        return self / length

    def normalize_or_zero(self) -> Vec3:
        length = self.length()
        if length == 0.0 or not math.isfinite(length):
            return Vec3.ZERO
        return self / length

    def distance(self, other: Vec3) -> float:
        return (self - other).length()

    def dot(self, other: Vec3) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vec3) -> Vec3:
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def lerp(self, other: Vec3, t: float) -> Vec3:
        return self + (other - self) * t

    def _any_orthonormal(self) -> Vec3:
        sign = math.copysign(1.0, self.z)
        a = -1.0 / (sign + self.z)
        b = self.x * self.y * a
        return Vec3(b, sign + self.y * self.y * a, -self.y)


Vec3.ZERO = Vec3(0.0, 0.0, 0.0)
Vec3.X = Vec3(1.0, 0.0, 0.0)
Vec3.Y = Vec3(0.0, 1.0, 0.0)
Vec3.Z = Vec3(0.0, 0.0, 1.0)
Vec3.NEG_X = Vec3(-1.0, 0.0, 0.0)
Vec3.NEG_Y = Vec3(0.0, -1.0, 0.0)
Vec3.NEG_Z = Vec3(0.0, 0.0, -1.0)


@dataclass(frozen=True)
class Quat:
    """An immutable rotation quaternion stored as (x, y, z, w)."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 1.0

    IDENTITY: ClassVar[Quat]

    @classmethod
    def from_rotation_x(cls, angle: float) -> Quat:
        half = angle * 0.5
        return cls(math.sin(half), 0.0, 0.0, math.cos(half))

    @classmethod
    def from_rotation_y(cls, angle: float) -> Quat:
        half = angle * 0.5
        return cls(0.0, math.sin(half), 0.0, math.cos(half))

    @classmethod
    def from_rotation_z(cls, angle: float) -> Quat:
        half = angle * 0.5
        return cls(0.0, 0.0, math.sin(half), math.cos(half))

    @classmethod
    def from_axis_angle(cls, axis: Vec3, angle: float) -> Quat:
        half = angle * 0.5
        s = math.sin(half)
        return cls(axis.x * s, axis.y * s, axis.z * s, math.cos(half))

    @classmethod
    def from_rotation_arc(cls, start: Vec3, end: Vec3) -> Quat:
        """The shortest rotation taking unit vector ``start`` onto unit vector ``end``."""
        dot = start.dot(end)
        if dot > 1.0 - _ARC_EPSILON:
            return cls()
        if dot < -1.0 + _ARC_EPSILON:
            return cls.from_axis_angle(start._any_orthonormal(), math.pi)
        c = start.cross(end)
        return cls(c.x, c.y, c.z, 1.0 + dot).normalize()

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z
        yield self.w

    def __add__(self, other: Quat) -> Quat:
        return Quat(self.x + other.x, self.y + other.y, self.z + other.z, self.w + other.w)

    def __sub__(self, other: Quat) -> Quat:
        return Quat(self.x - other.x, self.y - other.y, self.z - other.z, self.w - other.w)

    def __neg__(self) -> Quat:
        return Quat(-self.x, -self.y, -self.z, -self.w)

    def __mul__(self, other: Union[Quat, Vec3, float]) -> Union[Quat, Vec3]:
        if isinstance(other, Quat):
            return Quat(
                self.w * other.x + self.x * other.w + self.y * other.z - self.z * other.y,
                self.w * other.y - self.x * other.z + self.y * other.w + self.z * other.x,
                self.w * other.z + self.x * other.y - self.y * other.x + self.z * other.w,
                self.w * other.w - self.x * other.x - self.y * other.y - self.z * other.z,
            )
        if isinstance(other, Vec3):
            return self.rotate(other)
        return Quat(self.x * other, self.y * other, self.z * other, self.w * other)

    def _dot(self, other: Quat) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z + self.w * other.w

    def rotate(self, v: Vec3) -> Vec3:
        b = Vec3(self.x, self.y, self.z)
        b2 = b.dot(b)
        return v * (self.w * self.w - b2) + b * (v.dot(b) * 2.0) + b.cross(v) * (self.w * 2.0)

    def normalize(self) -> Quat:
        length = math.sqrt(self._dot(self))
        if length == 0.0 or not math.isfinite(length):
            raise ValueError(f"cannot normalize {self!r}")
        return self * (1.0 / length)

    def lerp(self, other: Quat, t: float) -> Quat:
        bias = 1.0 if self._dot(other) >= 0.0 else -1.0
        return (self + (other * bias - self) * t).normalize()

    def slerp(self, other: Quat, t: float) -> Quat:
        end = other
        dot = self._dot(end)
        if dot < 0.0:
            end = -end
            dot = -dot
        if dot > _SLERP_THRESHOLD:
            return self.lerp(end, t)
        theta = math.acos(dot)
        scale_start = math.sin(theta * (1.0 - t))
        scale_end = math.sin(theta * t)
        return (self * scale_start + end * scale_end) * (1.0 / math.sin(theta))


Quat.IDENTITY = Quat(0.0, 0.0, 0.0, 1.0)


@dataclass
class Transform:
    """Position and orientation of an entity."""

    translation: Vec3 = field(default_factory=Vec3)
    rotation: Quat = field(default_factory=Quat)

    def forward(self) -> Vec3:
        return self.rotation.rotate(Vec3.NEG_Z)

    def right(self) -> Vec3:
        return self.rotation.rotate(Vec3.X)


@dataclass
class FpCamera:
    """First-person camera orientation and tilt state."""

    pitch: float = 0.0
    yaw: float = 0.0
    base_rotation: Quat = field(default_factory=Quat)
    target_tilt_angle: float = 0.0
    current_tilt_angle: float = 0.0
    tilt_direction: Vec3 = field(default_factory=Vec3)


@dataclass
class Player:
    """Movement state of the player."""

    current_height: float
    target_height: float
    grounded: bool = False
    sliding: bool = False
    slamming: bool = False
    slide_direction: Vec3 = field(default_factory=Vec3)


@dataclass
class Food:
    """A piece of food waiting to be eaten."""

    transform: Transform


@dataclass
class Ground:
    """The ground plane, colliding as a half-space along ``normal``."""

    transform: Transform = field(default_factory=Transform)
    normal: Vec3 = field(default_factory=lambda: Vec3.Y)


@dataclass
class Wall:
    """A fixed box-shaped wall."""

    transform: Transform
    size: Vec3

    @property
    def half_extents(self) -> Vec3:
        return self.size * 0.5