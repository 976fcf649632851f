"""Small fixed-size vectors of floats and integers."""

from __future__ import annotations

import math
from dataclasses import dataclass, fields
from typing import Callable, Iterator, Union

Number = Union[int, float]


def _trunc_div(a: int, b: int) -> int:
    """Integer division that rounds toward zero."""
    if b == 0:
        raise ZeroDivisionError("integer vector division by zero")
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b >= 0) else -quotient


class _Vector:
    """Shared behaviour of every vector type."""

    __slots__ = ()
    _coerce: Callable[[Number], Number] = float

    def __post_init__(self) -> None:
        coerce = type(self)._coerce
        for f in fields(self):
            object.__setattr__(self, f.name, coerce(getattr(self, f.name)))

    def __iter__(self) -> Iterator[Number]:
        return (getattr(self, f.name) for f in fields(self))

    def __len__(self) -> int:
        return len(fields(self))

    def __getitem__(self, index: int) -> Number:
        return tuple(self)[index]

    @classmethod
    def _fill(cls, a):
        return cls(*([a] * len(fields(cls))))

    def _scalar_operand(self, s: Number) -> Number:
        return type(self)._coerce(s)

    def _combine(self, other, op):
        if isinstance(other, type(self)):
            return type(self)(*(op(a, b) for a, b in zip(self, other)))
        if isinstance(other, (int, float)) and not isinstance(other, bool):
            s = self._scalar_operand(other)
            return type(self)(*(op(a, s) for a in self))
        return NotImplemented

    def __add__(self, other):
        return self._combine(other, lambda a, b: a + b)

    def __sub__(self, other):
        return self._combine(other, lambda a, b: a - b)

    def __mul__(self, other):
        return self._combine(other, lambda a, b: a * b)

    __rmul__ = __mul__

    def __neg__(self):
        return type(self)(*(-a for a in self))

    def __abs__(self):
        return type(self)(*(abs(a) for a in self))

    def _length(self) -> float:
        return math.sqrt(sum(a * a for a in self))

    def _average(self) -> float:
        return sum(self) / len(self)


class _FloatVector(_Vector):
    __slots__ = ()
    _coerce = float

    def __truediv__(self, other):
        return self._combine(other, lambda a, b: a / b)

    def _normalized(self):
        length = self._length()
        if length == 0:
            return type(self)._fill(0)
        return self / length

    def _dot(self, other) -> float:
        if not isinstance(other, type(self)):
            raise TypeError(f"cannot take dot product with {type(other).__name__}")
        return sum(a * b for a, b in zip(self, other))


class _IntVector(_Vector):
    __slots__ = ()
    _coerce = int

    def __truediv__(self, other):
        """Componentwise integer division, rounding toward zero."""
        return self._combine(other, _trunc_div)

    def _normalized(self):
        length = self._length()
        if length == 0:
            return type(self)._fill(0)
        return self / int(length)


@dataclass(frozen=True, slots=True)
class Vector2(_FloatVector):
    x: float = 0.0
    y: float = 0.0

    @classmethod
    def scalar(cls, a) -> "Vector2":
        """A vector with every component set to ``a``."""
        return cls._fill(a)

    def length(self) -> float:
        """Euclidean length."""
        return self._length()

    def average(self) -> float:
        """Mean of the components."""
        return self._average()

    def normalize(self) -> "Vector2":
        """Unit vector in the same direction, or the zero vector."""
        return self._normalized()

    def dot(self, other: "Vector2") -> float:
        """Dot product with another Vector2."""
        return self._dot(other)

    def cross(self, other: "Vector2") -> float:
        """The z component of the 3D cross product."""
        return self.x * other.y - self.y * other.x

    def to_int(self) -> "Vector2i":
        return Vector2i(self.x, self.y)


@dataclass(frozen=True, slots=True)
class Vector3(_FloatVector):
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @classmethod
    def scalar(cls, a) -> "Vector3":
        """A vector with every component set to ``a``."""
        return cls._fill(a)

    def length(self) -> float:
        """Euclidean length."""
        return self._length()

    def average(self) -> float:
        """Mean of the components."""
        return self._average()

    def normalize(self) -> "Vector3":
        """Unit vector in the same direction, or the zero vector."""
        return self._normalized()

    def dot(self, other: "Vector3") -> float:
        """Dot product with another Vector3."""
        return self._dot(other)

    @property
    def r(self) -> float:
        return self.x

    @property
    def g(self) -> float:
        return self.y

    @property
    def b(self) -> float:
        return self.z

    @property
    def xy(self) -> Vector2:
        return Vector2(self.x, self.y)

    @property
    def yz(self) -> Vector2:
        return Vector2(self.y, self.z)

    def cross(self, other: "Vector3") -> "Vector3":
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def to_int(self) -> "Vector3i":
        return Vector3i(self.x, self.y, self.z)


@dataclass(frozen=True, slots=True)
class Vector4(_FloatVector):
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0

    @classmethod
    def scalar(cls, a) -> "Vector4":
        """A vector with every component set to ``a``."""
        return cls._fill(a)

    def length(self) -> float:
        """Euclidean length."""
        return self._length()

    def average(self) -> float:
        """Mean of the components."""
        return self._average()

    def normalize(self) -> "Vector4":
        """Unit vector in the same direction, or the zero vector."""
        return self._normalized()

    def dot(self, other: "Vector4") -> float:
        """Dot product with another Vector4."""
        return self._dot(other)

    @property
    def r(self) -> float:
        return self.x

    @property
    def g(self) -> float:
        return self.y

    @property
    def b(self) -> float:
        return self.z

    @property
    def a(self) -> float:
        return self.w

    @property
    def x1(self) -> float:
        return self.x

    @property
    def y1(self) -> float:
        return self.y

    @property
    def x2(self) -> float:
        return self.z

    @property
    def y2(self) -> float:
        return self.w

    @property
    def left(self) -> float:
        return self.x

    @property
    def bottom(self) -> float:
        return self.y

    @property
    def right(self) -> float:
        return self.z

    @property
    def top(self) -> float:
        return self.w

    @property
    def xy(self) -> Vector2:
        return Vector2(self.x, self.y)

    @property
    def zw(self) -> Vector2:
        return Vector2(self.z, self.w)

    @property
    def xyz(self) -> Vector3:
        return Vector3(self.x, self.y, self.z)

    @property
    def yzw(self) -> Vector3:
        return Vector3(self.y, self.z, self.w)

    def to_int(self) -> "Vector4i":
        return Vector4i(self.x, self.y, self.z, self.w)


@dataclass(frozen=True, slots=True)
class Vector2i(_IntVector):
    x: int = 0
    y: int = 0

    @classmethod
    def scalar(cls, a) -> "Vector2i":
        """A vector with every component set to ``a``."""
        return cls._fill(a)

    def length(self) -> float:
        """Euclidean length."""
        return self._length()

    def average(self) -> float:
        """Mean of the components."""
        return self._average()

    def normalize(self) -> "Vector2i":
        """Divide by the truncated length; the zero vector stays zero."""
        return self._normalized()

    def to_float(self) -> Vector2:
        return Vector2(self.x, self.y)


@dataclass(frozen=True, slots=True)
class Vector3i(_IntVector):
    x: int = 0
    y: int = 0
    z: int = 0

    @classmethod
    def scalar(cls, a) -> "Vector3i":
        """A vector with every component set to ``a``."""
        return cls._fill(a)

    def length(self) -> float:
        """Euclidean length."""
        return self._length()

    def average(self) -> float:
        """Mean of the components."""
        return self._average()

    def normalize(self) -> "Vector3i":
        """Divide by the truncated length; the zero vector stays zero."""
        return self._normalized()

    @property
    def xy(self) -> Vector2i:
        return Vector2i(self.x, self.y)

    @property
    def yz(self) -> Vector2i:
        return Vector2i(self.y, self.z)

    def to_float(self) -> Vector3:
        return Vector3(self.x, self.y, self.z)


@dataclass(frozen=True, slots=True)
class Vector4i(_IntVector):
    x: int = 0
    y: int = 0
    z: int = 0
    w: int = 0

    @classmethod
    def scalar(cls, a) -> "Vector4i":
        """A vector with every component set to ``a``."""
        return cls._fill(a)

    def length(self) -> float:
        """Euclidean length."""
        return self._length()

    def average(self) -> float:
        """Mean of the components."""
        return self._average()

    def normalize(self) -> "Vector4i":
        """Divide by the truncated length; the zero vector stays zero."""
        return self._normalized()

    @property
    def xy(self) -> Vector2i:
        return Vector2i(self.x, self.y)

    @property
    def zw(self) -> Vector2i:
        return Vector2i(self.z, self.w)

    @property
    def xyz(self) -> Vector3i:
        return Vector3i(self.x, self.y, self.z)

    def to_float(self) -> Vector4:
        return Vector4(self.x, self.y, self.z, self.w)


for _cls in (Vector2, Vector3, Vector4, Vector2i, Vector3i, Vector4i):
    _cls.ZERO = _cls.scalar(0)
    _cls.ONE = _cls.scalar(1)
del _cls


def rotate_point_around_pivot(point: Vector2, pivot: Vector2, rotation_radians: float) -> Vector2:
    """Rotate ``point`` counter-clockwise around ``pivot``."""
    s = math.sin(rotation_radians)
    c = math.cos(rotation_radians)
    local = point - pivot
    rotated = Vector2(local.x * c - local.y * s, local.x * s + local.y * c)
    return rotated + pivot