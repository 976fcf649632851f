"""Square 3x3 and 4x4 float matrices stored row by row."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar, Iterable, Iterator, Sequence, Tuple

from ogb.vectors import Vector2, Vector3, Vector4

Rows = Tuple[Tuple[float, ...], ...]


def _minor(rows: Rows, skip_row: int, skip_col: int) -> list[list[float]]:
    return [
        [value for j, value in enumerate(row) if j != skip_col]
        for i, row in enumerate(rows)
        if i != skip_row
    ]


def _determinant(rows: Sequence[Sequence[float]]) -> float:
    if len(rows) == 1:
        return rows[0][0]
    if len(rows) == 2:
        return rows[0][0] * rows[1][1] - rows[0][1] * rows[1][0]
    total = 0.0
    for col, value in enumerate(rows[0]):
        sign = -1.0 if col % 2 else 1.0
        sub = [[v for j, v in enumerate(row) if j != col] for row in rows[1:]]
        total += sign * value * _determinant(sub)
    return total


class _Matrix:
    """Shared behaviour of the square matrix types."""

    __slots__ = ()
    SIZE: ClassVar[int] = 0

    def __post_init__(self) -> None:
        size = type(self).SIZE
        rows = tuple(tuple(float(v) for v in row) for row in self.rows)
        if len(rows) != size or any(len(row) != size for row in rows):
            raise ValueError(f"{type(self).__name__} needs {size}x{size} values")
        object.__setattr__(self, "rows", rows)

    @classmethod
    def from_data(cls, values: Iterable[float]):
        """Build a matrix from its values in row-major order."""
        flat = [float(v) for v in values]
        size = cls.SIZE
        if len(flat) != size * size:
            raise ValueError(f"{cls.__name__} needs {size * size} values")
        return cls(tuple(tuple(flat[i * size:(i + 1) * size]) for i in range(size)))

    @classmethod
    def _diagonal(cls, value: float):
        size = cls.SIZE
        return cls(
            tuple(
                tuple(float(value) if i == j else 0.0 for j in range(size))
                for i in range(size)
            )
        )

    @property
    def data(self) -> Tuple[float, ...]:
        """All values in row-major order."""
        return tuple(v for row in self.rows for v in row)

    def __getitem__(self, index: int) -> Tuple[float, ...]:
        return self.rows[index]

    def __iter__(self) -> Iterator[Tuple[float, ...]]:
        return iter(self.rows)

    def _with(self, updates: dict[tuple[int, int], float]):
        rows = [list(row) for row in self.rows]
        for (i, j), value in updates.items():
            rows[i][j] = value
        return type(self)(tuple(tuple(row) for row in rows))

    def _mul(self, other):
        size = type(self).SIZE
        cols = list(zip(*other.rows))
        return type(self)(
            tuple(
                tuple(sum(a * b for a, b in zip(self.rows[i], cols[j])) for j in range(size))
                for i in range(size)
            )
        )

    def _apply(self, components: Sequence[float]) -> list[float]:
        return [sum(a * b for a, b in zip(row, components)) for row in self.rows]

    def _inverted(self):
        size = type(self).SIZE
        rows = self.rows
        adjugate = [[0.0] * size for _ in range(size)]
        for i in range(size):
            for j in range(size):
                sign = -1.0 if (i + j) % 2 else 1.0
                # Transposed cofactor.
                adjugate[j][i] = sign * _determinant(_minor(rows, i, j))
        det = sum(rows[0][k] * adjugate[k][0] for k in range(size))
        if det == 0:
            return type(self)._diagonal(0.0)
        factor = 1.0 / det
        return type(self)(tuple(tuple(v * factor for v in row) for row in adjugate))


@dataclass(frozen=True, slots=True)
class Matrix4(_Matrix):
    """A 4x4 matrix; translations live in the last column."""

    rows: Rows
    SIZE: ClassVar[int] = 4

    @classmethod
    def scalar(cls, value: float) -> "Matrix4":
        """A matrix with ``value`` on the diagonal and zeros elsewhere."""
        return cls._diagonal(value)

    @classmethod
    def identity(cls) -> "Matrix4":
        return cls._diagonal(1.0)

    @classmethod
    def make_translation(cls, translation: Vector3) -> "Matrix4":
        return cls.identity()._with(
            {(0, 3): translation.x, (1, 3): translation.y, (2, 3): translation.z}
        )

    @classmethod
    def make_rotation(cls, axis: Vector3, radians: float) -> "Matrix4":
        """Rotation about ``axis``, which is expected to be of unit length."""
        c = math.cos(radians)
        s = math.sin(radians)
        t = 1.0 - c
        x, y, z = axis.x, axis.y, axis.z
        return cls.identity()._with(
            {
                (0, 0): c + x * x * t,
                (0, 1): x * y * t + z * s,
                (0, 2): x * z * t - y * s,
                (1, 0): y * x * t - z * s,
                (1, 1): c + y * y * t,
                (1, 2): y * z * t + x * s,
                (2, 0): z * x * t + y * s,
                (2, 1): z * y * t - x * s,
                (2, 2): c + z * z * t,
            }
        )

    @classmethod
    def make_rotation_z(cls, radians: float) -> "Matrix4":
        return cls.make_rotation(Vector3(0, 0, 1), radians)

    @classmethod
    def make_scale(cls, scale: Vector3) -> "Matrix4":
        return cls.identity()._with({(0, 0): scale.x, (1, 1): scale.y, (2, 2): scale.z})

    @classmethod
    def orthographic_projection(
        cls, left: float, right: float, bottom: float, top: float, near: float, far: float
    ) -> "Matrix4":
        return cls.identity()._with(
            {
                (0, 0): 2.0 / (right - left),
                (1, 1): 2.0 / (top - bottom),
                (2, 2): -2.0 / (far - near),
                (0, 3): -(right + left) / (right - left),
                (1, 3): -(top + bottom) / (top - bottom),
                (2, 3): -(far + near) / (far - near),
            }
        )

    def __matmul__(self, other):
        if isinstance(other, Matrix4):
            return self._mul(other)
        if isinstance(other, Vector4):
            return self.transform(other)
        return NotImplemented

    def translate(self, translation: Vector3) -> "Matrix4":
        return self @ Matrix4.make_translation(translation)

    def rotate(self, axis: Vector3, radians: float) -> "Matrix4":
        return self @ Matrix4.make_rotation(axis, radians)

    def rotate_z(self, radians: float) -> "Matrix4":
        return self @ Matrix4.make_rotation_z(radians)

    def scale(self, scale: Vector3) -> "Matrix4":
        return self @ Matrix4.make_scale(scale)

    def transform(self, v: Vector4) -> Vector4:
        return Vector4(*self._apply(tuple(v)))

    def inverse(self) -> "Matrix4":
        """The inverse matrix, or the zero matrix when it is singular."""
        return self._inverted()


@dataclass(frozen=True, slots=True)
class Matrix3(_Matrix):
    """A 3x3 matrix for 2D transforms; translations live in the last column."""

    rows: Rows
    SIZE: ClassVar[int] = 3

    @classmethod
    def scalar(cls, value: float) -> "Matrix3":
        """A matrix with ``value`` on the diagonal and zeros elsewhere."""
        return cls._diagonal(value)

    @classmethod
    def identity(cls) -> "Matrix3":
        return cls._diagonal(1.0)

    @classmethod
    def make_translation(cls, translation: Vector2) -> "Matrix3":
        return cls.identity()._with({(0, 2): translation.x, (1, 2): translation.y})

    @classmethod
    def make_rotation(cls, radians: float) -> "Matrix3":
        c = math.cos(radians)
        s = math.sin(radians)
        return cls.identity()._with({(0, 0): c, (0, 1): -s, (1, 0): s, (1, 1): c})

    @classmethod
    def make_scale(cls, scale: Vector2) -> "Matrix3":
        return cls.identity()._with({(0, 0): scale.x, (1, 1): scale.y})

    def __matmul__(self, other):
        if isinstance(other, Matrix3):
            return self._mul(other)
        if isinstance(other, Vector3):
            return self.transform(other)
        return NotImplemented

    def translate(self, translation: Vector2) -> "Matrix3":
        return self @ Matrix3.make_translation(translation)

    def rotate(self, radians: float) -> "Matrix3":
        return self @ Matrix3.make_rotation(radians)

    def scale(self, scale: Vector2) -> "Matrix3":
        return self @ Matrix3.make_scale(scale)

    def transform(self, v: Vector3) -> Vector3:
        return Vector3(*self._apply(tuple(v)))

    def inverse(self) -> "Matrix3":
        """The inverse matrix, or the zero matrix when it is singular."""
        return self._inverted()

    def to_matrix4(self) -> Matrix4:
        """Embed as a 2D transform in a 4x4 matrix, leaving the z row and column as identity."""
        m = self.rows
        return Matrix4.identity()._with(
            {
                (0, 0): m[0][0],
                (0, 1): m[0][1],
                (0, 3): m[0][2],
                (1, 0): m[1][0],
                (1, 1): m[1][1],
                (1, 3): m[1][2],
                (3, 0): m[2][0],
                (3, 1): m[2][1],
                (3, 3): m[2][2],
            }
        )