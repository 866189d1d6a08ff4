"""Column-major 2x2, 3x3 and 4x4 float matrices and the usual transform builders."""

from __future__ import annotations

import math
from typing import Iterator, Sequence, TypeVar

from amarillo.vectors import Vec2, Vec3, Vec4, cross, dot, normalize

_M = TypeVar("_M", bound="_Matrix")


class _Matrix:
    """Square matrix stored column-major: element (row r, column c) is at c * n + r."""

    __slots__ = ("_m",)
    _n = 0
    _vector: type = object

    def __init__(self, *values: float) -> None:
        n = self._n
        if not values:
            values = tuple(1.0 if r == c else 0.0 for c in range(n) for r in range(n))
        elif len(values) != n * n:
            raise ValueError(f"{type(self).__name__} needs {n * n} values, got {len(values)}")
        self._m = tuple(float(v) for v in values)

    @classmethod
    def _build_from_columns(cls: type[_M], columns: Sequence[Sequence[float]]) -> _M:
        for column in columns:
            if len(column) != cls._n:
                raise ValueError(f"{cls.__name__} columns need {cls._n} components")
        return cls(*(value for column in columns for value in column))

    @classmethod
    def from_matrix(cls: type[_M], other: _Matrix) -> _M:
        """Copy the shared upper-left block of another matrix; the rest is identity."""
        n, k = cls._n, min(cls._n, other._n)
        values = [
            other.at(r, c) if r < k and c < k else (1.0 if r == c else 0.0)
            for c in range(n)
            for r in range(n)
        ]
        return cls(*values)

    @property
    def elements(self) -> tuple[float, ...]:
        """All elements in column-major order."""
        return self._m

    def at(self, row: int, column: int) -> float:
        """Element at the given row and column."""
        return self._m[column * self._n + row]

    def __getitem__(self, index: int) -> float:
        return self._m[index]

    def __iter__(self) -> Iterator[float]:
        return iter(self._m)

    def __len__(self) -> int:
        return len(self._m)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._m == other._m

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._m))

    def __repr__(self) -> str:
        return f"{type(self).__name__}{self._m!r}"

    def __matmul__(self, other):
        n = self._n
        if type(other) is type(self):
            return type(self)(
                *(
                    sum(self.at(r, k) * other.at(k, c) for k in range(n))
                    for c in range(n)
                    for r in range(n)
                )
            )
        if type(other) is self._vector:
            components = tuple(other)
            return self._vector(
                *(sum(self.at(r, k) * components[k] for k in range(n)) for r in range(n))
            )
        return NotImplemented

    __mul__ = __matmul__

    def transpose(self: _M) -> _M:
        """Return the transposed matrix."""
        n = self._n
        return type(self)(*(self.at(c, r) for c in range(n) for r in range(n)))

    def determinant(self) -> float:
        """Determinant by cofactor expansion along the first row."""
        return _determinant([[self.at(r, c) for c in range(self._n)] for r in range(self._n)])

    def inverse(self: _M) -> _M:
        """Return the inverse; a singular matrix raises ZeroDivisionError."""
        n = self._n
        grid = [[self.at(r, c) for c in range(n)] for r in range(n)]
        det = _determinant(grid)
        if det == 0.0:
            raise ZeroDivisionError(f"{type(self).__name__} is singular")
        values = []
        for c in range(n):
            for r in range(n):
                # inverse[r][c] = cofactor[c][r] / det
                sign = -1.0 if (r + c) % 2 else 1.0
                values.append(sign * _determinant(_minor(grid, c, r)) / det)
        return type(self)(*values)


def _minor(grid: list[list[float]], row: int, column: int) -> list[list[float]]:
    return [
        [value for c, value in enumerate(line) if c != column]
        for r, line in enumerate(grid)
        if r != row
    ]


def _determinant(grid: list[list[float]]) -> float:
    if len(grid) == 1:
        return grid[0][0]
    if len(grid) == 2:
        return grid[0][0] * grid[1][1] - grid[0][1] * grid[1][0]
    total = 0.0
    for c, value in enumerate(grid[0]):
        sign = -1.0 if c % 2 else 1.0
        total += sign * value * _determinant(_minor(grid, 0, c))
    return total


class Mat2(_Matrix):
    """2x2 matrix; the default is the identity."""

    __slots__ = ()
    _n = 2
    _vector = Vec2

    @classmethod
    def from_columns(cls, col1: Vec2, col2: Vec2) -> Mat2:
        """Build a matrix from its two columns."""
        return cls._build_from_columns((tuple(col1), tuple(col2)))

    def inverse(self) -> Mat2:
        """Return the inverse; a singular matrix raises ZeroDivisionError."""
        return super().inverse()

    def transpose(self) -> Mat2:
        """Return the transposed matrix."""
        return super().transpose()


class Mat3(_Matrix):
    """3x3 matrix; the default is the identity."""

    __slots__ = ()
    _n = 3
    _vector = Vec3

    @classmethod
    def from_columns(cls, col1: Vec3, col2: Vec3, col3: Vec3) -> Mat3:
        """Build a matrix from its three columns."""
        return cls._build_from_columns((tuple(col1), tuple(col2), tuple(col3)))

    def inverse(self) -> Mat3:
        """Return the inverse; a singular matrix raises ZeroDivisionError."""
        return super().inverse()

    def transpose(self) -> Mat3:
        """Return the transposed matrix."""
        return super().transpose()


class Mat4(_Matrix):
    """4x4 matrix; the default is the identity."""

    __slots__ = ()
    _n = 4
    _vector = Vec4

    @classmethod
    def from_columns(cls, col1: Vec4, col2: Vec4, col3: Vec4, col4: Vec4) -> Mat4:
        """Build a matrix from its four columns."""
        return cls._build_from_columns((tuple(col1), tuple(col2), tuple(col3), tuple(col4)))

    def inverse(self) -> Mat4:
        """Return the inverse; a singular matrix raises ZeroDivisionError."""
        return super().inverse()

    def transpose(self) -> Mat4:
        """Return the transposed matrix."""
        return super().transpose()

    def translation(self) -> Vec3:
        """Translation part (the last column) of an affine transform."""
        return Vec3(self._m[12], self._m[13], self._m[14])


def _mat4_with(updates: dict[int, float]) -> Mat4:
    values = list(Mat4().elements)
    for index, value in updates.items():
        values[index] = value
    return Mat4(*values)


def look(eye: Vec3, center: Vec3, up: Vec3) -> Mat4:
    """View matrix looking from eye towards center with the given up direction."""
    z = normalize(eye - center)
    x = normalize(cross(up, z))
    y = cross(z, x)
    return _mat4_with(
        {
            0: x.x, 1: y.x, 2: z.x,
            4: x.y, 5: y.y, 6: z.y,
            8: x.z, 9: y.z, 10: z.z,
            12: -dot(x, eye), 13: -dot(y, eye), 14: -dot(z, eye),
        }
    )


def ortho(left: float, right: float, bottom: float, top: float, n: float, f: float) -> Mat4:
    """Orthographic projection matrix."""
    return _mat4_with(
        {
            0: 2.0 / (right - left),
            5: 2.0 / (top - bottom),
            10: -2.0 / (f - n),
            12: -(right + left) / (right - left),
            13: -(top + bottom) / (top - bottom),
            14: -(f + n) / (f - n),
        }
    )


def perspective(fovy: float, aspect: float, n: float, f: float) -> Mat4:
    """Perspective projection with a vertical field of view of fovy degrees."""
    coty = 1.0 / math.tan(fovy * math.pi / 360.0)
    return _mat4_with(
        {
            0: coty / aspect,
            5: coty,
            10: (n + f) / (n - f),
            11: -1.0,
            14: 2.0 * n * f / (n - f),
            15: 0.0,
        }
    )


def rotation(angle: float, u: Vec3) -> Mat4:
    """Rotation of angle degrees about the axis u."""
    radians = math.radians(angle)
    v = normalize(u)
    c = 1.0 - math.cos(radians)
    s = math.sin(radians)
    return _mat4_with(
        {
            0: 1.0 + c * (v.x * v.x - 1.0),
            1: c * v.x * v.y + v.z * s,
            2: c * v.x * v.z - v.y * s,
            4: c * v.x * v.y - v.z * s,
            5: 1.0 + c * (v.y * v.y - 1.0),
            6: c * v.y * v.z + v.x * s,
            8: c * v.x * v.z + v.y * s,
            9: c * v.y * v.z - v.x * s,
            10: 1.0 + c * (v.z * v.z - 1.0),
        }
    )


def scaling(x: float, y: float, z: float) -> Mat4:
    """Scale matrix."""
    return _mat4_with({0: x, 5: y, 10: z})


def translation(x: float, y: float, z: float) -> Mat4:
    """Translation matrix."""
    return _mat4_with({12: x, 13: y, 14: z})


def rotate_vec3(u: Vec3, angle: float, v: Vec3) -> Vec3:
    """Rotate the point u by angle degrees about the axis v."""
    result = rotation(angle, v) @ Vec4(u.x, u.y, u.z, 1.0)
    return Vec3(result.x, result.y, result.z)


BIAS_MATRIX = Mat4(0.5, 0.0, 0.0, 0.0, 0.0, 0.5, 0.0, 0.0, 0.0, 0.0, 0.5, 0.0, 0.5, 0.5, 0.5, 1.0)
BIAS_MATRIX_INVERSE = Mat4(
    2.0, 0.0, 0.0, 0.0, 0.0, 2.0, 0.0, 0.0, 0.0, 0.0, 2.0, 0.0, -1.0, -1.0, -1.0, 1.0
)
IDENTITY_MATRIX = Mat4()