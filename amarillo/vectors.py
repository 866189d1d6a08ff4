"""Small 2, 3 and 4 component float vectors and the usual vector helpers."""

from __future__ import annotations

import math
import operator
from dataclasses import dataclass, fields
from typing import Callable, Iterator, TypeVar

_V = TypeVar("_V", bound="_Vector")
_Scalar = (int, float)


class _Vector:
    """Component-wise arithmetic shared by the vector classes."""

    def __iter__(self) -> Iterator[float]:
        return (getattr(self, f.name) for f in fields(self))

    def __len__(self) -> int:
        return len(fields(self))

    def _combine(self: _V, other: object, op: Callable[[float, float], float]) -> _V:
        if isinstance(other, _Scalar):
            return type(self)(*(op(a, other) for a in self))
        if type(other) is type(self):
            return type(self)(*(op(a, b) for a, b in zip(self, other)))
        return NotImplemented

    def _rcombine(self: _V, other: object, op: Callable[[float, float], float]) -> _V:
        if isinstance(other, _Scalar):
            return type(self)(*(op(other, a) for a in self))
        return NotImplemented

    def __add__(self, other):
        return self._combine(other, operator.add)

    def __radd__(self, other):
        return self._rcombine(other, operator.add)

    def __sub__(self, other):
        return self._combine(other, operator.sub)

    def __rsub__(self, other):
        return self._rcombine(other, operator.sub)

    def __mul__(self, other):
        return self._combine(other, operator.mul)

    def __rmul__(self, other):
        return self._rcombine(other, operator.mul)

    def __truediv__(self, other):
        return self._combine(other, operator.truediv)

    def __rtruediv__(self, other):
        return self._rcombine(other, operator.truediv)

    def __neg__(self):
        return type(self)(*(-a for a in self))

    def __pos__(self):
        return type(self)(*self)


@dataclass
class Vec2(_Vector):
    """Two-component vector."""

    x: float = 0.0
    y: float = 0.0

    @property
    def r(self) -> float:
        return self.x

    @property
    def g(self) -> float:
        return self.y


@dataclass
class Vec3(_Vector):
    """Three-component vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def set(self, x: float, y: float, z: float) -> None:
        """Assign all three components in place."""
        self.x, self.y, self.z = x, y, z

    @property
    def r(self) -> float:
        return self.x

    @property
    def g(self) -> float:
        return self.y

    @property
    def b(self) -> float:
        return self.z


@dataclass
class Vec4(_Vector):
    """Four-component vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0

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


def _check_same(u: _Vector, v: _Vector) -> None:
    if type(u) is not type(v) or not isinstance(u, _Vector):
        raise TypeError(
            f"expected two vectors of the same kind, got {type(u).__name__} and {type(v).__name__}"
        )


def dot(u: _V, v: _V) -> float:
    """Dot product of two vectors of the same dimension."""
    _check_same(u, v)
    return sum(a * b for a, b in zip(u, v))


def length2(u: _Vector) -> float:
    """Squared length of a vector."""
    return sum(a * a for a in u)


def length(u: _Vector) -> float:
    """Euclidean length of a vector."""
    return math.sqrt(length2(u))


def mix(u: _V, v: _V, a: float) -> _V:
    """Linear interpolation between u (a=0) and v (a=1)."""
    _check_same(u, v)
    return u * (1.0 - a) + v * a


def normalize(u: _V) -> _V:
    """Unit vector in the direction of u; a zero vector raises ZeroDivisionError."""
    return u / length(u)


def reflect(i: _V, n: _V) -> _V:
    """Reflect the incident vector i about the normal n."""
    return i - 2.0 * dot(n, i) * n


def refract(i: _V, n: _V, eta: float) -> _V:
    """Refraction of i through a surface with normal n; zero on total internal reflection."""
    ndoti = dot(n, i)
    k = 1.0 - eta * eta * (1.0 - ndoti * ndoti)
    if k >= 0.0:
        return eta * i - n * (eta * ndoti + math.sqrt(k))
    return type(i)()


def rotate_vec2(u: Vec2, angle: float) -> Vec2:
    """Rotate a 2D vector counter-clockwise by angle degrees."""
    radians = math.radians(angle)
    c, s = math.cos(radians), math.sin(radians)
    return Vec2(u.x * c - u.y * s, u.x * s + u.y * c)


def cross(u: Vec3, v: Vec3) -> Vec3:
    """Cross product of two 3D vectors."""
    if not (isinstance(u, Vec3) and isinstance(v, Vec3)):
        raise TypeError("cross product needs two Vec3 values")
    return Vec3(
        u.y * v.z - u.z * v.y,
        u.z * v.x - u.x * v.z,
        u.x * v.y - u.y * v.x,
    )