"""Simple shapes with a transform, described by the vertices they are drawn with."""

from __future__ import annotations

import enum
import math

from amarillo.matrices import Mat4, rotation, scaling, translation
from amarillo.vectors import Vec3

WHITE = (1.0, 1.0, 1.0, 1.0)

_CYLINDER_SEGMENTS = 30
_GRID_HALF_EXTENT = 200.0


class PrimitiveType(enum.IntEnum):
    """Kind of primitive shape."""

    POINT = 0
    LINE = 1
    PLANE = 2
    CUBE = 3
    SPHERE = 4
    CYLINDER = 5


class Primitive:
    """A point shape with a transform, colour and draw flags."""

    _type = PrimitiveType.POINT

    def __init__(self) -> None:
        self.transform = Mat4()
        self.color = WHITE
        self.axis = False
        self.wire = False

    @property
    def type(self) -> PrimitiveType:
        return self._type

    def set_pos(self, x: float, y: float, z: float) -> None:
        """Post-multiply the transform by a translation."""
        self.transform = self.transform @ translation(x, y, z)

    def set_rotation(self, angle: float, axis: Vec3) -> None:
        """Post-multiply the transform by a rotation of angle radians about axis."""
        self.transform = self.transform @ rotation(math.degrees(angle), axis)

    def scale(self, x: float, y: float, z: float) -> None:
        """Post-multiply the transform by a scale."""
        self.transform = self.transform @ scaling(x, y, z)

    def vertices(self) -> list[Vec3]:
        """Vertices in draw order, in local space."""
        return [Vec3(0.0, 0.0, 0.0)]


class Cube(Primitive):
    """Axis-aligned box centred on the origin, drawn as six quads."""

    _type = PrimitiveType.CUBE

    def __init__(self, size_x: float = 1.0, size_y: float = 1.0, size_z: float = 1.0) -> None:
        super().__init__()
        self.size = Vec3(size_x, size_y, size_z)

    def vertices(self) -> list[Vec3]:
        sx, sy, sz = self.size.x * 0.5, self.size.y * 0.5, self.size.z * 0.5
        corners = [
            (-sx, -sy, sz), (sx, -sy, sz), (sx, sy, sz), (-sx, sy, sz),
            (sx, -sy, -sz), (-sx, -sy, -sz), (-sx, sy, -sz), (sx, sy, -sz),
            (sx, -sy, sz), (sx, -sy, -sz), (sx, sy, -sz), (sx, sy, sz),
            (-sx, -sy, -sz), (-sx, -sy, sz), (-sx, sy, sz), (-sx, sy, -sz),
            (-sx, sy, sz), (sx, sy, sz), (sx, sy, -sz), (-sx, sy, -sz),
            (-sx, -sy, -sz), (sx, -sy, -sz), (sx, -sy, sz), (-sx, -sy, sz),
        ]
        return [Vec3(*c) for c in corners]


class Cylinder(Primitive):
    """Cylinder along the x axis: bottom cap, top cap and the side strip."""

    _type = PrimitiveType.CYLINDER

    def __init__(self, radius: float = 1.0, height: float = 1.0) -> None:
        super().__init__()
        self.radius = radius
        self.height = height

    def _ring_point(self, x: float, degrees: int) -> Vec3:
        a = math.radians(degrees)
        return Vec3(x, self.radius * math.cos(a), self.radius * math.sin(a))

    def vertices(self) -> list[Vec3]:
        step = 360 // _CYLINDER_SEGMENTS
        half = self.height * 0.5
        bottom = [self._ring_point(-half, i) for i in range(360, -1, -step)]
        top = [self._ring_point(half, i) for i in range(0, 361, step)]
        cover = [
            point
            for i in range(0, 480, step)
            for point in (self._ring_point(half, i), self._ring_point(-half, i))
        ]
        return bottom + top + cover


class Line(Primitive):
    """Segment from the origin to a destination point."""

    _type = PrimitiveType.LINE

    def __init__(self, x: float = 1.0, y: float = 1.0, z: float = 1.0) -> None:
        super().__init__()
        self.origin = Vec3(0.0, 0.0, 0.0)
        self.destination = Vec3(x, y, z)

    def vertices(self) -> list[Vec3]:
        return [Vec3(*self.origin), Vec3(*self.destination)]


class Plane(Primitive):
    """Ground grid of unit-spaced lines on y = 0."""

    _type = PrimitiveType.PLANE

    def __init__(self, x: float = 0.0, y: float = 1.0, z: float = 0.0, d: float = 1.0) -> None:
        super().__init__()
        self.normal = Vec3(x, y, z)
        self.constant = d

    def vertices(self) -> list[Vec3]:
        d = _GRID_HALF_EXTENT
        points: list[Vec3] = []
        for step in range(int(2 * d) + 1):
            i = -d + step
            points += [Vec3(i, 0.0, -d), Vec3(i, 0.0, d), Vec3(-d, 0.0, i), Vec3(d, 0.0, i)]
        return points