"""Frustum culling, bounding-box line lists and the built-in checker and cube data."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

from amarillo.vectors import Vec3, dot

CHECKERS_WIDTH = 64
CHECKERS_HEIGHT = 64

_CUBE_VERTICES = (
    (-1, -1, -1),
    (1, -1, -1),
    (1, 1, -1),
    (-1, 1, -1),
    (-1, -1, 1),
    (1, -1, 1),
    (1, 1, 1),
    (-1, 1, 1),
)

_CUBE_INDICES = (
    0, 1, 3, 3, 1, 2,
    1, 5, 2, 2, 5, 6,
    5, 4, 6, 6, 4, 7,
    4, 0, 7, 7, 0, 3,
    3, 2, 7, 7, 2, 6,
    4, 5, 0, 0, 5, 1,
)

_BOUNDING_BOX_ORDER = (
    0, 2, 2,
    6, 6, 4,
    4, 0, 0,
    1, 1, 3,
    3, 2, 4,
    5, 6, 7,
    5, 7, 3,
    7, 1, 5,
)

_DEBUG_BOX_ORDER = (
    0, 1, 5, 4,
    1, 5, 7, 3,
    4, 0, 2, 6,
    5, 4, 6, 7,
    0, 1, 3, 2,
    3, 7, 6, 2,
    0, 4, 5, 1,
)

Segment = tuple[Vec3, Vec3]


@dataclass(frozen=True)
class ClipPlane:
    """Plane of points p with dot(normal, p) == d; the normal points to the positive side."""

    normal: Vec3
    d: float = 0.0

    def signed_distance(self, point: Vec3) -> float:
        """dot(normal, point) - d, scaled by the length of the normal."""
        return dot(self.normal, _as_vec3(point)) - self.d

    def is_on_positive_side(self, point: Vec3) -> bool:
        """True if the point lies on the plane or on the side the normal points to."""
        return self.signed_distance(point) >= 0.0


def _as_vec3(point: Sequence[float] | Vec3) -> Vec3:
    if isinstance(point, Vec3):
        return point
    x, y, z = point
    return Vec3(float(x), float(y), float(z))


def checker_image(
    width: int = CHECKERS_WIDTH, height: int = CHECKERS_HEIGHT
) -> list[list[tuple[int, int, int, int]]]:
    """RGBA checkerboard of 8-pixel squares, indexed image[i][j] for i < width, j < height."""
    if width < 0 or height < 0:
        raise ValueError(f"image size must not be negative: {width}x{height}")
    image = []
    for i in range(width):
        row = []
        for j in range(height):
            c = (((i & 0x8) == 0) ^ ((j & 0x8) == 0)) * 255
            row.append((c, c, c, 255))
        image.append(row)
    return image


def aabb_corners(min_point: Vec3, max_point: Vec3) -> list[Vec3]:
    """The eight corners of a box; corner k takes max x, y, z where bits 2, 1, 0 of k are set."""
    lo, hi = _as_vec3(min_point), _as_vec3(max_point)
    return [
        Vec3(
            hi.x if k & 4 else lo.x,
            hi.y if k & 2 else lo.y,
            hi.z if k & 1 else lo.z,
        )
        for k in range(8)
    ]


def is_inside_frustum(planes: Iterable[ClipPlane], corners: Sequence[Vec3]) -> bool:
    """False if every corner lies on the positive (outer) side of one of the planes."""
    points = [_as_vec3(c) for c in corners]
    for plane in planes:
        if all(plane.is_on_positive_side(p) for p in points):
            return False
    return True


def _check_corners(corners: Sequence[Vec3]) -> list[Vec3]:
    points = [_as_vec3(c) for c in corners]
    if len(points) != 8:
        raise ValueError(f"a box needs 8 corners, got {len(points)}")
    return points


def _segments(points: list[Vec3], order: Sequence[int]) -> list[Segment]:
    it = iter(order)
    return [(points[a], points[b]) for a, b in zip(it, it)]


def bounding_box_lines(corners: Sequence[Vec3]) -> list[Segment]:
    """The twelve edges of a box given by its eight corners, as line segments."""
    return _segments(_check_corners(corners), _BOUNDING_BOX_ORDER)


def debug_box_lines(corners: Sequence[Vec3]) -> list[Segment]:
    """The line segments the debug box outline is drawn with, face by face."""
    return _segments(_check_corners(corners), _DEBUG_BOX_ORDER)


def cube_mesh() -> tuple[list[Vec3], list[int]]:
    """Vertices and triangle indices of the cube spanning -1 to 1 on every axis."""
    vertices = [Vec3(float(x), float(y), float(z)) for x, y, z in _CUBE_VERTICES]
    return vertices, list(_CUBE_INDICES)