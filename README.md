# amarillo

This package holds the engine-independent core of a small 3D engine, written in pure Python. It has no runtime dependencies.

## Modules

- `amarillo.vectors` holds the vector types and functions.
  - Types: `Vec2`, `Vec3` and `Vec4`. They are dataclasses with component-wise `+`, `-`, `*` and `/` against scalars and against vectors of the same kind. `Vec3.set` assigns all three components in place.
  - Functions: `dot`, `length`, `length2`, `mix`, `normalize`, `reflect`, `refract`, `rotate_vec2` (angle in degrees) and `cross`.
- `amarillo.matrices` holds the matrix types and transform builders.
  - Types: `Mat2`, `Mat3` and `Mat4`. They are column-major and default to the identity. Each has:
    - `from_columns`, `inverse` (which raises `ZeroDivisionError` when the matrix is singular), `transpose` and `determinant`;
    - `at(row, column)` and `elements`;
    - `@` against a matrix or a vector of matching size.
  - `Mat4.translation()` returns the last column as a `Vec3`.
  - Transform builders: `look`, `ortho`, `perspective`, `rotation` (angle in degrees), `scaling` and `translation`.
  - `rotate_vec3` rotates a point about an axis.
  - Constants: `BIAS_MATRIX`, `BIAS_MATRIX_INVERSE` and `IDENTITY_MATRIX`.
- `amarillo.primitives` holds the shapes.
  - Shapes: `Primitive` (a point), `Cube`, `Cylinder`, `Line` and `Plane` (a ±200 unit ground grid). Each has a `type` from `PrimitiveType` and a `Mat4` `transform`.
  - `set_pos`, `set_rotation` (angle in radians) and `scale` post-multiply the transform.
  - `vertices()` returns the shape's local-space vertices in draw order.
- `amarillo.culling` holds the frustum and box helpers.
  - Frustum tests: `ClipPlane`, `aabb_corners` and `is_inside_frustum`. A box counts as culled when all eight of its corners lie on the positive side of any one plane.
  - `bounding_box_lines` and `debug_box_lines` turn eight corners into line segments.
  - `checker_image` builds an RGBA checkerboard made of 8-pixel squares.
  - `cube_mesh` returns the vertices and triangle indices of a cube spanning -1 to 1.
- `amarillo.paths` holds the file-system helpers.
  - Checks: `folder_exists`, `file_exists` and `is_directory`.
  - File operations:
    - `create_folder`, `delete_path`, `copy_file`, `save_file` and `load_file`;
    - `duplicate_file` and `duplicate_into_folder`;
    - `rename_file`.
  - Directory listing and naming: `discover_files` and `unique_name`. `unique_name` tries `name`, then `name_01` up to `name_49`.
  - Path strings:
    - `split_file_path`, which returns directory, stem and extension;
    - `has_extension` and `has_any_extension`;
    - `normalize_path` and `unnormalize_path`;
    - `resolve_texture_path`.
- `amarillo.timing` holds the timer and random numbers.
  - `Timer` counts milliseconds and accepts an optional clock. `stop()` and `pause()` reset the reading to zero.
  - `random_int_range(first, last)` returns a random integer in the inclusive range.
  - `random_int()` returns a random integer in `[0, 429496]`.

## Example

```python
from amarillo.vectors import Vec3, Vec4
from amarillo.matrices import perspective, look, translation
from amarillo.culling import aabb_corners, is_inside_frustum, ClipPlane

proj = perspective(60.0, 16 / 9, 0.1, 100.0)
view = look(Vec3(0, 8, -9), Vec3(0, 0, 0), Vec3(0, 1, 0))
moved = translation(1, 2, 3) @ Vec4(0, 0, 0, 1)   # Vec4(x=1.0, y=2.0, z=3.0, w=1.0)

corners = aabb_corners(Vec3(-1, -1, -1), Vec3(1, 1, 1))
planes = [ClipPlane(Vec3(0, 0, 1), 5.0)]
print(is_inside_frustum(planes, corners))   # True
```

## What it does not do

The package does not draw anything. Its primitives and culling helpers produce vertex lists, line segments and true/false answers, and a renderer is needed to display them.

The package has no resource management:
- it does not import models or images;
- it has no asset library;
- it writes no `.meta` files.

## Tests

```
pip install -e .[test]
pytest
```