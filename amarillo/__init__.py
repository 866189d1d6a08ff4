"""Vector and matrix math, primitive shapes, frustum culling, file helpers and timing for a small 3D engine."""

__version__ = "0.1.0"