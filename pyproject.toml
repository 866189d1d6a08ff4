[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "amarillo"
version = "0.1.0"
description = "Core pieces of a small 3D engine: vector and matrix math, primitive shapes, frustum culling, file helpers and a millisecond timer"
requires-python = ">=3.10"
dependencies = []
keywords = ["3d", "engine", "matrix", "vector", "primitives", "frustum", "culling"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["amarillo"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
