[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "vroom"
version = "0.1.0"
description = "Bezier surface patches, input events and asset management for a small 3D engine"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["bezier", "surface", "mesh", "3d", "events", "assets"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Graphics :: 3D Modeling",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["vroom"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
