[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "voxalite"
version = "0.1.0"
description = "A simple voxel engine"
requires-python = ">=3.10"
keywords = ["voxel", "opengl", "3d", "rendering", "engine"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
    "Topic :: Games/Entertainment",
]
dependencies = [
    "pyglet",
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
voxalite = "voxalite.app:main"

[tool.hatch.build.targets.wheel]
packages = ["voxalite"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
