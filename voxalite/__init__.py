"""A simple voxel engine: vector and matrix maths, a free-look camera and an OpenGL cube renderer."""

__version__ = "0.1.0"