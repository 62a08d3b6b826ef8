"""Shaders, materials, textures and samplers."""

from __future__ import annotations

import io
from enum import Enum
from typing import Any

from PIL import Image, UnidentifiedImageError

from .buffers import Handle, _default_gl
from .errors import ensure


class ShaderType(Enum):
    """The pipeline stage a shader runs in."""

    VERTEX = "vertex"
    FRAGMENT = "fragment"

    def __str__(self) -> str:
        return self.name


class Shader:
    """A compiled shader stage."""

    def __init__(self, source: str, type: ShaderType, gl: Any = None) -> None:
        self._gl = gl if gl is not None else _default_gl()
        self.type = ShaderType(type)
        native, log = self._gl.compile_shader(self.type.value, source)
        ensure(native is not None, "failed to compile shader {}\n{}", self.type, log)
        self._handle = Handle(native, self._gl.delete_shader, invalid=None)

    @property
    def native_handle(self) -> Any:
        return self._handle.value

    def release(self) -> None:
        self._handle.release()


class Material:
    """A linked program made of a vertex and a fragment shader."""

    def __init__(self, vertex_shader: Shader, fragment_shader: Shader, gl: Any = None) -> None:
        ensure(vertex_shader.type is ShaderType.VERTEX, "shader is not a vertex shader")
        ensure(fragment_shader.type is ShaderType.FRAGMENT, "shader is not a fragment shader")
        self._gl = gl if gl is not None else _default_gl()
        native, log = self._gl.link_program(
            vertex_shader.native_handle, fragment_shader.native_handle
        )
        ensure(native is not None, "failed to link program\n{}", log)
        self._handle = Handle(native, self._gl.delete_program, invalid=None)

    @property
    def native_handle(self) -> Any:
        return self._handle.value

    def release(self) -> None:
        self._handle.release()


def decode_texture(data: bytes, width: int, height: int) -> bytes:
    """Decode PNG ``data`` to RGBA8 pixels, checking its size and channel count."""
    try:
        image = Image.open(io.BytesIO(bytes(data)))
        image.load()
    except (UnidentifiedImageError, OSError, ValueError):
        image = None
    ensure(image is not None and image.format == "PNG", "failed to load texture data")

    ensure(image.width == width, "width mismatch")
    ensure(image.height == height, "height mismatch")

    if image.mode == "P":
        image = image.convert("RGBA" if "transparency" in image.info else "RGB")
    ensure(len(image.getbands()) == 4, "expected 4 channels")
    if image.mode != "RGBA":
        image = image.convert("RGBA")
    return image.tobytes()


class Texture:
    """A 2D RGBA texture created from PNG data."""

    def __init__(self, data: bytes, width: int, height: int, gl: Any = None) -> None:
        self._gl = gl if gl is not None else _default_gl()
        pixels = decode_texture(data, width, height)
        self.width = width
        self.height = height
        self._handle = Handle(
            self._gl.create_texture(width, height, pixels), self._gl.delete_texture
        )

    @property
    def native_handle(self) -> int:
        return self._handle.value

    def release(self) -> None:
        self._handle.release()


class Sampler:
    """A texture sampler object with default parameters."""

    def __init__(self, gl: Any = None) -> None:
        self._gl = gl if gl is not None else _default_gl()
        self._handle = Handle(self._gl.create_sampler(), self._gl.delete_sampler)

    @property
    def native_handle(self) -> int:
        return self._handle.value

    def release(self) -> None:
        self._handle.release()