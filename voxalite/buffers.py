"""Owned graphics handles, GPU buffers and sequential buffer writing."""

from __future__ import annotations

from functools import lru_cache
from typing import Any, Callable, Optional, Tuple


class Handle:
    """Owns a graphics object and releases it with its deleter exactly once."""

    def __init__(
        self,
        value: Any = 0,
        deleter: Optional[Callable[[Any], None]] = None,
        invalid: Any = 0,
    ) -> None:
        self._value = value
        self._deleter = deleter
        self._invalid = invalid

    @property
    def value(self) -> Any:
        return self._value

    def release(self) -> None:
        """Delete the owned object, if any, and leave the handle empty."""
        value, deleter = self._value, self._deleter
        self._value = self._invalid
        self._deleter = None
        if deleter is not None and value != self._invalid:
            deleter(value)

    def __bool__(self) -> bool:
        return self._value != self._invalid

    def __enter__(self) -> Handle:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.release()

    def __repr__(self) -> str:
        return f"Handle({self._value!r})"


class _OpenGL:
    """The OpenGL calls the engine makes, backed by pyglet."""

    def __init__(self) -> None:
        from pyglet import gl
        from pyglet.graphics import shader

        self._gl = gl
        self._shader = shader

    def _new_name(self, create: Callable[..., None], *leading: Any) -> int:
        names = (self._gl.GLuint * 1)()
        create(*leading, 1, names)
        return int(names[0])

    def _delete_name(self, delete: Callable[..., None], name: int) -> None:
        delete(1, (self._gl.GLuint * 1)(name))

    # Buffers
    def create_buffer(self, size: int) -> int:
        gl = self._gl
        name = self._new_name(gl.glCreateBuffers)
        gl.glNamedBufferStorage(name, size, None, gl.GL_DYNAMIC_STORAGE_BIT)
        return name

    def delete_buffer(self, buffer: int) -> None:
        self._delete_name(self._gl.glDeleteBuffers, buffer)

    def buffer_sub_data(self, buffer: int, offset: int, data: bytes) -> None:
        self._gl.glNamedBufferSubData(buffer, offset, len(data), data)

    def bind_uniform_buffer(self, index: int, buffer: int) -> None:
        self._gl.glBindBufferBase(self._gl.GL_UNIFORM_BUFFER, index, buffer)

    # Vertex arrays
    def create_vertex_array(self) -> int:
        return self._new_name(self._gl.glCreateVertexArrays)

    def delete_vertex_array(self, vao: int) -> None:
        self._delete_name(self._gl.glDeleteVertexArrays, vao)

    def vertex_array_vertex_buffer(
        self, vao: int, binding: int, buffer: int, offset: int, stride: int
    ) -> None:
        self._gl.glVertexArrayVertexBuffer(vao, binding, buffer, offset, stride)

    def vertex_array_element_buffer(self, vao: int, buffer: int) -> None:
        self._gl.glVertexArrayElementBuffer(vao, buffer)

    def enable_vertex_array_attrib(self, vao: int, index: int) -> None:
        self._gl.glEnableVertexArrayAttrib(vao, index)

    def vertex_array_attrib_format(self, vao: int, index: int, size: int, offset: int) -> None:
        gl = self._gl
        gl.glVertexArrayAttribFormat(vao, index, size, gl.GL_FLOAT, gl.GL_FALSE, offset)

    def vertex_array_attrib_binding(self, vao: int, index: int, binding: int) -> None:
        self._gl.glVertexArrayAttribBinding(vao, index, binding)

    def bind_vertex_array(self, vao: int) -> None:
        self._gl.glBindVertexArray(vao)

    # Shaders and programs
    def compile_shader(self, kind: str, source: str) -> Tuple[Any, str]:
        try:
            return self._shader.Shader(source, kind), ""
        except self._shader.ShaderException as exc:
            return None, str(exc)

    def delete_shader(self, shader: Any) -> None:
        shader.delete()

    def link_program(self, vertex: Any, fragment: Any) -> Tuple[Any, str]:
        try:
            return self._shader.ShaderProgram(vertex, fragment), ""
        except self._shader.ShaderException as exc:
            return None, str(exc)

    def delete_program(self, program: Any) -> None:
        program.delete()

    def use_program(self, program: Any) -> None:
        program.use()

    def set_uniform(self, program: Any, name: str, value: Any) -> None:
        """Set a uniform; uniforms the program does not have are ignored."""
        try:
            program[name] = value
        except (KeyError, self._shader.ShaderException):
            pass

    # Textures and samplers
    def create_texture(self, width: int, height: int, pixels: bytes) -> int:
        gl = self._gl
        name = self._new_name(gl.glCreateTextures, gl.GL_TEXTURE_2D)
        gl.glTextureStorage2D(name, 1, gl.GL_RGBA8, width, height)
        gl.glTextureSubImage2D(
            name, 0, 0, 0, width, height, gl.GL_RGBA, gl.GL_UNSIGNED_BYTE, pixels
        )
        return name

    def delete_texture(self, texture: int) -> None:
        self._delete_name(self._gl.glDeleteTextures, texture)

    def create_sampler(self) -> int:
        return self._new_name(self._gl.glCreateSamplers)

    def delete_sampler(self, sampler: int) -> None:
        self._delete_name(self._gl.glDeleteSamplers, sampler)

    def bind_texture_unit(self, unit: int, texture: int) -> None:
        self._gl.glBindTextureUnit(unit, texture)

    def bind_sampler(self, unit: int, sampler: int) -> None:
        self._gl.glBindSampler(unit, sampler)

    # Drawing
    def clear(self) -> None:
        gl = self._gl
        gl.glClear(gl.GL_COLOR_BUFFER_BIT | gl.GL_DEPTH_BUFFER_BIT)

    def enable_depth_test(self) -> None:
        self._gl.glEnable(self._gl.GL_DEPTH_TEST)

    def draw_triangles(self, count: int) -> None:
        self._gl.glDrawArrays(self._gl.GL_TRIANGLES, 0, count)

    def draw_indexed_triangles(self, count: int, offset: int) -> None:
        gl = self._gl
        gl.glDrawElements(gl.GL_TRIANGLES, count, gl.GL_UNSIGNED_INT, offset)


@lru_cache(maxsize=None)
def _default_gl() -> _OpenGL:
    return _OpenGL()


class Buffer:
    """A fixed-size GPU buffer that can be updated in place."""

    def __init__(self, size: int, gl: Any = None) -> None:
        if size < 0:
            raise ValueError(f"buffer size must not be negative, got {size}")
        self._gl = gl if gl is not None else _default_gl()
        self.size = size
        self._handle = Handle(self._gl.create_buffer(size), self._gl.delete_buffer)

    @property
    def native_handle(self) -> int:
        return self._handle.value

    def write(self, data: Any, offset: int) -> None:
        """Copy the bytes of ``data`` into the buffer starting at ``offset``."""
        raw = memoryview(data).tobytes()
        if offset < 0 or offset + len(raw) > self.size:
            raise ValueError(
                f"write of {len(raw)} bytes at offset {offset} exceeds buffer of {self.size} bytes"
            )
        self._gl.buffer_sub_data(self.native_handle, offset, raw)

    def release(self) -> None:
        self._handle.release()

    def __enter__(self) -> Buffer:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.release()


class BufferWriter:
    """Writes consecutive pieces of data into a buffer, advancing an offset."""

    def __init__(self, buffer: Buffer) -> None:
        self._buffer = buffer
        self._offset = 0

    @property
    def offset(self) -> int:
        return self._offset

    def write(self, data: Any) -> None:
        """Append the bytes of ``data`` (any buffer-protocol object)."""
        raw = memoryview(data).tobytes()
        self._buffer.write(raw, self._offset)
        self._offset += len(raw)