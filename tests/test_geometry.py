import struct

import pytest

from voxalite.geometry import (
    CUBE_INDICES,
    CUBE_VERTICES,
    UV,
    VERTEX_STRIDE,
    Mesh,
    VertexData,
    pack_indices,
    pack_vertices,
)
from voxalite.vector3 import Vector3


class FakeGL:
    def __init__(self) -> None:
        self._next = 1
        self.buffers: dict = {}
        self.calls: list = []
        self.deleted: list = []

    def _name(self) -> int:
        name = self._next
        self._next += 1
        return name

    def create_buffer(self, size: int) -> int:
        name = self._name()
        self.buffers[name] = bytearray(size)
        return name

    def delete_buffer(self, buffer: int) -> None:
        self.deleted.append(("buffer", buffer))

    def buffer_sub_data(self, buffer: int, offset: int, data: bytes) -> None:
        self.calls.append(("sub_data", buffer, offset, len(data)))
        self.buffers[buffer][offset:offset + len(data)] = data

    def create_vertex_array(self) -> int:
        return self._name()

    def delete_vertex_array(self, vao: int) -> None:
        self.deleted.append(("vao", vao))

    def vertex_array_vertex_buffer(self, vao, binding, buffer, offset, stride) -> None:
        self.calls.append(("vertex_buffer", vao, binding, buffer, offset, stride))

    def vertex_array_element_buffer(self, vao, buffer) -> None:
        self.calls.append(("element_buffer", vao, buffer))

    def enable_vertex_array_attrib(self, vao, index) -> None:
        self.calls.append(("enable", vao, index))

    def vertex_array_attrib_format(self, vao, index, size, offset) -> None:
        self.calls.append(("format", vao, index, size, offset))

    def vertex_array_attrib_binding(self, vao, index, binding) -> None:
        self.calls.append(("binding", vao, index, binding))

    def bind_vertex_array(self, vao) -> None:
        self.calls.append(("bind", vao))


def test_vertex_stride_matches_layout() -> None:
    vertex = VertexData(Vector3(0.0, 0.0, 0.0), Vector3(0.0, 0.0, 1.0), UV(0.0, 0.0))
    assert len(pack_vertices([vertex])) == VERTEX_STRIDE == 32


def test_pack_vertices_round_trip() -> None:
    vertex = VertexData(Vector3(1.0, 2.0, 3.0), Vector3(0.0, 1.0, 0.0), UV(0.5, 0.25))
    packed = pack_vertices([vertex])
    assert struct.unpack("=8f", packed) == (1.0, 2.0, 3.0, 0.0, 1.0, 0.0, 0.5, 0.25)


def test_pack_indices_round_trip() -> None:
    packed = pack_indices([0, 1, 2, 70000])
    assert struct.unpack("=4I", packed) == (0, 1, 2, 70000)


def test_pack_indices_rejects_negative() -> None:
    with pytest.raises(ValueError):
        pack_indices([0, -1])


def test_cube_shape() -> None:
    assert len(pack_vertices(CUBE_VERTICES)) == 24 * 32
    packed = pack_indices(CUBE_INDICES)
    assert len(packed) == 36 * 4
    assert all(0 <= i < 24 for (i,) in struct.iter_unpack("=I", packed))


def test_cube_vertices_lie_on_their_face() -> None:
    packed = pack_vertices(CUBE_VERTICES)
    for px, py, pz, nx, ny, nz, _u, _v in struct.iter_unpack("=8f", packed):
        assert {abs(px), abs(py), abs(pz)} == {0.5}
        assert px * nx + py * ny + pz * nz == 0.5
        assert nx * nx + ny * ny + nz * nz == 1.0


def test_mesh_uploads_vertices_then_indices() -> None:
    gl = FakeGL()
    mesh = Mesh(gl=gl)
    vertex_bytes = pack_vertices(CUBE_VERTICES)
    index_bytes = pack_indices(CUBE_INDICES)
    assert mesh.index_count == len(CUBE_INDICES)
    assert mesh.index_offset == len(vertex_bytes)
    (buffer_name,) = gl.buffers
    assert bytes(gl.buffers[buffer_name]) == vertex_bytes + index_bytes
    writes = [c for c in gl.calls if c[0] == "sub_data"]
    assert writes == [
        ("sub_data", buffer_name, 0, len(vertex_bytes)),
        ("sub_data", buffer_name, len(vertex_bytes), len(index_bytes)),
    ]


def test_mesh_configures_attributes() -> None:
    gl = FakeGL()
    mesh = Mesh(gl=gl)
    vao = mesh.native_handle
    formats = [c[2:] for c in gl.calls if c[0] == "format"]
    assert formats == [(0, 3, 0), (1, 3, 12), (2, 2, 24)]
    assert [c[2] for c in gl.calls if c[0] == "enable"] == [0, 1, 2]
    assert all(c[1] == vao and c[3] == 0 for c in gl.calls if c[0] == "binding")
    (vertex_buffer,) = [c for c in gl.calls if c[0] == "vertex_buffer"]
    assert vertex_buffer[1] == vao and vertex_buffer[5] == VERTEX_STRIDE


def test_mesh_bind_and_release() -> None:
    gl = FakeGL()
    mesh = Mesh(gl=gl)
    mesh.bind()
    assert gl.calls[-1] == ("bind", mesh.native_handle)
    vao = mesh.native_handle
    mesh.release()
    assert ("vao", vao) in gl.deleted
    assert any(kind == "buffer" for kind, _ in gl.deleted)