import math

import pytest

from voxalite.matrix4 import Matrix4
from voxalite.vector3 import Vector3


def _sample(seed):
    return Matrix4(tuple(float((i * 7 + seed * 3) % 11) - 5.0 for i in range(16)))


def test_identity_is_neutral():
    m = _sample(1)
    assert Matrix4() * m == m
    assert m * Matrix4() == m


def test_wrong_element_count_rejected():
    with pytest.raises(ValueError):
        Matrix4((1.0,) * 15)


def test_from_elements_round_trip():
    m = _sample(2)
    assert Matrix4.from_elements(list(m.elements)) == m


def test_translation_stored_in_last_column():
    v = Vector3(5.0, 6.0, 7.0)
    assert Matrix4.from_translation(v).elements[12:15] == (5.0, 6.0, 7.0)


def test_translations_compose_by_addition():
    a = Vector3(1.0, 2.0, 3.0)
    b = Vector3(-4.0, 0.5, 2.0)
    assert Matrix4.from_translation(a) * Matrix4.from_translation(b) == Matrix4.from_translation(a + b)


def test_multiplication_is_associative():
    a, b, c = _sample(1), _sample(2), _sample(3)
    assert ((a * b) * c).elements == pytest.approx((a * (b * c)).elements)


def test_multiply_by_non_matrix_fails():
    with pytest.raises(TypeError):
        Matrix4() * 2


def test_str_of_identity():
    assert str(Matrix4()) == "1 0 0 0\n0 1 0 0\n0 0 1 0\n0 0 0 1"


def test_str_lays_translation_out_in_last_column():
    lines = str(Matrix4.from_translation(Vector3(5.0, 6.0, 7.0))).splitlines()
    assert [line.split()[3] for line in lines] == ["5", "6", "7", "1"]


def test_look_at_moves_eye_to_origin():
    eye = Vector3(3.0, -2.0, 4.0)
    m = Matrix4.look_at(eye, Vector3(0.0, 1.0, 0.0), Vector3(0.0, 1.0, 0.0))
    back = m * Matrix4.from_translation(eye)
    assert back.elements[12:15] == pytest.approx((0.0, 0.0, 0.0), abs=1e-9)


def test_look_at_rotation_is_orthonormal():
    m = Matrix4.look_at(Vector3(1.0, 2.0, 3.0), Vector3(-2.0, 0.0, 1.0), Vector3(0.0, 1.0, 0.0))
    e = m.elements
    rows = [Vector3(e[r], e[r + 4], e[r + 8]) for r in range(3)]
    for i, a in enumerate(rows):
        for j, b in enumerate(rows):
            dot = a.x * b.x + a.y * b.y + a.z * b.z
            assert dot == pytest.approx(1.0 if i == j else 0.0, abs=1e-9)


def test_look_at_down_negative_z_is_translation():
    eye = Vector3(0.0, 0.0, 5.0)
    m = Matrix4.look_at(eye, Vector3(0.0, 0.0, 0.0), Vector3(0.0, 1.0, 0.0))
    assert m.elements == pytest.approx(Matrix4.from_translation(-eye).elements, abs=1e-9)


def test_perspective_fixed_entries():
    m = Matrix4.perspective(math.pi / 4.0, 800.0, 600.0, 0.1, 100.0)
    e = m.elements
    assert e[11] == -1.0
    assert e[15] == 0.0
    assert e[8] == pytest.approx(0.0)
    assert e[9] == pytest.approx(0.0)


def test_perspective_square_right_angle_fov():
    e = Matrix4.perspective(math.pi / 2.0, 600.0, 600.0, 0.5, 50.0).elements
    assert e[0] == pytest.approx(1.0)
    assert e[5] == pytest.approx(1.0)


def test_perspective_aspect_scales_x():
    e = Matrix4.perspective(math.pi / 2.0, 800.0, 400.0, 0.5, 50.0).elements
    assert e[5] / e[0] == pytest.approx(800.0 / 400.0)


@pytest.mark.parametrize("near,far", [(0.1, 100.0), (1.0, 10.0), (0.5, 2.0)])
def test_perspective_maps_planes_to_unit_depth(near, far):
    e = Matrix4.perspective(math.pi / 3.0, 4.0, 3.0, near, far).elements

    def ndc_depth(distance):
        z = -distance
        clip_z = e[10] * z + e[14]
        clip_w = e[11] * z + e[15]
        return clip_z / clip_w

    assert ndc_depth(near) == pytest.approx(-1.0)
    assert ndc_depth(far) == pytest.approx(1.0)