import math

import pytest

from glcube.linalg import (
    G_PI,
    G_PI_2,
    Mat4,
    Vec4,
    euler_rotation,
    euler_rotation_xyz,
    imod,
    is_approx_equal,
    orthographic,
    perspective_left_handed,
    perspective_right_handed,
    quaternion_rotation,
    radian,
    translation,
    view,
)

SAMPLE = Mat4((
    2.0, 1.0, 0.0, 3.0,
    0.0, 1.0, 4.0, 1.0,
    1.0, 0.0, 2.0, 0.0,
    0.5, 2.0, 1.0, 1.0,
))


def _assert_mat_close(a, b, tol=1e-9):
    assert a.cells == pytest.approx(b.cells, abs=tol)


def _assert_vec_close(a, b, tol=1e-9):
    assert tuple(a) == pytest.approx(tuple(b), abs=tol)


def _assert_orthonormal_rotation(m):
    upper = Mat4.from_rows([
        [m[r, 0], m[r, 1], m[r, 2], 0.0] for r in range(3)
    ] + [[0.0, 0.0, 0.0, 1.0]])
    _assert_mat_close(upper @ upper.transpose(), Mat4.identity())
    assert upper.determinant() == pytest.approx(1.0)


def test_imod_positive_and_negative():
    assert imod(370.0, 360.0) == pytest.approx(10.0)
    assert imod(-10.0, 360.0) == pytest.approx(350.0)


def test_radian_converts_degrees():
    assert radian(180.0) == pytest.approx(G_PI)
    assert radian(90.0) == pytest.approx(G_PI_2)


def test_radian_above_360_only_wraps():
    assert radian(400.0) == pytest.approx(imod(400.0, 360.0))


def test_is_approx_equal():
    assert is_approx_equal(1.0, 1.0)
    assert not is_approx_equal(1.0, 1.0001)


def test_vec_add_sub_keep_w_of_left():
    a = Vec4(1.0, 2.0, 3.0, 7.0)
    b = Vec4(4.0, 5.0, 6.0, 9.0)
    assert (a + b).w == 7.0
    assert (a - b).w == 7.0
    _assert_vec_close((a + b) - b, a)


def test_scaled_keeps_w():
    v = Vec4(1.0, -2.0, 3.0, 4.0).scaled(2.0)
    assert v == Vec4(2.0, -4.0, 6.0, 4.0)


def test_normalized_has_unit_length():
    v = Vec4(3.0, 4.0, 12.0, 5.0).normalized()
    assert v.length == pytest.approx(1.0)
    assert v.w == 5.0


def test_normalize_zero_raises():
    with pytest.raises(ValueError):
        Vec4(0.0, 0.0, 0.0, 1.0).normalized()


def test_cross_is_orthogonal_and_w_zero():
    a = Vec4(1.0, 2.0, 3.0, 1.0)
    b = Vec4(-2.0, 0.5, 4.0, 1.0)
    c = a.cross(b)
    assert c.w == 0.0
    assert Vec4(a.x, a.y, a.z).dot(c) == pytest.approx(0.0)
    assert Vec4(b.x, b.y, b.z).dot(c) == pytest.approx(0.0)


def test_cross_of_basis():
    x = Vec4(1.0, 0.0, 0.0)
    y = Vec4(0.0, 1.0, 0.0)
    assert x.cross(y) == Vec4(0.0, 0.0, 1.0, 0.0)


def test_dot_includes_w():
    a = Vec4(0.0, 0.0, 0.0, 2.0)
    assert a.dot(a) == pytest.approx(4.0)


def test_vec_format():
    text = Vec4(1.0, 2.0, 3.0, 4.0).format()
    assert text == "[1.000000]\n[2.000000]\n[3.000000]\n[4.000000]\n\n"


def test_mat_format_identity():
    text = Mat4.identity().format()
    first = text.splitlines()[0]
    assert first == "[   1.000000  0.000000  0.000000  0.000000   ]"
    assert text.endswith("\n\n")


def test_mat_requires_sixteen_cells():
    with pytest.raises(ValueError):
        Mat4((1.0, 2.0, 3.0))


def test_getitem_tuple_and_flat_agree():
    assert SAMPLE[1, 2] == SAMPLE[6]
    with pytest.raises(IndexError):
        SAMPLE[4, 0]


def test_rows_match_cells():
    rows = SAMPLE.rows()
    assert rows[3] == Vec4(0.5, 2.0, 1.0, 1.0)


def test_identity_is_neutral():
    _assert_mat_close(SAMPLE @ Mat4.identity(), SAMPLE)
    _assert_mat_close(Mat4.identity() @ SAMPLE, SAMPLE)


def test_transform_identity_and_matmul_vector():
    v = Vec4(1.0, 2.0, 3.0, 1.0)
    _assert_vec_close(Mat4.identity().transform(v), v)
    _assert_vec_close(SAMPLE @ v, SAMPLE.transform(v))


def test_matmul_associative_with_vector():
    other = SAMPLE.transpose()
    v = Vec4(1.0, -1.0, 2.0, 0.5)
    _assert_vec_close((SAMPLE @ other).transform(v), SAMPLE.transform(other.transform(v)))


def test_transpose_involution():
    _assert_mat_close(SAMPLE.transpose().transpose(), SAMPLE)
    assert SAMPLE.transpose()[0, 3] == SAMPLE[3, 0]


def test_determinant_identity_and_transpose():
    assert Mat4.identity().determinant() == pytest.approx(1.0)
    assert SAMPLE.transpose().determinant() == pytest.approx(SAMPLE.determinant())


def test_determinant_multiplicative():
    other = translation(1.0, 2.0, 3.0) @ quaternion_rotation(0.7, (0.0, 1.0, 0.0))
    assert (SAMPLE @ other).determinant() == pytest.approx(
        SAMPLE.determinant() * other.determinant()
    )


def test_inverse_round_trip():
    inv = SAMPLE.inverse()
    _assert_mat_close(SAMPLE @ inv, Mat4.identity())
    _assert_mat_close(inv @ SAMPLE, Mat4.identity())


def test_inverse_of_singular_raises():
    singular = Mat4.from_rows([[1, 2, 3, 4], [2, 4, 6, 8], [0, 1, 0, 1], [1, 0, 1, 0]])
    with pytest.raises(ValueError):
        singular.inverse()


def test_translation_moves_points():
    m = translation(1.0, 2.0, 3.0)
    _assert_vec_close(m.transform(Vec4(0.0, 0.0, 0.0, 1.0)), Vec4(1.0, 2.0, 3.0, 1.0))
    _assert_vec_close(m.inverse().transform(Vec4(1.0, 2.0, 3.0, 1.0)), Vec4(0.0, 0.0, 0.0, 1.0))


def test_translation_keeps_other_base_cells():
    base = quaternion_rotation(0.5, (1.0, 0.0, 0.0))
    m = translation(4.0, 5.0, 6.0, base)
    assert m[1, 1] == base[1, 1]
    assert m[2, 3] == 6.0


def test_perspective_right_handed_cells():
    near, far = 0.1, 100.0
    m = perspective_right_handed(G_PI_2, 2.0, near, far)
    assert m[3, 2] == -1.0
    assert m[1, 1] == pytest.approx(1.0 / math.tan(G_PI_2 / 2.0))
    assert m[0, 0] == pytest.approx(m[1, 1] / 2.0)
    assert m[2, 2] == pytest.approx((-far - near) / (far - near))


def test_orthographic_maps_box_corners_to_unit_cube():
    m = orthographic(1.0, 10.0, 4.0, -2.0, 3.0, -1.0)
    _assert_vec_close(m.transform(Vec4(4.0, 3.0, -1.0, 1.0)), Vec4(1.0, 1.0, -1.0, 1.0))
    _assert_vec_close(m.transform(Vec4(-2.0, -1.0, -10.0, 1.0)), Vec4(-1.0, -1.0, 1.0, 1.0))


def test_quaternion_rotation_is_rotation():
    axis = Vec4(1.0, 2.0, 2.0).normalized()
    _assert_orthonormal_rotation(quaternion_rotation(1.1, axis))


def test_quaternion_quarter_turn_about_x():
    m = quaternion_rotation(G_PI_2, Vec4(1.0, 0.0, 0.0))
    _assert_vec_close(m.transform(Vec4(0.0, 1.0, 0.0, 0.0)), Vec4(0.0, 0.0, 1.0, 0.0), tol=1e-9)


def test_quaternion_axis_forms_agree():
    _assert_mat_close(
        quaternion_rotation(0.3, Vec4(0.0, 1.0, 0.0)),
        quaternion_rotation(0.3, (0.0, 1.0, 0.0)),
    )


def test_quaternion_zero_angle_is_identity():
    _assert_mat_close(quaternion_rotation(0.0, (0.0, 0.0, 1.0)), Mat4.identity())


def test_euler_zero_is_identity():
    _assert_mat_close(euler_rotation(Vec4()), Mat4.identity())
    _assert_mat_close(euler_rotation_xyz(0.0, 0.0, 0.0), Mat4.identity())


def test_view_rows_hold_basis():
    u = Vec4(1.0, 0.0, 0.0)
    v = Vec4(0.0, 1.0, 0.0)
    n = Vec4(0.0, 0.0, 1.0)
    m = view(u, v, n, translation(1.0, 2.0, 3.0))
    rows = m.rows()
    assert rows[0] == Vec4(1.0, 0.0, 0.0, 1.0)
    assert rows[3] == Vec4(0.0, 0.0, 0.0, 1.0)
    assert m[2, 3] == 3.0