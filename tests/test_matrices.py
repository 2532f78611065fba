import math

import pytest

from blockengine.matrices import (
    Matrix3,
    Matrix4,
    Quaternion,
    rotate_vector,
    transform2,
    transform3,
    transform_with_persp_div,
)
from blockengine.vectors import Vector2, Vector3


def assert_vec_close(a, b, tol=1e-6):
    assert list(a) == pytest.approx(list(b), abs=tol)


def assert_mat_close(a, b, tol=1e-6):
    assert a.as_floats() == pytest.approx(b.as_floats(), abs=tol)


def sample_matrix():
    return (
        Matrix4.create_scale(2.0, 3.0, 4.0)
        * Matrix4.create_rotation_x(0.3)
        * Matrix4.create_rotation_y(0.7)
        * Matrix4.create_translation(Vector3(5.0, -1.0, 2.0))
    )


def test_default_matrices_are_identity():
    assert Matrix3() == Matrix3.identity()
    assert Matrix4() == Matrix4.identity()
    assert Matrix4.identity().as_floats()[0] == 1.0
    assert Matrix4.identity().as_floats()[1] == 0.0


def test_bad_shape_rejected():
    with pytest.raises(ValueError):
        Matrix3(((1.0, 2.0), (3.0, 4.0)))
    with pytest.raises(ValueError):
        Matrix4(((1.0, 0.0, 0.0),) * 4)


def test_identity_is_neutral_for_multiplication():
    m = sample_matrix()
    assert_mat_close(Matrix4.identity() * m, m)
    assert_mat_close(m * Matrix4.identity(), m)


def test_matrix_multiplication_is_associative():
    a = Matrix4.create_rotation_z(0.4)
    b = Matrix4.create_scale(1.5)
    c = Matrix4.create_translation(Vector3(1.0, 2.0, 3.0))
    assert_mat_close((a * b) * c, a * (b * c))


def test_inverse_times_matrix_is_identity():
    m = sample_matrix()
    assert_mat_close(m * m.inverted(), Matrix4.identity())
    assert_mat_close(m.inverted() * m, Matrix4.identity())


def test_inverse_of_translation_is_negated_translation():
    t = Vector3(3.0, -4.0, 7.5)
    inv = Matrix4.create_translation(t).inverted()
    assert_mat_close(inv, Matrix4.create_translation(-t))


def test_singular_matrix_inverse_raises():
    with pytest.raises(ZeroDivisionError):
        Matrix4.create_scale(0.0, 1.0, 1.0).inverted()


def test_translation_and_scale_components():
    t = Vector3(5.0, -1.0, 2.0)
    m = Matrix4.create_scale(2.0, 3.0, 4.0) * Matrix4.create_translation(t)
    assert m.translation() == t
    assert_vec_close(m.scale(), Vector3(2.0, 3.0, 4.0))


def test_scale_overloads_agree():
    assert Matrix4.create_scale(2.5) == Matrix4.create_scale(2.5, 2.5, 2.5)
    assert Matrix4.create_scale(Vector3(1.0, 2.0, 3.0)) == Matrix4.create_scale(1.0, 2.0, 3.0)
    assert Matrix3.create_scale(2.0) == Matrix3.create_scale(2.0, 2.0)
    assert Matrix3.create_scale(Vector2(1.0, 4.0)) == Matrix3.create_scale(1.0, 4.0)


def test_axes_are_normalized_basis_rows():
    m = Matrix4.create_scale(2.0, 3.0, 4.0) * Matrix4.create_rotation_z(0.5)
    for axis in (m.x_axis(), m.y_axis(), m.z_axis()):
        assert axis.length() == pytest.approx(1.0)
    assert_vec_close(m.z_axis(), Vector3.UNIT_Z)


def test_rotation_z_maps_unit_x_to_unit_y():
    m = Matrix4.create_rotation_z(math.pi / 2)
    assert_vec_close(transform3(Vector3.UNIT_X, m), Vector3.UNIT_Y)


def test_rotations_preserve_length():
    v = Vector3(1.0, 2.0, 3.0)
    for m in (
        Matrix4.create_rotation_x(1.1),
        Matrix4.create_rotation_y(-0.8),
        Matrix4.create_rotation_z(2.3),
    ):
        assert transform3(v, m).length() == pytest.approx(v.length())


def test_transform3_translation_depends_on_w():
    t = Vector3(1.0, 2.0, 3.0)
    m = Matrix4.create_translation(t)
    v = Vector3(4.0, 5.0, 6.0)
    assert_vec_close(transform3(v, m), v + t)
    assert_vec_close(transform3(v, m, 0.0), v)


def test_matrix3_transforms():
    assert_vec_close(transform2(Vector2.UNIT_X, Matrix3.create_rotation(math.pi / 2)), Vector2.UNIT_Y)
    t = Vector2(3.0, -2.0)
    v = Vector2(1.0, 1.0)
    assert_vec_close(transform2(v, Matrix3.create_translation(t)), v + t)
    assert_vec_close(transform2(v, Matrix3.create_scale(2.0, 3.0)), Vector2(2.0, 3.0))


def test_matrix3_multiplication_composes_transforms():
    a = Matrix3.create_rotation(0.6)
    b = Matrix3.create_translation(Vector2(2.0, 1.0))
    v = Vector2(0.5, -1.5)
    assert_vec_close(transform2(v, a * b), transform2(transform2(v, a), b))


def test_quaternion_matrix_matches_rotation_z():
    q = Quaternion.from_axis_angle(Vector3.UNIT_Z, 0.9)
    assert_mat_close(Matrix4.create_from_quaternion(q), Matrix4.create_rotation_z(0.9))


def test_rotate_vector_matches_matrix_rotation():
    axis = Vector3(1.0, 2.0, -1.0).normalized()
    q = Quaternion.from_axis_angle(axis, 1.3)
    v = Vector3(0.3, -2.0, 4.0)
    assert_vec_close(rotate_vector(v, q), transform3(v, Matrix4.create_from_quaternion(q)))


def test_quaternion_identity_and_length():
    assert Quaternion() == Quaternion.identity()
    q = Quaternion.from_axis_angle(Vector3.UNIT_Y, 0.7)
    assert q.length() == pytest.approx(1.0)
    assert Quaternion(1.0, 2.0, 3.0, 4.0).normalized().length() == pytest.approx(1.0)
    assert_vec_close(rotate_vector(Vector3(1.0, 2.0, 3.0), Quaternion.identity()), Vector3(1.0, 2.0, 3.0))


def test_conjugate_undoes_rotation():
    q = Quaternion.from_axis_angle(Vector3.UNIT_X, 0.8)
    v = Vector3(1.0, 2.0, 3.0)
    assert_vec_close(rotate_vector(rotate_vector(v, q), q.conjugate()), v)
    assert q.conjugate().conjugate() == q


def test_concatenate_adds_angles_about_same_axis():
    a = Quaternion.from_axis_angle(Vector3.UNIT_Z, 0.4)
    b = Quaternion.from_axis_angle(Vector3.UNIT_Z, 0.5)
    expected = Quaternion.from_axis_angle(Vector3.UNIT_Z, 0.9)
    result = Quaternion.concatenate(a, b)
    assert list(vars(result).values()) == pytest.approx(list(vars(expected).values()))


def test_concatenate_applies_q_then_p():
    q = Quaternion.from_axis_angle(Vector3.UNIT_X, 0.6)
    p = Quaternion.from_axis_angle(Vector3.UNIT_Y, 1.1)
    v = Vector3(0.5, 1.0, -2.0)
    assert_vec_close(rotate_vector(v, Quaternion.concatenate(q, p)), rotate_vector(rotate_vector(v, q), p))


def test_slerp_and_lerp_endpoints():
    a = Quaternion.from_axis_angle(Vector3.UNIT_Z, 0.2)
    b = Quaternion.from_axis_angle(Vector3.UNIT_Z, 1.4)
    for interp in (Quaternion.slerp, Quaternion.lerp):
        start = interp(a, b, 0.0)
        end = interp(a, b, 1.0)
        assert Quaternion.dot(start, a) == pytest.approx(1.0)
        assert Quaternion.dot(end, b) == pytest.approx(1.0)


def test_slerp_midpoint_is_half_angle():
    a = Quaternion.from_axis_angle(Vector3.UNIT_Z, 0.2)
    b = Quaternion.from_axis_angle(Vector3.UNIT_Z, 1.4)
    mid = Quaternion.slerp(a, b, 0.5)
    expected = Quaternion.from_axis_angle(Vector3.UNIT_Z, 0.8)
    assert Quaternion.dot(mid, expected) == pytest.approx(1.0)


def test_look_at_maps_eye_to_origin_and_target_forward():
    eye = Vector3(1.0, 2.0, 3.0)
    target = Vector3(4.0, 2.0, 3.0)
    view = Matrix4.create_look_at(eye, target, Vector3.UNIT_Z)
    assert_vec_close(transform3(eye, view), Vector3.ZERO)
    forward = transform3(target, view)
    assert forward.z == pytest.approx((target - eye).length())
    assert forward.x == pytest.approx(0.0, abs=1e-9)


def test_ortho_maps_near_far_to_unit_depth():
    proj = Matrix4.create_ortho(800.0, 600.0, 1.0, 11.0)
    assert transform3(Vector3(0.0, 0.0, 1.0), proj).z == pytest.approx(0.0)
    assert transform3(Vector3(0.0, 0.0, 11.0), proj).z == pytest.approx(1.0)
    assert transform3(Vector3(400.0, 300.0, 1.0), proj).x == pytest.approx(1.0)


def test_perspective_divides_by_depth():
    proj = Matrix4.create_perspective_fov(math.pi / 2, 800.0, 800.0, 1.0, 100.0)
    assert transform_with_persp_div(Vector3(0.0, 0.0, 1.0), proj).z == pytest.approx(0.0)
    assert transform_with_persp_div(Vector3(0.0, 0.0, 100.0), proj).z == pytest.approx(1.0)
    assert transform_with_persp_div(Vector3(5.0, 0.0, 5.0), proj).x == pytest.approx(1.0)


def test_persp_div_skips_zero_w():
    v = Vector3(1.0, 2.0, 3.0)
    assert_vec_close(transform_with_persp_div(v, Matrix4.identity()), v)
    proj = Matrix4.create_perspective_fov(math.pi / 2, 1.0, 1.0, 1.0, 10.0)
    at_zero_depth = Vector3(2.0, 3.0, 0.0)
    assert_vec_close(transform_with_persp_div(at_zero_depth, proj), transform3(at_zero_depth, proj))


def test_simple_view_proj_scales_to_screen():
    m = Matrix4.create_simple_view_proj(1280.0, 720.0)
    result = transform3(Vector3(640.0, 360.0, 0.0), m)
    assert result.x == pytest.approx(1.0)
    assert result.y == pytest.approx(1.0)


def test_as_floats_is_row_major():
    m = Matrix4.create_translation(Vector3(7.0, 8.0, 9.0))
    floats = m.as_floats()
    assert len(floats) == 16
    assert floats[12:15] == (7.0, 8.0, 9.0)
    assert len(Matrix3.create_translation(Vector2(1.0, 2.0)).as_floats()) == 9