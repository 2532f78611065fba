"""3x3 and 4x4 matrices, quaternions and vector transforms (row-vector convention)."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterable, Optional, Tuple, Union

from blockengine.vectors import Vector2, Vector3, cot, near_zero

Rows = Tuple[Tuple[float, ...], ...]

_IDENTITY3: Rows = (
    (1.0, 0.0, 0.0),
    (0.0, 1.0, 0.0),
    (0.0, 0.0, 1.0),
)

_IDENTITY4: Rows = (
    (1.0, 0.0, 0.0, 0.0),
    (0.0, 1.0, 0.0, 0.0),
    (0.0, 0.0, 1.0, 0.0),
    (0.0, 0.0, 0.0, 1.0),
)


def _normalize_rows(rows: Iterable[Iterable[float]], size: int) -> Rows:
    result = tuple(tuple(float(value) for value in row) for row in rows)
    if len(result) != size or any(len(row) != size for row in result):
        raise ValueError(f"expected a {size}x{size} matrix")
    return result


def _multiply(a: Rows, b: Rows) -> Rows:
    columns = tuple(zip(*b))
    return tuple(
        tuple(sum(x * y for x, y in zip(row, column)) for column in columns)
        for row in a
    )


def _det3(m: Rows) -> float:
    (a, b, c), (d, e, f), (g, h, i) = m
    return a * (e * i - f * h) - b * (d * i - f * g) + c * (d * h - e * g)


def _minor(rows: Rows, skip_row: int, skip_col: int) -> Rows:
    return tuple(
        tuple(value for c, value in enumerate(row) if c != skip_col)
        for r, row in enumerate(rows)
        if r != skip_row
    )


@dataclass(frozen=True)
class Matrix3:
    """Immutable 3x3 matrix; defaults to identity."""

    rows: Rows = field(default=_IDENTITY3)

    def __post_init__(self) -> None:
        object.__setattr__(self, "rows", _normalize_rows(self.rows, 3))

    def __getitem__(self, index: int) -> Tuple[float, ...]:
        return self.rows[index]

    def __mul__(self, other: Matrix3) -> Matrix3:
        if not isinstance(other, Matrix3):
            return NotImplemented
        return Matrix3(_multiply(self.rows, other.rows))

    __matmul__ = __mul__

    @staticmethod
    def identity() -> Matrix3:
        """The identity matrix."""
        return Matrix3(_IDENTITY3)

    def as_floats(self) -> Tuple[float, ...]:
        """All elements in row-major order."""
        return tuple(value for row in self.rows for value in row)

    @staticmethod
    def create_scale(
        x_scale: Union[float, Vector2], y_scale: Optional[float] = None
    ) -> Matrix3:
        """Scale matrix from two factors, a Vector2, or one uniform factor."""
        if isinstance(x_scale, Vector2):
            x_scale, y_scale = x_scale.x, x_scale.y
        elif y_scale is None:
            y_scale = x_scale
        return Matrix3(
            (
                (x_scale, 0.0, 0.0),
                (0.0, y_scale, 0.0),
                (0.0, 0.0, 1.0),
            )
        )

    @staticmethod
    def create_rotation(theta: float) -> Matrix3:
        """Rotation about the Z axis; ``theta`` in radians."""
        c, s = math.cos(theta), math.sin(theta)
        return Matrix3(
            (
                (c, s, 0.0),
                (-s, c, 0.0),
                (0.0, 0.0, 1.0),
            )
        )

    @staticmethod
    def create_translation(trans: Vector2) -> Matrix3:
        """Translation on the xy-plane."""
        return Matrix3(
            (
                (1.0, 0.0, 0.0),
                (0.0, 1.0, 0.0),
                (trans.x, trans.y, 1.0),
            )
        )


@dataclass(frozen=True)
class Matrix4:
    """Immutable 4x4 matrix; defaults to identity."""

    rows: Rows = field(default=_IDENTITY4)

    def __post_init__(self) -> None:
        object.__setattr__(self, "rows", _normalize_rows(self.rows, 4))

    def __getitem__(self, index: int) -> Tuple[float, ...]:
        return self.rows[index]

    def __mul__(self, other: Matrix4) -> Matrix4:
        if not isinstance(other, Matrix4):
            return NotImplemented
        return Matrix4(_multiply(self.rows, other.rows))

    __matmul__ = __mul__

    @staticmethod
    def identity() -> Matrix4:
        """The identity matrix."""
        return Matrix4(_IDENTITY4)

    def as_floats(self) -> Tuple[float, ...]:
        """All elements in row-major order."""
        return tuple(value for row in self.rows for value in row)

    def inverted(self) -> Matrix4:
        """Inverse matrix; raises ZeroDivisionError when singular."""
        rows = self.rows
        cofactors = tuple(
            tuple(
                (-1.0) ** (r + c) * _det3(_minor(rows, r, c))
                for c in range(4)
            )
            for r in range(4)
        )
        det = sum(value * cof for value, cof in zip(rows[0], cofactors[0]))
        inv_det = 1.0 / det
        return Matrix4(
            tuple(
                tuple(cof * inv_det for cof in column)
                for column in zip(*cofactors)
            )
        )

    def translation(self) -> Vector3:
        """Translation component."""
        return Vector3(*self.rows[3][:3])

    def x_axis(self) -> Vector3:
        """Normalized X axis (forward)."""
        return Vector3(*self.rows[0][:3]).normalized()

    def y_axis(self) -> Vector3:
        """Normalized Y axis (left)."""
        return Vector3(*self.rows[1][:3]).normalized()

    def z_axis(self) -> Vector3:
        """Normalized Z axis (up)."""
        return Vector3(*self.rows[2][:3]).normalized()

    def scale(self) -> Vector3:
        """Scale component extracted from the basis rows."""
        return Vector3(*(Vector3(*row[:3]).length() for row in self.rows[:3]))

    @staticmethod
    def create_scale(
        x_scale: Union[float, Vector3],
        y_scale: Optional[float] = None,
        z_scale: Optional[float] = None,
    ) -> Matrix4:
        """Scale matrix from three factors, a Vector3, or one uniform factor."""
        if isinstance(x_scale, Vector3):
            x_scale, y_scale, z_scale = x_scale.x, x_scale.y, x_scale.z
        elif y_scale is None and z_scale is None:
            y_scale = z_scale = x_scale
        elif y_scale is None or z_scale is None:
            raise TypeError("give one uniform factor or all three factors")
        return Matrix4(
            (
                (x_scale, 0.0, 0.0, 0.0),
                (0.0, y_scale, 0.0, 0.0),
                (0.0, 0.0, z_scale, 0.0),
                (0.0, 0.0, 0.0, 1.0),
            )
        )

    @staticmethod
    def create_rotation_x(theta: float) -> Matrix4:
        """Rotation about the X axis."""
        c, s = math.cos(theta), math.sin(theta)
        return Matrix4(
            (
                (1.0, 0.0, 0.0, 0.0),
                (0.0, c, s, 0.0),
                (0.0, -s, c, 0.0),
                (0.0, 0.0, 0.0, 1.0),
            )
        )

    @staticmethod
    def create_rotation_y(theta: float) -> Matrix4:
        """Rotation about the Y axis."""
        c, s = math.cos(theta), math.sin(theta)
        return Matrix4(
            (
                (c, 0.0, -s, 0.0),
                (0.0, 1.0, 0.0, 0.0),
                (s, 0.0, c, 0.0),
                (0.0, 0.0, 0.0, 1.0),
            )
        )

    @staticmethod
    def create_rotation_z(theta: float) -> Matrix4:
        """Rotation about the Z axis."""
        c, s = math.cos(theta), math.sin(theta)
        return Matrix4(
            (
                (c, s, 0.0, 0.0),
                (-s, c, 0.0, 0.0),
                (0.0, 0.0, 1.0, 0.0),
                (0.0, 0.0, 0.0, 1.0),
            )
        )

    @staticmethod
    def create_from_quaternion(q: Quaternion) -> Matrix4:
        """Rotation matrix equivalent to quaternion ``q``."""
        x, y, z, w = q.x, q.y, q.z, q.w
        return Matrix4(
            (
                (
                    1.0 - 2.0 * y * y - 2.0 * z * z,
                    2.0 * x * y + 2.0 * w * z,
                    2.0 * x * z - 2.0 * w * y,
                    0.0,
                ),
                (
                    2.0 * x * y - 2.0 * w * z,
                    1.0 - 2.0 * x * x - 2.0 * z * z,
                    2.0 * y * z + 2.0 * w * x,
                    0.0,
                ),
                (
                    2.0 * x * z + 2.0 * w * y,
                    2.0 * y * z - 2.0 * w * x,
                    1.0 - 2.0 * x * x - 2.0 * y * y,
                    0.0,
                ),
                (0.0, 0.0, 0.0, 1.0),
            )
        )

    @staticmethod
    def create_translation(trans: Vector3) -> Matrix4:
        """Translation matrix."""
        return Matrix4(
            (
                (1.0, 0.0, 0.0, 0.0),
                (0.0, 1.0, 0.0, 0.0),
                (0.0, 0.0, 1.0, 0.0),
                (trans.x, trans.y, trans.z, 1.0),
            )
        )

    @staticmethod
    def create_look_at(eye: Vector3, target: Vector3, up: Vector3) -> Matrix4:
        """View matrix looking from ``eye`` towards ``target``."""
        zaxis = (target - eye).normalized()
        xaxis = Vector3.cross(up, zaxis).normalized()
        yaxis = Vector3.cross(zaxis, xaxis).normalized()
        trans = Vector3(
            -Vector3.dot(xaxis, eye),
            -Vector3.dot(yaxis, eye),
            -Vector3.dot(zaxis, eye),
        )
        return Matrix4(
            (
                (xaxis.x, yaxis.x, zaxis.x, 0.0),
                (xaxis.y, yaxis.y, zaxis.y, 0.0),
                (xaxis.z, yaxis.z, zaxis.z, 0.0),
                (trans.x, trans.y, trans.z, 1.0),
            )
        )

    @staticmethod
    def create_ortho(width: float, height: float, near: float, far: float) -> Matrix4:
        """Orthographic projection."""
        return Matrix4(
            (
                (2.0 / width, 0.0, 0.0, 0.0),
                (0.0, 2.0 / height, 0.0, 0.0),
                (0.0, 0.0, 1.0 / (far - near), 0.0),
                (0.0, 0.0, near / (near - far), 1.0),
            )
        )

    @staticmethod
    def create_perspective_fov(
        fov_y: float, width: float, height: float, near: float, far: float
    ) -> Matrix4:
        """Perspective projection from a vertical field of view."""
        y_scale = cot(fov_y / 2.0)
        x_scale = y_scale * height / width
        return Matrix4(
            (
                (x_scale, 0.0, 0.0, 0.0),
                (0.0, y_scale, 0.0, 0.0),
                (0.0, 0.0, far / (far - near), 1.0),
                (0.0, 0.0, -near * far / (far - near), 0.0),
            )
        )

    @staticmethod
    def create_simple_view_proj(width: float, height: float) -> Matrix4:
        """Simple combined view-projection matrix."""
        return Matrix4(
            (
                (2.0 / width, 0.0, 0.0, 0.0),
                (0.0, 2.0 / height, 0.0, 0.0),
                (0.0, 0.0, 1.0, 0.0),
                (0.0, 0.0, 1.0, 1.0),
            )
        )


@dataclass(frozen=True)
class Quaternion:
    """Immutable quaternion; defaults to identity."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 1.0

    @staticmethod
    def identity() -> Quaternion:
        """The identity rotation."""
        return Quaternion(0.0, 0.0, 0.0, 1.0)

    @staticmethod
    def from_axis_angle(axis: Vector3, angle: float) -> Quaternion:
        """Rotation of ``angle`` radians about the normalized ``axis``."""
        scalar = math.sin(angle / 2.0)
        return Quaternion(
            axis.x * scalar, axis.y * scalar, axis.z * scalar, math.cos(angle / 2.0)
        )

    def conjugate(self) -> Quaternion:
        """Quaternion with the vector part negated."""
        return Quaternion(-self.x, -self.y, -self.z, self.w)

    def length_sq(self) -> float:
        """Squared length."""
        return self.x * self.x + self.y * self.y + self.z * self.z + self.w * self.w

    def length(self) -> float:
        """Length."""
        return math.sqrt(self.length_sq())

    def normalized(self) -> Quaternion:
        """Unit quaternion; raises ZeroDivisionError for zero length."""
        length = self.length()
        return Quaternion(
            self.x / length, self.y / length, self.z / length, self.w / length
        )

    @staticmethod
    def dot(a: Quaternion, b: Quaternion) -> float:
        """Four-component dot product."""
        return a.x * b.x + a.y * b.y + a.z * b.z + a.w * b.w

    @staticmethod
    def lerp(a: Quaternion, b: Quaternion, f: float) -> Quaternion:
        """Normalized linear interpolation."""
        return Quaternion(
            a.x + f * (b.x - a.x),
            a.y + f * (b.y - a.y),
            a.z + f * (b.z - a.z),
            a.w + f * (b.w - a.w),
        ).normalized()

    @staticmethod
    def slerp(a: Quaternion, b: Quaternion, f: float) -> Quaternion:
        """Spherical linear interpolation."""
        raw_cos = Quaternion.dot(a, b)
        cosom = raw_cos if raw_cos >= 0.0 else -raw_cos
        if cosom < 0.9999:
            omega = math.acos(cosom)
            inv_sin = 1.0 / math.sin(omega)
            scale0 = math.sin((1.0 - f) * omega) * inv_sin
            scale1 = math.sin(f * omega) * inv_sin
        else:
            # Nearly collinear: fall back to linear interpolation.
            scale0 = 1.0 - f
            scale1 = f
        if raw_cos < 0.0:
            scale1 = -scale1
        return Quaternion(
            scale0 * a.x + scale1 * b.x,
            scale0 * a.y + scale1 * b.y,
            scale0 * a.z + scale1 * b.z,
            scale0 * a.w + scale1 * b.w,
        ).normalized()

    @staticmethod
    def concatenate(q: Quaternion, p: Quaternion) -> Quaternion:
        """Rotation by ``q`` followed by ``p``."""
        qv = Vector3(q.x, q.y, q.z)
        pv = Vector3(p.x, p.y, p.z)
        vec = p.w * qv + q.w * pv + Vector3.cross(pv, qv)
        return Quaternion(vec.x, vec.y, vec.z, p.w * q.w - Vector3.dot(pv, qv))


def transform2(vec: Vector2, mat: Matrix3, w: float = 1.0) -> Vector2:
    """Transform a 2D vector by a 3x3 matrix (the w result is dropped)."""
    m = mat.rows
    return Vector2(
        vec.x * m[0][0] + vec.y * m[1][0] + w * m[2][0],
        vec.x * m[0][1] + vec.y * m[1][1] + w * m[2][1],
    )


def transform3(vec: Vector3, mat: Matrix4, w: float = 1.0) -> Vector3:
    """Transform a 3D vector by a 4x4 matrix (the w result is dropped)."""
    m = mat.rows
    return Vector3(
        *(
            vec.x * m[0][c] + vec.y * m[1][c] + vec.z * m[2][c] + w * m[3][c]
            for c in range(3)
        )
    )


def transform_with_persp_div(vec: Vector3, mat: Matrix4, w: float = 1.0) -> Vector3:
    """Transform by a 4x4 matrix and divide by the resulting w when non-zero."""
    m = mat.rows
    result = transform3(vec, mat, w)
    transformed_w = vec.x * m[0][3] + vec.y * m[1][3] + vec.z * m[2][3] + w * m[3][3]
    if not near_zero(abs(transformed_w)):
        result = result * (1.0 / transformed_w)
    return result


def rotate_vector(v: Vector3, q: Quaternion) -> Vector3:
    """Rotate ``v`` by quaternion ``q``."""
    qv = Vector3(q.x, q.y, q.z)
    return v + 2.0 * Vector3.cross(qv, Vector3.cross(qv, v) + q.w * v)