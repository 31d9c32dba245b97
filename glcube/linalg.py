"""Four-component vectors, 4x4 matrices and the transforms built from them."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Iterator, Mapping, Sequence, Union

G_PI = 3.14159265359
G_PI_2 = 1.57079632679
G_PI_3 = 1.0471975512
G_PI_5 = 0.62831853071
G_PI_6 = 0.52359877559

EPSILON = 1.666e-10


def imod(a: float, b: float) -> float:
    """Floating modulo whose result takes the sign of ``b``."""
    q = a / b
    if q > 0:
        return a - int(q) * b
    return a - int(q - 0.9999999999999999) * b


def radian(val: float) -> float:
    """Convert degrees to radians; values above 360 are only wrapped into [0, 360)."""
    if val > 360:
        return imod(val, 360)
    return val * G_PI / 180


def is_approx_equal(a: float, b: float) -> bool:
    """True when ``a`` and ``b`` differ by less than a tiny epsilon."""
    return abs(a - b) < EPSILON


@dataclass(frozen=True)
class Vec4:
    """A vector with four float components."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0

    def __iter__(self) -> Iterator[float]:
        return iter((self.x, self.y, self.z, self.w))

    @property
    def length(self) -> float:
        """Euclidean length of the x, y, z part."""
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalized(self) -> Vec4:
        """Unit vector along x, y, z; ``w`` is kept."""
        length = self.length
        if length == 0:
            raise ValueError("cannot normalize a zero-length vector")
        return Vec4(self.x / length, self.y / length, self.z / length, self.w)

    def scaled(self, coeff: float) -> Vec4:
        """x, y, z multiplied by ``coeff``; ``w`` is kept."""
        return Vec4(self.x * coeff, self.y * coeff, self.z * coeff, self.w)

    def __add__(self, other: Vec4) -> Vec4:
        if not isinstance(other, Vec4):
            return NotImplemented
        return Vec4(self.x + other.x, self.y + other.y, self.z + other.z, self.w)

    def __sub__(self, other: Vec4) -> Vec4:
        if not isinstance(other, Vec4):
            return NotImplemented
        return Vec4(self.x - other.x, self.y - other.y, self.z - other.z, self.w)

    def cross(self, other: Vec4) -> Vec4:
        """Cross product of the x, y, z parts, with ``w`` set to zero."""
        return Vec4(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
            0.0,
        )

    def dot(self, other: Vec4) -> float:
        """Scalar product over all four components."""
        return self.x * other.x + self.y * other.y + self.z * other.z + self.w * other.w

    def format(self) -> str:
        """Column display of the four components."""
        return "".join(f"[{value:f}]\n" for value in self) + "\n"


def _det3(m: Sequence[Sequence[float]]) -> float:
    (a, b, c), (d, e, f), (g, h, i) = m
    return a * (e * i - f * h) - b * (d * i - f * g) + c * (d * h - e * g)


@dataclass(frozen=True)
class Mat4:
    """A 4x4 matrix stored row by row."""

    cells: tuple = (
        1.0, 0.0, 0.0, 0.0,
        0.0, 1.0, 0.0, 0.0,
        0.0, 0.0, 1.0, 0.0,
        0.0, 0.0, 0.0, 1.0,
    )

    def __post_init__(self) -> None:
        cells = tuple(float(value) for value in self.cells)
        if len(cells) != 16:
            raise ValueError(f"a 4x4 matrix needs 16 cells, got {len(cells)}")
        object.__setattr__(self, "cells", cells)

    @classmethod
    def identity(cls) -> Mat4:
        """The identity matrix."""
        return cls()

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[float]]) -> Mat4:
        """Build a matrix from four rows of four values."""
        return cls(tuple(value for row in rows for value in row))

    def rows(self) -> tuple[Vec4, Vec4, Vec4, Vec4]:
        """The four rows as vectors."""
        c = self.cells
        return tuple(Vec4(*c[start:start + 4]) for start in (0, 4, 8, 12))

    def __getitem__(self, index: Union[int, tuple[int, int]]) -> float:
        if isinstance(index, tuple):
            row, col = index
            if not (0 <= row < 4 and 0 <= col < 4):
                raise IndexError(f"matrix index out of range: {index}")
            return self.cells[row * 4 + col]
        return self.cells[index]

    def _grid(self) -> list[list[float]]:
        return [list(self.cells[start:start + 4]) for start in (0, 4, 8, 12)]

    def __matmul__(self, other):
        if isinstance(other, Vec4):
            return self.transform(other)
        if not isinstance(other, Mat4):
            return NotImplemented
        columns = other.transpose().rows()
        return Mat4(tuple(row.dot(col) for row in self.rows() for col in columns))

    def transform(self, vec: Vec4) -> Vec4:
        """Matrix times column vector."""
        return Vec4(*(row.dot(vec) for row in self.rows()))

    def _cofactor(self, row: int, col: int) -> float:
        grid = self._grid()
        minor = [
            [value for j, value in enumerate(line) if j != col]
            for i, line in enumerate(grid)
            if i != row
        ]
        sign = -1.0 if (row + col) % 2 else 1.0
        return sign * _det3(minor)

    def determinant(self) -> float:
        """Determinant by expansion along the first column."""
        return sum(self[row, 0] * self._cofactor(row, 0) for row in range(4))

    def inverse(self) -> Mat4:
        """Inverse matrix; raises ValueError for a singular matrix."""
        det = self.determinant()
        if det == 0:
            raise ValueError("matrix is not invertible: determinant is 0")
        factor = 1.0 / det
        return Mat4(
            tuple(factor * self._cofactor(col, row) for row in range(4) for col in range(4))
        )

    def transpose(self) -> Mat4:
        """Rows and columns swapped."""
        return Mat4(tuple(value for column in zip(*self._grid()) for value in column))

    def format(self) -> str:
        """Row-by-row display of the matrix."""
        lines = (
            "[   " + "  ".join(f"{value:f}" for value in row) + "   ]\n"
            for row in self.rows()
        )
        return "".join(lines) + "\n"

    def replaced(self, updates: Mapping[tuple[int, int], float]) -> Mat4:
        """Copy with the given (row, col) cells replaced."""
        cells = list(self.cells)
        for (row, col), value in updates.items():
            cells[row * 4 + col] = float(value)
        return Mat4(tuple(cells))


def _base(base: Mat4 | None) -> Mat4:
    return Mat4.identity() if base is None else base


def translation(x: float, y: float, z: float, base: Mat4 | None = None) -> Mat4:
    """``base`` (identity by default) with its translation column set."""
    return _base(base).replaced({(0, 3): x, (1, 3): y, (2, 3): z})


def perspective_right_handed(
    fov: float, aspect_ratio: float, near: float, far: float, base: Mat4 | None = None
) -> Mat4:
    """Right-handed perspective projection written over ``base``."""
    half = math.tan(fov / 2.0)
    return _base(base).replaced({
        (0, 0): 1.0 / (aspect_ratio * half),
        (1, 1): 1.0 / half,
        (2, 2): (-far - near) / (far - near),
        (2, 3): -2.0 * near * far / (far - near),
        (3, 2): -1.0,
    })


def perspective_left_handed(
    fov: float, aspect_ratio: float, near: float, far: float, base: Mat4 | None = None
) -> Mat4:
    """Left-handed perspective projection written over ``base``."""
    half = math.tan(fov / 2.0)
    return _base(base).replaced({
        (0, 0): 1.0 / (aspect_ratio * half),
        (1, 1): 1.0 / half,
        (2, 2): (-near - far) / (near - far),
        (2, 3): 2.0 * near * far / (near - far),
        (3, 2): -1.0,
    })


def orthographic(
    near: float,
    far: float,
    right: float,
    left: float,
    top: float,
    bottom: float,
    base: Mat4 | None = None,
) -> Mat4:
    """Orthographic projection written over ``base``."""
    return _base(base).replaced({
        (0, 0): 2.0 / (right - left),
        (0, 3): -(right + left) / (right - left),
        (1, 1): 2.0 / (top - bottom),
        (1, 3): -(top + bottom) / (top - bottom),
        (2, 2): -2.0 / (far - near),
        (2, 3): -(far + near) / (far - near),
        (3, 3): 1.0,
    })


def euler_rotation(coord: Vec4, base: Mat4 | None = None) -> Mat4:
    """Rotation from the angles (psi, theta, phi) held in ``coord.x, .y, .z``."""
    cos_psi, sin_psi = math.cos(coord.x), math.sin(coord.x)
    cos_theta, sin_theta = math.cos(coord.y), math.sin(coord.y)
    cos_phi, sin_phi = math.cos(coord.z), math.sin(coord.z)
    return _base(base).replaced({
        (0, 0): cos_theta * cos_phi,
        (0, 1): sin_psi * sin_theta * cos_phi - cos_psi * sin_phi,
        (0, 2): cos_psi * sin_theta * cos_phi + sin_psi * sin_phi,
        (1, 0): cos_theta * sin_phi,
        (1, 1): sin_psi * sin_theta * sin_phi + cos_psi * cos_phi,
        (1, 2): cos_psi * sin_theta * sin_phi - sin_psi * cos_phi,
        (2, 0): -sin_theta,
        (2, 1): sin_psi * cos_theta,
        (2, 2): cos_psi * cos_theta,
        (3, 3): 1.0,
    })


def euler_rotation_xyz(x: float, y: float, z: float, base: Mat4 | None = None) -> Mat4:
    """Rotation from yaw ``x``, pitch ``y`` and roll ``z``."""
    cos_psi, sin_psi = math.cos(x), math.sin(x)
    cos_theta, sin_theta = math.cos(y), math.sin(y)
    cos_phi, sin_phi = math.cos(z), math.sin(z)
    return _base(base).replaced({
        (0, 0): cos_theta * cos_psi,
        (0, 1): -cos_theta * sin_psi,
        (0, 2): sin_theta,
        (1, 0): cos_phi * sin_psi + cos_psi * sin_phi * sin_theta,
        (1, 1): cos_phi * cos_psi - sin_psi * sin_phi * sin_theta,
        (1, 2): -cos_theta * sin_phi,
        (2, 0): sin_phi * sin_psi - cos_phi * cos_psi * sin_theta,
        (2, 1): cos_phi * sin_psi + cos_psi * sin_phi * sin_theta,
        (2, 2): cos_phi * cos_theta,
        (3, 3): 1.0,
    })


def quaternion_rotation(
    angle: float, axis: Union[Vec4, Sequence[float]], base: Mat4 | None = None
) -> Mat4:
    """Rotation by ``angle`` radians around ``axis`` (a Vec4 or an x, y, z triple)."""
    if isinstance(axis, Vec4):
        ax, ay, az = axis.x, axis.y, axis.z
    else:
        ax, ay, az = axis
    half_sin = math.sin(angle / 2.0)
    q0 = math.cos(angle / 2.0)
    q1, q2, q3 = ax * half_sin, ay * half_sin, az * half_sin
    return _base(base).replaced({
        (0, 0): 1.0 - 2.0 * q2 * q2 - 2.0 * q3 * q3,
        (0, 1): 2.0 * q1 * q2 - 2.0 * q0 * q3,
        (0, 2): 2.0 * q1 * q3 + 2.0 * q0 * q2,
        (1, 0): 2.0 * q1 * q2 + 2.0 * q0 * q3,
        (1, 1): 1.0 - 2.0 * q1 * q1 - 2.0 * q3 * q3,
        (1, 2): 2.0 * q2 * q3 - 2.0 * q0 * q1,
        (2, 0): 2.0 * q1 * q3 - 2.0 * q0 * q2,
        (2, 1): 2.0 * q2 * q3 + 2.0 * q0 * q1,
        (2, 2): 1.0 - 2.0 * q1 * q1 - 2.0 * q2 * q2,
        (3, 3): 1.0,
    })


def view(u: Vec4, v: Vec4, n: Vec4, base: Mat4 | None = None) -> Mat4:
    """View basis with right ``u``, up ``v`` and forward ``n`` as rows."""
    updates = {}
    for row, axis in enumerate((u, v, n)):
        updates[(row, 0)] = axis.x
        updates[(row, 1)] = axis.y
        updates[(row, 2)] = axis.z
    updates.update({(3, 0): 0.0, (3, 1): 0.0, (3, 2): 0.0, (3, 3): 1.0})
    return _base(base).replaced(updates)