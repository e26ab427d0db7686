"""
ephemcore.frames.matrix
-----------------------
Rotation-matrix algebra.

Matrices are stored so that ``v'[i] = sum_j rot[j][i] * v[j]``; the rows
of ``rot`` are therefore the images of the unit axes.
"""

from __future__ import annotations

import enum
import math
from typing import Sequence, Tuple

from ..core.errors import InvalidArgumentError
from ..core.types import RotationMatrix, StateVector, Vector

XYZ = Tuple[float, float, float]


class PrecessDirection(enum.Enum):
    FROM_2000 = 0   # J2000 -> of date
    INTO_2000 = 1   # of date -> J2000


def rotate_xyz(rot: RotationMatrix, v: Sequence[float]) -> XYZ:
    r = rot.rot
    return (
        r[0][0] * v[0] + r[1][0] * v[1] + r[2][0] * v[2],
        r[0][1] * v[0] + r[1][1] * v[1] + r[2][1] * v[2],
        r[0][2] * v[0] + r[1][2] * v[1] + r[2][2] * v[2],
    )


def rotate_vector(rotation: RotationMatrix, vector: Vector) -> Vector:
    x, y, z = rotate_xyz(rotation, (vector.x, vector.y, vector.z))
    return Vector(x, y, z, vector.t)


def rotate_state(rotation: RotationMatrix, state: StateVector) -> StateVector:
    x, y, z = rotate_xyz(rotation, (state.x, state.y, state.z))
    vx, vy, vz = rotate_xyz(rotation, (state.vx, state.vy, state.vz))
    return StateVector(x, y, z, vx, vy, vz, state.t)


def inverse_rotation(rotation: RotationMatrix) -> RotationMatrix:
    """Transpose; the inverse of an orthonormal rotation."""
    r = rotation.rot
    return RotationMatrix.from_rows([[r[j][i] for j in range(3)] for i in range(3)])


def combine_rotation(a: RotationMatrix, b: RotationMatrix) -> RotationMatrix:
    """
    Rotation equivalent to applying `a` first and then `b`.
    """
    ar = a.rot
    br = b.rot
    return RotationMatrix.from_rows([
        [sum(br[k][j] * ar[i][k] for k in range(3)) for j in range(3)]
        for i in range(3)
    ])


def identity_matrix() -> RotationMatrix:
    return RotationMatrix.from_rows([[1, 0, 0], [0, 1, 0], [0, 0, 1]])


def pivot(rotation: RotationMatrix, axis: int, angle: float) -> RotationMatrix:
    """
    Re-orient `rotation` by `angle` degrees about coordinate `axis` (0, 1 or 2),
    counterclockwise when looking from the positive end of the axis.
    """
    if axis not in (0, 1, 2):
        raise InvalidArgumentError(f"Invalid axis {axis}. Must be 0, 1 or 2.")

    radians = math.radians(angle)
    c = math.cos(radians)
    s = math.sin(radians)

    # (i, j, k) keeps i x j = k for any choice of axis
    i = (axis + 1) % 3
    j = (axis + 2) % 3
    k = axis

    r = rotation.rot
    out = [[0.0] * 3 for _ in range(3)]
    for row in (i, j, k):
        out[row][i] = c * r[row][i] - s * r[row][j]
        out[row][j] = s * r[row][i] + c * r[row][j]
        out[row][k] = r[row][k]
    return RotationMatrix.from_rows(out)
