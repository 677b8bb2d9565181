"""
Axis-aligned 3D rotations.

Angles are in degrees. The combined rotation is always composed as

    R = Rz(angle_z) @ Ry(angle_y) @ Rx(angle_x)

i.e. a vector is rotated about X first, then Y, then Z (fixed axes).
"""

import numpy as np

from pyalgebra.matrix.dense import Matrix


def rotation_x(angle_degrees: float) -> Matrix:
    """[1, 0, 0; 0, cos, -sin; 0, sin, cos]"""
    c, s = _cos_sin(angle_degrees)
    return Matrix.from_rows([
        [1.0, 0.0, 0.0],
        [0.0, c, -s],
        [0.0, s, c],
    ])


def rotation_y(angle_degrees: float) -> Matrix:
    """[cos, 0, sin; 0, 1, 0; -sin, 0, cos]"""
    c, s = _cos_sin(angle_degrees)
    return Matrix.from_rows([
        [c, 0.0, s],
        [0.0, 1.0, 0.0],
        [-s, 0.0, c],
    ])


def rotation_z(angle_degrees: float) -> Matrix:
    """[cos, -sin, 0; sin, cos, 0; 0, 0, 1]"""
    c, s = _cos_sin(angle_degrees)
    return Matrix.from_rows([
        [c, -s, 0.0],
        [s, c, 0.0],
        [0.0, 0.0, 1.0],
    ])


def rotation_matrix(
    angle_x: float = 0.0,
    angle_y: float = 0.0,
    angle_z: float = 0.0,
) -> Matrix:
    """Combined rotation Rz @ Ry @ Rx."""
    return rotation_z(angle_z).multiply(rotation_y(angle_y)).multiply(rotation_x(angle_x))


def rotate3d(
    vector: Matrix,
    angle_x: float = 0.0,
    angle_y: float = 0.0,
    angle_z: float = 0.0,
) -> Matrix:
    """
    Rotate a 3x1 column vector.

    Raises:
        DimensionMismatchError: If vector does not have exactly 3 rows
            (from the matrix product)
    """
    return rotation_matrix(angle_x, angle_y, angle_z).multiply(vector)


def _cos_sin(angle_degrees: float) -> tuple[float, float]:
    theta = np.deg2rad(float(angle_degrees))
    return float(np.cos(theta)), float(np.sin(theta))
