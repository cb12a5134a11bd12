# mini_arbor/kernel/rotation.py
"""Axis-angle quaternion rotation for the turtle's orientation frame."""

import numpy as np


def axis_angle_quaternion(axis: np.ndarray, angle: float) -> np.ndarray:
    """
    Build a unit quaternion (w, x, y, z) rotating by `angle` radians about `axis`.

    Args:
        axis: Rotation axis (3,), normalized internally
        angle: Signed rotation angle in radians (right-hand rule)

    Returns:
        q: Unit quaternion as array (4,)

    Raises:
        ValueError: If the axis has zero length
    """
    axis = np.asarray(axis, dtype=float)
    norm = np.linalg.norm(axis)
    if norm < 1e-12:
        raise ValueError("Rotation axis has zero length")

    half = 0.5 * angle
    xyz = (axis / norm) * np.sin(half)
    return np.array([np.cos(half), xyz[0], xyz[1], xyz[2]])


def rotate_vector(q: np.ndarray, v: np.ndarray) -> np.ndarray:
    """
    Apply unit quaternion q to vector v.

    Uses the expanded form v' = v + 2w(u × v) + 2u × (u × v),
    where q = (w, u). Equivalent to q·v·q* without building matrices.
    """
    w = q[0]
    u = q[1:]
    t = 2.0 * np.cross(u, v)
    return v + w * t + np.cross(u, t)


def rotate_frame(
    axis: np.ndarray,
    angle: float,
    *vectors: np.ndarray,
) -> tuple:
    """
    Rotate each of `vectors` about `axis` by `angle` radians.

    The axis itself is never passed here: frame rotations only move the two
    vectors orthogonal to the rotation axis.
    """
    q = axis_angle_quaternion(axis, angle)
    return tuple(rotate_vector(q, v) for v in vectors)
