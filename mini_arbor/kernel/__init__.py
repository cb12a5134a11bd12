# mini_arbor/kernel - Geometry primitives shared by the interpreter
"""
KERNEL: ORIENTATION MATH
========================

The turtle carries a local frame of three orthonormal vectors
(heading, left, up). Every turn, pitch and roll is a rotation of two of
those vectors about the third. This package holds that math, independent
of which grammar symbol triggered it.
"""

from .rotation import axis_angle_quaternion, rotate_vector, rotate_frame

__all__ = ['axis_angle_quaternion', 'rotate_vector', 'rotate_frame']
