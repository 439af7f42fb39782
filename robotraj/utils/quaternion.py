"""
Quaternion error helpers for orientation trajectories.

Quaternions are scalar-first ``[w, x, y, z]``. Functions here accept plain
sequences, numpy arrays or ``spatialmath.UnitQuaternion`` instances and never
modify their arguments.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from typing import Union

import numpy as np
from numpy.typing import NDArray
from spatialmath import UnitQuaternion

logger = logging.getLogger(__name__)

QuaternionLike = Union[Sequence[float], NDArray, UnitQuaternion]


def as_quaternion_array(q: QuaternionLike) -> NDArray:
    """Return ``q`` as a fresh float array of shape (4,), scalar part first."""
    if isinstance(q, UnitQuaternion):
        if len(q) != 1:
            raise ValueError(f"expected a single quaternion, got {len(q)}")
        arr = np.array(q.vec, dtype=float)
    else:
        arr = np.array(q, dtype=float)
    if arr.shape != (4,):
        raise ValueError(f"quaternion must have 4 components, got shape {arr.shape}")
    return arr


def quaternion_error(actual: QuaternionLike, desired: QuaternionLike) -> NDArray:
    """
    Orientation error between two unit quaternions.

    For a unit quaternion Q, Q * conj(Q) = [1, 0, 0, 0], so the rotation carrying
    ``actual`` onto ``desired`` is ``desired * conj(actual)``. Only its vector part
    is returned; for small errors its norm approximates the angle in radians,
    which makes it usable directly as an orientation feedback signal.

    ``desired`` and ``-desired`` give the same result unless the two quaternions
    are exactly 90 degrees apart (dot product 0). There neither sign is flipped,
    so the two results differ in sign.

    Args:
        actual: Current orientation
        desired: Target orientation

    Returns:
        Vector part of the error quaternion, shape (3,)
    """
    qa = as_quaternion_array(actual)
    qd = as_quaternion_array(desired)

    # Unit norm, so no division by the magnitudes
    angle = np.arccos(np.clip(np.dot(qa, qd), -1.0, 1.0))

    # q and -q are the same rotation; take the short way round
    if angle > np.pi / 2:
        qd = -qd

    return qa[0] * qd[1:] - qd[0] * qa[1:] - np.cross(qd[1:], qa[1:])


def rotation_waypoints(quaternions: Iterable[QuaternionLike]) -> NDArray:
    """
    Encode a sequence of orientations as rotation-difference waypoints.

    Column ``j`` holds the rotation carried by segment ``j`` (from orientation
    ``j`` to ``j + 1``); the final column is zero. The result is the waypoint
    matrix expected by a rotation-mode cubic spline.

    Returns: array of shape (3, n)
    """
    quats = [as_quaternion_array(q) for q in quaternions]
    n = len(quats)
    if n == 0:
        return np.zeros((3, 0))

    out = np.zeros((3, n))
    for j in range(n - 1):
        out[:, j] = quaternion_error(quats[j], quats[j + 1])
    logger.debug(f"Encoded {n} orientations as rotation differences")
    return out
