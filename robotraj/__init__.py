"""
robotraj Python Package

Cubic spline trajectories for robot motion control: sparse timed waypoints in,
position/velocity/acceleration references out, at any query time.

Key components:
- CubicSplineTrajectory: C2 cubic spline in Euclidean or rotation mode
- SplineMode: interpolation mode selector
- build_cubic_spline: functional constructor
- quaternion_error: vector orientation error between two unit quaternions
- rotation_waypoints: encode orientations for a rotation-mode spline
"""

from ._version import __version__
from .smooth_motion import CubicSplineTrajectory, SplineMode, build_cubic_spline
from .utils.errors import (
    DimensionMismatchError,
    InsufficientPointsError,
    InvalidModeError,
    TrajectoryPlanningError,
    UnorderedTimeError,
)
from .utils.quaternion import quaternion_error, rotation_waypoints

__all__ = [
    "__version__",
    "CubicSplineTrajectory",
    "SplineMode",
    "build_cubic_spline",
    "quaternion_error",
    "rotation_waypoints",
    "TrajectoryPlanningError",
    "DimensionMismatchError",
    "InsufficientPointsError",
    "UnorderedTimeError",
    "InvalidModeError",
]
