from .base import TrajectoryGenerator
from .spline import (
    CubicSplineTrajectory,
    SplineMode,
    assemble_euclidean_system,
    assemble_rotation_system,
    build_cubic_spline,
)

__all__ = [
    "TrajectoryGenerator",
    "CubicSplineTrajectory",
    "SplineMode",
    "build_cubic_spline",
    "assemble_euclidean_system",
    "assemble_rotation_system",
]
