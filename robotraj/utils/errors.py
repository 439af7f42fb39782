"""
Custom exception types for robotraj trajectory construction.
Keep this focused and non-redundant; prefer built-ins where appropriate.
"""


class TrajectoryPlanningError(RuntimeError):
    """Trajectory generation/planning failure."""

    def __init__(self, message: str):
        self.original_message = message
        super().__init__(f"Trajectory Planning Error: {message}")

    def __str__(self):
        return f"Trajectory Planning Error: {self.original_message}"


class DimensionMismatchError(TrajectoryPlanningError, ValueError):
    """Time vector length and waypoint column count disagree."""


class InsufficientPointsError(TrajectoryPlanningError, ValueError):
    """Fewer waypoints than a cubic spline needs."""


class UnorderedTimeError(TrajectoryPlanningError, ValueError):
    """Waypoint timestamps are not in ascending order."""


class InvalidModeError(TrajectoryPlanningError, ValueError):
    """Unrecognized interpolation mode selector."""
