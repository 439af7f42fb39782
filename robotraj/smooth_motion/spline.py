"""
Cubic spline trajectory through timed waypoints.

The spline is C2 continuous: second derivatives at the knots are solved as
shared unknowns of one banded linear system, and each segment is a cubic in
local time tau = t - t_j. Velocity is zero at the first and last knot.

Two modes are supported:

- EUCLIDEAN: waypoint columns are positions, interpolated directly.
- ROTATION: waypoint column j is the rotation carried by segment j, as built by
  ``robotraj.utils.quaternion.rotation_waypoints``. Every segment starts from zero
  displacement, so positions returned are rotations relative to the orientation
  at the start of the active segment. Composing them back onto an absolute
  orientation is left to the caller.
"""

from __future__ import annotations

import logging
import math
import warnings
from enum import Enum

import numpy as np
from numpy.typing import ArrayLike, NDArray
from scipy.linalg import LinAlgWarning, lu_factor, lu_solve

from robotraj.config import CONTROL_RATE_HZ, TIME_EPSILON_S, TRACE_ENABLED
from robotraj.utils.errors import (
    DimensionMismatchError,
    InsufficientPointsError,
    InvalidModeError,
    TrajectoryPlanningError,
    UnorderedTimeError,
)

from .base import TrajectoryGenerator

logger = logging.getLogger(__name__)

MIN_POINTS = 3


class SplineMode(Enum):
    """Interpolation space of a cubic spline trajectory."""

    EUCLIDEAN = "euclidean"
    ROTATION = "rotation"

    @classmethod
    def parse(cls, mode: SplineMode | str) -> SplineMode:
        """Resolve an enum member or selector string ("euclidean", "rotation", "quaternion")."""
        if isinstance(mode, cls):
            return mode
        if isinstance(mode, str):
            key = mode.strip().lower()
            if key == "quaternion":
                return cls.ROTATION
            for member in cls:
                if member.value == key:
                    return member
        raise InvalidModeError(
            f"Unknown interpolation mode {mode!r}; use 'euclidean' or 'rotation'"
        )


def _coupling_matrix(t: NDArray) -> NDArray:
    """Second-derivative coupling rows shared by both modes (interior and last row)."""
    n = len(t)
    A = np.zeros((n, n))
    for i in range(1, n - 1):
        dt1 = t[i] - t[i - 1]
        dt2 = t[i + 1] - t[i]
        A[i, i - 1] = dt1 / 6
        A[i, i] = (dt1 + dt2) / 3
        A[i, i + 1] = dt2 / 6

    h = t[n - 1] - t[n - 2]
    A[n - 1, n - 2] = h / 6
    A[n - 1, n - 1] = h / 3
    return A


def assemble_euclidean_system(times: ArrayLike) -> tuple[NDArray, NDArray]:
    """
    Build the (A, B) pair for a spline through free Euclidean waypoints.

    The first row enforces velocity continuity at the second knot given a zero
    initial rate; the last row pins the final rate to zero.
    """
    t = np.asarray(times, dtype=float)
    n = len(t)
    A = _coupling_matrix(t)
    B = np.zeros((n, n))

    h0 = t[1] - t[0]
    h1 = t[2] - t[1]
    A[0, 0] = h0 / 2
    A[0, 1] = h0 / 2 + h1 / 3
    A[0, 2] = h1 / 6
    B[0, 1] = -1 / h1
    B[0, 2] = 1 / h1

    for i in range(1, n - 1):
        dt1 = t[i] - t[i - 1]
        dt2 = t[i + 1] - t[i]
        B[i, i - 1] = 1 / dt1
        B[i, i] = -1 / dt1 - 1 / dt2
        B[i, i + 1] = 1 / dt2

    h = t[n - 1] - t[n - 2]
    B[n - 1, n - 2] = 1 / h
    B[n - 1, n - 1] = -1 / h
    return A, B


def assemble_rotation_system(times: ArrayLike) -> tuple[NDArray, NDArray]:
    """
    Build the (A, B) pair for a spline over per-segment rotation differences.

    Value j is the displacement over segment j measured from a zero baseline, so
    row i couples only the segments either side of knot i.
    """
    t = np.asarray(times, dtype=float)
    n = len(t)
    A = _coupling_matrix(t)
    B = np.zeros((n, n))

    h0 = t[1] - t[0]
    A[0, 0] = h0 / 3
    A[0, 1] = h0 / 6
    B[0, 0] = 1 / h0

    for i in range(1, n - 1):
        dt1 = t[i] - t[i - 1]
        dt2 = t[i + 1] - t[i]
        B[i, i - 1] = -1 / dt1
        B[i, i] = 1 / dt2

    h = t[n - 1] - t[n - 2]
    B[n - 1, n - 2] = -1 / h
    return A, B


_ASSEMBLERS = {
    SplineMode.EUCLIDEAN: assemble_euclidean_system,
    SplineMode.ROTATION: assemble_rotation_system,
}


def solve_second_derivatives(A: NDArray, B: NDArray, values: NDArray) -> NDArray:
    """
    Solve A @ sdd = B @ s for every dimension at once.

    Args:
        A, B: (n, n) system matrices
        values: (m, n) waypoint matrix

    Returns:
        (m, n) second derivatives at the knots
    """
    with warnings.catch_warnings():
        warnings.simplefilter("error", LinAlgWarning)
        try:
            lu_piv = lu_factor(A)
        except (LinAlgWarning, np.linalg.LinAlgError) as e:
            raise TrajectoryPlanningError(f"Spline system is singular: {e}") from e
    sdd = lu_solve(lu_piv, B @ values.T)
    if not np.all(np.isfinite(sdd)):
        raise TrajectoryPlanningError("Spline system produced non-finite second derivatives")
    return sdd.T


def _frozen(arr: NDArray) -> NDArray:
    arr.setflags(write=False)
    return arr


class CubicSplineTrajectory(TrajectoryGenerator):
    """
    C2 cubic spline through n >= 3 timed waypoints in m dimensions.

    Construction validates the inputs, solves for the knot second derivatives and
    stores the per-segment coefficients; the instance is immutable afterwards and
    safe to query from several threads.

    Args:
        times: (n,) knot times, strictly increasing
        waypoints: (m, n) matrix, one column per knot. A 1-D sequence is one dimension.
        mode: SplineMode or selector string
        control_rate: Default sample rate for ``sample`` (Hz)

    Raises:
        DimensionMismatchError, InsufficientPointsError, UnorderedTimeError,
        InvalidModeError
    """

    def __init__(
        self,
        times: ArrayLike,
        waypoints: ArrayLike,
        mode: SplineMode | str = SplineMode.EUCLIDEAN,
        control_rate: float = CONTROL_RATE_HZ,
    ):
        spline_mode = SplineMode.parse(mode)
        t, values = _validate_waypoints(times, waypoints)
        super().__init__(control_rate)

        A, B = _ASSEMBLERS[spline_mode](t)
        sdd = solve_second_derivatives(A, B, values)
        a, b, c, d = _segment_coefficients(t, values, sdd, spline_mode)

        self._mode = spline_mode
        self._times = _frozen(t)
        self._waypoints = _frozen(values)
        self._a = _frozen(a)
        self._b = _frozen(b)
        self._c = _frozen(c)
        self._d = _frozen(d)

        logger.debug(
            f"Built {spline_mode.value} cubic spline: {self.num_points} knots, "
            f"{self.dimensions} dims over [{t[0]:.6g}, {t[-1]:.6g}] s"
        )

    # ---- model ----

    @property
    def mode(self) -> SplineMode:
        return self._mode

    @property
    def times(self) -> NDArray:
        return self._times

    @property
    def waypoints(self) -> NDArray:
        return self._waypoints

    @property
    def dimensions(self) -> int:
        return int(self._waypoints.shape[0])

    @property
    def num_points(self) -> int:
        return int(self._times.shape[0])

    @property
    def start_time(self) -> float:
        return float(self._times[0])

    @property
    def end_time(self) -> float:
        return float(self._times[-1])

    @property
    def duration(self) -> float:
        return self.end_time - self.start_time

    @property
    def coefficients(self) -> tuple[NDArray, NDArray, NDArray, NDArray]:
        """(a, b, c, d), each of shape (m, n-1)."""
        return self._a, self._b, self._c, self._d

    # ---- queries ----

    def segment_index(self, t: float) -> int:
        """Index of the last segment starting at or before t, clamped to [0, n-2]."""
        for j in range(self.num_points - 2, -1, -1):
            if self._times[j] <= t:
                return j
        return 0

    def evaluate(self, t: float) -> tuple[NDArray, NDArray, NDArray]:
        """
        Position, velocity and acceleration at time t.

        Times outside the knot range are clamped: the first or last waypoint is
        returned with zero velocity and acceleration.
        """
        t = float(t)
        if not math.isfinite(t):
            raise ValueError(f"Query time must be finite, got {t}")

        zeros = np.zeros(self.dimensions)
        if t >= self._times[-1]:
            return self._waypoints[:, -1].copy(), zeros, zeros.copy()
        if t <= self._times[0]:
            return self._waypoints[:, 0].copy(), zeros, zeros.copy()

        j = self.segment_index(t)
        tau = t - self._times[j]
        a = self._a[:, j]
        b = self._b[:, j]
        c = self._c[:, j]
        d = self._d[:, j]

        pos = a + b * tau + c * tau**2 + d * tau**3
        vel = b + 2 * c * tau + 3 * d * tau**2
        acc = 2 * c + 6 * d * tau

        if TRACE_ENABLED:
            logger.trace(f"t={t:.6f} segment={j} tau={tau:.6f} pos={pos.tolist()}")  # type: ignore[attr-defined]
        return pos, vel, acc

    __call__ = evaluate

    def sample(
        self, sample_rate: float | None = None
    ) -> tuple[NDArray, NDArray, NDArray, NDArray]:
        """
        Sample the whole trajectory uniformly.

        Args:
            sample_rate: Samples per second (defaults to this trajectory's control rate)

        Returns:
            (times (N,), positions (N, m), velocities (N, m), accelerations (N, m))
        """
        ts = self.generate_timestamps(self.duration, self.start_time, sample_rate)

        pos = np.empty((len(ts), self.dimensions))
        vel = np.empty_like(pos)
        acc = np.empty_like(pos)
        for k, tk in enumerate(ts):
            pos[k], vel[k], acc[k] = self.evaluate(tk)
        return ts, pos, vel, acc

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(mode={self._mode.value}, points={self.num_points}, "
            f"dims={self.dimensions}, t=[{self.start_time:g}, {self.end_time:g}])"
        )


def build_cubic_spline(
    times: ArrayLike,
    waypoints: ArrayLike,
    mode: SplineMode | str = SplineMode.EUCLIDEAN,
) -> CubicSplineTrajectory:
    """Functional form of ``CubicSplineTrajectory(times, waypoints, mode)``."""
    return CubicSplineTrajectory(times, waypoints, mode)


def _validate_waypoints(
    times: ArrayLike, waypoints: ArrayLike
) -> tuple[NDArray, NDArray]:
    """Copy and check knot times and waypoint matrix; returns ((n,), (m, n)) float arrays."""
    t = np.array(times, dtype=float)
    values = np.array(waypoints, dtype=float)

    if t.ndim != 1:
        raise DimensionMismatchError(f"Expected a 1-D time vector, got shape {t.shape}")
    if values.ndim == 1:
        values = values.reshape(1, -1)
    elif values.ndim != 2:
        raise DimensionMismatchError(
            f"Expected an (m, n) waypoint matrix, got shape {values.shape}"
        )

    if t.shape[0] != values.shape[1]:
        raise DimensionMismatchError(
            f"Inputs are not of equal length: {t.shape[0]} times for {values.shape[1]} waypoints"
        )
    if t.shape[0] < MIN_POINTS:
        raise InsufficientPointsError(
            f"A cubic spline needs at least {MIN_POINTS} points, got {t.shape[0]}"
        )
    if not np.all(np.isfinite(t)) or not np.all(np.isfinite(values)):
        raise ValueError("Times and waypoints must be finite")

    gaps = np.diff(t)
    bad = np.flatnonzero(gaps <= TIME_EPSILON_S)
    if bad.size:
        i = int(bad[0])
        raise UnorderedTimeError(
            f"Time must be strictly ascending: t[{i}]={t[i]:g}, t[{i + 1}]={t[i + 1]:g}"
        )
    return t, values


def _segment_coefficients(
    t: NDArray, values: NDArray, sdd: NDArray, mode: SplineMode
) -> tuple[NDArray, NDArray, NDArray, NDArray]:
    """Per-segment cubic coefficients, each (m, n-1), from the knot second derivatives."""
    dt = np.diff(t)
    s0 = sdd[:, :-1]
    s1 = sdd[:, 1:]

    c = 0.5 * s0
    d = (s1 - s0) / (6 * dt)

    if mode is SplineMode.EUCLIDEAN:
        a = values[:, :-1].copy()
        ds = np.diff(values, axis=1)
    else:
        # Each segment starts from zero rotation; its value is the full displacement
        a = np.zeros_like(s0)
        ds = values[:, :-1]

    b = ds / dt - dt * (s1 + 2 * s0) / 6
    b[:, -1] = -0.5 * dt[-1] * (s1[:, -1] + s0[:, -1])
    b[:, 0] = 0.0
    return a, b, c, d

