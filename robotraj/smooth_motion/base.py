"""
Base trajectory generator.

Provides common timing utilities for derived generators.
"""

import numpy as np

from robotraj.config import CONTROL_RATE_HZ
from robotraj.utils.trajectory import sample_times


class TrajectoryGenerator:
    """Base class for trajectories sampled by a fixed-rate control loop"""

    def __init__(self, control_rate: float = CONTROL_RATE_HZ):
        """
        Initialize trajectory generator

        Args:
            control_rate: Control loop frequency in Hz
        """
        if control_rate <= 0:
            raise ValueError(f"control_rate must be positive, got {control_rate}")
        self.control_rate = float(control_rate)
        self.dt = 1.0 / self.control_rate

    def generate_timestamps(
        self, duration: float, start: float = 0.0, sample_rate: float | None = None
    ) -> np.ndarray:
        """
        Evenly spaced timestamps over [start, start + duration], both ends included.

        Spacing is ``dt`` (or 1 / sample_rate) whenever duration is a whole number of periods.
        """
        sr = self.control_rate if sample_rate is None else float(sample_rate)
        return sample_times(start, start + duration, sr)
