"""
Shared trajectory sampling utilities.
"""

import math

import numpy as np

from robotraj.config import CONTROL_RATE_HZ


def _samples_for_duration(duration: float, sample_rate: float) -> int:
    if duration <= 0:
        return 2
    n = int(round(duration * sample_rate)) + 1
    return max(2, n)


def sample_times(
    start: float,
    end: float,
    sample_rate: float | None = None,
) -> np.ndarray:
    """
    Uniformly spaced sample times covering [start, end], both ends included.

    Returns: array of shape (N,) with N = round((end - start) * rate) + 1, at least 2.
    """
    sr = CONTROL_RATE_HZ if sample_rate is None else float(sample_rate)
    if not math.isfinite(sr) or sr <= 0:
        raise ValueError(f"sample_rate must be positive and finite, got {sr}")
    if not (math.isfinite(start) and math.isfinite(end)):
        raise ValueError("start and end must be finite")
    if end < start:
        raise ValueError("end must not precede start")

    n = _samples_for_duration(float(end) - float(start), sr)
    return np.linspace(float(start), float(end), n)
