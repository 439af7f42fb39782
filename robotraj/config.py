"""
Central configuration for robotraj tunables and shared constants.
"""

import logging
import os

TRACE: int = 5
logging.addLevelName(TRACE, "TRACE")
# Add Logger.trace if missing
if not hasattr(logging.Logger, "trace"):

    def _trace(self, msg, *args, **kwargs):
        if self.isEnabledFor(TRACE):
            self._log(TRACE, msg, args, **kwargs)

    logging.Logger.trace = _trace  # type: ignore[attr-defined]
    logging.TRACE = TRACE  # type: ignore[attr-defined]

TRACE_ENABLED = str(os.getenv("ROBOTRAJ_TRACE", "0")).lower() in ("1", "true", "yes", "on")

logger = logging.getLogger(__name__)


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError:
        logger.warning(f"Ignoring non-numeric {name}={raw!r}, using {default}")
        return default


# Default control/sample rate (Hz) used when sampling a trajectory densely
CONTROL_RATE_HZ: float = _env_float("ROBOTRAJ_CONTROL_RATE_HZ", 250.0)

# Shortest segment accepted between two knots (seconds)
TIME_EPSILON_S: float = _env_float("ROBOTRAJ_TIME_EPSILON_S", 1e-12)

LOG_LEVEL_DEFAULT: str = "INFO"
