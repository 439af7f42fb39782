"""
Pytest configuration and shared fixtures for robotraj tests.

Provides marker registration and the waypoint sets reused across the suite.
"""

import os
import sys
import logging

import numpy as np
import pytest

# Add the parent directory to Python path so we can import the package
sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))

logger = logging.getLogger(__name__)


# ============================================================================
# WAYPOINT FIXTURES
# ============================================================================

@pytest.fixture
def bump_waypoints():
    """Three knots, one dimension: up to 1 and back to 0."""
    return np.array([0.0, 1.0, 2.0]), np.array([[0.0, 1.0, 0.0]])


@pytest.fixture
def uneven_waypoints():
    """Five non-uniformly spaced knots in three dimensions."""
    times = np.array([0.0, 0.4, 1.5, 1.9, 3.2])
    values = np.array([
        [0.10, 0.35, -0.20, 0.05, 0.40],
        [-1.0, 0.0, 2.0, 1.5, 1.0],
        [5.0, 4.0, 4.5, 6.0, 5.5],
    ])
    return times, values


# ============================================================================
# PYTEST CONFIGURATION HOOKS
# ============================================================================

def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "unit: Unit tests that test individual components in isolation"
    )
    config.addinivalue_line(
        "markers", "slow: Slow-running tests"
    )


def pytest_sessionstart(session):
    """Called after the Session object has been created."""
    logger.info("Starting robotraj test session")
