import numpy as np
import pytest
from robotraj.config import CONTROL_RATE_HZ
from robotraj.utils import trajectory as traj


def test_sample_times_endpoints_and_count():
    start = 0.5
    end = 2.0

    ts = traj.sample_times(start, end)
    # Expected sample count: duration * rate + 1
    expected_n = int(round((end - start) * CONTROL_RATE_HZ)) + 1
    assert ts.shape == (expected_n,)
    assert ts[0] == pytest.approx(start)
    assert ts[-1] == pytest.approx(end)

    diffs = np.diff(ts)
    assert np.all(diffs > 0)
    assert np.allclose(diffs, 1.0 / CONTROL_RATE_HZ)


@pytest.mark.parametrize(
    "start,end,rate,expected_n",
    [
        (0.0, 1.0, 10.0, 11),
        (0.0, 0.02, 10.0, 2),  # shorter than one period still yields both ends
        (3.0, 3.0, 100.0, 2),  # zero duration
        (-1.0, 1.0, 4.0, 9),
    ],
)
def test_sample_times_explicit_rate(start, end, rate, expected_n):
    ts = traj.sample_times(start, end, rate)
    assert len(ts) == expected_n
    assert ts[0] == start
    assert ts[-1] == end


def test_sample_times_rejects_bad_input():
    with pytest.raises(ValueError):
        traj.sample_times(0.0, 1.0, 0.0)
    with pytest.raises(ValueError):
        traj.sample_times(2.0, 1.0)
    with pytest.raises(ValueError):
        traj.sample_times(0.0, 1.0, float("inf"))
    with pytest.raises(ValueError):
        traj.sample_times(0.0, 1.0, float("nan"))
    with pytest.raises(ValueError):
        traj.sample_times(0.0, float("inf"), 10.0)
