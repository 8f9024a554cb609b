"""Evaluate seed trajectories at arbitrary times."""

import numpy as np
from scipy.interpolate import make_interp_spline

from .base import OperatingTrajectories


def interpolate_operating_trajectories(
    trajectories: OperatingTrajectories,
    query_times: np.ndarray,
) -> tuple[np.ndarray, np.ndarray]:
    """Linearly interpolate state and input at the query times.

    Values are held constant outside the sampled time range. At a
    repeated time stamp (the join of two segments) the later sample
    is used.

    Args:
        trajectories: Seed trajectory with at least one sample.
        query_times: Times to evaluate (M,).

    Returns:
        Tuple of (state (M, N_x), input (M, N_u)).
    """
    query_times = np.atleast_1d(np.asarray(query_times, dtype=np.float64))
    time = trajectories.time

    if len(time) == 0:
        raise ValueError("Cannot interpolate an empty trajectory")
    if np.any(np.diff(time) < 0):
        raise ValueError("Time stamps must be non-decreasing")

    # Keep the last sample of each run of equal time stamps
    keep = np.append(np.diff(time) > 0, True)
    time = time[keep]
    state = trajectories.state[keep]
    inp = trajectories.input[keep]

    if len(time) == 1:
        return (
            np.repeat(state, len(query_times), axis=0),
            np.repeat(inp, len(query_times), axis=0),
        )

    return _interp(time, state, query_times), _interp(time, inp, query_times)


def _interp(time: np.ndarray, values: np.ndarray, query_times: np.ndarray) -> np.ndarray:
    if values.shape[1] == 0:
        return np.zeros((len(query_times), 0))

    spline = make_interp_spline(time, values, k=1, axis=0)
    return spline(np.clip(query_times, time[0], time[-1]))
