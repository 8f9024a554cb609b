"""Engine-side helpers for partitioned horizons.

Each time partition (and each thread working on it) gets its own clone
of a prototype provider. Within a partition, the horizon is split at
the switching times so that every request covers a switch-free
interval, and the segments are concatenated into one seed trajectory.
"""

import logging
from typing import Optional, Sequence

import numpy as np

from .base import OperatingTrajectories, TrajectoryProvider
from .mode_schedule import ModeSwitchLookup

logger = logging.getLogger(__name__)


def bind_partition_providers(
    prototype: TrajectoryProvider,
    mode_switch_lookup: ModeSwitchLookup,
    num_partitions: int,
    algorithm_name: Optional[str] = None,
) -> list[TrajectoryProvider]:
    """Clone and bind one provider per partition.

    The prototype itself is left unbound.

    Args:
        prototype: Provider to clone.
        mode_switch_lookup: Lookup shared (read-only) by all partitions.
        num_partitions: Number of time partitions.
        algorithm_name: Name of the calling algorithm (optional).

    Returns:
        List of bound providers, index i bound to partition i.
    """
    if num_partitions < 1:
        raise ValueError(f"num_partitions must be positive, got {num_partitions}")

    providers = []
    for partition_index in range(num_partitions):
        provider = prototype.clone()
        provider.bind(mode_switch_lookup, partition_index, algorithm_name)
        providers.append(provider)

    logger.debug(
        "Bound %d %s instances", num_partitions, type(prototype).__name__,
    )
    return providers


def collect_operating_trajectories(
    provider: TrajectoryProvider,
    initial_state: np.ndarray,
    start_time: float,
    final_time: float,
    event_times: Sequence[float] = (),
) -> OperatingTrajectories:
    """Build a multi-segment seed trajectory over [start_time, final_time].

    Args:
        provider: Bound provider.
        initial_state: Initial state (N_x,).
        start_time: Initial time.
        final_time: Final time.
        event_times: Switching times. Only those strictly inside the
            interval split it.

    Returns:
        Concatenated OperatingTrajectories.
    """
    if not start_time <= final_time:
        raise ValueError(
            f"start_time ({start_time}) must not exceed final_time ({final_time})"
        )

    inner = sorted(t for t in event_times if start_time < t < final_time)
    bounds = [start_time, *inner, final_time]

    time_trajectory: list = []
    state_trajectory: list = []
    input_trajectory: list = []
    for i in range(len(bounds) - 1):
        provider.get_operating_trajectories(
            initial_state,
            bounds[i],
            bounds[i + 1],
            time_trajectory,
            state_trajectory,
            input_trajectory,
            concat_output=i > 0,
        )

    return OperatingTrajectories.from_samples(
        time_trajectory, state_trajectory, input_trajectory,
        provider.state_dim, provider.input_dim,
    )
