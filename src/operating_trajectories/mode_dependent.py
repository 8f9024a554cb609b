"""Mode-dependent operating-point provider.

Holds one operating point per subsystem and seeds each switch-free
interval with the operating point of the subsystem active at its start.
Requires bind(): the active subsystem comes from the bound lookup.
"""

import logging
from typing import Mapping

import numpy as np

from .base import TrajectoryProvider
from .operating_point import _as_operating_point

logger = logging.getLogger(__name__)


class ModeDependentOperatingPoints(TrajectoryProvider):
    """Provider with a per-subsystem operating point table.

    Usage:
        provider = ModeDependentOperatingPoints({
            0: (np.array([0.0, 0.0]), np.array([0.0])),
            1: (np.array([1.0, 0.0]), np.array([9.81])),
        })
        provider.bind(ModeSchedule([1.0], [0, 1]), partition_index=0)
    """

    def __init__(self, operating_points: Mapping[int, tuple]):
        """Initialize provider.

        Args:
            operating_points: Mapping subsystem ID -> (state (N_x,),
                input (N_u,)). All entries must share dimensions.
        """
        if not operating_points:
            raise ValueError("At least one operating point is required")

        table: dict[int, tuple[np.ndarray, np.ndarray]] = {}
        state_dim = input_dim = None
        for subsystem_id, (state, inp) in operating_points.items():
            state = _as_operating_point(state, state_dim, "state_operating_point")
            inp = _as_operating_point(inp, input_dim, "input_operating_point")
            state_dim, input_dim = state.shape[0], inp.shape[0]
            table[int(subsystem_id)] = (state, inp)

        super().__init__(state_dim, input_dim)
        self._operating_points = table

    @property
    def subsystem_ids(self) -> list[int]:
        return sorted(self._operating_points)

    def operating_point(self, subsystem_id: int) -> tuple[np.ndarray, np.ndarray]:
        """Return the (state, input) operating point of a subsystem."""
        try:
            return self._operating_points[subsystem_id]
        except KeyError:
            raise KeyError(
                f"No operating point for subsystem {subsystem_id}; "
                f"known subsystems: {self.subsystem_ids}"
            ) from None

    def clone(self) -> "ModeDependentOperatingPoints":
        logger.debug(
            "Cloning %s with subsystems %s", type(self).__name__, self.subsystem_ids,
        )
        return ModeDependentOperatingPoints({
            subsystem_id: (state.copy(), inp.copy())
            for subsystem_id, (state, inp) in self._operating_points.items()
        })

    def get_operating_trajectories(
        self,
        initial_state: np.ndarray,
        start_time: float,
        final_time: float,
        time_trajectory: list,
        state_trajectory: list,
        input_trajectory: list,
        concat_output: bool = False,
    ) -> None:
        lookup = self._require_lookup()
        self._check_interval(start_time, final_time)

        subsystem_id = lookup.find_active_subsystem(start_time)
        state, inp = self.operating_point(subsystem_id)

        self._reset_outputs(
            concat_output, time_trajectory, state_trajectory, input_trajectory,
        )
        for t in (start_time, final_time):
            time_trajectory.append(float(t))
            state_trajectory.append(state.copy())
            input_trajectory.append(inp.copy())
