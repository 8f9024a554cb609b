"""Constant operating-point provider.

The default provider for SLQ-type algorithms: the same state/input pair
is returned at both ends of every requested interval. Switches inside
the interval are ignored, so systems that need a mode-aware seed must
use another provider.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional

import numpy as np

from .base import TrajectoryProvider

logger = logging.getLogger(__name__)


@dataclass
class OperatingPointConfig:
    """Configuration for a constant operating point.

    Attributes:
        state: State operating point (N_x,).
        input: Input operating point (N_u,).
    """

    state: list[float] = field(default_factory=list)
    input: list[float] = field(default_factory=list)


def _as_operating_point(
    value: Optional[np.ndarray],
    dim: Optional[int],
    name: str,
) -> np.ndarray:
    """Build a read-only copy of an operating point vector."""
    if value is None:
        if dim is None:
            raise ValueError(f"Either {name} or its dimension must be given")
        point = np.zeros(dim)
    else:
        point = np.array(value, dtype=np.float64)
        if point.ndim != 1:
            raise ValueError(
                f"{name} must be a 1-D vector, got shape {point.shape}"
            )
        if dim is not None and point.shape[0] != dim:
            raise ValueError(
                f"{name} has dimension {point.shape[0]}, expected {dim}"
            )
    point.setflags(write=False)
    return point


class ConstantOperatingPointProvider(TrajectoryProvider):
    """Provider emitting a fixed operating point over any interval.

    Usage:
        provider = ConstantOperatingPointProvider(
            state_operating_point=np.array([1.0, -1.0]),
            input_operating_point=np.array([0.5]),
        )
        traj = provider.operating_trajectories(x0, 0.0, 2.0)
    """

    def __init__(
        self,
        state_operating_point: Optional[np.ndarray] = None,
        input_operating_point: Optional[np.ndarray] = None,
        state_dim: Optional[int] = None,
        input_dim: Optional[int] = None,
    ):
        """Initialize provider.

        Missing operating points default to zero vectors, in which case
        the matching dimension is required.

        Args:
            state_operating_point: State operating point (N_x,).
            input_operating_point: Input operating point (N_u,).
            state_dim: State dimension. Inferred if None.
            input_dim: Input dimension. Inferred if None.
        """
        state = _as_operating_point(
            state_operating_point, state_dim, "state_operating_point",
        )
        inp = _as_operating_point(
            input_operating_point, input_dim, "input_operating_point",
        )
        super().__init__(state.shape[0], inp.shape[0])

        self._state_operating_point = state
        self._input_operating_point = inp

    @classmethod
    def from_config(
        cls,
        config: OperatingPointConfig,
    ) -> "ConstantOperatingPointProvider":
        return cls(
            state_operating_point=np.asarray(config.state, dtype=np.float64),
            input_operating_point=np.asarray(config.input, dtype=np.float64),
        )

    @property
    def state_operating_point(self) -> np.ndarray:
        return self._state_operating_point

    @property
    def input_operating_point(self) -> np.ndarray:
        return self._input_operating_point

    def clone(self) -> "ConstantOperatingPointProvider":
        logger.debug("Cloning %r", self)
        return ConstantOperatingPointProvider(
            self._state_operating_point.copy(),
            self._input_operating_point.copy(),
        )

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
        """Emit the operating point at start_time and final_time.

        initial_state and the bound lookup are not used.
        """
        self._check_interval(start_time, final_time)
        self._reset_outputs(
            concat_output, time_trajectory, state_trajectory, input_trajectory,
        )

        time_trajectory.append(float(start_time))
        time_trajectory.append(float(final_time))

        state_trajectory.append(self._state_operating_point.copy())
        state_trajectory.append(self._state_operating_point.copy())

        input_trajectory.append(self._input_operating_point.copy())
        input_trajectory.append(self._input_operating_point.copy())

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}("
            f"state={self._state_operating_point.tolist()}, "
            f"input={self._input_operating_point.tolist()})"
        )
