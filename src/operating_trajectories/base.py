"""Operating-trajectory provider contract.

An operating-trajectory provider seeds an iterative trajectory optimizer
(SLQ, iLQR, ...) with a nominal state and input trajectory before its
first iteration. The optimizer binds one provider per time partition to
the mode-switch lookup of that partition and then requests trajectories
for sub-intervals as often as it needs them.

Lifecycle:
1. Construct once with the provider's fixed parameters
2. clone() one instance per execution context (thread / partition)
3. bind() the clone to a mode-switch lookup and partition index
4. Call get_operating_trajectories() any number of times
"""

import logging
import numbers
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional, Sequence

import numpy as np

from .mode_schedule import ModeSwitchLookup

logger = logging.getLogger(__name__)


class UnboundProviderError(RuntimeError):
    """Raised when a lookup-dependent provider is used before bind()."""


@dataclass
class OperatingTrajectories:
    """Stacked seed trajectory.

    Attributes:
        time: Time stamps (N,), non-decreasing.
        state: State samples (N, state_dim).
        input: Input samples (N, input_dim).
    """

    time: np.ndarray
    state: np.ndarray
    input: np.ndarray

    def __post_init__(self) -> None:
        n = len(self.time)
        if len(self.state) != n or len(self.input) != n:
            raise ValueError(
                f"Trajectory length mismatch: time={n}, "
                f"state={len(self.state)}, input={len(self.input)}"
            )
        if np.any(np.isnan(self.time)):
            raise ValueError("Time stamps must not be NaN")
        if n > 1 and np.any(np.diff(self.time) < 0):
            raise ValueError("Time stamps must be non-decreasing")

    def __len__(self) -> int:
        return len(self.time)

    @classmethod
    def from_samples(
        cls,
        time_trajectory: Sequence[float],
        state_trajectory: Sequence[np.ndarray],
        input_trajectory: Sequence[np.ndarray],
        state_dim: int,
        input_dim: int,
    ) -> "OperatingTrajectories":
        """Stack per-sample lists into arrays.

        Dimensions are needed so that an empty trajectory still has
        shapes (0, state_dim) and (0, input_dim).
        """
        time = np.asarray(time_trajectory, dtype=np.float64).reshape(-1)
        n = len(time)
        return cls(
            time=time,
            state=np.asarray(state_trajectory, dtype=np.float64).reshape(
                n, state_dim,
            ),
            input=np.asarray(input_trajectory, dtype=np.float64).reshape(
                n, input_dim,
            ),
        )


class TrajectoryProvider(ABC):
    """Base class for operating-trajectory providers.

    Subclasses implement clone() and get_operating_trajectories(). The
    binding to a mode-switch lookup is handled here: the provider keeps
    a borrowed reference only. The lookup must outlive every call made
    between bind() and the next bind().
    """

    def __init__(self, state_dim: int, input_dim: int):
        """Initialize provider dimensions.

        Args:
            state_dim: Dimension of the state space.
            input_dim: Dimension of the control input space.
        """
        if state_dim < 0 or input_dim < 0:
            raise ValueError(
                f"Dimensions must be non-negative, got "
                f"state_dim={state_dim}, input_dim={input_dim}"
            )
        self.state_dim = int(state_dim)
        self.input_dim = int(input_dim)

        self._mode_switch_lookup: Optional[ModeSwitchLookup] = None
        self._partition_index: Optional[int] = None
        self._algorithm_name: Optional[str] = None

    @property
    def mode_switch_lookup(self) -> Optional[ModeSwitchLookup]:
        return self._mode_switch_lookup

    @property
    def partition_index(self) -> Optional[int]:
        return self._partition_index

    @property
    def algorithm_name(self) -> Optional[str]:
        return self._algorithm_name

    @property
    def is_bound(self) -> bool:
        return self._mode_switch_lookup is not None

    def bind(
        self,
        mode_switch_lookup: ModeSwitchLookup,
        partition_index: int,
        algorithm_name: Optional[str] = None,
    ) -> None:
        """Bind the provider to the mode-switch lookup of a partition.

        Must be called before the first trajectory request of a
        partition. Calling it again overwrites the previous binding.

        Args:
            mode_switch_lookup: Lookup mapping time to the active
                subsystem ID. Not owned by the provider.
            partition_index: Index of the time partition.
            algorithm_name: Name of the calling algorithm (optional).
        """
        if isinstance(partition_index, bool) or not isinstance(
            partition_index, numbers.Integral,
        ):
            raise TypeError(
                f"partition_index must be an integer, got {partition_index!r}"
            )
        if partition_index < 0:
            raise ValueError(
                f"partition_index must be non-negative, got {partition_index}"
            )
        self._mode_switch_lookup = mode_switch_lookup
        self._partition_index = int(partition_index)
        self._algorithm_name = algorithm_name
        logger.debug(
            "%s bound to partition %d (algorithm=%s)",
            type(self).__name__, self._partition_index, algorithm_name,
        )

    @abstractmethod
    def clone(self) -> "TrajectoryProvider":
        """Return an independent, unbound copy of this provider."""

    @abstractmethod
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
        """Produce operating trajectories over [start_time, final_time].

        The interval is expected to have no intermediate switches except
        possibly at final_time.

        Args:
            initial_state: Initial state (N_x,). Hint for heuristics.
            start_time: Initial time.
            final_time: Final time.
            time_trajectory: Output time stamps.
            state_trajectory: Output state samples.
            input_trajectory: Output input samples.
            concat_output: Append to the outputs instead of replacing
                their content.
        """

    def operating_trajectories(
        self,
        initial_state: np.ndarray,
        start_time: float,
        final_time: float,
    ) -> OperatingTrajectories:
        """Return operating trajectories as stacked arrays.

        Args:
            initial_state: Initial state (N_x,).
            start_time: Initial time.
            final_time: Final time.

        Returns:
            OperatingTrajectories over [start_time, final_time].
        """
        time_trajectory: list = []
        state_trajectory: list = []
        input_trajectory: list = []
        self.get_operating_trajectories(
            initial_state, start_time, final_time,
            time_trajectory, state_trajectory, input_trajectory,
        )
        return OperatingTrajectories.from_samples(
            time_trajectory, state_trajectory, input_trajectory,
            self.state_dim, self.input_dim,
        )

    def _require_lookup(self) -> ModeSwitchLookup:
        """Return the bound lookup, failing if bind() was never called."""
        if self._mode_switch_lookup is None:
            raise UnboundProviderError(
                f"{type(self).__name__} requires bind() before "
                "requesting operating trajectories"
            )
        return self._mode_switch_lookup

    @staticmethod
    def _check_interval(start_time: float, final_time: float) -> None:
        if not start_time <= final_time:
            raise ValueError(
                f"start_time ({start_time}) must not exceed "
                f"final_time ({final_time})"
            )

    @staticmethod
    def _reset_outputs(
        concat_output: bool,
        *trajectories: list,
    ) -> None:
        if not concat_output:
            for trajectory in trajectories:
                trajectory.clear()
