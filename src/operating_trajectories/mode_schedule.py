"""Mode-switch lookup for switched systems.

Providers only see the ModeSwitchLookup protocol. ModeSchedule is the
reference lookup built from a sorted list of event times: subsystem
subsystem_ids[i] is active on [event_times[i-1], event_times[i]), so at
an event time the new subsystem is already active.
"""

from typing import Protocol, Sequence, runtime_checkable

import numpy as np


@runtime_checkable
class ModeSwitchLookup(Protocol):
    """Maps a time to the ID of the active subsystem."""

    def find_active_subsystem(self, time: float) -> int:
        ...


class ModeSchedule:
    """Piecewise-constant subsystem schedule.

    Usage:
        schedule = ModeSchedule(event_times=[1.0, 2.5], subsystem_ids=[0, 1, 0])
        schedule.find_active_subsystem(1.7)  # -> 1
    """

    def __init__(
        self,
        event_times: Sequence[float] = (),
        subsystem_ids: Sequence[int] = (0,),
    ):
        """Initialize schedule.

        Args:
            event_times: Strictly increasing switching times (n,).
            subsystem_ids: Active subsystem IDs (n + 1,).
        """
        event_times = np.array(event_times, dtype=np.float64).reshape(-1)
        subsystem_ids = np.array(subsystem_ids, dtype=np.int64).reshape(-1)

        if len(subsystem_ids) != len(event_times) + 1:
            raise ValueError(
                f"Expected {len(event_times) + 1} subsystem IDs for "
                f"{len(event_times)} event times, got {len(subsystem_ids)}"
            )
        if np.any(np.isnan(event_times)) or np.any(~(np.diff(event_times) > 0)):
            raise ValueError("event_times must be strictly increasing")

        event_times.setflags(write=False)
        subsystem_ids.setflags(write=False)
        self._event_times = event_times
        self._subsystem_ids = subsystem_ids

    @property
    def event_times(self) -> np.ndarray:
        return self._event_times

    @property
    def subsystem_ids(self) -> np.ndarray:
        return self._subsystem_ids

    def find_active_subsystem(self, time: float) -> int:
        """Return the ID of the subsystem active at `time`."""
        index = int(np.searchsorted(self._event_times, time, side="right"))
        return int(self._subsystem_ids[index])

    def event_times_in(self, start_time: float, final_time: float) -> np.ndarray:
        """Return the event times strictly inside (start_time, final_time)."""
        mask = (self._event_times > start_time) & (self._event_times < final_time)
        return self._event_times[mask]

    def __repr__(self) -> str:
        return (
            f"ModeSchedule(event_times={self._event_times.tolist()}, "
            f"subsystem_ids={self._subsystem_ids.tolist()})"
        )
