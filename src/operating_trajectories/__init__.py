"""Operating-trajectory providers for seeding trajectory optimization.

Provides:
- The TrajectoryProvider contract (bind / clone / get_operating_trajectories)
- Constant and mode-dependent operating-point providers
- Mode-switch lookup protocol and a reference schedule
- Partitioning, interpolation and JSON I/O helpers
"""

from .base import OperatingTrajectories, TrajectoryProvider, UnboundProviderError
from .interpolation import interpolate_operating_trajectories
from .mode_dependent import ModeDependentOperatingPoints
from .mode_schedule import ModeSchedule, ModeSwitchLookup
from .operating_point import ConstantOperatingPointProvider, OperatingPointConfig
from .partitioning import bind_partition_providers, collect_operating_trajectories
from .trajectory_io import (
    load_operating_point_config,
    load_operating_trajectories,
    save_operating_trajectories,
)

__all__ = [
    "ConstantOperatingPointProvider",
    "ModeDependentOperatingPoints",
    "ModeSchedule",
    "ModeSwitchLookup",
    "OperatingPointConfig",
    "OperatingTrajectories",
    "TrajectoryProvider",
    "UnboundProviderError",
    "bind_partition_providers",
    "collect_operating_trajectories",
    "interpolate_operating_trajectories",
    "load_operating_point_config",
    "load_operating_trajectories",
    "save_operating_trajectories",
]
