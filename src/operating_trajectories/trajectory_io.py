"""JSON I/O for operating points and seed trajectories."""

import json
from pathlib import Path
from typing import Optional, Union

import numpy as np

from .base import OperatingTrajectories
from .operating_point import OperatingPointConfig

PathLike = Union[str, Path]


def load_operating_point_config(json_path: PathLike) -> OperatingPointConfig:
    """Load an operating point from JSON.

    Expected layout: {"state": [...], "input": [...]}, optionally nested
    under an "operating_point" key.
    """
    with open(json_path) as f:
        data = json.load(f)

    data = data.get("operating_point", data)
    return OperatingPointConfig(
        state=[float(v) for v in data["state"]],
        input=[float(v) for v in data["input"]],
    )


def save_operating_trajectories(
    json_path: PathLike,
    trajectories: OperatingTrajectories,
    metadata: Optional[dict] = None,
) -> None:
    """Write a seed trajectory to JSON.

    Args:
        json_path: Output path. Parent directories are created.
        trajectories: Trajectory to save.
        metadata: Extra JSON-serializable entries stored under "metadata".
    """
    output_path = Path(json_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    output_data = {
        "state_dim": int(trajectories.state.shape[1]),
        "input_dim": int(trajectories.input.shape[1]),
        "time": trajectories.time.tolist(),
        "state": trajectories.state.tolist(),
        "input": trajectories.input.tolist(),
    }
    if metadata is not None:
        output_data["metadata"] = metadata

    with open(output_path, "w") as f:
        json.dump(output_data, f, indent=2)


def load_operating_trajectories(json_path: PathLike) -> OperatingTrajectories:
    """Load a seed trajectory written by save_operating_trajectories()."""
    with open(json_path) as f:
        data = json.load(f)

    return OperatingTrajectories.from_samples(
        data["time"],
        [np.asarray(x) for x in data["state"]],
        [np.asarray(u) for u in data["input"]],
        state_dim=data["state_dim"],
        input_dim=data["input_dim"],
    )
