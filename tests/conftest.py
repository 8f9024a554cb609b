"""Shared pytest fixtures."""

import sys
from pathlib import Path

import numpy as np
import pytest

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from operating_trajectories import (
    ConstantOperatingPointProvider,
    ModeDependentOperatingPoints,
    ModeSchedule,
)


@pytest.fixture
def state_op() -> np.ndarray:
    """State operating point (N_x = 2)."""
    return np.array([1.0, -1.0])


@pytest.fixture
def input_op() -> np.ndarray:
    """Input operating point (N_u = 1)."""
    return np.array([0.5])


@pytest.fixture
def provider(state_op, input_op) -> ConstantOperatingPointProvider:
    """Constant operating-point provider."""
    return ConstantOperatingPointProvider(state_op, input_op)


@pytest.fixture
def schedule() -> ModeSchedule:
    """Two switches: subsystem 0 -> 1 at t=1.0, 1 -> 0 at t=2.5."""
    return ModeSchedule(event_times=[1.0, 2.5], subsystem_ids=[0, 1, 0])


@pytest.fixture
def mode_provider() -> ModeDependentOperatingPoints:
    """Mode-dependent provider for subsystems 0 and 1."""
    return ModeDependentOperatingPoints({
        0: (np.array([0.0, 0.0]), np.array([0.0])),
        1: (np.array([1.0, 2.0]), np.array([9.81])),
    })


@pytest.fixture
def random_state() -> np.ndarray:
    """Random initial state in [-1, 1]."""
    np.random.seed(42)
    return np.random.uniform(-1.0, 1.0, 2)
