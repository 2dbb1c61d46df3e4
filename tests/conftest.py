"""Shared fixtures for the hexhive test suite."""

from __future__ import annotations

import numpy as np
import pytest
from numpy.random import Generator

from hexhive.hive.config import HiveConfig
from hexhive.hive.hivegrid import HiveGrid
from hexhive.hive.pieces import Bug, Color, HivePiece


@pytest.fixture
def hive_grid() -> HiveGrid:
    """An empty Hive board."""
    return HiveGrid()


@pytest.fixture
def white_queen() -> HivePiece:
    return HivePiece(color=Color.WHITE, bug=Bug.QUEEN_BEE)


@pytest.fixture
def black_beetle() -> HivePiece:
    """A grounded black Beetle."""
    return HivePiece(color=Color.BLACK, bug=Bug.BEETLE)


@pytest.fixture
def white_beetle() -> HivePiece:
    """A grounded white Beetle."""
    return HivePiece(color=Color.WHITE, bug=Bug.BEETLE)


@pytest.fixture
def default_config() -> HiveConfig:
    """Standard piece set (no YAML file needed)."""
    return HiveConfig()


@pytest.fixture
def rng() -> Generator:
    """A deterministic random generator for reproducible tests."""
    return np.random.default_rng(seed=12345)
