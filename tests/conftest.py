"""Shared fixtures for the Meadowfield test suite."""

from __future__ import annotations

import logging
import random

import pytest

from meadowfield.model import RoadNetwork, build_network
from meadowfield.village import create_road_network


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Undo configure_logging() so later tests can still use caplog."""
    logger = logging.getLogger("meadowfield")
    handlers, level, propagate = list(logger.handlers), logger.level, logger.propagate
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate


@pytest.fixture
def village() -> RoadNetwork:
    """The shared Meadowfield road network."""
    return create_road_network()


@pytest.fixture
def tiny_network() -> RoadNetwork:
    """Post Office connected to Alice's House only."""
    return build_network(["Post Office-Alice's House"])


@pytest.fixture
def rng() -> random.Random:
    """Deterministic random source."""
    return random.Random(1234)
