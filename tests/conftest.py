"""Pytest configuration for parking allocator tests."""

import logging

import pytest

from parking_allocator.engine import ParkingEngine
from parking_allocator.model import ParkingConfig

# Configure logging for tests
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)8s] %(name)s: %(message)s",
    datefmt="%H:%M:%S",
)

# Set the engine logger to INFO level
logging.getLogger("parking_allocator.engine").setLevel(logging.INFO)


@pytest.fixture
def engine():
    """Create an engine with the default four floors of 64 slots."""
    return ParkingEngine()


@pytest.fixture
def tiny_engine():
    """Create an engine with two floors of two slots."""
    return ParkingEngine(ParkingConfig(floors=2, slots_per_floor=2))
