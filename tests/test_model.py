"""Tests for data model structures."""

from dataclasses import FrozenInstanceError
from datetime import datetime

import pytest

from parking_allocator.model import (
    Car,
    EntryOutcome,
    EntryResult,
    EvacuationResult,
    Floor,
    ParkingConfig,
    ParkingSnapshot,
)


def test_config_defaults():
    """Test ParkingConfig defaults match the standard garage."""
    config = ParkingConfig()
    assert config.floors == 4
    assert config.slots_per_floor == 64
    assert config.log_size == 5
    assert config.exit_placeholder_id == 999
    assert config.capacity == 256


@pytest.mark.parametrize(
    "kwargs",
    [
        {"floors": 0},
        {"slots_per_floor": 0},
        {"log_size": 0},
        {"stack_preview": -1},
    ],
)
def test_config_rejects_invalid_values(kwargs):
    """Test ParkingConfig validation."""
    with pytest.raises(ValueError):
        ParkingConfig(**kwargs)


def test_config_is_frozen():
    """Test ParkingConfig cannot be mutated."""
    config = ParkingConfig()
    with pytest.raises(FrozenInstanceError):
        config.floors = 2


def test_car_and_floor_records():
    """Test Car and Floor creation."""
    now = datetime(2025, 1, 1, 12, 0, 0)
    car = Car(id=3, entry_time=now)
    assert car.id == 3
    assert car.entry_time == now

    floor = Floor(floor_number=2)
    assert floor.occupancy == 0


def test_entry_result_defaults():
    """Test non-parked results carry no location."""
    result = EntryResult(outcome=EntryOutcome.FULL)
    assert result.car_id is None
    assert result.floor_number is None
    assert result.slot is None


def test_evacuation_result_defaults():
    """Test EvacuationResult starts empty."""
    result = EvacuationResult()
    assert result.evacuated == []
    assert result.cleared_slots == 0


def test_snapshot_to_dict():
    """Test the snapshot dict form uses plain lists."""
    snapshot = ParkingSnapshot(
        floor_number=1,
        occupancy=0b11,
        slots_per_floor=64,
        free_slots=62,
        entry_queue=(3,),
        stack_top=(2, 1),
        stack_depth=2,
        log=("Car #2 Parked: Floor 1, Slot 2",),
        hourly_rate=5.0,
    )
    data = snapshot.to_dict()
    assert data["entry_queue"] == [3]
    assert data["exit_queue"] == []
    assert data["stack_top"] == [2, 1]
    assert data["log"] == ["Car #2 Parked: Floor 1, Slot 2"]
