"""Parking Allocator - A multi-floor parking slot allocation engine."""

from parking_allocator.engine import ParkingEngine
from parking_allocator.model import (
    Car,
    EntryOutcome,
    EntryResult,
    EvacuationResult,
    ExitOutcome,
    ExitRequestOutcome,
    ExitRequestResult,
    ExitResult,
    Floor,
    ParkingConfig,
    ParkingSnapshot,
)

__version__ = "0.1.0"

__all__ = [
    "ParkingEngine",
    "Car",
    "EntryOutcome",
    "EntryResult",
    "EvacuationResult",
    "ExitOutcome",
    "ExitRequestOutcome",
    "ExitRequestResult",
    "ExitResult",
    "Floor",
    "ParkingConfig",
    "ParkingSnapshot",
]
