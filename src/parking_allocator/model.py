"""Data models for the parking allocator library.

This module defines the core data structures used throughout the library.
Records handed to callers are frozen (immutable); the engine replaces them
rather than mutating them in place.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Optional


class EntryOutcome(Enum):
    """Outcome of processing the head of the entry queue."""

    PARKED = "parked"
    FULL = "full"  # No free slot anywhere on the ring
    QUEUE_EMPTY = "queue_empty"


class ExitRequestOutcome(Enum):
    """Outcome of an exit request."""

    CLEARED = "cleared"
    NONE_OCCUPIED = "none_occupied"


class ExitOutcome(Enum):
    """Outcome of processing the head of the exit queue."""

    COMPLETED = "completed"
    QUEUE_EMPTY = "queue_empty"


@dataclass(frozen=True)
class ParkingConfig:
    """Static configuration for a parking engine.

    Attributes:
        floors: Number of floors on the ring.
        slots_per_floor: Width of each floor's occupancy mask.
        log_size: Number of action log messages retained.
        exit_placeholder_id: Identity recorded for every car on the exit path.
        hourly_rate: Rate shown to the operator. No fee is computed from it.
        stack_preview: How many evacuation stack entries a snapshot exposes.
    """

    floors: int = 4
    slots_per_floor: int = 64
    log_size: int = 5
    exit_placeholder_id: int = 999
    hourly_rate: float = 5.0
    stack_preview: int = 5

    def __post_init__(self) -> None:
        if self.floors < 1:
            raise ValueError(f"floors must be at least 1, got {self.floors}")
        if self.slots_per_floor < 1:
            raise ValueError(
                f"slots_per_floor must be at least 1, got {self.slots_per_floor}"
            )
        if self.log_size < 1:
            raise ValueError(f"log_size must be at least 1, got {self.log_size}")
        if self.stack_preview < 0:
            raise ValueError(
                f"stack_preview must not be negative, got {self.stack_preview}"
            )

    @property
    def capacity(self) -> int:
        """Total number of slots across all floors."""
        return self.floors * self.slots_per_floor


@dataclass(frozen=True)
class Car:
    """A car record held by a queue.

    Attributes:
        id: Issued identity. Never reused within an engine.
        entry_time: When the record was enqueued.
    """

    id: int
    entry_time: datetime


@dataclass(frozen=True)
class Floor:
    """One floor of the ring.

    Attributes:
        floor_number: 1-based floor number, fixed at creation.
        occupancy: Bitmask with bit i set iff slot i is occupied.
    """

    floor_number: int
    occupancy: int = 0


@dataclass(frozen=True)
class EntryResult:
    """Result of ``ParkingEngine.process_entry``."""

    outcome: EntryOutcome
    car_id: Optional[int] = None
    floor_number: Optional[int] = None
    slot: Optional[int] = None


@dataclass(frozen=True)
class ExitRequestResult:
    """Result of ``ParkingEngine.request_exit``."""

    outcome: ExitRequestOutcome
    floor_number: Optional[int] = None
    slot: Optional[int] = None


@dataclass(frozen=True)
class ExitResult:
    """Result of ``ParkingEngine.process_exit``.

    ``car_id`` is the identity held by the exit record, which is always the
    configured placeholder.
    """

    outcome: ExitOutcome
    car_id: Optional[int] = None


@dataclass(frozen=True)
class EvacuationResult:
    """Result of ``ParkingEngine.emergency_evacuate``.

    Attributes:
        evacuated: Car ids in the order they were popped (most recent first).
        cleared_slots: Number of occupied bits zeroed across the ring.
    """

    evacuated: list[int] = field(default_factory=list)
    cleared_slots: int = 0


@dataclass(frozen=True)
class ParkingSnapshot:
    """Read-only view of engine state for the presentation layer.

    Attributes:
        floor_number: Number of the floor under the display cursor.
        occupancy: Occupancy mask of the displayed floor.
        slots_per_floor: Width of the displayed mask.
        free_slots: Free slots on the displayed floor.
        entry_queue: Car ids in the entry queue, head first.
        exit_queue: Car ids in the exit queue, head first.
        stack_top: Up to ``stack_preview`` ids, top of stack first.
        stack_depth: Total number of ids on the evacuation stack.
        log: Action log messages, newest first.
        hourly_rate: Display rate.
    """

    floor_number: int
    occupancy: int
    slots_per_floor: int
    free_slots: int
    entry_queue: tuple[int, ...] = ()
    exit_queue: tuple[int, ...] = ()
    stack_top: tuple[int, ...] = ()
    stack_depth: int = 0
    log: tuple[str, ...] = ()
    hourly_rate: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable form of the snapshot."""
        return {
            "floor_number": self.floor_number,
            "occupancy": self.occupancy,
            "slots_per_floor": self.slots_per_floor,
            "free_slots": self.free_slots,
            "entry_queue": list(self.entry_queue),
            "exit_queue": list(self.exit_queue),
            "stack_top": list(self.stack_top),
            "stack_depth": self.stack_depth,
            "log": list(self.log),
            "hourly_rate": self.hourly_rate,
        }
