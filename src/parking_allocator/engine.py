"""The Core Logic Engine for the parking allocator.

This module contains the allocation logic. It accepts discrete commands,
mutates the floor ring, queues, stack and action log, and returns tagged
results. Nothing here raises for runtime conditions such as a full garage
or an empty queue; those come back as outcomes.
"""

import logging
from datetime import datetime
from typing import Any

from . import bitmap
from .action_log import ActionLog
from .model import (
    EntryOutcome,
    EntryResult,
    EvacuationResult,
    ExitOutcome,
    ExitRequestOutcome,
    ExitRequestResult,
    ExitResult,
    ParkingConfig,
    ParkingSnapshot,
)
from .queues import CarQueue, EvacuationStack
from .ring import FloorRing

_LOGGER = logging.getLogger(__name__)


class ParkingEngine:
    """Single-owner parking allocation engine."""

    def __init__(self, config: ParkingConfig | None = None) -> None:
        """Initialize the engine with static configuration.

        Args:
            config: Garage dimensions and display settings. Defaults to
                four floors of 64 slots.
        """
        self.config = config or ParkingConfig()

        self.ring = FloorRing(self.config.floors, self.config.slots_per_floor)
        self.entry_queue = CarQueue("entry")
        self.exit_queue = CarQueue("exit")
        self.evacuation_stack = EvacuationStack(self.config.capacity)
        self.action_log = ActionLog(self.config.log_size)

        self._next_car_id = 1

        self.log_action("System Initialized.")

    @property
    def next_car_id(self) -> int:
        """The id the next ``add_entry`` call will issue."""
        return self._next_car_id

    def log_action(self, message: str) -> None:
        """Record an operator-visible message."""
        self.action_log.record(message)

    def add_entry(self, now: datetime | None = None) -> int:
        """Issue a fresh car id and append it to the entry queue.

        Args:
            now: Timestamp for the queue record. Defaults to the wall clock.

        Returns:
            The issued car id.
        """
        car_id = self._next_car_id
        self._next_car_id += 1
        self.entry_queue.enqueue(car_id, now or datetime.now())
        self.log_action(f"Car #{car_id} joined Entry Queue")
        return car_id

    def process_entry(self) -> EntryResult:
        """Park the car at the head of the entry queue.

        The head is only dequeued once a slot has been found, so a full ring
        leaves the queue exactly as it was.

        Returns:
            EntryResult tagged PARKED, FULL or QUEUE_EMPTY.
        """
        if not self.entry_queue.count:
            self.log_action("Entry Queue is empty!")
            _LOGGER.warning("process_entry: entry queue empty")
            return EntryResult(outcome=EntryOutcome.QUEUE_EMPTY)

        found = self.ring.allocate_first_fit()
        if found is None:
            self.log_action("PARKING FULL! Please wait.")
            _LOGGER.warning(
                f"process_entry: no free slot, car #{self.entry_queue.front.id} "
                f"stays at head ({self.entry_queue.count} waiting)"
            )
            return EntryResult(outcome=EntryOutcome.FULL)

        floor_index, slot = found
        car_id = self.entry_queue.dequeue()
        floor = self.ring.occupy(floor_index, slot)
        self.evacuation_stack.push(car_id)

        self.log_action(
            f"Car #{car_id} Parked: Floor {floor.floor_number}, Slot {slot + 1}"
        )
        return EntryResult(
            outcome=EntryOutcome.PARKED,
            car_id=car_id,
            floor_number=floor.floor_number,
            slot=slot,
        )

    def rotate_view(self) -> int:
        """Advance the display cursor.

        Returns:
            The floor number now on display.
        """
        floor = self.ring.rotate_display()
        _LOGGER.debug(f"Display rotated to floor {floor.floor_number}")
        return floor.floor_number

    def request_exit(self, now: datetime | None = None) -> ExitRequestResult:
        """Release the lowest occupied slot on the first non-empty floor.

        The slot is cleared immediately and a placeholder record joins the
        exit queue. The evacuation stack is not touched, so the released
        car's id stays on it.

        Args:
            now: Timestamp for the exit record. Defaults to the wall clock.

        Returns:
            ExitRequestResult tagged CLEARED or NONE_OCCUPIED.
        """
        found = self.ring.find_first_occupied()
        if found is None:
            self.log_action("No cars to exit!")
            _LOGGER.warning("request_exit: no occupied slot")
            return ExitRequestResult(outcome=ExitRequestOutcome.NONE_OCCUPIED)

        floor_index, slot = found
        self.exit_queue.enqueue(
            self.config.exit_placeholder_id, now or datetime.now()
        )
        floor = self.ring.vacate(floor_index, slot)

        self.log_action(f"Car leaving Floor {floor.floor_number}, Slot {slot + 1}")
        return ExitRequestResult(
            outcome=ExitRequestOutcome.CLEARED,
            floor_number=floor.floor_number,
            slot=slot,
        )

    def process_exit(self) -> ExitResult:
        """Take payment for the head of the exit queue.

        Payment is an acknowledgment only.

        Returns:
            ExitResult tagged COMPLETED or QUEUE_EMPTY.
        """
        car_id = self.exit_queue.dequeue()
        if car_id is None:
            self.log_action("Exit Queue is empty!")
            _LOGGER.warning("process_exit: exit queue empty")
            return ExitResult(outcome=ExitOutcome.QUEUE_EMPTY)

        self.log_action("Payment Processed. Car Exited.")
        return ExitResult(outcome=ExitOutcome.COMPLETED, car_id=car_id)

    def emergency_evacuate(self) -> EvacuationResult:
        """Drain the evacuation stack, then zero every floor.

        The two phases are independent: the ring is cleared whether or not
        its occupancy matches what was on the stack.

        Returns:
            EvacuationResult with evacuated ids in pop order.
        """
        self.log_action("!!! EMERGENCY EVACUATION STARTED !!!")

        evacuated: list[int] = []
        while self.evacuation_stack.depth:
            car_id = self.evacuation_stack.pop()
            evacuated.append(car_id)
            self.log_action(f"Evacuating Car #{car_id}")

        cleared = self.ring.reset_all()
        if cleared != len(evacuated):
            _LOGGER.info(
                f"Evacuation cleared {cleared} slots for {len(evacuated)} "
                f"stacked cars"
            )

        self.log_action("Evacuation Complete. All slots empty.")
        return EvacuationResult(evacuated=evacuated, cleared_slots=cleared)

    def debug_fill_current_floor(self) -> int:
        """Mark every slot on the displayed floor occupied.

        Nothing is pushed onto the evacuation stack.

        Returns:
            The floor number that was filled.
        """
        floor = self.ring.fill(self.ring.display_index)
        self.log_action("DEBUG: Current Floor Filled!")
        return floor.floor_number

    def total_occupied(self) -> int:
        """Occupied slots across the whole ring."""
        return self.ring.total_occupied()

    def snapshot(self) -> ParkingSnapshot:
        """Build a read-only view of the current state for rendering."""
        floor = self.ring.displayed
        return ParkingSnapshot(
            floor_number=floor.floor_number,
            occupancy=floor.occupancy,
            slots_per_floor=self.config.slots_per_floor,
            free_slots=self.ring.free_slots(self.ring.display_index),
            entry_queue=self.entry_queue.ids(),
            exit_queue=self.exit_queue.ids(),
            stack_top=self.evacuation_stack.peek(self.config.stack_preview),
            stack_depth=self.evacuation_stack.depth,
            log=self.action_log.messages(),
            hourly_rate=self.config.hourly_rate,
        )

    def export_state(self) -> dict[str, Any]:
        """Creates a JSON-serializable dump of the whole engine.

        Returns:
            dict: { "floors": [{"floor_number": 1, "occupancy": 3,
                "occupied": [0, 1]}, ...], "entry_queue": [...], ... }
        """
        width = self.config.slots_per_floor
        return {
            "floors": [
                {
                    "floor_number": floor.floor_number,
                    "occupancy": floor.occupancy,
                    "occupied": [
                        i for i in range(width)
                        if bitmap.is_occupied(floor.occupancy, i, width)
                    ],
                }
                for floor in self.ring.floors
            ],
            "display_floor": self.ring.displayed.floor_number,
            "entry_queue": [
                {"id": car.id, "entry_time": car.entry_time.isoformat()}
                for car in self.entry_queue
            ],
            "exit_queue": [
                {"id": car.id, "entry_time": car.entry_time.isoformat()}
                for car in self.exit_queue
            ],
            "evacuation_stack": list(self.evacuation_stack.ids()),
            "dropped_pushes": self.evacuation_stack.dropped,
            "next_car_id": self._next_car_id,
            "log": list(self.action_log.messages()),
        }

