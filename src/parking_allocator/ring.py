"""Circular ordering of floors.

The ring is a fixed-length list indexed modulo its size. Allocation and
exit searches always start at the head (index 0); the display cursor moves
independently and never influences them.
"""

import logging
from dataclasses import replace
from typing import Iterator, Optional

from . import bitmap
from .model import Floor

_LOGGER = logging.getLogger(__name__)


class FloorRing:
    """Fixed set of floors arranged in a circle."""

    def __init__(
        self, floors: int, slots_per_floor: int = bitmap.DEFAULT_WIDTH
    ) -> None:
        """Create the ring with every floor empty.

        Args:
            floors: Number of floors. Membership never changes afterwards.
            slots_per_floor: Width of each floor's occupancy mask.
        """
        if floors < 1:
            raise ValueError(f"a ring needs at least one floor, got {floors}")
        self.slots_per_floor = slots_per_floor
        self._floors: list[Floor] = [
            Floor(floor_number=i + 1) for i in range(floors)
        ]
        self.head = 0
        self.display_index = self.head

    def __len__(self) -> int:
        return len(self._floors)

    def __getitem__(self, index: int) -> Floor:
        return self._floors[index % len(self._floors)]

    @property
    def displayed(self) -> Floor:
        """The floor under the display cursor."""
        return self._floors[self.display_index]

    @property
    def floors(self) -> tuple[Floor, ...]:
        return tuple(self._floors)

    def next_index(self, index: int) -> int:
        """Ring successor of ``index``."""
        return (index + 1) % len(self._floors)

    def traverse(self, start: Optional[int] = None) -> Iterator[int]:
        """Yield each floor index once, in ring order from ``start``."""
        index = self.head if start is None else start % len(self._floors)
        for _ in range(len(self._floors)):
            yield index
            index = self.next_index(index)

    def allocate_first_fit(self) -> Optional[tuple[int, int]]:
        """Find the first free slot scanning from the head.

        Returns:
            (floor index, slot index) of the first free slot, or None when
            every floor is full. The slot is not marked occupied.
        """
        for index in self.traverse():
            slot = bitmap.find_free(
                self._floors[index].occupancy, self.slots_per_floor
            )
            if slot is not None:
                return index, slot
            _LOGGER.debug(f"  Floor {self._floors[index].floor_number}: full")
        return None

    def find_first_occupied(self) -> Optional[tuple[int, int]]:
        """Find the lowest occupied slot on the first non-empty floor."""
        for index in self.traverse():
            slot = bitmap.find_occupied(
                self._floors[index].occupancy, self.slots_per_floor
            )
            if slot is not None:
                return index, slot
        return None

    def occupy(self, index: int, slot: int) -> Floor:
        floor = self._floors[index]
        updated = replace(
            floor,
            occupancy=bitmap.set_slot(floor.occupancy, slot, self.slots_per_floor),
        )
        self._floors[index] = updated
        return updated

    def vacate(self, index: int, slot: int) -> Floor:
        floor = self._floors[index]
        updated = replace(
            floor,
            occupancy=bitmap.clear_slot(floor.occupancy, slot, self.slots_per_floor),
        )
        self._floors[index] = updated
        return updated

    def fill(self, index: int) -> Floor:
        """Mark every slot on a floor occupied."""
        updated = replace(
            self._floors[index], occupancy=bitmap.full_mask(self.slots_per_floor)
        )
        self._floors[index] = updated
        return updated

    def rotate_display(self) -> Floor:
        """Advance the display cursor to its successor and return that floor."""
        self.display_index = self.next_index(self.display_index)
        return self.displayed

    def reset_all(self) -> int:
        """Clear every floor's occupancy.

        Returns:
            Number of occupied slots that were cleared.
        """
        cleared = self.total_occupied()
        self._floors = [replace(floor, occupancy=0) for floor in self._floors]
        return cleared

    def total_occupied(self) -> int:
        return sum(
            bitmap.count_occupied(floor.occupancy, self.slots_per_floor)
            for floor in self._floors
        )

    def free_slots(self, index: int) -> int:
        floor = self._floors[index]
        return self.slots_per_floor - bitmap.count_occupied(
            floor.occupancy, self.slots_per_floor
        )
