"""Entry/exit queues and the evacuation stack."""

import logging
from collections import deque
from datetime import datetime
from typing import Iterator, Optional

from .model import Car

_LOGGER = logging.getLogger(__name__)


class CarQueue:
    """FIFO of car records.

    A failed dequeue leaves the queue untouched.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        self._cars: deque[Car] = deque()

    def __len__(self) -> int:
        return len(self._cars)

    def __iter__(self) -> Iterator[Car]:
        return iter(self._cars)

    @property
    def count(self) -> int:
        return len(self._cars)

    @property
    def front(self) -> Optional[Car]:
        return self._cars[0] if self._cars else None

    @property
    def rear(self) -> Optional[Car]:
        return self._cars[-1] if self._cars else None

    def enqueue(self, car_id: int, now: datetime) -> Car:
        """Append a new record stamped with ``now`` at the tail."""
        car = Car(id=car_id, entry_time=now)
        self._cars.append(car)
        _LOGGER.debug(f"  {self.name}: +#{car_id} (count={len(self._cars)})")
        return car

    def dequeue(self) -> Optional[int]:
        """Remove the head record and return its id, or None if empty."""
        if not self._cars:
            return None
        car = self._cars.popleft()
        _LOGGER.debug(f"  {self.name}: -#{car.id} (count={len(self._cars)})")
        return car.id

    def ids(self) -> tuple[int, ...]:
        return tuple(car.id for car in self._cars)


class EvacuationStack:
    """Bounded LIFO of parked car ids.

    Pushes beyond capacity are dropped, counted in ``dropped`` and logged.
    """

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError(f"capacity must not be negative, got {capacity}")
        self.capacity = capacity
        self._items: list[int] = []
        self.dropped = 0

    def __len__(self) -> int:
        return len(self._items)

    @property
    def depth(self) -> int:
        return len(self._items)

    def is_full(self) -> bool:
        return len(self._items) >= self.capacity

    def push(self, car_id: int) -> bool:
        """Push ``car_id``. Returns False if it was dropped at capacity."""
        if self.is_full():
            self.dropped += 1
            _LOGGER.error(
                f"Evacuation stack full (capacity={self.capacity}), "
                f"dropped car #{car_id}"
            )
            return False
        self._items.append(car_id)
        return True

    def pop(self) -> Optional[int]:
        if not self._items:
            return None
        return self._items.pop()

    def peek(self, n: int) -> tuple[int, ...]:
        """Return up to ``n`` ids, top of stack first."""
        if n <= 0:
            return ()
        return tuple(reversed(self._items[-n:]))

    def ids(self) -> tuple[int, ...]:
        """All ids, bottom of stack first."""
        return tuple(self._items)
