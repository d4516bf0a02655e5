"""Fixed-width slot occupancy masks.

Masks are plain ints. Bit ``i`` set means slot ``i`` is occupied. All
functions are pure and return a new mask rather than mutating anything.
"""

from typing import Optional

DEFAULT_WIDTH = 64


def full_mask(width: int = DEFAULT_WIDTH) -> int:
    """Return a mask with every slot occupied."""
    return (1 << width) - 1


def _check_index(index: int, width: int) -> None:
    if not 0 <= index < width:
        raise IndexError(f"slot index {index} outside mask width {width}")


def find_free(mask: int, width: int = DEFAULT_WIDTH) -> Optional[int]:
    """Return the lowest clear bit, or None if the mask is full."""
    free = ~mask & full_mask(width)
    if not free:
        return None
    # Isolate the lowest set bit of the inverted mask
    return (free & -free).bit_length() - 1


def find_occupied(mask: int, width: int = DEFAULT_WIDTH) -> Optional[int]:
    """Return the lowest set bit, or None if the mask is empty."""
    used = mask & full_mask(width)
    if not used:
        return None
    return (used & -used).bit_length() - 1


def set_slot(mask: int, index: int, width: int = DEFAULT_WIDTH) -> int:
    _check_index(index, width)
    return mask | (1 << index)


def clear_slot(mask: int, index: int, width: int = DEFAULT_WIDTH) -> int:
    _check_index(index, width)
    return mask & ~(1 << index)


def is_occupied(mask: int, index: int, width: int = DEFAULT_WIDTH) -> bool:
    _check_index(index, width)
    return bool((mask >> index) & 1)


def count_occupied(mask: int, width: int = DEFAULT_WIDTH) -> int:
    return bin(mask & full_mask(width)).count("1")
