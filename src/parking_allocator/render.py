"""Plain-text rendering of a parking snapshot."""

from typing import Sequence

from .model import ParkingSnapshot

GRID_COLUMNS = 16
LOG_WIDTH = 56


def render_queue(ids: Sequence[int], label: str) -> list[str]:
    lines = [f"{label} ({len(ids)} cars):"]
    if not ids:
        lines.append("  [ EMPTY ]")
        return lines
    border = " ".join("+-------+" for _ in ids)
    lines.append(border)
    lines.append(" ".join(f"| ID:{car_id:2d} |" for car_id in ids))
    lines.append(border)
    return lines


def render_stack(top: Sequence[int], depth: int, label: str) -> list[str]:
    lines = [f"{label} (Top {len(top)} shown):"]
    if not depth:
        lines.append("  [ EMPTY ]")
        return lines
    for car_id in top:
        lines.extend(["  +-------+", f"  | ID:{car_id:2d} |", "  +-------+"])
    if depth > len(top):
        lines.append("     ...")
    return lines


def render_grid(mask: int, width: int, columns: int = GRID_COLUMNS) -> list[str]:
    """Draw a floor's slots row by row, ``X`` occupied and ``.`` free."""
    columns = min(columns, width)
    edge = "  +" + "-" * (columns * 2 - 1 + 2) + "+"
    lines = [edge]
    for start in range(0, width, columns):
        cells = [
            "X" if (mask >> i) & 1 else "."
            for i in range(start, min(start + columns, width))
        ]
        row = " ".join(cells).ljust(columns * 2 - 1)
        lines.append(f"  | {row} |")
    lines.append(edge)
    lines.append("    (X = Occupied, . = Empty)")
    return lines


def render_log(messages: Sequence[str], size: int) -> list[str]:
    border = "+" + "-" * (LOG_WIDTH + 2) + "+"
    lines = ["ACTION LOG:", border]
    padded = list(messages) + [""] * (size - len(messages))
    lines.extend(f"| {message[:LOG_WIDTH]:<{LOG_WIDTH}} |" for message in padded)
    lines.append(border)
    return lines


def render_snapshot(snapshot: ParkingSnapshot, log_size: int = 5) -> str:
    """Render the full operator screen for ``snapshot``."""
    rule = "=" * 60
    lines = [rule, "SMART PARKING SYSTEM".center(60).rstrip(), rule, ""]
    lines.extend(render_queue(snapshot.entry_queue, "ENTRY QUEUE"))
    lines.extend(
        [
            "",
            "BUILDING STATUS:",
            f"   Current View: [ LEVEL {snapshot.floor_number} ]",
        ]
    )
    lines.extend(render_grid(snapshot.occupancy, snapshot.slots_per_floor))
    lines.append("")
    lines.extend(
        render_stack(
            snapshot.stack_top, snapshot.stack_depth, "PARKING STACK (LIFO Tracking)"
        )
    )
    lines.extend(
        [
            "",
            f"STATS: Available: {snapshot.free_slots}/{snapshot.slots_per_floor} "
            f"| Rate: ${snapshot.hourly_rate:.2f}/hr",
            "",
        ]
    )
    lines.extend(render_queue(snapshot.exit_queue, "EXIT QUEUE"))
    lines.append("")
    lines.extend(render_log(snapshot.log, log_size))
    return "\n".join(lines)
