"""Interactive operator menu for the parking allocator."""

import argparse
import logging
from typing import Callable, Optional, Sequence

from .engine import ParkingEngine
from .model import ParkingConfig
from .render import render_snapshot

_LOGGER = logging.getLogger(__name__)

MENU = """
MENU:
1. [Entry] Add Car to Queue
2. [Entry] Process Entry (Park Car)
3. [View]  Rotate Floor View
4. [Exit]  Request Exit
5. [Exit]  Process Exit Payment
6. [Emerg] EMERGENCY EVACUATION
7. [Sys]   Quit"""

QUIT = "7"


def build_commands(engine: ParkingEngine) -> dict[str, Callable[[], object]]:
    """Map menu choices to engine operations."""
    return {
        "1": engine.add_entry,
        "2": engine.process_entry,
        "3": engine.rotate_view,
        "4": engine.request_exit,
        "5": engine.process_exit,
        "6": engine.emergency_evacuate,
        "8": engine.debug_fill_current_floor,  # Hidden
    }


def dispatch(engine: ParkingEngine, choice: str) -> bool:
    """Run one menu choice against ``engine``.

    Args:
        engine: The engine to drive.
        choice: Raw operator input.

    Returns:
        False when the operator asked to quit, True otherwise.
    """
    choice = choice.strip()
    if choice == QUIT:
        return False
    if not choice:
        return True

    command = build_commands(engine).get(choice)
    if command is None:
        _LOGGER.debug(f"Unrecognized menu choice: {choice!r}")
        engine.log_action("Invalid Option Selected!")
        return True

    command()
    return True


def run(
    engine: ParkingEngine,
    read: Optional[Callable[[str], str]] = None,
    write: Optional[Callable[[str], None]] = None,
) -> None:
    """Render, prompt and dispatch until the operator quits or input ends.

    Args:
        engine: The engine to drive.
        read: Prompt function. Defaults to ``input``.
        write: Output function. Defaults to ``print``.
    """
    read = read or input
    write = write or print
    while True:
        write(render_snapshot(engine.snapshot(), engine.config.log_size))
        write(MENU)
        try:
            choice = read("Select option: ")
        except EOFError:
            break
        if not dispatch(engine, choice):
            break
    write("Exiting system...")


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="parking-allocator",
        description="Interactive multi-floor parking allocation simulator.",
    )
    parser.add_argument("--floors", type=int, default=4, help="number of floors")
    parser.add_argument(
        "--slots", type=int, default=64, help="slots per floor"
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="diagnostic logging level",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s [%(levelname)8s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )
    try:
        config = ParkingConfig(floors=args.floors, slots_per_floor=args.slots)
    except ValueError as err:
        _LOGGER.error(f"Invalid configuration: {err}")
        return 2

    run(ParkingEngine(config))
    return 0
