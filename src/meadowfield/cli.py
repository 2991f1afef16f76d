"""Command-line interface for Meadowfield."""

from __future__ import annotations

import argparse
import sys
from typing import Any

from meadowfield import __version__
from meadowfield.config import SimulationConfig, get_config
from meadowfield.engine import random_initial_state, walk_route
from meadowfield.logging_config import configure_logging
from meadowfield.model import VillageState, make_state
from meadowfield.village import POST_OFFICE, create_road_network


def demo_state() -> VillageState:
    """One parcel at the Post Office, addressed to Alice's House."""
    return make_state(POST_OFFICE, [(POST_OFFICE, "Alice's House")])


def format_state(state: VillageState) -> str:
    """Render a state as one line: place, parcel counts, then each parcel."""
    if state.is_complete:
        return f"{state.place}: all parcels delivered"
    parcels = ", ".join(f"{p.place} -> {p.address}" for p in state.parcels)
    return (
        f"{state.place}: {len(state.parcels)} parcel(s), "
        f"{len(state.carried())} carried [{parcels}]"
    )


def load_config(overrides: dict[str, Any]) -> SimulationConfig:
    """Return the cached settings, re-validated with any command-line overrides."""
    config = get_config()
    if not overrides:
        return config
    return SimulationConfig(**{**config.model_dump(), **overrides})


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="meadowfield",
        description="Drive the Meadowfield delivery robot along a route you choose.",
    )
    parser.add_argument(
        "destinations",
        nargs="*",
        metavar="DEST",
        help="Locations to move to, in order",
    )
    parser.add_argument(
        "--parcels",
        type=int,
        default=None,
        help="Number of random parcels (default: MEADOWFIELD_PARCEL_COUNT or 5)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for parcel generation (default: MEADOWFIELD_SEED or unseeded)",
    )
    parser.add_argument(
        "--start",
        default=None,
        help=f"Starting location (default: MEADOWFIELD_START_LOCATION or {POST_OFFICE})",
    )
    parser.add_argument(
        "--demo",
        action="store_true",
        help="Use the single-parcel demo state instead of random parcels",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    args = parser.parse_args(argv)
    if args.demo and any(v is not None for v in (args.parcels, args.seed, args.start)):
        parser.error("--demo cannot be combined with --parcels, --seed or --start")
    return args


def main(argv: list[str] | None = None) -> int:
    """Run the Meadowfield driver.

    Args:
        argv: Command-line arguments. If None, uses sys.argv[1:].

    Returns:
        Exit code (0 for success, 2 for bad settings).
    """
    args = parse_args(argv)
    configure_logging()

    overrides = {
        key: value
        for key, value in (
            ("parcel_count", args.parcels),
            ("seed", args.seed),
            ("start_location", args.start),
        )
        if value is not None
    }

    network = create_road_network()
    if args.demo:
        state = demo_state()
    else:
        try:
            config = load_config(overrides)
            state = random_initial_state(
                config.parcel_count,
                network,
                rng=config.make_rng(),
                start=config.start_location,
                max_draws=config.max_place_draws,
            )
        except ValueError as exc:
            print(f"error: {exc}", file=sys.stderr)
            return 2

    states = walk_route(state, args.destinations, network)
    for turn, current in enumerate(states):
        print(f"{turn:3d} | {format_state(current)}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
