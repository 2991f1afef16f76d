"""Random initial states: the robot at its hub with a batch of fresh parcels."""

from __future__ import annotations

import logging
import random
from collections.abc import Sequence
from typing import TYPE_CHECKING, TypeVar

from meadowfield.model.parcel import Parcel
from meadowfield.model.state import VillageState
from meadowfield.village import POST_OFFICE, create_road_network

if TYPE_CHECKING:
    from meadowfield.model.network import RoadNetwork

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_PARCEL_COUNT = 5
DEFAULT_MAX_DRAWS = 1000


class StateFactoryError(ValueError):
    """Raised when a random initial state cannot be generated from the given settings."""

    pass


def random_pick(items: Sequence[T], rng: random.Random) -> T:
    """Return one element of ``items`` chosen uniformly at random.

    Raises:
        StateFactoryError: If ``items`` is empty.
    """
    if not items:
        raise StateFactoryError("Cannot pick from an empty sequence")
    return items[rng.randrange(len(items))]


def random_parcel(
    locations: Sequence[str],
    rng: random.Random,
    max_draws: int = DEFAULT_MAX_DRAWS,
) -> Parcel:
    """Create one parcel whose pickup place differs from its address.

    The address is drawn first; the place is then redrawn until it differs,
    up to ``max_draws`` attempts.

    Raises:
        StateFactoryError: If no distinct place turned up within ``max_draws``.
    """
    address = random_pick(locations, rng)
    for _ in range(max_draws):
        place = random_pick(locations, rng)
        if place != address:
            return Parcel(place=place, address=address)
    raise StateFactoryError(
        f"No pickup place distinct from {address!r} after {max_draws} draws"
    )


def random_initial_state(
    parcel_count: int = DEFAULT_PARCEL_COUNT,
    network: RoadNetwork | None = None,
    rng: random.Random | None = None,
    start: str = POST_OFFICE,
    max_draws: int = DEFAULT_MAX_DRAWS,
) -> VillageState:
    """Generate a starting state with ``parcel_count`` random parcels.

    Args:
        parcel_count: Number of parcels to create (>= 0).
        network: Roads whose locations parcels are drawn from. Defaults to
            the Meadowfield network.
        rng: Random source. Pass a seeded random.Random for repeatable
            output; defaults to a fresh unseeded one.
        start: Where the robot starts; must be a location in ``network``.
        max_draws: Cap on pickup-place redraws per parcel.

    Returns:
        VillageState at ``start`` carrying the new parcels. No parcel is
        created already at its address.

    Raises:
        StateFactoryError: For a non-integer or negative count, an unknown
            start, a network too small to hold a parcel, or an exhausted
            redraw cap.
    """
    if isinstance(parcel_count, bool) or not isinstance(parcel_count, int):
        raise StateFactoryError(
            f"parcel_count must be an integer, got {type(parcel_count).__name__}"
        )
    if parcel_count < 0:
        raise StateFactoryError(f"parcel_count must be >= 0, got {parcel_count}")
    if max_draws < 1:
        raise StateFactoryError(f"max_draws must be >= 1, got {max_draws}")

    if network is None:
        network = create_road_network()
    if rng is None:
        rng = random.Random()

    if start not in network:
        raise StateFactoryError(f"Start location {start!r} is not in the road network")

    locations = network.locations
    if parcel_count and len(locations) < 2:
        raise StateFactoryError(
            f"Need at least 2 locations to create parcels, network has {len(locations)}"
        )

    parcels = [random_parcel(locations, rng, max_draws) for _ in range(parcel_count)]

    logger.debug("Generated initial state at %r with %d parcel(s)", start, len(parcels))
    return VillageState(place=start, parcels=tuple(parcels))
