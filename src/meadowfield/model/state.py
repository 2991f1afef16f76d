"""VillageState dataclass and the move transition.

A VillageState is an immutable snapshot: where the robot is and which parcels
are still outstanding. move() never changes a state; it hands back a new one,
so a caller can try several moves from the same state side by side.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from meadowfield.model.parcel import Parcel

if TYPE_CHECKING:
    from meadowfield.model.network import RoadNetwork

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class VillageState:
    """The robot's location plus every parcel not yet delivered.

    ``parcels`` holds both parcels waiting for pickup and parcels being
    carried; a parcel is carried exactly when it shares the robot's place.
    """

    place: str
    parcels: tuple[Parcel, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        # Accept any iterable but always store a tuple the caller can't mutate.
        if not isinstance(self.parcels, tuple):
            object.__setattr__(self, "parcels", tuple(self.parcels))

    @property
    def is_complete(self) -> bool:
        """True once every parcel has been delivered."""
        return not self.parcels

    def carried(self) -> tuple[Parcel, ...]:
        """Parcels at the robot's current place."""
        return tuple(p for p in self.parcels if p.place == self.place)

    def move(self, destination: str, network: RoadNetwork) -> VillageState:
        """Method form of move()."""
        return move(self, destination, network)


def move(state: VillageState, destination: str, network: RoadNetwork) -> VillageState:
    """Drive the robot one road from ``state.place`` to ``destination``.

    If no road connects the two, the move is a no-op and ``state`` itself is
    returned. Otherwise every parcel at the robot's place travels along to
    ``destination``, and then every parcel that arrived at its address is
    dropped off.

    Args:
        state: Current snapshot. Never modified.
        destination: Location to move to.
        network: Roads to check the move against. Never modified.

    Returns:
        ``state`` for an illegal move, a new VillageState otherwise.
    """
    if not network.is_adjacent(state.place, destination):
        logger.debug("No road from %r to %r; staying put", state.place, destination)
        return state

    relocated = (
        Parcel(place=destination, address=p.address) if p.place == state.place else p
        for p in state.parcels
    )
    parcels = tuple(p for p in relocated if not p.delivered)

    delivered = len(state.parcels) - len(parcels)
    if delivered:
        logger.debug("Delivered %d parcel(s) at %r", delivered, destination)

    return VillageState(place=destination, parcels=parcels)


def make_state(place: str, parcels: Iterable[tuple[str, str]] = ()) -> VillageState:
    """Build a state from ``(place, address)`` pairs."""
    return VillageState(
        place=place,
        parcels=tuple(Parcel(place=p, address=a) for p, a in parcels),
    )
