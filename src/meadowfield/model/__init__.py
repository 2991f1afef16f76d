"""Domain model: RoadNetwork, Parcel, VillageState and the move transition."""

from meadowfield.model.network import (
    EDGE_SEPARATOR,
    NetworkConfigError,
    RoadNetwork,
    build_network,
    parse_edge,
)
from meadowfield.model.parcel import Parcel
from meadowfield.model.state import VillageState, make_state, move

__all__ = [
    "EDGE_SEPARATOR",
    "NetworkConfigError",
    "Parcel",
    "RoadNetwork",
    "VillageState",
    "build_network",
    "make_state",
    "move",
    "parse_edge",
]
