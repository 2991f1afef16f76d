"""The village of Meadowfield: its roads and the Post Office hub.

The road network is built once and shared; create_road_network() always
returns the same read-only instance.
"""

from __future__ import annotations

from functools import lru_cache

from meadowfield.model.network import RoadNetwork, build_network

POST_OFFICE = "Post Office"

ROADS: tuple[str, ...] = (
    "Alice's House-Bob's House",
    "Alice's House-Cabin",
    "Alice's House-Post Office",
    "Bob's House-Town Hall",
    "Daria's House-Ernie's House",
    "Daria's House-Town Hall",
    "Ernie's House-Grete's House",
    "Grete's House-Farm",
    "Grete's House-Shop",
    "Marketplace-Farm",
    "Marketplace-Post Office",
    "Marketplace-Shop",
    "Marketplace-Town Hall",
    "Shop-Town Hall",
)


@lru_cache(maxsize=1)
def create_road_network() -> RoadNetwork:
    """Build (once) the road network of Meadowfield.

    Returns:
        RoadNetwork: 11 locations joined by 14 roads.
    """
    return build_network(ROADS)
