"""RoadNetwork: the undirected graph of village locations and the roads between them."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType

logger = logging.getLogger(__name__)

EDGE_SEPARATOR = "-"


class NetworkConfigError(ValueError):
    """Raised when an edge specification cannot be parsed."""

    pass


class RoadNetwork(Mapping[str, tuple[str, ...]]):
    """Read-only adjacency map from a location to the locations one road away.

    Adjacency is symmetric and keeps insertion order. Duplicate roads show up
    as duplicate neighbor entries. Build instances with build_network(); once
    built, nothing can change them, so one network can be shared by any number
    of states and simulations.
    """

    __slots__ = ("_adjacency", "_edge_count")

    def __init__(self, adjacency: Mapping[str, Iterable[str]], edge_count: int = 0) -> None:
        self._adjacency: Mapping[str, tuple[str, ...]] = MappingProxyType(
            {place: tuple(neighbors) for place, neighbors in adjacency.items()}
        )
        self._edge_count = edge_count

    def __getitem__(self, place: str) -> tuple[str, ...]:
        return self._adjacency[place]

    def __iter__(self) -> Iterator[str]:
        return iter(self._adjacency)

    def __len__(self) -> int:
        return len(self._adjacency)

    def __repr__(self) -> str:
        return f"RoadNetwork(locations={len(self)}, edges={self._edge_count})"

    @property
    def locations(self) -> tuple[str, ...]:
        """Every known location, in the order it first appeared in an edge."""
        return tuple(self._adjacency)

    @property
    def edge_count(self) -> int:
        """Number of edges the network was built from (duplicates included)."""
        return self._edge_count

    def neighbors(self, place: str) -> tuple[str, ...]:
        """Locations directly reachable from ``place``; empty for unknown places."""
        return self._adjacency.get(place, ())

    def is_adjacent(self, origin: str, destination: str) -> bool:
        """Whether a road runs directly from ``origin`` to ``destination``."""
        return destination in self.neighbors(origin)


def parse_edge(edge: str, separator: str = EDGE_SEPARATOR) -> tuple[str, str]:
    """Split an edge string like ``"Alice's House-Cabin"`` into its two endpoints.

    Raises:
        NetworkConfigError: If the edge does not split into exactly two
            non-empty names.
    """
    parts = edge.split(separator)
    if len(parts) != 2 or not all(parts):
        raise NetworkConfigError(
            f"Malformed edge {edge!r}: expected 'From{separator}To' with exactly two names"
        )
    origin, destination = parts
    return origin, destination


def build_network(edges: Iterable[str], separator: str = EDGE_SEPARATOR) -> RoadNetwork:
    """Build a RoadNetwork from ``"From-To"`` edge strings.

    Every edge is added in both directions. Order of first appearance is kept
    for both the locations and each neighbor list.

    Args:
        edges: Edge strings, one road each.
        separator: Character between the two endpoint names.

    Returns:
        The built, read-only network.

    Raises:
        NetworkConfigError: On the first malformed edge, naming its index.
    """
    adjacency: dict[str, list[str]] = {}

    def add_edge(origin: str, destination: str) -> None:
        adjacency.setdefault(origin, []).append(destination)

    edge_count = 0
    for index, edge in enumerate(edges):
        try:
            origin, destination = parse_edge(edge, separator)
        except NetworkConfigError as exc:
            raise NetworkConfigError(f"Edge {index}: {exc}") from exc
        add_edge(origin, destination)
        add_edge(destination, origin)
        edge_count += 1

    network = RoadNetwork(adjacency, edge_count=edge_count)
    logger.debug(
        "Built road network: locations=%d, edges=%d",
        len(network),
        network.edge_count,
    )
    return network
