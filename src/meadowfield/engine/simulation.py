"""Drivers that feed destinations into move() until the parcels are all delivered.

Choosing destinations is the caller's job: walk_route() takes a fixed list,
run_robot() asks a caller-supplied policy one turn at a time.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from meadowfield.model.state import VillageState, move

if TYPE_CHECKING:
    from meadowfield.model.network import RoadNetwork

logger = logging.getLogger(__name__)

DEFAULT_MAX_TURNS = 1000

# Policy: callable(state, memory) -> (destination, memory)
Policy = Callable[[VillageState, Any], tuple[str, Any]]


@dataclass
class SimulationResult:
    """Outcome of a policy-driven run."""

    final_state: VillageState
    turns: int = 0
    route: list[str] = field(default_factory=list)  # destinations asked for, in order

    @property
    def completed(self) -> bool:
        return self.final_state.is_complete


def walk_route(
    state: VillageState,
    destinations: Iterable[str],
    network: RoadNetwork,
) -> list[VillageState]:
    """Apply move() for each destination in turn.

    Stops as soon as every parcel has been delivered; any remaining
    destinations are ignored.

    Returns:
        Every state visited, starting with ``state`` itself.
    """
    states = [state]
    for destination in destinations:
        if states[-1].is_complete:
            break
        states.append(move(states[-1], destination, network))
    return states


def run_robot(
    state: VillageState,
    policy: Policy,
    network: RoadNetwork,
    memory: Any = None,
    max_turns: int = DEFAULT_MAX_TURNS,
) -> SimulationResult:
    """Let ``policy`` steer the robot until the parcels are delivered.

    Each turn the policy receives the current state and its own memory and
    returns the next destination plus updated memory. Destinations with no
    road are no-op moves that still use up a turn. Exceptions raised by the
    policy propagate to the caller.

    Args:
        state: Starting state.
        policy: Decision function supplied by the caller.
        network: Roads the robot drives on.
        memory: Initial policy memory.
        max_turns: Stop after this many turns even if parcels remain.

    Returns:
        SimulationResult with the final state and the route taken.
    """
    if max_turns < 1:
        raise ValueError(f"max_turns must be >= 1, got {max_turns}")

    result = SimulationResult(final_state=state)
    while not result.final_state.is_complete and result.turns < max_turns:
        origin = result.final_state
        destination, memory = policy(origin, memory)
        result.final_state = move(origin, destination, network)
        result.route.append(destination)
        result.turns += 1
        logger.debug(
            "Turn %d: %r -> %r",
            result.turns,
            origin.place,
            destination,
            extra={
                "turn": result.turns,
                "place": result.final_state.place,
                "moved": result.final_state is not origin,
                "parcels_left": len(result.final_state.parcels),
            },
        )

    if result.completed:
        logger.info(
            "All parcels delivered after %d turn(s)",
            result.turns,
            extra={"turn": result.turns, "place": result.final_state.place},
        )
    else:
        logger.warning(
            "Stopped after %d turn(s) with %d parcel(s) outstanding",
            result.turns,
            len(result.final_state.parcels),
            extra={
                "turn": result.turns,
                "place": result.final_state.place,
                "parcels_left": len(result.final_state.parcels),
            },
        )
    return result
