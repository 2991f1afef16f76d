"""Engine: random initial states and simulation drivers."""

from meadowfield.engine.factory import (
    StateFactoryError,
    random_initial_state,
    random_parcel,
    random_pick,
)
from meadowfield.engine.simulation import Policy, SimulationResult, run_robot, walk_route

__all__ = [
    "Policy",
    "SimulationResult",
    "StateFactoryError",
    "random_initial_state",
    "random_parcel",
    "random_pick",
    "run_robot",
    "walk_route",
]
