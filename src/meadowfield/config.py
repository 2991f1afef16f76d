"""Simulation settings loaded from the environment.

Pydantic-based settings read from ``MEADOWFIELD_*`` environment variables and
an optional ``.env`` file.
"""

from __future__ import annotations

import logging
import random
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from meadowfield.village import POST_OFFICE

logger = logging.getLogger(__name__)


class SimulationConfig(BaseSettings):
    """Knobs for generating and running a delivery simulation.

    Environment Variables:
        MEADOWFIELD_PARCEL_COUNT: Parcels in a random initial state (default: 5)
        MEADOWFIELD_START_LOCATION: Where the robot starts (default: Post Office)
        MEADOWFIELD_SEED: Seed for the random source (default: unseeded)
        MEADOWFIELD_MAX_PLACE_DRAWS: Redraw cap when picking a parcel's pickup
            place (default: 1000)

    Example:
        >>> config = SimulationConfig(parcel_count=10, seed=42)
        >>> rng = config.make_rng()
    """

    model_config = SettingsConfigDict(
        env_prefix="MEADOWFIELD_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    parcel_count: int = Field(
        default=5,
        ge=0,
        description="Number of parcels in a random initial state",
    )
    start_location: str = Field(
        default=POST_OFFICE,
        description="Location the robot starts from",
    )
    seed: int | None = Field(
        default=None,
        description="Seed for the random source (None for an unseeded run)",
    )
    max_place_draws: int = Field(
        default=1000,
        ge=1,
        description="Maximum draws when picking a pickup place distinct from the address",
    )

    @field_validator("start_location")
    @classmethod
    def strip_start_location(cls, v: str) -> str:
        """Trim whitespace and reject blank location names."""
        v = v.strip()
        if not v:
            raise ValueError("start_location must not be blank")
        return v

    def make_rng(self) -> random.Random:
        """Create a random source seeded from ``seed``."""
        return random.Random(self.seed)


@lru_cache
def get_config() -> SimulationConfig:
    """Get the cached simulation configuration.

    Call get_config.cache_clear() to reload from the environment.
    """
    config = SimulationConfig()
    logger.debug("Loaded simulation configuration: %r", config)
    return config
