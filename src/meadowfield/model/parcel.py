"""Parcel dataclass: a package waiting for pickup or riding with the robot."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Parcel:
    """A parcel sitting at ``place`` that must end up at ``address``.

    While the robot carries it, ``place`` follows the robot. Once ``place``
    equals ``address`` the parcel has been delivered and leaves the state.
    """

    place: str
    address: str

    @property
    def delivered(self) -> bool:
        return self.place == self.address
