"""Offices and officials representing an address.

These mirror the representatives payload of the civic information API:
a flat list of offices, each pointing into a flat list of officials by
index.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .address import Address


@dataclass
class Channel:
    """A social media channel of an official."""

    id: str
    type: str


@dataclass
class Office:
    """A government office.

    Attributes:
        name: Office title (e.g., "Governor of California")
        division_id: OCD division identifier the office belongs to
        levels: Government levels (e.g., "country", "administrativeArea1")
        roles: Roles of the office (e.g., "headOfGovernment")
        official_indices: Positions in ``LocalReps.officials`` holding the office
    """

    name: str
    division_id: str = ""
    levels: list[str] = field(default_factory=list)
    roles: list[str] = field(default_factory=list)
    official_indices: list[int] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Office:
        """Create an Office from an API office object."""
        return cls(
            name=data.get("name", ""),
            division_id=data.get("divisionId", ""),
            levels=list(data.get("levels", [])),
            roles=list(data.get("roles", [])),
            official_indices=[int(i) for i in data.get("officialIndices", [])],
        )


@dataclass
class Official:
    """A government official."""

    name: str
    address: list[Address] = field(default_factory=list)
    party: str = ""
    phones: list[str] = field(default_factory=list)
    photo_url: str = ""
    channels: list[Channel] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Official:
        """Create an Official from an API official object."""
        return cls(
            name=data.get("name", ""),
            address=[Address.from_dict(a) for a in data.get("address", [])],
            party=data.get("party", ""),
            phones=list(data.get("phones", [])),
            photo_url=data.get("photoUrl", ""),
            channels=[
                Channel(id=c.get("id", ""), type=c.get("type", ""))
                for c in data.get("channels", [])
            ],
        )


@dataclass
class LocalReps:
    """Offices and officials for a single address."""

    offices: list[Office] = field(default_factory=list)
    officials: list[Official] = field(default_factory=list)

    def officials_for(self, office: Office) -> list[Official]:
        """Return the officials holding an office.

        Indices that do not point into ``officials`` are skipped.
        """
        return [
            self.officials[i] for i in office.official_indices if 0 <= i < len(self.officials)
        ]

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> LocalReps:
        """Create LocalReps from an API representatives response body."""
        return cls(
            offices=[Office.from_dict(o) for o in data.get("offices", [])],
            officials=[Official.from_dict(o) for o in data.get("officials", [])],
        )
