"""Postal address entity as returned by the civic information API."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class Address:
    """A postal address.

    The finder returns one of these as the canonical form of the address it
    was asked about. Officials may also list several mailing addresses.
    """

    line1: str = ""
    line2: str = ""
    line3: str = ""
    city: str = ""
    state: str = ""
    zip: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Address:
        """Create an Address from an API address object."""
        return cls(
            line1=data.get("line1", ""),
            line2=data.get("line2", ""),
            line3=data.get("line3", ""),
            city=data.get("city", ""),
            state=data.get("state", ""),
            zip=data.get("zip", ""),
        )
