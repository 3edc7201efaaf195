"""Domain entities for rep_finder."""

from __future__ import annotations

from .address import Address
from .representatives import Channel, LocalReps, Office, Official

__all__ = [
    "Address",
    "Channel",
    "LocalReps",
    "Office",
    "Official",
]
