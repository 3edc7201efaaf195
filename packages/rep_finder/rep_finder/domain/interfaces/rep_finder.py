"""Abstract interface for finding representatives.

This module defines the RepFinder interface. Remote implementations and the
caching decorator share it so they can be swapped transparently.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from rep_finder.domain.entities import Address, LocalReps


class RepFinder(ABC):
    """Finds local representatives for a free-form address."""

    @abstractmethod
    async def get_reps(self, address: str) -> tuple[LocalReps, Address]:
        """Look up the representatives for an address.

        Args:
            address: Free-form address as supplied by the caller

        Returns:
            The representatives and the canonical form of the address

        Raises:
            Exception: Any failure of the implementation, e.g. APIError
        """
        ...
