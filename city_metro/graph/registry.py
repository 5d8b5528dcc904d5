"""Location registry: the name <-> id mapping of the transit network."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Tuple

from ..domain.errors import UnknownLocationError


@dataclass
class LocationRegistry:
    """Assigns sequential ids to location names and resolves both ways.

    Ids start at 1 and are never reused. Registering a name twice
    returns the id it already has.
    """

    _ids: Dict[str, int] = field(default_factory=dict, repr=False)
    _names: Dict[int, str] = field(default_factory=dict, repr=False)
    _next_id: int = field(default=1, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def add_location(self, name: str) -> Tuple[int, bool]:
        """Register a location name.

        Args:
            name: The location name. Surrounding whitespace is ignored.

        Returns:
            The location id and whether the name was newly registered.

        Raises:
            ValueError: If the name is empty.
        """
        key = name.strip()
        if not key:
            raise ValueError("Location name must not be empty")

        existing = self._ids.get(key)
        if existing is not None:
            return existing, False

        location_id = self._next_id
        self._next_id += 1
        self._ids[key] = location_id
        self._names[location_id] = key
        self._logger.debug(
            "Location registered",
            extra={"location_id": location_id, "location_name": key},
        )
        return location_id, True

    def id_of(self, name: str) -> int:
        """Return the id of a registered name.

        Raises:
            UnknownLocationError: If the name was never registered.
        """
        key = name.strip()
        try:
            return self._ids[key]
        except KeyError:
            raise UnknownLocationError(
                f"Unknown location: {key!r}", location=key
            ) from None

    def name_of(self, location_id: int) -> str:
        """Return the name registered under an id.

        Raises:
            UnknownLocationError: If the id was never assigned.
        """
        try:
            return self._names[location_id]
        except KeyError:
            raise UnknownLocationError(
                f"Unknown location id: {location_id}", location=location_id
            ) from None

    def list_locations(self) -> List[Tuple[int, str]]:
        """Return every registered ``(id, name)`` pair in ascending id order."""
        return list(self._names.items())

    def ids(self) -> Iterator[int]:
        return iter(self._names)

    def __contains__(self, item: object) -> bool:
        if isinstance(item, str):
            return item.strip() in self._ids
        return item in self._names

    def __len__(self) -> int:
        return len(self._names)
