"""Core domain types for creature sightings and the generator registry."""

from __future__ import annotations

import threading
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any


@dataclass(frozen=True)
class Location:
    """Geographic location of a sighting."""

    latitude: float
    longitude: float
    city: str = ""
    country: str = ""
    region: str = ""

    def _to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"latitude": self.latitude, "longitude": self.longitude}
        for key in ("city", "country", "region"):
            value = getattr(self, key)
            if value:
                data[key] = value
        return data


@dataclass
class Sighting:
    """A fictional creature sighting."""

    id: str
    name: str
    type: str
    category: str
    location: Location
    description: str
    timestamp: datetime
    attributes: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-ready mapping of this sighting."""
        return {
            "id": self.id,
            "name": self.name,
            "type": self.type,
            "category": self.category,
            "location": self.location._to_dict(),
            "description": self.description,
            "timestamp": self.timestamp.isoformat(),
            "attributes": dict(self.attributes),
        }


class Generator(ABC):
    """Produces random sightings for one category."""

    @abstractmethod
    def generate(self) -> Sighting:
        """Create a new random sighting."""

    @abstractmethod
    def category(self) -> str:
        """Name of the category this generator handles."""


class RegistryError(Exception):
    """Raised on duplicate registration or an unknown category."""


class Registry:
    """Thread-safe mapping of category names to generators."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._generators: dict[str, Generator] = {}

    def register(self, category: str, generator: Generator) -> None:
        """Add a generator; raise RegistryError if the category is taken."""
        with self._lock:
            if category in self._generators:
                raise RegistryError(
                    f"generator for category {category} already registered"
                )
            self._generators[category] = generator

    def get(self, category: str) -> Generator:
        """Return the generator for a category or raise RegistryError."""
        with self._lock:
            try:
                return self._generators[category]
            except KeyError:
                raise RegistryError(
                    f"no generator found for category {category}"
                ) from None

    def categories(self) -> list[str]:
        """Return all registered category names."""
        with self._lock:
            return list(self._generators)