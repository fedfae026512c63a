"""Thread-safe in-memory storage of sightings, kept in insertion order."""

from __future__ import annotations

import threading
from dataclasses import replace
from datetime import datetime, timedelta

from .sighting import Registry, RegistryError, Sighting

_INITIAL_COUNT = 5
_INITIAL_SPACING = timedelta(hours=6)


class InMemoryStorage:
    """Stores sightings by ID and lists them most recent first."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._sightings: dict[str, Sighting] = {}
        self._order: list[str] = []

    def add(self, sighting: Sighting) -> None:
        """Store a sighting, recording its insertion order."""
        with self._lock:
            self._sightings[sighting.id] = sighting
            self._order.append(sighting.id)

    def get(self, sighting_id: str) -> Sighting | None:
        """Return the sighting with this ID, or None."""
        with self._lock:
            return self._sightings.get(sighting_id)

    def all(self) -> list[Sighting]:
        """All sightings, most recently added first."""
        with self._lock:
            return [
                self._sightings[sid]
                for sid in reversed(self._order)
                if sid in self._sightings
            ]

    def by_category(self, category: str) -> list[Sighting]:
        """Sightings of one category, most recently added first."""
        return [s for s in self.all() if s.category == category]

    def __len__(self) -> int:
        with self._lock:
            return len(self._sightings)

    def clear(self) -> None:
        """Remove every sighting."""
        with self._lock:
            self._sightings = {}
            self._order = []

    def generate_initial_sightings(self, registry: Registry) -> None:
        """Add demo kaiju sightings spaced six hours apart going back from now."""
        for i in range(_INITIAL_COUNT):
            try:
                generator = registry.get("kaiju")
                sighting = generator.generate()
            except (RegistryError, Exception):
                continue
            stamp = datetime.now().astimezone() - i * _INITIAL_SPACING
            self.add(replace(sighting, timestamp=stamp))