"""Random generator for giant monster (kaiju) sightings."""

from __future__ import annotations

import secrets
import threading
import time
from datetime import datetime

from .sighting import Generator, Location, Sighting

_id_lock = threading.Lock()
_last_ns = 0


def _unique_ns() -> int:
    """Current time in nanoseconds, strictly increasing across calls."""
    global _last_ns
    with _id_lock:
        now = max(time.time_ns(), _last_ns + 1)
        _last_ns = now
        return now


def _random_int(low: int, high: int) -> int:
    """Cryptographically secure integer in [low, high]."""
    if low > high:
        raise ValueError("min cannot be greater than max")
    return low + secrets.randbelow(high - low + 1)


class KaijuGenerator(Generator):
    """Generates kaiju sightings from fixed sets of names, types and traits."""

    NAMES = (
        "Gorgozilla", "Mechataur", "Tsunamius", "Pyroclast",
        "Vortexia", "Thundermaw", "Crystalfang", "Nebulox",
        "Seismodon", "Glacierus", "Plasmoid", "Terracrush",
    )
    TYPES = (
        "Aquatic", "Terrestrial", "Aerial", "Subterranean",
        "Amphibious", "Cosmic", "Volcanic", "Arctic",
    )
    BEHAVIORS = (
        "aggressive", "territorial", "curious", "defensive",
        "migratory", "nocturnal", "predatory", "docile",
    )
    SIZES = (
        "colossal", "massive", "enormous", "gigantic",
        "titanic", "monstrous", "immense", "gargantuan",
    )
    LOCATIONS = (
        Location(35.6762, 139.6503, "Tokyo", "Japan", "Asia"),
        Location(37.7749, -122.4194, "San Francisco", "USA", "North America"),
        Location(-33.8688, 151.2093, "Sydney", "Australia", "Oceania"),
        Location(51.5074, -0.1278, "London", "UK", "Europe"),
        Location(-22.9068, -43.1729, "Rio de Janeiro", "Brazil", "South America"),
        Location(40.7128, -74.0060, "New York", "USA", "North America"),
        Location(1.3521, 103.8198, "Singapore", "Singapore", "Asia"),
        Location(64.1466, -21.9426, "Reykjavik", "Iceland", "Europe"),
        Location(-1.2921, 36.8219, "Nairobi", "Kenya", "Africa"),
        Location(19.4326, -99.1332, "Mexico City", "Mexico", "North America"),
    )

    MIN_HEIGHT = 50
    MAX_HEIGHT = 300

    def category(self) -> str:
        return "kaiju"

    def generate(self) -> Sighting:
        location = secrets.choice(self.LOCATIONS)
        name = secrets.choice(self.NAMES)
        kaiju_type = secrets.choice(self.TYPES)
        behavior = secrets.choice(self.BEHAVIORS)
        size = secrets.choice(self.SIZES)
        height = _random_int(self.MIN_HEIGHT, self.MAX_HEIGHT)

        return Sighting(
            id=f"kaiju-{_unique_ns()}",
            name=name,
            type=kaiju_type,
            category=self.category(),
            location=location,
            description=f"A {size} {kaiju_type} kaiju displaying {behavior} behavior",
            timestamp=datetime.now().astimezone(),
            attributes={
                "size": size,
                "behavior": behavior,
                "height": f"{height} meters",
            },
        )