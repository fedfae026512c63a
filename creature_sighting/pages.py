"""HTML pages for the home, category and location views, and the shared layout."""

from __future__ import annotations

import math
from collections.abc import Iterable
from decimal import Decimal

from .sighting import Location

_ESCAPES = str.maketrans(
    {
        "&": "&amp;",
        "'": "&#39;",
        "<": "&lt;",
        ">": "&gt;",
        '"': "&#34;",
    }
)


def _escape(text: str) -> str:
    """Escape text for safe inclusion in HTML content or attribute values."""
    return text.translate(_ESCAPES)


def _format_float(value: float) -> str:
    """Shortest fixed-point representation of a float, without exponent."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    return format(Decimal(repr(value)).normalize(), "f")


_LAYOUT_HEAD = (
    '<!doctype html><html lang="en"><head><meta charset="UTF-8">'
    '<meta name="viewport" content="width=device-width, initial-scale=1.0"><title>'
)
_LAYOUT_NAV = (
    ' - Creature Sighting</title><link rel="stylesheet" href="/static/style.css">'
    '</head><body><header><nav><h1><a href="/">Creature Sighting</a></h1><ul>'
    '<li><a href="/sightings">Recent Encounters</a></li>'
    '<li><a href="/locations">Geographic Data</a></li>'
    '<li><a href="/categories">Entity Classifications</a></li>'
    '<li><a href="/sighting/random">Generate Report</a></li>'
    "</ul></nav></header><main>"
)
_LAYOUT_TAIL = "</main></body></html>"

_HOME_BODY = (
    '<div class="content-section"><h2>Creature Sighting Database v2.1</h2>'
    "<p>Real-time monitoring system for anomalous biological entities worldwide. "
    "This classified research terminal provides access to verified creature "
    "encounters logged by field operatives across multiple sectors.</p></div>"
    '<div class="system-info"><strong>SYSTEM STATUS:</strong> ONLINE | '
    "<strong>DATABASE:</strong> SECURE | <strong>CLEARANCE:</strong> LEVEL-7</div>"
    '<div class="content-section"><h3>Mission Brief</h3>'
    "<p>Our network of covert observation posts maintains constant surveillance "
    "of cryptozoological manifestations. Each verified sighting undergoes rigorous "
    "analysis by xenobiology specialists before classification and storage in our "
    "secure archives.</p><p>Current operational parameters focus primarily on "
    "large-scale entity detection, with emphasis on urban environment encounters. "
    "Field teams equipped with standard monitoring equipment report directly to "
    "central command for immediate database integration.</p></div>"
    '<div class="content-section"><h3>Current Statistics</h3>'
    '<div class="data-list"><ul><li>Active monitoring sites: 10 locations</li>'
    "<li>Entity categories tracked: 1 (Kaiju-class)</li>"
    "<li>Database records: Real-time</li>"
    "<li>Threat level: YELLOW (Elevated)</li></ul></div></div>"
)

_CATEGORIES_HEAD = (
    '<div class="content-section"><h2>Entity Classifications</h2>'
    "<p>Taxonomic breakdown of monitored creature types. Classification system "
    "based on threat assessment protocols.</p></div>"
    '<div class="data-list"><h3>Active Categories</h3><ul>'
)
_CATEGORIES_TAIL = (
    '</ul></div><div class="content-section"><h3>Classification Criteria</h3>'
    '<div class="system-info"><strong>KAIJU:</strong> Entities exceeding 50m '
    "height, displaying aggressive territorial behavior, capable of significant "
    "infrastructure damage. Requires immediate containment protocols upon "
    "detection.</div></div>"
)

_LOCATIONS_HEAD = (
    '<div class="content-section"><h2>Geographic Data</h2>'
    "<p>Active monitoring locations worldwide. Field stations equipped with "
    "detection arrays.</p></div>"
    '<div class="data-list"><h3>Operational Sites</h3><ul>'
)
_LOCATIONS_TAIL = "</ul></div>"


def layout(title: str, content: str) -> str:
    """Wrap already rendered HTML content in the site's page layout."""
    return f"{_LAYOUT_HEAD}{_escape(title)}{_LAYOUT_NAV}{content}{_LAYOUT_TAIL}"


def home() -> str:
    """Render the home page."""
    return layout("Home", _HOME_BODY)


def categories_list(categories: Iterable[str]) -> str:
    """Render the page listing creature categories, each linked to its sightings."""
    items = "".join(
        f'<li><a href="{_escape("/sightings?category=" + cat)}">{_escape(cat)}</a>'
        " - Large-scale entities, urban threat level</li>"
        for cat in categories
    )
    return layout(
        "Entity Classifications", f"{_CATEGORIES_HEAD}{items}{_CATEGORIES_TAIL}"
    )


def locations_list(locations: Iterable[Location]) -> str:
    """Render the page listing sighting locations with their coordinates."""
    items = "".join(
        f'<li><a href="{_escape("/sightings?location=" + loc.city)}">'
        f"{_escape(loc.city)}, {_escape(loc.country)}</a> - "
        f"{_escape(loc.region)} ({_escape(_format_float(loc.latitude))}, "
        f"{_escape(_format_float(loc.longitude))})</li>"
        for loc in locations
    )
    return layout("Geographic Data", f"{_LOCATIONS_HEAD}{items}{_LOCATIONS_TAIL}")