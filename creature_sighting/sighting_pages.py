"""HTML pages for the sightings list and a single sighting's report."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from datetime import datetime
from typing import Any

from .pages import _escape, layout
from .sighting import Sighting

_LIST_HEAD = (
    '<div class="content-section"><h2>Recent Encounters</h2>'
    "<p>Chronological listing of verified creature sightings. All reports "
    "classified by field operatives.</p>"
    '<a href="/sighting/random" class="btn btn-primary">Generate New Report</a></div>'
)
_LIST_EMPTY = (
    '<div class="empty-state"><h3>No encounters logged</h3>'
    "<p>Database empty. Generate initial reports to populate system.</p>"
    '<a href="/sighting/random" class="btn btn-primary">Generate Report</a></div>'
)
_DETAIL_ACTIONS = (
    '<div class="actions"><a href="/sightings" class="btn">Back to Database</a> '
    '<a href="/sighting/random" class="btn btn-primary">Generate New Report</a>'
    "</div></div>"
)


def _zone_name(stamp: datetime) -> str:
    """Zone abbreviation, or a numeric offset when the zone has no name."""
    name = stamp.tzname()
    if not name or (name.startswith("UTC") and len(name) > 3):
        return stamp.strftime("%z")
    return name


def _format_value(value: Any) -> str:
    """Render an attribute value the way a default formatter would."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "<nil>"
    return str(value)


def _list_item(s: Sighting) -> str:
    return (
        '<div class="sighting-item"><div class="sighting-header">'
        f'<span class="name">{_escape(s.name)}</span> '
        f'<span class="category">{_escape(s.category)}</span></div>'
        '<div class="sighting-meta"><span class="sighting-location">'
        f"{_escape(s.location.city)}, {_escape(s.location.country)}</span> "
        f'<span class="sighting-type">- {_escape(s.type)}</span></div>'
        f'<div class="sighting-description">{_escape(s.description)}</div>'
        '<div class="sighting-footer"><span class="timestamp">'
        f'{_escape(s.timestamp.strftime("%Y-%m-%d %H:%M"))}</span> '
        f'<a href="{_escape("/sighting/" + s.id)}" class="btn btn-small">Details</a>'
        "</div></div>"
    )


def sightings_list(sightings: Iterable[Sighting]) -> str:
    """Render the list of sightings, or an empty-state notice when there are none."""
    items: Sequence[Sighting] = list(sightings)
    if items:
        body = '<div class="sightings-list">' + "".join(map(_list_item, items)) + "</div>"
    else:
        body = _LIST_EMPTY
    return layout("Recent Encounters", _LIST_HEAD + body)


def sighting_detail(sighting: Sighting) -> str:
    """Render the full encounter report for one sighting."""
    s = sighting
    stamp = s.timestamp if s.timestamp.tzinfo else s.timestamp.astimezone()
    timestamp = f'{stamp.strftime("%Y-%m-%d %H:%M:%S")} {_zone_name(stamp)}'
    coordinates = f"{s.location.latitude:.6f}, {s.location.longitude:.6f}"

    parts = [
        '<div class="sighting-detail"><div class="detail-header">'
        f"<h2>ENCOUNTER REPORT: {_escape(s.name)}</h2>"
        f'<span class="category">CLASSIFICATION: {_escape(s.category)}</span></div>'
        '<div class="detail-section"><h3>Basic Information</h3>'
        '<table class="detail-table">'
        f"<tr><td>Type:</td><td>{_escape(s.type)}</td></tr>"
        f"<tr><td>Category:</td><td>{_escape(s.category)}</td></tr>"
        f"<tr><td>Timestamp:</td><td>{_escape(timestamp)}</td></tr>"
        "</table></div>"
        '<div class="detail-section"><h3>Location Data</h3>'
        '<table class="detail-table">'
        f"<tr><td>City:</td><td>{_escape(s.location.city)}</td></tr>"
        f"<tr><td>Country:</td><td>{_escape(s.location.country)}</td></tr>"
        f"<tr><td>Region:</td><td>{_escape(s.location.region)}</td></tr>"
        f"<tr><td>Coordinates:</td><td>{_escape(coordinates)}</td></tr>"
        "</table></div>"
    ]
    if s.attributes:
        rows = "".join(
            f"<tr><td>{_escape(str(key))}:</td>"
            f"<td>{_escape(_format_value(value))}</td></tr>"
            for key, value in s.attributes.items()
        )
        parts.append(
            '<div class="detail-section"><h3>Entity Attributes</h3>'
            f'<table class="detail-table">{rows}</table></div>'
        )
    parts.append(
        '<div class="detail-section"><h3>Field Report</h3>'
        f'<p class="description-text">{_escape(s.description)}</p></div>'
    )
    parts.append(_DETAIL_ACTIONS)
    return layout("Report: " + s.name, "".join(parts))