"""Generate fictional creature sightings and serve them as HTML pages and JSON over WSGI."""

__version__ = "0.1.0"