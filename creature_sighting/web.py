"""HTML endpoints of the web interface."""

from __future__ import annotations

from http import HTTPStatus

from .httpkit import Request, Response, error_response, html_response, redirect
from .pages import categories_list, home, locations_list
from .sighting import Location, Registry, RegistryError
from .sighting_pages import sighting_detail, sightings_list
from .storage import InMemoryStorage

DEFAULT_CATEGORY = "kaiju"
_DETAIL_PREFIX = "/sighting/"


def _method_not_allowed() -> Response:
    return error_response("Method not allowed", HTTPStatus.METHOD_NOT_ALLOWED)


class WebHandler:
    """Serves the HTML pages from a registry and a sighting store."""

    def __init__(self, registry: Registry, storage: InMemoryStorage) -> None:
        self._registry = registry
        self._storage = storage

    def handle_home(self, request: Request) -> Response:
        """Render the home page."""
        if request.method != "GET":
            return _method_not_allowed()
        return html_response(home())

    def handle_sightings(self, request: Request) -> Response:
        """List sightings, filtered by the 'category' parameter when given."""
        if request.method != "GET":
            return _method_not_allowed()
        category = request.param("category")
        if category:
            sightings = self._storage.by_category(category)
        else:
            sightings = self._storage.all()
        return html_response(sightings_list(sightings))

    def handle_sighting_detail(self, request: Request) -> Response:
        """Show one sighting by the ID in the path; 'random' makes a new one."""
        if request.method != "GET":
            return _method_not_allowed()

        sighting_id = request.path.removeprefix(_DETAIL_PREFIX)
        if not sighting_id:
            return error_response("Sighting ID required", HTTPStatus.BAD_REQUEST)
        if sighting_id == "random":
            return self.handle_random_sighting(request)

        sighting = self._storage.get(sighting_id)
        if sighting is None:
            return error_response("Sighting not found", HTTPStatus.NOT_FOUND)
        return html_response(sighting_detail(sighting))

    def handle_random_sighting(self, request: Request) -> Response:
        """Generate and store a sighting, then redirect to its detail page."""
        if request.method != "GET":
            return _method_not_allowed()

        category = request.param("category") or DEFAULT_CATEGORY
        try:
            generator = self._registry.get(category)
        except RegistryError:
            return error_response(
                f"Category not found: {category}", HTTPStatus.NOT_FOUND
            )

        try:
            sighting = generator.generate()
        except Exception as err:
            return error_response(
                f"Failed to generate sighting: {err}",
                HTTPStatus.INTERNAL_SERVER_ERROR,
            )

        self._storage.add(sighting)
        return redirect(f"{_DETAIL_PREFIX}{sighting.id}", HTTPStatus.SEE_OTHER)

    def handle_locations(self, request: Request) -> Response:
        """List the distinct city/country locations of all stored sightings."""
        if request.method != "GET":
            return _method_not_allowed()
        unique: dict[str, Location] = {}
        for s in self._storage.all():
            unique[f"{s.location.city},{s.location.country}"] = s.location
        return html_response(locations_list(unique.values()))

    def handle_categories(self, request: Request) -> Response:
        """List the registered categories."""
        if request.method != "GET":
            return _method_not_allowed()
        return html_response(categories_list(self._registry.categories()))