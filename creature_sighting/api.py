"""JSON endpoints for generating sightings and listing categories."""

from __future__ import annotations

import logging
from http import HTTPStatus

from .httpkit import Request, Response, error_response, json_response
from .sighting import Registry, RegistryError

log = logging.getLogger(__name__)

DEFAULT_CATEGORY = "kaiju"


class ApiHandler:
    """Serves the /api endpoints from a generator registry."""

    def __init__(self, registry: Registry) -> None:
        self._registry = registry

    def handle_sighting(self, request: Request) -> Response:
        """Generate a sighting for the 'category' parameter (default kaiju)."""
        if request.method != "GET":
            return error_response("Method not allowed", HTTPStatus.METHOD_NOT_ALLOWED)

        category = request.param("category") or DEFAULT_CATEGORY
        try:
            generator = self._registry.get(category)
        except RegistryError as err:
            return error_response(str(err), HTTPStatus.BAD_REQUEST)

        try:
            sighting = generator.generate()
        except Exception as err:
            log.error("Error generating sighting: %s", err)
            return error_response(
                "Failed to generate sighting", HTTPStatus.INTERNAL_SERVER_ERROR
            )

        try:
            return json_response(sighting.to_dict())
        except (TypeError, ValueError) as err:
            log.error("Error encoding response: %s", err)
            return error_response(
                "Failed to encode response", HTTPStatus.INTERNAL_SERVER_ERROR
            )

    def handle_categories(self, request: Request) -> Response:
        """List every registered category name."""
        if request.method != "GET":
            return error_response("Method not allowed", HTTPStatus.METHOD_NOT_ALLOWED)
        return json_response({"categories": self._registry.categories()})