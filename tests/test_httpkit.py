import json
from http import HTTPStatus

from creature_sighting.httpkit import (
    Request,
    Response,
    error_response,
    html_response,
    json_response,
    redirect,
)


def test_param_returns_first_value():
    request = Request("GET", "/api/sighting", "category=kaiju&category=other")
    assert request.param("category") == "kaiju"


def test_param_missing_is_empty():
    assert Request("GET", "/", "").param("category") == ""


def test_from_target_splits_path_and_query():
    request = Request.from_target("GET", "/sightings?category=kaiju")
    assert request.path == "/sightings"
    assert request.param("category") == "kaiju"


def test_from_target_without_path_defaults_to_root():
    assert Request.from_target("GET", "?a=1").path == "/"


def test_error_response_is_plain_text_with_newline():
    response = error_response("Method not allowed", HTTPStatus.METHOD_NOT_ALLOWED)
    assert response.status == HTTPStatus.METHOD_NOT_ALLOWED
    assert response.text == "Method not allowed\n"
    assert response.headers["Content-Type"] == "text/plain; charset=utf-8"
    assert response.headers["X-Content-Type-Options"] == "nosniff"


def test_json_response_round_trips():
    payload = {"categories": ["kaiju"], "n": 3}
    response = json_response(payload)
    assert response.status == HTTPStatus.OK
    assert response.headers["Content-Type"] == "application/json"
    assert response.text.endswith("\n")
    assert json.loads(response.body) == payload


def test_json_response_escapes_html_characters():
    response = json_response({"text": "<b>&</b>"})
    assert "<" not in response.text
    assert "&" not in response.text
    assert "\\u003c" in response.text
    assert json.loads(response.body) == {"text": "<b>&</b>"}


def test_html_response_sets_content_type():
    response = html_response("<p>hi</p>")
    assert response.text == "<p>hi</p>"
    assert response.headers["Content-Type"] == "text/html; charset=utf-8"


def test_redirect_sets_location_and_status():
    response = redirect("/sighting/kaiju-1")
    assert response.status == HTTPStatus.SEE_OTHER
    assert response.headers["Location"] == "/sighting/kaiju-1"
    assert 'href="/sighting/kaiju-1"' in response.text


def test_response_status_is_plain_int_and_reason():
    response = Response(HTTPStatus.NOT_FOUND)
    assert type(response.status) is int
    assert response.reason == HTTPStatus.NOT_FOUND.phrase