"""Tests for the remote resource client."""

import pytest
import requests

from portfolio_admin.core.exceptions import NotFound, RequestFailed
from portfolio_admin.core.schemas import ABOUT, list_schemas

from conftest import BASE_URL, make_response


@pytest.mark.parametrize("schema", list_schemas(), ids=lambda s: s.key)
def test_get_missing_document_returns_none(api, session, schema):
    session.request.return_value = make_response(404, {"error": f"{schema.title} not found"})

    assert api.resource(schema).get() is None
    session.request.assert_called_once()
    assert session.request.call_args.kwargs["method"] == "GET"
    assert session.request.call_args.kwargs["url"] == f"{BASE_URL}{schema.path}"


def test_get_returns_document(api, session):
    doc = {"title": "Studio X", "bio": "We shoot weddings.", "image": "https://img/x.jpg", "specializations": []}
    session.request.return_value = make_response(200, doc)

    assert api.resource(ABOUT).get() == doc


def test_get_server_error_uses_server_message(api, session):
    session.request.return_value = make_response(500, {"error": "Database unavailable"})

    with pytest.raises(RequestFailed) as exc:
        api.resource(ABOUT).get()

    assert exc.value.status_code == 500
    assert exc.value.message == "Database unavailable"


def test_error_without_body_uses_generic_status_message(api, session):
    session.request.return_value = make_response(502)

    with pytest.raises(RequestFailed) as exc:
        api.resource(ABOUT).replace({"title": "x"})

    assert exc.value.message == "HTTP error! status: 502"


def test_delete_404_is_an_error(api, session):
    session.request.return_value = make_response(404, {"error": "About not found"})

    with pytest.raises(NotFound) as exc:
        api.resource(ABOUT).delete()

    assert exc.value.status_code == 404


def test_create_and_replace_send_json_body(api, session):
    body = {"title": "Studio X"}
    session.request.return_value = make_response(201, body)

    assert api.resource(ABOUT).create(body) == body
    assert session.request.call_args.kwargs["method"] == "POST"
    assert session.request.call_args.kwargs["json"] == body

    session.request.return_value = make_response(200, body)
    api.resource(ABOUT).replace(body)
    assert session.request.call_args.kwargs["method"] == "PUT"
    assert session.request.call_args.kwargs["timeout"] == 5


def test_connection_error_wrapped(api, session):
    session.request.side_effect = requests.exceptions.ConnectionError("refused")

    with pytest.raises(RequestFailed) as exc:
        api.resource(ABOUT).get()

    assert exc.value.status_code == 0
    assert "Connection error" in exc.value.message


def test_empty_success_body_is_empty_dict(api, session):
    session.request.return_value = make_response(204)

    assert api._delete("/api/about") == {}


def test_base_url_trailing_slash_is_stripped(config, session):
    from portfolio_admin.api_client import ApiClient

    config.api_base_url = f"{BASE_URL}/"
    client = ApiClient(config=config, session=session)

    assert client._url("/api/about") == f"{BASE_URL}/api/about"


def test_health_check(api, session):
    session.get.return_value = make_response(200, {})
    assert api.health_check() is True

    session.get.side_effect = requests.exceptions.ConnectionError("down")
    assert api.health_check() is False
