"""Shared fixtures: real ``requests.Response`` objects and an in-memory API."""

import copy
import json
from typing import Any, Dict, Optional
from unittest.mock import MagicMock

import pytest
import requests

from portfolio_admin.api_client import ApiClient
from portfolio_admin.config import AppConfig

BASE_URL = "http://api.test"


def make_response(status_code: int, body: Any = None, url: str = BASE_URL) -> requests.Response:
    """Build a real Response so raise_for_status/json behave as in production."""
    response = requests.Response()
    response.status_code = status_code
    response.url = url
    response.encoding = "utf-8"
    response.headers["Content-Type"] = "application/json"
    response._content = b"" if body is None else json.dumps(body).encode("utf-8")
    return response


class FakePortfolioApi:
    """Stores one document per resource path, like the real backend."""

    def __init__(self):
        self.documents: Dict[str, Dict[str, Any]] = {}
        self.calls = []

    def request(self, method: str, url: str, json: Optional[Dict] = None, **kwargs) -> requests.Response:
        path = url[len(BASE_URL):]
        self.calls.append((method, path, copy.deepcopy(json)))

        if method == "GET":
            if path not in self.documents:
                return make_response(404, {"error": "Not found"}, url)
            return make_response(200, self.documents[path], url)
        if method in ("POST", "PUT"):
            self.documents[path] = copy.deepcopy(json)
            return make_response(201 if method == "POST" else 200, self.documents[path], url)
        if method == "DELETE":
            if self.documents.pop(path, None) is None:
                return make_response(404, {"error": "Not found"}, url)
            return make_response(200, {"message": "Deleted"}, url)
        return make_response(405, {"error": "Method not allowed"}, url)


@pytest.fixture
def config():
    """Config pointing at the fake API."""
    return AppConfig(api_base_url=BASE_URL, api_timeout_sec=5)


@pytest.fixture
def session():
    """Mock requests session."""
    mock = MagicMock()
    mock.headers = {}
    return mock


@pytest.fixture
def api(config, session):
    """ApiClient over the mock session."""
    return ApiClient(config=config, session=session)


@pytest.fixture
def fake_api():
    return FakePortfolioApi()


@pytest.fixture
def backed_api(config, session, fake_api):
    """ApiClient whose session is served by the in-memory API."""
    session.request.side_effect = fake_api.request
    return ApiClient(config=config, session=session)
