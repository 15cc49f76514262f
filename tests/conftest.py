"""Shared test fixtures for shop_server."""

import pytest
import requests

from shop_server import create_app
from shop_server.client import ShopClient

BASE_URL = "http://localhost:3000"


class StubResponse:
    """Enough of ``requests.Response`` for ShopClient."""

    def __init__(self, status_code=200, payload=None, raw_json_error=False):
        self.status_code = status_code
        self._payload = payload
        self._raw_json_error = raw_json_error

    def json(self):
        if self._raw_json_error:
            raise ValueError("No JSON object could be decoded")
        return self._payload

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error")


class FakeSession:
    """Routes ``get``/``post`` by URL to canned responses or exceptions.

    Every call is recorded in ``calls`` as ``(method, url, json)``.
    """

    def __init__(self, get=None, post=None):
        self.routes = {"GET": dict(get or {}), "POST": dict(post or {})}
        self.calls = []

    def _dispatch(self, method, url, json=None):
        self.calls.append((method, url, json))
        outcome = self.routes[method].get(url)
        if outcome is None:
            raise requests.ConnectionError(f"Not found: {url}")
        if isinstance(outcome, Exception):
            raise outcome
        if callable(outcome):
            return outcome(json)
        return outcome

    def get(self, url, timeout=None):
        return self._dispatch("GET", url)

    def post(self, url, json=None, timeout=None):
        return self._dispatch("POST", url, json)


class FlaskSession:
    """Sends ShopClient traffic into a Flask app instead of the network."""

    def __init__(self, app, base_url=BASE_URL):
        self.app = app
        self.base_url = base_url

    def _wrap(self, resp):
        payload = resp.get_json(silent=True)
        return StubResponse(resp.status_code, payload, raw_json_error=payload is None)

    def get(self, url, timeout=None):
        # fresh test client per call, mount() fetches from two threads
        return self._wrap(self.app.test_client().get(url[len(self.base_url):]))

    def post(self, url, json=None, timeout=None):
        return self._wrap(self.app.test_client().post(url[len(self.base_url):], json=json))


@pytest.fixture
def app():
    """Flask app built from the default config."""
    app = create_app()
    app.config["TESTING"] = True
    return app


@pytest.fixture
def http(app):
    """Flask test client."""
    return app.test_client()


@pytest.fixture
def backend_session():
    """FakeSession answering like a healthy backend with two products."""
    return FakeSession(
        get={
            f"{BASE_URL}/api/message": StubResponse(200, {"message": "Hello from the backend!"}),
            f"{BASE_URL}/api/products": StubResponse(200, [
                {"id": 1, "name": "T-Shirt", "price": 20},
                {"id": 2, "name": "Jeans", "price": 40},
            ]),
        },
        post={
            f"{BASE_URL}/api/login": StubResponse(200, {"success": True, "token": "mock-token"}),
            f"{BASE_URL}/api/orders": StubResponse(200, {"success": True, "orderId": 42}),
        },
    )


@pytest.fixture
def shop_client(backend_session):
    return ShopClient(BASE_URL, session=backend_session)
