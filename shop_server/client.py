"""Python rendition of the shop page.

``ShopClient`` is a thin ``requests`` wrapper around the four API routes.
``ShopView`` holds the page state and walks the same login-then-shop flow as
``frontend/app.js``, so the flow can be driven from scripts and tests.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, List, Optional

import requests

from .app import PORT

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = f"http://localhost:{PORT}"

LOADING_MESSAGE = "Loading..."
FALLBACK_MESSAGE = "Failed to connect to backend"
MOCK_USER_ID = 1

FETCH_ERRORS = (requests.RequestException, ValueError, KeyError, TypeError, AttributeError)


class ShopClient:
    def __init__(self, base_url: str = DEFAULT_BASE_URL, session=None, timeout: Optional[float] = None):
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    def _url(self, path: str) -> str:
        return f"{self.base_url}{path}"

    def get_message(self) -> str:
        resp = self.session.get(self._url("/api/message"), timeout=self.timeout)
        resp.raise_for_status()
        return resp.json()["message"]

    def get_products(self) -> List[dict]:
        resp = self.session.get(self._url("/api/products"), timeout=self.timeout)
        resp.raise_for_status()
        return resp.json()

    def login(self, username: str, password: str) -> dict:
        """Return the login body; a 401 rejection is a normal answer, not an error."""
        resp = self.session.post(
            self._url("/api/login"),
            json={"username": username, "password": password},
            timeout=self.timeout,
        )
        if resp.status_code != 401:
            resp.raise_for_status()
        return resp.json()

    def place_order(self, user_id, product_ids) -> dict:
        resp = self.session.post(
            self._url("/api/orders"),
            json={"userId": user_id, "productIds": product_ids},
            timeout=self.timeout,
        )
        resp.raise_for_status()
        return resp.json()


def _log_alert(text: str) -> None:
    logger.warning("%s", text)


def format_product(product: dict) -> str:
    return f"{product['name']} - ${product['price']}"


class ShopView:
    """State of the single shop page.

    Starts logged out with ``message`` set to "Loading...". ``mount()``
    fills message and products, ``submit_login()`` flips ``logged_in`` and
    ``place_order()`` orders every listed product at once.
    """

    def __init__(self, client: ShopClient, alert: Callable[[str], None] = None):
        self.client = client
        self.alert = alert or _log_alert

        self.message = LOADING_MESSAGE
        self.products: List[dict] = []
        self.username = ""
        self.password = ""
        self.logged_in = False
        self.order_status = ""

    def mount(self) -> None:
        with ThreadPoolExecutor(max_workers=2) as pool:
            message = pool.submit(self.client.get_message)
            products = pool.submit(self.client.get_products)

            try:
                self.message = message.result()
            except FETCH_ERRORS as e:
                logger.error("Error fetching message: %s", e)
                self.message = FALLBACK_MESSAGE

            try:
                self.products = products.result()
            except FETCH_ERRORS as e:
                logger.error("Error fetching products: %s", e)

    def set_username(self, value: str) -> None:
        self.username = value

    def set_password(self, value: str) -> None:
        self.password = value

    def submit_login(self) -> None:
        try:
            data = self.client.login(self.username, self.password)
            if data.get("success"):
                self.logged_in = True
                self.username = ""
                self.password = ""
            else:
                self.alert(f"Login failed: {data.get('message')}")
        except FETCH_ERRORS as e:
            logger.error("Login error: %s", e)

    def place_order(self) -> None:
        if not self.logged_in:
            return

        product_ids = [p["id"] for p in self.products]  # the whole list, not a selection
        try:
            data = self.client.place_order(MOCK_USER_ID, product_ids)
            if data.get("success"):
                self.order_status = f"Order placed! ID: {data['orderId']}"
        except FETCH_ERRORS as e:
            logger.error("Order error: %s", e)

    def render(self) -> str:
        lines = ["Shop Webapp", f"Backend says: {self.message}"]

        if not self.logged_in:
            lines += [
                "Login",
                f"[Username: {self.username}]",
                f"[Password: {'*' * len(self.password)}]",
                "[Login]",
            ]
        else:
            lines += ["Welcome, User!", "Products"]
            lines += [format_product(p) for p in self.products]
            lines.append("[Place Order]")
            if self.order_status:
                lines.append(self.order_status)

        return "\n".join(lines)
