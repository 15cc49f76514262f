# shop_server/catalog.py
import os
from dataclasses import dataclass
from typing import Tuple, Union

FRONTEND_DIR = os.path.join(os.path.dirname(__file__), "frontend")

Price = Union[int, float]


@dataclass(frozen=True)
class Product:
    id: int
    name: str
    price: Price

    def to_dict(self) -> dict:
        return {"id": self.id, "name": self.name, "price": self.price}


@dataclass(frozen=True)
class Credentials:
    username: str
    password: str

    def matches(self, username, password) -> bool:
        # plain equality, no hashing
        return username == self.username and password == self.password


@dataclass(frozen=True)
class Order:
    # never stored, only logged and answered
    order_id: int
    user_id: object
    product_ids: object


DEFAULT_PRODUCTS: Tuple[Product, ...] = (
    Product(1, "T-Shirt", 20),
    Product(2, "Jeans", 40),
    Product(3, "Sneakers", 60),
)

DEFAULT_CREDENTIALS = Credentials(username="user", password="pass")


@dataclass(frozen=True)
class ShopConfig:
    """
    Read-only settings handed to ``create_app``.

    Everything the request handlers read lives here, so two apps built
    from different configs never share state.
    """

    message: str = "Hello from the backend!"
    products: Tuple[Product, ...] = DEFAULT_PRODUCTS
    credentials: Credentials = DEFAULT_CREDENTIALS
    token: str = "mock-token"
    order_id_limit: int = 1000
    frontend_dir: str = FRONTEND_DIR

    def product_payload(self) -> list:
        return [p.to_dict() for p in self.products]


def default_config() -> ShopConfig:
    return ShopConfig()
