"""Demo shop: a Flask API plus the single-page client that talks to it."""

from .app import PORT, create_app
from .catalog import Credentials, Product, ShopConfig, default_config

__version__ = "0.1.0"

__all__ = [
    "PORT",
    "Credentials",
    "Product",
    "ShopConfig",
    "create_app",
    "default_config",
]
