"""Infrastructure layer: transport, configuration and page parsers."""

from .config import Settings
from .errors import AtCoderError
from .http_client import AsyncHTTPClient

__all__ = ["AsyncHTTPClient", "AtCoderError", "Settings"]
