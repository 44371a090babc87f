"""Content-platform client interface and the fixture-backed implementation."""

from medium_mcp.platform.client import PlatformClient, load_client_factory
from medium_mcp.platform.errors import ClientFactoryError, PlatformError, PlatformNotFoundError
from medium_mcp.platform.fixture import FixturePlatformClient

__all__ = [
    "ClientFactoryError",
    "FixturePlatformClient",
    "PlatformClient",
    "PlatformError",
    "PlatformNotFoundError",
    "load_client_factory",
]
