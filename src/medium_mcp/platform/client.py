"""PlatformClient protocol and factory loading.

The content service talks to the platform only through this interface. The
repository ships a fixture-backed client; HTTP clients are plugged in by import
path (``package.module:factory``).
"""

from __future__ import annotations

import importlib
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from medium_mcp.platform.errors import ClientFactoryError

if TYPE_CHECKING:
    from medium_mcp.platform.models import Article, Publication, Tag, UserProfile


@runtime_checkable
class PlatformClient(Protocol):
    """Looks up users, articles, tags and publications on the content platform.

    Lookups of missing entities raise
    :class:`~medium_mcp.platform.errors.PlatformNotFoundError`.
    """

    async def get_user_by_username(self, username: str) -> UserProfile: ...
    async def get_user_by_id(self, user_id: str) -> UserProfile: ...
    async def get_user_article_ids(self, user_id: str) -> list[str]: ...
    async def get_article(self, article_id: str) -> Article: ...
    async def get_article_markdown(self, article_id: str) -> str: ...
    async def get_article_html(self, article_id: str) -> str: ...
    async def get_article_text(self, article_id: str) -> str: ...
    async def search_article_ids(self, query: str) -> list[str]: ...
    async def search_tag_ids(self, query: str) -> list[str]: ...
    async def get_tag(self, tag_id: str) -> Tag: ...
    async def resolve_publication_id(self, slug: str) -> str: ...
    async def get_publication(self, publication_id: str) -> Publication: ...
    async def get_publication_article_ids(self, publication_id: str) -> list[str]: ...


def load_client_factory(path: str) -> PlatformClient:
    """Import ``module:attribute`` and call it to build a :class:`PlatformClient`.

    Raises:
        ClientFactoryError: If the path is malformed, the import fails, the
            factory raises, or the built object does not satisfy the protocol.
    """
    module_name, sep, attr = path.partition(":")
    if not sep or not module_name or not attr:
        msg = f"Client factory must look like 'module:attribute', got {path!r}"
        raise ClientFactoryError(msg)

    try:
        module = importlib.import_module(module_name)
    except ImportError as exc:
        msg = f"Cannot import client module {module_name!r}: {exc}"
        raise ClientFactoryError(msg) from exc

    factory = getattr(module, attr, None)
    if factory is None or not callable(factory):
        msg = f"{module_name!r} has no callable {attr!r}"
        raise ClientFactoryError(msg)

    try:
        client = factory()
    except Exception as exc:
        msg = f"{path} failed: {exc}"
        raise ClientFactoryError(msg) from exc
    if not isinstance(client, PlatformClient):
        msg = f"{path} did not return a PlatformClient"
        raise ClientFactoryError(msg)
    return client
