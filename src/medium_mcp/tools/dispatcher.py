"""ToolDispatcher routes a named tool call to the content capability.

The dispatcher never raises past :meth:`ToolDispatcher.execute`. Unknown tools
and failing operations come back as JSON text with an ``error`` key, which the
protocol engine returns as a *successful* ``tools/call`` result.
"""

from __future__ import annotations

import json
import logging
import time
from collections.abc import Awaitable, Callable, Mapping
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel

from medium_mcp.tools.arguments import ToolArguments
from medium_mcp.tools.errors import ToolNotFoundError
from medium_mcp.tools.registry import ToolRegistry
from medium_mcp.utils.telemetry import ATTR_TOOL_NAME, ATTR_TOOL_SUCCESS, get_tracer

if TYPE_CHECKING:
    from medium_mcp.capability.provider import ContentCapability

logger = logging.getLogger(__name__)
_tracer = get_tracer(__name__)

Handler = Callable[["ContentCapability", ToolArguments], Awaitable[Any]]

DEFAULT_TOP_COUNT = 10
DEFAULT_CONTENT_FORMAT = "markdown"


async def _get_blog_statistics(cap: ContentCapability, args: ToolArguments) -> Any:
    return await cap.get_blog_statistics(args.string("username"))


async def _get_article_details(cap: ContentCapability, args: ToolArguments) -> Any:
    return await cap.get_article_details(args.string("article_id"))


async def _get_user_articles(cap: ContentCapability, args: ToolArguments) -> Any:
    return await cap.get_user_articles(args.string("username"), args.optional_int("limit"))


async def _search_articles(cap: ContentCapability, args: ToolArguments) -> Any:
    return await cap.search_articles(args.string("query"), args.optional_int("limit"))


async def _search_tags(cap: ContentCapability, args: ToolArguments) -> Any:
    return await cap.search_tags(args.string("query"))


async def _get_top_articles_by_claps(cap: ContentCapability, args: ToolArguments) -> Any:
    top_count = args.optional_int("top_count")
    return await cap.get_top_articles_by_claps(
        args.string("username"),
        DEFAULT_TOP_COUNT if top_count is None else top_count,
    )


async def _get_engagement_metrics(cap: ContentCapability, args: ToolArguments) -> Any:
    return await cap.get_engagement_metrics(args.string("username"))


async def _get_publication_info(cap: ContentCapability, args: ToolArguments) -> Any:
    return await cap.get_publication_info(args.string("publication_id"))


async def _get_article_content(cap: ContentCapability, args: ToolArguments) -> Any:
    return await cap.get_article_content(
        args.string("article_id"),
        args.optional_string("format", DEFAULT_CONTENT_FORMAT),
    )


async def _get_user_info_by_id(cap: ContentCapability, args: ToolArguments) -> Any:
    return await cap.get_user_info_by_id(args.string("user_id"))


async def _get_publication_articles(cap: ContentCapability, args: ToolArguments) -> Any:
    return await cap.get_publication_articles(
        args.string("publication_slug_or_id"),
        args.optional_int("limit"),
    )


HANDLERS: dict[str, Handler] = {
    "get_blog_statistics": _get_blog_statistics,
    "get_article_details": _get_article_details,
    "get_user_articles": _get_user_articles,
    "search_articles": _search_articles,
    "search_tags": _search_tags,
    "get_top_articles_by_claps": _get_top_articles_by_claps,
    "get_engagement_metrics": _get_engagement_metrics,
    "get_publication_info": _get_publication_info,
    "get_article_content": _get_article_content,
    "get_user_info_by_id": _get_user_info_by_id,
    "get_publication_articles": _get_publication_articles,
}


class ToolDispatcher:
    """Validates and executes named tool calls.

    Usage::

        dispatcher = ToolDispatcher(ContentService(platform))
        text = await dispatcher.execute("get_blog_statistics", {"username": "jbloggs"})
    """

    def __init__(
        self,
        capability: ContentCapability,
        registry: ToolRegistry | None = None,
        *,
        log: logging.Logger | None = None,
    ) -> None:
        self._capability = capability
        self._registry = registry or ToolRegistry()
        self._log = log or logger
        missing = [name for name in self._registry.names() if name.lower() not in HANDLERS]
        if missing:
            msg = f"No handler for catalog tool(s): {', '.join(missing)}"
            raise ValueError(msg)

    @property
    def registry(self) -> ToolRegistry:
        return self._registry

    async def execute(self, tool_name: str, arguments: Mapping[str, Any] | None = None) -> str:
        """Run *tool_name* and return its JSON text; never raises."""
        with _tracer.start_as_current_span("mcp.tool.execute") as span:
            span.set_attribute(ATTR_TOOL_NAME, tool_name)
            try:
                handler = self._resolve(tool_name)
            except ToolNotFoundError as exc:
                self._log.error("Unknown tool: %s", tool_name)
                span.set_attribute(ATTR_TOOL_SUCCESS, False)
                return json.dumps({"error": str(exc)})

            self._log.info("Executing tool %s", tool_name)
            started = time.perf_counter()
            try:
                result = await handler(self._capability, ToolArguments(arguments))
            except Exception as exc:
                self._log.exception("Tool %s failed", tool_name)
                span.set_attribute(ATTR_TOOL_SUCCESS, False)
                return json.dumps({"error": str(exc) or type(exc).__name__, "toolName": tool_name})

            self._log.info("Tool %s completed in %.1fms", tool_name, (time.perf_counter() - started) * 1000)
            span.set_attribute(ATTR_TOOL_SUCCESS, bool(getattr(result, "success", True)))
            return _serialize(result)

    def _resolve(self, tool_name: str) -> Handler:
        if tool_name not in self._registry:
            raise ToolNotFoundError(tool_name)
        return HANDLERS[tool_name.lower()]


def _serialize(result: Any) -> str:
    if hasattr(result, "to_json"):
        return str(result.to_json())
    if isinstance(result, BaseModel):
        return result.model_dump_json(by_alias=True, indent=2)
    return json.dumps(result, indent=2, default=str)
