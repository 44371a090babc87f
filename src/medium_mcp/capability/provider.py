"""ContentCapability: the operations behind the tool names.

The :class:`~medium_mcp.tools.dispatcher.ToolDispatcher` only knows this
interface. The default implementation is
:class:`~medium_mcp.capability.service.ContentService`; anything else with the
same coroutines can be plugged in.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from medium_mcp.capability.results import (
        ArticleContentResult,
        ArticleDetailsResult,
        BlogStatisticsResult,
        EngagementMetricsResult,
        PublicationArticlesResult,
        PublicationInfoResult,
        SearchArticlesResult,
        TagSearchResult,
        TopArticlesResult,
        UserArticlesResult,
        UserInfoResult,
    )


@runtime_checkable
class ContentCapability(Protocol):
    """Performs content-platform lookups and reports them as result records.

    Implementations report domain failures through ``success=False`` on the
    returned record. Raising is allowed too; the dispatcher turns exceptions
    into an error payload.
    """

    async def get_blog_statistics(self, username: str) -> BlogStatisticsResult: ...

    async def get_article_details(self, article_id: str) -> ArticleDetailsResult: ...

    async def get_user_articles(self, username: str, limit: int | None = None) -> UserArticlesResult: ...

    async def search_articles(self, query: str, limit: int | None = None) -> SearchArticlesResult: ...

    async def search_tags(self, query: str) -> TagSearchResult: ...

    async def get_top_articles_by_claps(self, username: str, top_count: int = 10) -> TopArticlesResult: ...

    async def get_engagement_metrics(self, username: str) -> EngagementMetricsResult: ...

    async def get_publication_info(self, publication_id: str) -> PublicationInfoResult: ...

    async def get_article_content(self, article_id: str, format: str = "markdown") -> ArticleContentResult: ...

    async def get_user_info_by_id(self, user_id: str) -> UserInfoResult: ...

    async def get_publication_articles(
        self, publication_slug_or_id: str, limit: int | None = None
    ) -> PublicationArticlesResult: ...
