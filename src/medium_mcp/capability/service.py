"""ContentService is the default :class:`ContentCapability` implementation.

Builds tool results from a :class:`~medium_mcp.platform.client.PlatformClient`.
Each operation captures platform failures into the returned record
(``success=False``) instead of raising.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from medium_mcp.capability.results import (
    ArticleContentResult,
    ArticleDetailsResult,
    BlogStatisticsResult,
    EngagementMetricsResult,
    PublicationArticlesResult,
    PublicationInfoResult,
    SearchArticlesResult,
    TagInfoResult,
    TagSearchResult,
    TopArticlesResult,
    UserArticlesResult,
    UserInfoResult,
)

if TYPE_CHECKING:
    from medium_mcp.platform.client import PlatformClient

logger = logging.getLogger(__name__)

PROFILE_URL_TEMPLATE = "https://medium.com/@{username}"

# Input shorter than this, or containing a dash, is treated as a publication slug.
_PUBLICATION_ID_MIN_LENGTH = 10

_FORMAT_ALIASES = {
    "markdown": "markdown",
    "md": "markdown",
    "html": "html",
    "text": "text",
    "txt": "text",
}


class ContentService:
    """Answers every tool of the catalog against a platform client.

    Usage::

        service = ContentService(FixturePlatformClient.from_path(path))
        stats = await service.get_blog_statistics("jbloggs")
        print(stats.to_json())
    """

    def __init__(self, platform: PlatformClient, *, log: logging.Logger | None = None) -> None:
        self._platform = platform
        self._log = log or logger

    async def get_blog_statistics(self, username: str) -> BlogStatisticsResult:
        self._log.info("get_blog_statistics username=%s", username)
        try:
            user = await self._platform.get_user_by_username(username)
            article_ids = await self._platform.get_user_article_ids(user.id)
        except Exception as exc:
            self._log.exception("get_blog_statistics failed for user %s", username)
            return BlogStatisticsResult.failure(str(exc))

        return BlogStatisticsResult(
            success=True,
            username=username,
            full_name=user.fullname,
            user_id=user.id,
            followers_count=user.followers_count,
            article_count=len(article_ids),
            bio=user.bio,
            image_url=user.image_url,
            twitter_username=user.twitter_username,
        )

    async def get_article_details(self, article_id: str) -> ArticleDetailsResult:
        self._log.info("get_article_details article_id=%s", article_id)
        try:
            article = await self._platform.get_article(article_id)
        except Exception as exc:
            self._log.exception("get_article_details failed for article %s", article_id)
            return ArticleDetailsResult.failure(str(exc))

        return ArticleDetailsResult(
            success=True,
            id=article.id,
            title=article.title,
            subtitle=article.subtitle,
            claps=article.claps,
            responses_count=article.responses_count,
            voters=article.voters,
            url=article.url,
            published_date=article.published_date,
            tags=list(article.tags),
            topics=list(article.topics),
        )

    async def get_user_articles(self, username: str, limit: int | None = None) -> UserArticlesResult:
        self._log.info("get_user_articles username=%s limit=%s", username, limit)
        try:
            user = await self._platform.get_user_by_username(username)
            article_ids = await self._platform.get_user_article_ids(user.id)
            articles = await self._fetch_articles(article_ids, limit)
        except Exception as exc:
            self._log.exception("get_user_articles failed for user %s", username)
            return UserArticlesResult.failure(str(exc))

        self._log.info("get_user_articles fetched %d/%d articles", len(articles), len(article_ids))
        return UserArticlesResult(
            success=True,
            username=username,
            full_name=user.fullname,
            total_article_count=len(article_ids),
            articles=articles,
        )

    async def search_articles(self, query: str, limit: int | None = None) -> SearchArticlesResult:
        self._log.info("search_articles query=%r limit=%s", query, limit)
        try:
            article_ids = await self._platform.search_article_ids(query)
            articles = await self._fetch_articles(article_ids, limit)
        except Exception as exc:
            self._log.exception("search_articles failed for query %r", query)
            return SearchArticlesResult.failure(str(exc))

        return SearchArticlesResult(
            success=True,
            query=query,
            total_results_count=len(article_ids),
            articles=articles,
        )

    async def search_tags(self, query: str) -> TagSearchResult:
        self._log.info("search_tags query=%r", query)
        try:
            tags: list[TagInfoResult] = []
            for tag_id in await self._platform.search_tag_ids(query):
                tag = await self._platform.get_tag(tag_id)
                tags.append(
                    TagInfoResult(
                        tag=tag.tag,
                        articles_count=tag.articles_count,
                        authors_count=tag.authors_count,
                    )
                )
        except Exception as exc:
            self._log.exception("search_tags failed for query %r", query)
            return TagSearchResult.failure(str(exc))

        return TagSearchResult(success=True, query=query, tags=tags)

    async def get_top_articles_by_claps(self, username: str, top_count: int = 10) -> TopArticlesResult:
        self._log.info("get_top_articles_by_claps username=%s top_count=%d", username, top_count)
        user_articles = await self.get_user_articles(username)
        if not user_articles.success:
            return TopArticlesResult.failure(user_articles.error_message or "")

        ranked = sorted(user_articles.articles, key=lambda a: a.claps, reverse=True)
        return TopArticlesResult(
            success=True,
            username=username,
            criteria="Claps",
            articles=ranked[: max(top_count, 0)],
        )

    async def get_engagement_metrics(self, username: str) -> EngagementMetricsResult:
        self._log.info("get_engagement_metrics username=%s", username)
        user_articles = await self.get_user_articles(username)
        if not user_articles.success:
            return EngagementMetricsResult.failure(user_articles.error_message or "")

        articles = user_articles.articles
        count = len(articles)
        if count == 0:
            self._log.warning("get_engagement_metrics: no articles for user %s", username)
            return EngagementMetricsResult(success=True, username=username)

        total_claps = sum(a.claps for a in articles)
        total_responses = sum(a.responses_count for a in articles)
        total_voters = sum(a.voters for a in articles)
        return EngagementMetricsResult(
            success=True,
            username=username,
            total_articles=count,
            total_claps=total_claps,
            total_responses=total_responses,
            total_voters=total_voters,
            average_claps_per_article=total_claps // count,
            average_responses_per_article=total_responses // count,
            average_voters_per_article=total_voters // count,
        )

    async def get_publication_info(self, publication_id: str) -> PublicationInfoResult:
        self._log.info("get_publication_info publication_id=%s", publication_id)
        try:
            publication = await self._platform.get_publication(publication_id)
        except Exception as exc:
            self._log.exception("get_publication_info failed for publication %s", publication_id)
            return PublicationInfoResult.failure(str(exc))

        return PublicationInfoResult(
            success=True,
            id=publication.id,
            name=publication.name,
            tagline=publication.tagline,
            description=publication.description,
            tags=list(publication.tags),
            followers=publication.followers,
            instagram_username=publication.instagram_username,
            facebook_page_name=publication.facebook_page_name,
            twitter_username=publication.twitter_username,
            url=publication.url,
            slug=publication.slug,
            creator=publication.creator_id,
            editors=list(publication.editors) if publication.editors is not None else None,
        )

    async def get_article_content(self, article_id: str, format: str = "markdown") -> ArticleContentResult:
        self._log.info("get_article_content article_id=%s format=%s", article_id, format)
        actual_format = _FORMAT_ALIASES.get(format.lower())
        if actual_format is None:
            self._log.warning("Invalid content format %r, defaulting to markdown", format)
            actual_format = "markdown"

        try:
            article = await self._platform.get_article(article_id)
            if actual_format == "html":
                content = await self._platform.get_article_html(article_id)
            elif actual_format == "text":
                content = await self._platform.get_article_text(article_id)
            else:
                content = await self._platform.get_article_markdown(article_id)
        except Exception as exc:
            self._log.exception("get_article_content failed for article %s", article_id)
            return ArticleContentResult.failure(str(exc))

        return ArticleContentResult(
            success=True,
            article_id=article_id,
            title=article.title,
            subtitle=article.subtitle,
            format=actual_format,
            content=content,
            url=article.url,
            published_date=article.published_date,
            content_length=len(content),
        )

    async def get_user_info_by_id(self, user_id: str) -> UserInfoResult:
        self._log.info("get_user_info_by_id user_id=%s", user_id)
        try:
            user = await self._platform.get_user_by_id(user_id)
        except Exception as exc:
            self._log.exception("get_user_info_by_id failed for user %s", user_id)
            return UserInfoResult.failure(str(exc))

        return UserInfoResult(
            success=True,
            user_id=user.id,
            username=user.username,
            full_name=user.fullname,
            followers_count=user.followers_count,
            bio=user.bio,
            image_url=user.image_url,
            twitter_username=user.twitter_username,
            profile_url=PROFILE_URL_TEMPLATE.format(username=user.username),
        )

    async def get_publication_articles(
        self, publication_slug_or_id: str, limit: int | None = None
    ) -> PublicationArticlesResult:
        self._log.info("get_publication_articles publication=%s limit=%s", publication_slug_or_id, limit)
        try:
            if _looks_like_slug(publication_slug_or_id):
                publication_id = await self._platform.resolve_publication_id(publication_slug_or_id)
                self._log.debug("Resolved publication slug %s to %s", publication_slug_or_id, publication_id)
            else:
                publication_id = publication_slug_or_id
            publication = await self._platform.get_publication(publication_id)
            article_ids = await self._platform.get_publication_article_ids(publication_id)
            articles = await self._fetch_articles(article_ids, limit)
        except Exception as exc:
            self._log.exception("get_publication_articles failed for %s", publication_slug_or_id)
            return PublicationArticlesResult.failure(str(exc))

        return PublicationArticlesResult(
            success=True,
            publication_id=publication_id,
            publication_name=publication.name,
            publication_slug=publication.slug,
            total_article_count=len(article_ids),
            articles=articles,
        )

    async def _fetch_articles(self, article_ids: list[str], limit: int | None) -> list[ArticleDetailsResult]:
        """Fetch details for the first *limit* ids, skipping articles that fail."""
        selected = article_ids if limit is None else article_ids[: max(limit, 0)]
        articles: list[ArticleDetailsResult] = []
        for index, article_id in enumerate(selected, start=1):
            self._log.debug("[%d/%d] Fetching article %s", index, len(selected), article_id)
            details = await self.get_article_details(article_id)
            if details.success:
                articles.append(details)
            else:
                self._log.warning("Skipping article %s: %s", article_id, details.error_message)
        return articles


def _looks_like_slug(value: str) -> bool:
    return len(value) < _PUBLICATION_ID_MIN_LENGTH or "-" in value
