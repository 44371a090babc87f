"""Tests for ContentService aggregation over the fixture platform."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

from medium_mcp.capability.provider import ContentCapability
from medium_mcp.capability.service import ContentService
from medium_mcp.platform.errors import PlatformError
from medium_mcp.platform.fixture import FixtureData, FixturePlatformClient
from medium_mcp.platform.models import Article, UserProfile


class TestProtocol:
    def test_service_satisfies_capability(self, service: ContentService) -> None:
        assert isinstance(service, ContentCapability)


class TestBlogStatistics:
    async def test_success(self, service: ContentService) -> None:
        result = await service.get_blog_statistics("jbloggs")
        assert result.success
        assert result.username == "jbloggs"
        assert result.full_name == "Joe Bloggs"
        assert result.user_id == "u1"
        assert result.followers_count == 1200
        assert result.article_count == 3
        assert result.twitter_username == "jb"

    async def test_unknown_user(self, service: ContentService) -> None:
        result = await service.get_blog_statistics("ghost")
        assert not result.success
        assert result.error_message == "User not found: ghost"

    async def test_platform_crash_is_captured(self) -> None:
        platform = MagicMock()
        platform.get_user_by_username = AsyncMock(side_effect=PlatformError("rate limited"))
        result = await ContentService(platform).get_blog_statistics("jbloggs")
        assert not result.success
        assert result.error_message == "rate limited"


class TestArticleDetails:
    async def test_success(self, service: ContentService) -> None:
        result = await service.get_article_details("a1")
        assert result.success
        assert result.title == "Verifiable credentials explained"
        assert result.claps == 50
        assert result.tags == ["identity", "vc"]
        assert result.published_date is not None

    async def test_missing(self, service: ContentService) -> None:
        result = await service.get_article_details("zzz")
        assert not result.success
        assert result.error_message == "Article not found: zzz"


class TestUserArticles:
    async def test_all_articles(self, service: ContentService) -> None:
        result = await service.get_user_articles("jbloggs")
        assert result.success
        assert result.total_article_count == 3
        assert [a.id for a in result.articles] == ["a1", "a2", "a3"]

    async def test_limit_truncates_but_total_counts_all(self, service: ContentService) -> None:
        result = await service.get_user_articles("jbloggs", limit=2)
        assert result.total_article_count == 3
        assert len(result.articles) == 2

    async def test_zero_and_negative_limit(self, service: ContentService) -> None:
        assert (await service.get_user_articles("jbloggs", limit=0)).articles == []
        assert (await service.get_user_articles("jbloggs", limit=-1)).articles == []

    async def test_failed_article_is_skipped(self) -> None:
        data = FixtureData(
            users=[UserProfile(id="u1", username="jbloggs")],
            articles=[Article(id="a1", author="u1")],
        )
        platform = FixturePlatformClient(data)
        platform.get_user_article_ids = AsyncMock(return_value=["a1", "gone"])  # type: ignore[method-assign]
        result = await ContentService(platform).get_user_articles("jbloggs")
        assert result.success
        assert result.total_article_count == 2
        assert [a.id for a in result.articles] == ["a1"]

    async def test_user_without_articles(self, service: ContentService) -> None:
        result = await service.get_user_articles("asmith")
        assert result.success
        assert result.articles == []


class TestSearch:
    async def test_search_articles(self, service: ContentService) -> None:
        result = await service.search_articles("AZURE")
        assert result.success
        assert result.query == "AZURE"
        assert [a.id for a in result.articles] == ["a2"]

    async def test_search_articles_limit(self, service: ContentService) -> None:
        result = await service.search_articles("e", limit=1)
        assert result.total_results_count == 3
        assert len(result.articles) == 1

    async def test_search_tags(self, service: ContentService) -> None:
        result = await service.search_tags("entra")
        assert result.success
        assert [t.tag for t in result.tags] == ["entra-external-id"]
        assert result.tags[0].articles_count == 15

    async def test_search_tags_no_hits(self, service: ContentService) -> None:
        result = await service.search_tags("cooking")
        assert result.success
        assert result.tags == []


class TestTopArticles:
    async def test_ranked_by_claps(self, service: ContentService) -> None:
        result = await service.get_top_articles_by_claps("jbloggs", top_count=2)
        assert result.success
        assert result.criteria == "Claps"
        assert [a.claps for a in result.articles] == [120, 50]

    async def test_unknown_user_propagates_failure(self, service: ContentService) -> None:
        result = await service.get_top_articles_by_claps("ghost")
        assert not result.success
        assert result.error_message == "User not found: ghost"


class TestEngagementMetrics:
    async def test_totals_and_floor_averages(self, service: ContentService) -> None:
        result = await service.get_engagement_metrics("jbloggs")
        assert result.success
        assert result.total_articles == 3
        assert result.total_claps == 177
        assert result.total_responses == 7
        assert result.total_voters == 43
        assert result.average_claps_per_article == 59
        assert result.average_responses_per_article == 2
        assert result.average_voters_per_article == 14

    async def test_no_articles_is_success_with_zeros(self, service: ContentService) -> None:
        result = await service.get_engagement_metrics("asmith")
        assert result.success
        assert result.total_articles == 0
        assert result.average_claps_per_article == 0

    async def test_unknown_user(self, service: ContentService) -> None:
        assert not (await service.get_engagement_metrics("ghost")).success


class TestPublications:
    async def test_publication_info(self, service: ContentService) -> None:
        result = await service.get_publication_info("p1")
        assert result.success
        assert result.name == "Identity Weekly"
        assert result.slug == "identity-weekly"
        assert result.creator == "u1"
        assert result.editors == ["u1"]

    async def test_publication_info_missing(self, service: ContentService) -> None:
        result = await service.get_publication_info("nope")
        assert result.error_message == "Publication not found: nope"

    async def test_articles_by_slug(self, service: ContentService) -> None:
        result = await service.get_publication_articles("identity-weekly")
        assert result.success
        assert result.publication_id == "p1"
        assert result.publication_name == "Identity Weekly"
        assert result.total_article_count == 2
        assert {a.id for a in result.articles} == {"a1", "a2"}

    async def test_articles_by_id(self, service: ContentService) -> None:
        result = await service.get_publication_articles("abcdef1234567")
        assert result.success
        assert result.publication_name == "Long ID Pub"
        assert result.articles == []

    async def test_short_value_resolved_as_slug(self, service: ContentService) -> None:
        # "p1" is shorter than an id, so it goes through slug resolution and fails.
        result = await service.get_publication_articles("p1")
        assert not result.success
        assert result.error_message == "Publication not found: p1"

    async def test_articles_limit(self, service: ContentService) -> None:
        result = await service.get_publication_articles("identity-weekly", limit=1)
        assert result.total_article_count == 2
        assert len(result.articles) == 1


class TestArticleContent:
    async def test_markdown_default(self, service: ContentService) -> None:
        result = await service.get_article_content("a1")
        assert result.success
        assert result.format == "markdown"
        assert result.content == "# Verifiable credentials"
        assert result.content_length == len("# Verifiable credentials")

    async def test_aliases(self, service: ContentService) -> None:
        assert (await service.get_article_content("a1", "MD")).format == "markdown"
        txt = await service.get_article_content("a1", "txt")
        assert txt.format == "text"
        assert txt.content == "Verifiable credentials"
        html = await service.get_article_content("a1", "html")
        assert html.content == "<h1>Verifiable credentials</h1>"

    async def test_unknown_format_falls_back_to_markdown(self, service: ContentService) -> None:
        result = await service.get_article_content("a1", "pdf")
        assert result.success
        assert result.format == "markdown"

    async def test_missing_body_is_empty(self, service: ContentService) -> None:
        result = await service.get_article_content("a2")
        assert result.success
        assert result.content == ""
        assert result.content_length == 0

    async def test_missing_article(self, service: ContentService) -> None:
        result = await service.get_article_content("zzz")
        assert not result.success


class TestUserInfo:
    async def test_success(self, service: ContentService) -> None:
        result = await service.get_user_info_by_id("u1")
        assert result.success
        assert result.username == "jbloggs"
        assert result.profile_url == "https://medium.com/@jbloggs"

    async def test_missing(self, service: ContentService) -> None:
        result = await service.get_user_info_by_id("u404")
        assert result.error_message == "User not found: u404"
