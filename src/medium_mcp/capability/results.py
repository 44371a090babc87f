"""Result records produced by the content capability.

Every record carries ``success`` and ``errorMessage`` so a failed lookup is a
value, not an exception. Records serialize with camelCase keys.
"""

from __future__ import annotations

from datetime import datetime
from typing import Self

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_json(self) -> str:
        """Serialize with camelCase keys, indented for readability."""
        return self.model_dump_json(by_alias=True, indent=2)


class CapabilityResult(_CamelModel):
    """Base for all capability results."""

    success: bool = False
    error_message: str | None = None

    @classmethod
    def failure(cls, message: str) -> Self:
        return cls(success=False, error_message=message)


class BlogStatisticsResult(CapabilityResult):
    username: str = ""
    full_name: str = ""
    user_id: str = ""
    followers_count: int = 0
    article_count: int = 0
    bio: str | None = None
    image_url: str | None = None
    twitter_username: str | None = None


class ArticleDetailsResult(CapabilityResult):
    id: str = ""
    title: str = ""
    subtitle: str | None = None
    claps: int = 0
    responses_count: int = 0
    voters: int = 0
    url: str = ""
    published_date: datetime | None = None
    tags: list[str] = Field(default_factory=list)
    topics: list[str] = Field(default_factory=list)


class UserArticlesResult(CapabilityResult):
    username: str = ""
    full_name: str = ""
    total_article_count: int = 0
    articles: list[ArticleDetailsResult] = Field(default_factory=list)


class SearchArticlesResult(CapabilityResult):
    query: str = ""
    total_results_count: int = 0
    articles: list[ArticleDetailsResult] = Field(default_factory=list)


class TagInfoResult(_CamelModel):
    tag: str = ""
    articles_count: int = 0
    authors_count: int = 0


class TagSearchResult(CapabilityResult):
    query: str = ""
    tags: list[TagInfoResult] = Field(default_factory=list)


class TopArticlesResult(CapabilityResult):
    username: str = ""
    criteria: str = ""
    articles: list[ArticleDetailsResult] = Field(default_factory=list)


class EngagementMetricsResult(CapabilityResult):
    username: str = ""
    total_articles: int = 0
    total_claps: int = 0
    total_responses: int = 0
    total_voters: int = 0
    average_claps_per_article: int = 0
    average_responses_per_article: int = 0
    average_voters_per_article: int = 0


class PublicationInfoResult(CapabilityResult):
    id: str = ""
    name: str = ""
    tagline: str | None = None
    description: str | None = None
    tags: list[str] = Field(default_factory=list)
    followers: int = 0
    instagram_username: str | None = None
    facebook_page_name: str | None = None
    twitter_username: str | None = None
    url: str | None = None
    slug: str | None = None
    creator: str | None = None
    editors: list[str] | None = None


class ArticleContentResult(CapabilityResult):
    article_id: str = ""
    title: str = ""
    subtitle: str | None = None
    format: str = ""
    content: str = ""
    url: str = ""
    published_date: datetime | None = None
    content_length: int = 0


class UserInfoResult(CapabilityResult):
    user_id: str = ""
    username: str = ""
    full_name: str = ""
    followers_count: int = 0
    bio: str | None = None
    image_url: str | None = None
    twitter_username: str | None = None
    profile_url: str | None = None


class PublicationArticlesResult(CapabilityResult):
    publication_id: str = ""
    publication_name: str = ""
    publication_slug: str | None = None
    total_article_count: int = 0
    articles: list[ArticleDetailsResult] = Field(default_factory=list)
