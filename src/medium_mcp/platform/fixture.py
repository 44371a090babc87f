"""FixturePlatformClient serves platform data from a YAML/JSON file.

Used for local runs, demos and tests. The file is a mapping with optional
``users``, ``articles``, ``tags`` and ``publications`` lists; article bodies
live under ``content`` keyed by article id::

    users:
      - {id: u1, username: jbloggs, fullname: Joe Bloggs, followers_count: 42}
    articles:
      - {id: a1, title: Verifiable credentials, author: u1, claps: 10}
    content:
      a1: {markdown: "# Verifiable credentials", html: "<h1>...</h1>", text: "..."}
    tags:
      - {tag: identity, articles_count: 120, authors_count: 30}
    publications:
      - {id: p1, name: Identity Weekly, slug: identity-weekly}
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, ValidationError

from medium_mcp.platform.errors import PlatformError, PlatformNotFoundError
from medium_mcp.platform.models import Article, Publication, Tag, UserProfile


class ArticleBody(BaseModel):
    markdown: str = ""
    html: str = ""
    text: str = ""


class FixtureData(BaseModel):
    """Top-level schema of a fixture file."""

    users: list[UserProfile] = Field(default_factory=list)
    articles: list[Article] = Field(default_factory=list)
    content: dict[str, ArticleBody] = Field(default_factory=dict)
    tags: list[Tag] = Field(default_factory=list)
    publications: list[Publication] = Field(default_factory=list)


class FixturePlatformClient:
    """In-memory :class:`~medium_mcp.platform.client.PlatformClient`.

    Searches are case-insensitive substring matches: articles on title,
    subtitle and tags, tags on their name.
    """

    def __init__(self, data: FixtureData | None = None) -> None:
        self._data = data or FixtureData()
        self._users = {u.id: u for u in self._data.users}
        self._articles = {a.id: a for a in self._data.articles}
        self._tags = {t.tag: t for t in self._data.tags}
        self._publications = {p.id: p for p in self._data.publications}

    @classmethod
    def from_path(cls, path: Path) -> FixturePlatformClient:
        """Load a fixture file, expanding ``${VAR}`` references first.

        Raises:
            PlatformError: On unreadable, unparsable or invalid fixture files.
        """
        try:
            raw = path.read_text(encoding="utf-8")
        except OSError as exc:
            raise PlatformError(f"Cannot read fixture {path}: {exc}") from exc

        try:
            data: Any = yaml.safe_load(os.path.expandvars(raw))
        except yaml.YAMLError as exc:
            raise PlatformError(f"Fixture parse error: {exc}") from exc

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise PlatformError("Fixture file must be a mapping")

        try:
            return cls(FixtureData.model_validate(data))
        except ValidationError as exc:
            raise PlatformError(str(exc)) from exc

    # -- users ---------------------------------------------------------------

    async def get_user_by_username(self, username: str) -> UserProfile:
        wanted = username.lstrip("@").lower()
        for user in self._users.values():
            if user.username.lower() == wanted:
                return user
        raise PlatformNotFoundError("User", username)

    async def get_user_by_id(self, user_id: str) -> UserProfile:
        try:
            return self._users[user_id]
        except KeyError:
            raise PlatformNotFoundError("User", user_id) from None

    async def get_user_article_ids(self, user_id: str) -> list[str]:
        return [a.id for a in self._articles.values() if a.author == user_id]

    # -- articles ------------------------------------------------------------

    async def get_article(self, article_id: str) -> Article:
        try:
            return self._articles[article_id]
        except KeyError:
            raise PlatformNotFoundError("Article", article_id) from None

    async def get_article_markdown(self, article_id: str) -> str:
        return self._body(article_id).markdown

    async def get_article_html(self, article_id: str) -> str:
        return self._body(article_id).html

    async def get_article_text(self, article_id: str) -> str:
        return self._body(article_id).text

    def _body(self, article_id: str) -> ArticleBody:
        if article_id not in self._articles:
            raise PlatformNotFoundError("Article", article_id)
        return self._data.content.get(article_id, ArticleBody())

    # -- search --------------------------------------------------------------

    async def search_article_ids(self, query: str) -> list[str]:
        needle = query.lower()
        hits: list[str] = []
        for article in self._articles.values():
            haystack = [article.title, article.subtitle or "", *article.tags]
            if any(needle in field.lower() for field in haystack):
                hits.append(article.id)
        return hits

    async def search_tag_ids(self, query: str) -> list[str]:
        needle = query.lower()
        return [name for name in self._tags if needle in name.lower()]

    async def get_tag(self, tag_id: str) -> Tag:
        try:
            return self._tags[tag_id]
        except KeyError:
            raise PlatformNotFoundError("Tag", tag_id) from None

    # -- publications --------------------------------------------------------

    async def resolve_publication_id(self, slug: str) -> str:
        for publication in self._publications.values():
            if publication.slug == slug:
                return publication.id
        raise PlatformNotFoundError("Publication", slug)

    async def get_publication(self, publication_id: str) -> Publication:
        try:
            return self._publications[publication_id]
        except KeyError:
            raise PlatformNotFoundError("Publication", publication_id) from None

    async def get_publication_article_ids(self, publication_id: str) -> list[str]:
        if publication_id not in self._publications:
            raise PlatformNotFoundError("Publication", publication_id)
        return [a.id for a in self._articles.values() if a.publication_id == publication_id]
