"""Domain records returned by platform clients."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field


class UserProfile(BaseModel):
    id: str
    username: str
    fullname: str = ""
    followers_count: int = 0
    bio: str | None = None
    image_url: str | None = None
    twitter_username: str | None = None


class Article(BaseModel):
    id: str
    title: str = ""
    subtitle: str | None = None
    author: str | None = None
    publication_id: str | None = None
    claps: int = 0
    responses_count: int = 0
    voters: int = 0
    url: str = ""
    published_date: datetime | None = None
    tags: list[str] = Field(default_factory=list)
    topics: list[str] = Field(default_factory=list)


class Tag(BaseModel):
    tag: str
    articles_count: int = 0
    authors_count: int = 0


class Publication(BaseModel):
    id: str
    name: str = ""
    slug: str | None = None
    tagline: str | None = None
    description: str | None = None
    tags: list[str] = Field(default_factory=list)
    followers: int = 0
    instagram_username: str | None = None
    facebook_page_name: str | None = None
    twitter_username: str | None = None
    url: str | None = None
    creator_id: str | None = None
    editors: list[str] | None = None
