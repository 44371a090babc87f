"""Shared fixtures: a small in-memory platform with one prolific author."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from medium_mcp.capability.service import ContentService
from medium_mcp.platform.fixture import ArticleBody, FixtureData, FixturePlatformClient
from medium_mcp.platform.models import Article, Publication, Tag, UserProfile


@pytest.fixture()
def sample_data() -> FixtureData:
    return FixtureData(
        users=[
            UserProfile(
                id="u1",
                username="jbloggs",
                fullname="Joe Bloggs",
                followers_count=1200,
                bio="Identity nerd",
                twitter_username="jb",
            ),
            UserProfile(id="u2", username="asmith", fullname="Ann Smith", followers_count=5),
        ],
        articles=[
            Article(
                id="a1",
                title="Verifiable credentials explained",
                subtitle="A gentle introduction",
                author="u1",
                publication_id="p1",
                claps=50,
                responses_count=4,
                voters=10,
                url="https://medium.com/@jbloggs/a1",
                published_date=datetime(2024, 1, 10, tzinfo=timezone.utc),
                tags=["identity", "vc"],
            ),
            Article(
                id="a2",
                title="Azure AD B2C custom policies",
                author="u1",
                publication_id="p1",
                claps=120,
                responses_count=2,
                voters=30,
                url="https://medium.com/@jbloggs/a2",
                tags=["azure", "custom-policies"],
            ),
            Article(
                id="a3",
                title="Entra External ID first look",
                author="u1",
                claps=7,
                responses_count=1,
                voters=3,
                url="https://medium.com/@jbloggs/a3",
                tags=["entra"],
            ),
        ],
        content={
            "a1": ArticleBody(
                markdown="# Verifiable credentials",
                html="<h1>Verifiable credentials</h1>",
                text="Verifiable credentials",
            ),
        },
        tags=[
            Tag(tag="identity", articles_count=120, authors_count=30),
            Tag(tag="custom-policies", articles_count=40, authors_count=8),
            Tag(tag="entra-external-id", articles_count=15, authors_count=5),
        ],
        publications=[
            Publication(
                id="p1",
                name="Identity Weekly",
                slug="identity-weekly",
                tagline="All things identity",
                followers=300,
                tags=["identity"],
                creator_id="u1",
                editors=["u1"],
            ),
            Publication(id="abcdef1234567", name="Long ID Pub"),
        ],
    )


@pytest.fixture()
def platform(sample_data: FixtureData) -> FixturePlatformClient:
    return FixturePlatformClient(sample_data)


@pytest.fixture()
def service(platform: FixturePlatformClient) -> ContentService:
    return ContentService(platform)
