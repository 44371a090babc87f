"""The fixed tool catalog served by ``tools/list``."""

from __future__ import annotations

from medium_mcp.protocol.models import ToolDefinition, ToolParameter


def _string(description: str, *, required: bool = True) -> ToolParameter:
    return ToolParameter(type="string", description=description, required=required)


def _integer(description: str) -> ToolParameter:
    return ToolParameter(type="integer", description=description, required=False)


TOOL_CATALOG: tuple[ToolDefinition, ...] = (
    ToolDefinition(
        name="get_blog_statistics",
        description=(
            "Get comprehensive blog statistics for a Medium user including follower count, "
            "article count, bio, and social links"
        ),
        parameters={"username": _string("Medium username (e.g., 'jbloggs')")},
    ),
    ToolDefinition(
        name="get_article_details",
        description=(
            "Get detailed information about a specific article including claps, responses, "
            "voters, tags, and publication date"
        ),
        parameters={"article_id": _string("Medium article ID")},
    ),
    ToolDefinition(
        name="get_user_articles",
        description="Get all articles for a Medium user with optional limit",
        parameters={
            "username": _string("Medium username"),
            "limit": _integer("Maximum number of articles to return (optional)"),
        },
    ),
    ToolDefinition(
        name="search_articles",
        description="Search for Medium articles by query string",
        parameters={
            "query": _string("Search query (e.g., 'Verifiable credentials', 'Azure AD')"),
            "limit": _integer("Maximum number of results to return (optional)"),
        },
    ),
    ToolDefinition(
        name="search_tags",
        description="Search for Medium tags and get information about article and author counts",
        parameters={"query": _string("Tag search query (e.g., 'Custom policies', 'Entra External ID')")},
    ),
    ToolDefinition(
        name="get_top_articles_by_claps",
        description="Get the top performing articles for a user ranked by number of claps",
        parameters={
            "username": _string("Medium username"),
            "top_count": _integer("Number of top articles to return (default: 10)"),
        },
    ),
    ToolDefinition(
        name="get_engagement_metrics",
        description=(
            "Get comprehensive engagement metrics for a user's articles including total and "
            "average claps, responses, and voters"
        ),
        parameters={"username": _string("Medium username")},
    ),
    ToolDefinition(
        name="get_publication_info",
        description=(
            "Get publication information including name, tagline, description, followers, "
            "tags, and social media links"
        ),
        parameters={"publication_id": _string("Medium publication ID")},
    ),
    ToolDefinition(
        name="get_article_content",
        description=(
            "Get full article content in markdown, HTML, or plain text format. Enables content "
            "analysis, archiving, and full-text processing."
        ),
        parameters={
            "article_id": _string("Medium article ID"),
            "format": _string("Content format: 'markdown' (default), 'html', or 'text'", required=False),
        },
    ),
    ToolDefinition(
        name="get_user_info_by_id",
        description=(
            "Get user information by user ID. Faster than username lookup when you already "
            "have the user ID."
        ),
        parameters={"user_id": _string("Medium user ID")},
    ),
    ToolDefinition(
        name="get_publication_articles",
        description=(
            "Get all articles published in a specific Medium publication. Accepts either "
            "publication slug (name) or publication ID."
        ),
        parameters={
            "publication_slug_or_id": _string(
                "Publication slug (e.g., 'towards-data-science') or publication ID"
            ),
            "limit": _integer("Maximum number of articles to return (optional)"),
        },
    ),
)
