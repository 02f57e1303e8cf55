"""
Article lookup and rendering.

This module coordinates a single request:
1. Query the articles database
2. Find the row whose slug matches
3. Retrieve the page and its top-level blocks
4. Fetch children of nested blocks in parallel and splice them in
5. Render the block tree into the article's content

Nothing is cached between calls; every request renders from the block
tree fetched for it. API and network errors propagate to the caller.
"""

from __future__ import annotations

from dataclasses import replace

from notion_client import AsyncClient

from .core.types import ArticleResponse
from .notion.children import attach_children, fetch_children
from .notion.client import get_blocks, get_database, get_page
from .output.renderer import render_content
from .utils.logging import get_logger, log_event


class ArticleNotFoundError(LookupError):
    """Raised when no database row carries the requested slug."""

    def __init__(self, slug: str):
        super().__init__(f"No article with slug {slug!r}")
        self.slug = slug


async def get_article_from_notion(
    client: AsyncClient,
    slug: str,
    database_id: str,
    site_url: str,
    page_size: int = 100,
) -> ArticleResponse:
    """Fetch the article for ``slug`` and render its block tree.

    Args:
        client: Notion API client
        slug: Slug of the requested article
        database_id: ID of the articles database
        site_url: Base URL of the blog, used for permalinks
        page_size: Items per request on block list calls

    Returns:
        ArticleResponse with rendered content and an empty related list

    Raises:
        ArticleNotFoundError: If no row has the requested slug
    """
    logger = get_logger()
    posts = await get_database(client, database_id, site_url)
    post = next((p for p in posts if p.slug == slug), None)
    if post is None:
        raise ArticleNotFoundError(slug)

    page = await get_page(client, post.id)
    log_event(
        logger,
        "Article page retrieved",
        event="page_retrieved",
        slug=slug,
        page_id=post.id,
        last_edited_time=page.get("last_edited_time"),
    )

    blocks = await get_blocks(client, post.id, page_size=page_size)
    children_by_id = await fetch_children(client, blocks, page_size=page_size)
    blocks_with_children = attach_children(blocks, children_by_id)

    article = replace(post, content=render_content(blocks_with_children))
    log_event(
        logger,
        "Article rendered",
        event="article_rendered",
        slug=slug,
        blocks=len(blocks),
        content_chars=len(article.content),
    )
    return ArticleResponse(article=article, related=[])
