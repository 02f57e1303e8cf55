"""
Notion API access through the official notion-client SDK.

The SDK's AsyncClient is created once by the caller and passed explicitly
to every function here; nothing in this module holds a client instance.
All list endpoints are followed through their ``next_cursor`` until
``has_more`` is false.
"""

from __future__ import annotations

from typing import Any

import httpx
from notion_client import AsyncClient
from notion_client.helpers import async_collect_paginated_api

from ..config import NotionConfig, get_notion_token
from ..core.properties import page_to_article
from ..core.types import Article
from ..utils.logging import get_logger, log_event


def create_client(cfg: NotionConfig) -> AsyncClient:
    """Create an AsyncClient authenticated with the configured integration token.

    Args:
        cfg: Notion section of the application config

    Returns:
        AsyncClient backed by an httpx.AsyncClient that honours ``trust_env``

    Raises:
        ValueError: If no token is configured inline or in the environment
    """
    token = get_notion_token(cfg)
    if not token:
        raise ValueError(f"Notion token is not configured (set {cfg.token_env})")
    return AsyncClient(
        client=httpx.AsyncClient(trust_env=cfg.trust_env),
        auth=token,
        notion_version=cfg.notion_version,
        timeout_ms=int(cfg.timeout_seconds * 1000),
        logger=get_logger("sdk"),
    )


async def get_database(
    client: AsyncClient,
    database_id: str,
    site_url: str,
    **query: Any,
) -> list[Article]:
    """Query a database and map every row to an Article.

    Args:
        client: Notion API client
        database_id: ID of the articles database
        site_url: Base URL of the blog, used for permalinks
        **query: Extra query body fields (``filter``, ``sorts``, ...)

    Returns:
        Articles in the order returned by the query
    """
    rows = await async_collect_paginated_api(
        client.databases.query, database_id=database_id, **query
    )
    log_event(
        get_logger("notion"),
        "Database queried",
        event="database_queried",
        database_id=database_id,
        rows=len(rows),
    )
    return [page_to_article(row, site_url) for row in rows]


async def get_page(client: AsyncClient, page_id: str) -> dict[str, Any]:
    """Retrieve a page object by ID."""
    return await client.pages.retrieve(page_id=page_id)


async def get_blocks(client: AsyncClient, block_id: str, page_size: int = 100) -> list[dict[str, Any]]:
    """List the direct children of a block (or page)."""
    return await async_collect_paginated_api(
        client.blocks.children.list, block_id=block_id, page_size=page_size
    )
