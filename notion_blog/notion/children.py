"""
One-level expansion of nested blocks.

Blocks listed for a page only flag ``has_children``; their children live
behind another list call. ``fetch_children`` issues those calls for every
flagged sibling at once and ``attach_children`` splices the results back into
the block whose ID they were fetched for. Grandchildren are not fetched.
"""

from __future__ import annotations

import asyncio
from typing import Any

from notion_client import AsyncClient

from ..utils.logging import get_logger, log_event
from .client import get_blocks


async def fetch_children(
    client: AsyncClient,
    blocks: list[dict[str, Any]],
    page_size: int = 100,
) -> dict[str, list[dict[str, Any]]]:
    """Fetch the children of every block flagged ``has_children``, concurrently.

    Returns:
        Mapping of parent block ID to its child blocks
    """
    parents = [block for block in blocks if block.get("has_children")]
    if not parents:
        return {}

    results = await asyncio.gather(
        *(get_blocks(client, block["id"], page_size=page_size) for block in parents)
    )
    log_event(
        get_logger("notion"),
        "Child blocks fetched",
        event="children_fetched",
        parents=len(parents),
        children=sum(len(items) for items in results),
    )
    return {block["id"]: children for block, children in zip(parents, results)}


def attach_children(
    blocks: list[dict[str, Any]],
    children_by_id: dict[str, list[dict[str, Any]]],
) -> list[dict[str, Any]]:
    """Return copies of ``blocks`` with fetched children placed in their payload.

    A block receives ``payload["children"]`` only if it is flagged
    ``has_children`` and its payload carries no children yet. The input blocks
    are left untouched.
    """
    spliced: list[dict[str, Any]] = []
    for block in blocks:
        block_type = block.get("type")
        payload = block.get(block_type) if block_type else None
        if (
            block.get("has_children")
            and isinstance(payload, dict)
            and not payload.get("children")
        ):
            block = {**block, block_type: {**payload, "children": children_by_id.get(block["id"])}}
        spliced.append(block)
    return spliced
