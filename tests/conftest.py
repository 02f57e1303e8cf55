"""Shared fixtures: an in-memory stand-in for the notion-client AsyncClient."""

from __future__ import annotations

from types import SimpleNamespace
from typing import Any

import pytest


class FakeNotionClient:
    """Serves canned responses through the same call shapes as AsyncClient.

    ``rows`` are returned by ``databases.query``, ``children`` maps a block
    ID to its child blocks and ``pages`` maps a page ID to a page object.
    List endpoints return ``page_size`` items per response and hand out the
    offset of the next item as the cursor.
    """

    def __init__(
        self,
        rows: list[dict[str, Any]] | None = None,
        children: dict[str, list[dict[str, Any]]] | None = None,
        pages: dict[str, dict[str, Any]] | None = None,
        page_size: int = 100,
    ):
        self.rows = rows or []
        self.children = children or {}
        self.pages_by_id = pages or {}
        self.page_size = page_size
        self.calls: list[tuple[str, dict[str, Any]]] = []

        self.databases = SimpleNamespace(query=self._query)
        self.pages = SimpleNamespace(retrieve=self._retrieve)
        self.blocks = SimpleNamespace(children=SimpleNamespace(list=self._list_children))

    def _paginate(self, items: list[dict[str, Any]], start_cursor: str | None, page_size: int) -> dict:
        start = int(start_cursor or 0)
        end = start + page_size
        has_more = end < len(items)
        return {
            "object": "list",
            "results": items[start:end],
            "has_more": has_more,
            "next_cursor": str(end) if has_more else None,
        }

    async def _query(self, **kwargs: Any) -> dict:
        self.calls.append(("databases.query", kwargs))
        return self._paginate(self.rows, kwargs.get("start_cursor"), self.page_size)

    async def _retrieve(self, **kwargs: Any) -> dict:
        self.calls.append(("pages.retrieve", kwargs))
        page_id = kwargs["page_id"]
        return self.pages_by_id.get(page_id, {"object": "page", "id": page_id})

    async def _list_children(self, **kwargs: Any) -> dict:
        self.calls.append(("blocks.children.list", kwargs))
        items = self.children.get(kwargs["block_id"], [])
        page_size = min(kwargs.get("page_size") or 100, self.page_size)
        return self._paginate(items, kwargs.get("start_cursor"), page_size)

    def calls_to(self, name: str) -> list[dict[str, Any]]:
        return [kwargs for call, kwargs in self.calls if call == name]


@pytest.fixture
def make_client():
    return FakeNotionClient
