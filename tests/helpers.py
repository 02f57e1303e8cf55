"""Builders for Notion API objects used across tests."""

from __future__ import annotations

from typing import Any


def rich_text(content: str, link: str | None = None, **annotations: Any) -> dict[str, Any]:
    base = {
        "bold": False,
        "italic": False,
        "strikethrough": False,
        "underline": False,
        "code": False,
        "color": "default",
    }
    base.update(annotations)
    return {
        "type": "text",
        "text": {"content": content, "link": {"url": link} if link else None},
        "annotations": base,
        "plain_text": content,
        "href": link,
    }


def block(block_id: str, block_type: str, has_children: bool = False, **payload: Any) -> dict[str, Any]:
    return {
        "object": "block",
        "id": block_id,
        "type": block_type,
        "has_children": has_children,
        block_type: payload,
    }


def text_block(block_id: str, block_type: str, content: str, has_children: bool = False) -> dict[str, Any]:
    return block(block_id, block_type, has_children=has_children, rich_text=[rich_text(content)])


def article_row(
    page_id: str,
    slug: str,
    title: str = "Title",
    category: str = "tech",
    published: bool = True,
    tags: list[str] | None = None,
) -> dict[str, Any]:
    return {
        "object": "page",
        "id": page_id,
        "properties": {
            "Page": {"type": "title", "title": [rich_text(title)]},
            "Slug": {"type": "rich_text", "rich_text": [rich_text(slug)]},
            "Category": {"type": "select", "select": {"name": category}},
            "Published": {"type": "checkbox", "checkbox": published},
            "Tags": {
                "type": "multi_select",
                "multi_select": [{"name": name} for name in (tags or [])],
            },
        },
    }
