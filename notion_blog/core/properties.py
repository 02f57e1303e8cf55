"""
Mapping of Notion database rows to Article records.

Each row of the articles database is a page object whose ``properties``
dict is keyed by the column name. Column names are matched case-insensitively
(``Page``, ``Slug``, ``Published`` ...) and each value is read according to
its property type.
"""

from __future__ import annotations

from typing import Any

from .types import Article, ArticleData


def page_to_article(page: dict[str, Any], site_url: str) -> Article:
    """Build an Article from a database row.

    Args:
        page: Page object returned by a database query
        site_url: Base URL of the blog, used for the permalink

    Returns:
        Article with metadata and permalink filled, content left empty
    """
    item: dict[str, Any] = {
        "thumbnail": "",
        "authors": "",
        "slug": "",
        "published": False,
        "date": "",
        "description": "",
        "page": "",
        "category": "",
        "tags": [],
    }
    for key, prop in (page.get("properties") or {}).items():
        value = property_value(prop)
        if value is None:
            continue
        item[key.lower()] = value

    data = ArticleData(
        title=item["page"],
        date=item["date"],
        category=item["category"],
        written_by=item["authors"],
        thumbnail=item["thumbnail"],
        description=item["description"],
        tags=_unique(item["tags"]),
        status="open" if item["published"] else "draft",
    )
    return Article(
        id=page["id"],
        slug=item["slug"],
        permalink=f"{site_url}/{item['category']}/{item['slug']}",
        data=data,
    )


def property_value(prop: dict[str, Any]) -> Any:
    """Read the value of a single database property.

    Returns None for property types that are not mapped, so the caller keeps
    its default for that column.
    """
    prop_type = prop.get("type")
    if prop_type == "people":
        return ",".join(person.get("name") or "" for person in prop.get("people") or [])
    if prop_type == "rich_text":
        return _first_plain_text(prop.get("rich_text"))
    if prop_type == "title":
        return _first_plain_text(prop.get("title"))
    if prop_type == "files":
        return _first_file_url(prop.get("files"))
    if prop_type == "checkbox":
        return bool(prop.get("checkbox"))
    if prop_type == "multi_select":
        return [option["name"] for option in prop.get("multi_select") or []]
    if prop_type == "select":
        return (prop.get("select") or {}).get("name") or ""
    if prop_type == "date":
        return (prop.get("date") or {}).get("start") or ""
    return None


def _first_plain_text(runs: list[dict[str, Any]] | None) -> str:
    if not runs:
        return ""
    return runs[0].get("plain_text") or ""


def _first_file_url(files: list[dict[str, Any]] | None) -> str:
    if not files:
        return ""
    first = files[0]
    if first.get("type") == "external":
        # External thumbnails are sometimes entered with the URL as the file name
        return (first.get("external") or {}).get("url") or first.get("name") or ""
    return (first.get("file") or {}).get("url") or ""


def _unique(values: list[str]) -> list[str]:
    seen: set[str] = set()
    kept: list[str] = []
    for value in values:
        if value in seen:
            continue
        seen.add(value)
        kept.append(value)
    return kept
