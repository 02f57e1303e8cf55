"""
Core data types for the Notion blog adapter.

This module defines the records produced from the Notion database:
- ArticleData: Front-matter style fields read from database properties
- Article: One database row plus its derived permalink and rendered content
- ArticleResponse: The article returned for a slug plus related articles

Blocks are not modelled here; they stay the plain dicts returned by the
Notion API and are consumed read-only by the renderer.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class ArticleData:
    """Article metadata read from Notion database properties.

    Attributes:
        title: The article headline (the "Page" title property)
        date: Publish date as the ISO 8601 start of the "Date" property
        category: Category name, also used as the first permalink segment
        written_by: Author names joined with ","
        thumbnail: Thumbnail image URL
        description: Short description shown in listings
        tags: Tag names; order carries no meaning
        status: "open" when the article is published, "draft" otherwise
    """
    title: str = ""
    date: str = ""
    category: str = ""
    written_by: str = ""
    thumbnail: str = ""
    description: str = ""
    tags: list[str] = field(default_factory=list)
    status: str = "draft"


@dataclass
class Article:
    """An article summary derived from one database row.

    Attributes:
        id: Notion page ID of the row
        slug: Human-readable identifier used in URLs
        permalink: Absolute URL of the article on the blog
        data: Metadata read from the row's properties
        content: Rendered HTML markup, empty until the block tree is rendered
        excerpt: Reserved, always empty
        related: Reserved, always empty
    """
    id: str
    slug: str = ""
    permalink: str = ""
    data: ArticleData = field(default_factory=ArticleData)
    content: str = ""
    excerpt: str = ""
    related: list[Article] = field(default_factory=list)


@dataclass
class ArticleResponse:
    """Result of looking up an article by slug.

    Attributes:
        article: The article with its rendered content
        related: Related articles (not computed, always empty)
    """
    article: Article
    related: list[Article] = field(default_factory=list)
