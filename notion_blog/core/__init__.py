"""
Core domain models.

This package contains the article records and the mapping from Notion
database rows, independent of the API client and the renderer.
"""

from .types import Article, ArticleData, ArticleResponse
from .properties import page_to_article, property_value

__all__ = [
    "Article",
    "ArticleData",
    "ArticleResponse",
    "page_to_article",
    "property_value",
]
