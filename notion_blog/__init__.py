"""
Notion Blog - render Notion database pages as blog article HTML.

This package queries a Notion database for article rows and renders the
block tree of a selected article into HTML markup.

Main entry points are ``get_database`` and ``get_article_from_notion``,
plus the CLI via the `notion-blog` command.

Example:
    $ notion-blog render my-first-post -o out/my-first-post.html
"""

__all__ = [
    "__version__",
    "Article",
    "ArticleData",
    "ArticleResponse",
    "ArticleNotFoundError",
    "create_client",
    "get_database",
    "get_article_from_notion",
    "get_notion_article",
]
__version__ = "0.1.0"

from .core.types import Article, ArticleData, ArticleResponse
from .notion.client import create_client, get_database
from .output.renderer import get_notion_article
from .runner import ArticleNotFoundError, get_article_from_notion
