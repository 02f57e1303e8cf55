"""
Notion API access.

This package wraps the notion-client SDK calls used by the blog and the
parallel expansion of nested blocks.
"""

from .client import create_client, get_blocks, get_database, get_page
from .children import attach_children, fetch_children

__all__ = [
    "create_client",
    "get_database",
    "get_page",
    "get_blocks",
    "fetch_children",
    "attach_children",
]
