"""
HTML output.

This package turns Notion block trees into the markup stored on an
article: rich text runs, the block dispatch table, and the article shell
template.
"""

from .blocks import BLOCK_RENDERERS, render_block, render_blocks
from .renderer import get_notion_article, render_content
from .rich_text import render_rich_text
from .youtube import parse_url, parse_youtube_video_id

__all__ = [
    "BLOCK_RENDERERS",
    "render_block",
    "render_blocks",
    "get_notion_article",
    "render_content",
    "render_rich_text",
    "parse_url",
    "parse_youtube_video_id",
]
