from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, select_autoescape
from markupsafe import Markup

from .blocks import render_blocks


@lru_cache(maxsize=1)
def _environment() -> Environment:
    return Environment(
        loader=FileSystemLoader(str(Path(__file__).parent / "templates")),
        autoescape=select_autoescape(["html"]),
    )


def get_notion_article(blocks: list[dict[str, Any]] | None) -> str:
    """Render the article shell around the rendered blocks.

    Returns an empty ``<div></div>`` when there is no block list at all.
    """
    if blocks is None:
        return "<div></div>"
    template = _environment().get_template("article.html")
    return template.render(body=Markup(render_blocks(blocks)))


def render_content(blocks: list[dict[str, Any]] | None) -> str:
    """Render the full article markup stored in ``Article.content``."""
    return f"<div>{get_notion_article(blocks)}</div>"
