"""
Block-to-HTML rendering.

Every supported block type maps to one renderer in ``BLOCK_RENDERERS``.
Renderers receive the whole block dict and return an HTML fragment.
Block types without a renderer produce a visible "Unsupported block"
placeholder instead of failing the article; video blocks whose URL or
video ID cannot be parsed render nothing.
"""

from __future__ import annotations

from html import escape
import re
from typing import Any, Callable
from urllib.parse import quote

from .rich_text import plain_text, render_rich_text
from .youtube import parse_url, parse_youtube_video_id


Block = dict[str, Any]

_TWITTER_RE = re.compile(r"^https://(?:www\.)?(?:twitter|x)\.com/")
_COLUMN_PLACEHOLDER = "カラム"
_YOUTUBE_ALLOW = (
    "accelerometer; autoplay; clipboard-write; encrypted-media; gyroscope; picture-in-picture"
)


def render_blocks(blocks: list[Block] | None) -> str:
    """Render sibling blocks in order."""
    if not blocks:
        return ""
    return "".join(render_block(block) for block in blocks)


def render_block(block: Block) -> str:
    """Render a single block via the dispatch table."""
    block_type = block.get("type") or "unsupported"
    renderer = BLOCK_RENDERERS.get(block_type)
    if renderer is None:
        return _render_unsupported(block_type)
    return renderer(block)


def _payload(block: Block) -> dict[str, Any]:
    return block.get(block["type"]) or {}


def _text(block: Block) -> str:
    return render_rich_text(_payload(block).get("rich_text"))


def _children(block: Block) -> str:
    return render_blocks(_payload(block).get("children"))


def _attr(value: str) -> str:
    return escape(value, quote=True)


def _render_unsupported(block_type: str) -> str:
    label = "unsupported by Notion API" if block_type == "unsupported" else block_type
    return escape(f"❌ Unsupported block ({label})")


def _render_paragraph(block: Block) -> str:
    return f"<p>{_text(block)}</p>"


def _heading(tag: str) -> Callable[[Block], str]:
    def render(block: Block) -> str:
        return f"<{tag}>{_text(block)}</{tag}>"

    return render


def _render_list_item(block: Block) -> str:
    return f"<li>{_text(block)}</li>"


def _render_to_do(block: Block) -> str:
    block_id = _attr(block["id"])
    checked = " checked" if _payload(block).get("checked") else ""
    return (
        f'<div><label for="{block_id}">'
        f'<input type="checkbox" id="{block_id}"{checked}/> {_text(block)}'
        "</label></div>"
    )


def _render_toggle(block: Block) -> str:
    return f"<details><summary>{_text(block)}</summary>{_children(block)}</details>"


def _render_child_page(block: Block) -> str:
    return f"<p>{escape(_payload(block).get('title', ''))}</p>"


def _render_image(block: Block) -> str:
    image = _payload(block)
    if image.get("type") == "external":
        src = (image.get("external") or {}).get("url", "")
    else:
        src = (image.get("file") or {}).get("url", "")
    caption = plain_text((image.get("caption") or [])[:1])
    figcaption = f"<figcaption>{escape(caption)}</figcaption>" if caption else ""
    return f'<figure><img src="{_attr(src)}" alt="{_attr(caption)}"/>{figcaption}</figure>'


def _render_bookmark(block: Block) -> str:
    url = _payload(block).get("url", "")
    src = f"/embed/?url={quote(url, safe='')}"
    return f'<iframe title="bookmark" src="{_attr(src)}" class="embed"></iframe>'


def _render_embed(block: Block) -> str:
    url = _payload(block).get("url", "")
    if _TWITTER_RE.match(url):
        return (
            '<blockquote class="twitter-tweet">'
            f'<a href="{_attr(url)}">{escape(url)}</a>'
            "</blockquote>"
        )
    return f'<iframe title="embed" src="{_attr(url)}" class="embed"></iframe>'


def _render_child_database(block: Block) -> str:
    return f"<div>{escape(_payload(block).get('title', ''))}</div>"


def _render_divider(block: Block) -> str:
    return "<hr/>"


def _render_quote(block: Block) -> str:
    return (
        '<div class="quote">'
        '<div class="quote-prepend">“</div>'
        f'<div class="quote-inner">{_text(block)}</div>'
        '<div class="quote-append">”</div>'
        "</div>"
    )


def _render_callout(block: Block) -> str:
    icon = _payload(block).get("icon") or {}
    emoji = f"<span>{escape(icon.get('emoji', ''))}</span>" if icon.get("type") == "emoji" else ""
    return f'<div class="callout">{emoji}<div class="callout-inner">{_text(block)}</div></div>'


def _render_column_list(block: Block) -> str:
    return f'<div class="flex">{_children(block)}</div>'


def _render_column(block: Block) -> str:
    inner = _children(block) or _COLUMN_PLACEHOLDER
    return f'<div class="flex-1">{inner}</div>'


def _render_code(block: Block) -> str:
    code = _payload(block)
    language = code.get("language") or "plain text"
    return (
        f'<pre class="code-block" data-language="{_attr(language)}">'
        f'<code class="language-{_attr(language.replace(" ", "-"))}">'
        f"{escape(plain_text(code.get('rich_text')))}"
        "</code></pre>"
    )


def _render_video(block: Block) -> str:
    video = _payload(block)
    url = parse_url((video.get("external") or {}).get("url"))
    if url is None:
        return ""
    video_id = parse_youtube_video_id(url)
    if not video_id:
        return ""
    return (
        '<div class="video">'
        f'<iframe src="https://www.youtube.com/embed/{video_id}" title="YouTube video player" '
        f'frameborder="0" allow="{_YOUTUBE_ALLOW}" allowfullscreen></iframe>'
        "</div>"
    )


BLOCK_RENDERERS: dict[str, Callable[[Block], str]] = {
    "paragraph": _render_paragraph,
    "code": _render_code,
    "heading_1": _heading("h1"),
    "heading_2": _heading("h2"),
    "heading_3": _heading("h3"),
    "bulleted_list_item": _render_list_item,
    "numbered_list_item": _render_list_item,
    "to_do": _render_to_do,
    "toggle": _render_toggle,
    "child_page": _render_child_page,
    "image": _render_image,
    "bookmark": _render_bookmark,
    "embed": _render_embed,
    "child_database": _render_child_database,
    "divider": _render_divider,
    "quote": _render_quote,
    "callout": _render_callout,
    "column_list": _render_column_list,
    "column": _render_column,
    "video": _render_video,
}
