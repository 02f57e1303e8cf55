"""Inline markup for Notion rich text runs."""

from __future__ import annotations

from html import escape
from typing import Any


def render_rich_text(runs: list[dict[str, Any]] | None) -> str:
    """Render a list of rich text runs into escaped inline HTML."""
    if not runs:
        return ""
    return "".join(render_run(run) for run in runs)


def render_run(run: dict[str, Any]) -> str:
    run_type = run.get("type")
    if run_type == "equation":
        expression = (run.get("equation") or {}).get("expression", "")
        return f'<span class="equation">{escape(expression)}</span>'

    if run_type == "text":
        text = run.get("text") or {}
        content = text.get("content", "")
        link = (text.get("link") or {}).get("url")
    else:
        content = run.get("plain_text", "")
        link = run.get("href")

    html = _apply_annotations(escape(content), run.get("annotations") or {})
    if link:
        html = f'<a href="{escape(link, quote=True)}">{html}</a>'
    return html


def _apply_annotations(html: str, annotations: dict[str, Any]) -> str:
    # Innermost first
    if annotations.get("code"):
        html = f"<code>{html}</code>"
    if annotations.get("bold"):
        html = f"<strong>{html}</strong>"
    if annotations.get("italic"):
        html = f"<em>{html}</em>"
    if annotations.get("strikethrough"):
        html = f"<s>{html}</s>"
    if annotations.get("underline"):
        html = f"<u>{html}</u>"
    color = annotations.get("color") or "default"
    if color != "default":
        html = f'<span class="color-{escape(color, quote=True)}">{html}</span>'
    return html


def plain_text(runs: list[dict[str, Any]] | None) -> str:
    """Concatenate the unformatted text of rich text runs."""
    if not runs:
        return ""
    return "".join(run.get("plain_text", "") for run in runs)
