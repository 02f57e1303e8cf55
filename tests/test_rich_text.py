"""Tests for rich text run rendering."""

from helpers import rich_text

from notion_blog.output.rich_text import plain_text, render_rich_text


def test_plain_run_is_escaped():
    assert render_rich_text([rich_text("a < b & c")]) == "a &lt; b &amp; c"


def test_annotations_wrap_content():
    html = render_rich_text([rich_text("x", bold=True, italic=True, code=True)])
    assert html == "<em><strong><code>x</code></strong></em>"


def test_strikethrough_underline_and_color():
    html = render_rich_text([rich_text("x", strikethrough=True, underline=True, color="red")])
    assert html == '<span class="color-red"><u><s>x</s></u></span>'


def test_link_wraps_formatted_text():
    html = render_rich_text([rich_text("docs", link="https://example.com/?a=1&b=2", bold=True)])
    assert html == '<a href="https://example.com/?a=1&amp;b=2"><strong>docs</strong></a>'


def test_equation_and_mention_runs():
    runs = [
        {"type": "equation", "equation": {"expression": "a<b"}, "plain_text": "a<b", "annotations": {}},
        {"type": "mention", "mention": {}, "plain_text": "@Alice", "href": None, "annotations": {}},
    ]
    assert render_rich_text(runs) == '<span class="equation">a&lt;b</span>@Alice'


def test_empty_runs_render_nothing():
    assert render_rich_text([]) == ""
    assert render_rich_text(None) == ""
    assert plain_text(None) == ""


def test_runs_are_concatenated_in_order():
    assert render_rich_text([rich_text("one "), rich_text("two")]) == "one two"
    assert plain_text([rich_text("one "), rich_text("two")]) == "one two"
