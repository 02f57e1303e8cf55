"""Tests for fetching and splicing nested blocks."""

import asyncio
import copy

from helpers import block, rich_text, text_block

from notion_blog.notion.children import attach_children, fetch_children


def test_fetch_children_only_requests_flagged_blocks(make_client):
    blocks = [
        text_block("p1", "paragraph", "plain"),
        block("t1", "toggle", has_children=True, rich_text=[rich_text("A")]),
        block("t2", "toggle", has_children=True, rich_text=[rich_text("B")]),
    ]
    client = make_client(
        children={
            "t1": [text_block("t1-c1", "paragraph", "one")],
            "t2": [text_block("t2-c1", "paragraph", "two"), text_block("t2-c2", "paragraph", "three")],
        }
    )

    children = asyncio.run(fetch_children(client, blocks))

    requested = sorted(call["block_id"] for call in client.calls_to("blocks.children.list"))
    assert requested == ["t1", "t2"]
    assert [c["id"] for c in children["t1"]] == ["t1-c1"]
    assert [c["id"] for c in children["t2"]] == ["t2-c1", "t2-c2"]


def test_fetch_children_without_nested_blocks_makes_no_calls(make_client):
    client = make_client()
    assert asyncio.run(fetch_children(client, [text_block("p", "paragraph", "x")])) == {}
    assert client.calls == []


def test_fetch_children_follows_pagination(make_client):
    kids = [text_block(f"c{i}", "paragraph", str(i)) for i in range(5)]
    client = make_client(children={"t": kids}, page_size=2)

    children = asyncio.run(fetch_children(client, [block("t", "toggle", has_children=True)]))

    assert [c["id"] for c in children["t"]] == ["c0", "c1", "c2", "c3", "c4"]
    assert len(client.calls_to("blocks.children.list")) == 3


def test_attach_children_matches_by_id():
    blocks = [
        block("a", "toggle", has_children=True, rich_text=[]),
        text_block("p", "paragraph", "plain"),
        block("b", "column_list", has_children=True),
    ]
    children_by_id = {
        "b": [block("col", "column")],
        "a": [text_block("a-1", "paragraph", "inside a")],
    }

    spliced = attach_children(blocks, children_by_id)

    assert [b["id"] for b in spliced] == ["a", "p", "b"]
    assert [c["id"] for c in spliced[0]["toggle"]["children"]] == ["a-1"]
    assert [c["id"] for c in spliced[2]["column_list"]["children"]] == ["col"]
    assert "children" not in spliced[1]["paragraph"]


def test_attach_children_does_not_mutate_input():
    blocks = [block("a", "toggle", has_children=True, rich_text=[])]
    snapshot = copy.deepcopy(blocks)

    attach_children(blocks, {"a": [text_block("x", "paragraph", "x")]})

    assert blocks == snapshot


def test_attach_children_keeps_existing_children():
    existing = [text_block("keep", "paragraph", "kept")]
    blocks = [block("a", "toggle", has_children=True, children=existing)]

    spliced = attach_children(blocks, {"a": [text_block("new", "paragraph", "new")]})

    assert spliced[0]["toggle"]["children"] == existing


def test_attach_children_leaves_unflagged_blocks_alone():
    blocks = [block("a", "toggle", has_children=False, rich_text=[])]
    spliced = attach_children(blocks, {"a": [text_block("x", "paragraph", "x")]})
    assert "children" not in spliced[0]["toggle"]
