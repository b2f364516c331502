"""Shared fixtures for core unit tests"""

import pytest

from richmd.core.nodes import BlockType, InlineType, block_node, document_node, text_node


def _p(*content):
    """Paragraph from strings (plain text) and nodes."""
    return block_node(BlockType.paragraph, [text_node(c) if isinstance(c, str) else c for c in content])


@pytest.fixture(name="sample_doc")
def sample_doc_fixture():
    """A small article: title, intro with a link, a nested list, an asset and an entry."""
    return document_node([
        block_node(BlockType.heading_1, [text_node("My Title")]),
        _p("This is a description."),
        _p(
            "Read ",
            block_node(InlineType.hyperlink, [text_node("the docs", ["bold"])], {"uri": "https://example.com/docs"}),
            " today.",
        ),
        block_node(BlockType.unordered_list, [
            block_node(BlockType.list_item, [
                _p("Parent"),
                block_node(BlockType.ordered_list, [
                    block_node(BlockType.list_item, [_p("First")]),
                    block_node(BlockType.list_item, [_p("Second")]),
                ]),
            ]),
            block_node(BlockType.list_item, [_p("Sibling")]),
        ]),
        block_node(BlockType.embedded_asset, data={"target": {
            "sys": {"id": "asset-1", "type": "Asset"},
            "fields": {"title": "Logo", "file": {"url": "//images.example.com/logo.png", "contentType": "image/png"}},
        }}),
        block_node(BlockType.embedded_entry, data={"target": {
            "sys": {"id": "entry-1", "type": "Entry", "contentType": {"sys": {"id": "post"}}},
            "fields": {"title": "Related", "slug": "related", "body": "Long body"},
        }}),
    ])
