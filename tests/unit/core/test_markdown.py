"""Unit tests for core/markdown.py"""

import copy
import logging

import pytest

from richmd.core.markdown import convert_node, render
from richmd.core.models import RenderOptions
from richmd.core.nodes import BlockType, InlineType, block_node, document_node, text_node
from richmd.core.tables import create_table


def _p(*content):
    return block_node(BlockType.paragraph, [text_node(c) if isinstance(c, str) else c for c in content])


SAMPLE_MD = """\
# My Title

This is a description.

Read [**the docs**](https://example.com/docs) today.

- Parent
  1. First
  2. Second
- Sibling

![Logo](//images.example.com/logo.png)"""


def test_render_none_document():
    """A missing document renders as an empty string."""
    assert render(None) == ""
    assert render(None, {"frontmatter": {"title": "x"}}) == ""


def test_render_empty_content():
    """A document without top-level nodes renders as an empty string."""
    assert render(document_node([])) == ""
    assert render({"nodeType": "document", "data": {}}) == ""
    assert render({"nodeType": "document", "content": "not a list"}) == ""


def test_render_sample_document(sample_doc):
    """Top-level blocks are joined by one blank line; the entry without a hook is dropped."""
    assert render(sample_doc) == SAMPLE_MD


def test_paragraph_with_marks():
    """Paragraph children are concatenated with no separator."""
    doc = document_node([_p("Hello ", text_node("world", ["bold"]), "!")])
    assert render(doc) == "Hello **world**!"


@pytest.mark.parametrize("level", [1, 2, 3, 4, 5, 6])
def test_heading_levels(level):
    """heading-N renders N hashes, one space, then the text."""
    doc = document_node([block_node(f"heading-{level}", [text_node("Title")])])
    assert render(doc) == "#" * level + " Title"


def test_top_level_blocks_join_with_blank_line():
    """Sibling headings are separated by a blank line."""
    doc = document_node([
        block_node(BlockType.heading_1, [text_node("Title")]),
        block_node(BlockType.heading_2, [text_node("Subtitle")]),
    ])
    assert render(doc) == "# Title\n\n## Subtitle"


def test_quote_and_rule():
    """Quotes get a single '> ' prefix and rules render as ---."""
    doc = document_node([
        block_node(BlockType.quote, [_p("Quoted")]),
        block_node(BlockType.hr),
        _p("After"),
    ])
    assert render(doc) == "> Quoted\n\n---\n\nAfter"


def test_blank_top_level_blocks_dropped():
    """Blocks that render empty or whitespace-only add no extra separators."""
    doc = document_node([_p("A"), _p(), _p("   "), _p("B")])
    assert render(doc) == "A\n\nB"


def test_unknown_node_type_renders_empty():
    """Unrecognized kinds are tolerated and render as nothing."""
    doc = document_node([_p("A"), block_node("future-widget", [_p("hidden")]), _p("B")])
    assert render(doc) == "A\n\nB"


def test_table_nodes_have_no_markdown_form():
    """Table fragments render as empty strings."""
    doc = document_node([_p("Before"), create_table([["H"], ["v"]])])
    assert render(doc) == "Before"


def test_list_item_outside_list():
    """A list item dispatched on its own renders its children."""
    item = block_node(BlockType.list_item, [_p("loose")])
    assert convert_node(item, RenderOptions()) == "loose"


def test_non_mapping_nodes_render_empty():
    """Non-mapping children are skipped rather than failing the parent."""
    doc = document_node([block_node(BlockType.paragraph, [None, text_node("ok"), "stray"])])
    assert render(doc) == "ok"
    assert convert_node(42, RenderOptions()) == ""


def test_override_replaces_default():
    """An override for heading-1 fully replaces the default converter."""
    def h1(node, next_):
        return "<h1>" + "".join(next_(c) for c in node["content"]) + "</h1>"

    doc = document_node([block_node(BlockType.heading_1, [text_node("Title", ["italic"])])])
    assert render(doc, {"node_renderers": {"heading-1": h1}}) == "<h1>*Title*</h1>"


def test_override_applies_to_nested_kinds():
    """Overrides are consulted at every depth, including text leaves."""
    doc = document_node([block_node(BlockType.unordered_list, [
        block_node(BlockType.list_item, [_p("quiet")]),
    ])])
    options = RenderOptions(node_renderers={"text": lambda node, next_: node["value"].upper()})
    assert render(doc, options) == "- QUIET"


def test_override_accepts_enum_keys():
    """Override tables may be keyed by node kind enum members."""
    options = RenderOptions(node_renderers={BlockType.hr: lambda node, next_: "***"})
    assert render(document_node([block_node(BlockType.hr)]), options) == "***"


def test_override_next_keeps_depth():
    """The recursion callback renders children at the overridden node's depth."""
    def item(node, next_):
        return "* " + "".join(next_(c) for c in node["content"])

    doc = document_node([block_node(BlockType.unordered_list, [
        block_node(BlockType.list_item, [
            _p("a"),
            block_node(BlockType.unordered_list, [block_node(BlockType.list_item, [_p("b")])]),
        ]),
    ])])
    options = RenderOptions(node_renderers={"paragraph": lambda node, next_: "".join(next_(c) for c in node["content"])})
    assert render(doc, options) == "- a\n  - b"
    item_node = doc["content"][0]["content"][0]
    assert convert_node(item_node, RenderOptions(node_renderers={"list-item": item}), 2) == "* a    - b"


def test_failing_override_is_isolated(caplog):
    """A hook that raises renders as empty, logs a warning, and spares its siblings."""
    def boom(node, next_):
        raise RuntimeError("hook exploded")

    doc = document_node([block_node(BlockType.heading_1, [text_node("T")]), _p("still here")])
    with caplog.at_level(logging.WARNING, logger="richmd"):
        out = render(doc, {"node_renderers": {"heading-1": boom}})
    assert out == "still here"
    assert "Error converting node of type heading-1" in caplog.text
    assert "hook exploded" in caplog.text


def test_malformed_link_data_degrades_to_text():
    """A hyperlink with a non-mapping data bag renders its plain text."""
    bad_link = {"nodeType": "hyperlink", "data": "oops", "content": [text_node("x")]}
    doc = document_node([_p("Before ", bad_link), _p("After")])
    assert render(doc) == "Before x\n\nAfter"


def test_camel_case_option_names():
    """Options may use camelCase names as well as snake_case."""
    doc = document_node([block_node(BlockType.heading_1, [text_node("T")]), _p("x")])
    out = render(doc, {"nodeRenderers": {"heading-1": lambda node, next_: "<h1>T</h1>"}})
    assert out == "<h1>T</h1>\n\nx"
    asset = block_node(BlockType.embedded_asset, data={"target": {"fields": {}}})
    assert render(document_node([asset]), {"assetRenderer": lambda node: "[img]"}) == "[img]"


@pytest.mark.parametrize("options,expected", [
    ({"node_renderers": {"heading-1": "nope"}}, "x"),
    ({"customRenderer": {}}, "# T\n\nx"),
    ({"node_renderers": "not-a-mapping"}, "# T\n\nx"),
    ({"frontmatter": ["not", "a", "mapping"]}, "# T\n\nx"),
    ("not-options", "# T\n\nx"),
])
def test_render_never_raises_on_bad_options(options, expected):
    """Unusable options never escape render; the document still renders."""
    doc = document_node([block_node(BlockType.heading_1, [text_node("T")]), _p("x")])
    assert render(doc, options) == expected


def test_non_callable_hook_fails_inside_its_node(caplog):
    """A hook that cannot be called blanks only the node it targets."""
    doc = document_node([block_node(BlockType.heading_1, [text_node("T")]), _p("x")])
    with caplog.at_level(logging.WARNING, logger="richmd"):
        assert render(doc, {"node_renderers": {"heading-1": "nope"}}) == "x"
    assert "heading-1" in caplog.text


def test_non_string_hook_result_is_dropped(caplog):
    """A hook returning something other than a string renders as ""."""
    doc = document_node([_p("a"), block_node(BlockType.hr)])
    with caplog.at_level(logging.WARNING, logger="richmd"):
        out = render(doc, RenderOptions(node_renderers={"hr": lambda node, next_: None}))
    assert out == "a"
    assert "not a string" in caplog.text


def test_render_does_not_mutate_input(sample_doc):
    """The document tree is read-only to the renderer."""
    before = copy.deepcopy(sample_doc)
    render(sample_doc, {"frontmatter": {}})
    assert sample_doc == before


def test_hooks_called_once_per_node_in_order():
    """Entry hooks run once for every entry occurrence, in document order."""
    calls = []

    def entry(node):
        calls.append(node["data"]["target"]["sys"]["id"])
        return f"[[{calls[-1]}]]"

    def ref(id_):
        return {"target": {"sys": {"id": id_}}}

    doc = document_node([
        block_node(BlockType.embedded_entry, data=ref("a")),
        _p("see ", block_node(InlineType.embedded_entry, data=ref("b")), " and ",
           block_node(InlineType.embedded_entry, data=ref("a"))),
    ])
    assert render(doc, RenderOptions(entry_renderer=entry)) == "[[a]]\n\nsee [[b]] and [[a]]"
    assert calls == ["a", "b", "a"]
