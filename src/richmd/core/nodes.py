"""Rich text node kinds, mark kinds, and node builders"""

from enum import Enum
from typing import Any, Iterable, Mapping, Optional


TEXT = "text"


class BlockType(str, Enum):
    """Block-level node kinds as delivered by the content API"""
    document = "document"
    paragraph = "paragraph"
    heading_1 = "heading-1"
    heading_2 = "heading-2"
    heading_3 = "heading-3"
    heading_4 = "heading-4"
    heading_5 = "heading-5"
    heading_6 = "heading-6"
    ordered_list = "ordered-list"
    unordered_list = "unordered-list"
    list_item = "list-item"
    hr = "hr"
    quote = "blockquote"
    embedded_entry = "embedded-entry-block"
    embedded_asset = "embedded-asset-block"
    table = "table"
    table_row = "table-row"
    table_cell = "table-cell"
    table_header_cell = "table-header-cell"


class InlineType(str, Enum):
    """Inline node kinds"""
    hyperlink = "hyperlink"
    entry_hyperlink = "entry-hyperlink"
    asset_hyperlink = "asset-hyperlink"
    embedded_entry = "embedded-entry-inline"


class MarkType(str, Enum):
    """Inline style tags carried by text nodes"""
    bold = "bold"
    italic = "italic"
    underline = "underline"
    code = "code"
    superscript = "superscript"
    subscript = "subscript"
    strikethrough = "strikethrough"


HEADING_LEVELS: dict[str, int] = {
    BlockType.heading_1.value: 1,
    BlockType.heading_2.value: 2,
    BlockType.heading_3.value: 3,
    BlockType.heading_4.value: 4,
    BlockType.heading_5.value: 5,
    BlockType.heading_6.value: 6,
}

LIST_TYPES = frozenset({BlockType.unordered_list.value, BlockType.ordered_list.value})
EMBEDDED_ENTRY_TYPES = frozenset({BlockType.embedded_entry.value, InlineType.embedded_entry.value})


def node_type(node: Any) -> Optional[str]:
    """Return the nodeType of a mapping node, or None for anything else."""
    if isinstance(node, Mapping):
        return node.get("nodeType")
    return None


def children(node: Any) -> list:
    """Return the content list of a node; empty when absent or not a list."""
    if not isinstance(node, Mapping):
        return []
    content = node.get("content")
    return content if isinstance(content, list) else []


def is_text(node: Any) -> bool:
    return node_type(node) == TEXT


def text_node(value: str, marks: Iterable[str] = ()) -> dict[str, Any]:
    """Build a text leaf with the given mark kinds."""
    return {
        "nodeType": TEXT,
        "value": value,
        "marks": [{"type": str(getattr(m, "value", m))} for m in marks],
        "data": {},
    }


def block_node(
    kind: str,
    content: Iterable[Mapping[str, Any]] = (),
    data: Optional[Mapping[str, Any]] = None,
    ) -> dict[str, Any]:
    """Build a block or inline node of the given kind."""
    return {
        "nodeType": str(getattr(kind, "value", kind)),
        "data": dict(data or {}),
        "content": list(content),
    }


def document_node(content: Iterable[Mapping[str, Any]] = ()) -> dict[str, Any]:
    """Build a root document node."""
    return block_node(BlockType.document, content)
