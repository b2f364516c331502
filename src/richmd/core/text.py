"""Plain-text flattening of rich text trees"""

from typing import Any, Mapping, Optional

from richmd.core.nodes import TEXT, BlockType, InlineType, children, node_type


BLOCK_CONTAINERS = frozenset({
    BlockType.document.value,
    BlockType.quote.value,
    BlockType.unordered_list.value,
    BlockType.ordered_list.value,
    BlockType.list_item.value,
    BlockType.table.value,
    BlockType.table_row.value,
    BlockType.table_cell.value,
    BlockType.table_header_cell.value,
})

LINK_TYPES = frozenset({
    InlineType.hyperlink.value,
    InlineType.entry_hyperlink.value,
    InlineType.asset_hyperlink.value,
})


def to_plain_text(
    node: Optional[Mapping[str, Any]],
    separator: str = "\n",
    ignore_links: bool = False,
    ) -> str:
    """Flatten a document or node to its text.

    Children of block containers (lists, quotes, table parts, the document)
    are joined with separator; inline children are concatenated.
    """
    if not node:
        return ""

    kind = node_type(node)
    if kind == TEXT:
        value = node.get("value")
        return value if isinstance(value, str) else ""
    if ignore_links and kind in LINK_TYPES:
        return ""

    joiner = separator if kind in BLOCK_CONTAINERS else ""
    pieces = (to_plain_text(child, separator, ignore_links) for child in children(node))
    return joiner.join(p for p in pieces if p)
