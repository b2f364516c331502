"""Ordered and unordered list rendering with depth-tracked indentation"""

from typing import Any, Callable, Mapping, Optional

from richmd.core.nodes import LIST_TYPES, BlockType, node_type


INDENT = "  "

Convert = Callable[[Any, int], str]


def convert_list(node: Mapping[str, Any], convert: Convert, depth: int) -> str:
    """Render each child of a list node as one line (plus any nested sub-list lines).

    Ordered items are numbered by their position among their immediate
    siblings, so numbering restarts in every list.
    """
    content = node.get("content")
    if not isinstance(content, list):
        return ""
    ordered = node_type(node) == BlockType.ordered_list
    return "\n".join(
        convert_list_item(child, convert, depth, i + 1 if ordered else None)
        for i, child in enumerate(content)
    )


def convert_list_item(
    node: Any,
    convert: Convert,
    depth: int,
    index: Optional[int] = None,
    ) -> str:
    """Render a single item; nested lists go one level deeper on their own line."""
    if not isinstance(node, Mapping):
        return ""

    indent = INDENT * depth
    prefix = f"{index}." if index is not None else "-"

    content = node.get("content")
    if not isinstance(content, list):
        return f"{indent}{prefix} "

    parts = []
    for child in content:
        if node_type(child) in LIST_TYPES:
            parts.append("\n" + convert(child, depth + 1))
        else:
            parts.append(convert(child, depth))
    return f"{indent}{prefix} {''.join(parts).strip()}"
