"""Tree cleanup: empty paragraph removal and mark stripping"""

from typing import Any, Iterable, Mapping, Optional

from richmd.core.marks import mark_kinds
from richmd.core.nodes import BlockType, is_text, node_type


def _is_empty_paragraph(node: Mapping[str, Any]) -> bool:
    """True when a paragraph has no children, or only whitespace-only text children."""
    content = node.get("content") or []
    return all(is_text(child) and not str(child.get("value") or "").strip() for child in content)


def _clean(content: list) -> list:
    cleaned = []
    for node in content:
        if not isinstance(node, Mapping) or is_text(node):
            cleaned.append(node)
            continue
        copy = dict(node)
        if isinstance(copy.get("content"), list):
            copy["content"] = _clean(copy["content"])
        if node_type(copy) == BlockType.paragraph and _is_empty_paragraph(copy):
            continue
        cleaned.append(copy)
    return cleaned


def remove_empty_nodes(document: Optional[Mapping[str, Any]]) -> Optional[dict[str, Any]]:
    """Return a copy of document without empty paragraphs, at any depth."""
    if not document:
        return None
    return {**document, "content": _clean(list(document.get("content") or []))}


def strip_marks(
    document: Optional[Mapping[str, Any]],
    marks_to_remove: Iterable[str],
    ) -> Optional[dict[str, Any]]:
    """Return a copy of document with the given mark kinds removed from every text node."""
    if not document:
        return None
    remove = mark_kinds(list(marks_to_remove))

    def _strip(node: Any) -> Any:
        if not isinstance(node, Mapping):
            return node
        if is_text(node):
            copy = dict(node)
            if isinstance(copy.get("marks"), list):
                copy["marks"] = [m for m in copy["marks"] if not (mark_kinds([m]) & remove)]
            return copy
        if isinstance(node.get("content"), list):
            return {**node, "content": [_strip(child) for child in node["content"]]}
        return node

    return _strip(document)
