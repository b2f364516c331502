"""Read-only scanners for linked entry/asset IDs and hyperlink URIs"""

from typing import Any, Callable, Iterator, Mapping, Optional

from richmd.core.nodes import EMBEDDED_ENTRY_TYPES, BlockType, InlineType, children, node_type


def walk(node: Any) -> Iterator[Mapping[str, Any]]:
    """Yield node and all of its descendants in document order."""
    if not isinstance(node, Mapping):
        return
    yield node
    for child in children(node):
        yield from walk(child)


def _collect(
    document: Optional[Mapping[str, Any]],
    match: Callable[[str], bool],
    value: Callable[[Mapping[str, Any]], Any],
    ) -> list:
    """Return unique truthy values of matching nodes, in first-seen order."""
    if not document:
        return []
    found = (value(n) for n in walk(document) if match(node_type(n)))
    return list(dict.fromkeys(v for v in found if v))


def _target_id(node: Mapping[str, Any]) -> Optional[str]:
    target = (node.get("data") or {}).get("target") or {}
    return (target.get("sys") or {}).get("id")


def get_linked_entries(document: Optional[Mapping[str, Any]]) -> list[str]:
    """IDs of embedded entries (block and inline)."""
    return _collect(document, lambda kind: kind in EMBEDDED_ENTRY_TYPES, _target_id)


def get_linked_assets(document: Optional[Mapping[str, Any]]) -> list[str]:
    """IDs of embedded assets."""
    return _collect(document, lambda kind: kind == BlockType.embedded_asset, _target_id)


def extract_links(document: Optional[Mapping[str, Any]]) -> list[str]:
    """URIs of hyperlink nodes."""
    return _collect(
        document,
        lambda kind: kind == InlineType.hyperlink,
        lambda node: (node.get("data") or {}).get("uri"),
    )
