"""Inline mark composition for text leaves"""

from typing import Any, Iterable, Mapping

from richmd.core.nodes import MarkType


def mark_kinds(marks: Any) -> set[str]:
    """Collapse a marks collection into the set of mark kinds it carries."""
    if not isinstance(marks, Iterable) or isinstance(marks, (str, bytes)):
        return set()
    kinds = set()
    for mark in marks:
        kind = mark.get("type") if isinstance(mark, Mapping) else mark
        if kind:
            kinds.add(str(getattr(kind, "value", kind)))
    return kinds


def compose_marks(value: str, marks: Any) -> str:
    """Wrap value as bold, then italic, then code; input order and duplicates are irrelevant."""
    kinds = mark_kinds(marks)
    if MarkType.bold.value in kinds:
        value = f"**{value}**"
    if MarkType.italic.value in kinds:
        value = f"*{value}*"
    if MarkType.code.value in kinds:
        value = f"`{value}`"
    # underline and the remaining kinds have no plain Markdown form
    return value


def convert_text(node: Mapping[str, Any]) -> str:
    value = node.get("value")
    if not isinstance(value, str):
        return ""
    return compose_marks(value, node.get("marks"))
