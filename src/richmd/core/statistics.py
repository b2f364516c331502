"""Word count and reading time estimates"""

import math
import re
from typing import Any, Mapping, Optional

from richmd.core.nodes import TEXT, children, node_type


DEFAULT_WORDS_PER_MINUTE = 200

_WORD_CHAR = re.compile(r"[a-zA-Z0-9]")


def _joined_text(node: Any) -> str:
    """All text values under node joined by single spaces."""
    if node_type(node) == TEXT:
        value = node.get("value")
        return value if isinstance(value, str) else ""
    return " ".join(_joined_text(child) for child in children(node))


def get_word_count(document: Optional[Mapping[str, Any]]) -> int:
    """Count whitespace-separated words; punctuation-only tokens are not words."""
    if not document:
        return 0
    return sum(1 for word in _joined_text(document).split() if _WORD_CHAR.search(word))


def get_reading_time(
    document: Optional[Mapping[str, Any]],
    words_per_minute: int = DEFAULT_WORDS_PER_MINUTE,
    ) -> int:
    """Minutes to read the document, rounded up."""
    if not document:
        return 0
    if words_per_minute <= 0:
        raise ValueError(f"words_per_minute must be positive, got {words_per_minute}")
    return math.ceil(get_word_count(document) / words_per_minute)
