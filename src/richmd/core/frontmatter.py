"""Frontmatter derivation and serialization for rendered documents"""

import json
import logging
from typing import Any, Mapping, Optional

from richmd.core.nodes import TEXT, BlockType, children, node_type


logger = logging.getLogger(__name__)


def extract_text(node: Any) -> str:
    """Concatenate every text value under node with no separator."""
    if node_type(node) == TEXT:
        value = node.get("value")
        return value if isinstance(value, str) else ""
    return "".join(extract_text(child) for child in children(node))


def _first_top_level(document: Mapping[str, Any], kind: str) -> Optional[Mapping[str, Any]]:
    return next((n for n in children(document) if node_type(n) == kind), None)


def _derive(document: Mapping[str, Any], kind: str, key: str) -> Optional[str]:
    node = _first_top_level(document, kind)
    if node is None:
        return None
    try:
        return extract_text(node)
    except Exception as e:
        logger.warning("Skipping frontmatter %s derived from %s: %s", key, kind, e)
        return None


def build_frontmatter(document: Mapping[str, Any], fields: Mapping[str, Any]) -> dict[str, Any]:
    """Return the metadata mapping: supplied fields, with title/description derived when missing.

    title comes from the first top-level heading-1, description from the
    first top-level paragraph. A node whose text cannot be read leaves its
    field unset.
    """
    meta = dict(fields)
    for key, kind in (("title", BlockType.heading_1.value), ("description", BlockType.paragraph.value)):
        if meta.get(key):
            continue
        value = _derive(document, kind, key)
        if value is not None:
            meta[key] = value
    return meta


def format_frontmatter(meta: Mapping[str, Any]) -> str:
    """Serialize meta as `key: <json>` lines wrapped in --- delimiters.

    Values that cannot be encoded are logged and left out.
    """
    lines = []
    for key, value in meta.items():
        try:
            encoded = json.dumps(value, ensure_ascii=False, separators=(',', ':'), default=str)
        except (TypeError, ValueError, RecursionError) as e:
            logger.warning("Skipping frontmatter field %s: %s", key, e)
            continue
        lines.append(f"{key}: {encoded}")
    return "---\n" + "\n".join(lines) + "\n---\n\n"
