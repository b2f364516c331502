"""Rich text document to Markdown rendering: node dispatch and block converters"""

import logging
from typing import Any, Callable, Mapping, Optional

from richmd.core.frontmatter import build_frontmatter, format_frontmatter
from richmd.core.links import convert_embedded_asset, convert_embedded_entry, convert_hyperlink
from richmd.core.lists import convert_list
from richmd.core.marks import convert_text
from richmd.core.models import RenderOptions, coerce_options
from richmd.core.nodes import (
    HEADING_LEVELS, TEXT, BlockType, InlineType, children, node_type,
)


logger = logging.getLogger(__name__)

BLOCK_SEPARATOR = "\n\n"

Converter = Callable[[Mapping[str, Any], RenderOptions, int], str]


def render(
    document: Optional[Mapping[str, Any]],
    options: "RenderOptions | Mapping[str, Any] | None" = None,
    ) -> str:
    """Render a rich text document to Markdown, prefixed with frontmatter when configured.

    Top-level blocks that render blank are dropped; the rest are separated
    by one blank line. A missing or empty document renders as "".
    """
    if not document:
        return ""
    content = document.get("content") if isinstance(document, Mapping) else None
    if not isinstance(content, list) or not content:
        return ""

    opts = coerce_options(options)
    rendered = (convert_node(node, opts, 0) for node in content)
    markdown = BLOCK_SEPARATOR.join(md for md in rendered if md.strip())

    if opts.frontmatter is not None:
        meta = build_frontmatter(document, opts.frontmatter)
        return format_frontmatter(meta) + markdown
    return markdown


def convert_node(node: Any, options: RenderOptions, depth: int = 0) -> str:
    """Render one node, preferring a caller override for its kind.

    Any exception raised while rendering the node (including from a hook)
    is logged and the node renders as "".
    """
    if not isinstance(node, Mapping):
        return ""

    kind = node_type(node)
    try:
        override = options.node_renderers.get(kind)
        if override is not None:
            result = override(node, lambda child: convert_node(child, options, depth))
        else:
            converter = CONVERTERS.get(kind)
            if converter is None:
                logger.debug("No converter for node type %r", kind)
                return ""
            result = converter(node, options, depth)
    except Exception as e:
        logger.warning("Error converting node of type %s: %s", kind, e)
        return ""

    if not isinstance(result, str):
        logger.warning("Renderer for node type %s returned %s, not a string", kind, type(result).__name__)
        return ""
    return result


def process_content(node: Mapping[str, Any], options: RenderOptions, depth: int) -> str:
    """Render a node's children in order with no separator."""
    return "".join(convert_node(child, options, depth) for child in children(node))


def _paragraph(node, options, depth) -> str:
    return process_content(node, options, depth)


def _heading(node, options, depth) -> str:
    level = HEADING_LEVELS[node_type(node)]
    return f"{'#' * level} {process_content(node, options, depth)}"


def _quote(node, options, depth) -> str:
    # single line only; multi-paragraph quotes are not re-prefixed
    return f"> {process_content(node, options, depth)}"


def _hr(node, options, depth) -> str:
    return "---"


def _list(node, options, depth) -> str:
    return convert_list(node, lambda child, d: convert_node(child, options, d), depth)


def _hyperlink(node, options, depth) -> str:
    return convert_hyperlink(node, lambda: process_content(node, options, depth))


def _text(node, options, depth) -> str:
    return convert_text(node)


def _asset(node, options, depth) -> str:
    return convert_embedded_asset(node, options)


def _entry(node, options, depth) -> str:
    return convert_embedded_entry(node, options)


# table kinds have no Markdown converter and render as ""
CONVERTERS: dict[str, Converter] = {
    BlockType.paragraph.value: _paragraph,
    **{kind: _heading for kind in HEADING_LEVELS},
    BlockType.quote.value: _quote,
    BlockType.hr.value: _hr,
    BlockType.unordered_list.value: _list,
    BlockType.ordered_list.value: _list,
    BlockType.list_item.value: _paragraph,
    InlineType.hyperlink.value: _hyperlink,
    TEXT: _text,
    BlockType.embedded_asset.value: _asset,
    BlockType.embedded_entry.value: _entry,
    InlineType.embedded_entry.value: _entry,
}
