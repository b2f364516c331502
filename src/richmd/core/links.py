"""Hyperlink and embedded asset/entry rendering"""

import logging
from typing import Any, Callable, Mapping

from richmd.core.models import RenderOptions


logger = logging.getLogger(__name__)

LINK_FALLBACK_TEXT = "link"
ASSET_FALLBACK_TITLE = "Asset"


def _field(container: Any, key: str) -> Any:
    """Look up key in container, treating anything that is not a mapping as empty."""
    return container.get(key) if isinstance(container, Mapping) else None


def convert_hyperlink(node: Mapping[str, Any], render_children: Callable[[], str]) -> str:
    """Render an inline link as [text](uri); no uri degrades to the plain text."""
    uri = _field(node.get("data"), "uri") or ""
    if not uri:
        return render_children()
    text = render_children() or LINK_FALLBACK_TEXT
    return f"[{text}]({uri})"


def convert_embedded_asset(node: Mapping[str, Any], options: RenderOptions) -> str:
    if options.asset_renderer is not None:
        return options.asset_renderer(node)
    return default_asset(node)


def convert_embedded_entry(node: Mapping[str, Any], options: RenderOptions) -> str:
    """Entries have no generic textual form; only a caller hook produces output."""
    if options.entry_renderer is not None:
        return options.entry_renderer(node)
    logger.debug("No entry renderer configured; skipping %s", node.get("nodeType"))
    return ""


def default_asset(node: Mapping[str, Any]) -> str:
    """Render a resolved asset target as a Markdown image."""
    target = _field(node.get("data"), "target")
    if not target:
        return ""

    fields = _field(target, "fields")
    title = _field(fields, "title") or ASSET_FALLBACK_TITLE
    url = _field(_field(fields, "file"), "url") or ""
    return f"![{title}]({url})"
