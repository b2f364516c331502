"""Field reduction for embedded asset/entry payloads"""

from typing import Any, Callable, Mapping, Optional, Sequence

from richmd.core.nodes import TEXT, node_type
from richmd.core.utils.pick import pick


Transform = Callable[[Any], Any]

DEFAULT_ENTRY_FIELDS = ("title", "slug")


def minify_rich_text(
    document: Optional[Mapping[str, Any]],
    keep_entry_fields: Optional[Sequence[str]] = None,
    keep_asset_fields: Optional[Sequence[str]] = None,
    transform_entry: Optional[Transform] = None,
    transform_asset: Optional[Transform] = None,
    ) -> Optional[dict[str, Any]]:
    """Return a copy of document with embedded link targets reduced to the selected fields.

    A target whose fields carry a `file` is treated as an asset, anything
    else as an entry. For each, a transform callback wins over a field list,
    which wins over the default reduction.
    """
    if not document:
        return None

    def _minify(node: Mapping[str, Any]) -> dict[str, Any]:
        if node_type(node) == TEXT:
            return {"nodeType": TEXT, "value": node.get("value"), "marks": node.get("marks")}

        data = dict(node.get("data") or {})
        target = data.get("target")
        if target:
            fields = target.get("fields") or {}
            if fields.get("file"):
                if transform_asset is not None:
                    data["target"] = transform_asset(target)
                elif keep_asset_fields is not None:
                    data["target"] = {"fields": pick(fields, keep_asset_fields)}
                else:
                    data["target"] = _default_asset(fields)
            else:
                if transform_entry is not None:
                    data["target"] = transform_entry(target)
                elif keep_entry_fields is not None:
                    data["target"] = {"fields": pick(fields, keep_entry_fields)}
                else:
                    data["target"] = _default_entry(target, fields)

        return {
            "nodeType": node_type(node),
            "data": data,
            "content": [_minify(child) for child in node.get("content") or []],
        }

    return {
        "nodeType": document.get("nodeType"),
        "data": document.get("data"),
        "content": [_minify(node) for node in document.get("content") or []],
    }


def _compact(mapping: Mapping[str, Any]) -> dict[str, Any]:
    return {k: v for k, v in mapping.items() if v is not None}


def _default_asset(fields: Mapping[str, Any]) -> dict[str, Any]:
    file = fields.get("file") or {}
    return {
        "fields": _compact({
            "title": fields.get("title"),
            "file": _compact({
                "url": file.get("url"),
                "contentType": file.get("contentType"),
                "details": file.get("details"),
                "fileName": file.get("fileName"),
            }),
            "description": fields.get("description"),
        }),
    }


def _default_entry(target: Mapping[str, Any], fields: Mapping[str, Any]) -> dict[str, Any]:
    minified: dict[str, Any] = {"fields": _compact({k: fields.get(k) for k in DEFAULT_ENTRY_FIELDS})}
    content_type = (target.get("sys") or {}).get("contentType")
    if content_type:
        minified["sys"] = {"contentType": content_type}
    return minified
