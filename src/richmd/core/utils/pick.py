"""Dotted-path field selection for nested mappings"""

from typing import Any, Iterable, Mapping


def pick(obj: Any, keys: Iterable[str]) -> Any:
    """Return a new nested dict holding only the dotted-path keys present in obj.

    pick({"file": {"url": "u", "size": 1}}, ["file.url"]) -> {"file": {"url": "u"}}
    Non-mapping input is returned unchanged.
    """
    if not isinstance(obj, Mapping):
        return obj

    result: dict[str, Any] = {}
    for key in keys:
        *parents, leaf = key.split(".")
        source, target = obj, result
        for part in parents:
            nxt = source.get(part)
            if not isinstance(nxt, Mapping):
                break
            source = nxt
            target = target.setdefault(part, {})
        else:
            if leaf in source:
                target[leaf] = source[leaf]
    return result
