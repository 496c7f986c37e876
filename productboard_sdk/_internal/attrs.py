"""Helpers for working with raw resource attributes."""

from collections.abc import Mapping, Sequence
from typing import Any
from urllib.parse import quote_plus


def merge_attrs(
    target: dict[str, Any], incoming: Mapping[str, Any], *, clobber: bool = True
) -> dict[str, Any]:
    """Merge incoming attributes into target in place.

    With clobber=True, top-level keys overwrite. With clobber=False nested
    mappings are merged key by key and only scalars overwrite.

    Args:
        target: The attribute dictionary to update.
        incoming: The attributes to merge in.
        clobber: Overwrite nested mappings instead of merging them.

    Returns:
        The updated target.
    """
    if clobber:
        target.update(incoming)
        return target
    for key, value in incoming.items():
        if isinstance(value, Mapping):
            existing = target.get(key)
            if not isinstance(existing, dict):
                existing = {}
                target[key] = existing
            merge_attrs(existing, value, clobber=False)
        else:
            target[key] = value
    return target


def nested_attribute(
    attributes: Mapping[str, Any],
    attribute_key: str,
    nested_under: str | Sequence[str] | None = None,
) -> Any:
    """Look up attribute_key, optionally below one or more parent keys.

    Returns None when any level of the path is missing.
    """
    if nested_under is None:
        return attributes.get(attribute_key)
    path = [nested_under] if isinstance(nested_under, str) else list(nested_under)
    current: Any = attributes
    for key in path:
        if not isinstance(current, Mapping):
            return None
        current = current.get(key)
    if not isinstance(current, Mapping):
        return None
    return current.get(attribute_key)


def to_query_string(params: Mapping[str, Any]) -> str:
    """Render params as percent-encoded key=value pairs joined by '&'."""
    return "&".join(
        f"{quote_plus(str(key))}={quote_plus(str(value))}" for key, value in params.items()
    )


def with_query_params(url: str, params: Mapping[str, Any] | None) -> str:
    """Append a query string to url when params is non-empty."""
    if not params:
        return url
    return f"{url}?{to_query_string(params)}"
