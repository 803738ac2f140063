"""Shared field projection helpers for MCP tools."""

from __future__ import annotations

from typing import Any, Dict, List, Optional


def project_dict(
    data: dict[str, Any] | None,
    fields: list[str] | None,
    base_fields: set[str],
) -> dict[str, Any] | None:
    """Project a single dict to base_fields + requested fields.

    - fields=None: returns only base_fields (minimal default)
    - fields=["x"]: returns base_fields + x
    - fields=["*"]: returns full data (no projection)
    """
    if not isinstance(data, dict):
        return data
    if fields is not None and "*" in fields:
        return data

    allowed = base_fields | set(fields or [])
    return {k: v for k, v in data.items() if k in allowed}


def project_items(
    items: Optional[List[Dict[str, Any]]],
    fields: Optional[List[str]],
    base_fields: set[str] | None = None,
) -> List[Dict[str, Any]]:
    """Project a list of dicts to only include base fields + requested fields.

    Args:
        items: List of dicts to project.
        fields: Additional field names to include beyond base_fields.
        base_fields: Base fields always included. Defaults to {"id", "name"}.
    """
    if base_fields is None:
        base_fields = {"id", "name"}
    items = items or []
    if fields is not None and "*" in fields:
        return items
    allowed = base_fields | set(fields or [])
    projected: List[Dict[str, Any]] = []
    for it in items:
        if isinstance(it, dict):
            projected.append({k: v for k, v in it.items() if k in allowed})
        else:
            projected.append(it)
    return projected


def next_cursor(offset: int, limit: int, paging: Optional[Dict[str, Any]], returned: int) -> Optional[str]:
    """Offset of the next page as an opaque cursor, or None on the last page."""
    total = (paging or {}).get("total")
    if total is None:
        has_more = returned >= limit > 0
    else:
        has_more = offset + limit < total
    return str(offset + limit) if has_more else None


def offset_from_cursor(cursor: Optional[str]) -> int:
    """Offset encoded by a cursor from a previous page; 0 when absent."""
    if not cursor:
        return 0
    try:
        offset = int(cursor)
    except ValueError:
        raise ValueError(
            f"Invalid cursor {cursor!r}: pass the cursor returned by the previous page"
        ) from None
    if offset < 0:
        raise ValueError(f"Invalid cursor {cursor!r}: offset cannot be negative")
    return offset
