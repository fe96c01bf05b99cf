"""Helpers for interleaved ``key, value, key, value, ...`` sequences."""

from __future__ import annotations

from typing import Any, Dict, Sequence, Tuple

MISSING = "(MISSING)"


def pad(keyvals: Sequence[Any]) -> Tuple[Any, ...]:
    """Append :data:`MISSING` so that every key has a paired value."""
    items = tuple(keyvals)
    if len(items) % 2 == 1:
        items += (MISSING,)
    return items


def to_map(keyvals: Sequence[Any]) -> Dict[str, Any]:
    """Convert a key/value sequence to a dict. Later duplicates win."""
    items = pad(keyvals)
    return {str(items[i]): items[i + 1] for i in range(0, len(items), 2)}
