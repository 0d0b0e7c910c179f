# Copyright (c) Pxshot.
# SPDX-License-Identifier: MIT
"""Typed leaf extraction from a decoded object.

Each getter looks a member up by key and returns its payload only when the
member has the expected kind. A missing member or a member of another kind
yields ``None``, leaving the caller's default in place.
"""

from __future__ import annotations

from pxshot_json.jsontree.value import Value, lookup

__all__ = ["get_bool", "get_float", "get_int", "get_string"]


def get_string(tree: Value | None, key: str) -> str | None:
    item = lookup(tree, key)
    if item is None or not item.is_string:
        return None
    return item.string_value


def get_int(tree: Value | None, key: str) -> int | None:
    """Return the truncated integer view of a NUMBER member."""
    item = lookup(tree, key)
    if item is None or not item.is_number:
        return None
    return item.number_int


def get_float(tree: Value | None, key: str) -> float | None:
    item = lookup(tree, key)
    if item is None or not item.is_number:
        return None
    return item.number_float


def get_bool(tree: Value | None, key: str) -> bool | None:
    item = lookup(tree, key)
    if item is None or not item.is_bool:
        return None
    return item.is_true
