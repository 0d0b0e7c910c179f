# Copyright (c) Pxshot.
# SPDX-License-Identifier: MIT
"""Conversion between plain Python data and :class:`Value` trees."""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from functools import partial
from typing import Any

from pxshot_json.domain.enums.value_kind import ValueKind
from pxshot_json.domain.exceptions.json_tree import JsonInvalidArgument
from pxshot_json.jsontree.value import (
    Value,
    add_member,
    append_element,
    create_array,
    create_bool,
    create_null,
    create_number,
    create_object,
    create_string,
)

__all__ = ["from_python", "to_python"]


def _build(data: Any, skip_none: bool) -> Value:
    if data is None:
        return create_null()
    if isinstance(data, bool):
        return create_bool(data)
    if isinstance(data, int | float):
        return create_number(data)
    if isinstance(data, str):
        return create_string(data)
    if isinstance(data, Mapping):
        obj = create_object()
        for key, item in data.items():
            if not isinstance(key, str):
                raise JsonInvalidArgument(
                    "object keys must be str", details={"type": type(key).__name__}
                )
            if item is None and skip_none:
                continue
            add_member(obj, key, _build(item, skip_none))
        return obj
    if isinstance(data, Sequence) and not isinstance(data, bytes | bytearray):
        array = create_array()
        for item in data:
            append_element(array, _build(item, skip_none))
        return array
    raise JsonInvalidArgument(
        "unsupported type for JSON conversion", details={"type": type(data).__name__}
    )


def from_python(data: Any, *, skip_none: bool = False) -> Value:
    """Build a tree from ``None``, bools, numbers, strings, mappings and sequences.

    Args:
        data: The Python value to convert. Mapping keys must be ``str``.
        skip_none: Drop mapping entries whose value is ``None`` instead of
            emitting ``null`` members.

    Raises:
        JsonInvalidArgument: On an unsupported type, a non-string key, or
            data that refers to itself or nests beyond the recursion limit.
    """
    try:
        return _build(data, skip_none)
    except RecursionError as exc:
        raise JsonInvalidArgument("data is self-referencing or nested too deeply") from exc


def _scalar(item: Value) -> Any:
    kind = item.kind
    if kind is ValueKind.TRUE:
        return True
    if kind is ValueKind.FALSE:
        return False
    if kind is ValueKind.NUMBER:
        return item.number_int if item.int_exact else item.number_float
    if kind is ValueKind.STRING:
        return item.string_value
    return None


def to_python(item: Value) -> Any:
    """Convert a tree to plain Python data.

    Exact integers become ``int``; other numbers become ``float``. When an
    object holds duplicate keys the first member wins, matching lookup.
    """
    result: list[Any] = []
    pending: list[tuple[Value, Callable[[Any], Any]]] = [(item, result.append)]
    while pending:
        node, store = pending.pop()
        if not node.kind.is_container:
            store(_scalar(node))
            continue
        children = list(node)
        if node.is_array:
            elements: list[Any] = []
            store(elements)
            pending.extend((child, elements.append) for child in reversed(children))
        else:
            members: dict[str, Any] = {}
            store(members)
            pending.extend(
                (child, partial(members.setdefault, child.key or ""))
                for child in reversed(children)
            )
    return result[0]
