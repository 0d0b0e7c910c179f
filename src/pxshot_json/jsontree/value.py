# Copyright (c) Pxshot.
# SPDX-License-Identifier: MIT
"""JSON Value Tree: node type, constructors, mutators and lookup.

Every node is a :class:`Value` tagged with a :class:`ValueKind`. Containers own
an ordered list of children; each child is owned by exactly one parent, and
Object members carry the key they were inserted under.

Numbers keep two views in sync: the float payload and a truncated integer view
with an ``int_exact`` validity flag. The flag is what the printer consults to
decide between the bare-integer and the floating-point form.

Typical usage:
    body = create_object()
    add_string_member(body, "url", "https://example.com")
    add_number_member(body, "width", 1280)
    width = lookup(body, "width")
"""

from __future__ import annotations

import math
import sys
from collections.abc import Iterator
from typing import Final

from pxshot_json.domain.enums.value_kind import ValueKind
from pxshot_json.domain.exceptions.json_tree import JsonInvalidArgument

__all__ = [
    "INTEGER_VIEW_EPSILON",
    "SAFE_INTEGER_MAX",
    "Value",
    "add_bool_member",
    "add_member",
    "add_null_member",
    "add_number_member",
    "add_string_member",
    "append_element",
    "create_array",
    "create_bool",
    "create_null",
    "create_number",
    "create_object",
    "create_string",
    "delete",
    "lookup",
]

# Largest integer a double represents exactly together with all its neighbours.
SAFE_INTEGER_MAX: Final[int] = 2**53 - 1

# Tolerance when comparing the integer view against the float payload.
INTEGER_VIEW_EPSILON: Final[float] = sys.float_info.epsilon


def _integer_view(num: float) -> tuple[int, bool]:
    """Return the truncated integer view of ``num`` and whether it is exact."""
    if not math.isfinite(num):
        return 0, False
    truncated = int(num)
    exact = abs(truncated - num) <= INTEGER_VIEW_EPSILON and abs(num) <= SAFE_INTEGER_MAX
    return truncated, exact


class Value:
    """One node of a JSON tree.

    Only the payload matching ``kind`` is meaningful: ``string_value`` for
    STRING, the numeric views for NUMBER, children for ARRAY and OBJECT.
    Instances are created through the ``create_*`` functions and wired into a
    tree with :func:`add_member` and :func:`append_element`.
    """

    __slots__ = (
        "_children",
        "_float",
        "_int",
        "_int_exact",
        "_key",
        "_kind",
        "_next",
        "_parent",
        "_string",
    )

    def __init__(self, kind: ValueKind) -> None:
        self._kind = kind
        self._string: str | None = None
        self._float: float = 0.0
        self._int: int = 0
        self._int_exact: bool = False
        self._key: str | None = None
        self._children: list[Value] = []
        self._parent: Value | None = None
        self._next: Value | None = None

    def __repr__(self) -> str:
        if self._key is None:
            return f"Value(kind={self._kind.value})"
        return f"Value(kind={self._kind.value}, key={self._key!r})"

    # ------------------------------ Payload ------------------------------ #

    @property
    def kind(self) -> ValueKind:
        return self._kind

    @property
    def string_value(self) -> str | None:
        """Text payload; ``None`` unless the kind is STRING."""
        return self._string

    @property
    def number_float(self) -> float:
        return self._float

    @property
    def number_int(self) -> int:
        """Truncated integer view of the number (``1`` for TRUE values)."""
        return self._int

    @property
    def int_exact(self) -> bool:
        """Whether ``number_int`` equals the float payload inside the safe range."""
        return self._int_exact

    @property
    def key(self) -> str | None:
        """Member name when this value sits inside an Object, else ``None``."""
        return self._key

    # ----------------------------- Traversal ----------------------------- #

    @property
    def parent(self) -> Value | None:
        return self._parent

    @property
    def first_child(self) -> Value | None:
        return self._children[0] if self._children else None

    @property
    def next_sibling(self) -> Value | None:
        """Return the child that follows this one in its parent, if any."""
        return self._next

    def __iter__(self) -> Iterator[Value]:
        return iter(tuple(self._children))

    def __len__(self) -> int:
        return len(self._children)

    # ----------------------------- Predicates ---------------------------- #

    @property
    def is_null(self) -> bool:
        return self._kind is ValueKind.NULL

    @property
    def is_true(self) -> bool:
        return self._kind is ValueKind.TRUE

    @property
    def is_false(self) -> bool:
        return self._kind is ValueKind.FALSE

    @property
    def is_bool(self) -> bool:
        return self._kind in (ValueKind.TRUE, ValueKind.FALSE)

    @property
    def is_number(self) -> bool:
        return self._kind is ValueKind.NUMBER

    @property
    def is_string(self) -> bool:
        return self._kind is ValueKind.STRING

    @property
    def is_array(self) -> bool:
        return self._kind is ValueKind.ARRAY

    @property
    def is_object(self) -> bool:
        return self._kind is ValueKind.OBJECT


# --------------------------------------------------------------------------- #
# Constructors
# --------------------------------------------------------------------------- #


def create_null() -> Value:
    return Value(ValueKind.NULL)


def create_object() -> Value:
    return Value(ValueKind.OBJECT)


def create_array() -> Value:
    return Value(ValueKind.ARRAY)


def create_bool(flag: bool) -> Value:
    """Create a TRUE or FALSE value.

    TRUE carries ``number_int == 1`` so callers coercing booleans to numbers
    see the conventional value.
    """
    if flag:
        item = Value(ValueKind.TRUE)
        item._int = 1
        return item
    return Value(ValueKind.FALSE)


def create_string(text: str) -> Value:
    """Create a STRING value holding ``text``.

    Raises:
        JsonInvalidArgument: If ``text`` is not a ``str``.
    """
    if not isinstance(text, str):
        raise JsonInvalidArgument(
            "string payload must be str", details={"type": type(text).__name__}
        )
    item = Value(ValueKind.STRING)
    item._string = text
    return item


def create_number(num: float) -> Value:
    """Create a NUMBER value with both numeric views populated.

    Args:
        num: An ``int`` or ``float``; ``bool`` is rejected to keep booleans
            on their own kinds.

    Raises:
        JsonInvalidArgument: If ``num`` is not numeric or does not fit a double.
    """
    if isinstance(num, bool) or not isinstance(num, int | float):
        raise JsonInvalidArgument(
            "number payload must be int or float", details={"type": type(num).__name__}
        )
    try:
        as_float = float(num)
    except OverflowError as exc:
        raise JsonInvalidArgument("integer too large for a double") from exc

    item = Value(ValueKind.NUMBER)
    item._float = as_float
    item._int, item._int_exact = _integer_view(as_float)
    return item


# --------------------------------------------------------------------------- #
# Mutators
# --------------------------------------------------------------------------- #


def _attach(parent: Value, item: Value, key: str | None) -> None:
    """Append ``item`` to ``parent`` after checking exclusive ownership."""
    if not isinstance(item, Value):
        raise JsonInvalidArgument("child must be a Value", details={"type": type(item).__name__})
    if item._parent is not None:
        raise JsonInvalidArgument("value is already owned by another container")

    ancestor: Value | None = parent
    while ancestor is not None:
        if ancestor is item:
            raise JsonInvalidArgument("value cannot be added beneath itself")
        ancestor = ancestor._parent

    item._key = key
    item._parent = parent
    if parent._children:
        parent._children[-1]._next = item
    parent._children.append(item)


def add_member(obj: Value, key: str, item: Value) -> Value:
    """Append ``item`` as the last member of ``obj`` under ``key``.

    Duplicate keys are not rejected; :func:`lookup` returns the first one.

    Returns:
        The inserted value.

    Raises:
        JsonInvalidArgument: If ``obj`` is not an Object, ``key`` is not a
            ``str``, or ``item`` is not a free-standing Value.
    """
    if not isinstance(obj, Value) or obj._kind is not ValueKind.OBJECT:
        raise JsonInvalidArgument("add_member requires an Object value")
    if not isinstance(key, str):
        raise JsonInvalidArgument("member key must be str", details={"type": type(key).__name__})
    _attach(obj, item, key)
    return item


def append_element(array: Value, item: Value) -> Value:
    """Append ``item`` as the last element of ``array``.

    Raises:
        JsonInvalidArgument: If ``array`` is not an Array or ``item`` is not
            a free-standing Value.
    """
    if not isinstance(array, Value) or array._kind is not ValueKind.ARRAY:
        raise JsonInvalidArgument("append_element requires an Array value")
    _attach(array, item, None)
    return item


def add_string_member(obj: Value, key: str, text: str) -> Value:
    return add_member(obj, key, create_string(text))


def add_number_member(obj: Value, key: str, num: float) -> Value:
    return add_member(obj, key, create_number(num))


def add_bool_member(obj: Value, key: str, flag: bool) -> Value:
    return add_member(obj, key, create_bool(flag))


def add_null_member(obj: Value, key: str) -> Value:
    return add_member(obj, key, create_null())


# --------------------------------------------------------------------------- #
# Lookup and deletion
# --------------------------------------------------------------------------- #


def lookup(obj: Value | None, key: str) -> Value | None:
    """Return the first member of ``obj`` whose key equals ``key``.

    The comparison is exact and case-sensitive. A missing object, a
    non-Object value or an absent key all yield ``None``.
    """
    if obj is None or obj._kind is not ValueKind.OBJECT:
        return None
    for child in obj._children:
        if child._key == key:
            return child
    return None


def delete(item: Value | None) -> None:
    """Release ``item`` and everything it owns.

    The value is detached from its parent first, so deleting a member also
    removes it from its container. Passing ``None`` is a no-op.
    """
    if item is None:
        return

    parent = item._parent
    if parent is not None:
        siblings = parent._children
        index = next(i for i, child in enumerate(siblings) if child is item)
        if index:
            siblings[index - 1]._next = item._next
        del siblings[index]

    pending = [item]
    while pending:
        node = pending.pop()
        pending.extend(node._children)
        node._children = []
        node._parent = None
        node._next = None
        node._string = None
        node._key = None
