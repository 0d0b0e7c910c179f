# Copyright (c) Pxshot.
# SPDX-License-Identifier: MIT
"""Serialize a :class:`Value` tree back to JSON text.

Number policy (part of the observable contract):
    * a float payload of exactly zero prints ``0``;
    * a number whose integer view is exact prints as bare decimal digits;
    * anything else prints as the shortest round-tripping float, switching to
      exponent form for very large or very small magnitudes;
    * NaN and infinities have no JSON spelling and print ``null``.

Strings are escaped on output, so any string survives a parse/print
round-trip. Non-ASCII text is emitted as-is.
"""

from __future__ import annotations

import math
import re
from typing import Final

from pxshot_json.domain.enums.value_kind import ValueKind
from pxshot_json.domain.exceptions.json_tree import JsonAllocationFailure, JsonInvalidArgument
from pxshot_json.jsontree.value import Value

__all__ = ["format_number", "print_bytes", "print_formatted", "print_unformatted"]

_NEEDS_ESCAPE: Final = re.compile(r'[\x00-\x1f"\\\ud800-\udfff]')

_SHORT_ESCAPES: Final[dict[str, str]] = {
    '"': '\\"',
    "\\": "\\\\",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}

_LITERALS: Final[dict[ValueKind, str]] = {
    ValueKind.NULL: "null",
    ValueKind.FALSE: "false",
    ValueKind.TRUE: "true",
}


def _escape_char(match: re.Match[str]) -> str:
    ch = match.group()
    return _SHORT_ESCAPES.get(ch) or f"\\u{ord(ch):04x}"


def _quote(text: str) -> str:
    return '"' + _NEEDS_ESCAPE.sub(_escape_char, text) + '"'


def format_number(item: Value) -> str:
    """Render the numeric payload of ``item`` following the number policy."""
    num = item.number_float
    if num == 0:
        return "0"
    if item.int_exact:
        return str(item.number_int)
    if not math.isfinite(num):
        return "null"
    return repr(num)


def _open_container(
    item: Value, depth: int, formatted: bool
) -> list[str | tuple[Value, int]]:
    """Return the pieces of a container in output order, children unexpanded."""
    if item.kind is ValueKind.ARRAY:
        pieces: list[str | tuple[Value, int]] = ["["]
        for index, child in enumerate(item):
            if index:
                pieces.append(", " if formatted else ",")
            pieces.append((child, depth + 1))
        pieces.append("]")
        return pieces

    if not len(item):
        return ["{}"]
    if not formatted:
        pieces = ["{"]
        for index, child in enumerate(item):
            pieces.append(("," if index else "") + _quote(child.key or "") + ":")
            pieces.append((child, depth + 1))
        pieces.append("}")
        return pieces

    indent = "\t" * (depth + 1)
    last = len(item) - 1
    pieces = ["{\n"]
    for index, child in enumerate(item):
        pieces.append(indent + _quote(child.key or "") + ":\t")
        pieces.append((child, depth + 1))
        pieces.append(",\n" if index < last else "\n")
    pieces.append("\t" * depth + "}")
    return pieces


def _emit(root: Value, out: list[str], formatted: bool) -> None:
    # Explicit work stack so nesting depth is bounded by memory, not the call stack.
    pending: list[str | tuple[Value, int]] = [(root, 0)]
    while pending:
        piece = pending.pop()
        if isinstance(piece, str):
            out.append(piece)
            continue
        item, depth = piece
        kind = item.kind
        if kind.is_container:
            pending.extend(reversed(_open_container(item, depth, formatted)))
        elif kind is ValueKind.NUMBER:
            out.append(format_number(item))
        elif kind is ValueKind.STRING:
            out.append(_quote(item.string_value or ""))
        else:
            out.append(_LITERALS[kind])


def _render(item: Value, formatted: bool) -> str:
    if not isinstance(item, Value):
        raise JsonInvalidArgument("cannot print a non-Value", details={"type": type(item).__name__})
    out: list[str] = []
    try:
        _emit(item, out, formatted)
        return "".join(out)
    except MemoryError as exc:
        raise JsonAllocationFailure("out of memory while printing") from exc


def print_unformatted(item: Value) -> str:
    """Return the compact JSON text for ``item``."""
    return _render(item, formatted=False)


def print_formatted(item: Value) -> str:
    """Return ``item`` as indented JSON: one object member per line, tabs for depth."""
    return _render(item, formatted=True)


def print_bytes(item: Value) -> bytes:
    """Return the compact JSON for ``item`` as UTF-8 bytes, ready for a request body."""
    text = print_unformatted(item)
    try:
        return text.encode("utf-8")
    except MemoryError as exc:
        raise JsonAllocationFailure("out of memory while encoding output") from exc
