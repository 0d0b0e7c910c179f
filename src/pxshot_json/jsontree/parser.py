# Copyright (c) Pxshot.
# SPDX-License-Identifier: MIT
"""Recursive-descent JSON parser producing a :class:`Value` tree.

One method per grammar production: value, string, number, array, object.
Any byte at or below ``0x20`` is insignificant whitespace between tokens.

The contract is all-or-nothing. A failure at any depth raises
:class:`JsonMalformedInput` (with the character offset in
``details["position"]``) and the partially built tree is dropped with the
parser state, so no partial result ever reaches the caller.

Deliberate behaviours:
    * ``\\uXXXX`` escapes are decoded, combining UTF-16 surrogate pairs; a
      lone surrogate decodes to U+FFFD.
    * Unknown single-character escapes yield the character itself.
    * Numbers are validated against the JSON grammar and converted with
      ``float()``; the integer view is derived from the resulting double.
    * Anything other than whitespace after the root value is rejected.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from typing import Final, NoReturn

from pxshot_json.domain.exceptions.json_tree import (
    JsonAllocationFailure,
    JsonInvalidArgument,
    JsonMalformedInput,
)
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

__all__ = ["DEFAULT_MAX_DEPTH", "parse"]

DEFAULT_MAX_DEPTH: Final[int] = 256

_WHITESPACE: Final = re.compile(r"[\x00-\x20]*")
_STRING_CHUNK: Final = re.compile(r'[^"\\]*')
_NUMBER: Final = re.compile(r"-?(?:0|[1-9][0-9]*)(?:\.[0-9]+)?(?:[eE][+-]?[0-9]+)?")
_HEX_DIGITS: Final = frozenset("0123456789abcdefABCDEF")

_ESCAPES: Final[dict[str, str]] = {
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
    '"': '"',
    "\\": "\\",
    "/": "/",
}

_LITERALS: Final[dict[str, tuple[str, Callable[[], Value]]]] = {
    "n": ("null", create_null),
    "f": ("false", lambda: create_bool(False)),
    "t": ("true", lambda: create_bool(True)),
}


class _Parser:
    """Cursor over the source text plus the current nesting depth."""

    def __init__(self, text: str, max_depth: int) -> None:
        self._text = text
        self._pos = 0
        self._depth = 0
        self._max_depth = max_depth

    def _fail(self, message: str, position: int | None = None) -> NoReturn:
        where = self._pos if position is None else position
        raise JsonMalformedInput(message, details={"position": where})

    def _skip_whitespace(self) -> None:
        self._pos = _WHITESPACE.match(self._text, self._pos).end()  # type: ignore[union-attr]

    def _peek(self) -> str:
        return self._text[self._pos] if self._pos < len(self._text) else ""

    def _enter(self) -> None:
        self._depth += 1
        if self._depth > self._max_depth:
            self._fail(f"nesting deeper than {self._max_depth} levels")

    def parse_document(self) -> Value:
        self._skip_whitespace()
        root = self.parse_value()
        self._skip_whitespace()
        if self._pos != len(self._text):
            self._fail("unexpected trailing characters after JSON value")
        return root

    def parse_value(self) -> Value:
        ch = self._peek()
        if not ch:
            self._fail("unexpected end of input")
        literal = _LITERALS.get(ch)
        if literal is not None:
            word, factory = literal
            if not self._text.startswith(word, self._pos):
                self._fail(f"invalid literal, expected {word!r}")
            self._pos += len(word)
            return factory()
        if ch == '"':
            return create_string(self.parse_string())
        if ch == "-" or "0" <= ch <= "9":
            return self.parse_number()
        if ch == "[":
            return self.parse_array()
        if ch == "{":
            return self.parse_object()
        self._fail(f"unexpected character {ch!r}")

    def parse_string(self) -> str:
        text = self._text
        end = len(text)
        if self._peek() != '"':
            self._fail("expected '\"' to open a string")
        start = self._pos
        pos = start + 1
        chunks: list[str] = []
        while True:
            match = _STRING_CHUNK.match(text, pos)
            chunks.append(match.group())  # type: ignore[union-attr]
            pos = match.end()  # type: ignore[union-attr]
            if pos >= end:
                self._fail("unterminated string", start)
            if text[pos] == '"':
                break
            pos += 1
            if pos >= end:
                self._fail("unterminated string", start)
            escape = text[pos]
            if escape == "u":
                decoded, pos = self._decode_unicode_escape(pos + 1)
                chunks.append(decoded)
                continue
            chunks.append(_ESCAPES.get(escape, escape))
            pos += 1
        self._pos = pos + 1
        return "".join(chunks)

    def _read_hex4(self, pos: int) -> int:
        digits = self._text[pos : pos + 4]
        if len(digits) != 4 or not _HEX_DIGITS.issuperset(digits):
            self._fail("invalid \\u escape", pos)
        return int(digits, 16)

    def _decode_unicode_escape(self, pos: int) -> tuple[str, int]:
        """Decode the escape whose hex digits start at ``pos``."""
        code = self._read_hex4(pos)
        pos += 4
        if 0xD800 <= code <= 0xDBFF and self._text.startswith("\\u", pos):
            low = self._read_hex4(pos + 2)
            if 0xDC00 <= low <= 0xDFFF:
                return chr(0x10000 + ((code - 0xD800) << 10) + (low - 0xDC00)), pos + 6
        if 0xD800 <= code <= 0xDFFF:
            return "\ufffd", pos
        return chr(code), pos

    def parse_number(self) -> Value:
        match = _NUMBER.match(self._text, self._pos)
        if match is None:
            self._fail("invalid number")
        self._pos = match.end()
        return create_number(float(match.group()))

    def parse_array(self) -> Value:
        self._enter()
        self._pos += 1
        array = create_array()
        self._skip_whitespace()
        if self._peek() == "]":
            self._pos += 1
            self._depth -= 1
            return array

        while True:
            self._skip_whitespace()
            append_element(array, self.parse_value())
            self._skip_whitespace()
            ch = self._peek()
            if ch == ",":
                self._pos += 1
                continue
            if ch == "]":
                self._pos += 1
                break
            self._fail("expected ',' or ']' in array")

        self._depth -= 1
        return array

    def parse_object(self) -> Value:
        self._enter()
        self._pos += 1
        obj = create_object()
        self._skip_whitespace()
        if self._peek() == "}":
            self._pos += 1
            self._depth -= 1
            return obj

        while True:
            self._skip_whitespace()
            if self._peek() != '"':
                self._fail("object keys must be strings")
            key = self.parse_string()
            self._skip_whitespace()
            if self._peek() != ":":
                self._fail("expected ':' after object key")
            self._pos += 1
            self._skip_whitespace()
            add_member(obj, key, self.parse_value())
            self._skip_whitespace()
            ch = self._peek()
            if ch == ",":
                self._pos += 1
                continue
            if ch == "}":
                self._pos += 1
                break
            self._fail("expected ',' or '}' in object")

        self._depth -= 1
        return obj


def parse(text: bytes | bytearray | memoryview | str, *, max_depth: int | None = None) -> Value:
    """Parse JSON text into a new :class:`Value` tree.

    Args:
        text: UTF-8 encoded bytes, or an already decoded ``str``.
        max_depth: Maximum container nesting; defaults to
            :data:`DEFAULT_MAX_DEPTH`.

    Returns:
        The root value. The caller owns the whole tree.

    Raises:
        JsonMalformedInput: If the text is not a single well-formed JSON value.
        JsonAllocationFailure: If memory ran out while building the tree.
        JsonInvalidArgument: If ``text`` is neither bytes nor str.
    """
    if isinstance(text, bytes | bytearray | memoryview):
        try:
            source = bytes(text).decode("utf-8")
        except UnicodeDecodeError as exc:
            raise JsonMalformedInput(
                "input is not valid UTF-8", details={"position": exc.start}
            ) from exc
    elif isinstance(text, str):
        source = text
    else:
        raise JsonInvalidArgument(
            "parse expects bytes or str", details={"type": type(text).__name__}
        )

    limit = DEFAULT_MAX_DEPTH if max_depth is None else max_depth
    if limit < 1:
        raise JsonInvalidArgument("max_depth must be at least 1", details={"max_depth": limit})

    parser = _Parser(source, limit)
    try:
        return parser.parse_document()
    except MemoryError as exc:
        raise JsonAllocationFailure("out of memory while parsing") from exc
    except RecursionError as exc:
        raise JsonMalformedInput(
            "nesting exceeds the interpreter recursion limit",
            details={"position": parser._pos},
        ) from exc
