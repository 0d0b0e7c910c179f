# Copyright (c) Pxshot.
# SPDX-License-Identifier: MIT
"""JSON Value Tree.

Purpose:
    Parse UTF-8 JSON into a tree of typed :class:`Value` nodes, build trees
    with typed constructors, look members up by key and print trees back to
    compact JSON.

    * value: node type, constructors, mutators, lookup and deletion.
    * parser: recursive-descent parser.
    * printer: compact and indented serializers.
    * interop: conversion to and from plain Python data.

Notes:
    The tree is pure: it performs no I/O and does not log. It is not
    synchronized; share a tree across threads only under external locking.
"""

from __future__ import annotations

from pxshot_json.jsontree.interop import from_python, to_python
from pxshot_json.jsontree.parser import DEFAULT_MAX_DEPTH, parse
from pxshot_json.jsontree.printer import (
    format_number,
    print_bytes,
    print_formatted,
    print_unformatted,
)
from pxshot_json.jsontree.value import (
    INTEGER_VIEW_EPSILON,
    SAFE_INTEGER_MAX,
    Value,
    add_bool_member,
    add_member,
    add_null_member,
    add_number_member,
    add_string_member,
    append_element,
    create_array,
    create_bool,
    create_null,
    create_number,
    create_object,
    create_string,
    delete,
    lookup,
)

__all__ = [
    "DEFAULT_MAX_DEPTH",
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
    "format_number",
    "from_python",
    "lookup",
    "parse",
    "print_bytes",
    "print_formatted",
    "print_unformatted",
    "to_python",
]
