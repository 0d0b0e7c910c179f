# Copyright (c) Pxshot.
# SPDX-License-Identifier: MIT
"""pxshot-json: the JSON layer of the Pxshot screenshot API client.

Parses response bodies into a tree of typed values, builds request bodies
from typed fields and prints trees back to compact JSON.

Typical usage:
    from pxshot_json import parse, lookup

    tree = parse(b'{"url":"https://x","width":1280}')
    width = lookup(tree, "width").number_int
"""

from __future__ import annotations

from pxshot_json.domain.enums.value_kind import ValueKind
from pxshot_json.domain.exceptions import (
    JsonAllocationFailure,
    JsonInvalidArgument,
    JsonMalformedInput,
    PxshotJsonError,
    ResponseParseError,
)
from pxshot_json.jsontree import (
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
    from_python,
    lookup,
    parse,
    print_bytes,
    print_formatted,
    print_unformatted,
    to_python,
)

__version__ = "1.0.0"

__all__ = [
    "JsonAllocationFailure",
    "JsonInvalidArgument",
    "JsonMalformedInput",
    "PxshotJsonError",
    "ResponseParseError",
    "Value",
    "ValueKind",
    "__version__",
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
    "from_python",
    "lookup",
    "parse",
    "print_bytes",
    "print_formatted",
    "print_unformatted",
    "to_python",
]
