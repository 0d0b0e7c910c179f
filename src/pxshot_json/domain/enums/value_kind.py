# Copyright (c) Pxshot.
# SPDX-License-Identifier: MIT
"""
JSON value kinds.

Purpose:
    Tag carried by every node of the JSON Value Tree. The tag decides which
    payload fields of a node are meaningful.

Layer:
    domain
"""

from __future__ import annotations

from enum import Enum


class ValueKind(str, Enum):
    """Kind of a JSON value.

    TRUE and FALSE are distinct kinds rather than one boolean kind carrying a
    flag, so a kind check alone tells the literal apart.
    """

    NULL = "null"
    FALSE = "false"
    TRUE = "true"
    NUMBER = "number"
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"

    @property
    def is_container(self) -> bool:
        """Return True for ARRAY and OBJECT."""
        return self in (ValueKind.ARRAY, ValueKind.OBJECT)
