# Copyright (c) Pxshot.
# SPDX-License-Identifier: MIT
"""
JSON Value Tree Exceptions

Purpose:
    Error kinds raised by the parser, the printer and the tree mutators. They
    abort the current operation; nothing partial is ever returned alongside
    them.

Layer: domain/exceptions
"""
from __future__ import annotations

from .base import PxshotJsonError


class JsonMalformedInput(PxshotJsonError):
    """Parse could not find an expected token or terminator.

    ``details["position"]`` holds the character offset where parsing stopped.
    """

    code = "MALFORMED_INPUT"


class JsonAllocationFailure(PxshotJsonError):
    """Memory for a node, string or output buffer could not be obtained."""

    code = "ALLOCATION_FAILURE"


class JsonInvalidArgument(PxshotJsonError):
    """A constructor or mutator was called with a tree-shape precondition violated."""

    code = "INVALID_ARGUMENT"
