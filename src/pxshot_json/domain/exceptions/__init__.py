# Copyright (c) Pxshot.
# SPDX-License-Identifier: MIT
"""Domain exceptions for pxshot-json."""

from __future__ import annotations

from .base import PxshotJsonError
from .codec import ResponseParseError
from .json_tree import JsonAllocationFailure, JsonInvalidArgument, JsonMalformedInput

__all__ = [
    "JsonAllocationFailure",
    "JsonInvalidArgument",
    "JsonMalformedInput",
    "PxshotJsonError",
    "ResponseParseError",
]
