# Copyright (c) Pxshot.
# SPDX-License-Identifier: MIT
"""
Codec Exceptions

Purpose:
    Errors surfaced at the HTTP-facing boundary, where raw response bodies are
    turned into trees.

Layer: domain/exceptions
"""
from __future__ import annotations

from .base import PxshotJsonError


class ResponseParseError(PxshotJsonError):
    """A response body expected to be JSON could not be parsed."""

    code = "JSON_PARSE"
