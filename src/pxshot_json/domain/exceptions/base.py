# Copyright (c) Pxshot.
# SPDX-License-Identifier: MIT
"""
Base Domain Exceptions.

Summary:
    Canonical base class for every error raised by this package so callers can
    catch one type and still branch on a stable machine-readable ``code``.

Layer:
    domain/exceptions
"""
from __future__ import annotations

from typing import Any


class PxshotJsonError(Exception):
    """Base class for all pxshot-json exceptions."""

    code: str = "PXSHOT_JSON_ERROR"

    def __init__(self, message: str = "", *, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details: dict[str, Any] = details or {}
