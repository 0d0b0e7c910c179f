# Copyright (c) Pxshot.
# SPDX-License-Identifier: MIT
"""Domain enumerations."""

from __future__ import annotations

from .value_kind import ValueKind

__all__ = ["ValueKind"]
