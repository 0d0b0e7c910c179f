# Copyright (c) Pxshot.
# SPDX-License-Identifier: MIT
"""Structured logging helpers."""

from __future__ import annotations

from .logger import configure_root_logging, get_json_logger

__all__ = ["configure_root_logging", "get_json_logger"]
