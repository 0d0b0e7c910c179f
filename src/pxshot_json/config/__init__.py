"""
Config package export.

Keeps import sites clean and stable:
    from pxshot_json.config import get_settings, JsonSettings
"""

from __future__ import annotations

from .settings import JsonSettings, get_settings

__all__ = ["JsonSettings", "get_settings"]
