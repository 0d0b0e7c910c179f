# Copyright (c) Pxshot.
# SPDX-License-Identifier: MIT
"""Typed views over decoded screenshot API replies.

Purpose:
    Turn the small JSON documents the screenshot API returns into immutable
    Pydantic models. Only the fields a caller reads are modelled; members that
    are missing or of an unexpected kind keep their defaults, so a partial
    reply still yields a usable view.

Replies covered:
    * stored screenshot metadata (``store=true`` captures);
    * usage statistics for the current billing period;
    * the ``{"error": "..."}`` envelope of failed calls.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from pxshot_json.codec.fields import get_int, get_string
from pxshot_json.jsontree.value import Value

__all__ = ["StoredScreenshot", "UsageStats", "api_error_message"]


class _ReplyModel(BaseModel):
    """Base for reply views: immutable and strict about unknown fields."""

    model_config = ConfigDict(extra="forbid", frozen=True)


class StoredScreenshot(_ReplyModel):
    """Metadata of a screenshot stored server-side."""

    url: str | None = Field(default=None, description="URL of the stored image.")
    expires_at: str | None = Field(default=None, description="ISO-8601 expiry timestamp.")
    width: int = Field(default=0, description="Image width in pixels.")
    height: int = Field(default=0, description="Image height in pixels.")
    size_bytes: int = Field(default=0, ge=0, description="Image size in bytes.")

    @classmethod
    def from_tree(cls, tree: Value) -> StoredScreenshot:
        """Build the view from a decoded reply object."""
        return cls(
            url=get_string(tree, "url"),
            expires_at=get_string(tree, "expires_at"),
            width=get_int(tree, "width") or 0,
            height=get_int(tree, "height") or 0,
            size_bytes=max(0, get_int(tree, "size_bytes") or 0),
        )


class UsageStats(_ReplyModel):
    """Usage counters for the current billing period."""

    screenshots_used: int = 0
    screenshots_limit: int = 0
    storage_used_bytes: int = 0
    storage_limit_bytes: int = 0
    period_start: str | None = None
    period_end: str | None = None

    @classmethod
    def from_tree(cls, tree: Value) -> UsageStats:
        """Build the view from a decoded reply object."""
        return cls(
            screenshots_used=get_int(tree, "screenshots_used") or 0,
            screenshots_limit=get_int(tree, "screenshots_limit") or 0,
            storage_used_bytes=get_int(tree, "storage_used_bytes") or 0,
            storage_limit_bytes=get_int(tree, "storage_limit_bytes") or 0,
            period_start=get_string(tree, "period_start"),
            period_end=get_string(tree, "period_end"),
        )

    @property
    def screenshots_remaining(self) -> int:
        return max(0, self.screenshots_limit - self.screenshots_used)


def api_error_message(tree: Value | None) -> str | None:
    """Return the ``error`` string of a failed call's reply, if present."""
    return get_string(tree, "error")
