# Copyright (c) Pxshot.
# SPDX-License-Identifier: MIT
"""pxshot-json Configuration (Pydantic Settings, v2)

Summary:
    Typed, validated configuration for the codec boundary and the CLI. The
    JSON tree itself takes its limits as arguments; only the codec and the CLI
    read these settings.

Environment variables (with ``model_config.env_prefix``):

* ``PXSHOT_JSON_MAX_DEPTH``
* ``PXSHOT_JSON_LOG_LEVEL``
"""

from __future__ import annotations

import logging
from functools import lru_cache

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from pxshot_json.jsontree.parser import DEFAULT_MAX_DEPTH

logger = logging.getLogger(__name__)

_LOG_LEVELS = frozenset({"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"})


class JsonSettings(BaseSettings):
    """Configuration for decoding response bodies and for the CLI."""

    max_depth: int = Field(
        DEFAULT_MAX_DEPTH,
        ge=1,
        le=400,
        description="Maximum container nesting accepted when parsing response bodies.",
    )
    log_level: str = Field(
        "INFO",
        description="Root log level used by the CLI.",
    )

    model_config: SettingsConfigDict = SettingsConfigDict(
        env_prefix="PXSHOT_JSON_",
        extra="ignore",
        case_sensitive=False,
    )

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        """Upper-case the level name and reject unknown names."""
        level = value.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"unknown log level: {value!r}")
        return level


@lru_cache(maxsize=1)
def get_settings() -> JsonSettings:
    """Return a cached singleton :class:`JsonSettings` instance.

    Raises:
        RuntimeError: If configuration is invalid.
    """
    try:
        settings = JsonSettings()
    except ValidationError as exc:
        logger.exception("Invalid pxshot-json configuration")
        raise RuntimeError(f"Invalid configuration: {exc}") from exc
    logger.debug(
        "Settings initialized",
        extra={"extra": {"max_depth": settings.max_depth, "log_level": settings.log_level}},
    )
    return settings
