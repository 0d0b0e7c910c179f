# Copyright (c) Pxshot.
# SPDX-License-Identifier: MIT
"""Request and response bodies at the HTTP boundary.

Outbound, a mapping of typed fields becomes a compact JSON object sent with
``Content-Type: application/json``. Inbound, a raw response body is parsed
when its content type says JSON (or the caller expects a structured reply);
any other body is binary and is left to the caller.

A body that should be JSON but does not parse raises
:class:`ResponseParseError`; no field extraction is attempted on it.
"""

from __future__ import annotations

from collections.abc import Mapping
from contextlib import suppress
from typing import Any, Final

from pxshot_json.config.settings import get_settings
from pxshot_json.domain.exceptions.codec import ResponseParseError
from pxshot_json.domain.exceptions.json_tree import JsonInvalidArgument, JsonMalformedInput
from pxshot_json.infrastructure.logging.logger import get_json_logger
from pxshot_json.infrastructure.observability.metrics_json import (
    get_json_decode_bytes,
    get_json_decode_total,
    get_json_encode_total,
)
from pxshot_json.jsontree.interop import from_python
from pxshot_json.jsontree.parser import parse
from pxshot_json.jsontree.printer import print_bytes
from pxshot_json.jsontree.value import Value

__all__ = [
    "JSON_CONTENT_TYPE",
    "decode_response_body",
    "encode_request_body",
    "is_json_content_type",
]

JSON_CONTENT_TYPE: Final[str] = "application/json"

log = get_json_logger(__name__)


def is_json_content_type(content_type: str | None) -> bool:
    """Return True when ``content_type`` names ``application/json``.

    Parameters such as ``; charset=utf-8`` and letter case are ignored.
    """
    if not content_type:
        return False
    media_type = content_type.split(";", 1)[0].strip().lower()
    return media_type == JSON_CONTENT_TYPE


def encode_request_body(fields: Mapping[str, Any]) -> bytes:
    """Serialize ``fields`` as a compact JSON object.

    Entries whose value is ``None`` are left out, so only the options a
    caller actually set reach the wire.

    Args:
        fields: Member names mapped to str, int, float, bool, nested mappings
            or sequences.

    Returns:
        UTF-8 encoded JSON text.

    Raises:
        JsonInvalidArgument: If ``fields`` is not a mapping or holds an
            unsupported value.
    """
    if not isinstance(fields, Mapping):
        raise JsonInvalidArgument(
            "request body must be a mapping", details={"type": type(fields).__name__}
        )
    try:
        body = print_bytes(from_python(fields, skip_none=True))
    except JsonInvalidArgument:
        with suppress(Exception):
            get_json_encode_total().labels(outcome="invalid").inc()
        raise

    with suppress(Exception):
        get_json_encode_total().labels(outcome="ok").inc()
    return body


def decode_response_body(
    body: bytes,
    *,
    content_type: str | None = None,
    expect_json: bool = False,
) -> Value | None:
    """Parse a response body into a tree when it carries JSON.

    Args:
        body: Raw response bytes.
        content_type: Value of the ``Content-Type`` response header, if any.
        expect_json: Parse regardless of ``content_type`` (for example when
            the caller asked for a stored screenshot and expects metadata).

    Returns:
        The root of the parsed tree, or ``None`` when the body is binary.

    Raises:
        ResponseParseError: If the body should be JSON but is malformed.
    """
    if not (expect_json or is_json_content_type(content_type)):
        with suppress(Exception):
            get_json_decode_total().labels(outcome="binary").inc()
        return None

    with suppress(Exception):
        get_json_decode_bytes().observe(float(len(body)))

    try:
        tree = parse(body, max_depth=get_settings().max_depth)
    except JsonMalformedInput as exc:
        with suppress(Exception):
            get_json_decode_total().labels(outcome="malformed").inc()
        log.warning(
            "json.decode_failed",
            extra={
                "extra": {
                    "reason": exc.message,
                    "position": exc.details.get("position"),
                    "content_type": content_type,
                    "size_bytes": len(body),
                }
            },
        )
        raise ResponseParseError(
            "failed to parse response JSON", details=dict(exc.details)
        ) from exc

    with suppress(Exception):
        get_json_decode_total().labels(outcome="ok").inc()
    return tree
