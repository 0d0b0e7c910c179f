# Copyright (c) Pxshot.
# SPDX-License-Identifier: MIT
"""Codec boundary between an HTTP caller and the JSON tree.

    * body: request-body encoding and response-body decoding.
    * fields: typed leaf extraction by member name.
    * responses: typed views over screenshot API replies.
"""

from __future__ import annotations

from pxshot_json.codec.body import (
    JSON_CONTENT_TYPE,
    decode_response_body,
    encode_request_body,
    is_json_content_type,
)
from pxshot_json.codec.fields import get_bool, get_float, get_int, get_string
from pxshot_json.codec.responses import StoredScreenshot, UsageStats, api_error_message

__all__ = [
    "JSON_CONTENT_TYPE",
    "StoredScreenshot",
    "UsageStats",
    "api_error_message",
    "decode_response_body",
    "encode_request_body",
    "get_bool",
    "get_float",
    "get_int",
    "get_string",
    "is_json_content_type",
]
