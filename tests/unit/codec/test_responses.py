from __future__ import annotations

import pytest
from pydantic import ValidationError

from pxshot_json.codec.responses import StoredScreenshot, UsageStats, api_error_message
from pxshot_json.jsontree.parser import parse


def test_stored_screenshot_from_tree() -> None:
    tree = parse(
        b'{"url": "https://cdn.pxshot.com/abc.png", "expires_at": "2026-11-01T00:00:00Z",'
        b' "width": 1280, "height": 720, "size_bytes": 48213}'
    )
    shot = StoredScreenshot.from_tree(tree)
    assert shot.url == "https://cdn.pxshot.com/abc.png"
    assert shot.expires_at == "2026-11-01T00:00:00Z"
    assert (shot.width, shot.height) == (1280, 720)
    assert shot.size_bytes == 48213


def test_stored_screenshot_keeps_defaults_for_missing_or_mistyped_fields() -> None:
    shot = StoredScreenshot.from_tree(parse(b'{"url": 42, "width": "wide", "size_bytes": -5}'))
    assert shot.url is None
    assert shot.width == 0
    assert shot.height == 0
    assert shot.size_bytes == 0


def test_stored_screenshot_is_frozen() -> None:
    shot = StoredScreenshot()
    with pytest.raises(ValidationError):
        shot.width = 10  # type: ignore[misc]


def test_usage_stats_from_tree() -> None:
    tree = parse(
        b'{"screenshots_used": 120, "screenshots_limit": 1000,'
        b' "storage_used_bytes": 5242880, "storage_limit_bytes": 1073741824,'
        b' "period_start": "2026-10-01", "period_end": "2026-10-31"}'
    )
    usage = UsageStats.from_tree(tree)
    assert usage.screenshots_used == 120
    assert usage.screenshots_remaining == 880
    assert usage.storage_limit_bytes == 1073741824
    assert usage.period_end == "2026-10-31"


def test_usage_remaining_never_negative() -> None:
    usage = UsageStats(screenshots_used=12, screenshots_limit=10)
    assert usage.screenshots_remaining == 0


def test_api_error_message() -> None:
    assert api_error_message(parse(b'{"error": "invalid api key"}')) == "invalid api key"
    assert api_error_message(parse(b'{"error": 401}')) is None
    assert api_error_message(None) is None
