# tests/conftest.py
from __future__ import annotations

from collections.abc import Iterator

import pytest

from pxshot_json.config.settings import get_settings


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Give every test settings read from a clean environment."""
    for name in ("PXSHOT_JSON_MAX_DEPTH", "PXSHOT_JSON_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
