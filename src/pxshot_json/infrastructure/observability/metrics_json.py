# Copyright (c) Pxshot.
# SPDX-License-Identifier: MIT
"""Codec observability helpers and Prometheus metrics.

This module centralizes the Prometheus collectors recorded where response
bodies are decoded and request bodies are encoded.

Exports
-------
Collectors (names are part of the public contract and must remain stable):

* ``pxshot_json_decode_total`` (Counter) labelled by ``outcome``
* ``pxshot_json_decode_bytes`` (Histogram)
* ``pxshot_json_encode_total`` (Counter) labelled by ``outcome``

Design
------
Collectors are created against the *current* default registry
(:data:`prometheus_client.REGISTRY`). If a collector with the same name is
already registered there, the existing instance is reused instead of
registering a duplicate, so module re-imports are harmless.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Final

import prometheus_client as prom
from prometheus_client import Counter, Histogram
from prometheus_client.registry import CollectorRegistry

_BODY_SIZE_BUCKETS: Final[tuple[float, ...]] = (
    64.0,
    256.0,
    1024.0,
    4096.0,
    16384.0,
    65536.0,
    262144.0,
    1048576.0,
)


def _get_or_create_histogram(
    name: str,
    doc: str,
    labelnames: Sequence[str] | None = None,
    buckets: Sequence[float] = Histogram.DEFAULT_BUCKETS,
) -> Histogram:
    """Return a histogram bound to the current default registry.

    Args:
        name: Metric name.
        doc: Human-readable metric description.
        labelnames: Optional iterable of label names.
        buckets: Upper bounds of the histogram buckets.

    Returns:
        A :class:`Histogram` bound to the current :data:`prom.REGISTRY`.
    """
    registry: CollectorRegistry = prom.REGISTRY
    mapping = getattr(registry, "_names_to_collectors", {})  # internal but stable
    existing = mapping.get(name)
    if isinstance(existing, Histogram):
        return existing

    labels = tuple(labelnames) if labelnames is not None else ()
    try:
        return Histogram(name, doc, labels, registry=registry, buckets=tuple(buckets))
    except ValueError as exc:
        if "Duplicated timeseries" in str(exc):
            again = getattr(registry, "_names_to_collectors", {}).get(name)
            if isinstance(again, Histogram):
                return again
        raise


def _get_or_create_counter(
    name: str,
    doc: str,
    labelnames: Sequence[str] | None = None,
) -> Counter:
    """Return a counter bound to the current default registry.

    Counters are registered without the ``_total`` suffix; prometheus_client
    appends it on exposition and indexes the collector under both names.
    """
    registry: CollectorRegistry = prom.REGISTRY
    mapping = getattr(registry, "_names_to_collectors", {})
    existing = mapping.get(name)
    if isinstance(existing, Counter):
        return existing

    labels = tuple(labelnames) if labelnames is not None else ()
    try:
        return Counter(name, doc, labels, registry=registry)
    except ValueError as exc:
        if "Duplicated timeseries" in str(exc):
            again = getattr(registry, "_names_to_collectors", {}).get(name)
            if isinstance(again, Counter):
                return again
        raise


json_decode_total: Counter = _get_or_create_counter(
    "pxshot_json_decode",
    "Response bodies handed to the JSON decoder, by outcome.",
    labelnames=("outcome",),
)

json_decode_bytes: Histogram = _get_or_create_histogram(
    "pxshot_json_decode_bytes",
    "Size of response bodies decoded as JSON (bytes).",
    buckets=_BODY_SIZE_BUCKETS,
)

json_encode_total: Counter = _get_or_create_counter(
    "pxshot_json_encode",
    "Request bodies encoded to JSON, by outcome.",
    labelnames=("outcome",),
)


def get_json_decode_total() -> Counter:
    """Return the decode outcome counter."""
    return json_decode_total


def get_json_decode_bytes() -> Histogram:
    """Return the decoded body size histogram."""
    return json_decode_bytes


def get_json_encode_total() -> Counter:
    """Return the encode outcome counter."""
    return json_encode_total
