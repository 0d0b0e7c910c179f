# Copyright (c) Pxshot.
# SPDX-License-Identifier: MIT
"""Prometheus metrics for the codec boundary."""
