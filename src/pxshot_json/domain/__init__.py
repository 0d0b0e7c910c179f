# Copyright (c) Pxshot.
# SPDX-License-Identifier: MIT
"""Domain layer: exceptions and enumerations with no third-party imports."""
