# Copyright (c) Pxshot.
# SPDX-License-Identifier: MIT
"""Infrastructure: logging and metrics used around the JSON tree."""
