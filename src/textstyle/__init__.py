# Copyright 2025 Tobias Olenyi.
# SPDX-License-Identifier: Apache-2.0

"""Mutable, change-observable text style configuration."""

__app_name__ = "textstyle"
__version__ = "0.1.0"

from .core import (  # noqa: E402
    EventEmitter,
    TextStyleError,
    StyleValidationError,
    UnknownStyleAttributeError,
)
from .style import TextStyle, TextStyleOptions, StyleEvent, DEFAULT_OPTIONS  # noqa: E402

__all__ = [
    "__app_name__",
    "__version__",
    "EventEmitter",
    "TextStyle",
    "TextStyleOptions",
    "StyleEvent",
    "DEFAULT_OPTIONS",
    "TextStyleError",
    "StyleValidationError",
    "UnknownStyleAttributeError",
]
