# Copyright 2025 Tobias Olenyi.
# SPDX-License-Identifier: Apache-2.0

from .types import StyleEvent
from .options import (
    TextStyleOptions,
    DEFAULT_OPTIONS,
    COLOR_ATTRIBUTES,
    normalize_color,
)
from .text import TextStyle


__all__ = [
    "StyleEvent",
    "TextStyleOptions",
    "DEFAULT_OPTIONS",
    "COLOR_ATTRIBUTES",
    "normalize_color",
    "TextStyle",
]
