# Copyright 2025 Tobias Olenyi.
# SPDX-License-Identifier: Apache-2.0

from .errors import (
    TextStyleError,
    StyleValidationError,
    UnknownStyleAttributeError,
)

from .events import EventEmitter, Listener

from .logger import logger

__all__ = [
    "TextStyleError",
    "StyleValidationError",
    "UnknownStyleAttributeError",
    "EventEmitter",
    "Listener",
    "logger",
]
