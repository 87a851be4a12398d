# Copyright 2025 Tobias Olenyi.
# SPDX-License-Identifier: Apache-2.0

"""Error classes for textstyle."""

from typing import Iterable, Optional


class TextStyleError(Exception):
    """Base exception class for textstyle errors.

    All custom exceptions raised by the package derive from this class so
    callers can catch them with a single handler.
    """

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class StyleValidationError(TextStyleError):
    """Raised when a style value does not have the expected shape."""

    def __init__(self, message: str, details: Optional[Iterable[str]] = None):
        self.details = list(details or [])
        if self.details:
            message = message + "\n" + "\n".join(f"  - {d}" for d in self.details)
        super().__init__(message)


class UnknownStyleAttributeError(TextStyleError, KeyError):
    """Raised when a style attribute is looked up by a name that does not exist."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown text style attribute: {name!r}")

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the plain message instead.
        return self.message
