# Copyright 2025 Tobias Olenyi.
# SPDX-License-Identifier: Apache-2.0

from .color import hex_to_string
from .logger import setup_logging

__all__ = [
    "hex_to_string",
    "setup_logging",
]
