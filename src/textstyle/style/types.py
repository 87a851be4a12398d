# Copyright 2025 Tobias Olenyi.
# SPDX-License-Identifier: Apache-2.0

from enum import Enum


class StyleEvent(Enum):
    """Events emitted by a text style"""

    CHANGED = "changed"
