# Copyright 2025 Tobias Olenyi.
# SPDX-License-Identifier: Apache-2.0

"""Conversion of numeric RGB colors to their string form."""


def hex_to_string(value: int) -> str:
    """Convert a packed 0xRRGGBB integer into a ``#rrggbb`` string.

    Args:
        value: Packed RGB value; bits above the lowest 24 are ignored

    Returns:
        Lowercase, six digit hex color string
    """
    return f"#{value & 0xFFFFFF:06x}"
