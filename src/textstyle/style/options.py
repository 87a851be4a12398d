# Copyright 2025 Tobias Olenyi.
# SPDX-License-Identifier: Apache-2.0

"""Attribute record and defaults for text styles."""

import math
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    TypeAdapter,
    ValidationError,
    field_validator,
)

from textstyle.core import StyleValidationError, UnknownStyleAttributeError, logger
from textstyle.utils.color import hex_to_string

Number = Union[int, float]

COLOR_ATTRIBUTES = frozenset({"fill", "stroke", "drop_shadow_color"})


def normalize_color(value: Any) -> Any:
    """Convert a numeric color to its string form; other values pass through.

    Floats are truncated towards zero. Booleans, NaN and infinities are not
    numeric colors and pass through unchanged.
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return hex_to_string(value)
    if isinstance(value, float) and math.isfinite(value):
        return hex_to_string(int(value))
    return value


class TextStyleOptions(BaseModel):
    """The complete set of text style attributes.

    Field names are snake_case; the camelCase aliases (``wordWrap``,
    ``dropShadowColor``, ...) are accepted as well. Unknown keys are ignored.
    Values are only checked for their shape, never for semantic validity.
    The check is strict: a value of the wrong type is rejected, not converted.
    """

    model_config = ConfigDict(
        title="Text Style Options",
        populate_by_name=True,
        extra="ignore",
        strict=True,
    )

    font: str = Field(
        default="bold 20pt Arial", description="Style and size of the font"
    )
    fill: str = Field(default="black", description="Fill color of the text")
    align: str = Field(
        default="left",
        description="Alignment of multiline text: 'left', 'center' or 'right'",
    )
    stroke: str = Field(default="black", description="Color of the text stroke")
    stroke_thickness: Number = Field(
        default=0, alias="strokeThickness", description="Stroke thickness, 0 for none"
    )
    word_wrap: bool = Field(
        default=False, alias="wordWrap", description="Whether to wrap words"
    )
    word_wrap_width: Number = Field(
        default=100, alias="wordWrapWidth", description="Width at which text wraps"
    )
    line_height: Optional[Number] = Field(
        default=None,
        alias="lineHeight",
        description="Vertical space per line; None derives it from the font",
    )
    drop_shadow: bool = Field(
        default=False, alias="dropShadow", description="Whether to draw a drop shadow"
    )
    drop_shadow_color: str = Field(
        default="#000000", alias="dropShadowColor", description="Drop shadow color"
    )
    drop_shadow_angle: Number = Field(
        default=math.pi / 6,
        alias="dropShadowAngle",
        description="Drop shadow angle in radians",
    )
    drop_shadow_distance: Number = Field(
        default=5, alias="dropShadowDistance", description="Drop shadow distance"
    )
    drop_shadow_blur: Number = Field(
        default=0, alias="dropShadowBlur", description="Drop shadow blur radius"
    )
    padding: Number = Field(
        default=0, description="Padding added above and below the text"
    )
    text_baseline: str = Field(
        default="alphabetic",
        alias="textBaseline",
        description="Baseline the text is rendered on",
    )
    line_join: str = Field(
        default="miter",
        alias="lineJoin",
        description="Corner type of the stroke: 'miter', 'round' or 'bevel'",
    )
    miter_limit: Number = Field(
        default=10, alias="miterLimit", description="Miter limit for 'miter' joins"
    )

    @field_validator(*sorted(COLOR_ATTRIBUTES), mode="before")
    @classmethod
    def _normalize_color(cls, value: Any) -> Any:
        return normalize_color(value)

    @classmethod
    def resolve_attribute(cls, name: str) -> str:
        """Map a field name or its camelCase alias to the field name.

        Raises:
            UnknownStyleAttributeError: If no attribute has that name
        """
        try:
            return _FIELD_NAMES[name]
        except (KeyError, TypeError):
            raise UnknownStyleAttributeError(name) from None

    @classmethod
    def from_overrides(
        cls, overrides: Optional[Mapping[str, Any]] = None
    ) -> "TextStyleOptions":
        """Build options from the defaults with ``overrides`` applied.

        Keys may be field names or aliases; later keys win when both forms of
        the same attribute are present. Unknown keys are ignored.

        Raises:
            StyleValidationError: If a value does not have the expected shape
        """
        values: Dict[str, Any] = {}
        ignored = []
        for key, value in (overrides or {}).items():
            field_name = _FIELD_NAMES.get(key)
            if field_name is None:
                ignored.append(key)
            else:
                values[field_name] = value

        if ignored:
            logger.debug(f"Ignoring unknown text style options: {ignored}")

        try:
            return cls.model_validate(values)
        except ValidationError as e:
            raise StyleValidationError(
                "Invalid text style options:", _describe(e)
            ) from e

    @classmethod
    def coerce(cls, name: str, value: Any) -> Any:
        """Bring ``value`` into the stored form of attribute ``name``.

        Colors are normalized first, then the value is checked against the
        attribute's type.

        Raises:
            StyleValidationError: If the value does not have the expected shape
        """
        if name in COLOR_ATTRIBUTES:
            value = normalize_color(value)
        try:
            return _ADAPTERS[name].validate_python(value, strict=True)
        except ValidationError as e:
            raise StyleValidationError(
                f"Invalid value for text style attribute '{name}':",
                _describe(e, name),
            ) from e


def _describe(error: ValidationError, name: Optional[str] = None) -> list:
    details = []
    for err in error.errors():
        location = ".".join(str(part) for part in err["loc"]) or name
        details.append(f"{location}: {err['msg']}")
    return details


_FIELD_NAMES: Dict[str, str] = {}
for _name, _info in TextStyleOptions.model_fields.items():
    _FIELD_NAMES[_name] = _name
    if _info.alias:
        _FIELD_NAMES[_info.alias] = _name

_ADAPTERS: Dict[str, TypeAdapter] = {
    name: TypeAdapter(info.annotation)
    for name, info in TextStyleOptions.model_fields.items()
}

DEFAULT_OPTIONS: Mapping[str, Any] = MappingProxyType(
    TextStyleOptions().model_dump()
)
