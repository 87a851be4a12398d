# Copyright 2025 Tobias Olenyi.
# SPDX-License-Identifier: Apache-2.0

from typing import Any, Callable, Dict, Mapping, Optional, Union

from textstyle.core import EventEmitter, Listener, logger

from .options import DEFAULT_OPTIONS, TextStyleOptions
from .types import StyleEvent


class StyleAttribute:
    """Descriptor exposing one text style attribute as a property.

    Reads return the stored value; writes go through :meth:`TextStyle.set`.
    """

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name
        self.__doc__ = TextStyleOptions.model_fields[name].description

    def __get__(self, instance: Optional["TextStyle"], owner: type = None) -> Any:
        if instance is None:
            return self
        return getattr(instance._options, self.name)

    def __set__(self, instance: "TextStyle", value: Any) -> None:
        instance.set(self.name, value)


class TextStyle:
    """A shareable, mutable text style that announces its changes.

    Any number of text objects may hold the same style. Every assignment that
    changes a stored value synchronously emits ``"changed"`` (without
    payload) to the subscribed listeners, who then re-read whatever attributes
    they depend on. Assigning the value already stored emits nothing.

    Colors (``fill``, ``stroke``, ``drop_shadow_color``) accept strings or
    packed 0xRRGGBB integers; integers are stored as ``"#rrggbb"`` strings.

    Args:
        style: Optional mapping of attribute overrides. Keys may be snake_case
            field names or camelCase aliases; unknown keys are ignored.
        **overrides: Further overrides, taking precedence over ``style``.

    Raises:
        StyleValidationError: If an override does not have the expected shape
    """

    font = StyleAttribute()
    fill = StyleAttribute()
    align = StyleAttribute()
    stroke = StyleAttribute()
    stroke_thickness = StyleAttribute()
    word_wrap = StyleAttribute()
    word_wrap_width = StyleAttribute()
    line_height = StyleAttribute()
    drop_shadow = StyleAttribute()
    drop_shadow_color = StyleAttribute()
    drop_shadow_angle = StyleAttribute()
    drop_shadow_distance = StyleAttribute()
    drop_shadow_blur = StyleAttribute()
    padding = StyleAttribute()
    text_baseline = StyleAttribute()
    line_join = StyleAttribute()
    miter_limit = StyleAttribute()

    def __init__(self, style: Optional[Mapping[str, Any]] = None, **overrides: Any):
        self._events = EventEmitter()
        self._options = TextStyleOptions.from_overrides({**(style or {}), **overrides})

    def get(self, name: str) -> Any:
        """Return the value of attribute ``name`` (field name or camelCase alias).

        Raises:
            UnknownStyleAttributeError: If no attribute has that name
        """
        return getattr(self._options, TextStyleOptions.resolve_attribute(name))

    def set(self, name: str, value: Any) -> bool:
        """Assign attribute ``name``, emitting ``"changed"`` if the value changed.

        Args:
            name: Field name or camelCase alias
            value: New value; integers are normalized for color attributes

        Returns:
            True if the stored value changed, False otherwise

        Raises:
            UnknownStyleAttributeError: If no attribute has that name
            StyleValidationError: If the value does not have the expected shape
        """
        field_name = TextStyleOptions.resolve_attribute(name)
        value = TextStyleOptions.coerce(field_name, value)
        current = getattr(self._options, field_name)
        if value == current:
            return False

        setattr(self._options, field_name, value)
        logger.debug(f"Text style '{field_name}' changed: {current!r} -> {value!r}")
        self._events.emit(StyleEvent.CHANGED.value)
        return True

    def to_dict(self, by_alias: bool = False) -> Dict[str, Any]:
        """Snapshot of every attribute, keyed by field name or by alias."""
        return self._options.model_dump(by_alias=by_alias)

    def clone(self) -> "TextStyle":
        """Create a style with the same values and no listeners."""
        return type(self)(self.to_dict())

    # Event handling

    def on(self, event: Union[StyleEvent, str], listener: Listener) -> "TextStyle":
        self._events.on(_event_name(event), listener)
        return self

    def once(self, event: Union[StyleEvent, str], listener: Listener) -> "TextStyle":
        self._events.once(_event_name(event), listener)
        return self

    def off(self, event: Union[StyleEvent, str], listener: Listener) -> "TextStyle":
        self._events.off(_event_name(event), listener)
        return self

    def subscribe(self, listener: Callable[[], Any]) -> "TextStyle":
        """Call ``listener`` with no arguments after every change."""
        return self.on(StyleEvent.CHANGED, listener)

    def unsubscribe(self, listener: Callable[[], Any]) -> "TextStyle":
        """Stop calling ``listener`` on changes; unknown listeners are ignored."""
        return self.off(StyleEvent.CHANGED, listener)

    def listener_count(self, event: Union[StyleEvent, str] = StyleEvent.CHANGED) -> int:
        return self._events.listener_count(_event_name(event))

    def __repr__(self) -> str:
        changed = ", ".join(
            f"{name}={value!r}"
            for name, value in self.to_dict().items()
            if value != DEFAULT_OPTIONS[name]
        )
        return f"{self.__class__.__name__}({changed})"


def _event_name(event: Union[StyleEvent, str]) -> str:
    return event.value if isinstance(event, StyleEvent) else event
