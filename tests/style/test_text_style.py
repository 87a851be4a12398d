# Copyright 2025 Tobias Olenyi.
# SPDX-License-Identifier: Apache-2.0

"""Tests for src/textstyle/style/text.py"""

import logging
from typing import Any, List

import pytest
from pytest_mock import MockerFixture

from textstyle.core import (
    EventEmitter,
    StyleValidationError,
    UnknownStyleAttributeError,
)
from textstyle.style import DEFAULT_OPTIONS, StyleEvent, TextStyle
from textstyle.utils.color import hex_to_string


# A value differing from each default, keyed by attribute.
CHANGED_VALUES = {
    "font": "italic 12px Courier",
    "fill": "red",
    "align": "center",
    "stroke": "#00ff00",
    "stroke_thickness": 2,
    "word_wrap": True,
    "word_wrap_width": 250,
    "line_height": 18,
    "drop_shadow": True,
    "drop_shadow_color": "blue",
    "drop_shadow_angle": 1.0,
    "drop_shadow_distance": 8,
    "drop_shadow_blur": 3,
    "padding": 4,
    "text_baseline": "top",
    "line_join": "round",
    "miter_limit": 4,
}


@pytest.fixture
def style() -> TextStyle:
    """Provides a style with default values."""
    return TextStyle()


@pytest.fixture
def listener(style: TextStyle, mocker: MockerFixture):
    """Provides a mock subscribed to the style's change notifications."""
    mock = mocker.Mock()
    style.subscribe(mock)
    return mock


def test_changed_values_cover_every_attribute() -> None:
    """Test that the fixture table above lists every attribute."""
    assert set(CHANGED_VALUES) == set(DEFAULT_OPTIONS)


@pytest.mark.parametrize("name", sorted(DEFAULT_OPTIONS))
def test_defaults(style: TextStyle, name: str) -> None:
    """Test that a new style holds the default of every attribute."""
    assert getattr(style, name) == DEFAULT_OPTIONS[name]
    assert style.get(name) == DEFAULT_OPTIONS[name]


@pytest.mark.parametrize("name, value", sorted(CHANGED_VALUES.items()))
def test_set_emits_once_per_change(
    style: TextStyle, listener: Any, name: str, value: Any
) -> None:
    """Test that repeating an assignment does not notify again."""
    setattr(style, name, value)
    setattr(style, name, value)

    assert getattr(style, name) == value
    listener.assert_called_once_with()


def test_set_default_value_is_noop(style: TextStyle, listener: Any) -> None:
    """Test that assigning the current value emits nothing."""
    style.font = "bold 20pt Arial"
    style.line_height = None
    assert style.set("wordWrap", False) is False

    listener.assert_not_called()


def test_construction_emits_nothing(mocker: MockerFixture) -> None:
    """Test that overrides applied at construction do not notify."""
    emit = mocker.spy(EventEmitter, "emit")
    style = TextStyle({"wordWrap": True, "wordWrapWidth": 200})

    emit.assert_not_called()
    assert style.listener_count() == 0


def test_construction_overrides() -> None:
    """Test construction from a partial override map."""
    style = TextStyle({"wordWrap": True, "wordWrapWidth": 200, "unknown": 1})

    assert style.get("wordWrap") is True
    assert style.get("wordWrapWidth") == 200
    for name, default in DEFAULT_OPTIONS.items():
        if name not in ("word_wrap", "word_wrap_width"):
            assert style.get(name) == default


def test_keyword_overrides_take_precedence() -> None:
    """Test that keyword arguments win over the mapping."""
    style = TextStyle({"fill": "red", "align": "right"}, fill=0x123456)

    assert style.fill == "#123456"
    assert style.align == "right"


def test_numeric_color_is_normalized(style: TextStyle, listener: Any) -> None:
    """Test that a numeric fill is stored as its string form."""
    style.fill = 0xFF0000

    assert style.fill == hex_to_string(0xFF0000) == "#ff0000"
    listener.assert_called_once_with()


def test_numeric_and_string_color_are_equivalent(
    style: TextStyle, listener: Any
) -> None:
    """Test that a numeric color and its string form are the same value."""
    style.stroke = 0x00FF00
    style.stroke = "#00ff00"
    style.drop_shadow_color = 0
    style.drop_shadow_color = "#000000"

    assert listener.call_count == 1


def test_float_color_is_normalized(style: TextStyle, listener: Any) -> None:
    """Test that a float color is stored like the equivalent integer."""
    style.fill = 16711680.0
    style.fill = 0xFF0000
    style.stroke = 255.75

    assert style.fill == "#ff0000"
    assert style.stroke == "#0000ff"
    assert listener.call_count == 2


@pytest.mark.parametrize(
    "name, value",
    [("word_wrap", "yes"), ("stroke_thickness", "3"), ("miter_limit", True)],
)
def test_wrong_type_is_not_converted(
    style: TextStyle, listener: Any, name: str, value: Any
) -> None:
    """Test that wrong-typed values raise instead of being stored converted."""
    with pytest.raises(StyleValidationError):
        style.set(name, value)

    assert style.get(name) == DEFAULT_OPTIONS[name]
    listener.assert_not_called()


def test_color_equality_is_syntactic(style: TextStyle, listener: Any) -> None:
    """Test that equivalent but differently written colors still notify."""
    style.fill = "#FFF"
    style.fill = "#ffffff"
    style.fill = "white"

    assert listener.call_count == 3


def test_no_semantic_validation(style: TextStyle) -> None:
    """Test that values of the right shape are stored without checks."""
    style.align = "sideways"
    style.fill = "definitely not a color"

    assert style.align == "sideways"
    assert style.fill == "definitely not a color"


def test_set_rejects_wrong_shape(style: TextStyle, listener: Any) -> None:
    """Test that uncoercible values raise and leave the style unchanged."""
    with pytest.raises(StyleValidationError):
        style.padding = "lots"

    assert style.padding == 0
    listener.assert_not_called()


def test_unknown_attribute(style: TextStyle) -> None:
    """Test name-based access with unknown names."""
    with pytest.raises(UnknownStyleAttributeError):
        style.get("colour")
    with pytest.raises(UnknownStyleAttributeError):
        style.set("colour", "red")


def test_set_returns_whether_changed(style: TextStyle) -> None:
    """Test the return value of set."""
    assert style.set("miterLimit", 3) is True
    assert style.set("miter_limit", 3) is False
    assert style.miter_limit == 3


def test_unsubscribe(style: TextStyle, mocker: MockerFixture) -> None:
    """Test that unsubscribed listeners are not called."""
    listener = mocker.Mock()
    style.subscribe(listener)
    style.unsubscribe(listener)
    style.unsubscribe(mocker.Mock())

    style.padding = 2

    listener.assert_not_called()


def test_unsubscribe_detaches_repeated_listener(style: TextStyle) -> None:
    """Test that one unsubscribe removes a listener subscribed twice."""
    calls: List[int] = []

    def listener() -> None:
        calls.append(style.padding)

    style.subscribe(listener)
    style.subscribe(listener)
    style.unsubscribe(listener)

    style.padding = 3

    assert calls == []
    assert style.listener_count() == 0


def test_multiple_listeners_in_order(style: TextStyle) -> None:
    """Test that every subscriber is notified in subscription order."""
    calls: List[str] = []
    style.subscribe(lambda: calls.append("layout"))
    style.on(StyleEvent.CHANGED, lambda: calls.append("bitmap"))
    style.on("changed", lambda: calls.append("bounds"))

    style.word_wrap = True

    assert calls == ["layout", "bitmap", "bounds"]


def test_listener_reads_new_value(style: TextStyle) -> None:
    """Test that the new value is stored before listeners run."""
    seen: List[Any] = []
    style.subscribe(lambda: seen.append(style.font))

    style.font = "12px serif"

    assert seen == ["12px serif"]


def test_once(style: TextStyle, mocker: MockerFixture) -> None:
    """Test one-shot subscriptions."""
    listener = mocker.Mock()
    style.once(StyleEvent.CHANGED, listener)

    style.padding = 1
    style.padding = 2

    listener.assert_called_once_with()


def test_clone_copies_values() -> None:
    """Test that a clone starts with the same attribute values."""
    original = TextStyle(fill=0xABCDEF, word_wrap=True, line_height=30)

    clone = original.clone()

    assert clone is not original
    assert clone.to_dict() == original.to_dict()


@pytest.mark.parametrize("name, value", sorted(CHANGED_VALUES.items()))
def test_clone_is_independent(name: str, value: Any) -> None:
    """Test that mutating one copy never affects the other."""
    original = TextStyle()
    clone = original.clone()

    original.set(name, value)
    assert clone.get(name) == DEFAULT_OPTIONS[name]

    other = original.clone()
    other.set(name, DEFAULT_OPTIONS[name])
    assert original.get(name) == value


def test_clone_has_no_listeners(style: TextStyle, listener: Any, mocker: MockerFixture) -> None:
    """Test that listeners stay with the instance they were added to."""
    clone = style.clone()
    clone_listener = mocker.Mock()
    clone.subscribe(clone_listener)

    assert clone.listener_count() == 1
    clone.fill = "red"
    listener.assert_not_called()

    style.fill = "blue"
    listener.assert_called_once_with()
    clone_listener.assert_called_once_with()


def test_to_dict_by_alias() -> None:
    """Test the aliased snapshot."""
    snapshot = TextStyle(dropShadow=True).to_dict(by_alias=True)

    assert snapshot["dropShadow"] is True
    assert snapshot["font"] == "bold 20pt Arial"
    assert "drop_shadow" not in snapshot


def test_reentrant_listener(style: TextStyle) -> None:
    """Test that a listener setting attributes triggers nested notifications."""
    calls: List[int] = []

    def listener() -> None:
        calls.append(style.padding)
        if style.padding < 3:
            style.padding += 1

    style.subscribe(listener)
    style.padding = 1

    assert calls == [1, 2, 3]


def test_change_is_logged(style: TextStyle, caplog: pytest.LogCaptureFixture) -> None:
    """Test that applied changes are logged at debug level."""
    with caplog.at_level(logging.DEBUG, logger="textstyle"):
        style.align = "center"
        style.align = "center"

    messages = [r.getMessage() for r in caplog.records]
    assert messages == ["Text style 'align' changed: 'left' -> 'center'"]


def test_repr_lists_changed_attributes() -> None:
    """Test that the representation shows non-default attributes."""
    assert repr(TextStyle()) == "TextStyle()"
    assert repr(TextStyle(fill=0xFF0000, wordWrap=True)) == (
        "TextStyle(fill='#ff0000', word_wrap=True)"
    )


def test_class_attribute_docs() -> None:
    """Test that attribute descriptors carry the field descriptions."""
    assert TextStyle.word_wrap.__doc__ == "Whether to wrap words"
