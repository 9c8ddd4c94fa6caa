"""Tests for the enum codec: unknown values are preserved, never rejected."""

import pytest

from ledgerwire.errors import DecodeError
from ledgerwire.kernel import WireEnum, decode_enum, encode_enum


class Color(WireEnum):
    RED = "red"
    GREEN = "green"


def test_known_value_decodes_to_member():
    """A declared wire value decodes to its symbolic member."""
    value = decode_enum(Color, "red")
    assert value is Color.RED
    assert value.is_known
    assert encode_enum(value) == "red"


def test_unknown_value_is_preserved():
    """An undeclared wire value decodes to an opaque member that re-encodes unchanged."""
    value = decode_enum(Color, "ultraviolet")
    assert isinstance(value, Color)
    assert not value.is_known
    assert value == "ultraviolet"
    assert value.value == "ultraviolet"
    assert encode_enum(value) == "ultraviolet"


def test_unknown_value_is_not_a_declared_member():
    """Opaque members never join the declared member list."""
    decode_enum(Color, "ultraviolet")
    assert [member.value for member in Color] == ["red", "green"]


def test_unknown_values_compare_by_wire_string():
    """Two decodes of the same unknown value are equal."""
    assert decode_enum(Color, "teal") == decode_enum(Color, "teal")
    assert decode_enum(Color, "teal") != decode_enum(Color, "cyan")


def test_constructor_accepts_unknown_strings():
    """Calling the enum class directly behaves like decoding."""
    assert Color("green") is Color.GREEN
    assert not Color("magenta").is_known


def test_non_string_is_rejected():
    """Wire enums are strings; anything else is a decode error with the path."""
    with pytest.raises(DecodeError) as excinfo:
        decode_enum(Color, 7, path="paint.color")
    assert excinfo.value.path == "paint.color"
    assert excinfo.value.actual == "int"


def test_strict_rejects_unknown_value():
    """Strict decoding refuses undeclared values and lists the known ones."""
    with pytest.raises(DecodeError) as excinfo:
        decode_enum(Color, "ultraviolet", path="color", strict=True)
    assert "red" in excinfo.value.expected
    assert excinfo.value.actual == "'ultraviolet'"


def test_strict_accepts_known_value():
    assert decode_enum(Color, "green", strict=True) is Color.GREEN


def test_repr_marks_unknown_members():
    assert "unknown" in repr(Color("ultraviolet"))
    assert "unknown" not in repr(Color.RED)


def test_encode_enum_passes_plain_strings_through():
    assert encode_enum("red") == "red"
