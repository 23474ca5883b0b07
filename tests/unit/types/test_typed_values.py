import pytest

from envstore.types.types import RawPair, TypedValue, ValueKind


def test_string_value_per_kind():
    assert TypedValue.string("  padded ").string_value() == "  padded "
    assert TypedValue.integer(-42).string_value() == "-42"
    assert TypedValue.boolean(True).string_value() == "true"
    assert TypedValue.boolean(False).string_value() == "false"
    assert TypedValue.double(0.5).string_value() == "0.5"


def test_str_matches_string_value():
    value = TypedValue.integer(993)
    assert str(value) == value.string_value() == "993"


def test_kind_distinguishes_equal_text():
    assert TypedValue.string("1") != TypedValue.integer(1)
    assert TypedValue.integer(1).kind is ValueKind.INTEGER


def test_typed_value_is_frozen():
    value = TypedValue.string("x")
    with pytest.raises(AttributeError):
        value.value = "y"


def test_raw_pair_requires_key():
    with pytest.raises(ValueError):
        RawPair(key="", value="x")


def test_raw_pair_empty_value_only_when_quoted():
    with pytest.raises(ValueError):
        RawPair(key="K", value="")
    assert RawPair(key="K", value="", quoted=True).value == ""
