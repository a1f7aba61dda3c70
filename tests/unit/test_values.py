"""Tests for EncodableValue."""

import json
from datetime import datetime, timezone
from enum import Enum

import pytest
from hypothesis import given
from hypothesis import strategies as st

from logprep.core.values import EncodableValue, ValueKind, wrap_attributes

json_values = st.recursive(
    st.none()
    | st.booleans()
    | st.integers()
    | st.floats(allow_nan=False, allow_infinity=False)
    | st.text(),
    lambda children: st.lists(children, max_size=4)
    | st.dictionaries(st.text(max_size=8), children, max_size=4),
    max_leaves=20,
)


class Color(Enum):
    RED = "red"


class TestWrap:
    """Tests for EncodableValue.wrap()."""

    @pytest.mark.core
    @pytest.mark.parametrize(
        ("obj", "kind"),
        [
            ("value", ValueKind.STRING),
            (42, ValueKind.NUMBER),
            (3.14, ValueKind.NUMBER),
            (True, ValueKind.BOOLEAN),
            (None, ValueKind.NULL),
            ({"a": 1}, ValueKind.MAPPING),
            ([1, 2], ValueKind.SEQUENCE),
            ((1, 2), ValueKind.SEQUENCE),
        ],
    )
    def test_wrap_classifies_value(self, obj: object, kind: ValueKind) -> None:
        """Wrap picks the variant matching the Python type."""
        assert EncodableValue.wrap(obj).kind is kind

    @pytest.mark.core
    def test_bool_is_not_a_number(self) -> None:
        """Booleans wrap as BOOLEAN even though bool subclasses int."""
        assert EncodableValue.wrap(False).kind is ValueKind.BOOLEAN
        assert EncodableValue.wrap(True) != EncodableValue.wrap(1)

    @pytest.mark.core
    @pytest.mark.parametrize("obj", ["x", {"a": 1}, [1, 2]])
    def test_values_are_unhashable(self, obj: object) -> None:
        """No variant offers a hash, mapping payloads included."""
        with pytest.raises(TypeError):
            hash(EncodableValue.wrap(obj))

    @pytest.mark.core
    def test_nested_values_are_wrapped(self) -> None:
        """Mapping and sequence members are wrapped recursively."""
        value = EncodableValue.wrap({"person": {"tags": ["a", None]}})

        person = value.value["person"]
        assert person.kind is ValueKind.MAPPING
        assert person.value["tags"].value == (
            EncodableValue(ValueKind.STRING, "a"),
            EncodableValue(ValueKind.NULL, None),
        )

    @pytest.mark.core
    def test_mapping_keys_are_coerced_to_strings(self) -> None:
        """Non-string mapping keys become strings."""
        assert EncodableValue.wrap({1: "one"}).to_native() == {"1": "one"}

    @pytest.mark.core
    def test_wrapping_a_wrapped_value_returns_it(self) -> None:
        """Wrap is a no-op on an EncodableValue."""
        value = EncodableValue.wrap("x")
        assert EncodableValue.wrap(value) is value

    @pytest.mark.core
    def test_datetime_wraps_as_iso_string(self) -> None:
        """Datetimes are carried as ISO 8601 strings."""
        moment = datetime(2019, 12, 15, 10, 0, tzinfo=timezone.utc)
        assert EncodableValue.wrap(moment) == EncodableValue(
            ValueKind.STRING, "2019-12-15T10:00:00+00:00"
        )

    @pytest.mark.core
    def test_enum_wraps_its_value(self) -> None:
        """Enum members wrap their underlying value."""
        assert EncodableValue.wrap(Color.RED) == EncodableValue.wrap("red")

    @pytest.mark.core
    def test_unknown_objects_wrap_as_strings(self) -> None:
        """Objects with no JSON shape are carried via str()."""

        class Point:
            def __str__(self) -> str:
                return "Point(1, 2)"

        assert EncodableValue.wrap(Point()) == EncodableValue(
            ValueKind.STRING, "Point(1, 2)"
        )


class TestEquality:
    """Tests for structural equality."""

    @pytest.mark.core
    def test_equal_when_underlying_values_equal(self) -> None:
        """Values wrapping equal data compare equal."""
        assert EncodableValue.wrap({"a": [1, "b"]}) == EncodableValue.wrap({"a": [1, "b"]})

    @pytest.mark.core
    def test_int_and_float_numbers_compare_by_value(self) -> None:
        """1 and 1.0 are the same number."""
        assert EncodableValue.wrap(1) == EncodableValue.wrap(1.0)

    @pytest.mark.core
    def test_different_values_are_not_equal(self) -> None:
        """Different payloads compare unequal."""
        assert EncodableValue.wrap("1") != EncodableValue.wrap(1)
        assert EncodableValue.wrap([1]) != EncodableValue.wrap([1, 2])


class TestToNative:
    """Tests for EncodableValue.to_native()."""

    @pytest.mark.core
    def test_sequence_unwraps_to_list(self) -> None:
        """Tuples come back as lists, the JSON shape of a sequence."""
        assert EncodableValue.wrap((1, 2)).to_native() == [1, 2]

    @pytest.mark.core
    @given(value=json_values)
    def test_encodes_like_the_wrapped_value(self, value: object) -> None:
        """A wrapped value serializes to the same JSON as the raw value."""
        wrapped = EncodableValue.wrap(value)
        assert json.dumps(wrapped.to_native()) == json.dumps(value)


class TestWrapAttributes:
    """Tests for wrap_attributes()."""

    @pytest.mark.core
    def test_keeps_insertion_order(self) -> None:
        """Attribute order survives wrapping."""
        wrapped = wrap_attributes({"z": 1, "a": 2, "m": 3})
        assert list(wrapped) == ["z", "a", "m"]
