"""Tests for the Value model and the ValueKind StrEnum.

Verifies:
- ValueKind has exactly 6 members with lowercase string values (StrEnum property)
- Every variant reports the right kind
- Deep equality: object key order ignored, array order significant, no
  cross-kind equality, numbers compared as IEEE-754 doubles
- Hashing agrees with equality
- Constructors reject values of the wrong Python type
- iter_children / child_count / is_container helpers
"""

from __future__ import annotations

import pytest

from jsonscope.errors import InvariantViolation
from jsonscope.tree.nodes import (
    FALSE,
    NULL,
    TRUE,
    JsonArray,
    JsonBool,
    JsonNull,
    JsonNumber,
    JsonObject,
    JsonString,
    ValueKind,
    child_count,
    is_container,
    iter_children,
)


def obj(*pairs: tuple[str, object]) -> JsonObject:
    return JsonObject(tuple(pairs))  # type: ignore[arg-type]


class TestValueKind:
    """Tests for the ValueKind StrEnum."""

    def test_has_exactly_six_members(self) -> None:
        assert len(ValueKind) == 6

    def test_values_are_lowercased(self) -> None:
        assert ValueKind.NULL == "null"
        assert ValueKind.BOOLEAN == "boolean"
        assert ValueKind.NUMBER == "number"
        assert ValueKind.STRING == "string"
        assert ValueKind.ARRAY == "array"
        assert ValueKind.OBJECT == "object"

    def test_members_are_str_instances(self) -> None:
        for member in ValueKind:
            assert isinstance(member, str), f"{member!r} is not a str instance"


class TestVariantKinds:
    def test_each_variant_reports_its_kind(self) -> None:
        assert NULL.kind is ValueKind.NULL
        assert TRUE.kind is ValueKind.BOOLEAN
        assert JsonNumber(1).kind is ValueKind.NUMBER
        assert JsonString("x").kind is ValueKind.STRING
        assert JsonArray().kind is ValueKind.ARRAY
        assert JsonObject().kind is ValueKind.OBJECT

    def test_singletons(self) -> None:
        assert NULL == JsonNull()
        assert TRUE == JsonBool(True)
        assert FALSE == JsonBool(False)


class TestDeepEquality:
    def test_object_key_order_is_ignored(self) -> None:
        a = obj(("a", JsonNumber(1)), ("b", JsonNumber(2)))
        b = obj(("b", JsonNumber(2)), ("a", JsonNumber(1)))
        assert a == b

    def test_nested_object_key_order_is_ignored(self) -> None:
        a = JsonArray((obj(("x", TRUE), ("y", NULL)),))
        b = JsonArray((obj(("y", NULL), ("x", TRUE)),))
        assert a == b

    def test_array_order_matters(self) -> None:
        assert JsonArray((JsonNumber(1), JsonNumber(2))) != JsonArray((JsonNumber(2), JsonNumber(1)))

    def test_objects_with_different_values_differ(self) -> None:
        assert obj(("a", JsonNumber(1))) != obj(("a", JsonNumber(2)))

    def test_objects_with_different_keys_differ(self) -> None:
        assert obj(("a", JsonNumber(1))) != obj(("b", JsonNumber(1)))

    def test_bool_is_not_number(self) -> None:
        assert JsonBool(True) != JsonNumber(1)
        assert JsonBool(False) != JsonNumber(0)

    def test_int_and_float_of_same_value_are_equal(self) -> None:
        assert JsonNumber(1) == JsonNumber(1.0)

    def test_string_is_not_number(self) -> None:
        assert JsonString("1") != JsonNumber(1)

    def test_empty_array_is_not_empty_object(self) -> None:
        assert JsonArray() != JsonObject()

    def test_null_equals_null(self) -> None:
        assert JsonNull() == JsonNull()


class TestDoubleNumbers:
    def test_ints_are_stored_as_doubles(self) -> None:
        value = JsonNumber(42)
        assert type(value.value) is float
        assert value.value == 42.0

    def test_integers_past_two_to_the_53_collapse(self) -> None:
        assert JsonNumber(9007199254740993) == JsonNumber(9007199254740992)
        assert hash(JsonNumber(9007199254740993)) == hash(JsonNumber(9007199254740992))

    def test_distinct_doubles_differ(self) -> None:
        assert JsonNumber(0.1) != JsonNumber(0.2)


class TestHashing:
    def test_equal_objects_hash_equal(self) -> None:
        a = obj(("a", JsonNumber(1)), ("b", JsonString("x")))
        b = obj(("b", JsonString("x")), ("a", JsonNumber(1)))
        assert hash(a) == hash(b)

    def test_values_usable_in_sets(self) -> None:
        values = {JsonNumber(1), JsonNumber(1.0), JsonString("1"), NULL, JsonNull()}
        assert len(values) == 3


class TestConstructorValidation:
    def test_bool_rejects_int(self) -> None:
        with pytest.raises(TypeError):
            JsonBool(1)  # type: ignore[arg-type]

    def test_number_rejects_bool(self) -> None:
        with pytest.raises(TypeError):
            JsonNumber(True)

    def test_number_rejects_str(self) -> None:
        with pytest.raises(TypeError):
            JsonNumber("1")  # type: ignore[arg-type]

    def test_number_rejects_nan(self) -> None:
        with pytest.raises(ValueError):
            JsonNumber(float("nan"))

    def test_number_rejects_infinity(self) -> None:
        with pytest.raises(ValueError):
            JsonNumber(float("inf"))

    def test_number_rejects_int_beyond_double_range(self) -> None:
        with pytest.raises(ValueError, match="out of range"):
            JsonNumber(10**400)

    def test_string_rejects_bytes(self) -> None:
        with pytest.raises(TypeError):
            JsonString(b"x")  # type: ignore[arg-type]

    def test_object_rejects_duplicate_keys(self) -> None:
        with pytest.raises(ValueError, match="unique"):
            obj(("a", NULL), ("a", TRUE))

    def test_values_are_frozen(self) -> None:
        with pytest.raises((AttributeError, TypeError)):
            JsonString("x").value = "y"  # type: ignore[misc]


class TestObjectAccessors:
    def test_keys_preserve_insertion_order(self) -> None:
        value = obj(("z", NULL), ("a", NULL), ("m", NULL))
        assert value.keys() == ["z", "a", "m"]

    def test_get_and_contains(self) -> None:
        value = obj(("a", JsonNumber(1)))
        assert value.get("a") == JsonNumber(1)
        assert value.get("missing") is None
        assert "a" in value
        assert "missing" not in value

    def test_len(self) -> None:
        assert len(obj(("a", NULL), ("b", NULL))) == 2


class TestHelpers:
    def test_is_container(self) -> None:
        assert is_container(JsonArray())
        assert is_container(JsonObject())
        assert not is_container(NULL)
        assert not is_container(JsonString("[]"))

    def test_child_count(self) -> None:
        assert child_count(JsonArray((NULL, NULL))) == 2
        assert child_count(obj(("a", NULL))) == 1
        assert child_count(JsonNumber(5)) == 0

    def test_iter_children_array_yields_indices(self) -> None:
        value = JsonArray((TRUE, FALSE))
        assert list(iter_children(value)) == [(0, TRUE), (1, FALSE)]

    def test_iter_children_object_yields_keys_in_order(self) -> None:
        value = obj(("b", TRUE), ("a", FALSE))
        assert list(iter_children(value)) == [("b", TRUE), ("a", FALSE)]

    def test_iter_children_scalar_is_empty(self) -> None:
        assert list(iter_children(JsonString("x"))) == []

    def test_iter_children_rejects_foreign_objects(self) -> None:
        with pytest.raises(InvariantViolation):
            list(iter_children({"a": 1}))  # type: ignore[arg-type]
