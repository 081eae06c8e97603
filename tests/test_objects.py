"""
Tests for object, exact, shape and keys descriptors.
"""

from collections import OrderedDict

import pytest
from helpers import assert_validation_failure, assert_validation_success, number2

from typeshape import (
    ExactType,
    KeysType,
    ObjectType,
    RuntimeTypeError,
    ShapeType,
    array,
    exact,
    from_success,
    is_,
    keys,
    maybe,
    number,
    object_,
    refinement,
    shape,
    string,
    validate,
)


class TestObject:
    def test_introspection(self):
        T = object_({"a": number, "b": string})
        assert isinstance(T, ObjectType)
        assert T.name == "{ a: number, b: string }"
        assert list(T.props) == ["a", "b"]
        assert T.props["a"] is number

    def test_props_are_read_only(self):
        props = {"a": number}
        T = object_(props)
        props["b"] = string
        assert list(T.props) == ["a"]
        with pytest.raises(TypeError):
            T.props["c"] = string

    def test_descriptor_is_frozen(self):
        T = object_({"a": number})
        with pytest.raises(AttributeError):
            T.name = "other"

    def test_nested(self):
        T = object_(
            {
                "a": number,
                "b": object_({"c": string, "d": object_({"e": number})}),
            }
        )
        assert_validation_success(validate({"a": 1, "b": {"c": "x", "d": {"e": 2}}}, T))
        assert not is_({}, T)

    def test_missing_props_are_undefined(self):
        assert_validation_failure(
            validate({}, object_({"a": string})),
            ["Invalid value undefined supplied to : { a: string }/a: string"],
        )
        assert is_({}, object_({"a": maybe(string)}))

    def test_not_an_object(self):
        assert_validation_failure(
            validate(1, object_({"a": number})),
            ["Invalid value 1 supplied to : { a: number }"],
        )
        assert not is_([], object_({}))

    def test_accumulates_prop_errors(self):
        T = object_({"a": number, "b": string})
        assert_validation_failure(
            validate({"a": "x", "b": 1}, T),
            [
                'Invalid value "x" supplied to : { a: number, b: string }/a: number',
                "Invalid value 1 supplied to : { a: number, b: string }/b: string",
            ],
        )

    def test_nested_error_paths(self):
        T = object_({"a": object_({"b": array(number)})}, "T")
        assert_validation_failure(
            validate({"a": {"b": [1, "x"]}}, T),
            ['Invalid value "x" supplied to : T/a: { b: Array<number> }/b: Array<number>/1: number'],
        )

    def test_ignores_additional_props(self):
        value = {"a": 1, "extra": "x"}
        assert from_success(validate(value, object_({"a": number}))) is value

    def test_accepts_any_mapping(self):
        assert is_(OrderedDict(a=1), object_({"a": number}))

    def test_returns_same_reference(self):
        value = {"a": 1}
        assert from_success(validate(value, object_({"a": number2}))) is value


class TestExact:
    def test_introspection(self):
        T = exact({"a": string})
        assert isinstance(T, ExactType)
        assert T.name == "$Exact<{ a: string }>"
        assert T.props["a"] is string

    def test_valid(self):
        value = {"a": "s"}
        assert from_success(validate(value, exact({"a": string}))) is value

    def test_invalid(self):
        T = exact({"a": string})
        assert_validation_failure(
            validate(1, T), ["Invalid value 1 supplied to : $Exact<{ a: string }>"]
        )
        assert_validation_failure(
            validate({}, T),
            ["Invalid value undefined supplied to : $Exact<{ a: string }>/a: string"],
        )
        assert_validation_failure(
            validate({"a": 1}, T),
            ["Invalid value 1 supplied to : $Exact<{ a: string }>/a: string"],
        )

    def test_additional_props(self):
        T = exact({"a": string})
        result = validate({"a": "s", "extra": 2}, T)
        assert_validation_failure(
            result, ["Invalid value 2 supplied to : $Exact<{ a: string }>/extra: nil"]
        )
        assert result.errors[0].context[-1].key == "extra"
        assert result.errors[0].context[-1].name == "nil"

    def test_accumulates_prop_and_additional_errors(self):
        T = exact({"a": string})
        assert_validation_failure(
            validate({"a": 1, "b": 2}, T),
            [
                "Invalid value 1 supplied to : $Exact<{ a: string }>/a: string",
                "Invalid value 2 supplied to : $Exact<{ a: string }>/b: nil",
            ],
        )

    def test_name_override(self):
        T = exact({"a": string}, "A")
        assert_validation_failure(
            validate({"a": 1}, T), ["Invalid value 1 supplied to : A/a: string"]
        )


class TestShape:
    def test_introspection(self):
        O = object_({"a": string})
        T = shape(O)
        assert isinstance(T, ShapeType)
        assert T.name == "$Shape<{ a: string }>"
        assert T.type is O

    def test_valid(self):
        T = shape(object_({"a": string}))
        assert_validation_success(validate({}, T))
        assert_validation_success(validate({"a": "s"}, T))

    def test_returns_same_reference_when_unchanged(self):
        value = {"a": "s"}
        assert from_success(validate(value, shape(object_({"a": string})))) is value

    def test_returns_new_object_when_changed(self):
        value = {"a": 1}
        result = from_success(validate(value, shape(object_({"a": number2}))))
        assert result == {"a": 2}
        assert result is not value
        assert value == {"a": 1}

    def test_merges_changed_values_over_input(self):
        T = shape(object_({"a": number2, "b": string}))
        assert from_success(validate({"a": 1, "b": "s"}, T)) == {"a": 2, "b": "s"}

    def test_invalid(self):
        T = shape(object_({"a": string}))
        assert_validation_failure(
            validate(1, T), ["Invalid value 1 supplied to : $Shape<{ a: string }>"]
        )
        assert_validation_failure(
            validate({"a": 1}, T),
            ["Invalid value 1 supplied to : $Shape<{ a: string }>/a: string"],
        )

    def test_additional_props(self):
        T = shape(object_({"a": number}))
        assert_validation_failure(
            validate({"a": 1, "b": 2}, T),
            ["Invalid value 2 supplied to : $Shape<{ a: number }>/b: nil"],
        )

    def test_present_none_is_validated(self):
        T = shape(object_({"a": number}))
        assert not is_({"a": None}, T)

    def test_of_exact_type(self):
        assert is_({}, shape(exact({"a": number})))

    def test_requires_props(self):
        with pytest.raises(RuntimeTypeError):
            shape(number)


class TestKeys:
    def test_introspection(self):
        O = object_({"a": number, "b": number})
        T = keys(O)
        assert isinstance(T, KeysType)
        assert T.name == "$Keys<{ a: number, b: number }>"
        assert T.type is O

    def test_known_keys(self):
        T = keys(object_({"a": number, "b": number}))
        assert is_("a", T)
        assert is_("b", T)
        assert_validation_failure(
            validate("c", T), ['Invalid value "c" supplied to : $Keys<{ a: number, b: number }>']
        )

    def test_not_a_string(self):
        T = keys(object_({"a": number}))
        assert_validation_failure(
            validate(1, T), ["Invalid value 1 supplied to : $Keys<{ a: number }>"]
        )

    def test_without_props_any_string_passes(self):
        T = keys(refinement(string, lambda s: True, "S"))
        assert is_("anything", T)
        assert not is_(1, T)
