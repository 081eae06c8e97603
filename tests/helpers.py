"""Helper assertions and descriptors for tests."""

from typing import Any

from typeshape import Err, Ok, Type, ValidationResult, chain, number, success


def assert_validation_success(result: ValidationResult[Any]) -> None:
    assert isinstance(result, Ok), [e.description for e in result.errors]


def assert_validation_failure(result: ValidationResult[Any], descriptions: list[str]) -> None:
    assert isinstance(result, Err)
    assert [e.description for e in result.errors] == descriptions


# A number descriptor that doubles what it accepts
number2: Type[float] = Type(
    "number2",
    lambda value, context: chain(
        number.validate(value, context), lambda n: success(n * 2)
    ),
)
