"""
Result algebra for typeshape validation.

Provides a minimal Result type (Ok/Err) and the combinators used to sequence
validations.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar

from .context import Context, ValidationError, get_validation_error
from .errors import crash

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Success result containing the validated value."""

    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False


@dataclass(frozen=True, slots=True)
class Err:
    """Failure result containing a non-empty list of errors, in traversal order."""

    errors: list[ValidationError]

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True


ValidationResult = Ok[T] | Err
Validation = Callable[[Any, Context], "ValidationResult[T]"]


def success(value: T) -> ValidationResult[T]:
    return Ok(value)


# Applicative `of`
of = success


def failure(value: Any, context: Context) -> ValidationResult[Any]:
    """A failure with exactly one error describing `value` at `context`."""
    return Err([get_validation_error(value, context)])


def failures(errors: list[ValidationError]) -> ValidationResult[Any]:
    return Err(errors)


def is_success(validation: ValidationResult[Any]) -> bool:
    return isinstance(validation, Ok)


def is_failure(validation: ValidationResult[Any]) -> bool:
    return isinstance(validation, Err)


def from_failure(validation: ValidationResult[Any]) -> list[ValidationError]:
    if isinstance(validation, Ok):
        crash("from_failure called on a successful validation")
    return validation.errors


def from_success(validation: ValidationResult[T]) -> T:
    """
    Extract the validated value.

    Raises:
        RuntimeTypeError: If the validation failed. The message lists every
            error description, one per line.
    """
    if isinstance(validation, Err):
        crash("\n".join(e.description for e in validation.errors))
    return validation.value


def map_(validation: ValidationResult[T], f: Callable[[T], U]) -> ValidationResult[U]:
    if isinstance(validation, Err):
        return validation
    return Ok(f(validation.value))


def chain(
    validation: ValidationResult[T], f: Callable[[T], ValidationResult[U]]
) -> ValidationResult[U]:
    if isinstance(validation, Err):
        return validation
    return f(validation.value)


def ap(
    validation: ValidationResult[T], f: ValidationResult[Callable[[T], U]]
) -> ValidationResult[U]:
    """
    Apply a wrapped function to a wrapped value.

    When both sides failed the errors are concatenated, function side first.
    """
    if isinstance(f, Err):
        if isinstance(validation, Err):
            return Err([*f.errors, *validation.errors])
        return f
    return map_(validation, f.value)
