"""
Validation entry points.
"""

from __future__ import annotations

from typing import Any, TypeVar

from .context import Context
from .core import Type, get_default_context
from .result import ValidationResult, from_success, is_success

T = TypeVar("T")


def validate_with_context(
    value: Any, context: Context, type_: Type[T]
) -> ValidationResult[T]:
    return type_.validate(value, context)


def validate(value: Any, type_: Type[T]) -> ValidationResult[T]:
    """
    Validate a value against a descriptor, starting from the root context.

    Never raises on invalid input.

    Returns:
        Ok(value) if validation passes
        Err([ValidationError, ...]) if validation fails
    """
    return validate_with_context(value, get_default_context(type_), type_)


def unsafe_validate(value: Any, type_: Type[T]) -> T:
    """
    Validate and extract the value.

    Raises:
        RuntimeTypeError: If validation fails, listing every error description.
    """
    return from_success(validate(value, type_))


def is_(value: Any, type_: Type[Any]) -> bool:
    return is_success(validate(value, type_))
