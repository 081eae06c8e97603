"""
Irreducible descriptors, literals and instance checks.
"""

from __future__ import annotations

import json
import math
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Callable, TypeVar

from .context import Context, get_function_name
from .core import Type
from .errors import assert_
from .result import ValidationResult, failure, success
from .undefined import is_nil

T = TypeVar("T")


def _check(predicate: Callable[[Any], bool]) -> Callable[[Any, Context], ValidationResult[Any]]:
    def validate(value: Any, context: Context) -> ValidationResult[Any]:
        return success(value) if predicate(value) else failure(value, context)

    return validate


def is_string(value: Any) -> bool:
    return isinstance(value, str)


def is_number(value: Any) -> bool:
    """Any int or a finite float; bool is not a number here."""
    if isinstance(value, bool):
        return False
    # math.isfinite overflows on ints beyond the float range
    if isinstance(value, int):
        return True
    return isinstance(value, float) and math.isfinite(value)


def is_boolean(value: Any) -> bool:
    return isinstance(value, bool)


def is_array(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def is_object(value: Any) -> bool:
    return isinstance(value, Mapping)


def is_function(value: Any) -> bool:
    return callable(value)


nil: Type[None] = Type("nil", _check(is_nil))

any_: Type[Any] = Type("any", lambda value, context: success(value))

string: Type[str] = Type("string", _check(is_string))

number: Type[float] = Type("number", _check(is_number))

boolean: Type[bool] = Type("boolean", _check(is_boolean))

arr: Type[list] = Type("Array", _check(is_array))

obj: Type[Mapping] = Type("Object", _check(is_object))

fun: Type[Callable] = Type("Function", _check(is_function))


#
# literals
#


@dataclass(frozen=True, slots=True, eq=False)
class LiteralType(Type[T]):
    value: T


def literal(value: str | int | float | bool, name: str | None = None) -> LiteralType:
    """
    Match a single primitive value.

    Usage:
        literal("a")
        literal(1)
        literal(True)
    """
    assert_(
        isinstance(value, (str, int, float, bool)),
        lambda: f"literal() accepts str, int, float or bool, got {type(value).__name__}",
    )

    def validate(v: Any, context: Context) -> ValidationResult[Any]:
        # True == 1 in Python, so the bool-ness has to agree as well
        if (
            isinstance(v, (str, int, float))
            and isinstance(v, bool) == isinstance(value, bool)
            and isinstance(v, str) == isinstance(value, str)
            and v == value
        ):
            return success(v)
        return failure(v, context)

    return LiteralType(name or json.dumps(value), validate, value)


#
# class instances
#


@dataclass(frozen=True, slots=True, eq=False)
class InstanceOfType(Type[T]):
    ctor: type


def instance_of(ctor: type, name: str | None = None) -> InstanceOfType:
    assert_(
        isinstance(ctor, type),
        lambda: f"instance_of() requires a class, got {ctor!r}",
    )
    return InstanceOfType(
        name or get_function_name(ctor),
        _check(lambda v: isinstance(v, ctor)),
        ctor,
    )

