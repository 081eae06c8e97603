"""
Object descriptors: plain objects, exact objects, partial shapes and key sets.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, TypeVar

from .context import Context, ValidationError, get_validation_error
from .core import Type, get_context_entry, get_type_name
from .errors import assert_
from .primitives import nil, obj, string
from .result import ValidationResult, chain, failure, failures, success
from .undefined import UNDEFINED

T = TypeVar("T")

Props = Mapping[str, Type[Any]]


def _freeze(props: Props) -> Props:
    return MappingProxyType(dict(props))


def get_default_object_type_name(props: Props) -> str:
    return "{ " + ", ".join(f"{k}: {t.name}" for k, t in props.items()) + " }"


def check_additional_props(
    props: Props, o: Mapping[Any, Any], context: Context
) -> list[ValidationError]:
    """One error per key of `o` that is not declared in `props`, typed as nil."""
    return [
        get_validation_error(v, (*context, get_context_entry(str(k), nil)))
        for k, v in o.items()
        if k not in props
    ]


#
# objects
#


@dataclass(frozen=True, slots=True, eq=False)
class ObjectType(Type[T]):
    props: Props


def object_(props: Props, name: str | None = None) -> ObjectType:
    """
    Every declared prop must validate; undeclared keys are ignored.

    A missing key is validated as UNDEFINED, so optional props need `maybe`.

    Usage:
        Person = object_({"name": string, "age": maybe(number)})
    """
    props = _freeze(props)

    def validate(value: Any, context: Context) -> ValidationResult[Any]:
        def check_props(o: Mapping[Any, Any]) -> ValidationResult[Any]:
            errors: list[ValidationError] = []
            for k, type_ in props.items():
                validation = type_.validate(
                    o.get(k, UNDEFINED), (*context, get_context_entry(k, type_))
                )
                if validation.is_err():
                    errors.extend(validation.errors)
            return failures(errors) if errors else success(o)

        return chain(obj.validate(value, context), check_props)

    return ObjectType(name or get_default_object_type_name(props), validate, props)


#
# $Keys
#


@dataclass(frozen=True, slots=True, eq=False)
class KeysType(Type[T]):
    type: Type[Any]


def keys(type_: Type[Any], name: str | None = None) -> KeysType:
    """
    A string naming one of the props of `type_`.

    Descriptors without props accept any string.
    """
    props = getattr(type_, "props", None)
    known = frozenset(props) if isinstance(props, Mapping) else None

    def validate(value: Any, context: Context) -> ValidationResult[Any]:
        return chain(
            string.validate(value, context),
            lambda k: success(k) if known is None or k in known else failure(value, context),
        )

    return KeysType(name or f"$Keys<{get_type_name(type_)}>", validate, type_)


#
# $Exact
#


@dataclass(frozen=True, slots=True, eq=False)
class ExactType(Type[T]):
    props: Props


def exact(props: Props, name: str | None = None) -> ExactType:
    """
    Like object_, but every undeclared key is an error.

    Usage:
        validate({"a": "s", "extra": 2}, exact({"a": string}))
        # Err: "Invalid value 2 supplied to : $Exact<{ a: string }>/extra: nil"
    """
    props = _freeze(props)
    name = name or f"$Exact<{get_default_object_type_name(props)}>"
    type_ = object_(props, name)

    def validate(value: Any, context: Context) -> ValidationResult[Any]:
        def check_object(o: Mapping[Any, Any]) -> ValidationResult[Any]:
            errors: list[ValidationError] = []
            validation = type_.validate(o, context)
            if validation.is_err():
                errors.extend(validation.errors)
            errors.extend(check_additional_props(props, o, context))
            return failures(errors) if errors else success(o)

        return chain(obj.validate(value, context), check_object)

    return ExactType(name, validate, props)


#
# $Shape
#


@dataclass(frozen=True, slots=True, eq=False)
class ShapeType(Type[T]):
    type: Type[Any]


def shape(type_: Type[Any], name: str | None = None) -> ShapeType:
    """
    Partial version of an object type: declared keys are optional, undeclared
    keys are errors.

    If a prop's descriptor produced a different value, a new dict with the
    produced values is returned; otherwise the input itself.
    """
    props = getattr(type_, "props", None)
    assert_(
        isinstance(props, Mapping),
        lambda: f"shape() requires an object type, got {get_type_name(type_)}",
    )

    def validate(value: Any, context: Context) -> ValidationResult[Any]:
        def check_props(o: Mapping[Any, Any]) -> ValidationResult[Any]:
            errors: list[ValidationError] = []
            changed: dict[str, Any] = {}
            for k, prop in props.items():
                if k not in o:
                    continue
                validation = prop.validate(o[k], (*context, get_context_entry(k, prop)))
                if validation.is_err():
                    errors.extend(validation.errors)
                elif validation.value is not o[k]:
                    changed[k] = validation.value
            errors.extend(check_additional_props(props, o, context))
            if errors:
                return failures(errors)
            return success({**o, **changed} if changed else o)

        return chain(obj.validate(value, context), check_props)

    return ShapeType(name or f"$Shape<{get_type_name(type_)}>", validate, type_)
