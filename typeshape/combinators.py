"""
Structural combinators: arrays, tuples, unions, intersections, maybes,
mappings, refinements, class checks and recursive types.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Any, Callable, Generic, Sequence, TypeVar

from .context import Context, ValidationError, get_function_name
from .core import Type, get_context_entry, get_type_name
from .errors import assert_, crash
from .primitives import arr, fun, obj
from .result import ValidationResult, chain, failure, failures, success
from .undefined import UNDEFINED, is_nil

logger = logging.getLogger(__name__)

T = TypeVar("T")
RT = TypeVar("RT", bound=Type[Any])

Predicate = Callable[[Any], bool]


def _collect(errors: list[ValidationError], validation: ValidationResult[Any]) -> None:
    if validation.is_err():
        errors.extend(validation.errors)


#
# arrays
#


@dataclass(frozen=True, slots=True, eq=False)
class ArrayType(Type[T]):
    type: Type[Any]


def array(type_: Type[Any], name: str | None = None) -> ArrayType:
    """
    Every element must validate against `type_`.

    All element errors are reported; a non-array fails once without descending.
    """

    def validate(value: Any, context: Context) -> ValidationResult[Any]:
        def check_items(items: Sequence[Any]) -> ValidationResult[Any]:
            errors: list[ValidationError] = []
            for i, item in enumerate(items):
                _collect(
                    errors,
                    type_.validate(item, (*context, get_context_entry(str(i), type_))),
                )
            return failures(errors) if errors else success(items)

        return chain(arr.validate(value, context), check_items)

    return ArrayType(name or f"Array<{get_type_name(type_)}>", validate, type_)


#
# tuples
#


@dataclass(frozen=True, slots=True, eq=False)
class TupleType(Type[T]):
    types: tuple[Type[Any], ...]


def tuple_(types: Sequence[Type[Any]], name: str | None = None) -> TupleType:
    """
    Element i must validate against types[i].

    Elements beyond len(types) are ignored; missing positions validate as UNDEFINED.
    """
    types = tuple(types)

    def validate(value: Any, context: Context) -> ValidationResult[Any]:
        def check_items(items: Sequence[Any]) -> ValidationResult[Any]:
            errors: list[ValidationError] = []
            for i, type_ in enumerate(types):
                item = items[i] if i < len(items) else UNDEFINED
                _collect(
                    errors,
                    type_.validate(item, (*context, get_context_entry(str(i), type_))),
                )
            return failures(errors) if errors else success(items)

        return chain(arr.validate(value, context), check_items)

    return TupleType(
        name or f"[{', '.join(map(get_type_name, types))}]", validate, types
    )


#
# unions
#


@dataclass(frozen=True, slots=True, eq=False)
class UnionType(Type[T]):
    types: tuple[Type[Any], ...]


def union(types: Sequence[Type[Any]], name: str | None = None) -> UnionType:
    """
    The first member (in declaration order) that accepts the value wins.

    If every member fails, a single error is reported at the union itself.
    """
    types = tuple(types)

    def validate(value: Any, context: Context) -> ValidationResult[Any]:
        for type_ in types:
            validation = type_.validate(value, context)
            if validation.is_ok():
                return validation
        return failure(value, context)

    return UnionType(
        name or f"({' | '.join(map(get_type_name, types))})", validate, types
    )


#
# intersections
#


@dataclass(frozen=True, slots=True, eq=False)
class IntersectionType(Type[T]):
    types: tuple[Type[Any], ...]


def intersection(types: Sequence[Type[Any]], name: str | None = None) -> IntersectionType:
    """
    Every member must accept the value, checked at the same context.

    Errors from all members are reported. On success the input is returned
    unchanged.
    """
    types = tuple(types)
    assert_(len(types) > 0, lambda: "intersection() requires at least one type")

    def validate(value: Any, context: Context) -> ValidationResult[Any]:
        errors: list[ValidationError] = []
        for type_ in types:
            _collect(errors, type_.validate(value, context))
        return failures(errors) if errors else success(value)

    return IntersectionType(
        name or f"({' & '.join(map(get_type_name, types))})", validate, types
    )


#
# maybes
#


@dataclass(frozen=True, slots=True, eq=False)
class MaybeType(Type[T]):
    type: Type[Any]


def maybe(type_: Type[Any], name: str | None = None) -> MaybeType:
    """None or UNDEFINED, otherwise whatever `type_` decides."""

    def validate(value: Any, context: Context) -> ValidationResult[Any]:
        return success(value) if is_nil(value) else type_.validate(value, context)

    return MaybeType(name or f"?{get_type_name(type_)}", validate, type_)


#
# map objects
#


@dataclass(frozen=True, slots=True, eq=False)
class MappingType(Type[T]):
    domain: Type[Any]
    codomain: Type[Any]


def mapping(
    domain: Type[Any], codomain: Type[Any], name: str | None = None
) -> MappingType:
    """
    Every key must validate as `domain` and every value as `codomain`.

    Usage:
        mapping(string, number)  # {"a": 1, "b": 2}
    """

    def validate(value: Any, context: Context) -> ValidationResult[Any]:
        def check_entries(o: Any) -> ValidationResult[Any]:
            errors: list[ValidationError] = []
            for k, v in o.items():
                key = str(k)
                _collect(
                    errors, domain.validate(k, (*context, get_context_entry(key, domain)))
                )
                _collect(
                    errors,
                    codomain.validate(v, (*context, get_context_entry(key, codomain))),
                )
            return failures(errors) if errors else success(o)

        return chain(obj.validate(value, context), check_entries)

    return MappingType(
        name or f"{{ [key: {get_type_name(domain)}]: {get_type_name(codomain)} }}",
        validate,
        domain,
        codomain,
    )


#
# refinements
#


@dataclass(frozen=True, slots=True, eq=False)
class RefinementType(Type[T]):
    type: Type[Any]
    predicate: Predicate


def refinement(
    type_: Type[Any], predicate: Predicate, name: str | None = None
) -> RefinementType:
    """
    Validate against `type_`, then require `predicate` to hold.

    A predicate failure reports the original input, not the value `type_`
    produced.

    Usage:
        positive = refinement(number, lambda n: n > 0, "Positive")
    """

    def validate(value: Any, context: Context) -> ValidationResult[Any]:
        return chain(
            type_.validate(value, context),
            lambda t: success(t) if predicate(t) else failure(value, context),
        )

    return RefinementType(
        name or f"({get_type_name(type_)} | {get_function_name(predicate)})",
        validate,
        type_,
        predicate,
    )


#
# classes
#


@dataclass(frozen=True, slots=True, eq=False)
class ClassType(Type[T]):
    ctor: type


def is_class_of(value: Any, ctor: type) -> bool:
    return value is ctor or (isinstance(value, type) and issubclass(value, ctor))


def class_of(ctor: type, name: str | None = None) -> ClassType:
    """Accept `ctor` itself or any subclass of it (the class, not an instance)."""
    assert_(
        isinstance(ctor, type),
        lambda: f"class_of() requires a class, got {ctor!r}",
    )
    name = name or f"Class<{get_function_name(ctor)}>"
    type_ = refinement(fun, lambda f: is_class_of(f, ctor), name)
    return ClassType(name, type_.validate, ctor)


#
# recursive types
#


class _Reference(Generic[RT]):
    """Write-once cell the recursive placeholder delegates to."""

    __slots__ = ("_name", "_target")

    def __init__(self, name: str) -> None:
        self._name = name
        self._target: RT | None = None

    def bind(self, target: RT) -> None:
        assert_(
            self._target is None,
            lambda: f"Recursive type {self._name} is already bound",
        )
        self._target = target

    def validate(self, value: Any, context: Context) -> ValidationResult[Any]:
        if self._target is None:
            crash(f"Recursive type {self._name} was used before its definition completed")
        return self._target.validate(value, context)


def recursion(name: str, definition: Callable[[Type[Any]], RT]) -> RT:
    """
    Define a self-referential type.

    `definition` receives a placeholder standing for the type being defined
    and returns the real descriptor, which is renamed to `name`.

    Usage:
        Node = recursion("Node", lambda self: object_({
            "value": number,
            "next": maybe(self),
        }))
    """
    reference: _Reference[RT] = _Reference(name)
    placeholder: Type[Any] = Type(name, reference.validate)
    result = replace(definition(placeholder), name=name)
    reference.bind(result)
    logger.debug("Bound recursive type %s", name)
    return result
