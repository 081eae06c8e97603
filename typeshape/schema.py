"""
Pydantic interop for typeshape descriptors.

Provides to_annotation() and to_pydantic() functions, which walk a descriptor
graph through its introspection metadata.
"""

from __future__ import annotations

import re
from typing import Annotated, Any, Callable, Literal, Optional, Union

from pydantic import AfterValidator, BaseModel, ConfigDict, FiniteFloat, create_model

from .combinators import (
    ArrayType,
    ClassType,
    IntersectionType,
    MappingType,
    MaybeType,
    RefinementType,
    TupleType,
    UnionType,
)
from .context import get_function_name
from .core import Type
from .objects import ExactType, KeysType, ObjectType, ShapeType
from .primitives import (
    InstanceOfType,
    LiteralType,
    any_,
    arr,
    boolean,
    fun,
    nil,
    number,
    obj,
    string,
)

_PRIMITIVES: dict[Type[Any], Any] = {
    nil: None,
    any_: Any,
    string: str,
    number: FiniteFloat,
    boolean: bool,
    arr: list[Any],
    obj: dict[str, Any],
    fun: Callable[..., Any],
}


def to_annotation(type_: Type[Any]) -> Any:
    """
    Map a descriptor to a type annotation pydantic understands.

    Descriptors without a counterpart (intersections, recursive placeholders,
    hand-written Type instances) map to Any.
    """
    if type_ in _PRIMITIVES:
        return _PRIMITIVES[type_]

    match type_:
        case LiteralType(value=value):
            return Literal[value]
        case InstanceOfType(ctor=ctor):
            return ctor
        case ClassType(ctor=ctor):
            return type[ctor]  # type: ignore[valid-type]
        case ArrayType(type=item):
            return list[to_annotation(item)]  # type: ignore[misc]
        case TupleType(types=types):
            return tuple[tuple(to_annotation(t) for t in types)]  # type: ignore[misc]
        case UnionType(types=types) if types:
            return Union[tuple(to_annotation(t) for t in types)]
        case MaybeType(type=inner):
            return Optional[to_annotation(inner)]
        case MappingType(domain=domain, codomain=codomain):
            return dict[to_annotation(domain), to_annotation(codomain)]  # type: ignore[misc]
        case RefinementType(type=inner, predicate=predicate):
            return Annotated[to_annotation(inner), AfterValidator(_refine(predicate))]
        case KeysType(type=inner):
            props = getattr(inner, "props", None)
            if props:
                return Literal[tuple(props)]
            return str
        case ObjectType() | ExactType() | ShapeType():
            return to_pydantic(_model_name(type_.name), type_)
        case IntersectionType():
            return Any

    return Any


def to_pydantic(name: str, type_: Type[Any]) -> type[BaseModel]:
    """
    Compile an object-like descriptor to a Pydantic model.

    Args:
        name: Name of the generated model class
        type_: An object_, exact or shape descriptor

    Returns:
        A Pydantic BaseModel subclass

    Usage:
        User = to_pydantic("User", object_({
            "name": string,
            "email": maybe(string),
        }))
        user = User(name="Alice")
    """
    match type_:
        case ObjectType(props=props):
            extra, partial = "ignore", False
        case ExactType(props=props):
            extra, partial = "forbid", False
        case ShapeType(type=inner):
            props, extra, partial = inner.props, "forbid", True
        case _:
            raise TypeError(f"Cannot build a model from {type_.name}")

    fields: dict[str, Any] = {
        key: _extract_pydantic_field(prop, partial) for key, prop in props.items()
    }

    return create_model(
        name,
        __config__=ConfigDict(extra=extra, arbitrary_types_allowed=True),
        **fields,
    )


def _extract_pydantic_field(type_: Type[Any], partial: bool) -> tuple[Any, Any]:
    """Extract Pydantic field type and default from a prop descriptor."""
    annotation = to_annotation(type_)
    if partial and not isinstance(type_, MaybeType):
        return (Optional[annotation], None)
    if isinstance(type_, MaybeType) or type_ is nil:
        return (annotation, None)
    return (annotation, ...)


def _refine(predicate: Callable[[Any], bool]) -> Callable[[Any], Any]:
    def check(value: Any) -> Any:
        if not predicate(value):
            raise ValueError(f"Predicate {get_function_name(predicate)} failed")
        return value

    return check


def _model_name(name: str) -> str:
    return re.sub(r"\W+", "_", name).strip("_") or "Model"
