"""
Base type descriptor and context helpers.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from .context import Context, ContextEntry
from .result import Validation, ValidationResult

T = TypeVar("T")


@dataclass(frozen=True, slots=True, eq=False)
class Type(Generic[T]):
    """
    Immutable type descriptor.

    The fundamental building block: a display name plus a validation function
    `(value, context) -> Ok | Err`. Every combinator returns a subclass that
    also carries the metadata it was built from, so descriptor graphs can be
    walked by tooling.

    Descriptors compare by identity.
    """

    name: str
    validate: Validation[T]

    def __call__(self, value: Any) -> ValidationResult[T]:
        """Validate `value` starting from the default root context."""
        return self.validate(value, get_default_context(self))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"


def get_type_name(type_: Type[Any]) -> str:
    return type_.name


def get_context_entry(key: str, type_: Type[Any]) -> ContextEntry:
    return ContextEntry(key=key, name=type_.name)


def get_default_context(type_: Type[Any]) -> Context:
    return (ContextEntry(key="", name=type_.name),)
