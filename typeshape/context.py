"""
Validation paths, error values and error-message formatting.

Also holds the context manager for formatting configuration.
"""

from __future__ import annotations

import inspect
import json
import math
from collections.abc import Mapping
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Any, Callable

from .undefined import UNDEFINED


@dataclass(frozen=True, slots=True)
class ContextEntry:
    """One hop of a validation path: the key and the expected type name."""

    key: str
    name: str

    @property
    def expected_type_name(self) -> str:
        return self.name


# Root first; the root entry has an empty key
Context = tuple[ContextEntry, ...]


@dataclass(frozen=True, slots=True)
class ValidationError:
    """A single failure: the offending raw value, where it was found and why."""

    value: Any
    context: Context
    description: str


Describer = Callable[[Any, Context], str]


def get_function_name(f: Callable[..., Any]) -> str:
    """
    Human-readable name of a callable.

    Lookup order: `display_name` attribute, `__name__` (lambdas are treated as
    anonymous), then `<function{arity}>`.
    """
    display_name = getattr(f, "display_name", None)
    if display_name:
        return str(display_name)

    name = getattr(f, "__name__", None)
    if name and name != "<lambda>":
        return name

    return f"<function{_arity(f)}>"


def _arity(f: Callable[..., Any]) -> int:
    try:
        parameters = inspect.signature(f).parameters.values()
    except (TypeError, ValueError):
        return 0
    return sum(
        1
        for p in parameters
        if p.kind in (p.POSITIONAL_ONLY, p.POSITIONAL_OR_KEYWORD)
        and p.default is p.empty
    )


def stringify(value: Any) -> str:
    """Render a raw value for an error message (compact JSON where possible)."""
    if value is UNDEFINED:
        return "undefined"
    if callable(value):
        return get_function_name(value)
    try:
        return json.dumps(
            _to_json_data(value, set()),
            separators=(",", ":"),
            ensure_ascii=False,
            default=repr,
        )
    except (TypeError, ValueError):
        # Circular structures or non-string keys
        return repr(value)


def _to_json_data(value: Any, active: set[int]) -> Any:
    """
    Prepare a value for json.dumps with JSON.stringify conventions.

    Non-finite floats become null at any depth. UNDEFINED is dropped from
    mappings and becomes null inside sequences.
    """
    if isinstance(value, float):
        return value if math.isfinite(value) else None
    if not isinstance(value, (Mapping, list, tuple)):
        return value
    if id(value) in active:
        raise ValueError("Circular reference detected")
    active.add(id(value))
    try:
        if isinstance(value, Mapping):
            return {
                k: _to_json_data(v, active)
                for k, v in value.items()
                if v is not UNDEFINED
            }
        return [
            None if item is UNDEFINED else _to_json_data(item, active)
            for item in value
        ]
    finally:
        active.discard(id(value))


def get_context_path(context: Context) -> str:
    return "/".join(f"{entry.key}: {entry.name}" for entry in context)


def get_default_description(value: Any, context: Context) -> str:
    return f"Invalid value {stringify(value)} supplied to {get_context_path(context)}"


# Context variable for the active description formatter
_describer: ContextVar[Describer] = ContextVar(
    "describer", default=get_default_description
)


def current_describer() -> Describer:
    """Return the description formatter currently in effect."""
    return _describer.get()


def get_validation_error(value: Any, context: Context) -> ValidationError:
    return ValidationError(
        value=value,
        context=context,
        description=current_describer()(value, context),
    )


@contextmanager
def validation_context(*, describe: Describer | None = None):
    """
    Context manager for validation configuration.

    Args:
        describe: Formatter used for the `description` of every failure
                  produced inside the block. Receives the raw value and its
                  context. Defaults to get_default_description.

    Example:
        from typeshape import number, validate, validation_context

        def terse(value, context):
            return f"{context[-1].key or '<root>'} is not a {context[-1].name}"

        with validation_context(describe=terse):
            validate("x", number)  # Err: "<root> is not a number"
    """
    token = _describer.set(describe or get_default_description)
    try:
        yield
    finally:
        _describer.reset(token)
