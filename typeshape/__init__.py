"""
typeshape - runtime validation of untyped values against composable type descriptors.

Usage:
    import typeshape as t

    Person = t.object_({
        "name": t.string,
        "age": t.maybe(t.number),
        "tags": t.array(t.string),
    })

    result = t.validate(data, Person)
    if t.is_failure(result):
        for error in result.errors:
            print(error.description)
"""

from .api import is_, unsafe_validate, validate, validate_with_context
from .combinators import (
    ArrayType,
    ClassType,
    IntersectionType,
    MappingType,
    MaybeType,
    Predicate,
    RefinementType,
    TupleType,
    UnionType,
    array,
    class_of,
    intersection,
    mapping,
    maybe,
    recursion,
    refinement,
    tuple_,
    union,
)
from .context import (
    Context,
    ContextEntry,
    ValidationError,
    current_describer,
    get_context_path,
    get_default_description,
    get_function_name,
    stringify,
    validation_context,
)
from .core import Type, get_context_entry, get_default_context, get_type_name
from .errors import RuntimeTypeError, assert_, crash
from .objects import (
    ExactType,
    KeysType,
    ObjectType,
    Props,
    ShapeType,
    exact,
    keys,
    object_,
    shape,
)
from .primitives import (
    InstanceOfType,
    LiteralType,
    any_,
    arr,
    boolean,
    fun,
    instance_of,
    literal,
    nil,
    number,
    obj,
    string,
)
from .result import (
    Err,
    Ok,
    Validation,
    ValidationResult,
    ap,
    chain,
    failure,
    failures,
    from_failure,
    from_success,
    is_failure,
    is_success,
    map_,
    of,
    success,
)
from .schema import to_annotation, to_pydantic
from .undefined import UNDEFINED, Undefined

__all__ = [
    # Result types
    "Ok",
    "Err",
    "ValidationResult",
    "Validation",
    "success",
    "failure",
    "failures",
    "of",
    "is_success",
    "is_failure",
    "from_success",
    "from_failure",
    "map_",
    "chain",
    "ap",
    # Context
    "Context",
    "ContextEntry",
    "ValidationError",
    "get_context_entry",
    "get_default_context",
    "get_type_name",
    "get_function_name",
    "get_context_path",
    "get_default_description",
    "stringify",
    "validation_context",
    "current_describer",
    # Errors
    "RuntimeTypeError",
    "crash",
    "assert_",
    # Core
    "Type",
    "UNDEFINED",
    "Undefined",
    # Primitives
    "nil",
    "any_",
    "string",
    "number",
    "boolean",
    "arr",
    "obj",
    "fun",
    "literal",
    "LiteralType",
    "instance_of",
    "InstanceOfType",
    "class_of",
    "ClassType",
    # Combinators
    "array",
    "ArrayType",
    "tuple_",
    "TupleType",
    "union",
    "UnionType",
    "intersection",
    "IntersectionType",
    "maybe",
    "MaybeType",
    "mapping",
    "MappingType",
    "refinement",
    "RefinementType",
    "Predicate",
    "recursion",
    # Objects
    "object_",
    "ObjectType",
    "Props",
    "keys",
    "KeysType",
    "exact",
    "ExactType",
    "shape",
    "ShapeType",
    # API
    "validate",
    "validate_with_context",
    "unsafe_validate",
    "is_",
    # Schema
    "to_annotation",
    "to_pydantic",
]
