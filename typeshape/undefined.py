"""
UNDEFINED sentinel for keys that are absent from a mapping.
"""

from enum import Enum


class Undefined(Enum):
    """
    Sentinel for "no value supplied", as opposed to an explicit None.

    Object-like descriptors pass UNDEFINED to a prop's descriptor when the
    key is missing from the input, so `nil` and `maybe(...)` accept it while
    every other descriptor rejects it.

    Examples:
        validate({}, object_({"a": string}))
        # Err: "Invalid value undefined supplied to : { a: string }/a: string"

        validate({"a": None}, object_({"a": string}))
        # Err: "Invalid value null supplied to : { a: string }/a: string"
    """

    UNDEFINED = 0

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "UNDEFINED"


UNDEFINED = Undefined.UNDEFINED


def is_nil(value: object) -> bool:
    """Check for None or UNDEFINED."""
    return value is None or value is UNDEFINED
