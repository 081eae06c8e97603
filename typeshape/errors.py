"""
Fatal aborts for unrecoverable validation failures and misuse.
"""

import logging
from typing import Callable, NoReturn

logger = logging.getLogger(__name__)


class RuntimeTypeError(TypeError):
    """Raised by crash(); never raised by validate() itself."""


def crash(message: str) -> NoReturn:
    """
    Abort with a RuntimeTypeError.

    This is the only way a validation failure becomes an exception, and it
    is always opted into by the caller (from_success, unsafe_validate, assert_).
    """
    logger.debug("Aborting: %s", message)
    raise RuntimeTypeError(f"[typeshape failure]\n{message}")


def assert_(guard: bool, message: Callable[[], str] | None = None) -> None:
    """
    Crash unless guard is exactly True.

    Usage:
        assert_(len(types) > 0, lambda: "intersection needs at least one type")
    """
    if guard is not True:
        crash(message() if message else "Assert failed")
