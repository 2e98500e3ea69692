"""
Marking errors that must not be reported as validation results.
"""

from __future__ import annotations

from typing import Optional, Protocol, Tuple, runtime_checkable


@runtime_checkable
class Internal(Protocol):
    """
    Errors that carry an underlying cause outside the validation results.
    """

    def internal_error(self) -> BaseException: ...


class InternalError(Exception):
    """
    Wraps an error raised by the validation machinery itself.

    The message is the wrapped error's message; the wrapped error is kept
    by identity and is also the ``__cause__`` for traceback chaining.
    """

    def __init__(self, error: BaseException) -> None:
        super().__init__(error)
        self.cause = error
        self.__cause__ = error

    def internal_error(self) -> BaseException:
        return self.cause

    def __str__(self) -> str:
        return str(self.cause)


def mark_as_internal(error: BaseException) -> InternalError:
    if error is None:
        raise TypeError("Cannot mark None as an internal error.")
    if not isinstance(error, BaseException):
        raise TypeError(f"Expected an exception instance, got {type(error).__name__}.")
    if isinstance(error, InternalError):
        return error
    return InternalError(error)


def is_internal(error: Optional[BaseException]) -> Tuple[bool, Optional[BaseException]]:
    """
    Report whether ``error`` exposes ``internal_error()`` and return its cause.
    """
    if isinstance(error, Internal):
        return True, error.internal_error()
    return False, None
