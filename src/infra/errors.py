"""Custom exception hierarchy for the execution context core.

All package-specific exceptions inherit from KernelError,
which carries an error code orchestrators can map to their own reporting.
"""

from __future__ import annotations


class KernelError(Exception):
    """Base exception for all execution context errors."""

    def __init__(self, message: str, *, code: str = "INTERNAL_ERROR") -> None:
        super().__init__(message)
        self.code = code


class InvalidArgumentError(KernelError, ValueError):
    """A required argument is missing or malformed at a call boundary."""

    def __init__(self, message: str, *, code: str = "INVALID_ARGUMENT") -> None:
        super().__init__(message, code=code)


class FunctionError(KernelError):
    """Errors in the function registry."""

    def __init__(self, message: str, *, code: str = "FUNCTION_ERROR") -> None:
        super().__init__(message, code=code)


class FunctionNotFoundError(FunctionError, KeyError):
    """Lookup of an unregistered function through a strict accessor."""

    def __init__(self, message: str) -> None:
        super().__init__(message, code="FUNCTION_NOT_FOUND")

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return str(self.args[0])


class FunctionRegistrationError(FunctionError):
    """Raised when a function with the same plugin and name is already registered."""

    def __init__(self, message: str) -> None:
        super().__init__(message, code="FUNCTION_REGISTRATION")


def require_not_none(value: object, name: str) -> None:
    """Raise InvalidArgumentError if value is None."""
    if value is None:
        raise InvalidArgumentError(f"'{name}' must not be None")
