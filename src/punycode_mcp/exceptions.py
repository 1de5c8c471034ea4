"""Exception handling and error processing for Punycode operations.

This module provides the exception types raised by the Bootstring codec and the
label processor, and a helper that turns them into user-friendly messages for
the Model Context Protocol (MCP) tools.

The module serves two main purposes:
1. Define the error taxonomy shared by the codec modules
2. Map codec exceptions to human-readable tool error messages

Every codec error derives from PunycodeError and also from the closest builtin
exception, so callers can catch either ``PunycodeError`` or e.g. ``TypeError``.
"""


class PunycodeError(Exception):
    """Base exception for Bootstring encoding and decoding errors."""


class InvalidArgumentError(PunycodeError, TypeError):
    """Raised when a public operation receives a non-textual argument."""


class UnpairedSurrogateError(PunycodeError, UnicodeError):
    """Raised when a surrogate half has no matching partner."""


class MalformedInputError(PunycodeError, ValueError):
    """Raised when a Bootstring digit stream is truncated or contains bad characters."""


class PunycodeOverflowError(PunycodeError, OverflowError):
    """Raised when an intermediate value exceeds the Bootstring integer bound."""


def require_text(value: object, name: str = "input") -> str:
    """Return ``value`` unchanged if it is a ``str``, else raise InvalidArgumentError."""
    if not isinstance(value, str):
        raise InvalidArgumentError(f'"{name}" must be a string, got {type(value).__name__}')
    return value


def handle_punycode_error(error: Exception) -> str:
    """Convert codec exceptions to descriptive error messages."""
    err_str = f"Unexpected error: {str(error)}"
    if isinstance(error, InvalidArgumentError):
        err_str = f"Invalid argument: {str(error)}"
    if isinstance(error, UnpairedSurrogateError):
        err_str = f"Unpaired surrogate in input: {str(error)}"
    if isinstance(error, MalformedInputError):
        err_str = f"Malformed punycode input: {str(error)}"
    if isinstance(error, PunycodeOverflowError):
        err_str = f"Punycode overflow: {str(error)}"
    return err_str
