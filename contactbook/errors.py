"""Exceptions raised by the contact book and small value-checking helpers."""

from __future__ import annotations

from typing import Any, TypeVar

T = TypeVar("T")


class ContactBookError(Exception):
    """Base class for every error raised by the contact book."""


class PermissionDeniedError(ContactBookError, PermissionError):
    """The acting user's role does not allow the operation."""


class InactiveError(ContactBookError):
    """The operation involves a user or contact that is no longer active."""


class NotFoundError(ContactBookError, LookupError):
    """A requested user, contact or contact detail does not exist."""


class InvalidValueError(ContactBookError, ValueError):
    """An argument has the wrong type or an unacceptable value."""


def type_name(value: Any) -> str:
    """Return the name of the runtime type of ``value``."""
    return type(value).__name__


def require_type(value: Any, expected: type[T], message: str) -> T:
    """Return ``value`` if its type is exactly ``expected``, else raise.

    The check is exact, so ``True`` is not accepted where an ``int`` is
    expected and ``1`` is not accepted where a ``bool`` is expected.
    """
    if type(value) is not expected:
        raise InvalidValueError(message)
    return value