"""A single phone number or e-mail address belonging to a contact."""

from __future__ import annotations

from dataclasses import InitVar, dataclass, field
from enum import Enum

from .errors import InvalidValueError, require_type


class DetailType(str, Enum):
    """The kind of a contact detail."""

    NUMBER = "Number"
    EMAIL = "Email"


def _parse_type(detail_type: object, message: str) -> DetailType:
    if isinstance(detail_type, DetailType):
        return detail_type
    try:
        return DetailType(detail_type)
    except ValueError:
        raise InvalidValueError(message) from None


@dataclass
class ContactDetail:
    """A number or e-mail entry of a contact, identified by ``detail_id``."""

    detail_id: int
    detail_type: DetailType
    value: InitVar[str] = ""
    number: str = field(default="", init=False)
    email: str = field(default="", init=False)

    def __post_init__(self, value: str) -> None:
        self.detail_type = _parse_type(self.detail_type, "invalid type")
        if self.detail_type is DetailType.EMAIL:
            self.email = value
        else:
            self.number = value

    def update(self, detail_type: DetailType | str, value: object) -> None:
        """Store ``value`` as number or e-mail and clear the other one."""
        kind = _parse_type(
            detail_type, "type can either be a number or email"
        )
        if kind is DetailType.NUMBER:
            self.set_number(value)
            self.email = ""
        else:
            self.set_email(value)
            self.number = ""

    def set_number(self, value: object) -> None:
        """Set the phone number."""
        self.number = require_type(value, str, "please enter a string value")

    def set_email(self, value: object) -> None:
        """Set the e-mail address."""
        self.email = require_type(value, str, "please enter a string value")