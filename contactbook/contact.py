"""A contact owned by a staff user, with its numbers and e-mail addresses."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field

from .contact_details import ContactDetail, DetailType
from .errors import InactiveError, InvalidValueError, NotFoundError, require_type


@dataclass
class Contact:
    """A person in a user's contact list."""

    contact_id: int
    first_name: str
    last_name: str
    details: list[ContactDetail] = field(default_factory=list)
    _active: bool = field(default=True, init=False, repr=False)

    def __post_init__(self) -> None:
        if not self.first_name:
            raise InvalidValueError("first name cannot be empty")
        if not self.last_name:
            raise InvalidValueError("last name cannot be empty")
        require_type(self.first_name, str, "please enter a string value")
        require_type(self.last_name, str, "please enter a string value")

    def valid_detail_id(self, detail_id: int) -> bool:
        """Return whether ``detail_id`` lies in the accepted id range."""
        return 0 <= detail_id <= len(self.details)

    def active_id(self) -> int:
        """Return the contact id while active, otherwise -1."""
        return self.contact_id if self._active else -1

    def delete_detail(self, detail_id: int) -> None:
        """Remove every detail carrying ``detail_id``."""
        if not self._active:
            raise InactiveError("inactive users cannot perform delete operation")
        if not self.valid_detail_id(detail_id):
            raise InvalidValueError("please provide a valid contact_details id")
        self.details = [d for d in self.details if d.detail_id != detail_id]

    def update(self, field: str, value: object) -> None:
        """Update the first or last name, chosen by ``field``."""
        if not self._active:
            raise InactiveError("inactive contact cannot update contacts")
        setters = {
            "first_name": self.set_first_name,
            "F_name": self.set_first_name,
            "last_name": self.set_last_name,
            "L_name": self.set_last_name,
        }
        try:
            setter = setters[field]
        except KeyError:
            raise InvalidValueError("no matching params found to update") from None
        setter(value)

    def set_first_name(self, value: object) -> None:
        """Set the first name; it must be a non-empty string."""
        name = require_type(value, str, "please enter a string value")
        if not name:
            raise InvalidValueError("f_name cannot be empty")
        self.first_name = name

    def set_last_name(self, value: object) -> None:
        """Set the last name; it must be a non-empty string."""
        name = require_type(value, str, "please enter a string value")
        if not name:
            raise InvalidValueError("l_name cannot be empty")
        self.last_name = name

    def deactivate(self) -> None:
        """Mark the contact as deleted."""
        if not self._active:
            raise InactiveError("contact already inactive")
        self._active = False

    def get_detail(self, detail_id: int) -> ContactDetail:
        """Return the detail with ``detail_id``."""
        if not self._active:
            raise InactiveError("inactive users cannot get contact_details by id")
        if not self.valid_detail_id(detail_id):
            raise InvalidValueError("please provide valid contact_details id")
        for detail in self.details:
            if detail.detail_id == detail_id:
                return detail
        raise NotFoundError(f"didn't find contact_details with id: {detail_id}")

    def add_detail(self, detail_type: DetailType | str, value: str) -> ContactDetail:
        """Create a detail with the next free id and attach it."""
        if not self._active:
            raise InactiveError("inactive contacts cannot add new contact details")
        new_id = self.details[-1].detail_id + 1 if self.details else 1
        detail = ContactDetail(new_id, detail_type, value)
        self.details.append(detail)
        return detail

    def all_details(self) -> list[ContactDetail]:
        """Return shallow copies of all details."""
        if not self._active:
            raise InactiveError("inactive users cannot read contact_details")
        return [copy.copy(detail) for detail in self.details]