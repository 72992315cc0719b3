"""Users of the contact book: admins manage users, staff manage contacts."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Callable, Iterator

from .contact import Contact
from .contact_details import ContactDetail, DetailType
from .errors import (
    InactiveError,
    InvalidValueError,
    NotFoundError,
    PermissionDeniedError,
    require_type,
)


class UserRegistry:
    """Holds every user of the system and hands out user ids from 0 upwards."""

    def __init__(self) -> None:
        self._users: dict[int, User] = {}
        self._next_id = 0

    def __len__(self) -> int:
        return len(self._users)

    def __iter__(self) -> Iterator[User]:
        return iter(sorted(self._users.values(), key=lambda u: u.user_id))

    def create_admin(self, first_name: str, last_name: str) -> User:
        """Create and register a new admin user."""
        return self._new_user(first_name, last_name, admin=True)

    def _new_user(self, first_name: str, last_name: str, *, admin: bool) -> User:
        if not first_name:
            raise InvalidValueError("first name cannot be empty")
        if not last_name:
            raise InvalidValueError("last name cannot be empty")
        user = User(self._next_id, first_name, last_name, self)
        user._admin = admin
        self._users[user.user_id] = user
        self._next_id += 1
        return user

    def _lookup(self, user_id: int) -> User:
        try:
            return self._users[user_id]
        except KeyError:
            raise NotFoundError(f"user with id: {user_id} not found") from None


@dataclass(eq=False)
class User:
    """A registered user; admins manage users, staff keep contacts."""

    user_id: int
    first_name: str
    last_name: str
    registry: UserRegistry = field(repr=False)
    contacts: list[Contact] = field(default_factory=list)
    _admin: bool = field(default=False, init=False, repr=False)
    _active: bool = field(default=True, init=False, repr=False)

    def __repr__(self) -> str:
        return (
            f"User(user_id={self.user_id!r}, first_name={self.first_name!r}, "
            f"last_name={self.last_name!r}, is_admin={self._admin!r}, "
            f"is_active={self._active!r}, contacts={self.contacts!r})"
        )

    @property
    def is_admin(self) -> bool:
        """Whether the user has admin privileges."""
        return self._admin

    @property
    def is_active(self) -> bool:
        """Whether the user has not been deleted."""
        return self._active

    # ----- checks shared by many operations -----

    def _require_admin(self, message: str) -> None:
        if not self._admin:
            raise PermissionDeniedError(message)

    def _require_staff(self, message: str) -> None:
        if self._admin:
            raise PermissionDeniedError(message)

    def _require_active(self, message: str) -> None:
        if not self._active:
            raise InactiveError(message)

    # ----- user management (admins) -----

    def create_staff(self, first_name: str, last_name: str) -> User:
        """Create a new non-admin user."""
        self._require_admin("you don't have admin privileges to create a user")
        return self.registry._new_user(first_name, last_name, admin=False)

    def all_users(self) -> list[User]:
        """Return shallow copies of every registered user, ordered by id."""
        self._require_admin("you don't have admin privileges to read all users")
        return [copy.copy(user) for user in self.registry]

    def get_user(self, user_id: int) -> User:
        """Return the user with ``user_id``."""
        self._require_admin("you don't have admin privileges to read user")
        self._require_active("inactive admin cannot read users")
        return self.registry._lookup(user_id)

    def delete_user(self, user_id: int) -> None:
        """Mark the user with ``user_id`` as inactive."""
        self._require_admin("you don't have admin privileges to delete user")
        self._require_active("inactive users cannot delete users")
        self.get_user(user_id)._active = False

    def update_user(self, user_id: int, field: str, value: object) -> None:
        """Update a user's first name, last name or admin flag."""
        self._require_admin("you don't have admin privileges to update users")
        self._require_active("inactive users cannot update users")
        target = self.get_user(user_id)
        setters: dict[str, Callable[[object], None]] = {
            "first_name": target.set_first_name,
            "F_name": target.set_first_name,
            "last_name": target.set_last_name,
            "L_name": target.set_last_name,
            "is_admin": target.set_admin,
            "isAdmin": target.set_admin,
        }
        try:
            setter = setters[field]
        except KeyError:
            raise InvalidValueError("no matching params found to update") from None
        setter(value)

    def set_first_name(self, value: object) -> None:
        """Set the first name; it must be a non-empty string."""
        self._require_active("cannot update inactive users")
        name = require_type(value, str, "please enter a string value")
        if not name:
            raise InvalidValueError("f_name cannot be empty")
        self.first_name = name

    def set_last_name(self, value: object) -> None:
        """Set the last name; it must be a non-empty string."""
        self._require_active("cannot update inactive users")
        name = require_type(value, str, "please enter a string value")
        if not name:
            raise InvalidValueError("l_name cannot be empty")
        self.last_name = name

    def set_admin(self, value: object) -> None:
        """Grant or revoke admin privileges; ``value`` must be a bool."""
        self._require_active("cannot update inactive users")
        self._admin = require_type(value, bool, "please enter a boolean value")

    # ----- contacts (staff) -----

    def all_contacts(self) -> list[Contact]:
        """Return shallow copies of the user's contacts."""
        self._require_staff("admin cannot read contacts")
        self._require_active("inactive users cannot read contacts")
        return [copy.copy(contact) for contact in self.contacts]

    def valid_contact_id(self, contact_id: int) -> bool:
        """Return whether ``contact_id`` lies in the accepted id range."""
        return 0 <= contact_id <= len(self.contacts)

    def get_contact(self, contact_id: int) -> Contact:
        """Return the active contact with ``contact_id``."""
        self._require_staff("admin cannot get contact by id")
        self._require_active("inactive users cannot get contact by id")
        if not self.valid_contact_id(contact_id):
            raise InvalidValueError("please provide a valid contact id")
        for contact in self.contacts:
            if contact.active_id() == contact_id:
                return contact
        raise NotFoundError(f"didn't find active contact with given id: {contact_id}")

    def add_contact(self, first_name: str, last_name: str) -> Contact:
        """Create a new contact with the next id and add it to the list."""
        self._require_active("inactive user cannot add new contact")
        self._require_staff("admin cannot add new contacts")
        contact = Contact(len(self.contacts) + 1, first_name, last_name)
        self.contacts.append(contact)
        return contact

    def update_contact(self, contact_id: int, field: str, value: object) -> None:
        """Update the first or last name of a contact."""
        self._require_staff("admins are not allowed to update contacts")
        self._require_active("inactive users are not allowed to update contacts")
        self.get_contact(contact_id).update(field, value)

    def delete_contact(self, contact_id: int) -> None:
        """Mark a contact as deleted."""
        self._require_staff("admins are not allowed to delete contacts")
        self._require_active("inactive users are not allowed to delete contacts")
        if not self.valid_contact_id(contact_id):
            raise InvalidValueError("please provide valid contact id")
        self.get_contact(contact_id).deactivate()

    # ----- contact details (staff) -----

    def get_detail(self, contact_id: int, detail_id: int) -> ContactDetail:
        """Return a detail of one of the user's contacts."""
        self._require_staff("admin not allowed to get contact_details by id")
        self._require_active(
            "inactive users are not allowed to get contact_details by id"
        )
        contact = self.get_contact(contact_id)
        if not contact.valid_detail_id(detail_id):
            raise InvalidValueError("please give a valid contact_details id")
        return contact.get_detail(detail_id)

    def add_detail(
        self, contact_id: int, detail_type: DetailType | str, value: str
    ) -> ContactDetail:
        """Add a number or e-mail address to one of the user's contacts."""
        self._require_staff("admin is not allowed to create contact_details")
        self._require_active(
            "inactive users are not allowed to create contact_details"
        )
        return self.get_contact(contact_id).add_detail(detail_type, value)

    def update_detail(
        self,
        contact_id: int,
        detail_id: int,
        detail_type: DetailType | str,
        value: object,
    ) -> None:
        """Replace a detail's value, switching it to number or e-mail."""
        self._require_staff("admin is not allowed to update contact_details")
        self._require_active(
            "inactive users are not allowed to update contact_details"
        )
        self.get_detail(contact_id, detail_id).update(detail_type, value)

    def delete_detail(self, contact_id: int, detail_id: int) -> None:
        """Remove a detail from one of the user's contacts."""
        self._require_staff("admins are not allowed to delete contact_details")
        self._require_active(
            "inactive users are not allowed to delete contact_details"
        )
        self.get_contact(contact_id).delete_detail(detail_id)