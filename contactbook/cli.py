"""Command that walks through a short demonstration of the contact book."""

from __future__ import annotations

import argparse
from typing import Callable, Sequence, TypeVar

from .errors import ContactBookError
from .user import UserRegistry

T = TypeVar("T")


def _attempt(action: Callable[[], T]) -> T | None:
    """Run ``action``; print and swallow a contact book error."""
    try:
        return action()
    except ContactBookError as exc:
        print(exc)
        return None


def _show(value: object) -> None:
    if value is not None:
        print(value)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the demonstration and print each step's outcome."""
    parser = argparse.ArgumentParser(
        prog="contactbook",
        description="Demonstrate admins, staff, contacts and contact details.",
    )
    parser.parse_args(argv)

    registry = UserRegistry()
    admin = _attempt(lambda: registry.create_admin("Vishav", "Pathania"))
    _show(admin)
    if admin is None:
        return 1

    # Admins are not allowed to keep contacts.
    _show(_attempt(lambda: admin.add_contact("Yash", "Shah")))

    staff = _attempt(lambda: admin.create_staff("Aniket", "Pardeshi"))
    _show(staff)
    if staff is None:
        return 1

    contact = _attempt(lambda: staff.add_contact("Brijesh", "Mavani"))
    _show(contact)
    if contact is None:
        return 1

    _attempt(lambda: staff.update_contact(1, "F_name", "brijesh"))
    _show(contact)

    _show(_attempt(lambda: contact.add_detail("Email", "brijesh@example.com")))
    _show(contact)

    _attempt(lambda: staff.delete_detail(1, 1))
    _show(contact)

    _attempt(lambda: staff.delete_contact(1))
    _show(contact)
    return 0