# contactbook

An in-memory contact book. Users have one of two roles, and each role is allowed different operations:

- **Admins** create staff users. They can also list, look up, update and deactivate users.
  Admins cannot manage contacts.
- **Staff** users own contacts. A contact has a first name, a last name and a list of
  contact details. Each detail is either a phone number or an e-mail address.

Deleting a user or a contact only marks it inactive. An inactive user or contact refuses
further operations. Deleting a contact detail removes it from its contact.

## Installation

```
pip install .
```

## Command line

```
contactbook
```

This runs a short demonstration. It creates an admin and a staff user. It then adds,
updates and deletes a contact and one of that contact's details. Each step is printed,
including the errors from operations that are not allowed. The command takes no options
apart from `--help`.

## Library use

```python
from contactbook.user import UserRegistry
from contactbook.contact_details import DetailType
from contactbook.errors import ContactBookError

registry = UserRegistry()
admin = registry.create_admin("Ada", "Admin")      # user ids start at 0
staff = admin.create_staff("Sam", "Staff")

contact = staff.add_contact("Jane", "Doe")         # contact ids start at 1
staff.update_contact(contact.contact_id, "F_name", "Janet")

detail = staff.add_detail(contact.contact_id, DetailType.EMAIL, "jane@example.com")
staff.update_detail(contact.contact_id, detail.detail_id, "Number", "12345")
staff.delete_detail(contact.contact_id, detail.detail_id)

try:
    admin.add_contact("Not", "Allowed")
except ContactBookError as exc:
    print(exc)  # admin cannot add new contacts
```

### Main classes

- `contactbook.user.UserRegistry` holds every user. `create_admin` registers a new admin.
  Iterating over the registry yields its users ordered by id.
- `contactbook.user.User` has the properties `is_admin` and `is_active`.
  - Admin methods: `create_staff`, `all_users`, `get_user`, `update_user`
    (fields `F_name`/`first_name`, `L_name`/`last_name`, `isAdmin`/`is_admin`)
    and `delete_user`.
  - Staff methods: `add_contact`, `all_contacts`, `get_contact`, `update_contact`,
    `delete_contact`, `add_detail`, `get_detail`, `update_detail` and `delete_detail`.
- `contactbook.contact.Contact` stores a contact's names and its `details`.
- `contactbook.contact_details.ContactDetail` stores one detail in either its `number`
  field or its `email` field. The kind of detail is given by `DetailType.NUMBER` (`"Number"`)
  or `DetailType.EMAIL` (`"Email"`).

All failures raise subclasses of `contactbook.errors.ContactBookError`:

- `PermissionDeniedError`: the user's role does not allow the operation.
- `InactiveError`: the user or contact has been deactivated.
- `NotFoundError`: no item matches the given id.
- `InvalidValueError`: a value is empty, has the wrong type or is not recognised.

## Limitations

Everything lives in memory only. The package does not save users or contacts to a file
or a database, so all data is lost when the process ends. The command line offers only
the fixed demonstration. It has no commands for managing your own data.

## Tests

```
pip install .[test]
pytest
```