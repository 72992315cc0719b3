import pytest

from contactbook.contact import Contact
from contactbook.contact_details import DetailType
from contactbook.errors import InactiveError, InvalidValueError, NotFoundError


@pytest.fixture
def contact():
    return Contact(1, "Brijesh", "Mavani")


def test_new_contact_fields(contact):
    assert contact.contact_id == 1
    assert contact.first_name == "Brijesh"
    assert contact.last_name == "Mavani"
    assert contact.details == []
    assert contact.active_id() == 1


def test_empty_names_rejected():
    with pytest.raises(InvalidValueError, match="first name"):
        Contact(1, "", "Mavani")
    with pytest.raises(InvalidValueError, match="last name"):
        Contact(1, "Brijesh", "")


def test_update_first_name_source_key(contact):
    contact.update("F_name", "brijesh")
    assert contact.first_name == "brijesh"


def test_update_last_name(contact):
    contact.update("last_name", "Shah")
    assert contact.last_name == "Shah"


def test_update_unknown_field(contact):
    with pytest.raises(InvalidValueError, match="no matching params"):
        contact.update("age", 3)


def test_update_rejects_non_string_and_empty(contact):
    with pytest.raises(InvalidValueError, match="please enter a string value"):
        contact.update("F_name", 10)
    with pytest.raises(InvalidValueError, match="f_name cannot be empty"):
        contact.set_first_name("")
    with pytest.raises(InvalidValueError, match="l_name cannot be empty"):
        contact.set_last_name("")
    assert (contact.first_name, contact.last_name) == ("Brijesh", "Mavani")


def test_add_detail_assigns_increasing_ids(contact):
    first = contact.add_detail("Email", "a@example.com")
    second = contact.add_detail(DetailType.NUMBER, "555")
    assert first.detail_id == 1
    assert second.detail_id == first.detail_id + 1
    assert contact.details == [first, second]


def test_add_detail_invalid_type_not_added(contact):
    with pytest.raises(InvalidValueError, match="invalid type"):
        contact.add_detail("Fax", "1")
    assert contact.details == []


def test_get_detail(contact):
    added = contact.add_detail("Email", "a@example.com")
    assert contact.get_detail(added.detail_id) is added


def test_get_detail_out_of_range(contact):
    contact.add_detail("Email", "a@example.com")
    with pytest.raises(InvalidValueError):
        contact.get_detail(5)
    with pytest.raises(InvalidValueError):
        contact.get_detail(-1)


def test_get_detail_in_range_but_missing(contact):
    contact.add_detail("Email", "a@example.com")
    with pytest.raises(NotFoundError):
        contact.get_detail(0)


def test_valid_detail_id_bounds(contact):
    contact.add_detail("Email", "a@example.com")
    assert contact.valid_detail_id(0)
    assert contact.valid_detail_id(len(contact.details))
    assert not contact.valid_detail_id(len(contact.details) + 1)
    assert not contact.valid_detail_id(-1)


def test_delete_detail_removes_matching(contact):
    first = contact.add_detail("Email", "a@example.com")
    second = contact.add_detail("Number", "555")
    contact.delete_detail(first.detail_id)
    assert contact.details == [second]


def test_delete_detail_invalid_id(contact):
    with pytest.raises(InvalidValueError, match="valid contact_details id"):
        contact.delete_detail(3)


def test_all_details_returns_copies(contact):
    contact.add_detail("Email", "a@example.com")
    copies = contact.all_details()
    copies[0].email = "changed@example.com"
    assert contact.details[0].email == "a@example.com"
    assert len(copies) == len(contact.details)


def test_deactivate(contact):
    contact.deactivate()
    assert contact.active_id() == -1
    with pytest.raises(InactiveError, match="contact already inactive"):
        contact.deactivate()


def test_inactive_contact_refuses_operations(contact):
    contact.add_detail("Email", "a@example.com")
    contact.deactivate()
    with pytest.raises(InactiveError):
        contact.update("F_name", "x")
    with pytest.raises(InactiveError):
        contact.add_detail("Email", "b@example.com")
    with pytest.raises(InactiveError):
        contact.get_detail(1)
    with pytest.raises(InactiveError):
        contact.delete_detail(1)
    with pytest.raises(InactiveError):
        contact.all_details()
    assert len(contact.details) == 1