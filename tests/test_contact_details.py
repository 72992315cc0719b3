import pytest

from contactbook.contact_details import ContactDetail, DetailType
from contactbook.errors import InvalidValueError


def test_detail_type_values_match_source_names():
    assert DetailType("Number") is DetailType.NUMBER
    assert DetailType("Email") is DetailType.EMAIL


def test_email_detail_stores_email_only():
    detail = ContactDetail(1, "Email", "someone@example.com")
    assert detail.detail_id == 1
    assert detail.detail_type is DetailType.EMAIL
    assert detail.email == "someone@example.com"
    assert detail.number == ""


def test_number_detail_stores_number_only():
    detail = ContactDetail(2, DetailType.NUMBER, "12345")
    assert detail.detail_type is DetailType.NUMBER
    assert detail.number == "12345"
    assert detail.email == ""


@pytest.mark.parametrize("bad", ["", "Phone", "email", 3])
def test_invalid_type_is_rejected(bad):
    with pytest.raises(InvalidValueError, match="invalid type"):
        ContactDetail(1, bad, "x")


def test_update_to_number_clears_email():
    detail = ContactDetail(1, "Email", "someone@example.com")
    detail.update("Number", "98765")
    assert detail.number == "98765"
    assert detail.email == ""


def test_update_to_email_clears_number():
    detail = ContactDetail(1, "Number", "98765")
    detail.update(DetailType.EMAIL, "other@example.com")
    assert detail.email == "other@example.com"
    assert detail.number == ""


def test_update_keeps_detail_type():
    detail = ContactDetail(1, "Email", "someone@example.com")
    detail.update("Number", "98765")
    assert detail.detail_type is DetailType.EMAIL


def test_update_with_bad_type_fails_and_changes_nothing():
    detail = ContactDetail(1, "Email", "someone@example.com")
    with pytest.raises(InvalidValueError, match="type can either be a number or email"):
        detail.update("Fax", "1")
    assert detail.email == "someone@example.com"


def test_update_with_non_string_value_keeps_other_field():
    detail = ContactDetail(1, "Email", "someone@example.com")
    with pytest.raises(InvalidValueError, match="please enter a string value"):
        detail.update("Number", 12345)
    assert detail.email == "someone@example.com"
    assert detail.number == ""


def test_setters_reject_non_strings():
    detail = ContactDetail(1, "Number", "1")
    with pytest.raises(InvalidValueError):
        detail.set_number(7)
    with pytest.raises(InvalidValueError):
        detail.set_email(None)
    assert detail.number == "1"


def test_setters_set_values():
    detail = ContactDetail(1, "Number", "1")
    detail.set_number("2")
    detail.set_email("x@example.com")
    assert (detail.number, detail.email) == ("2", "x@example.com")