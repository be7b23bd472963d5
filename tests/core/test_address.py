"""Tests for the address value type."""

import pytest
from utilitysim.core.address import Address
from utilitysim.core.errors import InvalidArgumentError


def test_display_without_unit():
    address = Address(street="12 Main St", city="Springfield", postal_code="12345")

    assert address.display() == "12 Main St, Springfield 12345"
    assert str(address) == address.display()


def test_display_with_unit_and_no_postal_code():
    address = Address(street="1 Fiber Way", city="Springfield", unit="3B")

    assert address.display() == "1 Fiber Way, Unit 3B, Springfield"


def test_equality_and_hash_by_value():
    first = Address(street="12 Main St", city="Springfield", postal_code="12345")
    second = Address(street="12 Main St", city="Springfield", postal_code="12345")

    assert first == second
    assert hash(first) == hash(second)
    assert first != Address(street="13 Main St", city="Springfield", postal_code="12345")


def test_address_is_immutable():
    address = Address(street="12 Main St", city="Springfield")

    with pytest.raises(AttributeError):
        address.city = "Shelbyville"


@pytest.mark.parametrize("street, city", [("", "Springfield"), ("12 Main St", "  ")])
def test_blank_fields_rejected(street, city):
    with pytest.raises(InvalidArgumentError):
        Address(street=street, city=city)


@pytest.mark.parametrize("street, city", [(None, "Springfield"), ("12 Main St", 42)])
def test_non_string_fields_rejected(street, city):
    with pytest.raises(InvalidArgumentError):
        Address(street=street, city=city)
