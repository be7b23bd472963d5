"""Tests for the flat-rate gas account."""

import io

import pytest
from utilitysim.core.accounts.gas import GasAccount
from utilitysim.core.address import Address
from utilitysim.core.errors import InvalidArgumentError
from utilitysim.core.rates.tables import GasRateTable


@pytest.fixture
def address():
    return Address(street="3 Elm St", city="Shelbyville", postal_code="54321")


@pytest.fixture
def rates():
    return GasRateTable(grid_unit_price=25.0)


def test_bill_is_consumption_times_unit_price(address, rates):
    # Arrange
    account = GasAccount(address, rates=rates)
    account.add_usage(12.5)

    # Act
    bill = account.calculate_bill()

    # Assert
    assert bill == pytest.approx(312.5)


def test_zero_consumption_bills_nothing(address, rates):
    account = GasAccount(address, rates=rates)

    assert account.calculate_bill() == 0.0


def test_bill_follows_price_updates(address, rates):
    account = GasAccount(address, rates=rates, initial_consumption=4.0)

    rates.set_grid_unit_price(30.0)

    assert account.calculate_bill() == pytest.approx(120.0)


def test_rejected_price_keeps_previous_bill(address, rates):
    account = GasAccount(address, rates=rates, initial_consumption=4.0)

    with pytest.raises(InvalidArgumentError, match="Gas unit price cannot be negative"):
        rates.set_grid_unit_price(-1.0)

    assert rates.grid_unit_price == 25.0
    assert account.calculate_bill() == pytest.approx(100.0)


def test_negative_usage_is_rejected(address, rates):
    account = GasAccount(address, rates=rates, initial_consumption=4.0)

    with pytest.raises(InvalidArgumentError, match="Gas usage cannot be negative"):
        account.add_usage(-2.0)
    assert account.total_consumption == 4.0


def test_negative_initial_consumption_is_rejected(address, rates):
    with pytest.raises(InvalidArgumentError, match="Initial gas consumption cannot be negative"):
        GasAccount(address, rates=rates, initial_consumption=-0.1)


def test_non_numeric_usage_is_rejected(address, rates):
    account = GasAccount(address, rates=rates)

    with pytest.raises(InvalidArgumentError):
        account.add_usage("a lot")
    assert account.total_consumption == 0.0


def test_supply_and_status_output(address, rates):
    account = GasAccount(address, rates=rates, initial_consumption=2.0)
    stream = io.StringIO()

    account.supply(stream)
    account.show_status(stream)

    output = stream.getvalue()
    assert "Managing Gas supply for address: [3 Elm St, Shelbyville 54321]" in output
    assert "Total Consumption This Period: 2 m3" in output
    assert "Estimated Grid Bill: 50.00" in output


def test_statement_snapshot(address, rates):
    account = GasAccount(address, rates=rates, initial_consumption=2.0)

    statement = account.statement()

    assert statement.service == "Gas"
    assert statement.address == address
    assert statement.usage == 2.0
    assert statement.generation == 0.0
    assert statement.amount == pytest.approx(50.0)
    assert statement.is_credit is False


@pytest.mark.parametrize(
    "amounts",
    [[], [1.5], [0.1, 0.2, 0.3], [10.0, 0.0, 2.25, 7.75, 100.0]],
)
def test_usage_accumulates_to_exact_sum(address, rates, amounts):
    account = GasAccount(address, rates=rates)

    for amount in amounts:
        account.add_usage(amount)

    assert account.total_consumption == sum(amounts)
