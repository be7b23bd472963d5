"""Tests for the plan and overage based internet account."""

import io

import pytest
from utilitysim.core.accounts.internet import OVERAGE_RATE_PER_GB, InternetAccount
from utilitysim.core.address import Address
from utilitysim.core.errors import InvalidArgumentError
from utilitysim.core.plans import InternetPlan
from utilitysim.core.rates.config import DEFAULT_INTERNET_PLANS, InternetPlanConfig
from utilitysim.core.rates.tables import InternetPlanCatalog


@pytest.fixture
def address():
    return Address(street="1 Fiber Way", city="Springfield", unit="3B")


@pytest.fixture
def catalog():
    return InternetPlanCatalog(DEFAULT_INTERNET_PLANS)


def test_standard_plan_overage(address, catalog):
    # Arrange
    account = InternetAccount(address, InternetPlan.STANDARD, rates=catalog)
    account.add_data_usage(130.0)

    # Act
    bill = account.calculate_bill()

    # Assert - 500 + 30 GB x 10
    assert bill == pytest.approx(800.0)


def test_standard_plan_within_cap_pays_base_cost(address, catalog):
    account = InternetAccount(address, InternetPlan.STANDARD, rates=catalog, initial_data_usage=100.0)

    assert account.calculate_bill() == pytest.approx(500.0)


def test_overage_uses_fixed_rate_not_plan_rate(address, catalog):
    # Premium lists 80 per GB but overage is billed at the fixed rate.
    account = InternetAccount(address, InternetPlan.PREMIUM, rates=catalog, initial_data_usage=250.0)

    assert account.plan_details.overage_cost_per_gb == 80.0
    assert account.calculate_bill() == pytest.approx(800.0 + 50.0 * OVERAGE_RATE_PER_GB)
    assert account.calculate_bill() != pytest.approx(800.0 + 50.0 * 80.0)


def test_business_fiber_is_flat(address, catalog):
    account = InternetAccount(
        address, InternetPlan.BUSINESS_FIBER, rates=catalog, initial_data_usage=10_000.0
    )

    assert account.calculate_bill() == pytest.approx(1500.0)
    assert account.current_speed_mbps == 1000


def test_no_service_bills_nothing(address, catalog):
    account = InternetAccount(address, rates=catalog, initial_data_usage=30.0)

    assert account.current_plan is InternetPlan.NO_SERVICE
    assert account.calculate_bill() == 0.0


def test_no_overage_when_plan_overage_rate_is_zero(address):
    # Arrange
    plans = [
        config if config.plan != InternetPlan.STANDARD
        else InternetPlanConfig(
            plan=InternetPlan.STANDARD,
            display_name="Soft Cap",
            base_cost=300.0,
            data_cap_gb=50.0,
            overage_cost_per_gb=0.0,
            speed_mbps=25,
        )
        for config in DEFAULT_INTERNET_PLANS
    ]
    catalog = InternetPlanCatalog(plans)
    account = InternetAccount(address, InternetPlan.STANDARD, rates=catalog, initial_data_usage=90.0)

    # Act & Assert
    assert account.calculate_bill() == pytest.approx(300.0)


def test_changing_plan_resets_data_usage(address, catalog):
    # Arrange
    account = InternetAccount(address, InternetPlan.STANDARD, rates=catalog, initial_data_usage=42.0)

    # Act
    account.set_current_plan(InternetPlan.PREMIUM)

    # Assert
    assert account.current_plan is InternetPlan.PREMIUM
    assert account.data_used_gb == 0.0
    assert account.current_speed_mbps == 100


def test_invalid_plan_change_keeps_usage(address, catalog):
    account = InternetAccount(address, InternetPlan.STANDARD, rates=catalog, initial_data_usage=42.0)

    with pytest.raises(InvalidArgumentError):
        account.set_current_plan("dial_up")

    assert account.current_plan is InternetPlan.STANDARD
    assert account.data_used_gb == 42.0


def test_negative_data_usage_is_rejected(address, catalog):
    account = InternetAccount(address, InternetPlan.STANDARD, rates=catalog, initial_data_usage=5.0)

    with pytest.raises(InvalidArgumentError, match="Data usage cannot be negative"):
        account.add_data_usage(-1.0)
    assert account.data_used_gb == 5.0


def test_negative_initial_usage_is_rejected(address, catalog):
    with pytest.raises(InvalidArgumentError, match="Initial data usage cannot be negative"):
        InternetAccount(address, rates=catalog, initial_data_usage=-5.0)


def test_supply_reports_speed(address, catalog):
    account = InternetAccount(address, InternetPlan.PREMIUM, rates=catalog)
    stream = io.StringIO()

    account.supply(stream)

    output = stream.getvalue()
    assert "Premium Plan" in output
    assert "1 Fiber Way, Unit 3B, Springfield" in output
    assert "Current speed: 100 Mbps" in output


def test_show_status_for_uncapped_plan(address, catalog):
    account = InternetAccount(address, InternetPlan.BUSINESS_FIBER, rates=catalog)

    status = account.format_status()

    assert "Data Cap: Unlimited" in status
    assert "Overage Cost" not in status
    assert "Estimated Bill: 1500.00" in status


def test_show_status_for_capped_plan(address, catalog):
    account = InternetAccount(address, InternetPlan.STANDARD, rates=catalog, initial_data_usage=130.0)

    status = account.format_status()

    assert "Data Cap: 100 GB" in status
    assert "Overage Cost: 10.00 per GB" in status
    assert "Estimated Bill: 800.00" in status


def test_show_status_without_service(address, catalog):
    account = InternetAccount(address, rates=catalog)

    assert "No active service" in account.format_status()


@pytest.mark.parametrize(
    "amounts",
    [[], [1.5], [0.1, 0.2, 0.3], [10.0, 0.0, 2.25, 7.75, 100.0]],
)
def test_data_usage_accumulates_to_exact_sum(address, catalog, amounts):
    account = InternetAccount(address, InternetPlan.STANDARD, rates=catalog)

    for amount in amounts:
        account.add_data_usage(amount)

    assert account.data_used_gb == sum(amounts)
