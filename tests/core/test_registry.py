"""Tests for the account registry."""

from utilitysim.core.accounts.config import ElectricityAccountConfig, WaterAccountConfig
from utilitysim.core.accounts.electricity import ElectricityAccount
from utilitysim.core.accounts.water import WaterAccount
from utilitysim.core.registry import registry, register_account


class MockAccountConfig:
    pass


def test_register_account():
    # Arrange
    initial_count = len(registry.accounts)

    # Act
    @register_account(MockAccountConfig)
    class TestAccount:
        pass

    # Assert
    assert len(registry.accounts) == initial_count + 1
    assert registry.accounts[MockAccountConfig.__name__] is TestAccount


def test_builtin_accounts_are_registered():
    assert registry.accounts[ElectricityAccountConfig.__name__] is ElectricityAccount
    assert registry.accounts[WaterAccountConfig.__name__] is WaterAccount


def test_registry_singleton_behavior():
    # Arrange & Act
    from utilitysim.core.registry import registry as registry2

    # Assert
    assert registry is registry2
