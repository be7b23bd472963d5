import logging
from typing import Iterable

from utilitysim.core.accounts.base import UtilityAccount
from utilitysim.core.accounts.config import BaseAccountConfig
from utilitysim.core.rates.tables import RateTables
from utilitysim.core.registry import registry

logger = logging.getLogger(__name__)


def build_account(config: BaseAccountConfig, rates: RateTables) -> UtilityAccount:
    """
    Builds an account from its configuration.

    The account class is looked up in the registry by the config class name
    and reads the rate table of its own utility kind from ``rates``.
    """
    if config.__class__.__name__ not in registry.accounts:
        raise ValueError(f"Account config '{config.__class__.__name__}' not found in registry.")

    account_cls = registry.accounts[config.__class__.__name__]
    account = account_cls.from_config(config, rates)
    logger.info("Built %s account for %s", account.service_name, config.address)
    return account


def build_accounts(
    configs: Iterable[BaseAccountConfig], rates: RateTables
) -> list[UtilityAccount]:
    """Builds a list of accounts sharing the same rate tables."""
    return [build_account(config, rates) for config in configs]
