"""Load rate tables and accounts from YAML files.

Example::

    rates:
      electricity:
        grid_unit_price: 8
        grid_feed_in_tariff: 3
    accounts:
      - type: electricity
        address: {street: 12 Main St, city: Springfield, postal_code: "12345"}
        strategy: grid_tied_solar

Unbounded tier boundaries and data caps are written ``.inf``.
"""

import logging
from dataclasses import dataclass, field, fields
from functools import partial
from os import PathLike
from typing import Any, Mapping, Union, get_args

import yaml
from dacite import Config, from_dict

from utilitysim.core.accounts import AccountConfig, UtilityAccount, build_accounts
from utilitysim.core.errors import InvalidArgumentError
from utilitysim.core.plans import (
    ElectricitySupplyStrategy,
    InternetPlan,
    WaterTariffPlan,
    coerce_plan,
)
from utilitysim.core.portfolio import ServicePortfolio
from utilitysim.core.rates.config import RateTableConfig
from utilitysim.core.rates.tables import RateTables, build_rate_tables

logger = logging.getLogger(__name__)

DACITE_CONFIG = Config(
    type_hooks={
        enum_cls: partial(coerce_plan, enum_cls)
        for enum_cls in (ElectricitySupplyStrategy, WaterTariffPlan, InternetPlan)
    },
    cast=[tuple, float, str],
    strict=True,
)

ACCOUNT_CONFIGS = {
    next(f.default for f in fields(config_cls) if f.name == "type"): config_cls
    for config_cls in get_args(AccountConfig)
}


@dataclass(frozen=True, slots=True, kw_only=True)
class CityConfig:
    rates: RateTableConfig = field(default_factory=RateTableConfig)
    accounts: tuple[AccountConfig, ...] = ()


@dataclass(frozen=True)
class City:
    rates: RateTables
    portfolio: ServicePortfolio

    @property
    def accounts(self) -> list[UtilityAccount]:
        return list(self.portfolio)


def _read_yaml(path: Union[str, PathLike]) -> Mapping[str, Any]:
    with open(path, "r") as file:
        data = yaml.safe_load(file)
    return data or {}


def parse_rate_table_config(data: Mapping[str, Any]) -> RateTableConfig:
    return from_dict(RateTableConfig, dict(data), config=DACITE_CONFIG)


def parse_account_config(entry: Mapping[str, Any], index: int = 0) -> AccountConfig:
    """Parse one account entry into the config class named by its ``type`` tag."""
    kind = entry.get("type") if isinstance(entry, Mapping) else None
    if kind is None:
        raise InvalidArgumentError(f"Account entry {index} has no 'type'.")
    config_cls = ACCOUNT_CONFIGS.get(kind) if isinstance(kind, str) else None
    if config_cls is None:
        raise InvalidArgumentError(
            f"Account entry {index} has unknown type {kind!r}; "
            f"expected one of {sorted(ACCOUNT_CONFIGS)}."
        )
    return from_dict(config_cls, dict(entry), config=DACITE_CONFIG)


def parse_city_config(data: Mapping[str, Any]) -> CityConfig:
    unknown = set(data) - {f.name for f in fields(CityConfig)}
    if unknown:
        raise InvalidArgumentError(f"Unknown city config keys: {sorted(unknown)}")
    return CityConfig(
        rates=parse_rate_table_config(data.get("rates") or {}),
        accounts=tuple(
            parse_account_config(entry, index)
            for index, entry in enumerate(data.get("accounts") or ())
        ),
    )


def load_rate_tables(path: Union[str, PathLike]) -> RateTables:
    """Build rate tables from a YAML file holding a ``RateTableConfig``."""
    config = parse_rate_table_config(_read_yaml(path))
    logger.info("Loaded rate tables from %s", path)
    return build_rate_tables(config)


def build_city(config: CityConfig) -> City:
    rates = build_rate_tables(config.rates)
    portfolio = ServicePortfolio(build_accounts(config.accounts, rates))
    return City(rates=rates, portfolio=portfolio)


def load_city(path: Union[str, PathLike]) -> City:
    """Build rate tables and every configured account from a YAML file."""
    city = build_city(parse_city_config(_read_yaml(path)))
    logger.info("Loaded %d accounts from %s", len(city.portfolio), path)
    return city
