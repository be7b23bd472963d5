from utilitysim.core.address import Address
from utilitysim.core.errors import InvalidArgumentError, PlanNotFoundError
from utilitysim.core.plans import ElectricitySupplyStrategy, InternetPlan, WaterTariffPlan
from utilitysim.core.rates import RateTableConfig, RateTables, build_rate_tables, default_rate_tables
from utilitysim.core.accounts import (
    BillStatement,
    ElectricityAccount,
    GasAccount,
    InternetAccount,
    UtilityAccount,
    WaterAccount,
    build_account,
    build_accounts,
)
from utilitysim.core.portfolio import ServicePortfolio
from utilitysim.core.loader import City, CityConfig, load_city, load_rate_tables

__all__ = [
 "Address",
 "InvalidArgumentError",
 "PlanNotFoundError",
 "ElectricitySupplyStrategy",
 "InternetPlan",
 "WaterTariffPlan",
 "RateTableConfig",
 "RateTables",
 "build_rate_tables",
 "default_rate_tables",
 "BillStatement",
 "ElectricityAccount",
 "GasAccount",
 "InternetAccount",
 "UtilityAccount",
 "WaterAccount",
 "build_account",
 "build_accounts",
 "ServicePortfolio",
 "City",
 "CityConfig",
 "load_city",
 "load_rate_tables",
]
