from utilitysim.core.rates.config import (
    ElectricityRateConfig,
    GasRateConfig,
    InternetPlanConfig,
    RateTableConfig,
    TariffTierConfig,
    WaterPlanConfig,
)
from utilitysim.core.rates.tables import (
    ElectricityRates,
    ElectricityRateTable,
    GasRateTable,
    InternetPlanCatalog,
    InternetPlanDetails,
    RateTables,
    TariffTier,
    WaterPlan,
    WaterTariffSchedule,
    build_rate_tables,
    default_rate_tables,
)

__all__ = [
    "ElectricityRateConfig",
    "GasRateConfig",
    "InternetPlanConfig",
    "RateTableConfig",
    "TariffTierConfig",
    "WaterPlanConfig",
    "ElectricityRates",
    "ElectricityRateTable",
    "GasRateTable",
    "InternetPlanCatalog",
    "InternetPlanDetails",
    "RateTables",
    "TariffTier",
    "WaterPlan",
    "WaterTariffSchedule",
    "build_rate_tables",
    "default_rate_tables",
]
