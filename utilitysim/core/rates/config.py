import math
from dataclasses import dataclass, field

import numpy as np

from utilitysim.core.errors import InvalidArgumentError, non_negative
from utilitysim.core.plans import InternetPlan, WaterTariffPlan


@dataclass(frozen=True, slots=True, kw_only=True)
class ElectricityRateConfig:
    """Grid prices shared by every electricity account."""

    grid_unit_price: float = 8.0
    grid_feed_in_tariff: float = 3.0

    def __post_init__(self):
        non_negative(self.grid_unit_price, "Unit price cannot be negative.")
        non_negative(self.grid_feed_in_tariff, "Feed-in tariff cannot be negative.")


@dataclass(frozen=True, slots=True, kw_only=True)
class GasRateConfig:
    grid_unit_price: float = 25.0

    def __post_init__(self):
        non_negative(self.grid_unit_price, "Gas unit price cannot be negative.")


@dataclass(frozen=True, slots=True, kw_only=True)
class TariffTierConfig:
    """One tier of a tiered schedule.

    ``upper_boundary`` is a cumulative threshold, not the width of the tier.
    """

    price_per_unit: float
    upper_boundary: float = math.inf

    def __post_init__(self):
        non_negative(self.price_per_unit, "Tier price cannot be negative.")
        if not self.upper_boundary > 0:
            raise InvalidArgumentError("Tier upper boundary must be positive.")


@dataclass(frozen=True, slots=True, kw_only=True)
class WaterPlanConfig:
    plan: WaterTariffPlan
    display_name: str
    tiers: tuple[TariffTierConfig, ...] = ()

    def __post_init__(self):
        if not self.tiers:
            if self.plan != WaterTariffPlan.NO_SUPPLY:
                raise InvalidArgumentError(
                    f"Water plan '{self.plan.value}' must define at least one tier."
                )
            return
        boundaries = np.array([tier.upper_boundary for tier in self.tiers], dtype=float)
        if not np.all(np.diff(boundaries) > 0):
            raise InvalidArgumentError(
                f"Tiers of water plan '{self.plan.value}' must be strictly ascending."
            )
        if not np.isinf(boundaries[-1]):
            raise InvalidArgumentError(
                f"Last tier of water plan '{self.plan.value}' must be unbounded."
            )


@dataclass(frozen=True, slots=True, kw_only=True)
class InternetPlanConfig:
    plan: InternetPlan
    display_name: str
    base_cost: float = 0.0
    data_cap_gb: float = math.inf
    overage_cost_per_gb: float = 0.0
    speed_mbps: int = 0

    def __post_init__(self):
        non_negative(self.base_cost, "Base cost cannot be negative.")
        non_negative(self.data_cap_gb, "Data cap cannot be negative.")
        non_negative(self.overage_cost_per_gb, "Overage cost cannot be negative.")
        non_negative(self.speed_mbps, "Speed cannot be negative.")


DEFAULT_WATER_PLANS = (
    WaterPlanConfig(plan=WaterTariffPlan.NO_SUPPLY, display_name="No Supply"),
    WaterPlanConfig(
        plan=WaterTariffPlan.RESIDENTIAL_CONSERVATION,
        display_name="Residential Conservation",
        tiers=(
            TariffTierConfig(upper_boundary=10.0, price_per_unit=1.5),
            TariffTierConfig(upper_boundary=20.0, price_per_unit=3.0),
            TariffTierConfig(price_per_unit=6.0),
        ),
    ),
    WaterPlanConfig(
        plan=WaterTariffPlan.RESIDENTIAL_STANDARD,
        display_name="Residential Standard",
        tiers=(
            TariffTierConfig(upper_boundary=10.0, price_per_unit=2.0),
            TariffTierConfig(upper_boundary=20.0, price_per_unit=3.0),
            TariffTierConfig(price_per_unit=5.0),
        ),
    ),
    WaterPlanConfig(
        plan=WaterTariffPlan.COMMERCIAL_STANDARD,
        display_name="Commercial Standard",
        tiers=(
            TariffTierConfig(upper_boundary=50.0, price_per_unit=4.0),
            TariffTierConfig(upper_boundary=200.0, price_per_unit=4.5),
            TariffTierConfig(price_per_unit=5.5),
        ),
    ),
)

DEFAULT_INTERNET_PLANS = (
    InternetPlanConfig(
        plan=InternetPlan.NO_SERVICE, display_name="No Service", data_cap_gb=0.0
    ),
    InternetPlanConfig(
        plan=InternetPlan.STANDARD,
        display_name="Standard Plan",
        base_cost=500.0,
        data_cap_gb=100.0,
        overage_cost_per_gb=10.0,
        speed_mbps=50,
    ),
    InternetPlanConfig(
        plan=InternetPlan.PREMIUM,
        display_name="Premium Plan",
        base_cost=800.0,
        data_cap_gb=200.0,
        overage_cost_per_gb=80.0,
        speed_mbps=100,
    ),
    InternetPlanConfig(
        plan=InternetPlan.BUSINESS_FIBER,
        display_name="Business Fiber Plan",
        base_cost=1500.0,
        speed_mbps=1000,
    ),
)


@dataclass(frozen=True, slots=True, kw_only=True)
class RateTableConfig:
    """Complete pricing configuration for one simulation run."""

    electricity: ElectricityRateConfig = field(default_factory=ElectricityRateConfig)
    gas: GasRateConfig = field(default_factory=GasRateConfig)
    water_plans: tuple[WaterPlanConfig, ...] = DEFAULT_WATER_PLANS
    internet_plans: tuple[InternetPlanConfig, ...] = DEFAULT_INTERNET_PLANS
