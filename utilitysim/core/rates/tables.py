import logging
import math
import threading
from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, Iterator, Mapping

from utilitysim.core.errors import InvalidArgumentError, PlanNotFoundError, non_negative
from utilitysim.core.plans import InternetPlan, WaterTariffPlan
from utilitysim.core.rates.config import (
    ElectricityRateConfig,
    GasRateConfig,
    InternetPlanConfig,
    RateTableConfig,
    WaterPlanConfig,
)

logger = logging.getLogger(__name__)


# ------------------------
# Grid-priced utilities
# ------------------------
@dataclass(frozen=True, slots=True)
class ElectricityRates:
    """Consistent view of the electricity prices at one instant."""

    grid_unit_price: float
    grid_feed_in_tariff: float


class ElectricityRateTable:
    """Unit price for energy drawn from the grid and tariff paid for energy exported.

    Shared by every electricity account it is handed to. Setters and
    ``snapshot`` hold the same lock, so a bill never mixes an old price with
    a new tariff.
    """

    def __init__(self, grid_unit_price: float = 8.0, grid_feed_in_tariff: float = 3.0):
        self._lock = threading.RLock()
        self._grid_unit_price = non_negative(grid_unit_price, "Unit price cannot be negative.")
        self._grid_feed_in_tariff = non_negative(
            grid_feed_in_tariff, "Feed-in tariff cannot be negative."
        )

    @classmethod
    def from_config(cls, config: ElectricityRateConfig) -> "ElectricityRateTable":
        return cls(config.grid_unit_price, config.grid_feed_in_tariff)

    @property
    def grid_unit_price(self) -> float:
        with self._lock:
            return self._grid_unit_price

    @property
    def grid_feed_in_tariff(self) -> float:
        with self._lock:
            return self._grid_feed_in_tariff

    def set_grid_unit_price(self, new_price: float) -> None:
        price = non_negative(new_price, "Unit price cannot be negative.")
        with self._lock:
            self._grid_unit_price = price
        logger.info("Electricity grid unit price updated to %s", price)

    def set_grid_feed_in_tariff(self, new_tariff: float) -> None:
        tariff = non_negative(new_tariff, "Feed-in tariff cannot be negative.")
        with self._lock:
            self._grid_feed_in_tariff = tariff
        logger.info("Electricity feed-in tariff updated to %s", tariff)

    def snapshot(self) -> ElectricityRates:
        with self._lock:
            return ElectricityRates(self._grid_unit_price, self._grid_feed_in_tariff)


class GasRateTable:
    """Flat unit price shared by every gas account."""

    def __init__(self, grid_unit_price: float = 25.0):
        self._lock = threading.RLock()
        self._grid_unit_price = non_negative(grid_unit_price, "Gas unit price cannot be negative.")

    @classmethod
    def from_config(cls, config: GasRateConfig) -> "GasRateTable":
        return cls(config.grid_unit_price)

    @property
    def grid_unit_price(self) -> float:
        with self._lock:
            return self._grid_unit_price

    def set_grid_unit_price(self, new_price: float) -> None:
        price = non_negative(new_price, "Gas unit price cannot be negative.")
        with self._lock:
            self._grid_unit_price = price
        logger.info("Gas grid unit price updated to %s", price)


# ------------------------
# Catalog-priced utilities
# ------------------------
@dataclass(frozen=True, slots=True)
class TariffTier:
    upper_boundary: float  # cumulative; math.inf for the last tier
    price_per_unit: float

    @property
    def is_unbounded(self) -> bool:
        return math.isinf(self.upper_boundary)


@dataclass(frozen=True, slots=True)
class WaterPlan:
    plan: WaterTariffPlan
    display_name: str
    tiers: tuple[TariffTier, ...]


class WaterTariffSchedule:
    """Immutable mapping from water plan to its tiered price schedule."""

    def __init__(self, plans: Iterable[WaterPlanConfig]):
        store: dict[WaterTariffPlan, WaterPlan] = {}
        for config in plans:
            if config.plan in store:
                raise InvalidArgumentError(f"Duplicate water plan '{config.plan.value}'.")
            store[config.plan] = WaterPlan(
                plan=config.plan,
                display_name=config.display_name,
                tiers=tuple(
                    TariffTier(tier.upper_boundary, tier.price_per_unit)
                    for tier in config.tiers
                ),
            )
        missing = [plan.value for plan in WaterTariffPlan if plan not in store]
        if missing:
            raise InvalidArgumentError(f"Water schedule is missing plans: {missing}")
        self._plans: Mapping[WaterTariffPlan, WaterPlan] = MappingProxyType(store)

    def get(self, plan: WaterTariffPlan) -> WaterPlan:
        try:
            return self._plans[plan]
        except KeyError:
            raise PlanNotFoundError("water", plan) from None

    def __contains__(self, plan) -> bool:
        return plan in self._plans

    def __iter__(self) -> Iterator[WaterTariffPlan]:
        return iter(self._plans)

    def __len__(self) -> int:
        return len(self._plans)


@dataclass(frozen=True, slots=True)
class InternetPlanDetails:
    plan: InternetPlan
    display_name: str
    base_cost: float
    data_cap_gb: float
    overage_cost_per_gb: float
    speed_mbps: int

    @property
    def is_uncapped(self) -> bool:
        return math.isinf(self.data_cap_gb)


class InternetPlanCatalog:
    """Immutable mapping from internet plan to its pricing details."""

    def __init__(self, plans: Iterable[InternetPlanConfig]):
        store: dict[InternetPlan, InternetPlanDetails] = {}
        for config in plans:
            if config.plan in store:
                raise InvalidArgumentError(f"Duplicate internet plan '{config.plan.value}'.")
            store[config.plan] = InternetPlanDetails(
                plan=config.plan,
                display_name=config.display_name,
                base_cost=config.base_cost,
                data_cap_gb=config.data_cap_gb,
                overage_cost_per_gb=config.overage_cost_per_gb,
                speed_mbps=config.speed_mbps,
            )
        missing = [plan.value for plan in InternetPlan if plan not in store]
        if missing:
            raise InvalidArgumentError(f"Internet catalog is missing plans: {missing}")
        self._plans: Mapping[InternetPlan, InternetPlanDetails] = MappingProxyType(store)

    def get(self, plan: InternetPlan) -> InternetPlanDetails:
        try:
            return self._plans[plan]
        except KeyError:
            raise PlanNotFoundError("internet", plan) from None

    def __contains__(self, plan) -> bool:
        return plan in self._plans

    def __iter__(self) -> Iterator[InternetPlan]:
        return iter(self._plans)

    def __len__(self) -> int:
        return len(self._plans)


# ------------------------
# Bundle
# ------------------------
@dataclass(frozen=True)
class RateTables:
    """The pricing state for one simulation run, one table per utility kind."""

    electricity: ElectricityRateTable
    gas: GasRateTable
    water: WaterTariffSchedule
    internet: InternetPlanCatalog


def build_rate_tables(config: RateTableConfig) -> RateTables:
    """Build the rate tables described by the given configuration."""
    return RateTables(
        electricity=ElectricityRateTable.from_config(config.electricity),
        gas=GasRateTable.from_config(config.gas),
        water=WaterTariffSchedule(config.water_plans),
        internet=InternetPlanCatalog(config.internet_plans),
    )


def default_rate_tables() -> RateTables:
    return build_rate_tables(RateTableConfig())
