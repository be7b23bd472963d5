"""Config definitions for accounts. The Literal ``type`` fields let dacite pick the right class."""

from dataclasses import dataclass
from typing import Literal, Union

from utilitysim.core.address import Address
from utilitysim.core.errors import non_negative
from utilitysim.core.plans import ElectricitySupplyStrategy, InternetPlan, WaterTariffPlan


@dataclass(frozen=True, slots=True, kw_only=True)
class BaseAccountConfig:
    type: str
    address: Address


@dataclass(frozen=True, slots=True, kw_only=True)
class ElectricityAccountConfig(BaseAccountConfig):
    strategy: ElectricitySupplyStrategy = ElectricitySupplyStrategy.GRID_ONLY
    initial_consumption: float = 0.0
    initial_generation: float = 0.0

    type: Literal["electricity"] = "electricity"

    def __post_init__(self):
        non_negative(self.initial_consumption, "Initial consumption/generation cannot be negative.")
        non_negative(self.initial_generation, "Initial consumption/generation cannot be negative.")


@dataclass(frozen=True, slots=True, kw_only=True)
class GasAccountConfig(BaseAccountConfig):
    initial_consumption: float = 0.0

    type: Literal["gas"] = "gas"

    def __post_init__(self):
        non_negative(self.initial_consumption, "Initial gas consumption cannot be negative.")


@dataclass(frozen=True, slots=True, kw_only=True)
class WaterAccountConfig(BaseAccountConfig):
    plan: WaterTariffPlan = WaterTariffPlan.NO_SUPPLY
    initial_consumption: float = 0.0

    type: Literal["water"] = "water"

    def __post_init__(self):
        non_negative(self.initial_consumption, "Initial water consumption cannot be negative.")


@dataclass(frozen=True, slots=True, kw_only=True)
class InternetAccountConfig(BaseAccountConfig):
    plan: InternetPlan = InternetPlan.NO_SERVICE
    initial_data_usage: float = 0.0

    type: Literal["internet"] = "internet"

    def __post_init__(self):
        non_negative(self.initial_data_usage, "Initial data usage cannot be negative.")


AccountConfig = Union[
    ElectricityAccountConfig,
    GasAccountConfig,
    WaterAccountConfig,
    InternetAccountConfig,
]
"""Union type for all account configurations."""
