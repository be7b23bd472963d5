"""Closed sets of supply strategies and tariff plans."""

from enum import Enum
from typing import TypeVar

from utilitysim.core.errors import InvalidArgumentError


class ElectricitySupplyStrategy(str, Enum):
    GRID_ONLY = "grid_only"  # all consumption from grid
    SOLAR_PRIMARY = "solar_primary"
    WIND_PRIMARY = "wind_primary"
    GRID_TIED_SOLAR = "grid_tied_solar"  # import/export with grid
    GRID_TIED_WIND = "grid_tied_wind"

    @property
    def display_name(self) -> str:
        return _STRATEGY_NAMES[self]

    @property
    def is_self_generation(self) -> bool:
        return self in (
            ElectricitySupplyStrategy.SOLAR_PRIMARY,
            ElectricitySupplyStrategy.WIND_PRIMARY,
        )

    @property
    def is_grid_tied(self) -> bool:
        return self in (
            ElectricitySupplyStrategy.GRID_TIED_SOLAR,
            ElectricitySupplyStrategy.GRID_TIED_WIND,
        )


_STRATEGY_NAMES = {
    ElectricitySupplyStrategy.GRID_ONLY: "Grid Only",
    ElectricitySupplyStrategy.SOLAR_PRIMARY: "Solar Primary (Self-Gen)",
    ElectricitySupplyStrategy.WIND_PRIMARY: "Wind Primary (Self-Gen)",
    ElectricitySupplyStrategy.GRID_TIED_SOLAR: "Grid-Tied Solar",
    ElectricitySupplyStrategy.GRID_TIED_WIND: "Grid-Tied Wind",
}


class WaterTariffPlan(str, Enum):
    NO_SUPPLY = "no_supply"
    RESIDENTIAL_CONSERVATION = "residential_conservation"  # incentivized low usage
    RESIDENTIAL_STANDARD = "residential_standard"
    COMMERCIAL_STANDARD = "commercial_standard"


class InternetPlan(str, Enum):
    NO_SERVICE = "no_service"
    STANDARD = "standard"
    PREMIUM = "premium"
    BUSINESS_FIBER = "business_fiber"


E = TypeVar("E", bound=Enum)


def coerce_plan(enum_cls: type[E], value) -> E:
    """Resolve an enum member from a member, its value or its name."""
    if isinstance(value, enum_cls):
        return value
    if isinstance(value, str):
        key = value.strip()
        try:
            return enum_cls(key.lower())
        except ValueError:
            pass
        try:
            return enum_cls[key.upper()]
        except KeyError:
            pass
    raise InvalidArgumentError(f"Unrecognized {enum_cls.__name__}: {value!r}")
