from utilitysim.core.accounts.base import UtilityAccount
from utilitysim.core.accounts.config import GasAccountConfig
from utilitysim.core.address import Address
from utilitysim.core.errors import non_negative
from utilitysim.core.rates.tables import GasRateTable, RateTables
from utilitysim.core.registry import register_account


@register_account(GasAccountConfig)
class GasAccount(UtilityAccount):
    """Flat-rate gas account, consumption in cubic meters."""

    service_name = "Gas"

    def __init__(
        self,
        address: Address,
        *,
        rates: GasRateTable,
        initial_consumption: float = 0.0,
    ):
        super().__init__(address)
        self._total_consumption = non_negative(
            initial_consumption, "Initial gas consumption cannot be negative."
        )
        self._rates = rates
        self.logger.debug("Gas account initialized for %s", address)

    @classmethod
    def from_config(cls, config: GasAccountConfig, rates: RateTables) -> "GasAccount":
        return cls(
            config.address,
            rates=rates.gas,
            initial_consumption=config.initial_consumption,
        )

    def add_usage(self, cubic_meters: float) -> None:
        amount = non_negative(cubic_meters, "Gas usage cannot be negative.")
        self._total_consumption += amount
        self.logger.debug("Recorded %s m3 gas usage at %s", amount, self.address)

    def calculate_bill(self) -> float:
        if self._total_consumption <= 0:
            return 0.0
        return self._total_consumption * self._rates.grid_unit_price

    @property
    def total_consumption(self) -> float:
        return self._total_consumption

    @property
    def rates(self) -> GasRateTable:
        return self._rates

    @property
    def plan_label(self) -> str:
        return "Flat Rate"

    @property
    def period_usage(self) -> float:
        return self._total_consumption

    def supply_report(self) -> list[str]:
        return [
            f"Managing Gas supply for address: [{self.address.display()}]",
            "   Status: Grid connection active. Current consumption rate implies stable supply.",
        ]

    def format_status(self) -> str:
        return "\n".join(
            [
                f"--- Gas Status for Address: [{self.address.display()}] ---",
                f"   Total Consumption This Period: {self._total_consumption:g} m3",
                f"   Grid Unit Price: {self._rates.grid_unit_price:.2f}/m3",
                f"   Estimated Grid Bill: {self.calculate_bill():.2f}",
                "-------------------------------------------",
            ]
        )
