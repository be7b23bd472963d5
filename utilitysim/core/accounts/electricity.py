from utilitysim.core.accounts.base import UtilityAccount
from utilitysim.core.accounts.config import ElectricityAccountConfig
from utilitysim.core.address import Address
from utilitysim.core.errors import InvalidArgumentError, non_negative
from utilitysim.core.plans import ElectricitySupplyStrategy, coerce_plan
from utilitysim.core.rates.tables import ElectricityRates, ElectricityRateTable, RateTables
from utilitysim.core.registry import register_account


@register_account(ElectricityAccountConfig)
class ElectricityAccount(UtilityAccount):
    """Net-metered electricity account.

    Consumption and local generation accumulate independently. The supply
    strategy decides how much of the load is exchanged with the grid:

    * ``GRID_ONLY`` draws the whole load from the grid.
    * ``SOLAR_PRIMARY`` / ``WIND_PRIMARY`` assume local generation covers the
      load and report no grid interaction, even when generation falls short.
    * ``GRID_TIED_*`` exchange the signed difference ``consumption - generation``;
      positive values are drawn, negative values are exported.

    Changing the strategy keeps both accumulators.
    """

    service_name = "Electricity"

    def __init__(
        self,
        address: Address,
        strategy: ElectricitySupplyStrategy,
        *,
        rates: ElectricityRateTable,
        initial_consumption: float = 0.0,
        initial_generation: float = 0.0,
    ):
        super().__init__(address)
        message = "Initial consumption/generation cannot be negative."
        consumption = non_negative(initial_consumption, message)
        generation = non_negative(initial_generation, message)
        self._strategy = coerce_plan(ElectricitySupplyStrategy, strategy)
        self._rates = rates
        self._total_consumption = consumption  # kWh
        self._local_generation = generation  # kWh

    @classmethod
    def from_config(
        cls, config: ElectricityAccountConfig, rates: RateTables
    ) -> "ElectricityAccount":
        return cls(
            config.address,
            config.strategy,
            rates=rates.electricity,
            initial_consumption=config.initial_consumption,
            initial_generation=config.initial_generation,
        )

    # Accumulators
    def add_usage(self, kwh: float) -> None:
        amount = non_negative(kwh, "Usage cannot be negative.")
        self._total_consumption += amount
        self.logger.debug("Recorded %s kWh usage at %s", amount, self.address)

    def add_local_generation(self, kwh: float) -> None:
        amount = non_negative(kwh, "Local generation cannot be negative.")
        self._local_generation += amount
        self.logger.debug("Recorded %s kWh local generation at %s", amount, self.address)

    # Billing
    def get_net_grid_energy(self) -> float:
        """Net energy exchanged with the grid; positive is drawn, negative is exported."""
        if self._strategy == ElectricitySupplyStrategy.GRID_ONLY:
            return self._total_consumption
        if self._strategy.is_self_generation:
            return 0.0
        if self._strategy.is_grid_tied:
            return self._total_consumption - self._local_generation
        raise InvalidArgumentError(f"Invalid electricity supply strategy: {self._strategy}")

    def calculate_bill(self) -> float:
        return self._bill_at(self._rates.snapshot())

    def _bill_at(self, rates: ElectricityRates) -> float:
        net_energy = self.get_net_grid_energy()
        if net_energy > 0:
            bill = net_energy * rates.grid_unit_price
        elif net_energy < 0:
            # credit for energy supplied to the grid
            bill = net_energy * rates.grid_feed_in_tariff
        else:
            bill = 0.0
        self.logger.debug("Electricity bill for %s: %s", self.address, bill)
        return bill

    def set_supply_strategy(self, strategy: ElectricitySupplyStrategy) -> None:
        self._strategy = coerce_plan(ElectricitySupplyStrategy, strategy)
        self.logger.info(
            "Electricity supply strategy for %s updated to: %s",
            self.address,
            self._strategy.display_name,
        )

    # Accessors
    @property
    def total_consumption(self) -> float:
        return self._total_consumption

    @property
    def local_generation(self) -> float:
        return self._local_generation

    @property
    def supply_strategy(self) -> ElectricitySupplyStrategy:
        return self._strategy

    @property
    def strategy_display_name(self) -> str:
        return self._strategy.display_name

    @property
    def rates(self) -> ElectricityRateTable:
        return self._rates

    @property
    def plan_label(self) -> str:
        return self._strategy.display_name

    @property
    def period_usage(self) -> float:
        return self._total_consumption

    @property
    def period_generation(self) -> float:
        return self._local_generation

    # Reporting
    def supply_report(self) -> list[str]:
        lines = [
            f"Managing electricity ({self.strategy_display_name}) "
            f"for address: [{self.address.display()}]"
        ]
        if self._strategy.is_self_generation:
            if self._total_consumption > self._local_generation:
                self.logger.warning(
                    "Energy shortfall at %s: consumption %s kWh exceeds generation %s kWh",
                    self.address,
                    self._total_consumption,
                    self._local_generation,
                )
                lines.append("   Status: Potential energy shortfall (Consumption > Generation).")
            else:
                lines.append("   Status: Local generation meeting/exceeding consumption.")
        else:
            net_energy = self.get_net_grid_energy()
            if net_energy > 0:
                lines.append(f"   Status: Net drawing power from grid ({net_energy:g} kWh).")
            else:
                lines.append(
                    f"   Status: Net supplying power to grid ({-net_energy:g} kWh) or balanced."
                )
        return lines

    def format_status(self) -> str:
        net_energy = self.get_net_grid_energy()
        if net_energy > 0:
            direction = "(Draw)"
        elif net_energy < 0:
            direction = "(Export)"
        else:
            direction = "(Zero)"

        lines = [
            f"--- Electricity Status for Address: [{self.address.display()}] ---",
            f"   Supply Strategy: {self.strategy_display_name}",
            f"   Total Consumption This Period: {self._total_consumption:g} kWh",
        ]
        if self._strategy != ElectricitySupplyStrategy.GRID_ONLY:
            lines.append(f"   Local Generation This Period: {self._local_generation:g} kWh")
        lines.append(f"   Net Grid Interaction: {net_energy:g} kWh {direction}")

        if self._strategy.is_self_generation:
            lines.append("   Billing: N/A (Primary Self-Generation)")
        else:
            rates = self._rates.snapshot()
            lines.extend(
                [
                    f"   Grid Unit Price (Draw): {rates.grid_unit_price:.2f}/kWh",
                    f"   Grid Feed-in Tariff (Export): {rates.grid_feed_in_tariff:.2f}/kWh",
                    f"   Estimated Grid Bill/Credit: {self._bill_at(rates):.2f}",
                ]
            )
        lines.append("-------------------------------------------")
        return "\n".join(lines)
