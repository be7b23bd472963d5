from utilitysim.core.accounts.base import UtilityAccount
from utilitysim.core.accounts.config import WaterAccountConfig
from utilitysim.core.accounts.outputs import TierCharge
from utilitysim.core.address import Address
from utilitysim.core.errors import InvalidArgumentError, non_negative
from utilitysim.core.plans import WaterTariffPlan, coerce_plan
from utilitysim.core.rates.tables import RateTables, WaterPlan, WaterTariffSchedule
from utilitysim.core.registry import register_account


@register_account(WaterAccountConfig)
class WaterAccount(UtilityAccount):
    """Water account billed on a tiered schedule.

    Each tier of the active plan covers consumption up to its cumulative
    ``upper_boundary`` and is priced at its own rate. The schedule must list
    tiers in ascending order and end with an unbounded tier; the rate
    configuration enforces both.

    Changing the plan starts a new billing period and resets consumption.
    """

    service_name = "Water"

    def __init__(
        self,
        address: Address,
        plan: WaterTariffPlan = WaterTariffPlan.NO_SUPPLY,
        *,
        rates: WaterTariffSchedule,
        initial_consumption: float = 0.0,
    ):
        super().__init__(address)
        consumption = non_negative(
            initial_consumption, "Initial water consumption cannot be negative."
        )
        plan = coerce_plan(WaterTariffPlan, plan)
        if plan not in rates:
            raise InvalidArgumentError("Invalid water plan provided during construction.")
        self._rates = rates
        self._plan = plan
        self._consumption_cubic_meters = consumption

    @classmethod
    def from_config(cls, config: WaterAccountConfig, rates: RateTables) -> "WaterAccount":
        return cls(
            config.address,
            config.plan,
            rates=rates.water,
            initial_consumption=config.initial_consumption,
        )

    def add_consumption(self, cubic_meters: float) -> None:
        amount = non_negative(cubic_meters, "Water consumption to add cannot be negative.")
        self._consumption_cubic_meters += amount
        self.logger.debug("Recorded %s m3 water consumption at %s", amount, self.address)

    def bill_breakdown(self) -> list[TierCharge]:
        """Split the period consumption over the tiers of the active plan."""
        if self._plan == WaterTariffPlan.NO_SUPPLY:
            return []

        charges = []
        remaining = self._consumption_cubic_meters
        allocated = 0.0
        for tier in self.plan_info.tiers:
            if remaining <= 0:
                break
            in_tier = max(0.0, min(remaining, tier.upper_boundary - allocated))
            if in_tier > 0:
                charges.append(
                    TierCharge(
                        lower_boundary=allocated,
                        upper_boundary=tier.upper_boundary,
                        quantity=in_tier,
                        price_per_unit=tier.price_per_unit,
                    )
                )
            remaining -= in_tier
            allocated = tier.upper_boundary
        return charges

    def calculate_bill(self) -> float:
        return sum((charge.amount for charge in self.bill_breakdown()), 0.0)

    def set_current_plan(self, plan: WaterTariffPlan) -> None:
        plan = coerce_plan(WaterTariffPlan, plan)
        if plan not in self._rates:
            raise InvalidArgumentError("Attempted to set an invalid water plan.")
        self._plan = plan
        self._consumption_cubic_meters = 0.0
        self.logger.info(
            "Water tariff plan for %s updated to %s", self.address, self.plan_display_name
        )

    @property
    def consumption_cubic_meters(self) -> float:
        return self._consumption_cubic_meters

    @property
    def current_plan(self) -> WaterTariffPlan:
        return self._plan

    @property
    def plan_info(self) -> WaterPlan:
        return self._rates.get(self._plan)

    @property
    def plan_display_name(self) -> str:
        return self.plan_info.display_name

    @property
    def plan_label(self) -> str:
        return self.plan_display_name

    @property
    def period_usage(self) -> float:
        return self._consumption_cubic_meters

    def supply_report(self) -> list[str]:
        lines = [
            f"Managing water supply ({self.plan_display_name}) "
            f"for address: [{self.address.display()}]."
        ]
        if self._plan == WaterTariffPlan.NO_SUPPLY:
            lines.append("   Status: No water supply active.")
        else:
            lines.append("   Status: Water is being supplied.")
        return lines

    def format_status(self) -> str:
        plan_info = self.plan_info
        lines = [
            f"--- Water Supply Status for Address: [{self.address.display()}] ---",
            f"   Current Plan: {plan_info.display_name}",
        ]
        if self._plan == WaterTariffPlan.NO_SUPPLY:
            lines.append("   Status: No active water supply.")
        else:
            lines.append(f"   Consumption This Period: {self._consumption_cubic_meters:g} m3")
            lines.append("   Tariff Tiers:")
            lower = 0.0
            for tier in plan_info.tiers:
                if tier.is_unbounded:
                    band = f"Above {lower:g} m3"
                else:
                    band = f"{lower:g} to {tier.upper_boundary:g} m3"
                lines.append(f"     - {band}: {tier.price_per_unit:.2f}/m3")
                lower = tier.upper_boundary
            lines.append(f"   Estimated Bill: {self.calculate_bill():.2f}")
        lines.append("----------------------------------------------------")
        return "\n".join(lines)
