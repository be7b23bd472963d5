from utilitysim.core.accounts.base import UtilityAccount
from utilitysim.core.accounts.config import InternetAccountConfig
from utilitysim.core.address import Address
from utilitysim.core.errors import InvalidArgumentError, non_negative
from utilitysim.core.plans import InternetPlan, coerce_plan
from utilitysim.core.rates.tables import InternetPlanCatalog, InternetPlanDetails, RateTables
from utilitysim.core.registry import register_account

OVERAGE_RATE_PER_GB = 10.0
"""Rate billed per GB over the cap, whatever ``overage_cost_per_gb`` the plan lists."""


@register_account(InternetAccountConfig)
class InternetAccount(UtilityAccount):
    """Internet account billed as a plan base cost plus data overage.

    The plan's ``overage_cost_per_gb`` only gates whether overage is billed;
    the amount billed per GB is always ``OVERAGE_RATE_PER_GB``.
    """

    service_name = "Internet"

    def __init__(
        self,
        address: Address,
        plan: InternetPlan = InternetPlan.NO_SERVICE,
        *,
        rates: InternetPlanCatalog,
        initial_data_usage: float = 0.0,
    ):
        super().__init__(address)
        data_used = non_negative(initial_data_usage, "Initial data usage cannot be negative.")
        plan = coerce_plan(InternetPlan, plan)
        if plan not in rates:
            raise InvalidArgumentError("Invalid internet plan provided during construction.")
        self._rates = rates
        self._plan = plan
        self._data_used_gb = data_used

    @classmethod
    def from_config(
        cls, config: InternetAccountConfig, rates: RateTables
    ) -> "InternetAccount":
        return cls(
            config.address,
            config.plan,
            rates=rates.internet,
            initial_data_usage=config.initial_data_usage,
        )

    def add_data_usage(self, gigabytes: float) -> None:
        amount = non_negative(gigabytes, "Data usage cannot be negative.")
        self._data_used_gb += amount
        self.logger.debug("Recorded %s GB data usage at %s", amount, self.address)

    def calculate_bill(self) -> float:
        details = self.plan_details
        if self._plan == InternetPlan.NO_SERVICE:
            return 0.0
        if self._plan == InternetPlan.BUSINESS_FIBER:
            return details.base_cost

        bill = details.base_cost
        if (
            not details.is_uncapped
            and self._data_used_gb > details.data_cap_gb
            and details.overage_cost_per_gb > 0
        ):
            excess_data = self._data_used_gb - details.data_cap_gb
            bill += excess_data * OVERAGE_RATE_PER_GB
        return bill

    def set_current_plan(self, plan: InternetPlan) -> None:
        plan = coerce_plan(InternetPlan, plan)
        if plan not in self._rates:
            raise InvalidArgumentError("Attempted to set an invalid internet plan.")
        self._plan = plan
        self._data_used_gb = 0.0
        self.logger.info(
            "Internet plan for %s changed to: %s", self.address, self.plan_display_name
        )

    @property
    def data_used_gb(self) -> float:
        return self._data_used_gb

    @property
    def current_plan(self) -> InternetPlan:
        return self._plan

    @property
    def plan_details(self) -> InternetPlanDetails:
        return self._rates.get(self._plan)

    @property
    def current_speed_mbps(self) -> int:
        return self.plan_details.speed_mbps

    @property
    def plan_display_name(self) -> str:
        return self.plan_details.display_name

    @property
    def plan_label(self) -> str:
        return self.plan_display_name

    @property
    def period_usage(self) -> float:
        return self._data_used_gb

    def supply_report(self) -> list[str]:
        lines = [
            f"Managing internet service ({self.plan_display_name}) "
            f"for address: [{self.address.display()}]"
        ]
        if self._plan == InternetPlan.NO_SERVICE:
            lines.append("   Status: No internet service active.")
        else:
            lines.append(f"   Current speed: {self.current_speed_mbps} Mbps")
            lines.append("   Status: Complete.")
        return lines

    def format_status(self) -> str:
        details = self.plan_details
        lines = [
            f"--- Internet Service for Address: [{self.address.display()}] ---",
            f"   Current Plan: {details.display_name}",
        ]
        if self._plan == InternetPlan.NO_SERVICE:
            lines.append("   Status: No active service.")
        else:
            lines.append(f"   Data Used: {self._data_used_gb:g} GB")
            lines.append(f"   Speed: {details.speed_mbps} Mbps")
            if details.is_uncapped:
                lines.append("   Data Cap: Unlimited")
            else:
                lines.append(f"   Data Cap: {details.data_cap_gb:g} GB")
            if details.overage_cost_per_gb > 0:
                lines.append(f"   Overage Cost: {details.overage_cost_per_gb:.2f} per GB")
            lines.append(f"   Estimated Bill: {self.calculate_bill():.2f}")
        lines.append("-------------------------")
        return "\n".join(lines)
