from dataclasses import dataclass, asdict
from typing import Any

from utilitysim.core.address import Address


@dataclass(frozen=True, slots=True, kw_only=True)
class TierCharge:
    """Share of a tiered bill that fell into a single tier."""

    lower_boundary: float
    upper_boundary: float
    quantity: float
    price_per_unit: float

    @property
    def amount(self) -> float:
        return self.quantity * self.price_per_unit


@dataclass(frozen=True, slots=True, kw_only=True)
class BillStatement:
    """Snapshot of an account's period usage and the resulting bill.

    A negative ``amount`` is a credit owed to the account holder.
    """

    service: str
    address: Address
    plan: str
    usage: float
    generation: float = 0.0
    amount: float = 0.0

    @property
    def is_credit(self) -> bool:
        return self.amount < 0

    def as_record(self) -> dict[str, Any]:
        record = asdict(self)
        record["address"] = self.address.display()
        return record
