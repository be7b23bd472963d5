import logging
import sys
from abc import ABC, abstractmethod
from typing import Optional, TextIO

from utilitysim.core.accounts.outputs import BillStatement
from utilitysim.core.address import Address
from utilitysim.core.errors import InvalidArgumentError


class UtilityAccount(ABC):
    """Abstract base class for the per-address account of one utility kind."""

    service_name: str = "Utility"

    def __init__(self, address: Address):
        if not isinstance(address, Address):
            raise InvalidArgumentError("Account address must be an Address.")
        self._address = address
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    @classmethod
    @abstractmethod
    def from_config(cls, config, rates) -> "UtilityAccount":
        """Build the account from its config, picking its table out of ``rates``."""
        pass

    @property
    def address(self) -> Address:
        return self._address

    @property
    @abstractmethod
    def plan_label(self) -> str:
        """Human readable name of the active plan or strategy."""
        pass

    @property
    @abstractmethod
    def period_usage(self) -> float:
        """Usage accumulated in the current billing period."""
        pass

    @property
    def period_generation(self) -> float:
        return 0.0

    @abstractmethod
    def calculate_bill(self) -> float:
        """Amount owed for the period; negative values are credits."""
        pass

    @abstractmethod
    def supply_report(self) -> list[str]:
        """Lines narrating the operational status of the supply."""
        pass

    @abstractmethod
    def format_status(self) -> str:
        pass

    def supply(self, stream: Optional[TextIO] = None) -> None:
        _emit(stream, "\n".join(self.supply_report()))

    def show_status(self, stream: Optional[TextIO] = None) -> None:
        _emit(stream, self.format_status())

    def statement(self) -> BillStatement:
        return BillStatement(
            service=self.service_name,
            address=self._address,
            plan=self.plan_label,
            usage=self.period_usage,
            generation=self.period_generation,
            amount=self.calculate_bill(),
        )

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(address={self._address.display()!r}, "
            f"plan={self.plan_label!r}, usage={self.period_usage})"
        )


def _emit(stream: Optional[TextIO], text: str) -> None:
    print(text, file=stream if stream is not None else sys.stdout)
