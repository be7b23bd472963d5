import logging
from typing import Iterable, Iterator, Optional, TextIO

import pandas as pd

from utilitysim.core.accounts.base import UtilityAccount
from utilitysim.core.accounts.outputs import BillStatement

logger = logging.getLogger(__name__)


class ServicePortfolio:
    """An ordered collection of utility accounts billed in the same period.

    Accounts of any kind can be mixed; every operation goes through the
    common ``UtilityAccount`` interface.
    """

    def __init__(self, accounts: Optional[Iterable[UtilityAccount]] = None):
        self._accounts: list[UtilityAccount] = []
        for account in accounts or ():
            self.add(account)

    def add(self, account: UtilityAccount) -> None:
        if not isinstance(account, UtilityAccount):
            raise TypeError(f"Expected a UtilityAccount, got {type(account).__name__}.")
        self._accounts.append(account)

    def __iter__(self) -> Iterator[UtilityAccount]:
        return iter(self._accounts)

    def __len__(self) -> int:
        return len(self._accounts)

    def supply_all(self, stream: Optional[TextIO] = None) -> None:
        for account in self._accounts:
            account.supply(stream)

    def show_status_all(self, stream: Optional[TextIO] = None) -> None:
        for account in self._accounts:
            account.show_status(stream)

    def statements(self) -> list[BillStatement]:
        return [account.statement() for account in self._accounts]

    def total_bill(self) -> float:
        total = sum((account.calculate_bill() for account in self._accounts), 0.0)
        logger.debug("Portfolio total over %d accounts: %s", len(self._accounts), total)
        return total

    def to_frame(self) -> pd.DataFrame:
        """Tabulate the statements of all accounts, one row per account."""
        columns = ["service", "address", "plan", "usage", "generation", "amount"]
        records = [statement.as_record() for statement in self.statements()]
        return pd.DataFrame(records, columns=columns)
