from utilitysim.core.accounts.base import UtilityAccount
from utilitysim.core.accounts.config import (
    AccountConfig,
    ElectricityAccountConfig,
    GasAccountConfig,
    InternetAccountConfig,
    WaterAccountConfig,
)
from utilitysim.core.accounts.electricity import ElectricityAccount
from utilitysim.core.accounts.gas import GasAccount
from utilitysim.core.accounts.internet import OVERAGE_RATE_PER_GB, InternetAccount
from utilitysim.core.accounts.outputs import BillStatement, TierCharge
from utilitysim.core.accounts.water import WaterAccount
from utilitysim.core.accounts.factory import build_account, build_accounts

__all__ = [
    "UtilityAccount",
    "AccountConfig",
    "ElectricityAccountConfig",
    "GasAccountConfig",
    "InternetAccountConfig",
    "WaterAccountConfig",
    "ElectricityAccount",
    "GasAccount",
    "InternetAccount",
    "OVERAGE_RATE_PER_GB",
    "WaterAccount",
    "BillStatement",
    "TierCharge",
    "build_account",
    "build_accounts",
]
