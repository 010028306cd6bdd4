"""
Base adapter implementation with common functionality.
"""

import logging
from abc import ABC
from decimal import Decimal, Context
from typing import Optional

from ..cache import DecimalCache
from ..config import PlatformSettings
from ..contracts import Contract
from ..interfaces import IVirtualCurrencyService
from ..types import Platform
from ..utils import scale_value

logger = logging.getLogger(__name__)


class BaseAdapter(IVirtualCurrencyService, ABC):
    """Base adapter with common functionality"""

    def __init__(self, settings: PlatformSettings, decimal_cache: DecimalCache):
        self.settings = settings
        self.decimal_cache = decimal_cache
        self._platform = settings.platform

    @property
    def platform(self) -> Platform:
        return self._platform

    def get_decimals(self, contract: Optional[Contract]) -> int:
        """Get decimal precision of a contract through the shared cache"""
        return self.decimal_cache.get_decimals(contract)

    def get_number(self, balance: Decimal, contract: Optional[Contract],
                   context: Optional[Context] = None) -> Decimal:
        """Scale a raw amount; without a contract the amount is returned as is"""
        if contract is None:
            return Decimal(balance)
        return scale_value(balance, self.get_decimals(contract),
                           context or self.settings.value_context())

    @staticmethod
    def contract_address_of(contract: Optional[Contract]) -> str:
        """On-chain address reported for a contract, ``""`` for the native coin"""
        if contract is None or contract.is_native:
            return ""
        return contract.address
