"""
Interfaces (protocols) for virtual currency lookups.
Using Python's Protocol for structural subtyping.
"""

from typing import Protocol, Any, Optional
from abc import abstractmethod
from decimal import Decimal, Context

from .types import Platform
from .contracts import Contract
from .models import VirtualCurrencyTransaction


class IRpcClient(Protocol):
    """Interface for request/response RPC transports"""

    @abstractmethod
    def invoke(self, method: str, *params: Any) -> Any:
        """Call a remote method and return its result"""
        ...


class IVirtualCurrencyService(Protocol):
    """Interface for platform adapters"""

    @property
    @abstractmethod
    def platform(self) -> Platform:
        """Get the platform this adapter handles"""
        ...

    @abstractmethod
    def get_transaction_by_hash(self, tx_hash: str) -> Optional[VirtualCurrencyTransaction]:
        """Resolve a transaction, ``None`` when the platform does not know it"""
        ...

    @abstractmethod
    def get_decimals(self, contract: Optional[Contract]) -> int:
        """Get the decimal precision of a contract"""
        ...

    @abstractmethod
    def get_balance(self, address: str, contract: Optional[Contract]) -> Decimal:
        """Get the raw balance of an address in the contract's smallest unit"""
        ...

    @abstractmethod
    def get_number(self, balance: Decimal, contract: Optional[Contract],
                   context: Optional[Context] = None) -> Decimal:
        """Scale a raw amount into display units of the contract"""
        ...
