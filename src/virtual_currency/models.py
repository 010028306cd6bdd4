"""
Data models produced by transaction and balance lookups.
"""

from typing import Optional, Dict, Any
from dataclasses import dataclass
from decimal import Decimal
from datetime import datetime

from .types import Platform, TransactionStatus
from .contracts import Contract


@dataclass(frozen=True)
class DecodedInput:
    """
    Transfer described by a transaction's call data.

    ``value`` is in the smallest unit of ``contract`` when it is set, and in
    the smallest unit of the platform's native coin otherwise.
    """
    to: str = ""
    value: int = 0
    contract: Optional[Contract] = None
    method: Optional[str] = None

    @property
    def recognized(self) -> bool:
        """Whether the call data was a native transfer or a known method"""
        return self.contract is not None or self.method is not None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "to": self.to,
            "value": str(self.value),
            "contract": self.contract.symbol if self.contract else None,
            "method": self.method,
        }


@dataclass(frozen=True)
class VirtualCurrencyTransaction:
    """Transaction normalized across platforms"""
    platform: Platform
    hash: str
    from_address: str
    to_address: str
    value: Decimal
    status: TransactionStatus
    block: Optional[int] = None
    contract: Optional[Contract] = None
    contract_address: str = ""
    time: Optional[datetime] = None
    input: DecodedInput = DecodedInput()

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization"""
        return {
            "platform": self.platform.value,
            "block": self.block,
            "hash": self.hash,
            "from": self.from_address,
            "to": self.to_address,
            "contract": self.contract.symbol if self.contract else None,
            "contractAddress": self.contract_address,
            "value": str(self.value),
            "status": self.status.value,
            "time": self.time.isoformat() if self.time else None,
            "input": self.input.to_dict(),
        }
