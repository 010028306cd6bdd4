"""
Core types, enums and exceptions shared by every virtual currency platform.
"""

from enum import Enum
from typing import Optional


class Platform(Enum):
    """Supported virtual currency platforms"""
    ETHERSCAN = "etherscan"  # Ethereum JSON-RPC (Infura and compatible nodes)
    TRONSCAN = "tronscan"  # Tron explorer REST API


class TransactionStatus(Enum):
    """Outcome of a transaction as seen by the platform"""
    SUCCESS = "success"
    FAIL = "fail"
    WAIT = "wait"  # Known to the platform but not yet confirmed


class ReceiptStatus(Enum):
    """Status field values of an Ethereum transaction receipt"""
    SUCCESS = "0x1"
    FAIL = "0x0"


class VirtualCurrencyError(Exception):
    """Base exception for virtual currency lookups"""
    def __init__(self, message: str, platform: Optional[Platform] = None,
                 error_code: Optional[str] = None):
        self.platform = platform
        self.error_code = error_code
        super().__init__(message)


class TransportError(VirtualCurrencyError):
    """The platform could not be reached (connection, timeout, bad payload)"""
    pass


class RemoteError(VirtualCurrencyError):
    """The platform answered with an error envelope instead of a result"""
    def __init__(self, code: Optional[int], message: str,
                 platform: Optional[Platform] = None):
        self.code = code
        self.message = message
        super().__init__(f"Remote error {code}: {message}", platform=platform,
                         error_code=None if code is None else str(code))


class DecodeError(VirtualCurrencyError):
    """Returned ABI data does not match the declared output types"""
    pass
