"""
Virtual Currency Common Library

Unified transaction and balance lookups across Ethereum and Tron, returning
normalized transaction records.
"""

from .types import (
    Platform,
    TransactionStatus,
    ReceiptStatus,
    VirtualCurrencyError,
    TransportError,
    RemoteError,
    DecodeError
)

from .contracts import (
    Contract,
    Etherscan,
    Tronscan,
    EMPTY_ADDRESS
)

from .models import (
    DecodedInput,
    VirtualCurrencyTransaction
)

from .interfaces import (
    IRpcClient,
    IVirtualCurrencyService
)

from .config import (
    PlatformSettings,
    InfuraSettings,
    TronscanSettings
)

from .utils import scale_value
from .rpc import JsonRpcClient
from .abi import ContractCaller, encode_call, decode_output
from .decoder import InputDecoder
from .cache import DecimalCache
from .adapter_factory import AdapterFactory
from .adapters import (
    BaseAdapter,
    EtherscanAdapter,
    TronscanAdapter
)

__all__ = [
    # Types
    "Platform",
    "TransactionStatus",
    "ReceiptStatus",
    "VirtualCurrencyError",
    "TransportError",
    "RemoteError",
    "DecodeError",

    # Contracts
    "Contract",
    "Etherscan",
    "Tronscan",
    "EMPTY_ADDRESS",

    # Models
    "DecodedInput",
    "VirtualCurrencyTransaction",

    # Interfaces
    "IRpcClient",
    "IVirtualCurrencyService",

    # Settings
    "PlatformSettings",
    "InfuraSettings",
    "TronscanSettings",

    # Core
    "scale_value",
    "JsonRpcClient",
    "ContractCaller",
    "encode_call",
    "decode_output",
    "InputDecoder",
    "DecimalCache",

    # Factory & Adapters
    "AdapterFactory",
    "BaseAdapter",
    "EtherscanAdapter",
    "TronscanAdapter"
]

__version__ = "1.0.0"
