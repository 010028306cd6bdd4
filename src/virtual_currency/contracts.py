"""
Registry of known contracts per platform.

Each platform has a closed enumeration of tokens it recognizes, keyed by the
on-chain address. The native coin of a platform is part of its enumeration and
carries a reserved address. New tokens are added by extending the enumeration.
"""

from enum import Enum
from typing import Dict, Optional, Union

EMPTY_ADDRESS = "0x0000000000000000000000000000000000000000"

# Tronscan reports the native coin with this token id
TRX_TOKEN_ID = "_"


class Etherscan(Enum):
    """Known contracts on Ethereum mainnet"""
    ETH = (EMPTY_ADDRESS, "ETH")
    USDT = ("0xdac17f958d2ee523a2206206994597c13d831ec7", "USDT")
    USDC = ("0xa0b86991c6218b36c1d19d4a2e9eb0ce3606eb48", "USDC")
    DAI = ("0x6b175474e89094c44da98b954eedeac495271d0f", "DAI")
    WBTC = ("0x2260fac5e5542a773aa44fbcfedf7c193bc2c599", "WBTC")
    WETH = ("0xc02aaa39b223fe8d0a0e5c4f27ead9083c756cc2", "WETH")
    LINK = ("0x514910771af9ca656af840dff83e8264ecf986ca", "LINK")

    def __init__(self, address: str, symbol: str):
        self.address = address
        self.symbol = symbol

    @property
    def is_native(self) -> bool:
        return self is Etherscan.ETH

    @classmethod
    def get_by_address(cls, address: Optional[str]) -> Optional["Etherscan"]:
        """Look up a contract by its address, case-insensitively"""
        if not address:
            return None
        return _ETHERSCAN_BY_ADDRESS.get(address.lower())


class Tronscan(Enum):
    """Known contracts on Tron mainnet"""
    TRX = (TRX_TOKEN_ID, "TRX")
    USDT = ("TR7NHqjeKQxGTCi8q8ZY4pL8otSzgjLj6t", "USDT")
    USDC = ("TEkxiTehnzSmSe2XqrBj4w32RUN966rdz8", "USDC")
    USDJ = ("TMwFHYXLJaRUPeW6421aqXL4ZEzPRFGkGT", "USDJ")
    WTRX = ("TNUC9Qb1rRpS5CbWLmNMxXBjyFoydXjWFR", "WTRX")

    def __init__(self, address: str, symbol: str):
        self.address = address
        self.symbol = symbol

    @property
    def is_native(self) -> bool:
        return self is Tronscan.TRX

    @classmethod
    def get_by_address(cls, address: Optional[str]) -> Optional["Tronscan"]:
        """Look up a contract by its base58 address (case-sensitive)"""
        if not address:
            return None
        return _TRONSCAN_BY_ADDRESS.get(address)


Contract = Union[Etherscan, Tronscan]

_ETHERSCAN_BY_ADDRESS: Dict[str, Etherscan] = {c.address: c for c in Etherscan}
_TRONSCAN_BY_ADDRESS: Dict[str, Tronscan] = {c.address: c for c in Tronscan}
