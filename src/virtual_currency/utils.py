"""
Utility functions for amount and address handling.
"""

from datetime import datetime, timezone
from decimal import Decimal, Context
from typing import Optional, Union

import base58
from eth_utils import to_int, remove_0x_prefix

TRON_ADDRESS_PREFIX = b"\x41"

# Input data of a transaction that carries no contract call
EMPTY_INPUT = "0x"


def is_empty_input(input_data: Optional[str]) -> bool:
    """Whether call data denotes a plain value transfer"""
    return not input_data or input_data.lower() == EMPTY_INPUT


def hex_to_int(value: Optional[Union[str, int]]) -> Optional[int]:
    """Convert a JSON-RPC quantity to int, passing ``None`` through"""
    if value is None:
        return None
    if isinstance(value, int):
        return value
    return to_int(hexstr=value)


def scale_value(raw: Union[int, Decimal, str], decimals: int,
                context: Optional[Context] = None) -> Decimal:
    """Convert an amount in the smallest unit into display units"""
    amount = Decimal(raw) if not isinstance(raw, Decimal) else raw
    if context is None:
        return amount / Decimal(10) ** decimals
    return context.divide(amount, Decimal(10) ** decimals)


def timestamp_to_datetime(seconds: Union[int, float]) -> datetime:
    """Epoch seconds (UTC) to an aware datetime"""
    return datetime.fromtimestamp(seconds, tz=timezone.utc)


def normalize_address(address: Optional[str]) -> str:
    """Lowercase an EVM address, ``""`` for none"""
    if not address:
        return ""
    return address.lower()


def to_tron_address(hex_address: str) -> str:
    """Convert a 20-byte hex address into a base58check Tron address"""
    raw = bytes.fromhex(remove_0x_prefix(hex_address)[-40:])
    return base58.b58encode_check(TRON_ADDRESS_PREFIX + raw).decode()
