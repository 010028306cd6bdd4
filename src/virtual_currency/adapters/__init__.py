"""
Platform adapter implementations.
"""

from .base import BaseAdapter
from .etherscan import EtherscanAdapter
from .tronscan import TronscanAdapter

__all__ = [
    "BaseAdapter",
    "EtherscanAdapter",
    "TronscanAdapter"
]
