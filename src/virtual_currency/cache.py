"""
Process-wide cache of contract decimal precision.
"""

import logging
from threading import Lock
from typing import Any, Callable, Dict, Mapping, Optional, Sequence

from .contracts import Contract
from .types import RemoteError, TransportError

logger = logging.getLogger(__name__)

# Fetches the raw ``decimals()`` outputs of a contract
DecimalsLoader = Callable[[Contract], Sequence[Any]]


class DecimalCache:
    """
    Contract -> decimals, populated lazily and never evicted.

    Precision of a deployed contract does not change, so two threads computing
    the same entry concurrently is harmless: both store the same value. The
    lock only guards the dict, it is never held across a load.
    """

    def __init__(self, loader: DecimalsLoader,
                 seed: Optional[Mapping[Contract, int]] = None):
        self._loader = loader
        self._decimals: Dict[Contract, int] = dict(seed or {})
        self._lock = Lock()

    def get_decimals(self, contract: Optional[Contract]) -> int:
        if contract is None:
            return 0

        with self._lock:
            cached = self._decimals.get(contract)
        if cached is not None:
            return cached

        logger.debug(f"Decimals cache miss for {contract.symbol} ({contract.address})")
        try:
            outputs = self._loader(contract)
        except (RemoteError, TransportError) as e:
            # Not cached, the next lookup asks again
            logger.warning(f"Could not load decimals of {contract.symbol}: {e}")
            return 0

        decimals = self._parse(outputs)
        with self._lock:
            self._decimals[contract] = decimals
        return decimals

    def seed(self, contract: Contract, decimals: int) -> None:
        with self._lock:
            self._decimals[contract] = decimals

    def snapshot(self) -> Dict[Contract, int]:
        with self._lock:
            return dict(self._decimals)

    def __contains__(self, contract: object) -> bool:
        with self._lock:
            return contract in self._decimals

    def __len__(self) -> int:
        with self._lock:
            return len(self._decimals)

    @staticmethod
    def _parse(outputs: Sequence[Any]) -> int:
        if not outputs:
            return 0
        try:
            decimals = int(str(outputs[0]))
        except (TypeError, ValueError):
            return 0
        return decimals if decimals >= 0 else 0
