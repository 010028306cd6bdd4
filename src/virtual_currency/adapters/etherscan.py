"""
Ethereum adapter backed by a JSON-RPC node (Infura or compatible).
"""

import logging
from datetime import datetime
from decimal import Decimal
from typing import Optional, Dict, Any, List

from ..abi import ContractCaller
from ..cache import DecimalCache
from ..config import InfuraSettings
from ..contracts import EMPTY_ADDRESS, Contract, Etherscan
from ..decoder import InputDecoder
from ..interfaces import IRpcClient
from ..models import VirtualCurrencyTransaction
from ..rpc import JsonRpcClient
from ..types import Platform, ReceiptStatus, RemoteError, TransactionStatus, TransportError
from ..utils import hex_to_int, timestamp_to_datetime
from .base import BaseAdapter

logger = logging.getLogger(__name__)

ETH_DECIMALS = 18


def default_decimal_cache(caller: ContractCaller) -> DecimalCache:
    """Decimal cache seeded with ETH that loads tokens through ``decimals()``"""
    def load(contract: Contract) -> List[Any]:
        return caller.call("decimals", [], ["uint8"], EMPTY_ADDRESS, contract.address)

    return DecimalCache(load, {Etherscan.ETH: ETH_DECIMALS})


class EtherscanAdapter(BaseAdapter):
    """Adapter for Ethereum transactions and balances"""

    def __init__(self, settings: Optional[InfuraSettings] = None,
                 rpc_client: Optional[IRpcClient] = None,
                 decimal_cache: Optional[DecimalCache] = None,
                 input_decoder: Optional[InputDecoder] = None):
        settings = settings or InfuraSettings()
        self.rpc = rpc_client or JsonRpcClient(
            settings.rpc_url, timeout=settings.timeout, platform=Platform.ETHERSCAN
        )
        self.caller = ContractCaller(self.rpc)
        self.decoder = input_decoder or InputDecoder(Etherscan.ETH)
        super().__init__(settings, decimal_cache or default_decimal_cache(self.caller))
        logger.info(f"Etherscan adapter using {settings.endpoint}")

    def get_transaction_by_hash(self, tx_hash: str) -> Optional[VirtualCurrencyTransaction]:
        """Resolve a transaction by hash, ``None`` if the node does not know it"""
        transaction = self._fetch("eth_getTransactionByHash", tx_hash)
        # Not yet mined or broadcast
        if not transaction:
            return None

        to = transaction.get("to")
        contract = Etherscan.get_by_address(to)

        value = hex_to_int(transaction.get("value")) or 0
        decoded = self.decoder.decode(transaction.get("input"), to, value)
        # Contract carried by the input takes priority over the one called
        if decoded.contract is not None:
            contract = decoded.contract

        return VirtualCurrencyTransaction(
            platform=self.platform,
            block=hex_to_int(transaction.get("blockNumber")),
            hash=transaction.get("hash", tx_hash),
            from_address=transaction.get("from", ""),
            to_address=decoded.to,
            contract=contract,
            contract_address=self.contract_address_of(contract),
            value=self.get_number(Decimal(decoded.value), contract),
            status=self._resolve_status(tx_hash),
            time=self._resolve_time(transaction.get("blockHash")),
            input=decoded,
        )

    def get_balance(self, address: str, contract: Optional[Contract]) -> Decimal:
        """Raw balance of ``address`` in wei or in the token's smallest unit"""
        try:
            if contract is None or contract.is_native:
                return Decimal(hex_to_int(self.rpc.invoke("eth_getBalance", address, "latest")) or 0)

            outputs = self.caller.call("balanceOf", [("address", address)], ["uint256"],
                                       address, contract.address)
        except RemoteError as e:
            logger.error(f"Error querying balance of {address}: code: {e.code}, message: {e.message}")
            return Decimal(0)

        if not outputs:
            return Decimal(0)
        return Decimal(outputs[0])

    def _fetch(self, method: str, *params: Any,
               absorb_transport: bool = False) -> Optional[Dict[str, Any]]:
        try:
            return self.rpc.invoke(method, *params)
        except RemoteError as e:
            logger.error(f"Error calling {method}: code: {e.code}, message: {e.message}")
            return None
        except TransportError as e:
            if not absorb_transport:
                raise
            logger.warning(f"Node unreachable calling {method}, using default: {e}")
            return None

    def _resolve_status(self, tx_hash: str) -> TransactionStatus:
        # A missing receipt counts as failed until the transaction is mined
        receipt = self._fetch("eth_getTransactionReceipt", tx_hash, absorb_transport=True)
        if receipt and receipt.get("status") == ReceiptStatus.SUCCESS.value:
            return TransactionStatus.SUCCESS
        return TransactionStatus.FAIL

    def _resolve_time(self, block_hash: Optional[str]) -> Optional[datetime]:
        if not block_hash:
            return None
        block = self._fetch("eth_getBlockByHash", block_hash, False, absorb_transport=True)
        if not block or block.get("timestamp") is None:
            return None
        # Block timestamps are UTC epoch seconds
        return timestamp_to_datetime(hex_to_int(block["timestamp"]))
