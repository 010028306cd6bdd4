"""
Tron adapter backed by the Tronscan explorer REST API.
"""

import logging
from decimal import Decimal
from typing import Optional, Dict, Any, List

import requests

from ..cache import DecimalCache
from ..config import TronscanSettings
from ..contracts import Contract, Tronscan
from ..decoder import InputDecoder
from ..models import DecodedInput, VirtualCurrencyTransaction
from ..types import Platform, RemoteError, TransactionStatus, TransportError
from ..utils import timestamp_to_datetime, to_tron_address
from .base import BaseAdapter

logger = logging.getLogger(__name__)

TRX_DECIMALS = 6

# Tronscan contractType values
TRANSFER_CONTRACT = 1
TRIGGER_SMART_CONTRACT = 31

CONTRACT_RET_SUCCESS = "SUCCESS"


class TronscanAdapter(BaseAdapter):
    """Adapter for Tron transactions and balances"""

    def __init__(self, settings: Optional[TronscanSettings] = None,
                 session: Optional[requests.Session] = None,
                 decimal_cache: Optional[DecimalCache] = None,
                 input_decoder: Optional[InputDecoder] = None):
        settings = settings or TronscanSettings()
        self.base_url = settings.endpoint.rstrip("/")
        self.timeout = settings.timeout
        self.session = session or requests.Session()
        self.headers = {"Accept": "application/json"}
        if settings.api_key:
            self.headers["TRON-PRO-API-KEY"] = settings.api_key
        self.decoder = input_decoder or InputDecoder(Tronscan.TRX)
        super().__init__(settings, decimal_cache or DecimalCache(
            self._load_decimals, {Tronscan.TRX: TRX_DECIMALS}
        ))
        logger.info(f"Tronscan adapter using {self.base_url}")

    def get_transaction_by_hash(self, tx_hash: str) -> Optional[VirtualCurrencyTransaction]:
        """Resolve a transaction by hash, ``None`` if Tronscan does not know it"""
        try:
            info = self._get("/api/transaction-info", {"hash": tx_hash})
        except RemoteError as e:
            logger.error(f"Error querying tron transaction {tx_hash}: code: {e.code}, message: {e.message}")
            return None
        if not info or not info.get("hash"):
            return None

        contract_data = info.get("contractData") or {}
        decoded = self._decode(info, contract_data)
        contract = decoded.contract
        if contract is None and decoded.method is not None:
            contract = Tronscan.get_by_address(
                contract_data.get("contract_address") or info.get("toAddress")
            )

        timestamp = info.get("timestamp")
        return VirtualCurrencyTransaction(
            platform=self.platform,
            block=info.get("block"),
            hash=info["hash"],
            from_address=info.get("ownerAddress", ""),
            to_address=decoded.to,
            contract=contract,
            contract_address=self.contract_address_of(contract),
            value=self.get_number(Decimal(decoded.value), contract),
            status=self._resolve_status(info),
            # Tronscan timestamps are UTC epoch milliseconds
            time=timestamp_to_datetime(timestamp / 1000) if timestamp else None,
            input=decoded,
        )

    def get_balance(self, address: str, contract: Optional[Contract]) -> Decimal:
        """Raw balance of ``address`` in sun or in the token's smallest unit"""
        try:
            account = self._get("/api/account", {"address": address})
        except RemoteError as e:
            logger.error(f"Error querying tron account {address}: code: {e.code}, message: {e.message}")
            return Decimal(0)

        if contract is None or contract.is_native:
            return Decimal(account.get("balance") or 0)

        for token in account.get("trc20token_balances") or []:
            if token.get("tokenId") == contract.address:
                return Decimal(token.get("balance") or 0)
        return Decimal(0)

    def _decode(self, info: Dict[str, Any], contract_data: Dict[str, Any]) -> DecodedInput:
        contract_type = info.get("contractType")
        if contract_type == TRANSFER_CONTRACT:
            return self.decoder.decode(None, contract_data.get("to_address") or info.get("toAddress"),
                                       int(contract_data.get("amount") or 0))
        if contract_type == TRIGGER_SMART_CONTRACT and contract_data.get("data"):
            decoded = self.decoder.decode("0x" + contract_data["data"], None, 0)
            if decoded.method is None:
                return decoded
            return DecodedInput(to=to_tron_address(decoded.to), value=decoded.value,
                                method=decoded.method)
        logger.debug(f"Unsupported tron contract type {contract_type}")
        return DecodedInput()

    @staticmethod
    def _resolve_status(info: Dict[str, Any]) -> TransactionStatus:
        if not info.get("confirmed"):
            return TransactionStatus.WAIT
        if info.get("contractRet") == CONTRACT_RET_SUCCESS:
            return TransactionStatus.SUCCESS
        return TransactionStatus.FAIL

    def _load_decimals(self, contract: Contract) -> List[Any]:
        tokens = self._get("/api/token_trc20", {"contract": contract.address}).get("trc20_tokens") or []
        if not tokens:
            return []
        return [tokens[0].get("decimals")]

    def _get(self, path: str, params: Dict[str, Any]) -> Dict[str, Any]:
        url = f"{self.base_url}{path}"
        try:
            response = self.session.get(url, params=params, headers=self.headers, timeout=self.timeout)
        except requests.RequestException as e:
            logger.warning(f"Tronscan transport failure on {path}: {e}")
            raise TransportError(f"{path} failed: {e}", platform=Platform.TRONSCAN) from e

        if response.status_code != 200:
            raise RemoteError(response.status_code, response.text[:200], platform=Platform.TRONSCAN)

        try:
            return response.json() or {}
        except ValueError as e:
            raise RemoteError(response.status_code, f"Invalid JSON: {e}", platform=Platform.TRONSCAN) from e
