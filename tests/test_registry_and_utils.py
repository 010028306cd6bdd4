"""
Tests for the contract registry, settings and helpers
"""

import base58
import pytest
from decimal import Decimal, Context, ROUND_DOWN
from datetime import datetime, timezone

from virtual_currency.config import InfuraSettings, TronscanSettings
from virtual_currency.contracts import EMPTY_ADDRESS, Etherscan, Tronscan
from virtual_currency.models import DecodedInput
from virtual_currency.types import Platform
from virtual_currency.utils import (
    hex_to_int, is_empty_input, scale_value, timestamp_to_datetime, to_tron_address
)


class TestContractRegistry:
    """Test address lookups"""

    def test_lookup_by_address(self):
        assert Etherscan.get_by_address(Etherscan.USDT.address) is Etherscan.USDT

    def test_lookup_is_case_insensitive(self):
        assert Etherscan.get_by_address("0xDAC17F958D2EE523A2206206994597C13D831EC7") is Etherscan.USDT

    def test_native_coin_has_reserved_address(self):
        assert Etherscan.ETH.address == EMPTY_ADDRESS
        assert Etherscan.get_by_address(EMPTY_ADDRESS) is Etherscan.ETH
        assert Etherscan.ETH.is_native
        assert not Etherscan.USDT.is_native

    def test_unknown_and_missing_addresses(self):
        assert Etherscan.get_by_address("0x9999999999999999999999999999999999999999") is None
        assert Etherscan.get_by_address("") is None
        assert Etherscan.get_by_address(None) is None

    def test_addresses_are_unique_and_lowercase(self):
        addresses = [c.address for c in Etherscan]

        assert len(set(addresses)) == len(addresses)
        assert all(a == a.lower() and len(a) == 42 for a in addresses)

    def test_tron_lookup(self):
        assert Tronscan.get_by_address("TR7NHqjeKQxGTCi8q8ZY4pL8otSzgjLj6t") is Tronscan.USDT
        assert Tronscan.get_by_address("_") is Tronscan.TRX
        assert Tronscan.get_by_address("") is None
        assert Tronscan.TRX.is_native


class TestUtils:
    """Test amount and address helpers"""

    def test_scale_value(self):
        assert scale_value(1_500_000, 6) == Decimal("1.5")

    def test_scale_value_zero_decimals(self):
        assert scale_value(987654321, 0) == Decimal(987654321)

    def test_scale_value_with_context(self):
        context = Context(prec=3, rounding=ROUND_DOWN)

        assert scale_value(Decimal(1_234_567), 3, context) == Decimal("1230")

    def test_scale_value_keeps_large_precision(self):
        raw = 123456789012345678901234567890

        assert scale_value(raw, 18, Context(prec=34)) == Decimal("123456789012.345678901234567890")

    def test_hex_to_int(self):
        assert hex_to_int("0x10") == 16
        assert hex_to_int(16) == 16
        assert hex_to_int(None) is None

    def test_is_empty_input(self):
        assert is_empty_input("0x")
        assert is_empty_input("")
        assert is_empty_input(None)
        assert not is_empty_input("0xa9059cbb")

    def test_timestamp_is_utc(self):
        assert timestamp_to_datetime(0) == datetime(1970, 1, 1, tzinfo=timezone.utc)

    def test_to_tron_address(self):
        address = to_tron_address("0x5aaeb6053f3e94c9b9a09f33669435e7ef1beaed")

        assert address.startswith("T")
        assert base58.b58decode_check(address).hex() == "415aaeb6053f3e94c9b9a09f33669435e7ef1beaed"


class TestSettings:
    """Test platform settings"""

    def test_infura_defaults(self, monkeypatch):
        monkeypatch.delenv("INFURA_PROJECT_ID", raising=False)
        settings = InfuraSettings()

        assert settings.platform == Platform.ETHERSCAN
        assert settings.rpc_url == "https://mainnet.infura.io/v3/"

    def test_infura_project_id(self):
        settings = InfuraSettings(project_id="abc123")

        assert settings.rpc_url == "https://mainnet.infura.io/v3/abc123"

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("TRONSCAN_TIMEOUT", "5")
        monkeypatch.setenv("TRONSCAN_ENDPOINT", "https://tron.example")

        settings = TronscanSettings()

        assert settings.platform == Platform.TRONSCAN
        assert settings.timeout == 5.0
        assert settings.endpoint == "https://tron.example"

    def test_value_context(self):
        context = InfuraSettings(value_precision=10, value_rounding="ROUND_DOWN").value_context()

        assert context.prec == 10
        assert context.rounding == ROUND_DOWN

    def test_invalid_rounding(self):
        with pytest.raises(ValueError):
            InfuraSettings(value_rounding="ROUND_SIDEWAYS")

    def test_invalid_precision(self):
        with pytest.raises(ValueError):
            InfuraSettings(value_precision=0)


class TestDecodedInput:
    """Test decoded input model"""

    def test_defaults_are_unrecognized(self):
        decoded = DecodedInput()

        assert decoded.to == ""
        assert decoded.value == 0
        assert decoded.contract is None
        assert not decoded.recognized

    def test_to_dict(self):
        decoded = DecodedInput(to="0xabc", value=10, contract=Etherscan.USDT, method="transfer")

        assert decoded.to_dict() == {
            "to": "0xabc", "value": "10", "contract": "USDT", "method": "transfer",
        }
