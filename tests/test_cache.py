"""
Tests for the decimal precision cache
"""

import pytest
from concurrent.futures import ThreadPoolExecutor
from unittest.mock import Mock

from virtual_currency.cache import DecimalCache
from virtual_currency.contracts import Etherscan
from virtual_currency.types import RemoteError, DecodeError, TransportError


class TestDecimalCache:
    """Test lazy population and caching"""

    def test_second_lookup_hits_cache(self):
        loader = Mock(return_value=[6])
        cache = DecimalCache(loader)

        assert cache.get_decimals(Etherscan.USDT) == 6
        assert cache.get_decimals(Etherscan.USDT) == 6
        loader.assert_called_once_with(Etherscan.USDT)

    def test_seeded_native_never_loads(self):
        loader = Mock()
        cache = DecimalCache(loader, {Etherscan.ETH: 18})

        assert cache.get_decimals(Etherscan.ETH) == 18
        loader.assert_not_called()

    def test_none_contract_is_zero(self):
        loader = Mock()
        cache = DecimalCache(loader)

        assert cache.get_decimals(None) == 0
        loader.assert_not_called()

    def test_empty_output_defaults_to_zero_and_is_cached(self):
        loader = Mock(return_value=[])
        cache = DecimalCache(loader)

        assert cache.get_decimals(Etherscan.LINK) == 0
        assert Etherscan.LINK in cache
        assert cache.get_decimals(Etherscan.LINK) == 0
        assert loader.call_count == 1

    def test_unparsable_output_defaults_to_zero(self):
        cache = DecimalCache(Mock(return_value=["not a number"]))

        assert cache.get_decimals(Etherscan.DAI) == 0

    def test_string_output_is_parsed(self):
        cache = DecimalCache(Mock(return_value=["8"]))

        assert cache.get_decimals(Etherscan.WBTC) == 8

    def test_remote_error_is_not_cached(self):
        loader = Mock(side_effect=[RemoteError(-32000, "header not found"), [18]])
        cache = DecimalCache(loader)

        assert cache.get_decimals(Etherscan.WETH) == 0
        assert Etherscan.WETH not in cache
        assert cache.get_decimals(Etherscan.WETH) == 18
        assert cache.snapshot() == {Etherscan.WETH: 18}

    def test_decode_error_propagates(self):
        cache = DecimalCache(Mock(side_effect=DecodeError("bad output")))

        with pytest.raises(DecodeError):
            cache.get_decimals(Etherscan.USDC)
        assert len(cache) == 0

    def test_transport_error_is_zero_and_not_cached(self):
        loader = Mock(side_effect=[TransportError("timeout"), [6]])
        cache = DecimalCache(loader)

        assert cache.get_decimals(Etherscan.USDC) == 0
        assert Etherscan.USDC not in cache
        assert cache.get_decimals(Etherscan.USDC) == 6
        assert loader.call_count == 2

    def test_seed(self):
        loader = Mock()
        cache = DecimalCache(loader)
        cache.seed(Etherscan.USDC, 6)

        assert cache.get_decimals(Etherscan.USDC) == 6
        loader.assert_not_called()

    def test_concurrent_lookups_agree(self):
        loader = Mock(return_value=[6])
        cache = DecimalCache(loader, {Etherscan.ETH: 18})
        contracts = [Etherscan.USDT, Etherscan.ETH, Etherscan.USDC] * 100

        with ThreadPoolExecutor(max_workers=16) as executor:
            results = list(executor.map(cache.get_decimals, contracts))

        assert results == [6, 18, 6] * 100
        assert cache.snapshot() == {Etherscan.ETH: 18, Etherscan.USDT: 6, Etherscan.USDC: 6}
        # Races may load a contract more than once, never the native coin
        assert all(call.args[0] is not Etherscan.ETH for call in loader.call_args_list)
