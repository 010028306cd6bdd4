"""
Pytest configuration and shared fakes
"""

import pytest
from unittest.mock import Mock
from eth_abi import encode

from virtual_currency.abi import encode_call

TX_HASH = "0x" + "ab" * 32
BLOCK_HASH = "0x" + "cd" * 32
SENDER = "0x1111111111111111111111111111111111111111"
RECIPIENT = "0x5aaeb6053f3e94c9b9a09f33669435e7ef1beaed"

# 2020-09-13 12:26:40 UTC
BLOCK_TIMESTAMP = 1600000000


class FakeRpcClient:
    """In-memory RPC client answering from a method -> response table"""

    def __init__(self, responses=None):
        self.responses = dict(responses or {})
        self.calls = []

    def invoke(self, method, *params):
        self.calls.append((method, params))
        response = self.responses.get(method)
        if callable(response):
            response = response(*params)
        if isinstance(response, Exception):
            raise response
        return response

    def count(self, method):
        return sum(1 for called, _ in self.calls if called == method)


def abi_hex(types, values):
    """ABI-encode values as a 0x-prefixed hex return value"""
    return "0x" + encode(types, values).hex()


def transfer_input(to, amount):
    return encode_call("transfer", [("address", to), ("uint256", amount)])


@pytest.fixture
def fake_rpc():
    return FakeRpcClient()


@pytest.fixture
def mock_session():
    """requests.Session stand-in whose responses are keyed by URL path"""
    session = Mock()
    session.routes = {}

    def get(url, params=None, headers=None, timeout=None):
        for path, payload in session.routes.items():
            if url.endswith(path):
                if isinstance(payload, Exception):
                    raise payload
                status_code, body = payload if isinstance(payload, tuple) else (200, payload)
                response = Mock()
                response.status_code = status_code
                response.text = str(body)
                response.json.return_value = body
                return response
        response = Mock()
        response.status_code = 404
        response.text = "Not Found"
        return response

    session.get.side_effect = get
    return session
