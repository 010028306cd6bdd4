"""
Read-only contract calls with standard ABI encoding.
"""

import logging
from typing import Any, List, Sequence, Tuple

from eth_abi import encode, decode
from eth_abi.exceptions import DecodingError
from eth_utils import encode_hex, function_signature_to_4byte_selector, to_bytes

from .interfaces import IRpcClient
from .types import DecodeError
from .utils import is_empty_input

logger = logging.getLogger(__name__)

WORD_SIZE = 32

# (abi type, value) pairs in declared order
CallInputs = Sequence[Tuple[str, Any]]


def method_signature(method: str, types: Sequence[str]) -> str:
    return f"{method}({','.join(types)})"


def encode_call(method: str, inputs: CallInputs) -> str:
    """Selector of ``method`` followed by its ABI-encoded arguments, as hex"""
    types = [abi_type for abi_type, _ in inputs]
    values = [value for _, value in inputs]
    selector = function_signature_to_4byte_selector(method_signature(method, types))
    return encode_hex(selector + encode(types, values))


def decode_output(raw: str, outputs: Sequence[str]) -> List[Any]:
    """
    Decode the hex return value of a call.

    An empty return value gives an empty list. Data that is not a whole number
    of words, or too short for ``outputs``, raises ``DecodeError``.
    """
    if is_empty_input(raw):
        return []

    data = to_bytes(hexstr=raw)
    if len(data) % WORD_SIZE:
        raise DecodeError(f"Return data of {len(data)} bytes is not word aligned")

    try:
        return list(decode(list(outputs), data))
    except DecodingError as e:
        raise DecodeError(f"Cannot decode {list(outputs)} from {len(data)} bytes: {e}") from e


class ContractCaller:
    """Performs ``eth_call`` against a contract and decodes the result"""

    def __init__(self, rpc: IRpcClient):
        self.rpc = rpc

    def call(self, method: str, inputs: CallInputs, outputs: Sequence[str],
             from_address: str, to_address: str, block: str = "latest") -> List[Any]:
        data = encode_call(method, inputs)
        transaction = {"from": from_address, "to": to_address, "data": data}
        raw = self.rpc.invoke("eth_call", transaction, block)
        logger.debug(f"eth_call {method} on {to_address} returned {raw}")
        return decode_output(raw, outputs)
