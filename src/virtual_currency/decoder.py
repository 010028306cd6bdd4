"""
Classification of transaction call data into transfers.
"""

import logging
from typing import Any, Callable, List, Optional, Sequence, Tuple

from eth_abi import decode
from eth_abi.exceptions import DecodingError
from eth_utils import function_signature_to_4byte_selector, to_bytes

from .contracts import Contract
from .models import DecodedInput
from .utils import is_empty_input, normalize_address

logger = logging.getLogger(__name__)

SELECTOR_SIZE = 4

# Maps decoded arguments to (destination, amount)
ArgumentMapper = Callable[[Tuple[Any, ...]], Tuple[str, int]]


def _transfer(args: Tuple[Any, ...]) -> Tuple[str, int]:
    to, value = args
    return to, value


def _transfer_from(args: Tuple[Any, ...]) -> Tuple[str, int]:
    _, to, value = args
    return to, value


# Checked in order, first match wins
TRANSFER_METHODS: List[Tuple[str, Sequence[str], ArgumentMapper]] = [
    ("transfer", ("address", "uint256"), _transfer),
    ("transferFrom", ("address", "address", "uint256"), _transfer_from),
]


class InputDecoder:
    """
    Decodes the call data of a transaction.

    Empty data is a native coin transfer. Otherwise the selector is matched
    against the known transfer methods; anything else decodes to an empty
    ``DecodedInput`` rather than failing.
    """

    def __init__(self, native: Contract,
                 methods: Optional[List[Tuple[str, Sequence[str], ArgumentMapper]]] = None):
        self.native = native
        self._methods = []
        for name, types, mapper in methods or TRANSFER_METHODS:
            signature = f"{name}({','.join(types)})"
            selector = function_signature_to_4byte_selector(signature)
            self._methods.append((selector, name, list(types), mapper))

    def decode(self, input_data: Optional[str], to: Optional[str], value: int) -> DecodedInput:
        if is_empty_input(input_data):
            return DecodedInput(to=to or "", value=value, contract=self.native)

        try:
            data = to_bytes(hexstr=input_data)
        except ValueError as e:
            logger.debug(f"Call data is not valid hex: {e}")
            return DecodedInput()
        if len(data) <= SELECTOR_SIZE:
            logger.debug(f"Call data too short for a method call: {input_data}")
            return DecodedInput()

        selector, arguments = data[:SELECTOR_SIZE], data[SELECTOR_SIZE:]
        for method_selector, name, types, mapper in self._methods:
            if selector != method_selector:
                continue
            try:
                destination, amount = mapper(decode(types, arguments))
            except DecodingError as e:
                logger.debug(f"Malformed {name} arguments in call data: {e}")
                return DecodedInput()
            return DecodedInput(to=normalize_address(destination), value=amount, method=name)

        logger.debug(f"Unrecognized method selector 0x{selector.hex()}")
        return DecodedInput()
