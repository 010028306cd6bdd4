"""
JSON-RPC invocation over web3's HTTP provider.
"""

import logging
from typing import Any, Optional

import requests
from web3 import HTTPProvider
from web3.exceptions import Web3Exception
from web3.types import RPCEndpoint

from .types import Platform, TransportError, RemoteError

logger = logging.getLogger(__name__)


class JsonRpcClient:
    """
    Issues single JSON-RPC calls and returns the ``result`` member.

    Failures to reach the node raise ``TransportError``; an error envelope
    raises ``RemoteError``. Nothing is retried here.
    """

    def __init__(self, endpoint: str, timeout: float = 30.0,
                 provider: Optional[HTTPProvider] = None,
                 platform: Platform = Platform.ETHERSCAN):
        self.endpoint = endpoint
        self.platform = platform
        self.provider = provider or HTTPProvider(
            endpoint, request_kwargs={"timeout": timeout}
        )

    def invoke(self, method: str, *params: Any) -> Any:
        """Call ``method`` with ordered ``params``"""
        try:
            response = self.provider.make_request(RPCEndpoint(method), list(params))
        except (requests.RequestException, Web3Exception, ValueError) as e:
            logger.warning(f"RPC transport failure calling {method} on {self.endpoint}: {e}")
            raise TransportError(f"{method} failed: {e}", platform=self.platform) from e

        error = response.get("error")
        if error:
            if isinstance(error, dict):
                code, message = error.get("code"), error.get("message", "")
            else:
                code, message = None, str(error)
            raise RemoteError(code, message, platform=self.platform)

        return response.get("result")
