"""
Platform settings.

Values are read from the environment (``INFURA_*`` / ``TRONSCAN_*``) and can be
overridden by passing keyword arguments.
"""

import decimal
from decimal import Context
from typing import ClassVar, Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .types import Platform

_ROUNDING_MODES = {
    decimal.ROUND_UP, decimal.ROUND_DOWN, decimal.ROUND_CEILING,
    decimal.ROUND_FLOOR, decimal.ROUND_HALF_UP, decimal.ROUND_HALF_DOWN,
    decimal.ROUND_HALF_EVEN, decimal.ROUND_05UP,
}


class PlatformSettings(BaseSettings):
    """Settings common to every platform"""

    platform: ClassVar[Platform]

    endpoint: str
    timeout: float = 30.0

    # Decimal context used to scale raw amounts into display units
    value_precision: int = 34
    value_rounding: str = decimal.ROUND_HALF_UP

    @field_validator("value_precision")
    @classmethod
    def check_precision(cls, v: int) -> int:
        if v < 1:
            raise ValueError("value_precision must be positive")
        return v

    @field_validator("value_rounding")
    @classmethod
    def check_rounding(cls, v: str) -> str:
        if v not in _ROUNDING_MODES:
            raise ValueError(f"Unknown rounding mode: {v}")
        return v

    def value_context(self) -> Context:
        return Context(prec=self.value_precision, rounding=self.value_rounding)


class InfuraSettings(PlatformSettings):
    """Ethereum JSON-RPC node settings"""

    model_config = SettingsConfigDict(env_prefix="INFURA_")
    platform: ClassVar[Platform] = Platform.ETHERSCAN

    endpoint: str = "https://mainnet.infura.io/v3/"
    project_id: Optional[str] = None

    @property
    def rpc_url(self) -> str:
        if not self.project_id:
            return self.endpoint
        return self.endpoint.rstrip("/") + "/" + self.project_id


class TronscanSettings(PlatformSettings):
    """Tronscan explorer API settings"""

    model_config = SettingsConfigDict(env_prefix="TRONSCAN_")
    platform: ClassVar[Platform] = Platform.TRONSCAN

    endpoint: str = "https://apilist.tronscanapi.com"
    api_key: Optional[str] = None
