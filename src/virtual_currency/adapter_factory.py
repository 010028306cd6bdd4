"""
Adapter factory for creating platform-specific adapters.
"""

import logging
from typing import Dict, List, Type

from .config import PlatformSettings
from .interfaces import IVirtualCurrencyService
from .types import Platform
from .adapters import EtherscanAdapter, TronscanAdapter

logger = logging.getLogger(__name__)


class AdapterFactory:
    """Factory for creating platform adapters"""

    # Mapping of platforms to adapter classes
    _adapters: Dict[Platform, Type[IVirtualCurrencyService]] = {
        Platform.ETHERSCAN: EtherscanAdapter,
        Platform.TRONSCAN: TronscanAdapter,
    }

    @classmethod
    def create_adapter(cls, settings: PlatformSettings) -> IVirtualCurrencyService:
        """
        Create an adapter instance for the given platform settings.

        Args:
            settings: Platform settings; their class determines the platform

        Returns:
            Configured platform adapter instance

        Raises:
            ValueError: If the platform is not supported
        """
        platform = settings.platform
        if platform not in cls._adapters:
            raise ValueError(f"Unsupported platform: {platform}")

        return cls._adapters[platform](settings)

    @classmethod
    def register_adapter(cls, platform: Platform,
                         adapter_class: Type[IVirtualCurrencyService]):
        """
        Register a custom adapter implementation for a platform.

        Args:
            platform: The platform
            adapter_class: The adapter class to use, called with the settings
        """
        cls._adapters[platform] = adapter_class
        logger.info(f"Registered adapter {adapter_class.__name__} for {platform.value}")

    @classmethod
    def get_supported_platforms(cls) -> List[Platform]:
        """Get list of supported platforms"""
        return list(cls._adapters.keys())

    @classmethod
    def is_platform_supported(cls, platform: Platform) -> bool:
        """Check if a platform is supported"""
        return platform in cls._adapters
