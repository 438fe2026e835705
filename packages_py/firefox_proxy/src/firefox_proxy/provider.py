"""
Firefox proxy provider facade.
"""
import logging
from typing import List, Mapping, Optional

from .platform import OperatingSystem, PlatformDetector, get_local_platform
from .preferences import PreferenceStore
from .providers import ProxyProvider, PacEvaluator, SystemProviderFactory
from .selector import read_strategy, create_provider
from .strategy import SelectedStrategy
from .types import ProxyEndpoint

logger = logging.getLogger(__name__)

class FirefoxProxyProvider(ProxyProvider):
    """Resolves proxies the way Firefox would, based on its preferences.

    The preferences are read once, here. The chosen strategy and its provider
    never change afterwards, so select() may be called from several threads
    as long as the bound provider allows it.

    Raises:
        ConfigurationError: the preferences describe no usable strategy.
    """

    def __init__(
        self,
        preferences: PreferenceStore,
        platform_detector: PlatformDetector = get_local_platform,
        pac_evaluator: Optional[PacEvaluator] = None,
        system_providers: Optional[Mapping[OperatingSystem, SystemProviderFactory]] = None
    ):
        strategy = read_strategy(
            preferences,
            platform_detector=platform_detector,
            system_providers=system_providers
        )
        self._strategy: SelectedStrategy = strategy
        self._internal_provider: ProxyProvider = create_provider(
            strategy,
            pac_evaluator=pac_evaluator,
            system_providers=system_providers
        )
        logger.debug(f"FirefoxProxyProvider bound to '{self._internal_provider.name}' provider")

    @property
    def name(self) -> str:
        return "firefox"

    @property
    def strategy(self) -> SelectedStrategy:
        return self._strategy

    @property
    def provider(self) -> ProxyProvider:
        return self._internal_provider

    def select(self, uri: str) -> List[ProxyEndpoint]:
        return self._internal_provider.select(uri)
