"""
Proxy providers and the system provider registry.
"""
import logging
from typing import Callable, Dict
from .base import ProxyProvider
from .direct import DirectProxyProvider
from .config_based import ConfigBasedProxyProvider
from .pac import PacBasedProxyProvider, PacEvaluator, parse_pac_result
from .system import (
    SystemProxyProvider,
    WindowsProxyProvider,
    MacProxyProvider,
    LinuxProxyProvider,
)
from ..platform import OperatingSystem

logger = logging.getLogger(__name__)

SystemProviderFactory = Callable[[], ProxyProvider]

_system_providers: Dict[OperatingSystem, SystemProviderFactory] = {}

def register_system_provider(platform: OperatingSystem, factory: SystemProviderFactory) -> None:
    """Register the provider factory used for platform's system proxy settings."""
    _system_providers[platform] = factory
    logger.debug(f"Registered system provider for {platform}")

def get_system_provider_factory(platform: OperatingSystem) -> SystemProviderFactory:
    """Get the registered factory for platform."""
    if platform not in _system_providers:
        raise KeyError(f"No system provider for '{platform}'. Available: {[str(p) for p in _system_providers]}")
    return _system_providers[platform]

def available_system_platforms() -> Dict[OperatingSystem, SystemProviderFactory]:
    return dict(_system_providers)

# Register default system providers
register_system_provider(OperatingSystem.WINDOWS, WindowsProxyProvider)
register_system_provider(OperatingSystem.MAC, MacProxyProvider)
register_system_provider(OperatingSystem.LINUX, LinuxProxyProvider)

__all__ = [
    "ProxyProvider",
    "DirectProxyProvider",
    "ConfigBasedProxyProvider",
    "PacBasedProxyProvider",
    "PacEvaluator",
    "parse_pac_result",
    "SystemProxyProvider",
    "WindowsProxyProvider",
    "MacProxyProvider",
    "LinuxProxyProvider",
    "SystemProviderFactory",
    "register_system_provider",
    "get_system_provider_factory",
    "available_system_platforms",
]
