"""
Firefox proxy settings resolution package.
"""
from .types import FirefoxProxyType, ProxyKind, ProxyEndpoint, NO_PROXY
from .configuration import ProxyConfiguration
from .preferences import PreferenceStore, DictPreferenceStore
from .platform import OperatingSystem, get_local_platform
from .strategy import SelectedStrategy, DirectStrategy, PacStrategy, ConfigStrategy, SystemStrategy
from .providers import (
    ProxyProvider,
    DirectProxyProvider,
    ConfigBasedProxyProvider,
    PacBasedProxyProvider,
    WindowsProxyProvider,
    MacProxyProvider,
    LinuxProxyProvider,
    register_system_provider,
)
from .selector import read_strategy, build_configuration, create_provider
from .provider import FirefoxProxyProvider
from .dispatcher import get_request_kwargs, create_client
from .errors import (
    FirefoxProxyError,
    ConfigurationError,
    UnsupportedProxyTypeError,
    InvalidAutoConfigUrlError,
    UnsupportedPlatformError,
    ProxyResolutionError,
    PacDownloadError,
    PacEvaluationError,
    InvalidTargetUriError,
)

__all__ = [
    "FirefoxProxyType",
    "ProxyKind",
    "ProxyEndpoint",
    "NO_PROXY",
    "ProxyConfiguration",
    "PreferenceStore",
    "DictPreferenceStore",
    "OperatingSystem",
    "get_local_platform",
    "SelectedStrategy",
    "DirectStrategy",
    "PacStrategy",
    "ConfigStrategy",
    "SystemStrategy",
    "ProxyProvider",
    "DirectProxyProvider",
    "ConfigBasedProxyProvider",
    "PacBasedProxyProvider",
    "WindowsProxyProvider",
    "MacProxyProvider",
    "LinuxProxyProvider",
    "register_system_provider",
    "read_strategy",
    "build_configuration",
    "create_provider",
    "FirefoxProxyProvider",
    "get_request_kwargs",
    "create_client",
    "FirefoxProxyError",
    "ConfigurationError",
    "UnsupportedProxyTypeError",
    "InvalidAutoConfigUrlError",
    "UnsupportedPlatformError",
    "ProxyResolutionError",
    "PacDownloadError",
    "PacEvaluationError",
    "InvalidTargetUriError",
]
