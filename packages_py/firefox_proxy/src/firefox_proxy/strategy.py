"""
The proxy strategy selected from the preferences.
"""
from dataclasses import dataclass
from typing import Union

from .configuration import ProxyConfiguration
from .platform import OperatingSystem
from .types import FirefoxProxyType


@dataclass(frozen=True)
class DirectStrategy:
    """network.proxy.type = 0, never use a proxy."""
    proxy_type: FirefoxProxyType = FirefoxProxyType.NONE


@dataclass(frozen=True)
class PacStrategy:
    """network.proxy.type = 2, proxies computed by the PAC script at url."""
    url: str
    proxy_type: FirefoxProxyType = FirefoxProxyType.PAC


@dataclass(frozen=True)
class ConfigStrategy:
    """network.proxy.type = 1, manual proxy configuration."""
    configuration: ProxyConfiguration
    proxy_type: FirefoxProxyType = FirefoxProxyType.MANUAL


@dataclass(frozen=True)
class SystemStrategy:
    """network.proxy.type = 5, use the operating system settings."""
    platform: OperatingSystem
    proxy_type: FirefoxProxyType = FirefoxProxyType.SYSTEM


SelectedStrategy = Union[DirectStrategy, PacStrategy, ConfigStrategy, SystemStrategy]
