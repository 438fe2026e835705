from .proxy_type import FirefoxProxyType
from .endpoint import ProxyKind, ProxyEndpoint, NO_PROXY

__all__ = [
    "FirefoxProxyType",
    "ProxyKind",
    "ProxyEndpoint",
    "NO_PROXY",
]
