"""
Providers that follow the operating system proxy settings.

The settings are read through urllib.request, which consults the environment
first and then the Windows registry or the macOS SystemConfiguration store.
"""
import logging
import urllib.request
from typing import Callable, Dict, List, Optional
from urllib.parse import urlparse

from .base import ProxyProvider
from ..platform import OperatingSystem
from ..types import ProxyEndpoint, ProxyKind, NO_PROXY
from ..uri_utils import parse_target_uri

logger = logging.getLogger(__name__)

ProxySource = Callable[[], Dict[str, str]]
BypassCheck = Callable[[str], bool]


class SystemProxyProvider(ProxyProvider):
    """Maps the URI scheme onto the system proxy table."""

    platform: OperatingSystem = OperatingSystem.OTHER

    def __init__(
        self,
        proxy_source: Optional[ProxySource] = None,
        bypass_check: Optional[BypassCheck] = None
    ):
        self._proxy_source = proxy_source or urllib.request.getproxies
        self._bypass_check = bypass_check or urllib.request.proxy_bypass

    @property
    def name(self) -> str:
        return f"system-{self.platform.value}"

    def select(self, uri: str) -> List[ProxyEndpoint]:
        target = parse_target_uri(uri)

        if target.host and self._bypass_check(target.host):
            logger.debug(f"System settings bypass proxy for '{target.host}'")
            return [NO_PROXY]

        proxies = {key.lower(): value for key, value in self._proxy_source().items() if value}
        proxy_url = proxies.get(target.scheme)
        if not proxy_url and target.scheme in ("socket", "socks"):
            proxy_url = proxies.get("socks")
        if not proxy_url:
            proxy_url = proxies.get("all")

        if not proxy_url:
            logger.debug(f"No system proxy for scheme '{target.scheme}'")
            return [NO_PROXY]

        endpoint = endpoint_from_proxy_url(proxy_url)
        if endpoint is None:
            logger.debug(f"Ignoring unusable system proxy '{proxy_url}'")
            return [NO_PROXY]

        logger.debug(f"Using system proxy {endpoint} for {uri}")
        return [endpoint]


class WindowsProxyProvider(SystemProxyProvider):
    platform = OperatingSystem.WINDOWS


class MacProxyProvider(SystemProxyProvider):
    platform = OperatingSystem.MAC


class LinuxProxyProvider(SystemProxyProvider):
    platform = OperatingSystem.LINUX


def endpoint_from_proxy_url(proxy_url: str) -> Optional[ProxyEndpoint]:
    """Build an endpoint from a proxy URL such as 'http://proxy:3128'."""
    if "://" not in proxy_url:
        proxy_url = f"http://{proxy_url}"

    parsed = urlparse(proxy_url)
    scheme = parsed.scheme.lower()
    if not parsed.hostname:
        return None

    if scheme.startswith("socks"):
        kind, default_port = ProxyKind.SOCKS, 1080
    elif scheme == "https":
        kind, default_port = ProxyKind.HTTP, 443
    else:
        kind, default_port = ProxyKind.HTTP, 80

    try:
        port = parsed.port or default_port
    except ValueError:
        return None
    return ProxyEndpoint(kind=kind, host=parsed.hostname, port=port)
