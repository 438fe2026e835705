"""
Provider for a manual proxy configuration.
"""
import logging
from typing import List, Optional
from .base import ProxyProvider
from ..configuration import ProxyConfiguration
from ..types import ProxyEndpoint, NO_PROXY
from ..uri_utils import parse_target_uri, is_local_host, matches_bypass_pattern

logger = logging.getLogger(__name__)

class ConfigBasedProxyProvider(ProxyProvider):
    """Chooses proxies from a static ProxyConfiguration."""

    def __init__(self, configuration: ProxyConfiguration):
        self._configuration = configuration

    @property
    def name(self) -> str:
        return "config"

    @property
    def configuration(self) -> ProxyConfiguration:
        return self._configuration

    def select(self, uri: str) -> List[ProxyEndpoint]:
        target = parse_target_uri(uri)
        config = self._configuration

        if config.bypass_local and is_local_host(target.host):
            logger.debug(f"Bypassing proxy for local host '{target.host}'")
            return [NO_PROXY]

        for pattern in config.bypass_list:
            if matches_bypass_pattern(target.host, target.port, pattern):
                logger.debug(f"Bypassing proxy for '{target.host}' (matched '{pattern}')")
                return [NO_PROXY]

        endpoint = self._endpoint_for_scheme(target.scheme)
        if endpoint is None:
            endpoint = config.get_socks_address()

        if endpoint is None:
            logger.debug(f"No proxy configured for scheme '{target.scheme}'")
            return [NO_PROXY]

        logger.debug(f"Using {endpoint} for {uri}")
        return [endpoint]

    def _endpoint_for_scheme(self, scheme: str) -> Optional[ProxyEndpoint]:
        config = self._configuration
        if scheme == "http":
            return config.get_http_address()
        if scheme == "https":
            return config.get_https_address()
        if scheme == "ftp":
            return config.get_ftp_address()
        if scheme in ("socket", "socks"):
            socks = config.get_socks_address()
            if socks is None and config.use_http_for_socks:
                return config.get_http_address()
            return socks
        return None
