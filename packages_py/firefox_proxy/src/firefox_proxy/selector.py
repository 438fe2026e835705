"""
Strategy selection: turn Firefox preferences into a single proxy strategy
and build the provider that implements it.
"""
import re
import logging
from typing import List, Mapping, Optional
from urllib.parse import urlparse

from .configuration import ProxyConfiguration
from .constants import (
    PROXY_TYPE_PROPERTY_NAME,
    AUTO_CONFIG_URL_PROPERTY_NAME,
    SHARE_SETTINGS_PROPERTY_NAME,
    HIJACK_LOCALHOST_PROPERTY_NAME,
    EXCLUSIONS_PROPERTY_NAME,
    HTTP_PROPERTY_NAME,
    HTTP_PORT_PROPERTY_NAME,
    SSL_PROPERTY_NAME,
    SSL_PORT_PROPERTY_NAME,
    FTP_PROPERTY_NAME,
    FTP_PORT_PROPERTY_NAME,
    SOCKS_PROPERTY_NAME,
    SOCKS_PORT_PROPERTY_NAME,
    DEFAULT_PROTOCOL_PORT,
    EXCLUSIONS_SEPARATOR_PATTERN,
    PAC_URL_SCHEMES,
)
from .errors import InvalidAutoConfigUrlError, UnsupportedPlatformError, UnsupportedProxyTypeError
from .platform import OperatingSystem, PlatformDetector, get_local_platform
from .preferences import PreferenceStore
from .providers import (
    ProxyProvider,
    DirectProxyProvider,
    ConfigBasedProxyProvider,
    PacBasedProxyProvider,
    PacEvaluator,
    SystemProviderFactory,
    available_system_platforms,
)
from .strategy import (
    SelectedStrategy,
    DirectStrategy,
    PacStrategy,
    ConfigStrategy,
    SystemStrategy,
)
from .types import FirefoxProxyType

logger = logging.getLogger(__name__)

def read_strategy(
    preferences: PreferenceStore,
    platform_detector: PlatformDetector = get_local_platform,
    system_providers: Optional[Mapping[OperatingSystem, SystemProviderFactory]] = None
) -> SelectedStrategy:
    """Determine the configured proxy strategy.

    Raises:
        ConfigurationError: unsupported network.proxy.type, malformed
            auto-config URL, or no system provider for the local platform.
    """
    code = preferences.get_int(PROXY_TYPE_PROPERTY_NAME, FirefoxProxyType.SYSTEM.value)
    proxy_type = FirefoxProxyType.from_config_value(code)
    logger.debug(f"FirefoxProxyType: {proxy_type.name}")

    if proxy_type == FirefoxProxyType.NONE:
        return DirectStrategy()

    if proxy_type == FirefoxProxyType.MANUAL:
        return ConfigStrategy(configuration=build_configuration(preferences))

    if proxy_type == FirefoxProxyType.PAC:
        url = preferences.get_string(AUTO_CONFIG_URL_PROPERTY_NAME)
        validate_auto_config_url(url)
        return PacStrategy(url=url)

    if proxy_type == FirefoxProxyType.SYSTEM:
        supported = system_providers if system_providers is not None else available_system_platforms()
        local_platform = platform_detector()
        if local_platform not in supported:
            raise UnsupportedPlatformError(local_platform, proxy_type.name)
        return SystemStrategy(platform=local_platform)

    raise UnsupportedProxyTypeError(code)

def build_configuration(preferences: PreferenceStore) -> ProxyConfiguration:
    """Translate the manual proxy preferences into a ProxyConfiguration."""
    configuration = ProxyConfiguration(
        use_http_for_https_and_ftp=preferences.get_boolean(SHARE_SETTINGS_PROPERTY_NAME, False),
        use_http_for_socks=True,
        http_host=preferences.get_string(HTTP_PROPERTY_NAME),
        http_port=preferences.get_int(HTTP_PORT_PROPERTY_NAME, DEFAULT_PROTOCOL_PORT),
        https_host=preferences.get_string(SSL_PROPERTY_NAME),
        https_port=preferences.get_int(SSL_PORT_PROPERTY_NAME, DEFAULT_PROTOCOL_PORT),
        ftp_host=preferences.get_string(FTP_PROPERTY_NAME),
        ftp_port=preferences.get_int(FTP_PORT_PROPERTY_NAME, DEFAULT_PROTOCOL_PORT),
        socks_host=preferences.get_string(SOCKS_PROPERTY_NAME),
        socks_port=preferences.get_int(SOCKS_PORT_PROPERTY_NAME, DEFAULT_PROTOCOL_PORT),
        bypass_local=not preferences.get_boolean(HIJACK_LOCALHOST_PROPERTY_NAME, False),
        bypass_list=tuple(split_exclusions(preferences.get_string(EXCLUSIONS_PROPERTY_NAME))),
    )

    logger.debug(f"Manual proxy configuration: {configuration}")
    return configuration

def split_exclusions(value: str) -> List[str]:
    """Split network.proxy.no_proxies_on on commas and whitespace."""
    return [token for token in re.split(EXCLUSIONS_SEPARATOR_PATTERN, value or "") if token]

def validate_auto_config_url(url: str) -> None:
    """Check that url is an absolute URL with a supported scheme."""
    if not url or not url.strip():
        raise InvalidAutoConfigUrlError(url, "no URL configured")

    try:
        parsed = urlparse(url.strip())
        parsed.port  # raises ValueError for a malformed port
    except ValueError as e:
        raise InvalidAutoConfigUrlError(url, str(e))

    scheme = parsed.scheme.lower()
    if not scheme:
        raise InvalidAutoConfigUrlError(url, "no protocol")
    if scheme not in PAC_URL_SCHEMES:
        raise InvalidAutoConfigUrlError(url, f"unknown protocol '{scheme}'")
    if scheme != "file" and not parsed.hostname:
        raise InvalidAutoConfigUrlError(url, "no host")

def create_provider(
    strategy: SelectedStrategy,
    pac_evaluator: Optional[PacEvaluator] = None,
    system_providers: Optional[Mapping[OperatingSystem, SystemProviderFactory]] = None
) -> ProxyProvider:
    """Instantiate the provider implementing strategy."""
    if isinstance(strategy, DirectStrategy):
        return DirectProxyProvider.get_instance()

    if isinstance(strategy, ConfigStrategy):
        return ConfigBasedProxyProvider(strategy.configuration)

    if isinstance(strategy, PacStrategy):
        return PacBasedProxyProvider(strategy.url, evaluator=pac_evaluator)

    if isinstance(strategy, SystemStrategy):
        factories = system_providers if system_providers is not None else available_system_platforms()
        if strategy.platform not in factories:
            raise UnsupportedPlatformError(strategy.platform, strategy.proxy_type.name)
        return factories[strategy.platform]()

    raise TypeError(f"Unknown proxy strategy: {strategy!r}")
