"""
Basic usage examples for firefox_proxy package.

This package resolves the proxy Firefox would use for a URI, based on the
network.proxy.* preferences of a profile.
"""
import logging
from firefox_proxy import (
    FirefoxProxyProvider,
    DictPreferenceStore,
    OperatingSystem,
    ConfigurationError,
    get_request_kwargs,
)


# =============================================================================
# Example 1: Manual proxy configuration
# =============================================================================
def example1_manual() -> None:
    """
    >>> prefs = DictPreferenceStore({"network.proxy.type": 1, "network.proxy.http": "proxy"})
    >>> FirefoxProxyProvider(prefs).select("http://example.com/")
    """
    prefs = DictPreferenceStore({
        "network.proxy.type": 1,
        "network.proxy.http": "proxy.company.com",
        "network.proxy.http_port": 3128,
        "network.proxy.share_proxy_settings": True,
        "network.proxy.no_proxies_on": "localhost, .company.internal",
    })
    provider = FirefoxProxyProvider(prefs)

    print("Example 1 - Manual configuration:")
    for uri in ("http://example.com/", "https://example.com/", "http://wiki.company.internal/"):
        print(f"  {uri} -> {[str(p) for p in provider.select(uri)]}")


# =============================================================================
# Example 2: PAC script with a caller-supplied evaluator
# =============================================================================
def example2_pac() -> None:
    """
    PAC scripts are downloaded on first use; evaluation is up to the caller.
    """
    def evaluate(script: str, url: str, host: str) -> str:
        # A real evaluator would run FindProxyForURL(url, host) from script
        return "PROXY pac-proxy.company.com:8080; DIRECT"

    prefs = DictPreferenceStore({
        "network.proxy.type": 2,
        "network.proxy.autoconfig_url": "http://wpad.company.com/proxy.pac",
    })
    provider = FirefoxProxyProvider(prefs, pac_evaluator=evaluate)

    print("\nExample 2 - PAC:")
    print(f"  strategy: {provider.strategy}")


# =============================================================================
# Example 3: System settings and unsupported platforms
# =============================================================================
def example3_system() -> None:
    prefs = DictPreferenceStore()  # network.proxy.type defaults to system

    provider = FirefoxProxyProvider(prefs, platform_detector=lambda: OperatingSystem.LINUX)
    print("\nExample 3 - System settings:")
    print(f"  provider: {provider.provider.name}")

    try:
        FirefoxProxyProvider(prefs, platform_detector=lambda: OperatingSystem.OTHER)
    except ConfigurationError as e:
        print(f"  error: {e}")


# =============================================================================
# Example 4: httpx kwargs for a URI
# =============================================================================
def example4_request_kwargs() -> None:
    prefs = DictPreferenceStore({
        "network.proxy.type": 1,
        "network.proxy.http": "proxy.company.com",
        "network.proxy.http_port": 3128,
    })
    provider = FirefoxProxyProvider(prefs)
    kwargs = get_request_kwargs(provider, "http://example.com/")

    print("\nExample 4 - Request kwargs:")
    print(f"  kwargs: {kwargs}")

    # import httpx
    # response = httpx.get("http://example.com/", **kwargs)


def main() -> None:
    print("=== firefox_proxy Examples ===\n")

    example1_manual()
    example2_pac()
    example3_system()
    example4_request_kwargs()

    print("\n=== Examples Complete ===")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    main()
