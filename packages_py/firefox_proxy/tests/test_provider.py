"""
Tests for the FirefoxProxyProvider facade.
"""
import pytest
from unittest.mock import MagicMock
from pydantic import ValidationError
from firefox_proxy import (
    FirefoxProxyProvider,
    DictPreferenceStore,
    OperatingSystem,
    DirectProxyProvider,
    ConfigBasedProxyProvider,
    PacBasedProxyProvider,
    LinuxProxyProvider,
    MacProxyProvider,
    WindowsProxyProvider,
    DirectStrategy,
    PacStrategy,
    ConfigStrategy,
    SystemStrategy,
    ProxyEndpoint,
    ProxyKind,
    NO_PROXY,
    ConfigurationError,
    UnsupportedPlatformError,
    ProxyResolutionError,
)

def detector(platform: OperatingSystem):
    return lambda: platform

class TestStrategyBinding:
    def test_none(self):
        provider = FirefoxProxyProvider(DictPreferenceStore({"network.proxy.type": 0}))
        assert provider.strategy == DirectStrategy()
        assert provider.provider is DirectProxyProvider.get_instance()
        assert provider.select("http://example.org/") == [NO_PROXY]

    def test_manual(self):
        prefs = DictPreferenceStore({
            "network.proxy.type": 1,
            "network.proxy.http": "proxy.example.com",
            "network.proxy.http_port": 3128,
            "network.proxy.no_proxies_on": "localhost, .internal",
        })
        provider = FirefoxProxyProvider(prefs)
        assert isinstance(provider.strategy, ConfigStrategy)
        assert isinstance(provider.provider, ConfigBasedProxyProvider)
        assert provider.provider.configuration is provider.strategy.configuration
        assert provider.select("http://example.org/") == [
            ProxyEndpoint(kind=ProxyKind.HTTP, host="proxy.example.com", port=3128)
        ]
        assert provider.select("http://wiki.internal/") == [NO_PROXY]

    def test_pac(self):
        url = "http://wpad.example.com/proxy.pac"
        evaluator = MagicMock()
        prefs = DictPreferenceStore({"network.proxy.type": 2, "network.proxy.autoconfig_url": url})
        provider = FirefoxProxyProvider(prefs, pac_evaluator=evaluator)
        assert provider.strategy == PacStrategy(url=url)
        assert isinstance(provider.provider, PacBasedProxyProvider)
        assert provider.provider.url == url

    @pytest.mark.parametrize("platform, expected", [
        (OperatingSystem.WINDOWS, WindowsProxyProvider),
        (OperatingSystem.MAC, MacProxyProvider),
        (OperatingSystem.LINUX, LinuxProxyProvider),
    ])
    def test_system(self, platform, expected):
        prefs = DictPreferenceStore({"network.proxy.type": 5})
        provider = FirefoxProxyProvider(prefs, platform_detector=detector(platform))
        assert provider.strategy == SystemStrategy(platform=platform)
        assert type(provider.provider) is expected

    def test_default_is_system(self):
        provider = FirefoxProxyProvider(DictPreferenceStore(), platform_detector=detector(OperatingSystem.LINUX))
        assert isinstance(provider.provider, LinuxProxyProvider)

    def test_custom_system_provider(self):
        custom = MagicMock()
        provider = FirefoxProxyProvider(
            DictPreferenceStore(),
            platform_detector=detector(OperatingSystem.LINUX),
            system_providers={OperatingSystem.LINUX: lambda: custom},
        )
        assert provider.provider is custom

class TestConstructionFailures:
    def test_unsupported_type(self):
        with pytest.raises(ConfigurationError) as exc:
            FirefoxProxyProvider(DictPreferenceStore({"network.proxy.type": 4}))
        assert "'4'" in str(exc.value)

    def test_unsupported_platform(self):
        with pytest.raises(UnsupportedPlatformError) as exc:
            FirefoxProxyProvider(DictPreferenceStore(), platform_detector=detector(OperatingSystem.OTHER))
        assert "other" in str(exc.value)

    def test_malformed_pac_url(self):
        prefs = DictPreferenceStore({"network.proxy.type": 2, "network.proxy.autoconfig_url": "::not a url::"})
        with pytest.raises(ConfigurationError):
            FirefoxProxyProvider(prefs)

class TestSelect:
    def make(self, delegate):
        return FirefoxProxyProvider(
            DictPreferenceStore({"network.proxy.type": 5}),
            platform_detector=detector(OperatingSystem.LINUX),
            system_providers={OperatingSystem.LINUX: lambda: delegate},
        )

    def test_delegates_to_same_instance(self):
        """Every call goes to the provider bound at construction."""
        delegate = MagicMock()
        delegate.select.return_value = [NO_PROXY]
        provider = self.make(delegate)

        first = provider.select("http://example.org/")
        bound = provider.provider
        second = provider.select("http://example.org/")

        assert first == second == [NO_PROXY]
        assert provider.provider is bound is delegate
        assert delegate.select.call_count == 2
        delegate.select.assert_called_with("http://example.org/")

    def test_preferences_read_once(self):
        prefs = MagicMock(wraps=DictPreferenceStore({"network.proxy.type": 0}))
        provider = FirefoxProxyProvider(prefs)
        calls = len(prefs.method_calls)
        provider.select("http://example.org/")
        provider.select("https://example.org/")
        assert len(prefs.method_calls) == calls

    def test_propagates_delegate_errors(self):
        delegate = MagicMock()
        error = ProxyResolutionError("system settings unavailable")
        delegate.select.side_effect = error
        provider = self.make(delegate)

        with pytest.raises(ProxyResolutionError) as exc:
            provider.select("http://example.org/")
        assert exc.value is error

class TestBoundConfiguration:
    def make(self):
        prefs = DictPreferenceStore({
            "network.proxy.type": 1,
            "network.proxy.http": "proxy",
            "network.proxy.http_port": 3128,
        })
        return FirefoxProxyProvider(prefs)

    def test_rejects_mutation(self):
        """The configuration bound at construction cannot be re-pointed."""
        provider = self.make()
        with pytest.raises(ValidationError):
            provider.strategy.configuration.http_host = "other"
        with pytest.raises(ValidationError):
            provider.strategy.configuration.bypass_local = False

        provider.strategy.configuration.with_bypass_pattern("example.org")

        assert provider.select("http://example.org/") == [
            ProxyEndpoint(kind=ProxyKind.HTTP, host="proxy", port=3128)
        ]

    def test_strategy_hashable(self):
        provider = self.make()
        assert hash(provider.strategy) == hash(self.make().strategy)
        assert provider.strategy == self.make().strategy
