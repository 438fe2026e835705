"""
Tests for the httpx bridge and endpoint rendering.
"""
import httpx
import pytest
from unittest.mock import MagicMock
from firefox_proxy import (
    ConfigBasedProxyProvider,
    DirectProxyProvider,
    ProxyConfiguration,
    ProxyEndpoint,
    ProxyKind,
    NO_PROXY,
    get_request_kwargs,
    create_client,
)
from firefox_proxy.dispatcher import first_proxy

@pytest.fixture
def manual_provider():
    return ConfigBasedProxyProvider(ProxyConfiguration(http_host="proxy.example.com", http_port=3128))

class TestProxyEndpoint:
    def test_urls(self):
        assert NO_PROXY.url is None
        assert ProxyEndpoint(kind=ProxyKind.HTTP, host="p", port=3128).url == "http://p:3128"
        assert ProxyEndpoint(kind=ProxyKind.SOCKS, host="s", port=1080).url == "socks5://s:1080"
        assert ProxyEndpoint(kind=ProxyKind.HTTP, host="::1", port=3128).url == "http://[::1]:3128"

    def test_str(self):
        assert str(NO_PROXY) == "DIRECT"
        assert str(ProxyEndpoint(kind=ProxyKind.SOCKS, host="s", port=1080)) == "SOCKS @ s:1080"

class TestGetRequestKwargs:
    def test_with_proxy(self, manual_provider):
        kwargs = get_request_kwargs(manual_provider, "http://example.org/", timeout=10.0)
        assert kwargs["proxy"] == "http://proxy.example.com:3128"
        assert kwargs["timeout"] == 10.0
        assert kwargs["trust_env"] is False

    def test_direct(self):
        kwargs = get_request_kwargs(DirectProxyProvider.get_instance(), "http://example.org/")
        assert "proxy" not in kwargs
        assert kwargs["timeout"] == 30.0

    def test_first_choice_only(self):
        provider = MagicMock()
        provider.select.return_value = [NO_PROXY, ProxyEndpoint(kind=ProxyKind.HTTP, host="p", port=80)]
        assert "proxy" not in get_request_kwargs(provider, "http://example.org/")

    def test_first_proxy_empty(self):
        assert first_proxy([]) is None

class TestCreateClient:
    def test_sync_client(self, manual_provider):
        client = create_client(manual_provider, "http://example.org/")
        try:
            assert isinstance(client, httpx.Client)
        finally:
            client.close()

    @pytest.mark.asyncio
    async def test_async_client(self, manual_provider):
        client = create_client(manual_provider, "http://example.org/", async_client=True)
        try:
            assert isinstance(client, httpx.AsyncClient)
        finally:
            await client.aclose()
