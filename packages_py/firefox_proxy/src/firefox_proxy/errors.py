from typing import Any


class FirefoxProxyError(Exception):
    """Base exception for Firefox proxy resolution errors."""
    pass


class ConfigurationError(FirefoxProxyError):
    """Raised when the preferences cannot be turned into a proxy strategy."""
    pass


class UnsupportedProxyTypeError(ConfigurationError):
    def __init__(self, code: Any):
        msg = f"Firefox Proxy Type '{code}' is not supported"
        super().__init__(msg)
        self.code = code


class InvalidAutoConfigUrlError(ConfigurationError):
    def __init__(self, url: str, reason: str):
        msg = f"Invalid proxy auto-config URL '{url}': {reason}"
        super().__init__(msg)
        self.url = url
        self.reason = reason


class UnsupportedPlatformError(ConfigurationError):
    def __init__(self, platform: Any, proxy_type: Any):
        msg = f"Firefox Proxy Type '{proxy_type}' is not supported for {platform}"
        super().__init__(msg)
        self.platform = platform
        self.proxy_type = proxy_type


class ProxyResolutionError(FirefoxProxyError):
    """Raised by a proxy provider when it cannot resolve proxies for a URI."""
    pass


class PacDownloadError(ProxyResolutionError):
    def __init__(self, url: str, cause: Exception):
        msg = f"Failed to load PAC script from '{url}': {str(cause)}"
        super().__init__(msg)
        self.url = url
        self.cause = cause


class PacEvaluationError(ProxyResolutionError):
    def __init__(self, url: str, reason: str):
        msg = f"Cannot evaluate PAC script from '{url}': {reason}"
        super().__init__(msg)
        self.url = url
        self.reason = reason


class InvalidTargetUriError(ProxyResolutionError):
    def __init__(self, uri: str, reason: str):
        msg = f"Invalid target URI '{uri}': {reason}"
        super().__init__(msg)
        self.uri = uri
        self.reason = reason
