"""
Data model for a manual (static) proxy configuration.
"""
from typing import Optional, Tuple
from pydantic import BaseModel, ConfigDict, Field

from .constants import DEFAULT_PROTOCOL_PORT
from .types import ProxyEndpoint, ProxyKind


class ProxyConfiguration(BaseModel):
    """Manual proxy settings as entered in the Firefox connection dialog.

    Hosts are empty strings when a protocol has no proxy. When
    use_http_for_https_and_ftp is set, HTTPS and FTP go through the HTTP proxy.
    Instances are frozen; use with_bypass_pattern() to derive a new one.
    """
    model_config = ConfigDict(frozen=True)

    http_host: str = Field(default="", description="HTTP proxy host")
    http_port: int = Field(default=DEFAULT_PROTOCOL_PORT, description="HTTP proxy port")
    https_host: str = Field(default="", description="HTTPS (SSL) proxy host")
    https_port: int = Field(default=DEFAULT_PROTOCOL_PORT, description="HTTPS (SSL) proxy port")
    ftp_host: str = Field(default="", description="FTP proxy host")
    ftp_port: int = Field(default=DEFAULT_PROTOCOL_PORT, description="FTP proxy port")
    socks_host: str = Field(default="", description="SOCKS proxy host")
    socks_port: int = Field(default=DEFAULT_PROTOCOL_PORT, description="SOCKS proxy port")
    use_http_for_https_and_ftp: bool = Field(default=False, description="Reuse the HTTP proxy for HTTPS and FTP")
    use_http_for_socks: bool = Field(default=False, description="Use the HTTP proxy for socket connections without a SOCKS proxy")
    bypass_local: bool = Field(default=True, description="Never proxy loopback hosts")
    bypass_list: Tuple[str, ...] = Field(default=(), description="Host patterns that are never proxied")

    def with_bypass_pattern(self, pattern: str) -> "ProxyConfiguration":
        return self.model_copy(update={"bypass_list": self.bypass_list + (pattern,)})

    def get_http_address(self) -> Optional[ProxyEndpoint]:
        return _endpoint(ProxyKind.HTTP, self.http_host, self.http_port)

    def get_https_address(self) -> Optional[ProxyEndpoint]:
        if self.use_http_for_https_and_ftp:
            return self.get_http_address()
        return _endpoint(ProxyKind.HTTP, self.https_host, self.https_port)

    def get_ftp_address(self) -> Optional[ProxyEndpoint]:
        if self.use_http_for_https_and_ftp:
            return self.get_http_address()
        return _endpoint(ProxyKind.HTTP, self.ftp_host, self.ftp_port)

    def get_socks_address(self) -> Optional[ProxyEndpoint]:
        return _endpoint(ProxyKind.SOCKS, self.socks_host, self.socks_port)


def _endpoint(kind: ProxyKind, host: str, port: int) -> Optional[ProxyEndpoint]:
    host = (host or "").strip()
    if not host:
        return None
    return ProxyEndpoint(kind=kind, host=host, port=port)
