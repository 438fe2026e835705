from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ProxyKind(str, Enum):
    DIRECT = 'direct'
    HTTP = 'http'
    SOCKS = 'socks'


@dataclass(frozen=True)
class ProxyEndpoint:
    """A single proxy choice returned by a provider."""
    kind: ProxyKind
    host: Optional[str] = None
    port: Optional[int] = None

    @property
    def is_direct(self) -> bool:
        return self.kind == ProxyKind.DIRECT

    @property
    def url(self) -> Optional[str]:
        """Proxy URL usable by HTTP clients, or None for a direct connection."""
        if self.is_direct:
            return None
        scheme = "socks5" if self.kind == ProxyKind.SOCKS else "http"
        host = f"[{self.host}]" if self.host and ":" in self.host else self.host
        return f"{scheme}://{host}:{self.port}"

    def __str__(self) -> str:
        if self.is_direct:
            return "DIRECT"
        return f"{self.kind.value.upper()} @ {self.host}:{self.port}"


NO_PROXY = ProxyEndpoint(kind=ProxyKind.DIRECT)
