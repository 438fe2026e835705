"""
Provider that never uses a proxy.
"""
from typing import List, Optional
from .base import ProxyProvider
from ..types import ProxyEndpoint, NO_PROXY

class DirectProxyProvider(ProxyProvider):
    """Always answers with a direct connection."""

    _instance: Optional["DirectProxyProvider"] = None

    @classmethod
    def get_instance(cls) -> "DirectProxyProvider":
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @property
    def name(self) -> str:
        return "direct"

    def select(self, uri: str) -> List[ProxyEndpoint]:
        return [NO_PROXY]
