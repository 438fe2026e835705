"""
Abstract base for proxy providers.
"""
from abc import ABC, abstractmethod
from typing import List
from ..types import ProxyEndpoint

class ProxyProvider(ABC):
    """Resolves the ordered proxy choices for a URI."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Name of the provider (e.g., 'direct', 'pac')."""
        pass

    @abstractmethod
    def select(self, uri: str) -> List[ProxyEndpoint]:
        """Proxies to try for uri, in order. Never empty."""
        pass
