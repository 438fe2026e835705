"""
Build httpx clients that route a request the way a provider decides.
"""
import logging
from typing import Any, Dict, List, Optional, Union
import httpx
from .providers import ProxyProvider
from .types import ProxyEndpoint

logger = logging.getLogger(__name__)

def first_proxy(choices: List[ProxyEndpoint]) -> Optional[ProxyEndpoint]:
    """First choice, or None when it is a direct connection."""
    if not choices or choices[0].is_direct:
        return None
    return choices[0]

def get_request_kwargs(
    provider: ProxyProvider,
    uri: str,
    timeout: float = 30.0
) -> Dict[str, Any]:
    """Get httpx kwargs for requesting uri."""
    kwargs: Dict[str, Any] = {
        "timeout": timeout,
        # Proxy selection is ours, do not let httpx read *_PROXY env vars
        "trust_env": False,
    }

    endpoint = first_proxy(provider.select(uri))
    if endpoint is not None:
        kwargs["proxy"] = endpoint.url

    logger.debug(f"Request kwargs for {uri}: {kwargs}")
    return kwargs

def create_client(
    provider: ProxyProvider,
    uri: str,
    async_client: bool = False,
    timeout: float = 30.0
) -> Union[httpx.Client, httpx.AsyncClient]:
    """Create an httpx client configured for requesting uri."""
    kwargs = get_request_kwargs(provider, uri, timeout=timeout)
    if async_client:
        return httpx.AsyncClient(**kwargs)
    return httpx.Client(**kwargs)
