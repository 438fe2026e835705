"""
Provider backed by a proxy auto-config (PAC) script.

The script is downloaded on first use and handed to a caller-supplied
evaluator; this package does not run JavaScript itself.
"""
import logging
import threading
from pathlib import Path
from typing import Callable, List, Optional, Tuple
from urllib.parse import urlparse
from urllib.request import url2pathname

import httpx

from .base import ProxyProvider
from ..config import get_pac_timeout
from ..errors import PacDownloadError, PacEvaluationError, ProxyResolutionError
from ..types import ProxyEndpoint, ProxyKind, NO_PROXY
from ..uri_utils import parse_target_uri

logger = logging.getLogger(__name__)

# (script, url, host) -> PAC result such as "PROXY proxy:8080; DIRECT"
PacEvaluator = Callable[[str, str, str], Optional[str]]

_PAC_KEYWORDS = {
    'PROXY': (ProxyKind.HTTP, 80),
    'HTTP': (ProxyKind.HTTP, 80),
    'HTTPS': (ProxyKind.HTTP, 443),
    'SOCKS': (ProxyKind.SOCKS, 1080),
    'SOCKS4': (ProxyKind.SOCKS, 1080),
    'SOCKS5': (ProxyKind.SOCKS, 1080),
}


class PacBasedProxyProvider(ProxyProvider):
    """Resolves proxies by evaluating the PAC script found at url."""

    def __init__(
        self,
        url: str,
        evaluator: Optional[PacEvaluator] = None,
        timeout: Optional[float] = None
    ):
        self._url = url
        self._evaluator = evaluator
        self._timeout = timeout if timeout is not None else get_pac_timeout()
        self._script: Optional[str] = None
        self._lock = threading.Lock()

    @property
    def name(self) -> str:
        return "pac"

    @property
    def url(self) -> str:
        return self._url

    def select(self, uri: str) -> List[ProxyEndpoint]:
        if self._evaluator is None:
            raise PacEvaluationError(self._url, "no PAC evaluator configured")

        script = self._load_script()
        target = parse_target_uri(uri)

        try:
            result = self._evaluator(script, uri, target.host)
        except ProxyResolutionError:
            raise
        except Exception as e:
            raise PacEvaluationError(self._url, str(e))

        logger.debug(f"PAC result for {uri}: {result!r}")
        return parse_pac_result(result)

    def _load_script(self) -> str:
        with self._lock:
            if self._script is None:
                self._script = self._fetch_script()
            return self._script

    def _fetch_script(self) -> str:
        logger.debug(f"Loading PAC script from {self._url}")
        parsed = urlparse(self._url)
        try:
            if parsed.scheme == "file":
                return Path(url2pathname(parsed.path)).read_text(encoding="utf-8")

            response = httpx.get(self._url, timeout=self._timeout, follow_redirects=True)
            response.raise_for_status()
            return response.text
        except (OSError, httpx.HTTPError) as e:
            raise PacDownloadError(self._url, e)


def parse_pac_result(result: Optional[str]) -> List[ProxyEndpoint]:
    """Convert a FindProxyForURL return value into ordered proxy choices.

    Unknown or malformed entries are skipped. An empty result means DIRECT.
    """
    choices: List[ProxyEndpoint] = []

    for entry in (result or "").split(";"):
        parts = entry.split(None, 1)
        if not parts:
            continue

        keyword = parts[0].upper()
        if keyword == "DIRECT":
            choices.append(NO_PROXY)
            continue

        if keyword not in _PAC_KEYWORDS or len(parts) < 2:
            logger.debug(f"Skipping unsupported PAC entry '{entry.strip()}'")
            continue

        kind, default_port = _PAC_KEYWORDS[keyword]
        address = _split_host_port(parts[1].strip(), default_port)
        if address is None:
            logger.debug(f"Skipping PAC entry with invalid address '{entry.strip()}'")
            continue

        host, port = address
        choices.append(ProxyEndpoint(kind=kind, host=host, port=port))

    if not choices:
        return [NO_PROXY]
    return choices


def _split_host_port(address: str, default_port: int) -> Optional[Tuple[str, int]]:
    if address.startswith("["):
        host, _, rest = address[1:].partition("]")
        port_text = rest[1:] if rest.startswith(":") else ""
    elif address.count(":") == 1:
        host, _, port_text = address.partition(":")
    else:
        host, port_text = address, ""

    if not host:
        return None
    if not port_text:
        return host, default_port
    if not port_text.isdigit():
        return None
    return host, int(port_text)
