"""
URI and host helpers shared by the providers.
"""
import fnmatch
import ipaddress
from dataclasses import dataclass
from typing import Optional
from urllib.parse import urlparse

from .errors import InvalidTargetUriError

DEFAULT_PORTS = {
    'http': 80,
    'https': 443,
    'ftp': 21,
    'socks': 1080,
    'socket': 1080,
}


@dataclass
class TargetUri:
    scheme: str
    host: str
    port: Optional[int]


def parse_target_uri(uri: str) -> TargetUri:
    """Split a target URI into lower-cased scheme, host and effective port.

    Raises:
        InvalidTargetUriError: the URI cannot be parsed, e.g. an unclosed IPv6 bracket.
    """
    try:
        parsed = urlparse(uri)
        hostname = parsed.hostname
    except ValueError as e:
        raise InvalidTargetUriError(uri, str(e))
    scheme = (parsed.scheme or "").lower()
    host = (hostname or "").rstrip(".")
    try:
        port = parsed.port
    except ValueError:
        port = None
    if port is None:
        port = DEFAULT_PORTS.get(scheme)
    return TargetUri(scheme=scheme, host=host, port=port)


def is_local_host(host: str) -> bool:
    """True for localhost names and loopback addresses."""
    if not host:
        return False
    host = host.lower().rstrip(".")
    if host == "localhost" or host.endswith(".localhost"):
        return True
    try:
        return ipaddress.ip_address(host).is_loopback
    except ValueError:
        return False


def matches_bypass_pattern(host: str, port: Optional[int], pattern: str) -> bool:
    """Match a host against one network.proxy.no_proxies_on entry.

    Supported forms: exact host, domain suffix (".example.com" or
    "example.com"), glob ("*.example.com"), CIDR ("10.0.0.0/8"), "<local>"
    for dotless host names, each optionally followed by ":port".
    """
    pattern = pattern.strip().lower()
    host = (host or "").lower()
    if not pattern or not host:
        return False

    if "://" in pattern:
        pattern = pattern.split("://", 1)[1]

    pattern_port = None
    if pattern.startswith("["):
        inner, _, rest = pattern[1:].partition("]")
        pattern = inner
        if rest.startswith(":") and rest[1:].isdigit():
            pattern_port = int(rest[1:])
    elif pattern.count(":") == 1:
        head, _, tail = pattern.partition(":")
        if tail.isdigit():
            pattern, pattern_port = head, int(tail)

    if pattern_port is not None and pattern_port != port:
        return False

    if pattern == "<local>":
        return "." not in host and ":" not in host

    if "/" in pattern:
        try:
            network = ipaddress.ip_network(pattern, strict=False)
            address = ipaddress.ip_address(host)
        except ValueError:
            return False
        return address.version == network.version and address in network

    if "*" in pattern or "?" in pattern:
        return fnmatch.fnmatchcase(host, pattern)

    if pattern.startswith("."):
        return host.endswith(pattern) or host == pattern[1:]

    return host == pattern or host.endswith("." + pattern)
