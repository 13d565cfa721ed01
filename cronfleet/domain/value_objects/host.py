"""
Host Value Object

Architectural Intent:
- Immutable value object representing a deployment target host
- Carries optional connection attributes (user, port) handed to the transport unchanged
- Hashable so it can key a host -> roles assignment
- Supports IPv6 bracket notation in parse() (e.g., deploy@[::1]:2222)
"""

import re
from dataclasses import dataclass
from typing import Optional

# RFC 1123 labels, plus underscores for inventory keys and ssh_config aliases
_HOSTNAME_RE = re.compile(
    r"^(?!-)[A-Za-z0-9_-]{1,63}(?<!-)(\.[A-Za-z0-9_-]{1,63})*$"
)

_IPV4_RE = re.compile(
    r"^(\d{1,3})\.(\d{1,3})\.(\d{1,3})\.(\d{1,3})$"
)

_IPV6_RE = re.compile(r"^[0-9a-fA-F:]+$")


def _is_valid_hostname(host: str) -> bool:
    """Validate hostname as DNS name, IPv4, or IPv6."""
    if not host:
        return False

    m = _IPV4_RE.match(host)
    if m:
        return all(0 <= int(g) <= 255 for g in m.groups())

    if _IPV6_RE.match(host) and ":" in host:
        return True

    return bool(_HOSTNAME_RE.match(host)) and len(host) <= 253


@dataclass(frozen=True)
class Host:
    """
    Value Object representing a deployment target.

    ``user`` and ``port`` are left as None when the inventory does not
    specify them, so the transport can fall back to its own defaults.
    """
    host: str
    port: Optional[int] = None
    user: Optional[str] = None

    def __post_init__(self) -> None:
        if not _is_valid_hostname(self.host):
            raise ValueError(f"Invalid hostname: {self.host!r}")
        if self.port is not None and not (1 <= self.port <= 65535):
            raise ValueError(f"Port must be 1-65535, got {self.port}")
        if self.user is not None and not self.user:
            raise ValueError("Host user cannot be empty")

    def __str__(self) -> str:
        text = self.host if ":" not in self.host else f"[{self.host}]"
        if self.user:
            text = f"{self.user}@{text}"
        if self.port is not None:
            text = f"{text}:{self.port}"
        return text

    @staticmethod
    def parse(connection_string: str) -> "Host":
        """
        Parses 'user@host:port', 'host', or 'user@[::1]:port' into a Host.
        Parts that are not given stay None.
        """
        user: Optional[str] = None
        port: Optional[int] = None
        host = connection_string.strip()

        if "@" in host:
            user, host = host.split("@", 1)

        if host.startswith("["):
            bracket_end = host.find("]")
            if bracket_end == -1:
                raise ValueError(f"Unterminated IPv6 bracket in: {connection_string}")
            remainder = host[bracket_end + 1:]
            host = host[1:bracket_end]
            if remainder.startswith(":"):
                port = int(remainder[1:])
        elif host.count(":") == 1:
            name, _, port_text = host.partition(":")
            try:
                port = int(port_text)
                host = name
            except ValueError:
                pass

        return Host(host=host, port=port, user=user)
