from __future__ import annotations
import ipaddress
from dataclasses import dataclass
from typing import Optional

from netview.net.types import Protocol

# Gateway value for routes that deliver directly on the link.
ON_LINK = "on-link"
# Reject routes have no next hop; their type stands in for the gateway.
REJECT_TYPES = frozenset({"unreachable", "blackhole", "prohibit", "throw"})

@dataclass(frozen=True)
class RouteEntry:
    destination: str
    gateway: str
    flags: str
    interface_name: str
    protocol: Protocol
    netmask: Optional[str] = None
    metric: Optional[str] = None
    expire: Optional[str] = None

@dataclass(frozen=True)
class DefaultGateway:
    gateway: str
    interface_name: str
    protocol: Protocol

def normalize_destination(destination: str, protocol: Protocol) -> str:
    """Spell every default-route destination as the family's any-address."""
    if destination in ("default", "0.0.0.0/0", "::/0", "0/0"):
        return protocol.any_address
    return destination

def is_address(token: str) -> bool:
    """True for a bare IPv4/IPv6 address, scope suffix allowed."""
    try:
        ipaddress.ip_address(token.split("%", 1)[0])
    except ValueError:
        return False
    return True

def is_network(token: str) -> bool:
    """True for an address or an address/prefix."""
    try:
        ipaddress.ip_network(token.split("%", 1)[0], strict=False)
    except ValueError:
        return False
    return True

def with_prefix(destination: str, netmask: str) -> str:
    """Append the prefix length to a zero destination whose netmask is not zero.

    Keeps split routes such as 0.0.0.0/128.0.0.0 from passing as default routes.
    """
    if destination != "0.0.0.0" or netmask == "0.0.0.0":
        return destination
    try:
        prefix = ipaddress.ip_network(f"{destination}/{netmask}").prefixlen
    except ValueError:
        return destination
    return f"{destination}/{prefix}"
