from __future__ import annotations
import enum
import ipaddress
from dataclasses import dataclass
from typing import Optional, Union

IPAddress = Union[ipaddress.IPv4Address, ipaddress.IPv6Address]

class Protocol(enum.Enum):
    IPV4 = "IPv4"
    IPV6 = "IPv6"

    @property
    def any_address(self) -> str:
        return "0.0.0.0" if self is Protocol.IPV4 else "::"

class ProtocolFilter(enum.Enum):
    ALL = "all"
    IPV4 = "ipv4"
    IPV6 = "ipv6"

    def includes(self, protocol: Protocol) -> bool:
        if self is ProtocolFilter.ALL:
            return True
        return self.value == protocol.value.lower()

    def protocols(self) -> tuple[Protocol, ...]:
        return tuple(p for p in (Protocol.IPV4, Protocol.IPV6) if self.includes(p))

@dataclass(frozen=True)
class InterfaceAddress:
    interface_name: str
    ip_address: IPAddress
    protocol: Protocol
    netmask: Optional[str] = None

    @property
    def is_loopback(self) -> bool:
        return self.ip_address.is_loopback
