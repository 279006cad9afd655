from __future__ import annotations
import ipaddress
import logging
import socket
from typing import Iterable, Optional, Sequence

import psutil

from netview.core.errors import EnumerationError
from netview.net.types import InterfaceAddress, IPAddress, Protocol, ProtocolFilter

logger = logging.getLogger(__name__)

_FAMILIES = {
    socket.AF_INET: Protocol.IPV4,
    socket.AF_INET6: Protocol.IPV6,
}

def _parse_ip(raw: str) -> IPAddress:
    try:
        return ipaddress.ip_address(raw)
    except ValueError:
        # Interpreters without scoped-address support reject "fe80::1%en0".
        return ipaddress.ip_address(raw.split("%", 1)[0])

def enumerate_addresses() -> list[InterfaceAddress]:
    """Return one InterfaceAddress per (interface, IP address) pair, in OS order.

    Loopback and virtual interfaces are included; link-layer entries are not.
    Raises EnumerationError if the OS refuses the query or reports no addresses.
    """
    try:
        table = psutil.net_if_addrs()
    except (OSError, psutil.Error) as e:
        raise EnumerationError(f"Failed to get network interfaces: {e}") from e

    result: list[InterfaceAddress] = []
    for name, snics in table.items():
        for snic in snics:
            protocol = _FAMILIES.get(snic.family)
            if protocol is None:
                continue
            try:
                ip = _parse_ip(snic.address)
            except ValueError:
                logger.debug("skipping unparsable address %r on %s", snic.address, name)
                continue
            result.append(InterfaceAddress(name, ip, protocol, snic.netmask or None))

    if not result:
        raise EnumerationError("No network interfaces found.")
    logger.debug("enumerated %d addresses on %d interfaces", len(result), len(table))
    return result

def sort_addresses(addresses: Iterable[InterfaceAddress]) -> list[InterfaceAddress]:
    # Stable: addresses of one interface keep their enumeration order.
    return sorted(addresses, key=lambda a: a.interface_name)

def filter_addresses(addresses: Iterable[InterfaceAddress], protocol_filter: ProtocolFilter) -> list[InterfaceAddress]:
    return [a for a in addresses if protocol_filter.includes(a.protocol)]

def select_main(addresses: Sequence[InterfaceAddress], protocol_filter: ProtocolFilter) -> Optional[IPAddress]:
    """Pick the address that represents this machine.

    First non-loopback IPv4 address when the filter admits IPv4, else the first
    non-loopback IPv6 address when it admits IPv6, else None. Order decides
    ties; loopback is never returned.
    """
    for protocol in protocol_filter.protocols():
        for a in addresses:
            if a.protocol is protocol and not a.is_loopback:
                return a.ip_address
    return None
