from __future__ import annotations
import logging
from typing import Optional

from netview.net.types import Protocol
from netview.routes.types import RouteEntry, normalize_destination

logger = logging.getLogger(__name__)

def _header_columns(header: str) -> Optional[dict[str, int]]:
    # "Destination Gateway Flags Netif Expire" or, on older systems,
    # "Destination Gateway Flags Refs Use Netif Expire".
    columns = {name: i for i, name in enumerate(header.split())}
    if "Netif" not in columns or "Gateway" not in columns or "Flags" not in columns:
        return None
    return columns

def parse_bsd(raw: str) -> list[RouteEntry]:
    """Parse `netstat -nr` output from macOS and the BSDs.

    Routes are read only inside an "Internet:" or "Internet6:" section and
    after that section's "Destination ..." header; everything else is skipped.
    """
    routes: list[RouteEntry] = []
    protocol: Optional[Protocol] = None
    columns: Optional[dict[str, int]] = None

    for line in raw.splitlines():
        stripped = line.strip()
        if not stripped:
            continue

        if stripped.startswith("Internet:"):
            protocol, columns = Protocol.IPV4, None
            continue
        if stripped.startswith("Internet6:"):
            protocol, columns = Protocol.IPV6, None
            continue

        if stripped.startswith("Destination"):
            columns = _header_columns(stripped)
            continue

        if protocol is None or columns is None:
            logger.debug("skipping line outside a route section: %r", stripped)
            continue

        parts = stripped.split()
        netif = columns["Netif"]
        if len(parts) <= netif:
            logger.debug("skipping short route line: %r", stripped)
            continue

        expire = None
        if len(parts) > netif + 1 and parts[netif + 1].isdigit():
            expire = parts[netif + 1]

        routes.append(RouteEntry(
            destination=normalize_destination(parts[columns["Destination"]], protocol),
            gateway=parts[columns["Gateway"]],
            flags=parts[columns["Flags"]],
            interface_name=parts[netif],
            protocol=protocol,
            expire=expire,
        ))

    return routes
