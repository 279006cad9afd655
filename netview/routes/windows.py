from __future__ import annotations
import logging
from typing import Optional

from netview.net.types import Protocol
from netview.routes.types import ON_LINK, RouteEntry, is_address, normalize_destination, with_prefix

logger = logging.getLogger(__name__)

def _gateway(token: str) -> str:
    return ON_LINK if token.lower() == "on-link" else token

def parse_windows(raw: str) -> list[RouteEntry]:
    """Parse `route print` output.

    Only the "Active Routes:" block of each route table is read; the
    interface list and persistent routes are skipped. IPv4 rows are
    `Destination Netmask Gateway Interface Metric`, IPv6 rows are
    `If Metric Destination Gateway`, where a long destination pushes the
    gateway onto the next line.
    """
    routes: list[RouteEntry] = []
    protocol: Optional[Protocol] = None
    active = False
    pending: Optional[list[str]] = None
    blocks = 0

    for line in raw.splitlines():
        stripped = line.strip()
        if not stripped:
            continue

        if stripped.startswith("IPv4 Route Table"):
            protocol, active, pending = Protocol.IPV4, False, None
            continue
        if stripped.startswith("IPv6 Route Table"):
            protocol, active, pending = Protocol.IPV6, False, None
            continue
        if stripped.startswith("Active Routes:"):
            active = protocol is not None
            if active:
                blocks += 1
            continue
        if stripped.startswith("Persistent Routes:"):
            active, pending = False, None
            continue
        if not active or stripped.startswith("="):
            continue
        if stripped.startswith("Network Destination") or stripped.startswith("If Metric"):
            continue

        parts = stripped.split()
        if protocol is Protocol.IPV4:
            if len(parts) == 5 and is_address(parts[0]) and is_address(parts[1]):
                routes.append(RouteEntry(
                    destination=with_prefix(parts[0], parts[1]),
                    gateway=_gateway(parts[2]),
                    flags="",
                    interface_name=parts[3],
                    protocol=protocol,
                    netmask=parts[1],
                    metric=parts[4],
                ))
                continue
        else:
            if pending is not None and len(parts) == 1:
                parts, pending = pending + parts, None
            if len(parts) == 3 and parts[0].isdigit() and parts[1].isdigit():
                pending = parts
                continue
            if len(parts) == 4 and parts[0].isdigit() and parts[1].isdigit():
                routes.append(RouteEntry(
                    destination=normalize_destination(parts[2], protocol),
                    gateway=_gateway(parts[3]),
                    flags="",
                    interface_name=parts[0],
                    protocol=protocol,
                    metric=parts[1],
                ))
                continue

        logger.debug("skipping unrecognized route line: %r", stripped)

    if not blocks:
        logger.debug("no \"Active Routes:\" block found; route print output may be localized")
    return routes
