from __future__ import annotations
from typing import Iterable, Optional

from netview.net.types import Protocol
from netview.routes.types import REJECT_TYPES, DefaultGateway, RouteEntry, normalize_destination

def extract_default(routes: Iterable[RouteEntry], protocol: Protocol) -> Optional[DefaultGateway]:
    """Return the first default route of the given family, or None.

    Multi-homed hosts can have several; parse order decides, not metric,
    because not every platform reports one. Reject routes (blackhole,
    unreachable, ...) have no next hop and are passed over.
    """
    for route in routes:
        if route.protocol is not protocol or route.gateway in REJECT_TYPES:
            continue
        if normalize_destination(route.destination, protocol) == protocol.any_address:
            return DefaultGateway(route.gateway, route.interface_name, protocol)
    return None
