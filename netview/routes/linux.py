from __future__ import annotations
import dataclasses
import ipaddress
import logging
from typing import Optional

from netview.net.types import Protocol
from netview.routes.types import ON_LINK, REJECT_TYPES, RouteEntry, is_address, is_network, normalize_destination, with_prefix

logger = logging.getLogger(__name__)

ROUTE_TYPES = {
    "unicast", "local", "broadcast", "multicast", "anycast",
    "unreachable", "blackhole", "prohibit", "throw", "nat",
}
# Entries for the host's own addresses rather than forwarding routes.
SKIPPED_TYPES = {"local", "broadcast", "multicast", "anycast"}
# `ip route` keywords that take no value.
BARE_KEYWORDS = {"onlink", "linkdown", "dead", "pervasive", "offload", "trap", "rt_offload", "rt_trap", "notify"}

def _host_route(destination: str) -> bool:
    if destination == "default":
        return False
    try:
        net = ipaddress.ip_network(destination, strict=False)
    except ValueError:
        return False
    return net.prefixlen == net.max_prefixlen

def _ip_route_fields(tokens: list[str]) -> dict[str, str]:
    fields: dict[str, str] = {}
    i = 0
    while i < len(tokens):
        key = tokens[i]
        if key in BARE_KEYWORDS or i + 1 >= len(tokens):
            i += 1
            continue
        value = tokens[i + 1]
        # "via inet6 fe80::1" names the family before the address.
        if key == "via" and value in ("inet", "inet6") and i + 2 < len(tokens):
            value = tokens[i + 2]
            i += 1
        fields.setdefault(key, value)
        i += 2
    return fields

def _parse_ip_route(tokens: list[str]) -> Optional[RouteEntry]:
    rtype = None
    if tokens[0] in ROUTE_TYPES:
        rtype, tokens = tokens[0], tokens[1:]
        if rtype in SKIPPED_TYPES or not tokens:
            return None

    destination = tokens[0]
    if destination != "default" and not is_network(destination):
        return None

    fields = _ip_route_fields(tokens[1:])
    # With "table all", main-table rows carry no table key; other tables
    # (policy routing, VPN daemons, IPv6 "unspec") are not the host's routes.
    if fields.get("table", "main") != "main":
        return None
    via = fields.get("via")
    if ":" in destination or (via and ":" in via) or "pref" in fields:
        protocol = Protocol.IPV6
    else:
        protocol = Protocol.IPV4

    flags = "U"
    if via:
        flags += "G"
    if _host_route(destination):
        flags += "H"

    if via:
        gateway = via
    elif rtype in REJECT_TYPES:
        gateway = rtype
    else:
        gateway = ON_LINK

    return RouteEntry(
        destination=normalize_destination(destination, protocol),
        gateway=gateway,
        flags=flags,
        interface_name=fields.get("dev", ""),
        protocol=protocol,
        metric=fields.get("metric"),
    )

def _parse_columns(tokens: list[str], metric_column: Optional[int]) -> Optional[RouteEntry]:
    # route -n:           Destination Gateway Genmask Flags Metric Ref Use Iface
    # netstat -rn:        Destination Gateway Genmask Flags MSS Window irtt Iface
    # route -n -A inet6:  Destination Next Hop Flag Met Ref Use If
    if (len(tokens) == 8 and is_address(tokens[0]) and is_address(tokens[2])
            and (is_address(tokens[1]) or tokens[1] == "*")):
        return RouteEntry(
            destination=with_prefix(tokens[0], tokens[2]),
            gateway=tokens[1],
            flags=tokens[3],
            interface_name=tokens[-1],
            protocol=Protocol.IPV4,
            netmask=tokens[2],
            metric=tokens[metric_column] if metric_column is not None else None,
        )
    if len(tokens) == 7 and ":" in tokens[0] and is_network(tokens[0]) and is_address(tokens[1]):
        return RouteEntry(
            destination=normalize_destination(tokens[0], Protocol.IPV6),
            gateway=tokens[1],
            flags=tokens[2],
            interface_name=tokens[-1],
            protocol=Protocol.IPV6,
            metric=tokens[3],
        )
    return None

def parse_linux(raw: str) -> list[RouteEntry]:
    """Parse Linux routing output.

    Handles iproute2 `ip route` lines as well as the fixed-column tables of
    `route -n` and `netstat -rn`, deciding per line which shape applies.
    """
    routes: list[RouteEntry] = []
    # Without a header, columns are assumed to be route -n's (Metric at index 4).
    metric_column: Optional[int] = 4
    multipath_open = False

    for line in raw.splitlines():
        stripped = line.strip()
        if not stripped:
            continue
        tokens = stripped.split()

        if stripped.startswith("Kernel IP"):
            continue
        if tokens[0] == "Destination":
            metric_column = tokens.index("Metric") if "Metric" in tokens else None
            continue

        if tokens[0] == "nexthop":
            # Multipath routes list their hops on following lines; the first
            # hop fills in the gateway and device of the route above it.
            if multipath_open:
                fields = _ip_route_fields(tokens[1:])
                routes[-1] = dataclasses.replace(
                    routes[-1],
                    gateway=fields.get("via", routes[-1].gateway),
                    interface_name=fields.get("dev", ""),
                    flags="UG" if "via" in fields else routes[-1].flags,
                )
                multipath_open = False
            continue
        multipath_open = False

        route = _parse_columns(tokens, metric_column)
        if route is None:
            route = _parse_ip_route(tokens)
            if route is not None and route.gateway == ON_LINK and not route.interface_name:
                multipath_open = True
        if route is None:
            logger.debug("skipping unrecognized route line: %r", stripped)
            continue
        routes.append(route)

    return routes
