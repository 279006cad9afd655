from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Optional, Sequence

from netview.core.config import Options
from netview.core.runner import Runner
from netview.net.interfaces import enumerate_addresses, filter_addresses, select_main, sort_addresses
from netview.net.platform import Platform, detect_platform
from netview.net.types import InterfaceAddress, IPAddress, Protocol, ProtocolFilter
from netview.routes.gateway import extract_default
from netview.routes.parse import parse
from netview.routes.retrieve import retrieve
from netview.routes.types import DefaultGateway, RouteEntry

@dataclass(frozen=True)
class Report:
    protocol_filter: ProtocolFilter
    addresses: Sequence[InterfaceAddress]
    total_addresses: int
    main_address: Optional[IPAddress]
    routes: Sequence[RouteEntry]
    gateways: dict[Protocol, Optional[DefaultGateway]]

    def routes_for(self, protocol: Protocol) -> list[RouteEntry]:
        return [r for r in self.routes if r.protocol is protocol]

def main_address(options: Options,
                 enumerator: Optional[Callable[[], list[InterfaceAddress]]] = None) -> Optional[IPAddress]:
    return select_main((enumerator or enumerate_addresses)(), options.protocol_filter)

def collect(options: Options,
            platform: Optional[Platform] = None,
            runner: Optional[Runner] = None,
            enumerator: Optional[Callable[[], list[InterfaceAddress]]] = None) -> Report:
    """Gather every section before anything is printed.

    Any EnumerationError, RetrievalError or ParseError propagates unchanged.
    """
    pf = options.protocol_filter
    addresses = (enumerator or enumerate_addresses)()
    main = select_main(addresses, pf)
    shown = filter_addresses(sort_addresses(addresses), pf)

    plat = platform or detect_platform()
    raw = retrieve(plat, runner, timeout=options.timeout)
    routes = [r for r in parse(raw, plat) if pf.includes(r.protocol)]
    gateways = {p: extract_default(routes, p) for p in pf.protocols()}

    return Report(pf, shown, len(addresses), main, routes, gateways)
