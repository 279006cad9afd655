from __future__ import annotations
import sys
from typing import Optional, TextIO

from colorama import Fore, Style

from netview.net.types import IPAddress
from netview.report import Report
from netview.routes.types import RouteEntry

SEPARATOR = "============================================"

class Painter:
    def __init__(self, color: bool = True):
        self.color = color

    def __call__(self, text: str, *codes: str) -> str:
        if not self.color or not codes:
            return text
        return f"{''.join(codes)}{text}{Style.RESET_ALL}"

def _banner(title: str) -> str:
    side = max(len(SEPARATOR) - len(title) - 2, 2) // 2
    return f"{'=' * side} {title} {'=' * side}"

def render_main_ip(address: IPAddress, out: Optional[TextIO] = None) -> None:
    print(address, file=out or sys.stdout)

def render_interfaces(report: Report, paint: Painter, out: TextIO) -> None:
    print(paint("Local Network Interfaces and IP Addresses", Fore.GREEN, Style.BRIGHT), file=out)
    main = str(report.main_address) if report.main_address is not None else "none"
    print(f"{paint('Main IP address:', Fore.BLUE, Style.BRIGHT)} {paint(main, Fore.YELLOW)}", file=out)

    width = max((len(a.interface_name) for a in report.addresses), default=10)
    for a in report.addresses:
        info = f"{a.protocol.value}: {a.ip_address}"
        if a.netmask:
            info += f"/{a.netmask}"
        print(f"{paint(a.interface_name.ljust(width), Fore.BLUE, Style.BRIGHT)}: {paint(info, Fore.YELLOW)}", file=out)

    print(paint(SEPARATOR, Fore.GREEN), file=out)
    print(f"Found {report.total_addresses} network interfaces (displaying {len(report.addresses)})", file=out)

def _route_columns(routes: list[RouteEntry]) -> list[tuple[str, list[str]]]:
    columns = [
        ("Destination", [r.destination for r in routes]),
        ("Gateway", [r.gateway for r in routes]),
        ("Flags", [r.flags for r in routes]),
        ("Netif", [r.interface_name for r in routes]),
    ]
    if any(r.metric for r in routes):
        columns.append(("Metric", [r.metric or "" for r in routes]))
    if any(r.expire for r in routes):
        columns.append(("Expire", [r.expire or "" for r in routes]))
    return columns

def render_routes(report: Report, paint: Painter, out: TextIO) -> None:
    print(paint("\nLocal Network Routes Table", Fore.GREEN, Style.BRIGHT), file=out)
    for protocol in report.protocol_filter.protocols():
        name = protocol.value
        routes = report.routes_for(protocol)
        print(paint(_banner(f"{name} Routes"), Fore.GREEN), file=out)

        columns = _route_columns(routes)
        widths = [max([len(title)] + [len(v) for v in values]) for title, values in columns]
        print("  ".join(paint(title.ljust(w), Fore.BLUE, Style.BRIGHT) for (title, _), w in zip(columns, widths)).rstrip(), file=out)
        for i in range(len(routes)):
            cells = []
            for n, ((_, values), w) in enumerate(zip(columns, widths)):
                cell = values[i].ljust(w)
                cells.append(paint(cell, Fore.YELLOW) if n == 0 else cell)
            print("  ".join(cells).rstrip(), file=out)

        print(paint(_banner(f"{name} Default Gateway"), Fore.GREEN), file=out)
        gw = report.gateways.get(protocol)
        label = paint(f"{name} Default Gateway: ", Fore.BLUE, Style.BRIGHT)
        if gw is None:
            print(f"{label}none\n", file=out)
        elif gw.interface_name:
            print(f"{label}{paint(gw.gateway, Fore.YELLOW)} via {paint(gw.interface_name, Style.BRIGHT)}\n", file=out)
        else:
            print(f"{label}{paint(gw.gateway, Fore.YELLOW)}\n", file=out)

def render_report(report: Report, color: bool = True, out: Optional[TextIO] = None) -> None:
    out = out or sys.stdout
    paint = Painter(color)
    render_interfaces(report, paint, out)
    print(file=out)
    render_routes(report, paint, out)
