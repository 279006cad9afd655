from __future__ import annotations
import argparse
import logging
import sys
from typing import Optional, Sequence

import colorama
from pydantic import ValidationError

from netview.core.config import ALLOWED_PROTOCOLS, DEFAULT_PROTOCOL, Options, env_defaults
from netview.core.errors import NetviewError
from netview.core.log import setup_logging
from netview.render import render_main_ip, render_report
from netview.report import collect, main_address

__version__ = "0.1.0"

logger = logging.getLogger("netview")

def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="netview",
        description="Display local network interfaces, IP addresses and routes.",
        add_help=True,
    )
    p.add_argument("-p", "--protocol", type=str.lower, choices=ALLOWED_PROTOCOLS, default=None,
                   help=f"Protocol to show: all, ipv4 or ipv6 (default: $NETVIEW_PROTOCOL or {DEFAULT_PROTOCOL})")
    p.add_argument("--ip", action="store_true", help="Only show the main IP address of the machine")
    p.add_argument("--timeout", type=float, default=None,
                   help="Seconds to wait for the route command (default: $NETVIEW_TIMEOUT or 10)")
    p.add_argument("--no-color", action="store_true", help="Disable colored output (also honours $NO_COLOR)")
    p.add_argument("-v", "--verbose", action="store_true", help="Log diagnostics to stderr")
    p.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")
    return p

def load_options(args: argparse.Namespace, parser: argparse.ArgumentParser) -> Options:
    values = env_defaults()
    values.setdefault("color", sys.stdout.isatty())
    if args.protocol is not None:
        values["protocol"] = args.protocol
    if args.timeout is not None:
        values["timeout"] = args.timeout
    if args.no_color:
        values["color"] = False
    values["only_ip"] = args.ip
    values["verbose"] = args.verbose
    try:
        return Options(**values)
    except ValidationError as e:
        parser.error("; ".join(err["msg"] for err in e.errors()))

def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    options = load_options(args, parser)
    setup_logging(options.verbose)
    colorama.just_fix_windows_console()

    try:
        if options.only_ip:
            ip = main_address(options)
            if ip is None:
                print("netview: error: No main IP address found", file=sys.stderr)
                return 1
            render_main_ip(ip)
            return 0

        report = collect(options)
    except NetviewError as e:
        logger.debug("%s: %s", type(e).__name__, e)
        print(f"netview: error: {e}", file=sys.stderr)
        return 1

    render_report(report, color=options.color)
    return 0

if __name__ == "__main__":
    sys.exit(main())
