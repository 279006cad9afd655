from __future__ import annotations
import logging
from typing import Callable

from netview.core.errors import ParseError
from netview.net.platform import Platform
from netview.routes.bsd import parse_bsd
from netview.routes.linux import parse_linux
from netview.routes.types import RouteEntry
from netview.routes.windows import parse_windows

logger = logging.getLogger(__name__)

PARSERS: dict[Platform, Callable[[str], list[RouteEntry]]] = {
    Platform.BSD: parse_bsd,
    Platform.LINUX: parse_linux,
    Platform.WINDOWS: parse_windows,
}

def parse(raw: str, platform: Platform) -> list[RouteEntry]:
    """Normalize raw route command output into RouteEntry rows.

    Empty output raises ParseError. Otherwise lines that fit none of the
    platform's layouts are dropped and the rest are returned in input order.
    """
    if not raw or not raw.strip():
        raise ParseError("Route command produced no output")
    routes = PARSERS[platform](raw)
    logger.debug("parsed %d routes from %s output", len(routes), platform.value)
    return routes
