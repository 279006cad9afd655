from __future__ import annotations
import enum
import platform as _platform
from typing import Optional

from netview.core.errors import RetrievalError

class Platform(enum.Enum):
    BSD = "bsd"          # macOS and the BSDs: `netstat -nr`
    LINUX = "linux"      # iproute2: `ip route`
    WINDOWS = "windows"  # `route print`

_SYSTEMS = {
    "Darwin": Platform.BSD,
    "FreeBSD": Platform.BSD,
    "OpenBSD": Platform.BSD,
    "NetBSD": Platform.BSD,
    "DragonFly": Platform.BSD,
    "Linux": Platform.LINUX,
    "Windows": Platform.WINDOWS,
}

def detect_platform(system: Optional[str] = None) -> Platform:
    """Map platform.system() (or an explicit system name) to a route format tag."""
    name = system if system is not None else _platform.system()
    try:
        return _SYSTEMS[name]
    except KeyError:
        raise RetrievalError(f"Unsupported operating system: {name or 'unknown'}") from None
