from __future__ import annotations
import logging
import subprocess
from typing import Optional

from netview.core.config import DEFAULT_TIMEOUT
from netview.core.errors import RetrievalError
from netview.core.runner import Runner
from netview.net.platform import Platform

logger = logging.getLogger(__name__)

# One fixed command per platform; there is no fallback chain.
ROUTE_COMMANDS: dict[Platform, tuple[str, ...]] = {
    Platform.BSD: ("netstat", "-nr"),
    # "table all" makes iproute2 list both address families in one call.
    Platform.LINUX: ("ip", "route", "show", "table", "all"),
    Platform.WINDOWS: ("route", "print"),
}

def retrieve(platform: Platform, runner: Optional[Runner] = None, timeout: float = DEFAULT_TIMEOUT) -> str:
    """Run the platform's route-display command and return its stdout verbatim."""
    r = runner or Runner()
    cmd = ROUTE_COMMANDS[platform]
    text = " ".join(cmd)
    try:
        res = r.run(list(cmd), timeout=timeout)
    except FileNotFoundError:
        raise RetrievalError(f"Route command not found: {cmd[0]}") from None
    except subprocess.TimeoutExpired:
        raise RetrievalError(f"Route command timed out after {timeout:g}s: {text}") from None
    except OSError as e:
        raise RetrievalError(f"Error executing command {text}: {e}") from e

    if res.returncode != 0:
        detail = res.stderr.strip() or f"exit status {res.returncode}"
        raise RetrievalError(f"Error executing command {text}: {detail}")
    return res.stdout
