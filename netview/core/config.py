from __future__ import annotations
import os
from typing import Mapping, Optional
from pydantic import BaseModel, field_validator

from netview.net.types import ProtocolFilter

ALLOWED_PROTOCOLS = tuple(p.value for p in ProtocolFilter)
DEFAULT_PROTOCOL = "ipv4"
DEFAULT_TIMEOUT = 10.0
MAX_TIMEOUT = 300.0

class Options(BaseModel):
    protocol: str = DEFAULT_PROTOCOL
    only_ip: bool = False
    # Seconds to wait for the route command before giving up.
    timeout: float = DEFAULT_TIMEOUT
    color: bool = True
    verbose: bool = False

    @field_validator('protocol')
    @classmethod
    def valid_protocol(cls, v):
        v = v.strip().lower()
        if v not in ALLOWED_PROTOCOLS:
            raise ValueError(f'Invalid protocol: {v} (choose from {", ".join(ALLOWED_PROTOCOLS)})')
        return v

    @field_validator('timeout')
    @classmethod
    def timeout_in_range(cls, v):
        if not (0 < v <= MAX_TIMEOUT):
            raise ValueError(f'Timeout must be greater than 0 and at most {MAX_TIMEOUT:g} seconds')
        return v

    @property
    def protocol_filter(self) -> ProtocolFilter:
        return ProtocolFilter(self.protocol)

def env_defaults(environ: Optional[Mapping[str, str]] = None) -> dict:
    """Defaults taken from NETVIEW_* variables and NO_COLOR; CLI flags override them."""
    env = os.environ if environ is None else environ
    defaults: dict = {}
    if env.get("NETVIEW_PROTOCOL"):
        defaults["protocol"] = env["NETVIEW_PROTOCOL"]
    if env.get("NETVIEW_TIMEOUT"):
        defaults["timeout"] = env["NETVIEW_TIMEOUT"]
    if "NO_COLOR" in env:
        defaults["color"] = False
    return defaults
