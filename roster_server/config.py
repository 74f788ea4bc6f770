"""Runtime settings.

Settings are built by the entrypoint from command line flags (whose defaults
may come from ``ROSTER_*`` environment variables) and handed to
``create_app``. The request handlers only ever see the ``Settings`` object.
"""

from __future__ import annotations

import os
from dataclasses import dataclass


DEFAULT_GREETING = "Hello"
DEFAULT_ADDR = "localhost:8080"
DEFAULT_LOG_LEVEL = "info"


def parse_addr(addr: str) -> tuple[str, int]:
    """Split a ``host:port`` listen address.

    ``:8080`` binds every interface; IPv6 hosts may be bracketed
    (``[::1]:8080``). Raises ValueError on a malformed address.
    """

    host, sep, port_text = addr.strip().rpartition(":")
    if not sep:
        raise ValueError(f"missing port in address {addr!r}")
    if host.startswith("[") and host.endswith("]"):
        host = host[1:-1]
    try:
        port = int(port_text)
    except ValueError:
        raise ValueError(f"invalid port in address {addr!r}") from None
    if not 0 <= port <= 65535:
        raise ValueError(f"port out of range in address {addr!r}")
    return host or "0.0.0.0", port


@dataclass(frozen=True, slots=True)
class Settings:
    greeting: str = DEFAULT_GREETING
    addr: str = DEFAULT_ADDR
    log_level: str = DEFAULT_LOG_LEVEL

    @property
    def host(self) -> str:
        return parse_addr(self.addr)[0]

    @property
    def port(self) -> int:
        return parse_addr(self.addr)[1]

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            greeting=os.getenv("ROSTER_GREETING", DEFAULT_GREETING),
            addr=os.getenv("ROSTER_ADDR", DEFAULT_ADDR),
            log_level=os.getenv("ROSTER_LOG_LEVEL", DEFAULT_LOG_LEVEL).lower(),
        )
