"""Request handlers, registered by ``roster_server.server``."""

from __future__ import annotations

from .roster import add_name, delete_name, list_names
from .version import get_version

__all__ = ["add_name", "delete_name", "get_version", "list_names"]
