"""Module entrypoint for the roster server.

Usage:
  python -m roster_server [-g GREETING] [-addr HOST:PORT] [--log-level LEVEL]

Flag defaults may be overridden with ROSTER_GREETING, ROSTER_ADDR and
ROSTER_LOG_LEVEL. Positional arguments are rejected.
"""

from __future__ import annotations

import argparse
import logging
from typing import Sequence

import uvicorn

from .config import Settings, parse_addr
from .logging_config import setup_logging
from .server import create_app


log = logging.getLogger("roster_server")

LOG_LEVELS = ["critical", "error", "warning", "info", "debug", "trace"]


def _addr(value: str) -> str:
    try:
        parse_addr(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from None
    return value


def build_parser(defaults: Settings | None = None) -> argparse.ArgumentParser:
    defaults = defaults if defaults is not None else Settings.from_env()
    parser = argparse.ArgumentParser(prog="roster-server", description="Serve the mahasiswa roster over HTTP.")
    parser.add_argument("-g", "--greeting", default=defaults.greeting, metavar="greeting", help="greet with `greeting`")
    parser.add_argument("-addr", "--addr", default=defaults.addr, type=_addr, help="address to serve")
    parser.add_argument("--log-level", default=defaults.log_level, type=str.lower, choices=LOG_LEVELS, help="log level")
    return parser


def parse_settings(argv: Sequence[str] | None = None, defaults: Settings | None = None) -> Settings:
    """Parse command line flags; exits with status 2 on bad usage."""

    args = build_parser(defaults).parse_args(argv)
    return Settings(greeting=args.greeting, addr=args.addr, log_level=args.log_level)


def main(argv: Sequence[str] | None = None) -> None:
    settings = parse_settings(argv)
    setup_logging(settings.log_level)

    log.info("serving http://%s", settings.addr)
    uvicorn.run(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level,
    )


if __name__ == "__main__":
    main()
