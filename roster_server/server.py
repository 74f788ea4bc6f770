"""HTTP application for the roster server.

Routing:
  - /version, /add and /delete are matched exactly, for every method, so the
    handlers themselves decide on 405 responses.
  - Everything else falls through to the list page, whatever the path.

Each application owns its own ``RosterStore``; two apps never share a roster.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse

from . import __version__
from .config import Settings
from .errors import RosterError
from .handlers import add_name, delete_name, get_version, list_names
from .responses import plain_error
from .state import RosterStore


log = logging.getLogger("roster_server.server")

ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


def create_app(settings: Settings | None = None, store: RosterStore | None = None) -> FastAPI:
    app = FastAPI(
        title="Roster Server",
        version=__version__,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )

    app.state.settings = settings if settings is not None else Settings()  # type: ignore[attr-defined]
    app.state.store = store if store is not None else RosterStore()  # type: ignore[attr-defined]

    @app.exception_handler(RosterError)
    async def _roster_error(request: Request, exc: RosterError) -> PlainTextResponse:
        log.debug("%s %s -> %s %s", request.method, request.url.path, exc.status_code, exc.error.code)
        return plain_error(exc)

    # Exact routes first; the catch-all must stay last.
    app.add_route("/version", get_version, methods=ALL_METHODS)
    app.add_route("/add", add_name, methods=ALL_METHODS)
    app.add_route("/delete", delete_name, methods=ALL_METHODS)
    app.add_route("/{full_path:path}", list_names, methods=ALL_METHODS)

    return app


app = create_app()
