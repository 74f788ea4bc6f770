"""GET /version: build metadata as escaped preformatted text."""

from __future__ import annotations

from fastapi import Request
from fastapi.responses import HTMLResponse

from .. import versioning
from ..errors import NO_BUILD_INFO, RosterError
from ..responses import html_page, render_version_page


async def get_version(request: Request) -> HTMLResponse:
    info = versioning.build_info()
    if info is None:
        raise RosterError(NO_BUILD_INFO)
    return html_page(render_version_page(info))
