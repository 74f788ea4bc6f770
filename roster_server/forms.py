"""Request helpers: form/query values and access to app-owned objects."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import Request
from starlette.datastructures import QueryParams, UploadFile

if TYPE_CHECKING:
    from .config import Settings
    from .state import RosterStore


def query_value(params: QueryParams, key: str) -> str:
    """First value of ``key`` in the query string, or ""."""

    values = params.getlist(key)
    return values[0] if values else ""


async def form_value(request: Request, key: str) -> str:
    """First value of form field ``key``.

    Body fields (urlencoded or multipart) take precedence over the query
    string. File uploads are not names and read as "".
    """

    form = await request.form()
    values = form.getlist(key)
    if values:
        value = values[0]
        return "" if isinstance(value, UploadFile) else value
    return query_value(request.query_params, key)


def get_store(request: Request) -> "RosterStore":
    return request.app.state.store


def get_settings(request: Request) -> "Settings":
    return request.app.state.settings
