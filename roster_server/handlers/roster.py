"""Roster handlers.

Implements:
- any method, any unmatched path: list page, filtered by ``?search=``
- POST /add: insert a name, redirect to /
- POST /delete: remove a name (missing names are fine), redirect to /

Request parsing happens on the event loop; each store access runs in the
worker thread pool, so the roster lock is never held across an ``await``.
"""

from __future__ import annotations

from fastapi import Request
from fastapi.responses import HTMLResponse, RedirectResponse
from starlette.concurrency import run_in_threadpool

from ..errors import METHOD_NOT_ALLOWED, NAME_REQUIRED, RosterError
from ..forms import form_value, get_settings, get_store, query_value
from ..responses import html_page, name_from_path, redirect_home, render_roster_page
from ..state import RosterStore


def _render_list(store: RosterStore, *, greeting: str, name: str, search: str) -> str:
    with store.matching(search) as names:
        return render_roster_page(greeting=greeting, name=name, names=names)


async def _required_name(request: Request) -> str:
    if request.method != "POST":
        raise RosterError(METHOD_NOT_ALLOWED)
    name = await form_value(request, "name")
    if not name:
        raise RosterError(NAME_REQUIRED)
    return name


async def list_names(request: Request) -> HTMLResponse:
    settings = get_settings(request)
    body = await run_in_threadpool(
        _render_list,
        get_store(request),
        greeting=settings.greeting,
        name=name_from_path(request.scope["path"]),
        search=query_value(request.query_params, "search"),
    )
    return html_page(body)


async def add_name(request: Request) -> RedirectResponse:
    name = await _required_name(request)
    await run_in_threadpool(get_store(request).add, name)
    return redirect_home()


async def delete_name(request: Request) -> RedirectResponse:
    name = await _required_name(request)
    await run_in_threadpool(get_store(request).discard, name)
    return redirect_home()
