"""Response builders.

The list page is plain string templating: a fixed header with the greeting and
the add/search forms, one item per matching name, and a fixed footer. Every
piece of user-supplied text is passed through ``html.escape`` before it is
embedded.
"""

from __future__ import annotations

import html
from typing import Iterable

from fastapi.responses import HTMLResponse, PlainTextResponse, RedirectResponse

from .errors import RosterError


DEFAULT_NAME = "IDX"

PAGE_HEADER = """<!DOCTYPE html>
<html>
<head>
	<title>Hello Server</title>
	<link rel="stylesheet" href="https://maxcdn.bootstrapcdn.com/bootstrap/4.5.2/css/bootstrap.min.css">
</head>
<body>
	<div class="container mt-5">
		<h1>{greeting}, {name}!</h1>
		<div class="mt-4">
			<form action="/add" method="post">
				<div class="form-group row">
					<label for="name" class="col-sm-2 col-form-label">Nama Mahasiswa:</label>
					<div class="col-sm-8">
						<input type="text" id="name" name="name" class="form-control">
					</div>
					<div class="col-sm-2">
						<button type="submit" class="btn btn-primary">Tambah</button>
					</div>
				</div>
			</form>
		</div>
		<div class="mt-4">
			<form action="/" method="get">
				<div class="form-group row">
					<label for="search" class="col-sm-2 col-form-label">Cari Mahasiswa:</label>
					<div class="col-sm-8">
						<input type="text" id="search" name="search" class="form-control">
					</div>
					<div class="col-sm-2">
						<button type="submit" class="btn btn-primary">Cari</button>
					</div>
				</div>
			</form>
		</div>
		<ul class="list-group mt-4">
"""

PAGE_ITEM = """
			<li class="list-group-item d-flex justify-content-between align-items-center">
				{name}
				<form action="/delete" method="post">
					<input type="hidden" name="name" value="{name}">
					<button type="submit" class="btn btn-danger btn-sm">Delete</button>
				</form>
			</li>
"""

PAGE_FOOTER = """</ul>
	</div>
</body>
</html>"""


def name_from_path(path: str) -> str:
    """Greeting target: the URL path without surrounding slashes."""

    name = path.strip("/")
    return name or DEFAULT_NAME


def render_roster_page(*, greeting: str, name: str, names: Iterable[str]) -> str:
    parts = [PAGE_HEADER.format(greeting=html.escape(greeting), name=html.escape(name))]
    for entry in names:
        parts.append(PAGE_ITEM.format(name=html.escape(entry)))
    parts.append(PAGE_FOOTER)
    return "".join(parts)


def render_version_page(info: str) -> str:
    return f"<!DOCTYPE html>\n<pre>\n{html.escape(info)}\n"


def html_page(body: str) -> HTMLResponse:
    return HTMLResponse(body, status_code=200)


def redirect_home() -> RedirectResponse:
    return RedirectResponse("/", status_code=303)


def plain_error(exc: RosterError) -> PlainTextResponse:
    """Plain-text error body terminated by a newline."""

    return PlainTextResponse(
        exc.message + "\n",
        status_code=exc.status_code,
        headers={"X-Content-Type-Options": "nosniff"},
    )
