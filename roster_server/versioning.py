"""Build metadata for the version page.

The information comes from the installed distribution's metadata. When the
package runs from a source tree that was never installed, there is none.

Output format, one tab-separated record per line:
  path  <import package>
  mod   <distribution>  <version>
  dep   <requirement>   <installed version>
"""

from __future__ import annotations

import re
from importlib import metadata


PACKAGE = __package__ or "roster_server"
DISTRIBUTION = "roster-server"

_REQ_NAME = re.compile(r"^\s*([A-Za-z0-9][A-Za-z0-9._-]*)")


def _requirement_name(requirement: str) -> str | None:
    m = _REQ_NAME.match(requirement)
    return m.group(1) if m else None


def _installed_version(name: str) -> str:
    try:
        return metadata.version(name)
    except metadata.PackageNotFoundError:
        return "(devel)"


def build_info(distribution: str = DISTRIBUTION) -> str | None:
    """Return the build metadata text, or None when it is not available."""

    try:
        dist = metadata.distribution(distribution)
    except metadata.PackageNotFoundError:
        return None

    lines = [
        f"path\t{PACKAGE}",
        f"mod\t{distribution}\t{dist.version}",
    ]
    for requirement in dist.requires or []:
        # Optional extras (tests, tooling) are not part of the running build.
        if "extra ==" in requirement:
            continue
        name = _requirement_name(requirement)
        if name is None:
            continue
        lines.append(f"dep\t{name}\t{_installed_version(name)}")
    return "\n".join(lines)
