"""Roster server: an in-memory name roster served as HTML forms.

The roster is kept in process memory only; restarting the server empties it.
"""

from __future__ import annotations

__all__ = ["__version__"]
__version__ = "0.1.0"
