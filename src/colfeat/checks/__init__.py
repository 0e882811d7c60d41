# src/colfeat/checks/__init__.py
# -----------------------------------------------------------------------------
# Bootstrap for the checks subpackage.
# Concrete guards live in guards.py and are imported from there directly.
# -----------------------------------------------------------------------------
from __future__ import annotations

__all__: list[str] = []
