"""Gallery GUI public API.

Small surface for the launcher and tests. Importing this package does not
create a QApplication and does not import PyQt6; the view lives in
``gui.views`` and is imported on demand.
"""

from __future__ import annotations

__all__ = ["launch_gallery"]


def launch_gallery(argv: list[str] | None = None) -> int:  # pragma: no cover - runtime delegation
    from .launcher import main

    return main(argv)
