"""Dedicated launcher module for `python -m gui` or external callers.

Configures logging from ``config.settings``, builds the gallery window over
the built-in example catalog and runs the Qt event loop.
"""

from __future__ import annotations

import logging
import sys

from config import settings
from gallery.catalog import get_registry


def configure_logging(level: str | None = None) -> None:
    logging.basicConfig(
        level=getattr(logging, (level or settings.LOG_LEVEL), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main(argv: list[str] | None = None) -> int:  # pragma: no cover - runtime
    configure_logging()
    from PyQt6.QtWidgets import QApplication
    from gui.views.example_gallery_view import ExampleGalleryView

    app = QApplication.instance() or QApplication(argv if argv is not None else sys.argv)
    registry = get_registry()
    view = ExampleGalleryView(registry, initial=settings.DEFAULT_EXAMPLE)
    view.setWindowTitle(settings.WINDOW_TITLE)
    view.resize(960, 600)
    logging.getLogger(__name__).info(
        "Showing gallery (%d examples, current=%s)", registry.count(), view.current_name()
    )
    view.show()
    return app.exec()


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
