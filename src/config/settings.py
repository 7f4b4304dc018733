"""Global configuration and constants for the example gallery."""

from __future__ import annotations

import os
from typing import Final

DEFAULT_EXAMPLE: Final = os.environ.get("THIINGS_GALLERY_DEFAULT_EXAMPLE", "ThiingsIcons")
LOG_LEVEL: Final = os.environ.get("THIINGS_GALLERY_LOG_LEVEL", "WARNING").upper()

WINDOW_TITLE: Final = "ThiingsGrid Examples"
SOURCE_FONT_CSS: Final = "font-family: Consolas, 'Courier New', monospace; font-size:12px"
