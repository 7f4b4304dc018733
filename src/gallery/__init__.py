"""ThiingsGrid example gallery data layer.

Exposes the immutable example registry, its error taxonomy, the built-in
catalog and the selection resolver used by the gallery UI and CLI. No Qt
dependency at import time.
"""

from __future__ import annotations

from .registry import (
    ExampleEntry,
    ExampleRegistry,
    GalleryError,
    ExampleIndexError,
    ExampleNotFoundError,
    RegistryConfigurationError,
    build_registry,
)
from .catalog import COMPONENT_NAMES, SOURCE_CODES, EXAMPLES, get_registry
from .selection import SelectionResult, resolve_selection

__all__ = [
    "ExampleEntry",
    "ExampleRegistry",
    "GalleryError",
    "ExampleIndexError",
    "ExampleNotFoundError",
    "RegistryConfigurationError",
    "build_registry",
    "COMPONENT_NAMES",
    "SOURCE_CODES",
    "EXAMPLES",
    "get_registry",
    "SelectionResult",
    "resolve_selection",
]
