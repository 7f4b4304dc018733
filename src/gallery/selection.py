"""Resolve a gallery selection signal to a registry position.

The gallery UI hands over either an index (from its own list) or a name it
persisted earlier (e.g. from a bookmark). Indices are trusted caller state, so
a bad one is an error. A stale name may optionally fall back to a default
example; the fallback is logged so the stale reference stays visible.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Union

from .registry import ExampleNotFoundError, ExampleRegistry

__all__ = ["SelectionResult", "resolve_selection"]

_log = logging.getLogger(__name__)

Selection = Union[int, str]


@dataclass(frozen=True)
class SelectionResult:
    index: int
    name: str
    source: str
    fell_back: bool = False


def _result(registry: ExampleRegistry, index: int, fell_back: bool = False) -> SelectionResult:
    entry = registry.entry_at(index)
    return SelectionResult(index=index, name=entry.name, source=entry.source, fell_back=fell_back)


def resolve_selection(
    registry: ExampleRegistry,
    selection: Selection,
    *,
    fallback: Optional[str] = None,
) -> SelectionResult:
    """Turn ``selection`` into a ``SelectionResult``.

    Raises ``ExampleIndexError`` for an invalid index and
    ``ExampleNotFoundError`` for an unknown name when no usable fallback is
    given.
    """
    if isinstance(selection, str):
        try:
            return _result(registry, registry.index_of_name(selection))
        except ExampleNotFoundError:
            if fallback is None:
                raise
            _log.warning("Unknown example %r, falling back to %r", selection, fallback)
            return _result(registry, registry.index_of_name(fallback), fell_back=True)
    return _result(registry, selection)
