"""Example registry for the ThiingsGrid demo gallery.

Holds the ordered ``(name, source)`` pairs the gallery browses. Names and
sources are stored together as ``ExampleEntry`` records so the two can never
drift apart; the external contract still exposes them through separate
positional accessors (``name_at`` / ``source_at``).

Design notes:
 - Read-only after construction: entries live in a tuple and the name index in
   a ``MappingProxyType``. Concurrent reads need no locking.
 - Construction validates the invariants once (length match, unique non-empty
   names, string sources) and fails fast with ``RegistryConfigurationError``.
 - Source text is opaque payload and is returned verbatim.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, Iterator, Mapping, Sequence, Tuple

__all__ = [
    "ExampleEntry",
    "ExampleRegistry",
    "GalleryError",
    "ExampleIndexError",
    "ExampleNotFoundError",
    "RegistryConfigurationError",
    "build_registry",
]


class GalleryError(Exception):
    """Base class for registry errors."""


class ExampleIndexError(GalleryError, IndexError):
    """Raised when an index falls outside ``[0, count())``."""

    def __init__(self, index: object, count: int) -> None:
        super().__init__(f"Example index {index!r} out of range (count={count})")
        self.index = index
        self.count = count


class ExampleNotFoundError(GalleryError, KeyError):
    """Raised when no registered example carries the requested name."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Example not found: {self.name!r}"


class RegistryConfigurationError(GalleryError, ValueError):
    """Raised at construction time when the data set violates an invariant."""


@dataclass(frozen=True)
class ExampleEntry:
    name: str
    source: str


class ExampleRegistry:
    """Immutable, index-aligned store of gallery examples.

    Parameters
    ----------
    entries:
        Iterable of ``ExampleEntry`` in registration order.

    Raises
    ------
    RegistryConfigurationError
        If a name is empty / not a string, a source is not a string, or two
        entries share a name.
    """

    __slots__ = ("_entries", "_index_by_name")

    def __init__(self, entries: Iterable[ExampleEntry]) -> None:
        items = tuple(entries)
        index: dict[str, int] = {}
        duplicates: list[str] = []
        for pos, entry in enumerate(items):
            if not isinstance(entry, ExampleEntry):
                raise RegistryConfigurationError(
                    f"Entry {pos} is not an ExampleEntry: {type(entry).__name__}"
                )
            if not isinstance(entry.name, str) or not entry.name:
                raise RegistryConfigurationError(f"Entry {pos} has an empty or non-string name")
            if not isinstance(entry.source, str):
                raise RegistryConfigurationError(
                    f"Entry {pos} ({entry.name!r}) has a non-string source"
                )
            if entry.name in index:
                if entry.name not in duplicates:
                    duplicates.append(entry.name)
                continue
            index[entry.name] = pos
        if duplicates:
            raise RegistryConfigurationError(
                "Duplicate example names: " + ", ".join(repr(d) for d in duplicates)
            )
        self._entries: Tuple[ExampleEntry, ...] = items
        self._index_by_name: Mapping[str, int] = MappingProxyType(index)

    # Size -----------------------------------------------------------------
    def count(self) -> int:
        return len(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    # Positional access ----------------------------------------------------
    def entry_at(self, index: int) -> ExampleEntry:
        """Return the entry at ``index``.

        Negative indices are out of range (no wrap-around); so are non-int
        values, including ``bool``.
        """
        if (
            isinstance(index, bool)
            or not isinstance(index, int)
            or not 0 <= index < len(self._entries)
        ):
            raise ExampleIndexError(index, len(self._entries))
        return self._entries[index]

    def name_at(self, index: int) -> str:
        return self.entry_at(index).name

    def source_at(self, index: int) -> str:
        return self.entry_at(index).source

    # Enumeration ----------------------------------------------------------
    def all(self) -> Iterator[Tuple[str, str]]:
        """Yield ``(name, source)`` pairs in registration order.

        Each call returns a fresh iterator, so the sequence can be consumed
        any number of times with identical results.
        """
        return ((e.name, e.source) for e in self._entries)

    def __iter__(self) -> Iterator[Tuple[str, str]]:
        return self.all()

    def names(self) -> Tuple[str, ...]:
        return tuple(e.name for e in self._entries)

    # Name lookup ----------------------------------------------------------
    def index_of_name(self, name: str) -> int:
        try:
            return self._index_by_name[name]
        except (KeyError, TypeError) as exc:
            raise ExampleNotFoundError(name) from exc

    def __contains__(self, name: object) -> bool:
        try:
            return name in self._index_by_name
        except TypeError:
            return False

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"ExampleRegistry({list(self.names())!r})"


def build_registry(names: Sequence[str], sources: Sequence[str]) -> ExampleRegistry:
    """Pair two parallel sequences into a registry.

    The sequences are correlated by position only, so a length mismatch means
    the data set itself is corrupt and construction is refused.
    """
    if len(names) != len(sources):
        raise RegistryConfigurationError(
            f"Example names and sources differ in length ({len(names)} names, "
            f"{len(sources)} sources)"
        )
    return ExampleRegistry(ExampleEntry(name=n, source=s) for n, s in zip(names, sources))
