"""Example gallery view.

Browse-and-preview widget over an ``ExampleRegistry``:
 - Left: example names in registration order.
 - Right: verbatim source of the selected example (read-only, monospace).

The registry handle is injected by the caller; the view keeps no global
lookup. Selection by persisted name goes through ``resolve_selection`` so a
stale name can fall back to a default example.
"""

from __future__ import annotations

from typing import Optional, Union

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtWidgets import (
    QWidget,
    QHBoxLayout,
    QVBoxLayout,
    QLabel,
    QListWidget,
    QListWidgetItem,
    QPlainTextEdit,
    QSplitter,
)

from config import settings
from gallery.registry import ExampleRegistry
from gallery.selection import resolve_selection

__all__ = ["ExampleGalleryView"]


class ExampleGalleryView(QWidget):
    """Widget listing gallery examples and previewing their source.

    Public API:
    - select_index(int) / select_name(str, fallback=None)
    - current_index() / current_name() / current_source()
    - exampleSelected(int, str) signal
    """

    exampleSelected = pyqtSignal(int, str)

    def __init__(
        self,
        registry: ExampleRegistry,
        parent: QWidget | None = None,
        *,
        initial: Union[int, str, None] = None,
    ):
        super().__init__(parent)
        self._registry = registry
        self._current: Optional[int] = None
        self._build_ui()
        self._populate()
        if initial is not None:
            if isinstance(initial, str):
                self.select_name(initial, fallback=registry.name_at(0) if registry.count() else None)
            else:
                self.select_index(initial)
        elif registry.count():
            self.select_index(0)

    def _build_ui(self):
        self.setObjectName("exampleGallery")
        root = QHBoxLayout(self)
        splitter = QSplitter(Qt.Orientation.Horizontal)
        self.list_widget = QListWidget()
        self.list_widget.setObjectName("exampleGalleryList")
        splitter.addWidget(self.list_widget)

        detail = QWidget()
        detail_layout = QVBoxLayout(detail)
        detail_layout.setContentsMargins(0, 0, 0, 0)
        self.title_label = QLabel("Select an example")
        self.title_label.setStyleSheet("font-weight:600;font-size:14px")
        detail_layout.addWidget(self.title_label)
        self.txt_source = QPlainTextEdit()
        self.txt_source.setReadOnly(True)
        self.txt_source.setLineWrapMode(QPlainTextEdit.LineWrapMode.NoWrap)
        self.txt_source.setStyleSheet(settings.SOURCE_FONT_CSS)
        detail_layout.addWidget(self.txt_source)
        splitter.addWidget(detail)
        splitter.setStretchFactor(1, 3)
        root.addWidget(splitter)

        self.list_widget.currentRowChanged.connect(self._on_row_changed)  # type: ignore

    def _populate(self):
        for name, _source in self._registry.all():
            item = QListWidgetItem(name)
            item.setData(Qt.ItemDataRole.UserRole, name)
            self.list_widget.addItem(item)

    # Selection -----------------------------------------------------
    def select_index(self, index: int) -> None:
        result = resolve_selection(self._registry, index)
        self.list_widget.setCurrentRow(result.index)

    def select_name(self, name: str, fallback: str | None = None) -> bool:
        """Select by name; returns False when the fallback was used."""
        result = resolve_selection(self._registry, name, fallback=fallback)
        self.list_widget.setCurrentRow(result.index)
        return not result.fell_back

    def _on_row_changed(self, row: int):
        if row < 0:
            return
        entry = self._registry.entry_at(row)
        self._current = row
        self.title_label.setText(entry.name)
        self.txt_source.setPlainText(entry.source)
        self.exampleSelected.emit(row, entry.name)

    # Accessors -----------------------------------------------------
    def current_index(self) -> Optional[int]:
        return self._current

    def current_name(self) -> Optional[str]:
        return None if self._current is None else self._registry.name_at(self._current)

    def current_source(self) -> Optional[str]:
        return None if self._current is None else self._registry.source_at(self._current)

    def get_export_payload(self):
        return {
            "index": self._current,
            "name": self.current_name(),
            "source": self.current_source(),
        }
