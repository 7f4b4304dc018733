"""Tests for the example gallery view (list + verbatim source preview)."""

from __future__ import annotations

import pytest

pytest.importorskip("PyQt6.QtWidgets")

from gallery.catalog import EXAMPLES  # noqa: E402
from gallery.registry import ExampleIndexError, ExampleNotFoundError  # noqa: E402
from gui.views.example_gallery_view import ExampleGalleryView  # noqa: E402


def test_view_population(qtbot):
    view = ExampleGalleryView(EXAMPLES)
    qtbot.addWidget(view)
    assert view.list_widget.count() == EXAMPLES.count()
    assert [view.list_widget.item(i).text() for i in range(view.list_widget.count())] == list(
        EXAMPLES.names()
    )
    assert view.current_index() == 0
    assert view.txt_source.toPlainText() == EXAMPLES.source_at(0)
    assert view.txt_source.isReadOnly()


def test_select_index_updates_preview(qtbot):
    view = ExampleGalleryView(EXAMPLES)
    qtbot.addWidget(view)
    seen = []
    view.exampleSelected.connect(lambda i, n: seen.append((i, n)))
    view.select_index(3)
    assert view.current_name() == "ColorfulGrid"
    assert view.current_source() == EXAMPLES.source_at(3)
    assert view.title_label.text() == "ColorfulGrid"
    assert seen == [(3, "ColorfulGrid")]


def test_select_name_with_fallback(qtbot, small_registry):
    view = ExampleGalleryView(small_registry)
    qtbot.addWidget(view)
    assert view.select_name("Gamma") is True
    assert view.current_index() == 2
    assert view.select_name("Gone", fallback="Beta") is False
    assert view.current_name() == "Beta"


def test_invalid_selection_raises(qtbot, small_registry):
    view = ExampleGalleryView(small_registry)
    qtbot.addWidget(view)
    with pytest.raises(ExampleIndexError):
        view.select_index(9)
    with pytest.raises(ExampleNotFoundError):
        view.select_name("Gone")
    assert view.current_index() == 0


def test_initial_stale_name_falls_back_to_first(qtbot, small_registry):
    view = ExampleGalleryView(small_registry, initial="Gone")
    qtbot.addWidget(view)
    assert view.current_name() == "Alpha"


def test_initial_name_and_export_payload(qtbot):
    view = ExampleGalleryView(EXAMPLES, initial="EmojiFun")
    qtbot.addWidget(view)
    assert view.get_export_payload() == {
        "index": 2,
        "name": "EmojiFun",
        "source": EXAMPLES.source_at(2),
    }
