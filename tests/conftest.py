# Minimal conftest providing a fallback 'qtbot' fixture if pytest-qt is not installed.
# Gallery view tests still get an offscreen QApplication and widget tracking.
# If pytest-qt is installed, its fixture wins.

import os
import sys
import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

try:  # If pytest-qt present, do nothing (its fixture will be used)
    import pytestqt  # type: ignore  # noqa: F401
except ImportError:  # pragma: no cover
    try:
        from PyQt6.QtWidgets import QApplication
    except ImportError:  # pragma: no cover
        QApplication = None  # type: ignore

    @pytest.fixture
    def qtbot():  # type: ignore
        if QApplication is None:
            pytest.skip("PyQt6 not available")
        app = QApplication.instance() or QApplication(sys.argv)  # noqa: F841
        widgets = []

        class Bot:
            def addWidget(self, w):  # mimic pytest-qt API subset
                widgets.append(w)

        yield Bot()
        for w in widgets:
            w.close()
            w.deleteLater()


@pytest.fixture
def small_registry():
    from gallery.registry import build_registry

    return build_registry(["Alpha", "Beta", "Gamma"], ["<A/>", "<B/>", "<C/>"])
