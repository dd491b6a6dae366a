import io

import pytest

pytest.importorskip("PyQt5.QtWidgets")

from PyQt5.QtCore import Qt  # noqa: E402
from PyQt5.QtGui import QColor, QPalette  # noqa: E402

from convertertoolkit import svg  # noqa: E402
from convertertoolkit.core.settings import ExportSettings  # noqa: E402
from convertertoolkit.graphics.color import ColorMode  # noqa: E402
from convertertoolkit.ui.demo_frame import ConverterDemoFrame  # noqa: E402
from convertertoolkit.ui.demo_panel import ConverterDemoPanel  # noqa: E402
from convertertoolkit.ui.vectorization_panel import (  # noqa: E402
    TitledVectorizationPanel,
    VectorizationPanel,
)


@pytest.fixture
def panel(qapp):
    widget = ConverterDemoPanel()
    widget.resize(420, 280)
    widget.show()
    qapp.processEvents()
    yield widget
    widget.close()
    widget.deleteLater()


def test_demo_panel_exports_every_label_as_text(panel):
    panel.set_title("Demo")
    buffer = io.StringIO()

    assert svg.write_document(buffer, panel, "Demo", use_vectorized_text=False)

    content = buffer.getvalue()
    for word in ("Demo", "Goodbye", "Maybe", "Cruel", "Yes", "World", "No"):
        assert f">{word}<" in content


def test_demo_panel_bounds_cover_composited_layout(panel):
    panel.set_title("Demo")
    bounds = panel.vector_source_bounds()

    top = panel.top_panel
    row_width = panel.bottom_left_panel.width() + panel.bottom_right_panel.width()
    assert bounds.width == max(top.width(), row_width)
    assert bounds.height > top.height() + panel.title_offset_y()


def test_export_restores_panel_background(panel):
    panel.set_foreground_from_background(QColor("#203040"))

    assert svg.create_document(io.StringIO(), panel, "t")

    assert panel.background_color() == QColor("#203040")
    assert panel.palette().color(QPalette.WindowText) == QColor(Qt.white)


def test_foreground_contrasts_with_background(qapp):
    widget = VectorizationPanel()

    widget.set_foreground_from_background(Qt.white)
    assert widget.palette().color(QPalette.WindowText) == QColor(Qt.black)

    widget.set_foreground_from_background((0.0, 0.0, 0.0, 1.0))
    assert widget.palette().color(QPalette.WindowText) == QColor(Qt.white)


def test_title_offset_is_zero_without_title(qapp):
    widget = TitledVectorizationPanel()
    assert widget.title_offset_y() == 0

    widget.set_title("Header")
    assert widget.title_offset_y() > 0


def test_hidden_children_are_skipped(qapp):
    from PyQt5.QtWidgets import QLabel

    widget = VectorizationPanel()
    widget.resize(200, 100)
    QLabel("Shown", widget).move(10, 10)
    QLabel("Hidden", widget).hide()
    buffer = io.StringIO()

    assert svg.write_document(buffer, widget, "t", use_vectorized_text=False)

    assert ">Shown<" in buffer.getvalue()
    assert ">Hidden<" not in buffer.getvalue()


def test_frame_exports_all_formats(qapp, tmp_path):
    frame = ConverterDemoFrame(settings=ExportSettings(color_mode=ColorMode.GRAYSCALE))
    frame.show()
    qapp.processEvents()

    assert frame.export_to_svg(tmp_path / "demo.svg")
    assert frame.export_to_pdf(tmp_path / "demo.pdf")
    assert frame.export_to_eps(tmp_path / "demo.eps")

    assert "Fake SVG Title" in (tmp_path / "demo.svg").read_text(encoding="utf-8")
    assert b"Fake PDF Title" in (tmp_path / "demo.pdf").read_bytes()
    assert "%%Title: Fake EPS Title" in (tmp_path / "demo.eps").read_text(encoding="utf-8")
    assert frame.panel.title == "Fake EPS Title"
    frame.close()


def test_title_rendering_leaves_drawing_state_untouched(qapp):
    from matplotlib.figure import Figure

    from convertertoolkit.graphics.context import VectorGraphics
    from convertertoolkit.graphics.fonts import FontSpec

    widget = TitledVectorizationPanel()
    widget.resize(200, 100)
    widget.set_title("Header")
    graphics = VectorGraphics(Figure(figsize=(2, 2), dpi=72))
    graphics.set_font(FontSpec(size=9))
    graphics.set_color((0.2, 0.4, 0.6, 1.0))

    assert widget.vectorize_title(graphics)

    assert graphics.get_font() == FontSpec(size=9)
    assert graphics.get_color() == pytest.approx((0.2, 0.4, 0.6, 1.0))
    assert len(graphics.figure.artists) == 1
