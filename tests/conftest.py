import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
os.environ.setdefault("MPLBACKEND", "Agg")


class FakeSource:
    """Minimal vector source: a filled frame and one string."""

    def __init__(self, width=200.0, height=100.0, title=None, result=True, text="Hello"):
        self.title = title
        self._width = width
        self._height = height
        self._result = result
        self._text = text
        self.calls = 0

    def vector_source_bounds(self):
        from convertertoolkit.component import SourceBounds

        return SourceBounds(0.0, 0.0, self._width, self._height)

    def vectorize(self, graphics):
        from convertertoolkit.graphics.fonts import FontSpec

        self.calls += 1
        graphics.set_background((0.9, 0.9, 0.9, 1.0))
        graphics.clear_rect(0, 0, self._width, self._height)
        graphics.set_color((0.8, 0.1, 0.1, 1.0))
        graphics.draw_rect(5, 5, self._width - 10, self._height - 10)
        graphics.set_font(FontSpec(size=20))
        graphics.draw_string(self._text, 20, 50)
        return self._result



class QuarterFill:
    """Fills the top-left quarter of a 100x50 source."""

    title = None

    def vector_source_bounds(self):
        from convertertoolkit.component import SourceBounds

        return SourceBounds(0.0, 0.0, 100.0, 50.0)

    def vectorize(self, graphics):
        graphics.set_color("black")
        graphics.fill_rect(0, 0, 50, 25)
        return True


@pytest.fixture
def source():
    return FakeSource()


@pytest.fixture
def make_source():
    return FakeSource


@pytest.fixture
def quarter_source():
    return QuarterFill()


@pytest.fixture(scope="session")
def qapp():
    widgets = pytest.importorskip("PyQt5.QtWidgets")
    app = widgets.QApplication.instance() or widgets.QApplication([])
    yield app
