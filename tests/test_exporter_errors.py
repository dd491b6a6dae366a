import logging

import pytest

from convertertoolkit import eps, pdf, svg
from convertertoolkit.core.errors import DocumentAssemblyError, ExportError, ExportIOError


class _ExplodingSource:
    title = None

    def vector_source_bounds(self):
        from convertertoolkit.component import SourceBounds

        return SourceBounds(0, 0, 10, 10)

    def vectorize(self, graphics):
        raise RuntimeError("widget went away")


def test_partial_render_still_writes_document(tmp_path, make_source, caplog):
    target = tmp_path / "partial.svg"

    with caplog.at_level(logging.WARNING, logger="convertertoolkit"):
        assert svg.write_document(target, make_source(result=False), "Partial") is False

    assert target.exists() and target.stat().st_size > 0
    assert "rendered only partially" in caplog.text


@pytest.mark.parametrize(
    "module, extra",
    [(eps, ("creator",)), (pdf, ("author",)), (svg, ())],
)
def test_missing_directory_is_an_io_error(tmp_path, source, module, extra):
    target = tmp_path / "missing" / "out.doc"

    with pytest.raises(ExportIOError) as excinfo:
        module.write_document(target, source, "t", *extra)
    assert excinfo.value.format == module.exporter.FORMAT

    assert module.create_document(target, source, "t", *extra) is False


def test_create_document_logs_failure(tmp_path, source, caplog):
    target = tmp_path / "missing" / "out.eps"

    with caplog.at_level(logging.ERROR, logger="convertertoolkit"):
        assert eps.create_document(target, source, "t", None) is False

    assert "EPS export failed" in caplog.text


def test_raising_source_is_an_assembly_error(tmp_path):
    with pytest.raises(DocumentAssemblyError) as excinfo:
        pdf.write_document(tmp_path / "boom.pdf", _ExplodingSource(), "t", None)

    assert isinstance(excinfo.value.__cause__, RuntimeError)
    assert "widget went away" in str(excinfo.value)
    assert not (tmp_path / "boom.pdf").exists()


def test_empty_bounds_are_an_assembly_error(tmp_path, make_source):
    with pytest.raises(DocumentAssemblyError):
        svg.write_document(tmp_path / "empty.svg", make_source(width=0), "t")

    assert eps.create_document(tmp_path / "empty.eps", make_source(height=0), "t", None) is False


def test_errors_share_a_base_class():
    error = ExportIOError("svg", "disk full")

    assert isinstance(error, ExportError)
    assert str(error) == "SVG export failed: disk full"
