import io
import xml.etree.ElementTree as ET

from convertertoolkit.svg import DEFAULT_TITLE, create_document, write_document

SVG_NS = "{http://www.w3.org/2000/svg}"


def _root(content: str) -> ET.Element:
    return ET.fromstring(content.encode("utf-8"))


def test_svg_canvas_is_rounded_up(tmp_path, source):
    target = tmp_path / "panel.svg"

    assert write_document(target, source, "Sized", 612.4, 791.2)

    root = _root(target.read_text(encoding="utf-8"))
    assert root.attrib["width"] == "613pt"
    assert root.attrib["height"] == "792pt"


def test_svg_placeholder_title(source):
    buffer = io.StringIO()

    assert create_document(buffer, source, None)

    assert _root(buffer.getvalue()).find(f"{SVG_NS}title").text == DEFAULT_TITLE


def test_svg_title_is_escaped(source):
    buffer = io.StringIO()

    assert create_document(buffer, source, "Goodbye & <Cruel> World")

    assert _root(buffer.getvalue()).find(f"{SVG_NS}title").text == "Goodbye & <Cruel> World"


def test_svg_native_text_emits_text_elements(make_source):
    native, outlined = io.StringIO(), io.StringIO()

    create_document(native, make_source(text="World"), "t", use_vectorized_text=False)
    create_document(outlined, make_source(text="World"), "t", use_vectorized_text=True)

    assert "<text" in native.getvalue()
    assert "World" in native.getvalue()
    assert "<text" not in outlined.getvalue()


def test_svg_to_binary_stream(source):
    buffer = io.BytesIO()

    assert create_document(buffer, source, "Bytes")
    assert b"<svg" in buffer.getvalue()


def test_svg_maps_source_onto_page(quarter_source):
    buffer = io.StringIO()

    assert create_document(buffer, quarter_source, "t", 200, 100)

    assert "M 0 0 L 100 0 L 100 50 L 0 50 z" in " ".join(buffer.getvalue().split())


def test_svg_text_stream_gets_utf8_bytes(tmp_path, source):
    target = tmp_path / "latin.svg"

    with open(target, "w", encoding="latin-1") as handle:
        assert create_document(handle, source, "Łódź")

    content = target.read_bytes().decode("utf-8")
    assert 'encoding="utf-8"' in content
    assert _root(content).find(f"{SVG_NS}title").text == "Łódź"
