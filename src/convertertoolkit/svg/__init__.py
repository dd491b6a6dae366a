"""SVG export."""

from convertertoolkit.svg.document import SvgDocument
from convertertoolkit.svg.exporter import (
    DEFAULT_TITLE,
    create_document,
    document_title,
    write_document,
)

__all__ = ["DEFAULT_TITLE", "SvgDocument", "create_document", "document_title", "write_document"]
