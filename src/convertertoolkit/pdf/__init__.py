"""PDF export."""

from convertertoolkit.pdf.document import PdfDocument, PdfPage
from convertertoolkit.pdf.exporter import create_document, write_document

__all__ = ["PdfDocument", "PdfPage", "create_document", "write_document"]
