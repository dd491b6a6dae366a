"""EPS export."""

from convertertoolkit.eps.document import EpsDocument
from convertertoolkit.eps.exporter import create_document, write_document

__all__ = ["EpsDocument", "create_document", "write_document"]
