"""Document entities."""

from .document import DocumentInfo, DocumentSource

__all__ = ["DocumentInfo", "DocumentSource"]
