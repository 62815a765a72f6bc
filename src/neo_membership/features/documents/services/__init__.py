"""Document services."""

from .document_metadata_service import DocumentMetadataService, build_document_cache_key

__all__ = ["DocumentMetadataService", "build_document_cache_key"]
