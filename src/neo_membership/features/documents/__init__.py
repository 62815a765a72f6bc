"""Documents feature for neo-membership.

- entities/: Document metadata and the DocumentSource protocol
- services/: Cached, coalesced metadata lookup
"""

from .entities import DocumentInfo, DocumentSource
from .services import DocumentMetadataService, build_document_cache_key

__all__ = [
    "DocumentInfo",
    "DocumentSource",
    "DocumentMetadataService",
    "build_document_cache_key",
]
