"""Document metadata lookup with caching and request coalescing.

Several callers commonly ask for the same document at once; they share
one fetch through the same CoalescingCache used for group membership.
"""

import logging
from typing import Optional

from ....core.exceptions import DocumentNotFoundError, ValidationError
from ...cache.services.coalescing_cache import CoalescingCache
from ..entities.document import DocumentInfo, DocumentSource

logger = logging.getLogger(__name__)


def build_document_cache_key(
    url: Optional[str] = None,
    unique_id: Optional[str] = None,
    document_id: Optional[int] = None,
    library_name: Optional[str] = None
) -> str:
    """Build the cache key: URL first, then unique id, then library and id.
    
    Raises:
        ValidationError: No usable identifier was given
    """
    if url:
        return f"url:{url}"
    if unique_id:
        return f"uid:{unique_id}"
    if document_id and library_name:
        return f"id:{library_name}:{document_id}"
    raise ValidationError(
        "Either url, unique_id, or document_id with library_name must be provided"
    )


class DocumentMetadataService:
    """Fetches document metadata through a shared coalescing cache."""
    
    def __init__(self, source: DocumentSource, cache: CoalescingCache[str, DocumentInfo]):
        self._source = source
        self._cache = cache
    
    async def get_metadata(
        self,
        url: Optional[str] = None,
        unique_id: Optional[str] = None,
        document_id: Optional[int] = None,
        library_name: Optional[str] = None,
        use_cache: bool = True
    ) -> DocumentInfo:
        """Get document metadata by URL, unique id, or library and id.
        
        Raises:
            ValidationError: No usable identifier was given
            DocumentNotFoundError: The source has no such document
        """
        key = build_document_cache_key(url, unique_id, document_id, library_name)
        if not use_cache:
            self._cache.clear(key)
        
        async def fetch() -> DocumentInfo:
            if url:
                document = await self._source.fetch_by_url(url)
            elif unique_id:
                document = await self._source.fetch_by_unique_id(unique_id)
            else:
                document = await self._source.fetch_by_id(library_name, document_id)
            
            if document is None:
                raise DocumentNotFoundError(f"Document not found: {key}", details={"key": key})
            logger.debug(f"Fetched document metadata for {key}")
            return document
        
        return await self._cache.resolve_with_coalescing(key, fetch)
    
    def invalidate(self, **identifiers) -> bool:
        """Drop a cached document; accepts the same identifiers as get_metadata."""
        return self._cache.clear(build_document_cache_key(**identifiers))
