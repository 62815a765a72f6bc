"""Document metadata entities and source protocol."""

from abc import abstractmethod
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Optional, Protocol, runtime_checkable


@dataclass(frozen=True)
class DocumentInfo:
    """Metadata for a document in a library."""
    
    name: str
    url: str
    unique_id: Optional[str] = None
    document_id: Optional[int] = None
    library_name: Optional[str] = None
    size_bytes: Optional[int] = None
    modified_at: Optional[datetime] = None
    modified_by: Optional[str] = None
    properties: Dict[str, Any] = field(default_factory=dict, compare=False)
    
    @property
    def extension(self) -> str:
        """Lowercase file extension without the dot, or empty string."""
        base = self.name.rsplit("/", 1)[-1]
        if "." not in base:
            return ""
        return base.rsplit(".", 1)[-1].lower()


@runtime_checkable
class DocumentSource(Protocol):
    """Protocol for fetching document metadata from a backing store."""
    
    @abstractmethod
    async def fetch_by_url(self, url: str) -> Optional[DocumentInfo]:
        """Fetch metadata by absolute or server-relative URL."""
        ...
    
    @abstractmethod
    async def fetch_by_unique_id(self, unique_id: str) -> Optional[DocumentInfo]:
        """Fetch metadata by the document's unique id."""
        ...
    
    @abstractmethod
    async def fetch_by_id(self, library_name: str, document_id: int) -> Optional[DocumentInfo]:
        """Fetch metadata by library name and item id."""
        ...
