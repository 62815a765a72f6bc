"""Directory service adapters."""

from .sharepoint_adapter import SharePointDirectoryAdapter

__all__ = ["SharePointDirectoryAdapter"]
