"""Directory utilities."""

from .factory import create_sharepoint_adapter

__all__ = ["create_sharepoint_adapter"]
