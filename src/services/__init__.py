"""
Services package for BlogWare.
Contains business logic layer for the application.
"""

from .content_registry import ContentRegistry
from .content_store import ContentStore, ParsedDocument
from .slug_resolver import SlugResolver

__all__ = ["ContentRegistry", "ContentStore", "ParsedDocument", "SlugResolver"]
