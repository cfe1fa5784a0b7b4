"""
Models package for BlogWare.
Contains data models and validation schemas.
"""

from .post import ContentDocument, PostSummary

__all__ = ["ContentDocument", "PostSummary"]
