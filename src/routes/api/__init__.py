"""
API routes package for BlogWare.
This package contains API route modules that return JSON/data responses.
"""

from . import posts

__all__ = ["posts"]
