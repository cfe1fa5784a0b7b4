"""
Routes package for BlogWare.
This package contains all the route modules for the application.
"""

from .api import posts as api_posts

__all__ = ["api_posts"]
