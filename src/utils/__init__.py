"""
Utils package for BlogWare.
Contains utility functions and helpers.
"""

from .validation import is_valid_slug, slug_from_filename
from .sanitizer import sanitize_html
from .markdown_extensions import render_markdown

__all__ = [
    'is_valid_slug',
    'slug_from_filename',
    'sanitize_html',
    'render_markdown',
]
