"""
Validation utilities for BlogWare.
Contains the slug checks shared by the registry and the resolver.
"""

import re
from typing import Optional

_SLUG_PATTERN = re.compile(r"^[A-Za-z0-9][A-Za-z0-9_-]*$")


def is_valid_slug(slug: Optional[str]) -> bool:
    """Validate a slug to prevent path traversal or other unsafe patterns."""
    if not slug or not slug.strip():
        return False

    # Disallow traversal and path-like prefixes
    if ".." in slug or "/" in slug or "\\" in slug:
        return False

    # Prevent attempts to inject schemes or special characters that break routing
    if any(ch in slug for ch in (":", "?", "#")):
        return False

    return bool(_SLUG_PATTERN.fullmatch(slug))


def slug_from_filename(filename: str, extension: str) -> Optional[str]:
    """Return the slug for a content filename, or None if it is not a post file."""
    if not filename.endswith(extension) or filename.startswith("."):
        return None
    slug = filename[: -len(extension)]
    if not is_valid_slug(slug):
        return None
    return slug
