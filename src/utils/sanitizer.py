"""
HTML sanitizer for post bodies rendered from Markdown.
Uses Bleach to remove dangerous tags/attributes and prevent XSS.
"""

from typing import Iterable
import bleach


# Allow a conservative set of HTML tags typically produced by Markdown "extra"
ALLOWED_TAGS: Iterable[str] = {
    "a",
    "sup",
    "abbr",
    "b",
    "blockquote",
    "code",
    "dd",
    "del",
    "div",
    "dl",
    "dt",
    "em",
    "i",
    "li",
    "ol",
    "strong",
    "ul",
    "p",
    "pre",
    "br",
    "hr",
    "h1",
    "h2",
    "h3",
    "h4",
    "h5",
    "h6",
    "table",
    "thead",
    "tbody",
    "tr",
    "th",
    "td",
    "span",
    "img",
    "figure",
    "figcaption",
}

ALLOWED_ATTRIBUTES = {
    "a": ["href", "title", "rel", "class"],
    "abbr": ["title"],
    "code": ["class"],
    "div": ["class"],
    "img": ["src", "alt", "title", "width", "height"],
    "figure": ["class"],
    "figcaption": ["class"],
    "span": ["class", "title"],
    "sup": ["id"],
    "li": ["id"],
    "th": ["colspan", "rowspan"],
    "td": ["colspan", "rowspan"],
}


for heading in ("h1", "h2", "h3", "h4", "h5", "h6"):
    ALLOWED_ATTRIBUTES[heading] = ["id"]

ALLOWED_PROTOCOLS = ["http", "https", "mailto"]


def sanitize_html(html: str) -> str:
    """Sanitize HTML produced from Markdown to prevent XSS."""
    return bleach.clean(
        html,
        tags=ALLOWED_TAGS,
        attributes=ALLOWED_ATTRIBUTES,
        protocols=ALLOWED_PROTOCOLS,
        strip=True,
    )
