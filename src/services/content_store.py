"""
Content store for BlogWare.
Reads registered markdown posts and splits them into front matter and HTML body.
"""

import asyncio
from dataclasses import dataclass, field
from typing import Any, Dict

import frontmatter
import yaml
from loguru import logger

from ..config import SANITIZE_HTML
from ..utils.errors import DocumentMissing, IOFailure, ParseFailure
from ..utils.markdown_extensions import render_markdown
from .content_registry import ContentRegistry


@dataclass
class ParsedDocument:
    """Front matter and rendered body of one post."""

    metadata: Dict[str, Any] = field(default_factory=dict)
    body: str = ""


class ContentStore:
    """Read-only access to the posts listed in a ContentRegistry."""

    def __init__(self, registry: ContentRegistry, sanitize: bool = SANITIZE_HTML):
        self.registry = registry
        self.sanitize = sanitize

    async def load(self, slug: str) -> ParsedDocument:
        """
        Load and parse the post registered under a slug.

        Raises:
            DocumentMissing: slug not registered or file removed
            IOFailure: file could not be read
            ParseFailure: invalid encoding, front matter or markdown
        """
        path = self.registry.get(slug)
        if path is None:
            raise DocumentMissing(slug, "slug is not registered")
        return await asyncio.to_thread(self._read_and_parse, slug, path)

    def _read_and_parse(self, slug: str, path) -> ParsedDocument:
        try:
            text = path.read_text(encoding="utf-8-sig")
        except FileNotFoundError as e:
            raise DocumentMissing(slug, f"file removed: {path}") from e
        except UnicodeDecodeError as e:
            raise ParseFailure(slug, f"file is not valid UTF-8: {e}") from e
        except OSError as e:
            raise IOFailure(slug, f"could not read {path}: {e}") from e

        try:
            post = frontmatter.loads(text)
        except (yaml.YAMLError, TypeError, ValueError) as e:
            raise ParseFailure(slug, f"invalid front matter: {e}") from e

        try:
            body = render_markdown(post.content, sanitize=self.sanitize)
        except Exception as e:
            raise ParseFailure(slug, f"markdown render failed: {e}") from e

        logger.debug(f"Loaded post {slug} from {path}")
        return ParsedDocument(metadata=dict(post.metadata), body=body)
