"""
Content registry for BlogWare.

Builds an explicit slug -> file mapping from the content directory so that
lookups never construct a path from request input.
"""

from pathlib import Path
from typing import Dict, List, Optional, Union
from loguru import logger

from ..config import CONTENT_DIR, CONTENT_EXTENSION
from ..utils.validation import slug_from_filename


class ContentRegistry:
    """Enumerated set of known post slugs and the files backing them."""

    def __init__(
        self,
        content_dir: Union[str, Path] = CONTENT_DIR,
        extension: str = CONTENT_EXTENSION,
    ):
        self.content_dir = Path(content_dir)
        self.extension = extension
        self._entries: Dict[str, Path] = {}

    def refresh(self) -> int:
        """
        Rescan the content directory and replace the registry.

        Returns:
            Number of registered slugs
        """
        entries: Dict[str, Path] = {}
        if not self.content_dir.is_dir():
            logger.warning(f"Content directory not found: {self.content_dir}")
            self._entries = entries
            return 0

        for path in sorted(self.content_dir.iterdir()):
            if not path.is_file():
                continue
            slug = slug_from_filename(path.name, self.extension)
            if slug is None:
                if path.name.endswith(self.extension):
                    logger.warning(f"Skipping content file with unsafe name: {path.name}")
                continue
            entries[slug] = path

        self._entries = entries
        logger.info(f"Registered {len(entries)} posts from {self.content_dir}")
        return len(entries)

    def get(self, slug: str) -> Optional[Path]:
        return self._entries.get(slug)

    def slugs(self) -> List[str]:
        return sorted(self._entries)

    def __contains__(self, slug: object) -> bool:
        return slug in self._entries

    def __len__(self) -> int:
        return len(self._entries)
