"""
Slug resolution service for BlogWare.
Turns a slug into a ContentDocument or a uniform NotFoundError.
"""

from typing import Any, Dict, List, Mapping, Optional
from loguru import logger

from ..config import (
    MISSING_DATE_DEFAULT,
    MISSING_FIELD_POLICIES,
    MISSING_FIELD_POLICY,
    MISSING_TITLE_DEFAULT,
)
from ..models.post import ContentDocument, PostSummary
from ..utils.diagnostics import DiagnosticSink, LoadFailure, log_load_failure
from ..utils.errors import (
    ContentLoadError,
    LoadFailureCause,
    NotFoundError,
    ParseFailure,
)
from ..utils.validation import is_valid_slug
from .content_store import ContentStore

_REQUIRED_FIELDS = ("title", "date")


class SlugResolver:
    """Service class for slug -> post resolution."""

    def __init__(
        self,
        store: ContentStore,
        sink: DiagnosticSink = log_load_failure,
        missing_field_policy: str = MISSING_FIELD_POLICY,
        title_default: str = MISSING_TITLE_DEFAULT,
        date_default: str = MISSING_DATE_DEFAULT,
    ):
        if missing_field_policy not in MISSING_FIELD_POLICIES:
            raise ValueError(f"Unknown missing field policy: {missing_field_policy}")
        self.store = store
        self.sink = sink
        self.missing_field_policy = missing_field_policy
        self.title_default = title_default
        self.date_default = date_default

    async def resolve(self, slug: str) -> ContentDocument:
        """
        Resolve a slug to its post.

        Args:
            slug: Route parameter, used verbatim as the registry key

        Returns:
            The parsed post

        Raises:
            NotFoundError: for every failure cause
        """
        try:
            if not is_valid_slug(slug):
                self._report(
                    LoadFailure(slug, LoadFailureCause.INVALID_SLUG, "slug rejected")
                )
                raise NotFoundError()

            parsed = await self.store.load(slug)
            metadata = self._apply_field_policy(slug, parsed.metadata)
            return ContentDocument(
                slug=slug,
                title=metadata.get("title"),
                date=metadata.get("date"),
                content=parsed.body,
                metadata=metadata,
            )
        except NotFoundError:
            raise
        except ContentLoadError as e:
            self._report(LoadFailure(slug, e.cause, e.detail, e))
            raise NotFoundError() from None
        except Exception as e:
            self._report(
                LoadFailure(slug, LoadFailureCause.IO_FAILURE, f"unexpected error: {e}", e)
            )
            raise NotFoundError() from None

    async def load(self, event: Mapping[str, Any]) -> Dict[str, Any]:
        """
        Page-load entry point.

        Args:
            event: Load event of the form {"params": {"slug": ...}}

        Returns:
            {content, title, date} of the resolved post
        """
        params = event.get("params") or {}
        document = await self.resolve(str(params.get("slug") or ""))
        return document.page_data()

    async def list_posts(self) -> List[PostSummary]:
        """Summaries of every registered post that loads, newest first."""
        summaries = []
        for slug in self.store.registry.slugs():
            try:
                document = await self.resolve(slug)
            except NotFoundError:
                continue
            summaries.append(
                PostSummary(slug=slug, title=document.title, date=document.date)
            )
        dated = sorted((s for s in summaries if s.date), key=lambda s: s.date, reverse=True)
        undated = [s for s in summaries if not s.date]
        return dated + undated

    def _apply_field_policy(self, slug: str, metadata: Dict[str, Any]) -> Dict[str, Any]:
        missing = [name for name in _REQUIRED_FIELDS if metadata.get(name) in (None, "")]
        if not missing:
            return metadata

        if self.missing_field_policy == "reject":
            raise ParseFailure(slug, f"missing front matter field(s): {', '.join(missing)}")

        if self.missing_field_policy == "default":
            metadata = dict(metadata)
            if "title" in missing:
                metadata["title"] = self.title_default or slug
            if "date" in missing:
                metadata["date"] = self.date_default

        return metadata

    def _report(self, failure: LoadFailure) -> None:
        try:
            self.sink(failure)
        except Exception as e:
            logger.error(f"Diagnostic sink failed for post {failure.slug}: {str(e)}")
