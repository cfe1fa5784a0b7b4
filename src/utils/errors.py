"""
Error types for BlogWare.

Content loading raises typed ``ContentLoadError`` subclasses so the cause can
be reported to diagnostics. Callers outside the resolver only ever see
``NotFoundError``.
"""

from enum import Enum

from ..config import NOT_FOUND_MESSAGE, NOT_FOUND_STATUS


class LoadFailureCause(str, Enum):
    """Why a slug could not be turned into a document."""

    DOCUMENT_MISSING = "document_missing"
    PARSE_FAILURE = "parse_failure"
    IO_FAILURE = "io_failure"
    INVALID_SLUG = "invalid_slug"


class ContentLoadError(Exception):
    """Base class for failures while locating, reading or parsing a post."""

    cause = LoadFailureCause.IO_FAILURE

    def __init__(self, slug: str, detail: str):
        super().__init__(f"{slug}: {detail}")
        self.slug = slug
        self.detail = detail


class DocumentMissing(ContentLoadError):
    cause = LoadFailureCause.DOCUMENT_MISSING


class ParseFailure(ContentLoadError):
    cause = LoadFailureCause.PARSE_FAILURE


class IOFailure(ContentLoadError):
    cause = LoadFailureCause.IO_FAILURE


class NotFoundError(Exception):
    """The single public failure outcome of slug resolution."""

    def __init__(
        self, status: int = NOT_FOUND_STATUS, message: str = NOT_FOUND_MESSAGE
    ):
        super().__init__(message)
        self.status = status
        self.message = message
