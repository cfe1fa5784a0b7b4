"""
Diagnostic sink for content load failures.

The resolver never exposes why a slug failed to load. It hands a
``LoadFailure`` record to a sink instead. The default sink writes to loguru;
tests pass their own callable.
"""

from dataclasses import dataclass
from typing import Callable, Optional

from loguru import logger

from .errors import LoadFailureCause


@dataclass(frozen=True)
class LoadFailure:
    """Diagnostic record describing one failed resolution."""

    slug: str
    cause: LoadFailureCause
    detail: str
    error: Optional[BaseException] = None


DiagnosticSink = Callable[[LoadFailure], None]


def log_load_failure(failure: LoadFailure) -> None:
    """Default sink: log the failure with loguru."""
    message = f"Post '{failure.slug}' not served ({failure.cause.value}): {failure.detail}"
    if failure.cause in (LoadFailureCause.DOCUMENT_MISSING, LoadFailureCause.INVALID_SLUG):
        logger.warning(message)
    else:
        logger.opt(exception=failure.error).error(message)
