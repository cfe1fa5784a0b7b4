"""
Post data models for BlogWare.
"""

from datetime import date, datetime
from typing import Any, Dict, Optional
from pydantic import BaseModel, Field, validator


def _to_text(value: Any) -> Optional[str]:
    """Front matter values reach us as YAML scalars; dates become ISO text."""
    if value is None:
        return None
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    return str(value)


class ContentDocument(BaseModel):
    """A post resolved from the content store for a single request."""

    slug: str
    title: Optional[str] = None
    date: Optional[str] = None
    content: str = ""
    metadata: Dict[str, Any] = Field(default_factory=dict)

    @validator("title", "date", pre=True)
    def validate_text_field(cls, v):
        return _to_text(v)

    @validator("content", pre=True)
    def validate_content(cls, v):
        if v is None:
            return ""
        return v

    def page_data(self) -> Dict[str, Any]:
        """Shape returned to the page renderer."""
        return {"content": self.content, "title": self.title, "date": self.date}


class PostSummary(BaseModel):
    """Listing entry for a post."""

    slug: str
    title: Optional[str] = None
    date: Optional[str] = None
