"""Data models for parsed documents and blog posts"""

import datetime as dt
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


@dataclass(frozen=True)
class Document:
    """A front matter mapping plus the body text that follows it."""
    metadata: Mapping[str, Any] = field(default_factory=dict)
    body:     str = ''

    def __post_init__(self):
        object.__setattr__(self, 'metadata', MappingProxyType(dict(self.metadata)))


class PostMeta(BaseModel):
    """Typed view of the recognized post keys; unknown keys are kept as extras."""
    model_config = ConfigDict(frozen=True, extra='allow')

    layout:     Optional[str] = None
    title:      Optional[str] = None
    date:       Optional[dt.date] = None
    categories: list[str] = Field(default_factory=list)
    tags:       list[str] = Field(default_factory=list)
    image:      Optional[str] = None

    @field_validator('categories', 'tags', mode='before')
    @classmethod
    def _split_words(cls, value: Any) -> Any:
        """A single string is a space-separated list (e.g. `categories: blog tech`)."""
        if value is None:
            return []
        if isinstance(value, str):
            return value.split()
        return value


@dataclass(frozen=True)
class Post:
    """A parsed post file with its derived slug and content hash."""
    path:         Path
    slug:         str
    document:     Document
    meta:         PostMeta
    content_hash: str          # sha256 of the raw file text

    @property
    def title(self) -> Optional[str]:
        return self.meta.title

    @property
    def date(self) -> Optional[dt.date]:
        return self.meta.date

    @property
    def body(self) -> str:
        return self.document.body
