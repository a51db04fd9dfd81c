"""Extracted link model and the sort/filter enums that operate on it."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

UNKNOWN_DOMAIN = "Unknown"


class ExtractedLink(BaseModel):
    """A single URL occurrence enriched with its originating message's metadata."""

    model_config = ConfigDict(frozen=True)

    id: str  # "{messageIndex}-{urlIndex}"
    url: str = Field(min_length=1)
    message: str  # Full original message text
    user: str
    date: str  # Raw timestamp, formatting is left to the caller
    domain: str = UNKNOWN_DOMAIN


class SortField(str, Enum):
    """Fields a link collection can be sorted by."""

    DATE = "date"
    USER = "user"
    DOMAIN = "domain"
    URL = "url"


class SortDirection(str, Enum):
    """Sort direction."""

    ASC = "asc"
    DESC = "desc"
