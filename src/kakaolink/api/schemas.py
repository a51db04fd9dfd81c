"""Request and response bodies for the links API."""

from pydantic import BaseModel

from kakaolink.models.link import ExtractedLink
from kakaolink.models.view import CollectionStats


class ExtractResponse(BaseModel):
    """Links extracted from one uploaded chat export, after filtering and sorting."""

    file_name: str
    links: list[ExtractedLink]
    users: list[str]  # All distinct authors, for the user selector
    stats: CollectionStats


class ExportRequest(BaseModel):
    """Links to serialize, normally the client's current filtered view."""

    links: list[ExtractedLink] = []
    strip_message_urls: bool | None = None  # None uses the configured default
    locale: str | None = None


class ShareRequest(BaseModel):
    links: list[ExtractedLink] = []
    limit: int = 5
    locale: str | None = None


class ShareResponse(BaseModel):
    text: str
