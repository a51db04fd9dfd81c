"""Export formats, the serialized file model, and the JSON export schema."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class ExportFormat(str, Enum):
    """Supported export file formats."""

    CSV = "csv"
    TXT = "txt"
    JSON = "json"


class ExportFile(BaseModel):
    """A fully serialized export, ready for the caller to write or send."""

    model_config = ConfigDict(frozen=True)

    content: bytes
    filename: str
    media_type: str


class ExportedLink(BaseModel):
    """One link as it appears in a JSON export. Field order is the serialized order."""

    url: str
    domain: str
    user: str
    date: str
    message: str


class ExportDocument(BaseModel):
    """Top-level JSON export object."""

    model_config = ConfigDict(populate_by_name=True)

    export_date: str = Field(alias="exportDate")  # ISO-8601, UTC
    total_links: int = Field(alias="totalLinks")
    links: list[ExportedLink] = []
