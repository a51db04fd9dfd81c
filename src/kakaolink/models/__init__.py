"""Data models and enums for the link extraction pipeline."""

from kakaolink.models.chat import ChatMessage
from kakaolink.models.export import ExportDocument, ExportedLink, ExportFile, ExportFormat
from kakaolink.models.link import UNKNOWN_DOMAIN, ExtractedLink, SortDirection, SortField
from kakaolink.models.view import CollectionStats, ViewState

__all__ = [
    "ChatMessage",
    "ExtractedLink",
    "UNKNOWN_DOMAIN",
    "SortField",
    "SortDirection",
    "ViewState",
    "CollectionStats",
    "ExportFormat",
    "ExportFile",
    "ExportedLink",
    "ExportDocument",
]
