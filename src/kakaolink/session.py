"""One user's extraction session: the loaded file, its links, and the view state."""

import logging
from datetime import datetime

from kakaolink.collection import LinkCollection
from kakaolink.config import MAX_UPLOAD_BYTES
from kakaolink.export import export_links
from kakaolink.export.labels import DEFAULT_LOCALE
from kakaolink.extraction import extract_links
from kakaolink.ingestion import IngestResult, ingest, validate_upload
from kakaolink.models.export import ExportFile, ExportFormat
from kakaolink.models.link import ExtractedLink
from kakaolink.models.view import CollectionStats, ViewState

logger = logging.getLogger(__name__)


class UploadRejectedError(Exception):
    """The file was refused before parsing (wrong extension or too large)."""

    def __init__(self, reason: str, *, too_large: bool = False) -> None:
        super().__init__(reason)
        self.too_large = too_large


class ExtractionSession:
    """Holds the result of the latest ingestion run.

    Loading a new file always replaces the previous links in full; nothing is
    merged across runs. The view state is owned by the caller and may be
    swapped at any time without touching the collection.
    """

    def __init__(
        self,
        view: ViewState | None = None,
        *,
        max_upload_bytes: int = MAX_UPLOAD_BYTES,
        locale: str = DEFAULT_LOCALE,
    ) -> None:
        self.view = view or ViewState()
        self.max_upload_bytes = max_upload_bytes
        self.locale = locale
        self.file_name: str | None = None
        self.collection = LinkCollection()

    def load(self, file_name: str, content: bytes) -> IngestResult:
        """Validate, ingest, and extract links from an uploaded file.

        Raises UploadRejectedError when the file is refused up front. A
        ParseError is returned on the result and leaves the session empty.
        """
        reason = validate_upload(file_name, len(content), self.max_upload_bytes)
        if reason:
            raise UploadRejectedError(reason, too_large=file_name.lower().endswith(".csv"))

        self.file_name = file_name
        self.collection = LinkCollection()
        result = ingest(content)
        if result.ok:
            self.collection = LinkCollection(extract_links(result.messages))
        logger.info(
            "Loaded chat export",
            extra={"file_name": file_name, "links": len(self.collection), "parse_error": not result.ok},
        )
        return result

    def reset(self) -> None:
        """Forget the current file, its links, and any filters."""
        self.file_name = None
        self.collection = LinkCollection()
        self.view = ViewState()

    def visible_links(self) -> list[ExtractedLink]:
        return self.collection.view(self.view)

    def users(self) -> list[str]:
        return self.collection.users()

    def stats(self) -> CollectionStats:
        return self.collection.stats(self.view)

    def export(
        self,
        fmt: ExportFormat | str,
        *,
        strip_message_urls: bool = False,
        now: datetime | None = None,
    ) -> ExportFile:
        """Export the currently visible (filtered and sorted) links."""
        return export_links(
            self.visible_links(),
            fmt,
            strip_message_urls=strip_message_urls,
            locale=self.locale,
            now=now,
        )
