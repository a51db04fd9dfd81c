"""CSV ingestion for chat exports.

Decodes the uploaded bytes, resolves the timestamp/author/message columns from
the header row by name, and returns the eligible messages in file order.
Malformed input is reported as a ParseError on the result, never raised.
"""

import csv
import io
import logging
from dataclasses import dataclass, field

from kakaolink.config import MAX_UPLOAD_BYTES
from kakaolink.models.chat import ChatMessage

logger = logging.getLogger(__name__)

# Header names accepted for each required column (compared case-insensitively)
TIMESTAMP_HEADERS = ("date", "날짜", "timestamp", "time")
AUTHOR_HEADERS = ("user", "사용자", "author", "name")
TEXT_HEADERS = ("message", "메시지", "text", "content")

# The stdlib default (128 KiB) would reject long messages well under the upload limit
csv.field_size_limit(max(csv.field_size_limit(), MAX_UPLOAD_BYTES))


class ParseError(Exception):
    """The input could not be read as delimited tabular text."""


@dataclass
class IngestResult:
    """Outcome of one ingestion run. ``error`` set means ``messages`` is empty."""

    messages: list[ChatMessage] = field(default_factory=list)
    error: ParseError | None = None
    rows_read: int = 0

    @property
    def ok(self) -> bool:
        return self.error is None


def validate_upload(filename: str, size: int, max_bytes: int = MAX_UPLOAD_BYTES) -> str | None:
    """Return a rejection reason for an upload, or None if it may be parsed.

    Only ``.csv`` files (any case) up to ``max_bytes`` are accepted.
    """
    if not filename.lower().endswith(".csv"):
        return "Only .csv files can be uploaded"
    if size > max_bytes:
        return f"File exceeds the {max_bytes // (1024 * 1024)} MB upload limit"
    return None


def _resolve_column(header: list[str], names: tuple[str, ...]) -> int | None:
    """Find the first header position whose name matches one of ``names``."""
    for position, value in enumerate(header):
        if value.strip().lower() in names:
            return position
    return None


def _decode(content: bytes) -> str:
    """Decode UTF-8, dropping a leading byte-order mark."""
    try:
        return content.decode("utf-8-sig")
    except UnicodeDecodeError as exc:
        raise ParseError(f"File is not valid UTF-8: {exc.reason} at byte {exc.start}") from exc


def _read_messages(text: str) -> tuple[list[ChatMessage], int]:
    if len(text) > csv.field_size_limit():
        # max_upload_bytes may be configured above the module-level limit
        csv.field_size_limit(len(text))
    reader = csv.reader(io.StringIO(text, newline=""), strict=True)

    header = next(reader, None)
    if header is None:
        return [], 0

    positions = {
        "timestamp": _resolve_column(header, TIMESTAMP_HEADERS),
        "author": _resolve_column(header, AUTHOR_HEADERS),
        "text": _resolve_column(header, TEXT_HEADERS),
    }
    missing = [name for name, position in positions.items() if position is None]
    if missing:
        raise ParseError(f"Header row is missing required column(s): {', '.join(missing)}")

    messages: list[ChatMessage] = []
    rows_read = 0
    for row in reader:
        rows_read += 1
        values = {name: row[position] if position < len(row) else "" for name, position in positions.items()}
        message = ChatMessage(**values, row=rows_read - 1)
        # Rows with a missing field are skipped, not reported
        if message.is_eligible:
            messages.append(message)
    return messages, rows_read


def ingest(content: bytes) -> IngestResult:
    """Parse a chat export CSV into an ordered list of eligible messages.

    The first row is the header; Date/User/Message columns (or their Korean
    and English aliases) may appear in any order. On a ParseError the result
    carries the error and no messages.
    """
    try:
        messages, rows_read = _read_messages(_decode(content))
    except csv.Error as exc:
        error = ParseError(f"CSV could not be parsed: {exc}")
        logger.warning("CSV parsing failed", extra={"error": str(error)})
        return IngestResult(error=error)
    except ParseError as exc:
        logger.warning("CSV parsing failed", extra={"error": str(exc)})
        return IngestResult(error=exc)

    logger.info(
        "Ingested chat export",
        extra={"rows": rows_read, "messages": len(messages), "skipped": rows_read - len(messages)},
    )
    return IngestResult(messages=messages, rows_read=rows_read)
