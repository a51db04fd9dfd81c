"""Chat export ingestion: upload validation and CSV parsing.

Public API:
    ingest(content) -> IngestResult
        Parse raw CSV bytes into eligible ChatMessages, reporting ParseError.
    validate_upload(filename, size) -> str | None
        Reject non-CSV or oversized files before parsing.
"""

from kakaolink.ingestion.csv_reader import IngestResult, ParseError, ingest, validate_upload

__all__ = [
    "IngestResult",
    "ParseError",
    "ingest",
    "validate_upload",
]
