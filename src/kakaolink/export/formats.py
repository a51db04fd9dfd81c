"""CSV, plain-text, and JSON serialization of extracted links.

Each exporter returns an ExportFile holding the encoded bytes and a suggested
file name. Writing the file, triggering a download, or sharing it is left to
the caller. Records are emitted in the order given; pass a filtered/sorted
view to export only part of a collection.
"""

import csv
import io
import json
import logging
from collections.abc import Sequence
from datetime import datetime, timezone

from kakaolink.export.labels import DEFAULT_LOCALE, get_labels
from kakaolink.extraction.urls import strip_urls
from kakaolink.models.export import ExportDocument, ExportedLink, ExportFile, ExportFormat
from kakaolink.models.link import ExtractedLink

logger = logging.getLogger(__name__)

BOM = "\ufeff"

# Column order shared by the CSV header and the JSON link objects
EXPORT_FIELDS = ("url", "domain", "user", "date", "message")

MEDIA_TYPES = {
    ExportFormat.CSV: "text/csv; charset=utf-8",
    ExportFormat.TXT: "text/plain; charset=utf-8",
    ExportFormat.JSON: "application/json; charset=utf-8",
}


def _now(now: datetime | None) -> datetime:
    return now if now is not None else datetime.now(timezone.utc)


def _message(link: ExtractedLink, strip_message_urls: bool) -> str:
    return strip_urls(link.message) if strip_message_urls else link.message


def export_filename(fmt: ExportFormat, locale: str = DEFAULT_LOCALE, now: datetime | None = None) -> str:
    """Suggested download name, e.g. ``카카오톡_링크_추출_2024-01-01.csv`` (UTC date)."""
    day = _now(now).astimezone(timezone.utc).strftime("%Y-%m-%d")
    return f"{get_labels(locale)['filename_prefix']}_{day}.{ExportFormat(fmt).value}"


def iso_timestamp(now: datetime | None = None) -> str:
    """ISO-8601 UTC timestamp with millisecond precision, e.g. ``2024-01-01T10:00:00.000Z``."""
    moment = _now(now).astimezone(timezone.utc)
    return f"{moment:%Y-%m-%dT%H:%M:%S}.{moment.microsecond // 1000:03d}Z"


def report_timestamp(now: datetime | None = None, locale: str = DEFAULT_LOCALE) -> str:
    """Human-readable local time for the text report header."""
    moment = _now(now).astimezone()
    if locale.lower() == "ko":
        meridiem = "오전" if moment.hour < 12 else "오후"
        hour = moment.hour % 12 or 12
        return f"{moment.year}. {moment.month}. {moment.day}. {meridiem} {hour}:{moment:%M:%S}"
    return moment.strftime("%Y-%m-%d %H:%M:%S")


def export_csv(
    links: Sequence[ExtractedLink],
    *,
    strip_message_urls: bool = False,
    locale: str = DEFAULT_LOCALE,
    now: datetime | None = None,
) -> ExportFile:
    """Serialize links as a BOM-prefixed UTF-8 CSV with localized column headers."""
    columns = get_labels(locale)["columns"]
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\r\n")
    writer.writerow([columns[name] for name in EXPORT_FIELDS])
    for link in links:
        writer.writerow([link.url, link.domain, link.user, link.date, _message(link, strip_message_urls)])

    return ExportFile(
        content=(BOM + buffer.getvalue()).encode("utf-8"),
        filename=export_filename(ExportFormat.CSV, locale, now),
        media_type=MEDIA_TYPES[ExportFormat.CSV],
    )


def export_txt(
    links: Sequence[ExtractedLink],
    *,
    strip_message_urls: bool = False,
    locale: str = DEFAULT_LOCALE,
    now: datetime | None = None,
) -> ExportFile:
    """Serialize links as a numbered plain-text report."""
    labels = get_labels(locale)
    columns = labels["columns"]

    lines: list[str] = [
        labels["report_title"],
        "",
        f"{labels['exported_at']}: {report_timestamp(now, locale)}",
        f"{labels['total_links']}: {len(links)}",
        "",
    ]
    for index, link in enumerate(links, start=1):
        lines.append(f"{index}. {link.url}")
        lines.append(f"   {columns['domain']}: {link.domain}")
        lines.append(f"   {columns['user']}: {link.user}")
        lines.append(f"   {columns['date']}: {link.date}")
        lines.append(f"   {columns['message']}: {_message(link, strip_message_urls)}")
        lines.append("")

    return ExportFile(
        # Header block and every entry end with a blank line
        content=("\n".join(lines) + "\n").encode("utf-8"),
        filename=export_filename(ExportFormat.TXT, locale, now),
        media_type=MEDIA_TYPES[ExportFormat.TXT],
    )


def build_export_document(
    links: Sequence[ExtractedLink],
    *,
    strip_message_urls: bool = False,
    now: datetime | None = None,
) -> ExportDocument:
    return ExportDocument(
        export_date=iso_timestamp(now),
        total_links=len(links),
        links=[
            ExportedLink(
                url=link.url,
                domain=link.domain,
                user=link.user,
                date=link.date,
                message=_message(link, strip_message_urls),
            )
            for link in links
        ],
    )


def export_json(
    links: Sequence[ExtractedLink],
    *,
    strip_message_urls: bool = False,
    locale: str = DEFAULT_LOCALE,
    now: datetime | None = None,
) -> ExportFile:
    """Serialize links as ``{"exportDate", "totalLinks", "links": [...]}``.

    Output is indented by two spaces and keeps non-ASCII text unescaped.
    """
    document = build_export_document(links, strip_message_urls=strip_message_urls, now=now)
    payload = json.dumps(document.model_dump(by_alias=True), ensure_ascii=False, indent=2)
    return ExportFile(
        content=payload.encode("utf-8"),
        filename=export_filename(ExportFormat.JSON, locale, now),
        media_type=MEDIA_TYPES[ExportFormat.JSON],
    )


_EXPORTERS = {
    ExportFormat.CSV: export_csv,
    ExportFormat.TXT: export_txt,
    ExportFormat.JSON: export_json,
}


def export_links(
    links: Sequence[ExtractedLink],
    fmt: ExportFormat | str,
    *,
    strip_message_urls: bool = False,
    locale: str = DEFAULT_LOCALE,
    now: datetime | None = None,
) -> ExportFile:
    """Dispatch to the exporter for ``fmt``. Raises ValueError for unknown formats."""
    fmt = ExportFormat(fmt)
    exported = _EXPORTERS[fmt](links, strip_message_urls=strip_message_urls, locale=locale, now=now)
    logger.info(
        "Exported links",
        extra={"format": fmt.value, "links": len(links), "bytes": len(exported.content)},
    )
    return exported


def import_json(content: bytes | str) -> list[ExtractedLink]:
    """Rebuild ExtractedLink records from a JSON export.

    Ids are regenerated as ``"{index}-0"``; every other field is taken as stored.
    Raises pydantic.ValidationError when the document does not match the schema.
    """
    if isinstance(content, bytes):
        content = content.decode("utf-8-sig")
    document = ExportDocument.model_validate_json(content)
    return [
        ExtractedLink(id=f"{index}-0", **item.model_dump())
        for index, item in enumerate(document.links)
    ]
