"""Links API: upload a chat export, then export or share the extracted links."""

import logging
from urllib.parse import quote

from fastapi import APIRouter, File, HTTPException, Query, Response, UploadFile

from kakaolink.api.schemas import ExportRequest, ExtractResponse, ShareRequest, ShareResponse
from kakaolink.config import get_settings
from kakaolink.export import build_share_text, export_links
from kakaolink.models.export import ExportFile, ExportFormat
from kakaolink.models.link import SortDirection, SortField
from kakaolink.models.view import ViewState
from kakaolink.session import ExtractionSession, UploadRejectedError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/links", tags=["links"])


def _content_disposition(exported: ExportFile) -> str:
    """Attachment header with an ASCII fallback and an RFC 5987 UTF-8 file name."""
    extension = exported.filename.rsplit(".", 1)[-1]
    return f"attachment; filename=\"links.{extension}\"; filename*=UTF-8''{quote(exported.filename)}"


@router.post("/extract", response_model=ExtractResponse)
async def extract_endpoint(
    file: UploadFile = File(...),
    search: str = Query(""),
    user: str = Query(""),
    sort: SortField = Query(SortField.DATE),
    direction: SortDirection = Query(SortDirection.DESC),
) -> ExtractResponse:
    """Parse an uploaded chat export CSV and return its links.

    Each request gets its own session; nothing is kept between uploads.
    """
    settings = get_settings()
    session = ExtractionSession(
        ViewState(search=search, user=user, sort_field=sort, sort_direction=direction),
        max_upload_bytes=settings.max_upload_bytes,
        locale=settings.export_locale,
    )
    content = await file.read()
    file_name = file.filename or ""

    try:
        result = session.load(file_name, content)
    except UploadRejectedError as exc:
        status_code = 413 if exc.too_large else 400
        logger.warning("Upload rejected: %s (%s, %d bytes)", exc, file_name, len(content))
        raise HTTPException(status_code=status_code, detail=str(exc)) from exc

    if result.error is not None:
        raise HTTPException(status_code=422, detail=str(result.error))

    return ExtractResponse(
        file_name=file_name,
        links=session.visible_links(),
        users=session.users(),
        stats=session.stats(),
    )


@router.post("/export/{fmt}")
async def export_endpoint(fmt: ExportFormat, request: ExportRequest) -> Response:
    """Serialize the given links and return them as a file download."""
    settings = get_settings()
    strip = settings.strip_message_urls if request.strip_message_urls is None else request.strip_message_urls
    exported = export_links(
        request.links,
        fmt,
        strip_message_urls=strip,
        locale=request.locale or settings.export_locale,
    )
    return Response(
        content=exported.content,
        media_type=exported.media_type,
        headers={"Content-Disposition": _content_disposition(exported)},
    )


@router.post("/share", response_model=ShareResponse)
async def share_endpoint(request: ShareRequest) -> ShareResponse:
    """Build the plain-text summary a client hands to a share sheet or clipboard."""
    settings = get_settings()
    text = build_share_text(request.links, limit=request.limit, locale=request.locale or settings.export_locale)
    return ShareResponse(text=text)
