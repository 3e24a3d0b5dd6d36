"""
Sword Tracker Backend: Archive Download Routes
==============================================

What:  GET /api/download streams the source archive; GET /download serves the
       HTML landing page that links to it.
Who:   Browsers following the "Download" link in the app footer.

Caching:
    The archive is rebuilt in place on each release, so neither response is
    cacheable by shared caches.
"""

import logging

from fastapi import APIRouter
from fastapi.responses import FileResponse, HTMLResponse

from sword_tracker.schemas.common import ErrorResponse
from sword_tracker.services import archive_service as archive
from sword_tracker.services.archive_service import ARCHIVE_MEDIA_TYPE

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Download"])


@router.get(
    "/api/download",
    response_class=FileResponse,
    responses={
        200: {"description": "Archive bytes", "content": {ARCHIVE_MEDIA_TYPE: {}}},
        404: {"description": "Archive file not found", "model": ErrorResponse},
    },
    summary="Download the source archive",
)
async def download_archive() -> FileResponse:
    """
    Stream the archive as an attachment.

    FileResponse sends the file in chunks from a worker thread and sets
    Content-Length, Last-Modified and ETag from the file's stat.
    """
    service = archive.archive_service
    path = await service.locate_archive()
    logger.info("Serving archive %s", path)
    return FileResponse(
        path=str(path),
        media_type=ARCHIVE_MEDIA_TYPE,
        filename=service.filename,
        headers={"Cache-Control": "no-cache"},
    )


@router.get(
    "/download",
    response_class=HTMLResponse,
    summary="Archive landing page",
)
async def download_page() -> HTMLResponse:
    return HTMLResponse(
        content=archive.archive_service.render_download_page(),
        headers={"Cache-Control": "no-cache"},
    )
