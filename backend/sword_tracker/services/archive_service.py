"""
Sword Tracker Backend: Archive Service
======================================

What:  Locates the pre-built source archive served by GET /api/download and
       renders the static landing page served by GET /download.
How:   Existence checks go through aiofiles so the event loop never blocks on
       the file system; streaming itself is left to Starlette's FileResponse.
Who:   Called by the download routes.

The landing page is a fixed HTML document. The only value embedded in it is
the archive file name (HTML-escaped); there is no templating engine.
"""

import html
import logging
from pathlib import Path
from typing import Optional

from aiofiles import os as aio_os

from sword_tracker.config import settings
from sword_tracker.exceptions import FileStorageError, NotFoundError

logger = logging.getLogger(__name__)

ARCHIVE_MEDIA_TYPE = "application/gzip"


class ArchiveService:
    """
    Access to the single downloadable archive.

    Args:
        archive_path: Override the configured ARCHIVE_PATH (used in tests).
    """

    def __init__(self, archive_path: Optional[str] = None):
        self.archive_path = Path(archive_path or settings.archive_path)

    @property
    def filename(self) -> str:
        return self.archive_path.name

    async def locate_archive(self) -> Path:
        """
        Resolve the archive on disk.

        Returns:
            Absolute path of an existing regular file.

        Raises:
            NotFoundError:    No file at the configured path (→ 404)
            FileStorageError: The file system refused the check (→ 500)
        """
        try:
            exists = await aio_os.path.isfile(self.archive_path)
        except OSError as e:
            logger.error("Cannot inspect archive %s: %s", self.archive_path, str(e))
            raise FileStorageError(
                message="Download error",
                context={"path": str(self.archive_path), "os_error": str(e)},
            )

        if not exists:
            logger.info("Archive requested but missing: %s", self.archive_path)
            raise NotFoundError(resource="Archive file")

        return self.archive_path.resolve()

    def render_download_page(self) -> str:
        """Fixed landing page describing the archive and how to run it."""
        return DOWNLOAD_PAGE_TEMPLATE.format(filename=html.escape(self.filename))


DOWNLOAD_PAGE_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>Download Sword Tracker - Chess Learning App</title>
    <script src="https://cdn.tailwindcss.com"></script>
</head>
<body class="bg-gray-50 min-h-screen flex items-center justify-center">
    <div class="max-w-2xl mx-auto p-6">
        <div class="bg-white rounded-lg shadow-lg p-8">
            <div class="text-center mb-8">
                <h1 class="text-3xl font-bold text-gray-900 mb-2">&#9876;&#65039; Sword Tracker</h1>
                <p class="text-gray-600">Chess Learning &amp; Progress Tracking Application</p>
            </div>

            <div class="mb-6">
                <h2 class="text-xl font-semibold mb-4">Source Code Archive</h2>
                <div class="bg-gray-50 rounded p-4 mb-4">
                    <p class="text-sm text-gray-700 mb-2">
                        <strong>File:</strong> {filename}
                    </p>
                    <p class="text-sm text-gray-700">
                        <strong>Contents:</strong> React front-end and Python (FastAPI) backend
                    </p>
                </div>

                <div class="flex gap-4">
                    <a href="/api/download"
                       class="bg-blue-600 hover:bg-blue-700 text-white font-medium py-2 px-4 rounded-md transition-colors"
                       download="{filename}">
                        Download Archive
                    </a>
                    <a href="/"
                       class="bg-gray-200 hover:bg-gray-300 text-gray-800 font-medium py-2 px-4 rounded-md transition-colors">
                        Back to App
                    </a>
                </div>
            </div>

            <div class="border-t pt-6">
                <h3 class="font-semibold mb-3">Setup Instructions</h3>
                <ol class="list-decimal list-inside space-y-2 text-sm text-gray-700">
                    <li>Extract the archive: <code class="bg-gray-100 px-1 rounded">tar -xzf {filename}</code></li>
                    <li>Navigate to folder: <code class="bg-gray-100 px-1 rounded">cd sword-tracker</code></li>
                    <li>Install the backend: <code class="bg-gray-100 px-1 rounded">pip install -e .</code></li>
                    <li>Create the schema: <code class="bg-gray-100 px-1 rounded">cd backend &amp;&amp; alembic upgrade head</code></li>
                    <li>Start the server: <code class="bg-gray-100 px-1 rounded">uvicorn sword_tracker.main:app --port 5000</code></li>
                </ol>
            </div>

            <div class="border-t pt-6 mt-6">
                <h3 class="font-semibold mb-3">Features Included</h3>
                <div class="grid grid-cols-2 gap-2 text-sm text-gray-700">
                    <div>&bull; Dashboard with stats</div>
                    <div>&bull; Daily goals management</div>
                    <div>&bull; Course progress tracking</div>
                    <div>&bull; ELO rating system</div>
                    <div>&bull; Game analysis with chess engine</div>
                    <div>&bull; Weekly/monthly/yearly goals</div>
                    <div>&bull; Interactive chess board</div>
                    <div>&bull; Responsive design</div>
                </div>
            </div>
        </div>
    </div>
</body>
</html>
"""

archive_service = ArchiveService()
