"""Local filesystem storage for uploaded images.

Storage layout:
    <upload_dir>/<epoch-millis>_<base><ext>    — served publicly under /uploads/
"""

import logging
from pathlib import Path

from pressroom.application.interfaces import FileStorage, StoredFile

logger = logging.getLogger(__name__)


class LocalFileStorage(FileStorage):
    """Infrastructure adapter for local file storage."""

    def __init__(self, upload_dir: str):
        self._upload_dir = Path(upload_dir)

    async def store_file(self, content: bytes, filename: str) -> StoredFile:
        """Write ``content`` to ``<upload_dir>/<filename>``.

        The caller chooses the final name; only its last path component is
        used so nothing can be written outside the upload directory.
        """
        self._upload_dir.mkdir(parents=True, exist_ok=True)

        safe_name = Path(filename).name
        dest_path = self._upload_dir / safe_name
        dest_path.write_bytes(content)

        logger.info("Stored file: %s (%d bytes)", dest_path, len(content))

        return StoredFile(filename=safe_name, file_size=len(content))
