"""Image upload handling — validates an uploaded file and stores it for public serving.

A write request carries at most one file, under the ``image`` form field.
``single_upload`` enforces that on the parsed form, validation (content type,
size) happens in ``read_image`` without touching disk, and ``save`` writes the
file under a collision-resistant name:

    <epoch-millis>_<original_base_with_underscores><ext>
"""

import re
import time
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import PurePath

from starlette.datastructures import FormData, UploadFile

from pressroom.application.interfaces import FileStorage
from pressroom.domain.exceptions import (
    PayloadTooLargeError,
    UnexpectedUploadError,
    UnsupportedMediaTypeError,
)
from pressroom.infrastructure.logging.colored_logger import WriteLogger, WriteStage

wlog = WriteLogger("ImageUploadService")

IMAGE_FIELD = "image"

_IMAGE_MIME = re.compile(r"^image/")
_WHITESPACE = re.compile(r"\s+")


@dataclass
class ImageUpload:
    """An accepted but not yet stored image."""

    filename: str
    content_type: str
    content: bytes


def storage_name(original: str, millis: int) -> str:
    """Build the stored filename for an upload.

    Directory components are dropped and whitespace runs in the base name
    become underscores; the extension is kept as-is.
    """
    path = PurePath(original.replace("\\", "/"))
    base = _WHITESPACE.sub("_", path.stem)
    return f"{millis}_{base}{path.suffix}"


class ImageUploadService:
    """Accepts a single image per request and stores it via the FileStorage port."""

    def __init__(
        self,
        storage: FileStorage,
        max_size_bytes: int = 5 * 1024 * 1024,
        url_prefix: str = "/uploads",
        clock: Callable[[], float] = time.time,
    ):
        self._storage = storage
        self._max_size_bytes = max_size_bytes
        self._url_prefix = url_prefix.rstrip("/")
        self._clock = clock

    def single_upload(self, form: FormData) -> UploadFile | None:
        """Pick the one file a write form may carry.

        File parts with an empty filename (a file input left blank) are
        ignored. A second ``image`` part, or a file under any other field,
        raises UnexpectedUploadError.
        """
        files = [
            (name, value)
            for name, value in form.multi_items()
            if isinstance(value, UploadFile) and value.filename
        ]
        if len(files) > 1 or any(name != IMAGE_FIELD for name, _ in files):
            error = UnexpectedUploadError([name for name, _ in files], expected=IMAGE_FIELD)
            wlog.step_error(WriteStage.UPLOAD, f"Rejected {len(files)} file part(s)", error=error)
            raise error
        return files[0][1] if files else None

    async def read_image(self, upload: UploadFile | None) -> ImageUpload | None:
        """Validate an uploaded file. Returns None when no file was attached."""
        if upload is None or not upload.filename:
            return None

        content_type = upload.content_type or ""
        if not _IMAGE_MIME.match(content_type):
            error = UnsupportedMediaTypeError(content_type)
            wlog.step_error(WriteStage.UPLOAD, f"Rejected '{upload.filename}'", error=error)
            raise error

        # One byte past the limit is enough to know it is too large.
        content = await upload.read(self._max_size_bytes + 1)
        if len(content) > self._max_size_bytes:
            error = PayloadTooLargeError(len(content), self._max_size_bytes)
            wlog.step_error(WriteStage.UPLOAD, f"Rejected '{upload.filename}'", error=error)
            raise error

        wlog.step_complete(
            WriteStage.UPLOAD, f"Accepted '{upload.filename}'", content_type=content_type, size_bytes=len(content)
        )
        return ImageUpload(filename=upload.filename, content_type=content_type, content=content)

    async def save(self, image: ImageUpload) -> str:
        """Store an accepted image and return its public URL."""
        filename = storage_name(image.filename, int(self._clock() * 1000))
        with wlog.timed_step(WriteStage.STORAGE, f"Storing '{image.filename}'"):
            stored = await self._storage.store_file(image.content, filename)

        url = f"{self._url_prefix}/{stored.filename}"
        wlog.step_complete(WriteStage.STORAGE, f"Serving at {url}", size_bytes=stored.file_size)
        return url
