import logging
import os
import re
import secrets
import time

from django.conf import settings
from django.core.files.storage import default_storage

from registrations.exceptions import UploadRejected

logger = logging.getLogger(__name__)

ALLOWED_EXTENSIONS = {".jpeg", ".jpg", ".png", ".pdf"}
ALLOWED_CONTENT_TYPES = re.compile(r"jpeg|jpg|png|pdf")
FILE_PREFIX = "idFile"


class UploadPolicy:
    """Screens identity documents and keeps them in the flat upload directory."""

    def __init__(self, storage=None, max_size: int = None):
        self.storage = storage or default_storage
        self.max_size = max_size if max_size is not None else settings.MAX_UPLOAD_SIZE

    def screen(self, uploaded_file) -> None:
        """
        Reject files with an unsupported type or over the size limit.

        Args:
            uploaded_file: Django UploadedFile from request.FILES

        Raises:
            UploadRejected: with a message telling type and size failures apart
        """
        extension = os.path.splitext(uploaded_file.name or "")[1].lower()
        content_type = (uploaded_file.content_type or "").lower()

        if extension not in ALLOWED_EXTENSIONS or not ALLOWED_CONTENT_TYPES.search(content_type):
            logger.warning(
                f"Rejected upload {uploaded_file.name!r} with content type {content_type!r}"
            )
            raise UploadRejected("Only images (JPEG, JPG, PNG) and PDFs are allowed!")

        if uploaded_file.size > self.max_size:
            logger.warning(f"Rejected upload {uploaded_file.name!r}: {uploaded_file.size} bytes")
            raise UploadRejected(
                f"File too large. Maximum size is {self.max_size // (1024 * 1024)} MB."
            )

    def generate_name(self, original_name: str) -> str:
        extension = os.path.splitext(original_name)[1].lower()
        millis = int(time.time() * 1000)
        return f"{FILE_PREFIX}-{millis}-{secrets.randbelow(10**9)}{extension}"

    def store(self, uploaded_file) -> str:
        """
        Save an accepted file and return the path it is served under.

        Returns:
            str: relative access path, e.g. ``/uploads/idFile-1700000000000-123456789.pdf``
        """
        name = self.storage.save(self.generate_name(uploaded_file.name), uploaded_file)
        logger.info(f"Stored upload {uploaded_file.name!r} as {name}")
        return f"{settings.MEDIA_URL}{name}"

    def delete(self, file_url: str) -> bool:
        """
        Remove the file behind a stored access path.

        Returns:
            bool: True if a file was removed, False if there was nothing to remove
        """
        if not file_url:
            return False

        name = file_url
        if name.startswith(settings.MEDIA_URL):
            name = name[len(settings.MEDIA_URL) :]
        name = name.lstrip("/")

        if not name or not self.storage.exists(name):
            logger.info(f"Stored file {file_url} already gone, nothing to delete")
            return False

        self.storage.delete(name)
        logger.info(f"Deleted stored file {file_url}")
        return True
