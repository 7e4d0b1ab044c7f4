import logging
from typing import Optional
from urllib.parse import quote

import requests

from app.core.config import settings

logger = logging.getLogger(__name__)


class StorageError(RuntimeError):
    """Raised when the object store rejects an upload."""


class VideoStorageService:
    """
    Client for a Supabase-compatible storage REST API holding exercise videos.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        service_key: Optional[str] = None,
        bucket: Optional[str] = None,
        timeout: int = 120,
    ):
        self.base_url = (base_url or settings.STORAGE_URL).rstrip("/")
        self.service_key = service_key if service_key is not None else settings.STORAGE_SERVICE_KEY
        self.bucket = bucket or settings.VIDEO_BUCKET
        self.timeout = timeout

    def public_url(self, filename: str) -> str:
        return f"{self.base_url}/storage/v1/object/public/{self.bucket}/{quote(filename)}"

    def upload(self, filename: str, content: bytes, content_type: str) -> str:
        """
        Upload a file to the bucket without overwriting existing objects.

        Args:
            filename: Object name inside the bucket
            content: Raw file bytes
            content_type: MIME type stored with the object

        Returns:
            The object's public URL

        Raises:
            StorageError: If the storage API answers with an error status
        """
        headers = {
            "Authorization": f"Bearer {self.service_key}",
            "apikey": self.service_key,
            "Content-Type": content_type,
            "x-upsert": "false",
        }
        # Names are percent-encoded so "#" and "?" stay part of the object path
        url = f"{self.base_url}/storage/v1/object/{self.bucket}/{quote(filename)}"
        response = requests.post(url, headers=headers, data=content, timeout=self.timeout)
        if not response.ok:
            logger.error("Storage upload of %s failed: %s %s", filename, response.status_code, response.text)
            raise StorageError(f"Storage upload failed ({response.status_code}): {response.text}")

        logger.info("Uploaded %s (%d bytes) to bucket %s", filename, len(content), self.bucket)
        return self.public_url(filename)
