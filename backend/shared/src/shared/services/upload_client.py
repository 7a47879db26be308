"""Client for the image upload endpoint used by the host listing form.

The endpoint's response body is ignored; a successful POST only signals
that the upload control has finished.
"""

import logging

import httpx

from shared.config import get_settings

logger = logging.getLogger(__name__)


class ImageUploadError(Exception):
    """Raised when the upload endpoint cannot be reached or rejects the file."""


class ImageUploadClient:
    """Posts one image file as multipart form data."""

    def __init__(
        self,
        url: str | None = None,
        *,
        http_client: httpx.Client | None = None,
    ) -> None:
        settings = get_settings()
        self._url = url or settings.image_upload_url
        self._http = http_client or httpx.Client(timeout=settings.request_timeout)

    def upload(self, filename: str, content: bytes, content_type: str) -> None:
        """Upload a file under the ``image`` form field.

        Raises:
            ImageUploadError: On network failure or a non-2xx response.
        """
        logger.info("Uploading image %s (%d bytes)", filename, len(content))
        try:
            response = self._http.post(
                self._url,
                files={"image": (filename, content, content_type)},
            )
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise ImageUploadError(f"Image upload failed: {e}") from e

        if response.is_error:
            raise ImageUploadError(
                f"Image upload endpoint returned HTTP {response.status_code}"
            )

    def close(self) -> None:
        self._http.close()
