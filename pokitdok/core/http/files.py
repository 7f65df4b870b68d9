"""File parts for multipart/form-data uploads."""
from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path

from .exceptions import FileEncodingError


@dataclass(frozen=True)
class FileData:
    """File information for transmission.

    The file is read when the request body is encoded, not when this object
    is created, so the path must still be readable at that point.

    Attributes:
        path: Filesystem path to the file
        content_type: Content type transmitted with the file
    """
    path: str
    content_type: str

    @property
    def filename(self) -> str:
        return Path(self.path).name

    def encode(self) -> bytes:
        """Encode the file as one multipart fragment (headers, blank line, bytes, CRLF).

        Raises:
            FileEncodingError: If the file cannot be read
        """
        try:
            content = Path(self.path).read_bytes()
        except OSError as e:
            raise FileEncodingError(self.path, f"Failed to encode file for http request ({e.strerror})") from e

        header = (
            f'Content-Disposition: form-data; name="file"; filename="{self.filename}"\r\n'
            f"Content-Type: {self.content_type}\r\n\r\n"
        )
        return header.encode("utf-8") + content + b"\r\n"
