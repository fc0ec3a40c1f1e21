"""
Storage backend port.

Protocol for the pluggable component that turns a stored file reference into
a servable URL. Implementations: local filesystem (now), CDN/image-resizer
backends (future).

Invariants:
- The resolver only calls build_file_url; it never touches the file store.
- One backend instance is shared by every caller in the process.
"""

from __future__ import annotations

from typing import Protocol
from uuid import UUID


class FileUrlPort(Protocol):
    """
    Storage backend capability consumed by the image URL resolver.

    The query suffix carries on-the-fly resize/crop parameters and is passed
    through untouched.
    """

    def build_file_url(
        self,
        owner_id: UUID,
        path_separator: str,
        file_name: str,
        query_suffix: str,
    ) -> str:
        """
        Build a display URL for a stored file.

        Args:
            owner_id: Entity owning the file (member, category)
            path_separator: Separator between owner folder and file name
            file_name: Stored file name
            query_suffix: Query string appended verbatim (e.g. "?width=50")

        Returns:
            Absolute or site-relative URL
        """
        ...


class StorageError(Exception):
    """Base class for storage errors."""


class InvalidFileNameError(StorageError):
    """Raised when a file name would escape the owner's folder."""

    def __init__(self, file_name: str) -> None:
        self.file_name = file_name
        super().__init__(f"Invalid file name: {file_name!r}")
