"""
Local filesystem storage adapter.

Implements FileUrlPort using the local filesystem. Files live under
{base_path}/{owner_id}/{file_name} and are served from
{public_prefix}/{owner_id}/{file_name}.

Invariants:
- File names never escape the owner's folder
- build_file_url is pure string work; it does not check the file exists
"""

from __future__ import annotations

import logging
from pathlib import Path
from uuid import UUID

from src.core.ports.storage import InvalidFileNameError

logger = logging.getLogger(__name__)


class LocalFileStorage:
    """
    Local filesystem implementation of FileUrlPort.

    Resize/crop query suffixes are passed through for the image handler
    mounted at public_prefix.
    """

    def __init__(
        self,
        base_path: str | Path,
        *,
        public_prefix: str = "/content/uploads",
        create_dirs: bool = True,
    ) -> None:
        """
        Initialize local file storage.

        Args:
            base_path: Root directory for uploaded files
            public_prefix: URL prefix the files are served under
            create_dirs: Whether to create the root directory if missing
        """
        self.base_path = Path(base_path)
        self.public_prefix = "/" + public_prefix.strip("/") if public_prefix.strip("/") else ""

        if create_dirs:
            self.base_path.mkdir(parents=True, exist_ok=True)

    def _safe_name(self, file_name: str) -> str:
        """Reject names that would leave the owner folder."""
        name = file_name.strip()
        if not name or name in {".", ".."} or "/" in name or "\\" in name or "\x00" in name:
            raise InvalidFileNameError(file_name)
        return name

    def _file_path(self, owner_id: UUID, file_name: str) -> Path:
        return self.base_path / str(owner_id) / self._safe_name(file_name)

    def build_file_url(
        self,
        owner_id: UUID,
        path_separator: str,
        file_name: str,
        query_suffix: str,
    ) -> str:
        """Public URL for a stored file, query suffix appended verbatim."""
        name = self._safe_name(file_name)
        return f"{self.public_prefix}/{owner_id}{path_separator}{name}{query_suffix}"

    def save(self, owner_id: UUID, file_name: str, data: bytes) -> str:
        """
        Store file bytes for an owner, replacing any previous file of that name.

        Returns the stored file name (what entities keep in their image field).
        """
        path = self._file_path(owner_id, file_name)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, "wb") as f:
            f.write(data)

        logger.info("Stored %s (%d bytes) for %s", path.name, len(data), owner_id)
        return path.name

    def exists(self, owner_id: UUID, file_name: str) -> bool:
        """Check if a file is stored for the owner."""
        return self._file_path(owner_id, file_name).is_file()

    def delete(self, owner_id: UUID, file_name: str) -> bool:
        """
        Delete a stored file.

        Returns:
            True if deleted, False if the file didn't exist
        """
        path = self._file_path(owner_id, file_name)
        if not path.is_file():
            return False
        path.unlink()
        return True
