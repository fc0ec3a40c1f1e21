# forumkit - Ports (Protocol Interfaces)
# Abstract interfaces for adapters; no implementations here

from src.core.ports.storage import FileUrlPort, InvalidFileNameError, StorageError

__all__ = [
    # Storage
    "FileUrlPort",
    "InvalidFileNameError",
    "StorageError",
]
