"""Abstract file storage interface (port) for uploaded images."""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass
class StoredFile:
    """Result of storing a single file."""

    filename: str
    file_size: int


class FileStorage(ABC):
    """Port for writing uploaded files somewhere publicly servable."""

    @abstractmethod
    async def store_file(self, content: bytes, filename: str) -> StoredFile:
        """Write ``content`` under exactly ``filename`` and describe the result."""
        ...
