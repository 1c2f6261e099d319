"""Port: turn a file on disk into a queryable document tree."""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from bs4 import BeautifulSoup


class DocumentLoaderPort(ABC):
    """Contract for reading and parsing one document."""

    @abstractmethod
    def load(self, path: str | Path) -> "BeautifulSoup":
        """Read *path* and return its parsed tree.

        Raises ``IoError`` when the file cannot be read or decoded.
        """
        ...
