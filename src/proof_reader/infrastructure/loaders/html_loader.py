"""HTML document loader: implements DocumentLoaderPort with BeautifulSoup."""

from __future__ import annotations

import logging
from pathlib import Path

from bs4 import BeautifulSoup

from proof_reader.domain.errors import IoError
from proof_reader.domain.ports.document_loader import DocumentLoaderPort

logger = logging.getLogger(__name__)


class HtmlDocumentLoader(DocumentLoaderPort):
    """Read a UTF-8 HTML file and parse it with the stdlib-backed parser."""

    def __init__(self, parser: str = "html.parser") -> None:
        self._parser = parser

    def load(self, path: str | Path) -> BeautifulSoup:
        try:
            contents = Path(path).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            logger.debug("Could not read %s: %s", path, exc)
            raise IoError(exc) from exc
        return BeautifulSoup(contents, self._parser)
