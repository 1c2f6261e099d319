"""Base interface for proof-reading rules.

Every rule follows the same contract:
  1. Receives the file path and its parsed document
  2. Returns ``None`` when the file complies, raises a ``CheckError`` otherwise

Rules are stateless and never mutate the document, so one instance is
shared by every worker.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from pathlib import Path
from typing import Optional

from bs4 import BeautifulSoup, Tag

from proof_reader.domain.errors import AccessibilityError, ContentError


class RuleCategory(str, Enum):
    """Broad category a rule belongs to."""

    LOCATION = "location"
    CONTENT = "content"
    ACCESSIBILITY = "accessibility"


class BaseRule(ABC):
    """Abstract base for every rule in the pipeline.

    Subclasses must implement ``check(path, document)``.  Rules that only
    look at the path set ``requires_document = False`` so the pipeline can
    run them before the file is read.
    """

    requires_document: bool = True

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable name used in logs."""

    @property
    @abstractmethod
    def category(self) -> RuleCategory:
        """Category of policy this rule enforces."""

    @abstractmethod
    def check(self, path: str | Path, document: Optional[BeautifulSoup]) -> None:
        """Raise a ``CheckError`` if *document* at *path* violates the rule."""

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name!r}>"

    # Convenience helper used by concrete content rules
    def _content_error(self, path: str | Path, offender: str, description: str) -> ContentError:
        return ContentError(path=str(path), offender=offender, description=description)


class AccessibilityRule(BaseRule):
    """A structural predicate over the whole document.

    Subclasses define ``name``, ``description`` and ``find_offender``; the
    latter returns the offending fragment, or ``None`` when the document
    passes.
    """

    description: str = ""

    @property
    def category(self) -> RuleCategory:
        return RuleCategory.ACCESSIBILITY

    @abstractmethod
    def find_offender(self, document: BeautifulSoup) -> Optional[str]:
        """Return the serialized offender, ``""`` if none applies, or ``None``."""

    def check(self, path: str | Path, document: Optional[BeautifulSoup]) -> None:
        offender = self.find_offender(document)
        if offender is not None:
            raise AccessibilityError(
                path=str(path), offender=offender, description=self.description
            )


def serialize(element: Tag) -> str:
    """Serialized markup of *element*, as reported in violations."""
    return str(element)
