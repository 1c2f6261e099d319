"""Editorial content rules.

Policies enforced:
  • Nothing under an ``unpublished`` or ``publish-queue`` folder is published
  • No page carries a reserved tag (``wip``)
  • Every page has a real publish date (not the ``0000-01-01`` placeholder)
"""

from __future__ import annotations

from pathlib import Path, PurePath
from typing import Optional

from bs4 import BeautifulSoup, Tag

from proof_reader.domain.errors import ForbiddenFile
from proof_reader.rules.base import BaseRule, RuleCategory
from proof_reader.rules.constants import (
    DATE_CLASS,
    FORBIDDEN_FOLDERS,
    FORBIDDEN_TAGS,
    ISO_DATE_RE,
    SENTINEL_PUBLISH_DATE,
    TAG_SLUG_RE,
    TAGS_CLASS_RE,
    first_match,
)


class ForbiddenPathRule(BaseRule):
    """Reject files stored in folders reserved for unpublished work."""

    requires_document = False

    @property
    def name(self) -> str:
        return "Forbidden path"

    @property
    def category(self) -> RuleCategory:
        return RuleCategory.LOCATION

    def check(self, path: str | Path, document: Optional[BeautifulSoup]) -> None:
        if FORBIDDEN_FOLDERS.intersection(PurePath(path).parts):
            raise ForbiddenFile(path=str(path))


class ForbiddenTagRule(BaseRule):
    """Reject pages tagged with a reserved tag such as ``wip``."""

    @property
    def name(self) -> str:
        return "Forbidden tag"

    @property
    def category(self) -> RuleCategory:
        return RuleCategory.CONTENT

    def check(self, path: str | Path, document: Optional[BeautifulSoup]) -> None:
        for container in document.find_all(class_=TAGS_CLASS_RE):
            for child in container.children:
                if not isinstance(child, Tag):
                    continue
                href = child.get("href")
                if href is None:
                    continue

                slug = first_match(TAG_SLUG_RE, href)
                if slug in FORBIDDEN_TAGS:
                    raise self._content_error(path, slug, "Forbidden tag")


class PublishDateRule(BaseRule):
    """Require a real publish date on every page.

    A page without any date element and a date element without a
    parseable ISO date are reported with different descriptions.
    """

    MISSING_TAG = "Missing publish date tag"
    MISSING_DATE = "Missing publish date"
    FORBIDDEN_DATE = "Forbidden publish date"

    @property
    def name(self) -> str:
        return "Publish date"

    @property
    def category(self) -> RuleCategory:
        return RuleCategory.CONTENT

    def check(self, path: str | Path, document: Optional[BeautifulSoup]) -> None:
        date_elements = document.find_all(class_=DATE_CLASS)
        if not date_elements:
            raise self._content_error(path, "", self.MISSING_TAG)

        for element in date_elements:
            publish_date = first_match(ISO_DATE_RE, element.get_text())
            if not publish_date:
                raise self._content_error(path, "", self.MISSING_DATE)
            if publish_date == SENTINEL_PUBLISH_DATE:
                raise self._content_error(path, publish_date, self.FORBIDDEN_DATE)
