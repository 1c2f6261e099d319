"""Accessibility rules: structural predicates over the whole document.

Each rule reports the serialized offending element, or an empty offender
when no single element is to blame (missing ``<title>``, missing ``lang``).
"""

from __future__ import annotations

from typing import Optional

from bs4 import BeautifulSoup, Tag

from proof_reader.rules.base import AccessibilityRule, serialize
from proof_reader.rules.constants import USER_SCALABLE_DISABLED_RE


def _first_with_attribute(document: BeautifulSoup, attribute: str) -> Optional[str]:
    element = document.find(True, attrs={attribute: True})
    return serialize(element) if element is not None else None


def _root_element(document: BeautifulSoup) -> Optional[Tag]:
    return next((c for c in document.children if isinstance(c, Tag)), None)


# ---------------------------------------------------------------------------
# Text alternatives
# ---------------------------------------------------------------------------


class ImageAltRule(AccessibilityRule):
    name = "Image alt text"
    description = "Image without alt text: "

    def find_offender(self, document: BeautifulSoup) -> Optional[str]:
        for img in document.find_all("img"):
            if not (img.get("alt") or "").strip():
                return serialize(img)
        return None


class TitleAttributeRule(AccessibilityRule):
    """``title`` tooltips are invisible to keyboard and touch users."""

    name = "Title attribute"
    description = "Element with title attribute: "

    def find_offender(self, document: BeautifulSoup) -> Optional[str]:
        return _first_with_attribute(document, "title")


# ---------------------------------------------------------------------------
# Page level
# ---------------------------------------------------------------------------


class ViewportZoomRule(AccessibilityRule):
    name = "Viewport zoom"
    description = "Viewport disables user scaling: "

    def find_offender(self, document: BeautifulSoup) -> Optional[str]:
        for meta in document.find_all("meta", attrs={"name": "viewport"}):
            if USER_SCALABLE_DISABLED_RE.search(meta.get("content") or ""):
                return serialize(meta)
        return None


class PageTitleRule(AccessibilityRule):
    name = "Page title"
    description = "Missing page title"

    def find_offender(self, document: BeautifulSoup) -> Optional[str]:
        head = document.head
        if head is None or head.find("title") is None:
            return ""
        return None


class DocumentLanguageRule(AccessibilityRule):
    name = "Document language"
    description = "Missing document language"

    def find_offender(self, document: BeautifulSoup) -> Optional[str]:
        root = _root_element(document)
        if root is None or not root.has_attr("lang"):
            return ""
        return None


# ---------------------------------------------------------------------------
# Focus and interaction
# ---------------------------------------------------------------------------


class PositiveTabindexRule(AccessibilityRule):
    name = "Positive tabindex"
    description = "Positive tabindex breaks focus order: "

    def find_offender(self, document: BeautifulSoup) -> Optional[str]:
        for element in document.find_all(True, attrs={"tabindex": True}):
            try:
                value = int(element["tabindex"].strip())
            except ValueError:
                continue
            if value > 0:
                return serialize(element)
        return None


class AutofocusRule(AccessibilityRule):
    name = "Autofocus"
    description = "Element with autofocus: "

    def find_offender(self, document: BeautifulSoup) -> Optional[str]:
        return _first_with_attribute(document, "autofocus")


class AutoplayRule(AccessibilityRule):
    name = "Autoplay"
    description = "Element with autoplay: "

    def find_offender(self, document: BeautifulSoup) -> Optional[str]:
        return _first_with_attribute(document, "autoplay")


# ---------------------------------------------------------------------------
# Structure
# ---------------------------------------------------------------------------


class SingleH1Rule(AccessibilityRule):
    """Only one top-level heading per page; the second one is reported."""

    name = "Single h1"
    description = "More than one h1: "

    def find_offender(self, document: BeautifulSoup) -> Optional[str]:
        headings = document.find_all("h1", limit=2)
        if len(headings) > 1:
            return serialize(headings[1])
        return None


class LinkHrefRule(AccessibilityRule):
    name = "Link href"
    description = "Link without href: "

    def find_offender(self, document: BeautifulSoup) -> Optional[str]:
        for link in document.find_all("a"):
            if not link.has_attr("href"):
                return serialize(link)
        return None


class TableCaptionRule(AccessibilityRule):
    name = "Table caption"
    description = "Table without caption: "

    def find_offender(self, document: BeautifulSoup) -> Optional[str]:
        for table in document.find_all("table"):
            if table.find("caption") is None:
                return serialize(table)
        return None


class FigureCaptionRule(AccessibilityRule):
    name = "Figure caption"
    description = "Figure without figcaption: "

    def find_offender(self, document: BeautifulSoup) -> Optional[str]:
        for figure in document.find_all("figure"):
            if figure.find("figcaption") is None:
                return serialize(figure)
        return None


class FormLabelRule(AccessibilityRule):
    """Inputs with an ``id`` need a ``<label for=...>`` in the same form."""

    name = "Form labels"
    description = "Input without label: "

    def find_offender(self, document: BeautifulSoup) -> Optional[str]:
        for form in document.find_all("form"):
            labelled = {label.get("for") for label in form.find_all("label")}
            for field in form.find_all("input", id=True):
                if field["id"] not in labelled:
                    return serialize(field)
        return None
