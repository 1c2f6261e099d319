"""Rule pipeline for HTML pages.

Runs an ordered, fixed list of ``BaseRule`` instances against one file:

  1. **Location**: ForbiddenPathRule (runs before the file is read)
  2. **Content**: ForbiddenTagRule, PublishDateRule
  3. **Accessibility**: thirteen structural checks

The pipeline stops at the first failing rule; later rules on that file
never run.  The document is loaded lazily, right before the first rule
that needs it, and dropped when the pipeline returns.
"""

from __future__ import annotations

import logging
from pathlib import Path

from proof_reader.domain.ports.document_loader import DocumentLoaderPort
from proof_reader.rules.accessibility import (
    AutofocusRule,
    AutoplayRule,
    DocumentLanguageRule,
    FigureCaptionRule,
    FormLabelRule,
    ImageAltRule,
    LinkHrefRule,
    PageTitleRule,
    PositiveTabindexRule,
    SingleH1Rule,
    TableCaptionRule,
    TitleAttributeRule,
    ViewportZoomRule,
)
from proof_reader.rules.base import BaseRule
from proof_reader.rules.content import ForbiddenPathRule, ForbiddenTagRule, PublishDateRule

logger = logging.getLogger(__name__)


class RulePipeline:
    """Run rules in sequence against a single file.

    Usage::

        pipeline = RulePipeline(HtmlDocumentLoader())
        pipeline.check(Path("public/index.html"))  # raises CheckError on violation
    """

    def __init__(
        self,
        loader: DocumentLoaderPort,
        rules: tuple[BaseRule, ...] | None = None,
    ) -> None:
        self._loader = loader
        self._rules: tuple[BaseRule, ...] = (
            tuple(rules) if rules is not None else default_html_rules()
        )

    # -- Public API ------------------------------------------------------

    def check(self, path: str | Path) -> None:
        """Apply every rule to *path* in order.

        Raises the first ``CheckError`` produced; returns ``None`` if the
        file passes all rules.
        """
        document = None
        for rule in self._rules:
            if rule.requires_document and document is None:
                document = self._loader.load(path)
            rule.check(path, document)

    @property
    def rules(self) -> tuple[BaseRule, ...]:
        return self._rules

    @property
    def rule_names(self) -> list[str]:
        """Names of the registered rules, in order."""
        return [r.name for r in self._rules]


def default_html_rules() -> tuple[BaseRule, ...]:
    """Factory for the standard HTML rule list."""
    return (
        # Location
        ForbiddenPathRule(),
        # Content
        ForbiddenTagRule(),
        PublishDateRule(),
        # Accessibility
        ImageAltRule(),
        TitleAttributeRule(),
        ViewportZoomRule(),
        PageTitleRule(),
        DocumentLanguageRule(),
        PositiveTabindexRule(),
        AutofocusRule(),
        SingleH1Rule(),
        LinkHrefRule(),
        TableCaptionRule(),
        FigureCaptionRule(),
        FormLabelRule(),
        AutoplayRule(),
    )
