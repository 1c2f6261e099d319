"""Individual proof-reading rules: each enforces one content or accessibility policy."""

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
from proof_reader.rules.base import AccessibilityRule, BaseRule, RuleCategory
from proof_reader.rules.content import ForbiddenPathRule, ForbiddenTagRule, PublishDateRule

__all__ = [
    "AccessibilityRule",
    "AutofocusRule",
    "AutoplayRule",
    "BaseRule",
    "DocumentLanguageRule",
    "FigureCaptionRule",
    "ForbiddenPathRule",
    "ForbiddenTagRule",
    "FormLabelRule",
    "ImageAltRule",
    "LinkHrefRule",
    "PageTitleRule",
    "PositiveTabindexRule",
    "PublishDateRule",
    "RuleCategory",
    "SingleH1Rule",
    "TableCaptionRule",
    "TitleAttributeRule",
    "ViewportZoomRule",
]
