"""Tests for the editorial content rules."""

from __future__ import annotations

from pathlib import Path

import pytest

from conftest import parse
from proof_reader.domain.errors import ContentError, ForbiddenFile
from proof_reader.rules.base import RuleCategory
from proof_reader.rules.constants import TAG_SLUG_RE, first_match
from proof_reader.rules.content import ForbiddenPathRule, ForbiddenTagRule, PublishDateRule

WIP = Path("wip.html")


# ═══════════════════════════════════════════════════════════════════════════
# Pattern helpers
# ═══════════════════════════════════════════════════════════════════════════


class TestFirstMatch:
    def test_takes_first_match(self) -> None:
        assert first_match(TAG_SLUG_RE, "/tags/one/tags/two") == "one"

    def test_no_match_is_empty(self) -> None:
        assert first_match(TAG_SLUG_RE, "/categories/wip") == ""


# ═══════════════════════════════════════════════════════════════════════════
# ForbiddenPathRule
# ═══════════════════════════════════════════════════════════════════════════


class TestForbiddenPathRule:
    def setup_method(self) -> None:
        self.rule = ForbiddenPathRule()

    def test_needs_no_document(self) -> None:
        assert self.rule.requires_document is False
        assert self.rule.category == RuleCategory.LOCATION

    @pytest.mark.parametrize("folder", ["unpublished", "publish-queue"])
    def test_forbidden_folder(self, tmp_path: Path, folder: str) -> None:
        path = tmp_path / folder / "forbidden.html"
        with pytest.raises(ForbiddenFile) as exc_info:
            self.rule.check(path, None)
        assert exc_info.value == ForbiddenFile(path=str(path))

    def test_nested_forbidden_folder(self) -> None:
        with pytest.raises(ForbiddenFile):
            self.rule.check(Path("public/blog/publish-queue/2021/post.html"), None)

    def test_component_must_match_exactly(self) -> None:
        self.rule.check(Path("public/unpublished-notes/post.html"), None)

    def test_path_reported_as_given(self) -> None:
        with pytest.raises(ForbiddenFile) as exc_info:
            self.rule.check("./public/unpublished/post.html", None)
        assert str(exc_info.value) == "Found forbidden file: ./public/unpublished/post.html"
        self.rule.check(Path("public/posts/unpublished.html"), None)

    def test_regular_path_passes(self) -> None:
        self.rule.check(Path("public/posts/hello.html"), None)


# ═══════════════════════════════════════════════════════════════════════════
# ForbiddenTagRule
# ═══════════════════════════════════════════════════════════════════════════


class TestForbiddenTagRule:
    def setup_method(self) -> None:
        self.rule = ForbiddenTagRule()

    def test_discovers_forbidden_tag(self, wip_page) -> None:
        with pytest.raises(ContentError) as exc_info:
            self.rule.check(WIP, wip_page)
        assert exc_info.value == ContentError(
            path="wip.html", offender="wip", description="Forbidden tag"
        )

    def test_allowed_tags_pass(self, valid_page) -> None:
        self.rule.check(Path("page.html"), valid_page)

    def test_absolute_url_slug(self) -> None:
        doc = parse('<p class="tags"><a href="https://blog.example/tags/wip">wip</a></p>')
        with pytest.raises(ContentError):
            self.rule.check(WIP, doc)

    @pytest.mark.parametrize("cls", ["Tags", "TAGS", "tags featured"])
    def test_tags_class_any_case(self, cls: str) -> None:
        doc = parse(f'<div class="{cls}"><a href="/tags/wip">wip</a></div>')
        with pytest.raises(ContentError):
            self.rule.check(WIP, doc)

    def test_similar_slug_passes(self) -> None:
        doc = parse('<div class="tags"><a href="/tags/wip-notes">x</a></div>')
        self.rule.check(WIP, doc)

    def test_only_direct_children_are_inspected(self) -> None:
        doc = parse('<div class="tags"><span><a href="/tags/wip">x</a></span></div>')
        self.rule.check(WIP, doc)

    def test_links_outside_tags_container_ignored(self) -> None:
        doc = parse('<div class="related"><a href="/tags/wip">x</a></div>')
        self.rule.check(WIP, doc)

    def test_multi_class_container(self) -> None:
        doc = parse('<div class="post-meta tags"><a href="/tags/wip">x</a></div>')
        with pytest.raises(ContentError):
            self.rule.check(WIP, doc)

    def test_href_without_slug_passes(self) -> None:
        doc = parse('<div class="tags"><a href="/about">x</a></div>')
        self.rule.check(WIP, doc)


# ═══════════════════════════════════════════════════════════════════════════
# PublishDateRule
# ═══════════════════════════════════════════════════════════════════════════


class TestPublishDateRule:
    def setup_method(self) -> None:
        self.rule = PublishDateRule()

    def test_discovers_forbidden_pub_date(self, wip_page) -> None:
        with pytest.raises(ContentError) as exc_info:
            self.rule.check(WIP, wip_page)
        assert exc_info.value == ContentError(
            path="wip.html", offender="0000-01-01", description="Forbidden publish date"
        )

    def test_discovers_missing_pub_date(self) -> None:
        doc = parse('<header><div class="date">Published:</div></header>')
        with pytest.raises(ContentError) as exc_info:
            self.rule.check(WIP, doc)
        assert exc_info.value == ContentError(
            path="wip.html", offender="", description="Missing publish date"
        )

    def test_discovers_missing_pub_date_tag(self) -> None:
        doc = parse("<header><h2>A work in progress</h2></header>")
        with pytest.raises(ContentError) as exc_info:
            self.rule.check(WIP, doc)
        assert exc_info.value == ContentError(
            path="wip.html", offender="", description="Missing publish date tag"
        )

    def test_valid_date_passes(self, valid_page) -> None:
        self.rule.check(Path("page.html"), valid_page)

    def test_date_in_nested_text(self) -> None:
        doc = parse('<div class="date">Published <time>0000-01-01</time></div>')
        with pytest.raises(ContentError) as exc_info:
            self.rule.check(WIP, doc)
        assert exc_info.value.offender == "0000-01-01"

    def test_first_date_wins(self) -> None:
        doc = parse('<div class="date">2021-04-13, updated 0000-01-01</div>')
        self.rule.check(WIP, doc)

    def test_every_date_element_is_checked(self) -> None:
        doc = parse('<div class="date">2021-04-13</div><div class="date">0000-01-01</div>')
        with pytest.raises(ContentError):
            self.rule.check(WIP, doc)
