"""Editorial policy constants and compiled patterns.

Patterns are compiled once at import time and shared read-only by every
worker thread.
"""

from __future__ import annotations

import re

# ---------------------------------------------------------------------------
# Editorial markers
# ---------------------------------------------------------------------------

FORBIDDEN_FOLDERS: frozenset[str] = frozenset({"unpublished", "publish-queue"})

FORBIDDEN_TAGS: frozenset[str] = frozenset({"wip"})

# Publish date used by drafts that should never go live
SENTINEL_PUBLISH_DATE = "0000-01-01"

# The tags container class is matched ASCII case-insensitively
TAGS_CLASS_RE = re.compile(r"^tags$", re.IGNORECASE | re.ASCII)
DATE_CLASS = "date"

# ---------------------------------------------------------------------------
# Patterns
# ---------------------------------------------------------------------------

TAG_SLUG_RE = re.compile(r"tags/([-a-zA-Z0-9]+)")
ISO_DATE_RE = re.compile(r"(\d{4}-\d{2}-\d{2})")
USER_SCALABLE_DISABLED_RE = re.compile(r"user-scalable\s*=\s*(no|0)")


def first_match(pattern: re.Pattern[str], text: str) -> str:
    """Return the first capture group of *pattern* in *text*, or ``""``."""
    match = pattern.search(text)
    return match.group(1) if match else ""
