"""Glob-based exclusion of paths from every check."""

from __future__ import annotations

import fnmatch
import re
from pathlib import PurePath
from typing import Optional


class ExclusionFilter:
    """Exempt paths matching a single glob pattern.

    Matching follows ``fnmatch`` semantics against the path's POSIX form,
    so ``*`` also crosses directory separators.  The pattern is compiled
    once; matching never touches the filesystem.
    """

    def __init__(self, pattern: Optional[str] = None) -> None:
        self.pattern = pattern
        self._regex = re.compile(fnmatch.translate(pattern)) if pattern else None

    def is_excluded(self, path: PurePath) -> bool:
        """True if *path* should be skipped (and treated as passing)."""
        if self._regex is None:
            return False
        return self._regex.match(PurePath(path).as_posix()) is not None
