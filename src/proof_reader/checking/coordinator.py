"""Concurrent fan-out of file evaluations.

Discovers every file under a root, drops the ones the exclusion filter
vetoes and evaluates the rest on a thread pool.  Each evaluation is an
independent task producing one ``FileOutcome``; the outcomes are gathered
into an unordered ``RunResult``.
"""

from __future__ import annotations

import logging
import os
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Iterator, Optional

from proof_reader.checking.dispatcher import Dispatcher
from proof_reader.checking.exclusion import ExclusionFilter
from proof_reader.domain.models.outcome import RunResult

logger = logging.getLogger(__name__)


def default_workers() -> int:
    """Worker count matching the available hardware parallelism."""
    return os.cpu_count() or 1


class Coordinator:
    """Evaluate every reachable, non-excluded file under a root exactly once."""

    def __init__(
        self,
        dispatcher: Dispatcher,
        exclusion: Optional[ExclusionFilter] = None,
        max_workers: Optional[int] = None,
    ) -> None:
        self._dispatcher = dispatcher
        self._exclusion = exclusion or ExclusionFilter()
        self._max_workers = max_workers or default_workers()

    @property
    def max_workers(self) -> int:
        return self._max_workers

    def discover(self, root: str | Path) -> Iterator[str]:
        """Yield every file below *root*, prefixed with *root* as given.

        Symlinked directories are not followed.  Entries that cannot be
        read are skipped without being reported.
        """
        root = os.fspath(root)
        if os.path.isfile(root):
            yield root
            return

        for dirpath, _dirnames, filenames in os.walk(root, onerror=_skip_unreadable):
            for name in filenames:
                yield os.path.join(dirpath, name)

    def run(self, root: str | Path) -> RunResult:
        """Evaluate all discovered files under *root* in parallel."""
        paths = [p for p in self.discover(root) if not self._exclusion.is_excluded(p)]
        logger.info(
            "Evaluating %d files under %s with %d workers", len(paths), root, self._max_workers
        )

        with ThreadPoolExecutor(max_workers=self._max_workers) as pool:
            outcomes = list(pool.map(self._dispatcher.evaluate, paths))

        return RunResult(outcomes=outcomes)


def _skip_unreadable(exc: OSError) -> None:
    logger.debug("Skipping unreadable entry %s: %s", exc.filename, exc)
