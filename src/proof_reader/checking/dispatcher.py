"""Route files to the rule pipeline for their content type."""

from __future__ import annotations

import logging
from pathlib import Path, PurePath
from typing import Mapping, Optional

from proof_reader.checking.pipeline import RulePipeline
from proof_reader.domain.errors import CheckError
from proof_reader.domain.models.outcome import FileOutcome

logger = logging.getLogger(__name__)


class Dispatcher:
    """Pick a pipeline by file extension and capture its verdict.

    Extensions are matched exactly and case-sensitively, without the
    leading dot.  Adding a content type (e.g. CSS) means registering
    another pipeline under its extension.
    """

    def __init__(self, pipelines: Mapping[str, RulePipeline]) -> None:
        self._pipelines = dict(pipelines)

    def route(self, path: str | Path) -> Optional[RulePipeline]:
        """Return the pipeline for *path*, or ``None`` if it is ignored."""
        extension = PurePath(path).suffix[1:]
        return self._pipelines.get(extension)

    def evaluate(self, path: str | Path) -> FileOutcome:
        """Run the routed pipeline on *path* and return one outcome.

        *path* is kept as given in violation messages.  The stored error
        drops its traceback so the failing document is freed with the
        pipeline frames.
        """
        pipeline = self.route(path)
        if pipeline is None:
            return FileOutcome(path=Path(path))

        logger.debug("Checking %s", path)
        try:
            pipeline.check(path)
        except CheckError as exc:
            logger.debug("%s failed: %s", path, exc)
            return FileOutcome(path=Path(path), error=exc.with_traceback(None))
        return FileOutcome(path=Path(path))

    @property
    def extensions(self) -> list[str]:
        return sorted(self._pipelines)
