"""Use Case: Check a generated website.

Delegates discovery and evaluation to an injected Coordinator.
"""

from __future__ import annotations

import logging
from pathlib import Path

from proof_reader.checking.coordinator import Coordinator
from proof_reader.domain.models.outcome import RunResult

logger = logging.getLogger(__name__)


class CheckSiteUseCase:
    """Orchestrate a full proof-reading run over one site root."""

    def __init__(self, coordinator: Coordinator) -> None:
        self._coordinator = coordinator

    def execute(self, root: str | Path) -> RunResult:
        """Check every file under *root*.

        Args:
            root: Directory holding the generated site.

        Returns:
            A RunResult with one outcome per evaluated file.
        """
        result = self._coordinator.run(root)
        logger.info("Checked %d files: %d passed, %d failed", result.total, result.passed, result.failed)
        return result
