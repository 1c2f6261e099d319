"""Per-file outcomes and the aggregated result of a run."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from proof_reader.domain.errors import CheckError


@dataclass(frozen=True)
class FileOutcome:
    """Result of evaluating a single file."""

    path: Path
    error: Optional[CheckError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class RunResult:
    """Unordered collection of every file outcome in a run."""

    outcomes: list[FileOutcome] = field(default_factory=list)

    @property
    def failures(self) -> list[FileOutcome]:
        return [o for o in self.outcomes if not o.ok]

    @property
    def total(self) -> int:
        return len(self.outcomes)

    @property
    def failed(self) -> int:
        return len(self.failures)

    @property
    def passed(self) -> int:
        return self.total - self.failed

    @property
    def ok(self) -> bool:
        """True if no file produced a violation."""
        return not self.failures
