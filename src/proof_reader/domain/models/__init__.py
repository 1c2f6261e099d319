"""Domain models: public API."""

from proof_reader.domain.models.outcome import FileOutcome, RunResult

__all__ = ["FileOutcome", "RunResult"]
