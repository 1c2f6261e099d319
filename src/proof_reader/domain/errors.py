"""Domain errors: exceptions raised by proof-reader.

``CheckError`` and its variants describe what a rule found wrong with a
file.  They are raised by rules and captured as values by the dispatcher,
so a violation in one file never stops the scan.
"""

from __future__ import annotations


class ProofReaderError(Exception):
    """Base exception for all proof-reader errors."""


class ConfigurationError(ProofReaderError):
    """Raised when configuration is invalid or missing."""


class CheckError(ProofReaderError):
    """Base class for every violation a rule can report.

    Variants compare equal by type and fields, which keeps test
    assertions short.
    """

    def _key(self) -> tuple:
        return self.args

    def __eq__(self, other: object) -> bool:
        if type(self) is not type(other):
            return NotImplemented
        return self._key() == other._key()  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._key()))


class ForbiddenFile(CheckError):
    """The file lives somewhere that must never be published."""

    def __init__(self, path: str) -> None:
        super().__init__(path)
        self.path = path

    def _key(self) -> tuple:
        return (self.path,)

    def __str__(self) -> str:
        return f"Found forbidden file: {self.path}"

    def __repr__(self) -> str:
        return f"ForbiddenFile(path={self.path!r})"


class _PolicyError(CheckError):
    """Shared shape of content and accessibility violations."""

    kind = ""

    def __init__(self, path: str, offender: str, description: str) -> None:
        super().__init__(path, offender, description)
        self.path = path
        self.offender = offender
        self.description = description

    def _key(self) -> tuple:
        return (self.path, self.offender, self.description)

    def __str__(self) -> str:
        return (
            f"Found {self.kind} error: [{self.description}{self.offender}], "
            f"in file {self.path}"
        )

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(path={self.path!r}, "
            f"offender={self.offender!r}, description={self.description!r})"
        )


class ContentError(_PolicyError):
    """Editorial policy violation (forbidden tag, bad or missing publish date)."""

    kind = "content"


class AccessibilityError(_PolicyError):
    """Structural accessibility violation."""

    kind = "accessibility"


class IoError(CheckError):
    """The file could not be read or decoded.

    All ``IoError`` instances are equal, whatever the underlying cause.
    """

    def __init__(self, cause: Exception) -> None:
        super().__init__(cause)
        self.cause = cause

    def _key(self) -> tuple:
        return ()

    def __str__(self) -> str:
        return str(self.cause)

    def __repr__(self) -> str:
        return f"IoError(cause={self.cause!r})"
