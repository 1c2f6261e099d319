"""Pydantic models for proof-reader configuration.

These models validate the optional JSON configuration file passed with
``--config``.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_ROOT = "./public"


class ReaderConfig(BaseModel):
    """Settings for one proof-reading run."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    # Kept as written so reported paths match what the user passed
    root: str = Field(default=DEFAULT_ROOT, description="Root of the website to check")
    exclude: Optional[str] = Field(
        default=None, description="Glob pattern of paths exempt from every check"
    )
    workers: Optional[int] = Field(
        default=None, ge=1, description="Worker threads (defaults to the CPU count)"
    )
