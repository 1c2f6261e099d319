"""Validation engine: exclusion, dispatch, rule pipeline and concurrent fan-out."""

from proof_reader.checking.coordinator import Coordinator
from proof_reader.checking.dispatcher import Dispatcher
from proof_reader.checking.exclusion import ExclusionFilter
from proof_reader.checking.pipeline import RulePipeline, default_html_rules

__all__ = [
    "Coordinator",
    "Dispatcher",
    "ExclusionFilter",
    "RulePipeline",
    "default_html_rules",
]
