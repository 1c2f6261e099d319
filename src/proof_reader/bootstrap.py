"""Composition Root: Dependency Injection Container.

This module is the ONLY place where concrete infrastructure classes are
imported and wired together.  All other layers refer to ports (interfaces).
"""

from __future__ import annotations

from typing import Optional

from proof_reader.application.use_cases.check_site import CheckSiteUseCase
from proof_reader.checking.coordinator import Coordinator
from proof_reader.checking.dispatcher import Dispatcher
from proof_reader.checking.exclusion import ExclusionFilter
from proof_reader.checking.pipeline import RulePipeline
from proof_reader.config.models import ReaderConfig
from proof_reader.domain.ports.document_loader import DocumentLoaderPort
from proof_reader.infrastructure.loaders.html_loader import HtmlDocumentLoader


class Container:
    """Simple dependency injection container.

    Wires the HTML loader, rule pipeline, dispatcher, exclusion filter and
    coordinator from a ``ReaderConfig``.

    Usage::

        container = Container(ReaderConfig(root="public"))
        result = container.check_site().execute(container.config.root)
    """

    def __init__(
        self,
        config: Optional[ReaderConfig] = None,
        loader: Optional[DocumentLoaderPort] = None,
    ) -> None:
        self.config = config or ReaderConfig()

        # -- Infrastructure singletons ---------------------------------------
        self._loader: DocumentLoaderPort = loader or HtmlDocumentLoader()

        # -- Engine -----------------------------------------------------------
        self._html_pipeline = RulePipeline(self._loader)
        self._dispatcher = Dispatcher({"html": self._html_pipeline})
        self._exclusion = ExclusionFilter(self.config.exclude)
        self._coordinator = Coordinator(
            self._dispatcher,
            exclusion=self._exclusion,
            max_workers=self.config.workers,
        )

    # -- Accessors ------------------------------------------------------------

    @property
    def dispatcher(self) -> Dispatcher:
        return self._dispatcher

    @property
    def exclusion(self) -> ExclusionFilter:
        return self._exclusion

    @property
    def coordinator(self) -> Coordinator:
        return self._coordinator

    # -- Use case factories ---------------------------------------------------

    def check_site(self) -> CheckSiteUseCase:
        return CheckSiteUseCase(self._coordinator)
