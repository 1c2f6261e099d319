"""Infrastructure layer: external framework adapters."""

from proof_reader.infrastructure.loaders.html_loader import HtmlDocumentLoader

__all__ = ["HtmlDocumentLoader"]
