"""Storage backends used by the orchestrator."""

from .document_store import DocumentStore

__all__ = ["DocumentStore"]
