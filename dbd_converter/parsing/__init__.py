"""Source document loading components."""

from .document_loader import DocumentLoader

__all__ = ['DocumentLoader']
