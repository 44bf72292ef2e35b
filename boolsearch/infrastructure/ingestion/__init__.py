"""
Document file ingestion.
"""

from .document_reader import DocumentReader

__all__ = ['DocumentReader']
