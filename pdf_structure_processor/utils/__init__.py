"""Utility modules for document structure reconstruction."""

from .pdf_utils import PDFUtils

__all__ = ["PDFUtils"]
