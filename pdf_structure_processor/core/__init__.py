"""Pipeline orchestration."""

from .main_processor import DocumentProcessor

__all__ = ["DocumentProcessor"]
