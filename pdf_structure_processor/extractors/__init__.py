"""Extraction of positioned text fragments from source documents."""

from .fragment_extractor import FontStyleDetector, FragmentExtractor

__all__ = ["FontStyleDetector", "FragmentExtractor"]
