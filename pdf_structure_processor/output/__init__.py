"""Output generation modules."""

from .html_generator import HTMLGenerator
from .json_generator import JSONGenerator
from .summary_generator import SummaryGenerator

__all__ = ["HTMLGenerator", "JSONGenerator", "SummaryGenerator"]
