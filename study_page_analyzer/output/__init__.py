"""Output generation modules."""

from .json_generator import JSONGenerator
from .summary_generator import SummaryGenerator
from .report_generator import ReportGenerator

__all__ = ["JSONGenerator", "SummaryGenerator", "ReportGenerator"]
