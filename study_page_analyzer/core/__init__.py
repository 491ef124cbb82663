"""Pipeline orchestration."""

from .math_resolver import MathResolver
from .summarizer import ExtractiveSummarizer, DEFAULT_SENTENCE_COUNT
from .main_processor import AnalysisPipeline, analyze

__all__ = ["MathResolver", "ExtractiveSummarizer", "DEFAULT_SENTENCE_COUNT", "AnalysisPipeline", "analyze"]
