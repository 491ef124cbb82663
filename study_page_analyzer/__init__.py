"""
Study Page Analyzer

Turns the recognized text of a scanned study page into study aids.

Features:
- Arithmetic detection and safe evaluation of OCR'd expressions
- Detection of symbolic (x/y) expressions
- Extractive summaries of prose pages
- Optional Surya OCR and PDF rendering for analyzing page images
"""

from .core.main_processor import AnalysisPipeline, analyze
from .core.math_resolver import MathResolver
from .core.summarizer import ExtractiveSummarizer
from .models.data_structures import (
    SYMBOLIC_RESULT,
    ExpressionCandidate,
    MathOutcome,
    Sentence,
    ScoredSentence,
    SummaryResult,
    AnalysisResult,
)
from .models.enums import PageType, MathOutcomeKind
from .utils.settings import Settings

__version__ = "1.0.0"
__all__ = [
    "AnalysisPipeline",
    "analyze",
    "MathResolver",
    "ExtractiveSummarizer",
    "SYMBOLIC_RESULT",
    "ExpressionCandidate",
    "MathOutcome",
    "Sentence",
    "ScoredSentence",
    "SummaryResult",
    "AnalysisResult",
    "PageType",
    "MathOutcomeKind",
    "Settings"
]
