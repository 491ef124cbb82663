"""Data models and enums for page analysis."""

from .data_structures import (
    SYMBOLIC_RESULT,
    ExpressionCandidate,
    MathOutcome,
    Sentence,
    ScoredSentence,
    SummaryResult,
    AnalysisResult,
)
from .enums import PageType, MathOutcomeKind

__all__ = [
    "SYMBOLIC_RESULT",
    "ExpressionCandidate",
    "MathOutcome",
    "Sentence",
    "ScoredSentence",
    "SummaryResult",
    "AnalysisResult",
    "PageType",
    "MathOutcomeKind"
]
