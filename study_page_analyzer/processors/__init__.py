"""Expression and sentence processing modules."""

from .expression_normalizer import ExpressionNormalizer
from .arithmetic_evaluator import ArithmeticEvaluator, format_number
from .sentence_segmenter import SentenceSegmenter
from .sentence_scorer import SentenceScorer, NLTKTagger

__all__ = [
    "ExpressionNormalizer",
    "ArithmeticEvaluator",
    "format_number",
    "SentenceSegmenter",
    "SentenceScorer",
    "NLTKTagger"
]
