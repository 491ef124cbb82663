"""Candidate extraction from recognized text."""

from .expression_extractor import ExpressionCandidateExtractor, CANDIDATE_PATTERN

__all__ = ["ExpressionCandidateExtractor", "CANDIDATE_PATTERN"]
