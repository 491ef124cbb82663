"""Scan recognized text for substrings that look like arithmetic."""

import re
from typing import Iterator, List

from ..models.data_structures import ExpressionCandidate


# Digits, whitespace and operators, plus operator glyphs normalized later
# and single-letter x/y unknowns that mark the expression as symbolic.
CANDIDATE_PATTERN = re.compile(
    r"(?:[\d.\s+\-*/()—÷×]|(?<![A-Za-z])[xy](?![A-Za-z]))+"
)


class ExpressionCandidateExtractor:
    """Finds maximal runs of arithmetic-looking characters in page text"""
    
    def __init__(self, pattern=CANDIDATE_PATTERN):
        self.pattern = re.compile(pattern) if isinstance(pattern, str) else pattern
    
    def extract(self, text: str) -> Iterator[ExpressionCandidate]:
        """Yield candidates in order of first appearance, non-overlapping."""
        if not text:
            return
        for match in self.pattern.finditer(text):
            yield ExpressionCandidate(text=match.group(0), start=match.start(), end=match.end())
    
    def extract_all(self, text: str) -> List[ExpressionCandidate]:
        return list(self.extract(text))
