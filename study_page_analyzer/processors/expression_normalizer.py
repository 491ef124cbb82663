"""Cleanup of OCR'd arithmetic candidates."""

import re
from typing import Dict

from ..exceptions import CandidateRejected


class ExpressionNormalizer:
    """Turns a raw candidate into an expression the evaluator accepts"""
    
    # OCR reads fraction bars as dashes and keeps the typographic operators
    GLYPH_REPLACEMENTS: Dict[str, str] = {
        '—': '/',
        '÷': '/',
        '×': '*',
    }
    ALLOWED_CHARS = frozenset('0123456789.+-*/()')
    VARIABLE_CHARS = frozenset('xy')
    
    @classmethod
    def replace_glyphs(cls, text: str) -> str:
        for glyph, operator in cls.GLYPH_REPLACEMENTS.items():
            text = text.replace(glyph, operator)
        return text
    
    @classmethod
    def left_hand_side(cls, text: str) -> str:
        """Glyph-mapped candidate without newlines, cut at the first '='."""
        text = cls.replace_glyphs(text)
        text = text.replace('\n', '').replace('\r', '')
        return text.split('=', 1)[0]
    
    @classmethod
    def normalize(cls, candidate: str) -> str:
        """Normalize a candidate or raise CandidateRejected."""
        expression = ''.join(c for c in cls.left_hand_side(candidate) if c in cls.ALLOWED_CHARS)
        
        if not expression or not any(c.isdigit() for c in expression):
            raise CandidateRejected(f"no numeric expression in {candidate!r}")
        return expression
    
    @classmethod
    def has_variable(cls, candidate: str) -> bool:
        """True when the raw candidate contains an x or y unknown."""
        return any(c in cls.VARIABLE_CHARS for c in candidate)
    
    @classmethod
    def display_form(cls, candidate: str) -> str:
        """Left-hand side as printed on the page, for showing to the reader."""
        keep = cls.ALLOWED_CHARS | cls.VARIABLE_CHARS
        text = ''.join(c if c in keep else ' ' for c in cls.left_hand_side(candidate))
        return re.sub(r'\s+', ' ', text).strip()
