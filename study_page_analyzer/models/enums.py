"""Enumerations for page analysis."""

from enum import Enum


class PageType(str, Enum):
    """Labels produced by the page classifier"""
    MATH = "Math"
    TEXT = "Text"
    UNKNOWN = "Unknown"


class MathOutcomeKind(Enum):
    """Kind of result found by the math resolver"""
    NONE = "none"
    SYMBOLIC = "symbolic"
    SOLVED = "solved"
