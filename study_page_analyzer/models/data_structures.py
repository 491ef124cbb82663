"""Data structures for page analysis."""

from dataclasses import dataclass, field
from typing import Optional, Tuple
from .enums import MathOutcomeKind, PageType


SYMBOLIC_RESULT = "Symbolic Evaluation Required."


@dataclass(frozen=True)
class ExpressionCandidate:
    """Substring of the recognized text that looks like arithmetic"""
    text: str
    start: int
    end: int


@dataclass(frozen=True)
class MathOutcome:
    """Result of scanning a page for arithmetic.

    ``expression`` is the normalized expression, ``display_expression`` the
    left-hand side as it read on the page (canonical operators, collapsed
    whitespace).
    """
    kind: MathOutcomeKind = MathOutcomeKind.NONE
    expression: Optional[str] = None
    result: Optional[str] = None
    display_expression: Optional[str] = None

    @classmethod
    def none(cls) -> "MathOutcome":
        return cls()

    @classmethod
    def symbolic(cls, expression: str, display_expression: Optional[str] = None) -> "MathOutcome":
        return cls(MathOutcomeKind.SYMBOLIC, expression, SYMBOLIC_RESULT,
                   display_expression or expression)

    @classmethod
    def solved(cls, expression: str, result: str, display_expression: Optional[str] = None) -> "MathOutcome":
        return cls(MathOutcomeKind.SOLVED, expression, result,
                   display_expression or expression)

    @property
    def found(self) -> bool:
        return self.kind is not MathOutcomeKind.NONE

    @property
    def is_symbolic(self) -> bool:
        return self.kind is MathOutcomeKind.SYMBOLIC

    @property
    def is_solved(self) -> bool:
        return self.kind is MathOutcomeKind.SOLVED


@dataclass(frozen=True)
class Sentence:
    """Trimmed sentence with its start offset in the page text"""
    text: str
    start: int

    @property
    def end(self) -> int:
        return self.start + len(self.text)


@dataclass(frozen=True)
class ScoredSentence:
    """Sentence with its position in the page and its selection score"""
    sentence: Sentence
    index: int
    score: float


@dataclass(frozen=True)
class SummaryResult:
    """Selected sentences in page order"""
    sentences: Tuple[Sentence, ...] = ()
    separator: str = " "

    @property
    def text(self) -> str:
        return self.separator.join(s.text for s in self.sentences)

    @property
    def is_empty(self) -> bool:
        return not self.sentences

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True)
class AnalysisResult:
    """Everything derived from one recognized page"""
    full_text: str = ""
    page_type: str = PageType.UNKNOWN.value
    math_outcome: MathOutcome = field(default_factory=MathOutcome.none)
    summary: Optional[SummaryResult] = None

    @classmethod
    def degraded(cls, full_text: Optional[str] = None) -> "AnalysisResult":
        """Safe default used when OCR or classification failed."""
        return cls(full_text=full_text or "")

    @property
    def summary_text(self) -> Optional[str]:
        return self.summary.text if self.summary is not None else None
