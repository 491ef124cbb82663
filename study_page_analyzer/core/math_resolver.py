"""Find and solve the first arithmetic expression on a page."""

from typing import Optional

from ..exceptions import CandidateRejected, EvaluationError
from ..extractors.expression_extractor import ExpressionCandidateExtractor
from ..models.data_structures import MathOutcome
from ..processors.expression_normalizer import ExpressionNormalizer
from ..processors.arithmetic_evaluator import ArithmeticEvaluator
from ..utils.logging_config import get_logger

logger = get_logger(__name__)


class MathResolver:
    """First candidate in reading order that normalizes and evaluates wins"""
    
    def __init__(self, extractor: Optional[ExpressionCandidateExtractor] = None,
                 normalizer: Optional[ExpressionNormalizer] = None,
                 evaluator: Optional[ArithmeticEvaluator] = None):
        self.extractor = extractor or ExpressionCandidateExtractor()
        self.normalizer = normalizer or ExpressionNormalizer()
        self.evaluator = evaluator or ArithmeticEvaluator(self.normalizer)
    
    def resolve(self, text: Optional[str]) -> MathOutcome:
        if not text:
            return MathOutcome.none()
        
        for candidate in self.extractor.extract(text):
            try:
                expression = self.normalizer.normalize(candidate.text)
            except CandidateRejected as e:
                logger.debug("Rejected candidate at %d: %s", candidate.start, e)
                continue
            
            try:
                outcome = self.evaluator.evaluate(expression, candidate.text)
            except EvaluationError as e:
                logger.debug("Skipping candidate at %d: %s", candidate.start, e)
                continue
            
            logger.debug("Resolved %s candidate %r at %d", outcome.kind.value, expression, candidate.start)
            return outcome
        
        return MathOutcome.none()
