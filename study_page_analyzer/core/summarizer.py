"""Extractive summarization of prose pages."""

from typing import Optional

from ..models.data_structures import SummaryResult
from ..processors.sentence_segmenter import SentenceSegmenter
from ..processors.sentence_scorer import SentenceScorer
from ..utils.logging_config import get_logger

logger = get_logger(__name__)

DEFAULT_SENTENCE_COUNT = 3


class ExtractiveSummarizer:
    """
    Picks the highest-scoring sentences of a page and returns them in page
    order. Pages with no more sentences than the requested count are left
    unsummarized (empty result).
    
    Equal scores keep their original order: the ranking uses a stable sort,
    so an earlier sentence beats a later one with the same score.
    """
    
    def __init__(self, segmenter: Optional[SentenceSegmenter] = None,
                 scorer: Optional[SentenceScorer] = None,
                 sentence_count: int = DEFAULT_SENTENCE_COUNT):
        if sentence_count < 1:
            raise ValueError("sentence_count must be at least 1")
        self.segmenter = segmenter or SentenceSegmenter()
        self.scorer = scorer or SentenceScorer()
        self.sentence_count = sentence_count
    
    def summarize(self, text: Optional[str], sentence_count: Optional[int] = None) -> SummaryResult:
        count = self.sentence_count if sentence_count is None else sentence_count
        if count < 1:
            raise ValueError("sentence_count must be at least 1")
        
        sentences = self.segmenter.segment(text or "")
        if len(sentences) <= count:
            logger.debug("Page has %d sentences, not summarizing to %d", len(sentences), count)
            return SummaryResult()
        
        scored = self.scorer.score_all(sentences)
        top = sorted(scored, key=lambda s: -s.score)[:count]
        ordered = sorted(top, key=lambda s: s.sentence.start)
        
        return SummaryResult(sentences=tuple(s.sentence for s in ordered))
