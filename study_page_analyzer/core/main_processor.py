"""Page analysis pipeline combining the math resolver and the summarizer."""

from concurrent.futures import ThreadPoolExecutor
from typing import Iterable, List, Optional, Tuple

from ..models.data_structures import AnalysisResult
from ..models.enums import PageType
from ..processors.sentence_segmenter import SentenceSegmenter
from ..processors.sentence_scorer import SentenceScorer, NLTKTagger
from ..utils.logging_config import get_logger
from ..utils.settings import Settings
from .math_resolver import MathResolver
from .summarizer import ExtractiveSummarizer

logger = get_logger(__name__)


class AnalysisPipeline:
    """
    Derives study aids from one recognized page:
    - the first solvable (or symbolic) arithmetic expression
    - an extractive summary, for pages classified as Text
    
    All state lives in a single call, so one pipeline can serve several
    pages concurrently.
    """
    
    def __init__(self, math_resolver: Optional[MathResolver] = None,
                 summarizer: Optional[ExtractiveSummarizer] = None,
                 settings: Optional[Settings] = None):
        self.settings = settings or Settings()
        self.math_resolver = math_resolver or MathResolver()
        self.summarizer = summarizer or ExtractiveSummarizer(
            segmenter=SentenceSegmenter(),
            scorer=SentenceScorer(NLTKTagger(auto_download=self.settings.nltk_auto_download)),
            sentence_count=self.settings.summary_sentence_count,
        )
    
    # ========================================================================
    # Text Analysis
    # ========================================================================
    
    def analyze(self, full_text: Optional[str], page_type: Optional[str]) -> AnalysisResult:
        """Analyze recognized text with the label the classifier gave the page."""
        if full_text is None or not full_text.strip():
            logger.warning("No recognized text, returning degraded result")
            return AnalysisResult.degraded(full_text)
        if page_type is None:
            logger.warning("No page type, returning degraded result")
            return AnalysisResult.degraded(full_text)
        
        page_type = page_type.value if isinstance(page_type, PageType) else str(page_type)
        math_outcome = self.math_resolver.resolve(full_text)
        
        summary = None
        if page_type == PageType.TEXT.value:
            summary = self.summarizer.summarize(full_text)
        
        return AnalysisResult(
            full_text=full_text,
            page_type=page_type,
            math_outcome=math_outcome,
            summary=summary,
        )
    
    def analyze_many(self, pages: Iterable[Tuple[Optional[str], Optional[str]]],
                     max_workers: Optional[int] = None) -> List[AnalysisResult]:
        """Analyze (text, page_type) pairs in parallel, keeping input order."""
        pages = list(pages)
        if not pages:
            return []
        workers = min(max_workers or self.settings.max_workers, len(pages))
        with ThreadPoolExecutor(max_workers=workers) as executor:
            return list(executor.map(lambda page: self.analyze(*page), pages))
    
    # ========================================================================
    # Image Analysis
    # ========================================================================
    
    def recognize_page(self, image, recognizer, classifier) -> Tuple[Optional[str], Optional[str]]:
        """Run OCR and classification; a failing service yields None."""
        try:
            full_text = recognizer.recognize(image)
        except Exception as e:
            logger.warning("Text recognition failed: %s", e)
            full_text = None
        
        try:
            page_type = classifier.classify(image)
        except Exception as e:
            logger.warning("Page classification failed: %s", e)
            page_type = None
        
        return full_text, page_type
    
    def analyze_image(self, image, recognizer, classifier) -> AnalysisResult:
        """Recognize, classify and analyze one page image."""
        full_text, page_type = self.recognize_page(image, recognizer, classifier)
        return self.analyze(full_text, page_type)


def analyze(full_text: Optional[str], page_type: Optional[str],
            pipeline: Optional[AnalysisPipeline] = None) -> AnalysisResult:
    """Analyze one page with a default pipeline."""
    return (pipeline or AnalysisPipeline()).analyze(full_text, page_type)
