"""External collaborators: text recognition and page classification."""

from .text_recognition import TextRecognizer, SuryaTextRecognizer
from .page_classifier import PageClassifier, FixedPageClassifier

__all__ = ["TextRecognizer", "SuryaTextRecognizer", "PageClassifier", "FixedPageClassifier"]
