"""Page classification services."""

from typing import Optional

from ..models.enums import PageType


class PageClassifier:
    """Contract for page classifiers: ``classify(image) -> label``"""
    
    def classify(self, image) -> Optional[str]:
        raise NotImplementedError


class FixedPageClassifier(PageClassifier):
    """Returns a label chosen by the caller, e.g. from a command-line flag"""
    
    def __init__(self, label: Optional[str] = PageType.UNKNOWN.value):
        self.label = label.value if isinstance(label, PageType) else label
    
    def classify(self, image) -> Optional[str]:
        return self.label
