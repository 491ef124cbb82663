"""Sentence segmentation of recognized page text."""

from typing import List

from nltk.tokenize.punkt import PunktSentenceTokenizer

from ..models.data_structures import Sentence


class SentenceSegmenter:
    """Splits text into trimmed sentences that remember their offsets.

    Any tokenizer with a Punkt-style ``span_tokenize`` can be passed in,
    e.g. one trained for the page language. The default uses untrained
    Punkt parameters, which need no downloaded corpus.
    """
    
    def __init__(self, tokenizer=None):
        self.tokenizer = tokenizer or PunktSentenceTokenizer()
    
    def segment(self, text: str) -> List[Sentence]:
        if not text or not text.strip():
            return []
        
        sentences = []
        for start, end in self.tokenizer.span_tokenize(text):
            chunk = text[start:end]
            stripped = chunk.strip()
            if not stripped:
                continue
            offset = start + (len(chunk) - len(chunk.lstrip()))
            sentences.append(Sentence(text=stripped, start=offset))
        return sentences
