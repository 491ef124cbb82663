"""Content and position scoring of sentences."""

import threading
from typing import List, Sequence, Tuple

import nltk
from nltk.tokenize import TreebankWordTokenizer

from ..models.data_structures import Sentence, ScoredSentence
from ..utils.logging_config import get_logger

logger = get_logger(__name__)

TaggedToken = Tuple[str, str]

CONTENT_TAG_PREFIXES = ('NN', 'VB', 'JJ')

FIRST_SENTENCE_BONUS = 1.0
LAST_SENTENCE_BONUS = 0.5


class NLTKTagger:
    """Penn Treebank part-of-speech tagging with NLTK's perceptron tagger"""
    
    RESOURCES = (
        ('taggers/averaged_perceptron_tagger_eng', 'averaged_perceptron_tagger_eng'),
        ('taggers/averaged_perceptron_tagger', 'averaged_perceptron_tagger'),
    )
    
    _download_lock = threading.Lock()
    
    def __init__(self, auto_download: bool = True):
        self.auto_download = auto_download
        self.word_tokenizer = TreebankWordTokenizer()
    
    def tag(self, text: str) -> List[TaggedToken]:
        tokens = self.word_tokenizer.tokenize(text)
        if not tokens:
            return []
        try:
            return nltk.pos_tag(tokens)
        except LookupError:
            if not self.auto_download:
                raise
            self._download_resources()
            return nltk.pos_tag(tokens)
    
    def _download_resources(self) -> None:
        with self._download_lock:
            for path, package in self.RESOURCES:
                try:
                    nltk.data.find(path)
                except LookupError:
                    logger.info("Downloading NLTK resource %s", package)
                    nltk.download(package, quiet=True)


def is_content_tag(tag: str) -> bool:
    return tag.startswith(CONTENT_TAG_PREFIXES)


def is_word_token(token: str) -> bool:
    return any(c.isalnum() for c in token)


class SentenceScorer:
    """Scores sentences by content-word count plus a position bonus"""
    
    def __init__(self, tagger=None):
        self.tagger = tagger or NLTKTagger()
    
    def content_score(self, text: str) -> int:
        return sum(1 for token, tag in self.tagger.tag(text)
                   if is_word_token(token) and is_content_tag(tag))
    
    @staticmethod
    def position_bonus(index: int, total: int) -> float:
        if index == 0:
            return FIRST_SENTENCE_BONUS
        if index == total - 1:
            return LAST_SENTENCE_BONUS
        return 0.0
    
    def score(self, sentence: Sentence, index: int, total: int) -> ScoredSentence:
        value = float(self.content_score(sentence.text)) + self.position_bonus(index, total)
        return ScoredSentence(sentence=sentence, index=index, score=value)
    
    def score_all(self, sentences: Sequence[Sentence]) -> List[ScoredSentence]:
        total = len(sentences)
        return [self.score(sentence, index, total) for index, sentence in enumerate(sentences)]

