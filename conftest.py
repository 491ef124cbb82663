"""Shared fixtures: a deterministic tagger so tests need no NLTK corpora."""

import pytest
from nltk.tokenize import TreebankWordTokenizer

from study_page_analyzer.core.main_processor import AnalysisPipeline
from study_page_analyzer.core.summarizer import ExtractiveSummarizer
from study_page_analyzer.processors.sentence_scorer import SentenceScorer, is_word_token
from study_page_analyzer.processors.sentence_segmenter import SentenceSegmenter


class StaticTagger:
    """Tags words from a fixed table; unknown words get ``default_tag``"""

    def __init__(self, tags=None, default_tag='NN'):
        self.tags = {word.lower(): tag for word, tag in (tags or {}).items()}
        self.default_tag = default_tag
        self.word_tokenizer = TreebankWordTokenizer()

    def tag(self, text):
        tagged = []
        for token in self.word_tokenizer.tokenize(text):
            if is_word_token(token):
                tagged.append((token, self.tags.get(token.lower(), self.default_tag)))
            else:
                tagged.append((token, token))
        return tagged


@pytest.fixture
def static_tagger():
    return StaticTagger()


@pytest.fixture
def summarizer(static_tagger):
    return ExtractiveSummarizer(
        segmenter=SentenceSegmenter(),
        scorer=SentenceScorer(static_tagger),
        sentence_count=3,
    )


@pytest.fixture
def pipeline(summarizer):
    return AnalysisPipeline(summarizer=summarizer)


@pytest.fixture
def prose_page():
    return (
        "Cells are small. "
        "Mitochondria produce energy for the whole cell. "
        "It is. "
        "Ribosomes build proteins from amino acids inside every living cell. "
        "Done now."
    )
