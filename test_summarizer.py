#!/usr/bin/env python3
"""
Tests for sentence segmentation, scoring and extractive summarization
"""

import nltk
import pytest

from study_page_analyzer import ExtractiveSummarizer, Sentence, SummaryResult
from study_page_analyzer.processors import SentenceSegmenter, SentenceScorer
from study_page_analyzer.processors.sentence_scorer import NLTKTagger, is_content_tag

from conftest import StaticTagger


# ============================================================================
# Segmentation
# ============================================================================

def test_segment_trims_and_keeps_offsets():
    text = "  First one here.   Second one there.  "
    sentences = SentenceSegmenter().segment(text)

    assert [s.text for s in sentences] == ["First one here.", "Second one there."]
    for sentence in sentences:
        assert text[sentence.start:sentence.end] == sentence.text


def test_segment_handles_question_and_exclamation():
    sentences = SentenceSegmenter().segment("Is it alive? It moves! Then it grows.")

    assert [s.text for s in sentences] == ["Is it alive?", "It moves!", "Then it grows."]


@pytest.mark.parametrize("text", ["", "   \n\t  "])
def test_segment_blank_text(text):
    assert SentenceSegmenter().segment(text) == []


def test_segment_accepts_custom_tokenizer():
    class LineTokenizer:
        def span_tokenize(self, text):
            start = 0
            for line in text.split("\n"):
                yield start, start + len(line)
                start += len(line) + 1

    sentences = SentenceSegmenter(LineTokenizer()).segment("alpha\n\n beta ")

    assert sentences == [Sentence("alpha", 0), Sentence("beta", 8)]


# ============================================================================
# Scoring
# ============================================================================

@pytest.mark.parametrize("tag, expected", [
    ("NN", True), ("NNS", True), ("NNP", True), ("VBZ", True), ("VBD", True),
    ("JJ", True), ("JJR", True), ("DT", False), ("IN", False), ("RB", False), (".", False),
])
def test_is_content_tag(tag, expected):
    assert is_content_tag(tag) is expected


def test_content_score_counts_nouns_verbs_adjectives_only():
    scorer = SentenceScorer(StaticTagger({"the": "DT", "is": "VBZ", "very": "RB"}))

    assert scorer.content_score("The sky is very blue.") == 3


def test_content_score_ignores_punctuation_tokens():
    scorer = SentenceScorer(StaticTagger(default_tag="NN"))

    assert scorer.content_score("Cells , divide ; ( quickly ) !") == 3


@pytest.mark.parametrize("index, total, expected", [
    (0, 5, 1.0),
    (4, 5, 0.5),
    (2, 5, 0.0),
    (0, 1, 1.0),
])
def test_position_bonus(index, total, expected):
    assert SentenceScorer.position_bonus(index, total) == expected


def test_score_adds_content_and_position(static_tagger):
    scored = SentenceScorer(static_tagger).score(Sentence("Cells are small.", 0), 0, 4)

    assert scored.score == 4.0
    assert scored.index == 0


# ============================================================================
# Summarization
# ============================================================================

def test_summary_keeps_page_order(summarizer, prose_page):
    summary = summarizer.summarize(prose_page)

    assert summary.text == (
        "Cells are small. "
        "Mitochondria produce energy for the whole cell. "
        "Ribosomes build proteins from amino acids inside every living cell."
    )
    starts = [s.start for s in summary.sentences]
    assert starts == sorted(starts)


def test_summary_order_independent_of_scores(summarizer):
    text = (
        "Tiny start. "
        "Short one here. "
        "A much longer sentence with many content words sits here. "
        "Another moderately long sentence appears now. "
        "End."
    )
    summary = summarizer.summarize(text)

    assert [s.text for s in summary.sentences] == [
        "Tiny start.",
        "A much longer sentence with many content words sits here.",
        "Another moderately long sentence appears now.",
    ]


def test_equal_scores_prefer_earlier_sentences(summarizer):
    text = ("Alpha beta gamma. Delta epsilon zeta. Eta theta iota. "
            "Kappa lambda mu. Nu pi omicron.")
    summary = summarizer.summarize(text)

    assert summary.text == "Alpha beta gamma. Delta epsilon zeta. Nu pi omicron."


@pytest.mark.parametrize("text", [
    "",
    "Only one sentence.",
    "One sentence. Two sentences.",
    "One sentence. Two sentences. Three sentences.",
])
def test_short_pages_are_not_summarized(summarizer, text):
    summary = summarizer.summarize(text)

    assert summary == SummaryResult()
    assert summary.is_empty
    assert summary.text == ""


def test_sentence_count_override(summarizer, prose_page):
    summary = summarizer.summarize(prose_page, sentence_count=1)

    assert [s.text for s in summary.sentences] == [
        "Ribosomes build proteins from amino acids inside every living cell."
    ]


def test_duplicate_sentences_keep_their_own_offsets(summarizer):
    text = "Same words here. Filler. Same words here. More filler. Last bit."
    summary = summarizer.summarize(text)

    assert [s.start for s in summary.sentences] == sorted({s.start for s in summary.sentences})
    assert len(summary.sentences) == 3


def test_invalid_sentence_count(static_tagger):
    with pytest.raises(ValueError):
        ExtractiveSummarizer(scorer=SentenceScorer(static_tagger), sentence_count=0)


# ============================================================================
# NLTK tagger
# ============================================================================

class _FakePosTag:
    """Stands in for nltk.pos_tag; optionally fails the first call"""

    def __init__(self, tags=None, missing_first=False):
        self.tags = tags or {}
        self.missing_first = missing_first
        self.calls = []

    def __call__(self, tokens):
        self.calls.append(list(tokens))
        if self.missing_first and len(self.calls) == 1:
            raise LookupError("Resource averaged_perceptron_tagger_eng not found.")
        return [(t, self.tags.get(t.lower(), 'NN')) for t in tokens]


def _missing_eng_tagger(path):
    if path.endswith('averaged_perceptron_tagger_eng'):
        raise LookupError(path)
    return path


def test_nltk_tagger_downloads_missing_resource_and_retries(monkeypatch):
    pos_tag = _FakePosTag(missing_first=True)
    downloads = []
    monkeypatch.setattr(nltk, "pos_tag", pos_tag)
    monkeypatch.setattr(nltk.data, "find", _missing_eng_tagger)
    monkeypatch.setattr(nltk, "download", lambda package, quiet=False: downloads.append(package))

    tagged = NLTKTagger().tag("Cells divide.")

    assert downloads == ['averaged_perceptron_tagger_eng']
    assert len(pos_tag.calls) == 2
    assert tagged == [("Cells", "NN"), ("divide", "NN"), (".", "NN")]


def test_nltk_tagger_without_auto_download_raises(monkeypatch):
    downloads = []
    monkeypatch.setattr(nltk, "pos_tag", _FakePosTag(missing_first=True))
    monkeypatch.setattr(nltk.data, "find", _missing_eng_tagger)
    monkeypatch.setattr(nltk, "download", lambda package, quiet=False: downloads.append(package))

    with pytest.raises(LookupError):
        NLTKTagger(auto_download=False).tag("Cells divide.")
    assert downloads == []


def test_nltk_tagger_skips_blank_text(monkeypatch):
    pos_tag = _FakePosTag()
    monkeypatch.setattr(nltk, "pos_tag", pos_tag)

    assert NLTKTagger().tag("   ") == []
    assert pos_tag.calls == []


def test_default_scorer_counts_penn_content_tags(monkeypatch):
    pos_tag = _FakePosTag({
        "the": "DT", "small": "JJ", "cells": "NNS", "divide": "VBP", "quickly": "RB", ".": ".",
    })
    monkeypatch.setattr(nltk, "pos_tag", pos_tag)

    scorer = SentenceScorer()

    assert isinstance(scorer.tagger, NLTKTagger)
    assert scorer.content_score("The small cells divide quickly.") == 3
    assert pos_tag.calls == [["The", "small", "cells", "divide", "quickly", "."]]
