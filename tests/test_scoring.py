import math

import pytest

from text_summarizer.config import ScoringWeights, SummarizerConfig
from text_summarizer.datatypes import ScoredSentence, Sentence
from text_summarizer.features import build_weights
from text_summarizer.preprocessing import preprocess_text
from text_summarizer.scoring import combine, rank, score_sentence, score_sentences

DOGS = ("Dogs are loyal animals. They protect their owners. "
        "Dogs require regular exercise. Many people love dogs.")
IDF = 1.0 + math.log(0.5)


def test_weights_sum_to_one():
    w = ScoringWeights()
    total = w.term_weight + w.position + w.length + w.keyword + w.relative_position
    assert total == pytest.approx(1.0)
    assert w.term_boost == 2.0


def test_combine():
    f = {"term_weight": 1.0, "position": 1.0, "length": 1.0, "keyword": 1.0, "relative_position": 1.0}
    assert combine(f, ScoringWeights()) == pytest.approx(1.0)


def test_score_sentence_first():
    doc = preprocess_text(DOGS)
    table = build_weights(doc)
    expected = 0.4 * 2 * 5 * IDF + 0.2 * 1.0 + 0.15 * 0.3 + 0.1 * 1.0
    assert score_sentence(doc.sentences[0], doc.sentences, table) == pytest.approx(expected)


def test_score_sentences_matches_single_scores():
    doc = preprocess_text(DOGS)
    table = build_weights(doc)
    scored = score_sentences(doc, table)
    assert [item.sentence.idx for item in scored] == [0, 1, 2, 3]
    for item in scored:
        assert item.score == pytest.approx(score_sentence(item.sentence, doc.sentences, table))
        assert item.score >= 0
        assert all(v >= 0 for v in item.features.values())


def test_custom_stopwords_change_term_factor():
    doc = preprocess_text(DOGS)
    table = build_weights(doc)
    cfg = SummarizerConfig(stopwords=frozenset({"dogs"}))
    default = score_sentences(doc, table)[0].features["term_weight"]
    custom = score_sentences(doc, table, cfg)[0].features["term_weight"]
    # "are" now counts, "dogs" no longer does
    assert default == pytest.approx(2 * 5 * IDF)
    assert custom == pytest.approx(2 * 3 * IDF)


def test_rank_is_stable_for_ties():
    items = [ScoredSentence(Sentence(idx=i, text=str(i)), score=1.0) for i in range(4)]
    items.append(ScoredSentence(Sentence(idx=4, text="4"), score=2.0))
    assert [x.sentence.idx for x in rank(items)] == [4, 0, 1, 2, 3]
