from __future__ import annotations
from typing import Dict, List, Sequence, FrozenSet
from collections import Counter
import math
from .datatypes import Document, Sentence, FeatureVector, TermWeightTable
from .preprocessing import STOPWORDS, is_stopword, tokenize_terms

FEATURE_NAMES = ("term_weight", "position", "length", "keyword", "relative_position")

def _compute_tf(tokens: List[str], tf_mode: str = "raw") -> Dict[str, float]:
    """
    TF:
      - raw: count
      - sublinear: 1 + log(count)
      - norm: count / |d|
    """
    tf_counts = Counter(tokens)
    if not tf_counts:
        return {}

    if tf_mode == "raw":
        tf_scores = {t: float(c) for t, c in tf_counts.items()}
    elif tf_mode == "sublinear":
        tf_scores = {t: (1.0 + math.log(c)) for t, c in tf_counts.items() if c > 0}
    elif tf_mode == "norm":
        total = sum(tf_counts.values())
        tf_scores = {t: (c / total) for t, c in tf_counts.items()}
    else:
        raise ValueError(f"Unknown tf_mode: {tf_mode}")

    return tf_scores


def _compute_idf(corpus: Sequence[List[str]]) -> Dict[str, float]:
    """
    IDF(t) = 1 + log(N / (1 + DF))

    With the document as its own one-document corpus every present term has
    DF == N == 1, so IDF is the constant 1 + log(1/2).
    """
    N = len(corpus)
    if N == 0:
        return {}
    df = Counter()
    for tokens in corpus:
        df.update(set(tokens))
    return {term: 1.0 + math.log(N / (1.0 + count)) for term, count in df.items()}


def build_weights(doc: Document, tf_mode: str = "raw") -> TermWeightTable:
    """TF-IDF(t, d) = TF(t, d) * IDF(t) for every term of ``doc``."""
    tokens = tokenize_terms(doc.text)
    idf_scores = _compute_idf([tokens])
    tf_scores = _compute_tf(tokens, tf_mode=tf_mode)
    return {t: tf_scores[t] * idf_scores.get(t, 0.0) for t in tf_scores}


def weight(table: TermWeightTable, term: str) -> float:
    # "animals." resolves to the term "animals"; unseen terms weigh 0
    return sum(table.get(t, 0.0) for t in tokenize_terms(term))

def _term_weight_score(s: Sentence, table: TermWeightTable, boost: float,
                       stopwords: FrozenSet[str]) -> float:
    # filter after tokenizing so "in." is caught as the stopword "in"
    return boost * sum(table.get(t, 0.0) for w in s.words for t in tokenize_terms(w)
                       if not is_stopword(t, stopwords))

def _position_score(idx: int, n: int) -> float:
    # first sentence states the thesis, last one the conclusion
    if idx == 0:
        return 1.0
    if idx == n - 1:
        return 0.8
    return 0.0

def _length_score(n_words: int) -> float:
    return 0.5 if 5 < n_words < 20 else 0.0

def _keyword_score(words: Sequence[str], stopwords: FrozenSet[str]) -> float:
    return 0.3 if any(len(w) > 4 for w in words if not is_stopword(w, stopwords)) else 0.0

def _relative_position_score(idx: int, n: int) -> float:
    return 1.0 - (idx / n)

def sentence_features(s: Sentence, n: int, table: TermWeightTable,
                      boost: float = 2.0, stopwords: FrozenSet[str] = STOPWORDS) -> FeatureVector:
    return {
        "term_weight": _term_weight_score(s, table, boost, stopwords),
        "position": _position_score(s.idx, n),
        "length": _length_score(len(s.words)),
        "keyword": _keyword_score(s.words, stopwords),
        "relative_position": _relative_position_score(s.idx, n),
    }

def extract_features(doc: Document, table: TermWeightTable,
                     boost: float = 2.0, stopwords: FrozenSet[str] = STOPWORDS) -> List[FeatureVector]:
    n = len(doc.sentences)
    return [sentence_features(s, n, table, boost=boost, stopwords=stopwords) for s in doc.sentences]
