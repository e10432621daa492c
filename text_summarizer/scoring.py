from __future__ import annotations
from typing import List, Optional, Sequence
from .datatypes import Document, Sentence, ScoredSentence, FeatureVector, TermWeightTable
from .config import ScoringWeights, SummarizerConfig
from .features import sentence_features

def combine(f: FeatureVector, weights: ScoringWeights) -> float:
    """
    Weighted sum of the five factors:
        0.4*term_weight + 0.2*position + 0.15*length + 0.15*keyword + 0.1*relative_position
    The term-weight factor arrives already multiplied by ``weights.term_boost``.
    """
    return (f["term_weight"] * weights.term_weight
            + f["position"] * weights.position
            + f["length"] * weights.length
            + f["keyword"] * weights.keyword
            + f["relative_position"] * weights.relative_position)

def score_sentence(sentence: Sentence, sentences: Sequence[Sentence], table: TermWeightTable,
                   cfg: Optional[SummarizerConfig] = None) -> float:
    cfg = cfg or SummarizerConfig()
    f = sentence_features(sentence, len(sentences), table,
                          boost=cfg.weights.term_boost, stopwords=cfg.stopwords)
    return combine(f, cfg.weights)

def score_sentences(doc: Document, table: TermWeightTable,
                    cfg: Optional[SummarizerConfig] = None) -> List[ScoredSentence]:
    # No cross-sentence normalization: every factor shares the document context
    cfg = cfg or SummarizerConfig()
    n = len(doc.sentences)
    scored: List[ScoredSentence] = []
    for s in doc.sentences:
        f = sentence_features(s, n, table, boost=cfg.weights.term_boost, stopwords=cfg.stopwords)
        scored.append(ScoredSentence(sentence=s, score=combine(f, cfg.weights), features=f))
    return scored

def rank(scored: Sequence[ScoredSentence]) -> List[ScoredSentence]:
    # sorted() is stable, so equal scores keep document order
    return sorted(scored, key=lambda x: x.score, reverse=True)
