from __future__ import annotations
from dataclasses import dataclass, field, asdict
from typing import List, Dict, Tuple

@dataclass(frozen=True)
class Sentence:
    idx: int
    text: str
    words: Tuple[str, ...] = ()  # lowercase whitespace tokens

@dataclass(frozen=True)
class Document:
    raw_text: str
    text: str  # trimmed, whitespace collapsed
    sentences: Tuple[Sentence, ...] = ()

@dataclass
class ScoredSentence:
    sentence: Sentence
    score: float
    features: Dict[str, float] = field(default_factory=dict)

@dataclass
class Summary:
    text: str
    original_length: int
    summary_length: int
    selected: List[int] = field(default_factory=list)
    fallback: bool = False  # normalized original returned as-is

    def as_dict(self) -> Dict[str, object]:
        return {
            "summary": self.text,
            "originalLength": self.original_length,
            "summaryLength": self.summary_length,
        }

@dataclass
class MetricsReport:
    similarity: float
    retention: float
    relevance: float
    coherence: float
    fluency: float

    def as_dict(self) -> Dict[str, float]:
        return asdict(self)

@dataclass
class ComparisonReport:
    candidate_a: MetricsReport
    candidate_b: MetricsReport
    length_a: int
    length_b: int
    word_count_a: int
    word_count_b: int
    length_delta: int
    word_count_delta: int
    similarity: float  # candidate A vs candidate B

    def as_dict(self) -> Dict[str, object]:
        return asdict(self)

TermWeightTable = Dict[str, float]  # term -> importance within one document
FeatureVector = Dict[str, float]  # per-sentence factor scores
