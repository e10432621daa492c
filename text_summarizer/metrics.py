"""
Lexical quality metrics for comparing a summary with its source.

All functions are pure, tokenize case-insensitively on whitespace and return
a float in [0, 1]. Ratios with an empty denominator resolve to 0.
"""
from __future__ import annotations
import logging
from typing import FrozenSet, Optional
from .datatypes import ComparisonReport, MetricsReport
from .errors import InvalidInput
from .preprocessing import STOPWORDS, content_words, split_terminal, split_words

logger = logging.getLogger(__name__)

_VERB_SUFFIXES = ("ing", "ed")


def similarity(text_a: str, text_b: str) -> float:
    """Jaccard similarity of the two texts' lowercase word sets."""
    words_a = set(split_words(text_a))
    words_b = set(split_words(text_b))
    union = words_a | words_b
    if not union:
        return 0.0
    return len(words_a & words_b) / len(union)


def retention(original: str, summary: str, stopwords: FrozenSet[str] = STOPWORDS) -> float:
    """Share of the original's content vocabulary that survives in the summary."""
    original_words = content_words(split_words(original), stopwords)
    if not original_words:
        return 0.0
    summary_words = content_words(split_words(summary), stopwords)
    return len(original_words & summary_words) / len(original_words)


def relevance(original: str, summary: str, stopwords: FrozenSet[str] = STOPWORDS) -> float:
    """Share of the summary's content vocabulary that comes from the original."""
    summary_words = content_words(split_words(summary), stopwords)
    if not summary_words:
        return 0.0
    original_words = content_words(split_words(original), stopwords)
    return len(summary_words & original_words) / len(summary_words)


def coherence(summary: str, stopwords: FrozenSet[str] = STOPWORDS) -> float:
    """
    Mean lexical overlap between adjacent sentences.

    Each pair contributes shared content words divided by the larger of the
    two content vocabularies. A single sentence is perfectly coherent.
    """
    sentences = split_terminal(summary)
    if len(sentences) <= 1:
        return 1.0

    vocabularies = [content_words(split_words(s), stopwords) for s in sentences]
    total = 0.0
    for current, following in zip(vocabularies, vocabularies[1:]):
        larger = max(len(current), len(following))
        if larger:
            total += len(current & following) / larger
    return total / (len(sentences) - 1)


def fluency(summary: str, stopwords: FrozenSet[str] = STOPWORDS) -> float:
    """
    Fraction of sentences (three words or more) with a content word and a
    word ending in -ing/-ed. Shorter sentences are left out entirely.
    """
    qualifying = 0
    fluent = 0
    for sentence in split_terminal(summary):
        words = split_words(sentence)
        if len(words) < 3:
            continue
        qualifying += 1
        has_subject = any(w not in stopwords for w in words)
        has_verb = any(w.endswith(_VERB_SUFFIXES) for w in words)
        if has_subject and has_verb:
            fluent += 1
    if not qualifying:
        return 0.0
    return fluent / qualifying


def _require(original: Optional[str]) -> str:
    if not isinstance(original, str) or not original:
        raise InvalidInput("original text is required")
    return original


def evaluate(original: Optional[str], candidate: str,
             stopwords: FrozenSet[str] = STOPWORDS) -> MetricsReport:
    """Score ``candidate`` against ``original``.

    The original is required and raises InvalidInput when missing or empty;
    an empty candidate scores neutral values.
    """
    original = _require(original)
    candidate = candidate or ""
    report = MetricsReport(
        similarity=similarity(original, candidate),
        retention=retention(original, candidate, stopwords),
        relevance=relevance(original, candidate, stopwords),
        coherence=coherence(candidate, stopwords),
        fluency=fluency(candidate, stopwords),
    )
    logger.debug("evaluated candidate (%d chars): %s", len(candidate), report)
    return report


def compare(original: Optional[str], candidate_a: str, candidate_b: str,
            stopwords: FrozenSet[str] = STOPWORDS) -> ComparisonReport:
    """Side-by-side metrics for two summaries of the same original."""
    original = _require(original)
    candidate_a = candidate_a or ""
    candidate_b = candidate_b or ""
    words_a = len(split_words(candidate_a))
    words_b = len(split_words(candidate_b))
    return ComparisonReport(
        candidate_a=evaluate(original, candidate_a, stopwords),
        candidate_b=evaluate(original, candidate_b, stopwords),
        length_a=len(candidate_a),
        length_b=len(candidate_b),
        word_count_a=words_a,
        word_count_b=words_b,
        length_delta=abs(len(candidate_a) - len(candidate_b)),
        word_count_delta=abs(words_a - words_b),
        similarity=similarity(candidate_a, candidate_b),
    )
