from __future__ import annotations
import re
from typing import Iterable, List, FrozenSet, Set
from .datatypes import Document, Sentence

_SENT_RE = re.compile(r"(?<=[.!?])\s+")   # boundary after terminal punctuation
_TERMINAL_RE = re.compile(r"[.!?]+")      # metric-side split, punctuation dropped
_WORD_RE = re.compile(r"[^\W_]+")         # term rule for the weight model

STOPWORDS: FrozenSet[str] = frozenset({
    # articles, conjunctions, prepositions, forms of "be"
    'the', 'a', 'an', 'and', 'or', 'but', 'in', 'on', 'at', 'to', 'for', 'with',
    'by', 'about', 'as', 'of', 'from', 'is', 'are', 'was', 'were', 'be', 'been', 'being',
})

def is_stopword(word: str, stopwords: FrozenSet[str] = STOPWORDS) -> bool:
    return word.lower() in stopwords

def content_words(words: Iterable[str], stopwords: FrozenSet[str] = STOPWORDS) -> Set[str]:
    """Distinct lowercase words that are not stopwords."""
    return {w.lower() for w in words if not is_stopword(w, stopwords)}

def normalize_whitespace(text: str) -> str:
    return " ".join(text.split())

def split_sentences(text: str) -> List[str]:
    # Split on . ! ? while keeping the punctuation with its sentence
    parts = _SENT_RE.split(text.strip())
    return [p.strip() for p in parts if p.strip()]

def split_terminal(text: str) -> List[str]:
    """Segments between runs of terminal punctuation, blanks dropped."""
    return [p.strip() for p in _TERMINAL_RE.split(text) if p.strip()]

def split_words(text: str) -> List[str]:
    return text.lower().split()

def tokenize_terms(text: str) -> List[str]:
    return _WORD_RE.findall(text.lower())

def preprocess_text(text: str) -> Document:
    normalized = normalize_whitespace(text)
    sentences = tuple(
        Sentence(idx=i, text=s, words=tuple(split_words(s)))
        for i, s in enumerate(split_sentences(normalized))
    )
    return Document(raw_text=text, text=normalized, sentences=sentences)
