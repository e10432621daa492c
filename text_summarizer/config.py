"""Tunable policy for the extractive pipeline."""
from __future__ import annotations
import logging
import os
from dataclasses import dataclass, field
from typing import FrozenSet

from .preprocessing import STOPWORDS

_logger = logging.getLogger(__name__)

TF_MODES = ("raw", "sublinear", "norm")


def _float_env(name: str, default: float) -> float:
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        return float(raw.strip())
    except ValueError:
        _logger.warning("Invalid float for %s=%r; using default %s", name, raw, default)
        return default


def _int_env(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        return int(raw.strip())
    except ValueError:
        _logger.warning("Invalid integer for %s=%r; using default %d", name, raw, default)
        return default


@dataclass(frozen=True)
class ScoringWeights:
    # multiplier applied to the summed term weights before combination
    term_boost: float = 2.0
    term_weight: float = 0.4
    position: float = 0.2
    length: float = 0.15
    keyword: float = 0.15
    relative_position: float = 0.1


@dataclass(frozen=True)
class SummarizerConfig:
    ratio: float = 0.3
    min_sentences: int = 2
    short_text_sentences: int = 2  # at or below this, text is returned as-is
    tf_mode: str = "raw"
    weights: ScoringWeights = field(default_factory=ScoringWeights)
    stopwords: FrozenSet[str] = STOPWORDS

    def __post_init__(self) -> None:
        if not 0.0 < self.ratio <= 1.0:
            raise ValueError(f"ratio must be in (0, 1], got {self.ratio}")
        if self.min_sentences < 1:
            raise ValueError(f"min_sentences must be >= 1, got {self.min_sentences}")
        if self.tf_mode not in TF_MODES:
            raise ValueError(f"Unknown tf_mode: {self.tf_mode}")

    @classmethod
    def from_env(cls) -> "SummarizerConfig":
        return cls(
            ratio=_float_env("SUMMARIZER_RATIO", 0.3),
            min_sentences=_int_env("SUMMARIZER_MIN_SENTENCES", 2),
            tf_mode=os.environ.get("SUMMARIZER_TF_MODE", "raw").strip().lower(),
        )
