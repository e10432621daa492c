import logging

import pytest

from text_summarizer.config import SummarizerConfig
from text_summarizer.preprocessing import STOPWORDS


def test_defaults():
    cfg = SummarizerConfig()
    assert cfg.ratio == 0.3
    assert cfg.min_sentences == 2
    assert cfg.short_text_sentences == 2
    assert cfg.tf_mode == "raw"
    assert cfg.stopwords is STOPWORDS


@pytest.mark.parametrize("kwargs", [
    {"ratio": 0.0},
    {"ratio": 1.5},
    {"min_sentences": 0},
    {"tf_mode": "log"},
])
def test_invalid_values_rejected(kwargs):
    with pytest.raises(ValueError):
        SummarizerConfig(**kwargs)


def test_from_env(monkeypatch):
    monkeypatch.setenv("SUMMARIZER_RATIO", "0.5")
    monkeypatch.setenv("SUMMARIZER_MIN_SENTENCES", "3")
    monkeypatch.setenv("SUMMARIZER_TF_MODE", " Sublinear ")
    cfg = SummarizerConfig.from_env()
    assert cfg.ratio == 0.5
    assert cfg.min_sentences == 3
    assert cfg.tf_mode == "sublinear"


def test_from_env_malformed_uses_defaults(monkeypatch, caplog):
    monkeypatch.setenv("SUMMARIZER_RATIO", "lots")
    monkeypatch.setenv("SUMMARIZER_MIN_SENTENCES", "two")
    monkeypatch.delenv("SUMMARIZER_TF_MODE", raising=False)
    with caplog.at_level(logging.WARNING, logger="text_summarizer.config"):
        cfg = SummarizerConfig.from_env()
    assert cfg.ratio == 0.3
    assert cfg.min_sentences == 2
    assert "SUMMARIZER_RATIO" in caplog.text
    assert "SUMMARIZER_MIN_SENTENCES" in caplog.text
