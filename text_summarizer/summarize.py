from __future__ import annotations
import logging
import math
from typing import Optional, Sequence
from .config import SummarizerConfig
from .datatypes import Document, ScoredSentence, Summary
from .errors import InvalidInput
from .features import build_weights
from .preprocessing import preprocess_text
from .scoring import rank, score_sentences

logger = logging.getLogger(__name__)

def target_size(n: int, cfg: SummarizerConfig) -> int:
    return max(cfg.min_sentences, math.ceil(n * cfg.ratio))

def generate_summary(doc: Document, scored: Sequence[ScoredSentence],
                     cfg: Optional[SummarizerConfig] = None) -> Summary:
    cfg = cfg or SummarizerConfig()
    k = target_size(len(scored), cfg)
    top = rank(scored)[:k]
    selected = sorted(item.sentence.idx for item in top)  # restore original order
    by_idx = {s.idx: s for s in doc.sentences}
    text = " ".join(by_idx[i].text for i in selected)

    # A summary must never expand the text
    if len(text) >= len(doc.text):
        logger.debug("summary (%d chars) not shorter than original (%d chars); returning original",
                     len(text), len(doc.text))
        return Summary(text=doc.text, original_length=len(doc.raw_text),
                       summary_length=len(doc.text), fallback=True)

    logger.debug("selected sentences %s of %d", selected, len(doc.sentences))
    return Summary(text=text, original_length=len(doc.raw_text),
                   summary_length=len(text), selected=selected)

def select(doc: Document, cfg: Optional[SummarizerConfig] = None) -> Summary:
    cfg = cfg or SummarizerConfig()
    if len(doc.sentences) <= cfg.short_text_sentences:
        logger.debug("%d sentence(s); returning text unchanged", len(doc.sentences))
        return Summary(text=doc.text, original_length=len(doc.raw_text),
                       summary_length=len(doc.text), fallback=True)

    table = build_weights(doc, tf_mode=cfg.tf_mode)
    scored = score_sentences(doc, table, cfg)
    return generate_summary(doc, scored, cfg)

def summarize(text: Optional[str], cfg: Optional[SummarizerConfig] = None) -> Summary:
    # Pipeline glue
    if not isinstance(text, str) or not text:
        raise InvalidInput("text is required")
    doc = preprocess_text(text)
    logger.debug("summarizing %d chars, %d sentences", len(doc.text), len(doc.sentences))
    return select(doc, cfg)
