from __future__ import annotations
import io
from typing import Dict, Iterable, Sequence
import numpy as np
import pandas as pd
import matplotlib.pyplot as plt
from .datatypes import ComparisonReport, Document, ScoredSentence, TermWeightTable
from .features import FEATURE_NAMES

METRIC_NAMES = ("similarity", "retention", "relevance", "coherence", "fluency")

def _preview(text: str, limit: int = 80) -> str:
    return text[:limit] + "..." if len(text) > limit else text

def sentences_frame(doc: Document) -> pd.DataFrame:
    rows = [{
        "Sentence #": s.idx + 1,
        "Text": _preview(s.text),
        "Words": len(s.words),
    } for s in doc.sentences]
    return pd.DataFrame(rows, columns=["Sentence #", "Text", "Words"])

def term_weights_frame(table: TermWeightTable) -> pd.DataFrame:
    """Terms sorted by weight, heaviest first; ties alphabetical."""
    rows = sorted(table.items(), key=lambda x: (-x[1], x[0]))
    return pd.DataFrame(rows, columns=["Term", "Weight"])

def scoring_frame(scored: Sequence[ScoredSentence], selected: Iterable[int] = ()) -> pd.DataFrame:
    chosen = set(selected)
    rows = []
    for item in scored:
        row: Dict[str, object] = {"Sentence #": item.sentence.idx + 1}
        for name in FEATURE_NAMES:
            row[name] = item.features.get(name, 0.0)
        row["score"] = item.score
        row["selected"] = item.sentence.idx in chosen
        row["text"] = _preview(item.sentence.text)
        rows.append(row)
    columns = ["Sentence #", *FEATURE_NAMES, "score", "selected", "text"]
    return pd.DataFrame(rows, columns=columns)

def score_statistics(scored: Sequence[ScoredSentence]) -> Dict[str, float]:
    if not scored:
        return {"mean": 0.0, "std": 0.0, "min": 0.0, "max": 0.0}
    scores = np.array([item.score for item in scored], dtype=float)
    return {
        "mean": float(np.mean(scores)),
        "std": float(np.std(scores)),
        "min": float(np.min(scores)),
        "max": float(np.max(scores)),
    }

def metrics_frame(report: ComparisonReport, label_a: str = "Candidate A",
                  label_b: str = "Candidate B") -> pd.DataFrame:
    a = report.candidate_a.as_dict()
    b = report.candidate_b.as_dict()
    frame = pd.DataFrame({label_a: [a[m] for m in METRIC_NAMES],
                          label_b: [b[m] for m in METRIC_NAMES]},
                         index=list(METRIC_NAMES))
    frame.index.name = "Metric"
    return frame

def plot_metrics(report: ComparisonReport, label_a: str = "Candidate A",
                 label_b: str = "Candidate B") -> io.BytesIO:
    """Grouped bar chart of both candidates' metrics, rendered to PNG."""
    frame = metrics_frame(report, label_a, label_b)
    x = np.arange(len(frame.index))
    width = 0.38

    fig, ax = plt.subplots(figsize=(8, 4))
    ax.bar(x - width / 2, frame[label_a], width, label=label_a, color='steelblue')
    ax.bar(x + width / 2, frame[label_b], width, label=label_b, color='darkorange')
    ax.set_xticks(x)
    ax.set_xticklabels([name.capitalize() for name in frame.index])
    ax.set_ylim(0, 1.05)
    ax.set_ylabel("Score")
    ax.set_title(f"Summary Quality (similarity between candidates: {report.similarity:.2f})",
                 fontsize=12, fontweight='bold')
    ax.legend(loc='upper right')
    plt.tight_layout()

    buf = io.BytesIO()
    fig.savefig(buf, format='png', dpi=150, bbox_inches='tight')
    buf.seek(0)
    plt.close(fig)
    return buf
