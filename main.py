from __future__ import annotations
import logging
import streamlit as st
import pandas as pd

from text_summarizer.config import SummarizerConfig
from text_summarizer.errors import InvalidInput
from text_summarizer.features import build_weights
from text_summarizer.metrics import compare
from text_summarizer.preprocessing import preprocess_text
from text_summarizer.reporting import (
    metrics_frame, plot_metrics, score_statistics, scoring_frame,
    sentences_frame, term_weights_frame,
)
from text_summarizer.scoring import score_sentences
from text_summarizer.summarize import generate_summary, select, summarize, target_size

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
logger = logging.getLogger(__name__)

def load_text_from_file(uploaded_file) -> str:
    """Decode an uploaded plain-text file."""
    return uploaded_file.read().decode("utf-8", errors="replace")

def create_sidebar_controls():
    """Create sidebar controls for parameters."""
    defaults = SummarizerConfig.from_env()
    st.sidebar.header("Parameters")
    ratio = st.sidebar.slider(
        "Summary ratio",
        min_value=0.1,
        max_value=1.0,
        value=float(defaults.ratio),
        step=0.05,
        help="Share of sentences kept in the summary"
    )
    min_sentences = st.sidebar.number_input(
        "Minimum sentences",
        min_value=1,
        max_value=20,
        value=int(defaults.min_sentences),
        help="Lower bound on the number of selected sentences"
    )

    st.sidebar.header("Debug Options")
    debug_mode = st.sidebar.checkbox("Enable Debug Mode", value=False, help="Show detailed pipeline steps")

    cfg = SummarizerConfig(ratio=ratio, min_sentences=int(min_sentences), tf_mode=defaults.tf_mode)
    return cfg, debug_mode

def debug_pipeline(text: str, cfg: SummarizerConfig):
    """Run the pipeline step by step, showing every intermediate table."""

    st.header("Step 1: Pre-processing")
    with st.expander("Pre-processing Details", expanded=True):
        doc = preprocess_text(text)
        st.success(f"Processed {len(doc.sentences)} sentences")

        col1, col2 = st.columns(2)
        with col1:
            st.metric("Original Length", len(doc.raw_text))
        with col2:
            st.metric("Normalized Length", len(doc.text))
        st.dataframe(sentences_frame(doc), use_container_width=True)

    if len(doc.sentences) <= cfg.short_text_sentences:
        st.info(f"Only {len(doc.sentences)} sentence(s): the text is returned unchanged")
        return select(doc, cfg)

    st.header("Step 2: Term Weights")
    with st.expander("TF-IDF Details", expanded=False):
        table = build_weights(doc, tf_mode=cfg.tf_mode)
        st.write("**Single-document corpus: weights follow term frequency**")
        st.dataframe(term_weights_frame(table), use_container_width=True, height=250)

    st.header("Step 3: Sentence Scoring")
    with st.expander("Scoring Details", expanded=True):
        scored = score_sentences(doc, table, cfg)
        summary = generate_summary(doc, scored, cfg)
        st.dataframe(scoring_frame(scored, summary.selected), use_container_width=True)

        stats = score_statistics(scored)
        col1, col2, col3, col4 = st.columns(4)
        with col1:
            st.metric("Min Score", f"{stats['min']:.3f}")
        with col2:
            st.metric("Max Score", f"{stats['max']:.3f}")
        with col3:
            st.metric("Mean Score", f"{stats['mean']:.3f}")
        with col4:
            st.metric("Std Score", f"{stats['std']:.3f}")

    st.header("Step 4: Selection")
    with st.expander("Selection Details", expanded=True):
        col1, col2 = st.columns(2)
        with col1:
            st.metric("Target Sentences", target_size(len(doc.sentences), cfg))
        with col2:
            st.metric("Actually Selected", len(summary.selected))
        if summary.fallback:
            st.warning("Summary was not shorter than the original - original text returned")

    return summary

def comparison_panel(text: str, summary_text: str):
    st.header("Compare With Another Summary")
    other = st.text_area(
        "Alternative summary",
        height=150,
        help="Paste a summary from any other source to compare it with the extractive one"
    )
    if not other.strip():
        return

    report = compare(text, summary_text, other)
    labels = ("Extractive", "Alternative")

    st.dataframe(metrics_frame(report, *labels), use_container_width=True)
    deltas = pd.DataFrame({
        "Extractive": [report.length_a, report.word_count_a],
        "Alternative": [report.length_b, report.word_count_b],
        "Difference": [report.length_delta, report.word_count_delta],
    }, index=["Characters", "Words"])
    st.dataframe(deltas, use_container_width=True)
    st.metric("Content Similarity", f"{report.similarity:.2%}")

    try:
        st.image(plot_metrics(report, *labels), caption="Quality metrics side by side", use_container_width=True)
    except Exception as e:
        logger.exception("could not render metrics chart")
        st.error(f"Could not generate metrics chart: {str(e)}")

def main():
    st.title("Classic Summarizer")
    st.write("Paste or upload a text to extract a summary and measure its quality")

    cfg, debug_mode = create_sidebar_controls()

    uploaded_file = st.file_uploader(
        "Choose a text file",
        type=['txt'],
        help="Upload a plain-text file, or paste text below"
    )
    default_text = load_text_from_file(uploaded_file) if uploaded_file is not None else ""
    text = st.text_area("Original Text", default_text, height=200)

    if st.button("Generate Summary", type="primary"):
        try:
            if debug_mode:
                st.markdown("---")
                st.title("Pipeline Debug Mode")
                if not text:
                    raise InvalidInput("text is required")
                result = debug_pipeline(text, cfg)
            else:
                with st.spinner("Generating summary..."):
                    result = summarize(text, cfg)
            st.session_state["summary"] = result.text
            st.session_state["original"] = text

            st.markdown("---")
            st.header("Final Summary")
            st.text_area("Generated Summary", result.text, height=150, disabled=True)

            col1, col2, col3 = st.columns(3)
            with col1:
                st.metric("Original Length", result.original_length)
            with col2:
                st.metric("Summary Length", result.summary_length)
            with col3:
                compression = result.summary_length / result.original_length if result.original_length else 0
                st.metric("Actual Compression", f"{compression:.2%}")

        except InvalidInput as e:
            st.warning(str(e))
        except Exception as e:
            logger.exception("summarization failed")
            st.error(f"Error generating summary: {str(e)}")
            st.exception(e)

    if st.session_state.get("summary") and st.session_state.get("original") == text:
        comparison_panel(text, st.session_state["summary"])

if __name__ == "__main__":
    main()
