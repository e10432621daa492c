import math

import pytest

from text_summarizer.features import (
    FEATURE_NAMES,
    _compute_idf,
    _compute_tf,
    build_weights,
    extract_features,
    weight,
)
from text_summarizer.preprocessing import preprocess_text

DOGS = ("Dogs are loyal animals. They protect their owners. "
        "Dogs require regular exercise. Many people love dogs.")
IDF = 1.0 + math.log(0.5)


def test_single_document_idf_is_constant():
    idf = _compute_idf([["a", "b", "a"]])
    assert idf == {"a": pytest.approx(IDF), "b": pytest.approx(IDF)}
    assert _compute_idf([]) == {}


def test_tf_modes():
    tokens = ["x", "x", "y", "z"]
    assert _compute_tf(tokens, "raw") == {"x": 2.0, "y": 1.0, "z": 1.0}
    assert _compute_tf(tokens, "norm")["x"] == pytest.approx(0.5)
    assert _compute_tf(tokens, "sublinear")["x"] == pytest.approx(1.0 + math.log(2))
    assert _compute_tf([], "raw") == {}
    with pytest.raises(ValueError):
        _compute_tf(tokens, "bogus")


def test_build_weights_follows_term_frequency():
    table = build_weights(preprocess_text(DOGS))
    assert table["dogs"] == pytest.approx(3 * IDF)
    assert table["loyal"] == pytest.approx(IDF)
    # stopwords are not special-cased by the model
    assert "are" in table


def test_weight_lookup():
    table = build_weights(preprocess_text(DOGS))
    assert weight(table, "animals.") == pytest.approx(IDF)
    assert weight(table, "Dogs") == pytest.approx(3 * IDF)
    assert weight(table, "unicorns") == 0.0
    assert weight(table, "...") == 0.0


def test_build_weights_empty_document():
    assert build_weights(preprocess_text("")) == {}


def test_extract_features_dogs():
    doc = preprocess_text(DOGS)
    feats = extract_features(doc, build_weights(doc))
    assert len(feats) == 4
    assert set(feats[0]) == set(FEATURE_NAMES)

    first, second, _, last = feats
    assert first["term_weight"] == pytest.approx(2 * 5 * IDF)
    assert first["position"] == 1.0
    assert last["position"] == 0.8
    assert second["position"] == 0.0
    assert first["length"] == 0.0  # four words
    assert first["keyword"] == 0.3
    assert [f["relative_position"] for f in feats] == pytest.approx([1.0, 0.75, 0.5, 0.25])


def test_length_factor_bounds():
    six = "one two three four five six."
    twenty = " ".join(["word"] * 20) + "."
    doc = preprocess_text(f"{six} {twenty} Tiny.")
    feats = extract_features(doc, build_weights(doc))
    assert feats[0]["length"] == 0.5
    assert feats[1]["length"] == 0.0


def test_keyword_factor_ignores_stopwords():
    doc = preprocess_text("Being about now. Cat sat. Big dog ran.")
    feats = extract_features(doc, build_weights(doc))
    # "being" and "about" are long but are stopwords; "now." is short
    assert feats[0]["keyword"] == 0.0
    assert feats[1]["keyword"] == 0.0


def test_term_factor_skips_stopwords_with_punctuation():
    doc = preprocess_text("Cats sleep in. Cats sleep in the sun. Birds fly.")
    feats = extract_features(doc, build_weights(doc))
    # "in." counts as the stopword "in"; only cats and sleep contribute
    assert feats[0]["term_weight"] == pytest.approx(2 * 4 * IDF)
