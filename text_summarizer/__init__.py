from .datatypes import Sentence, Document, ScoredSentence, Summary, MetricsReport, ComparisonReport, TermWeightTable, FeatureVector
from .errors import InvalidInput
from .config import ScoringWeights, SummarizerConfig
from .preprocessing import STOPWORDS, is_stopword, normalize_whitespace, split_sentences, split_words, preprocess_text
from .features import build_weights, weight, extract_features
from .scoring import score_sentence, score_sentences
from .summarize import select, summarize, generate_summary
from .metrics import similarity, retention, relevance, coherence, fluency, evaluate, compare
