"""
Historical Ecosystem Classification Package

Classifies historical landscape descriptions into ecosystem types,
tracks ecosystem trends over time and compares them with modern
descriptions.
"""

from ecoclassifier.constants import (
    ECOSYSTEM_TYPES, LABEL_DISPLAY, PREFERRED_ORDER, MATCH_THRESHOLD,
    CONFIDENCE_THRESHOLD_HIGH, CONFIDENCE_THRESHOLD_MEDIUM,
)
from ecoclassifier.keywords import ECOSYSTEM_KEYWORDS, VEGETATION_WORDS, FEATURE_KEYWORDS, TRAINING_DOCUMENTS
from ecoclassifier.exceptions import (
    EcoClassifierError, InvalidInputError, DecodingError, ConfigurationError, UsageError,
)
from ecoclassifier.models import (
    HistoricalText, EcosystemResult, TimelineEntry, EcosystemTrend, TemporalAnalysis,
    ComparisonResult, ParsedText, AnalysisConfig, AnalysisReport,
)
from ecoclassifier.scoring import calc_scores, classify_indicators, score_confidence, extract_features, ModelManager
from ecoclassifier.extraction import extract_indicators, analyze_temporal_context, parse_text
from ecoclassifier.strategies import KeywordScoringStrategy, TrainedModelStrategy, build_strategy
from ecoclassifier.analysis import EcosystemAnalyzer, build_timeline, infer_trend, run_analysis
from ecoclassifier.comparison import compare
from ecoclassifier.classification import (
    generate_recommendation,
    filter_by_confidence,
    get_confidence_level,
)
