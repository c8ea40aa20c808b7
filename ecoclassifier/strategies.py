"""
Classifier strategies.

KeywordScoringStrategy and TrainedModelStrategy read different signals
and different keyword tables, so they can disagree on the same passage.
Callers choose one explicitly; every result records which one ran.
"""

from ecoclassifier.constants import STRATEGY_KEYWORD, STRATEGY_TRAINED_MODEL, STRATEGIES
from ecoclassifier.exceptions import ConfigurationError
from ecoclassifier.extraction import extract_indicators
from ecoclassifier.models import EcosystemResult, HistoricalText
from ecoclassifier.scoring import ModelManager, classify_indicators, extract_features, score_confidence
from ecoclassifier.text import tokenize


class KeywordScoringStrategy:
    """Vocabulary filter, then keyword + fuzzy scoring."""

    name = STRATEGY_KEYWORD

    def classify(self, text: HistoricalText) -> EcosystemResult:
        indicators = extract_indicators(text.content)
        result = classify_indicators(indicators)
        return EcosystemResult(
            text_id=text.id,
            ecosystem_type=result['type'],
            confidence=score_confidence(result),
            extracted_features=indicators,
            timestamp=text.timestamp,
            description=text.content,
            strategy=self.name,
        )


class TrainedModelStrategy:
    """Naive Bayes over raw tokens; features come from FEATURE_KEYWORDS."""

    name = STRATEGY_TRAINED_MODEL

    def __init__(self, model_manager: ModelManager = None):
        if model_manager is None:
            model_manager = ModelManager().train()
        self.model_manager = model_manager

    def classify(self, text: HistoricalText) -> EcosystemResult:
        tokens = tokenize(text.content)
        if not tokens or not self.model_manager.knows_any(tokens):
            label, confidence = 'unknown', 0.0
        else:
            prediction = self.model_manager.predict(tokens)
            label, confidence = prediction['label'], prediction['confidence']

        return EcosystemResult(
            text_id=text.id,
            ecosystem_type=label,
            confidence=confidence,
            extracted_features=extract_features(tokens),
            timestamp=text.timestamp,
            description=text.content,
            strategy=self.name,
        )


def build_strategy(name: str, model_manager: ModelManager = None):
    """Instantiate a strategy by name. An untrained manager is rejected up front."""
    if name == STRATEGY_KEYWORD:
        return KeywordScoringStrategy()
    if name == STRATEGY_TRAINED_MODEL:
        if model_manager is not None and not model_manager.is_loaded:
            raise ConfigurationError("Trained-model strategy requires a trained or loaded model")
        return TrainedModelStrategy(model_manager)
    raise ValueError(f"Unknown strategy '{name}'. Expected one of: {', '.join(STRATEGIES)}")
