"""
Scoring and ML classification logic for ecosystem classification.
"""

import os
import json
from datetime import datetime

import numpy as np
import joblib
from rapidfuzz.distance import JaroWinkler
from sklearn.feature_extraction.text import CountVectorizer
from sklearn.naive_bayes import MultinomialNB

from ecoclassifier.constants import FUZZY_MATCH_THRESHOLD, PREFERRED_ORDER
from ecoclassifier.exceptions import ConfigurationError
from ecoclassifier.keywords import ECOSYSTEM_KEYWORDS, FEATURE_KEYWORDS, TRAINING_DOCUMENTS
from ecoclassifier.text import stemmed_terms


def keyword_matches(indicator: str, keyword: str) -> bool:
    """Substring containment or Jaro-Winkler similarity above the fuzzy threshold."""
    return keyword in indicator or JaroWinkler.similarity(indicator, keyword) > FUZZY_MATCH_THRESHOLD


def calc_scores(indicators: list, table: dict = ECOSYSTEM_KEYWORDS) -> dict:
    """
    Score each ecosystem by how many indicators hit at least one of its keywords.

    An indicator adds at most 1 to a given ecosystem, but may add to
    several ecosystems in the same pass.
    """
    scores = {ecosystem: 0 for ecosystem in table}
    for indicator in indicators:
        for ecosystem, keywords in table.items():
            if any(keyword_matches(indicator, kw) for kw in keywords):
                scores[ecosystem] += 1
    return scores


def classify_indicators(indicators: list) -> dict:
    """Keyword-based classification of a list of ecological indicators."""
    if not indicators:
        return {'type': 'unknown', 'confidence': 0.0, 'indicators': [], 'scores': {}}

    normalized = [ind.lower() for ind in indicators]
    scores = calc_scores(normalized)

    max_score = max(scores.values())
    if max_score == 0:
        return {'type': 'unknown', 'confidence': 0.0, 'indicators': list(indicators), 'scores': scores}

    top = [ecosystem for ecosystem, score in scores.items() if score == max_score]
    # Ties go to the more specific category; table order as a last resort
    final_type = next((e for e in PREFERRED_ORDER if e in top), top[0])

    return {
        'type': final_type,
        'confidence': max_score / len(indicators),
        'indicators': list(indicators),
        'scores': scores,
    }


def score_confidence(result: dict) -> float:
    if result['type'] == 'unknown':
        return 0.0
    return min(1.0, result['confidence'])


def extract_features(tokens: list) -> list:
    """Ecosystems whose feature keywords appear among the tokens."""
    token_set = set(tokens)
    return [ecosystem for ecosystem, keywords in FEATURE_KEYWORDS.items()
            if any(kw in token_set for kw in keywords)]


class ModelManager:
    """Owns the Bayesian text model: training, persistence and prediction."""

    def __init__(self):
        self.model = None
        self.vectorizer = None

    @property
    def is_loaded(self) -> bool:
        return self.model is not None and self.vectorizer is not None

    def train(self, documents: list = TRAINING_DOCUMENTS) -> 'ModelManager':
        """Fit vectorizer and classifier on (text, label) pairs."""
        texts = [text for text, _ in documents]
        labels = [label for _, label in documents]

        vectorizer = CountVectorizer(analyzer=stemmed_terms)
        features = vectorizer.fit_transform(texts)
        model = MultinomialNB()
        model.fit(features, labels)

        self.model = model
        self.vectorizer = vectorizer
        return self

    def load(self, model_dir: str) -> bool:
        try:
            model_files = [f for f in os.listdir(model_dir)
                           if f.startswith('naive_bayes') and f.endswith('.joblib')]
            vec_files = [f for f in os.listdir(model_dir)
                         if f.startswith('vectorizer') and f.endswith('.joblib')]

            if model_files and vec_files:
                model_files.sort(reverse=True)
                vec_files.sort(reverse=True)
                self.model = joblib.load(os.path.join(model_dir, model_files[0]))
                self.vectorizer = joblib.load(os.path.join(model_dir, vec_files[0]))
                print(f"Loaded model: {model_files[0]}")
                return True
        except Exception as e:
            print(f"Could not load ML model: {e}")
        return False

    def save(self, model_dir: str) -> tuple:
        """Persist model, vectorizer and metadata with a shared timestamp."""
        if not self.is_loaded:
            raise ConfigurationError("Nothing to save: model has not been trained")

        os.makedirs(model_dir, exist_ok=True)
        timestamp = datetime.now().strftime('%Y%m%d_%H%M%S')

        model_path = os.path.join(model_dir, f'naive_bayes_{timestamp}.joblib')
        joblib.dump(self.model, model_path)
        vec_path = os.path.join(model_dir, f'vectorizer_{timestamp}.joblib')
        joblib.dump(self.vectorizer, vec_path)

        meta = {
            'model_name': 'naive_bayes',
            'timestamp': timestamp,
            'classes': [str(c) for c in self.model.classes_],
            'vocabulary_size': len(self.vectorizer.vocabulary_),
            'model_path': model_path,
            'vectorizer_path': vec_path,
        }
        with open(os.path.join(model_dir, f'metadata_{timestamp}.json'), 'w') as f:
            json.dump(meta, f, indent=2)

        print(f"Saved model: {model_path}")
        return model_path, vec_path

    def predict(self, tokens: list) -> dict:
        if not self.is_loaded:
            raise ConfigurationError()
        return ml_classify(tokens, self.model, self.vectorizer)

    def knows_any(self, tokens: list) -> bool:
        """True when at least one token stems to a term in the fitted vocabulary."""
        if not self.is_loaded:
            raise ConfigurationError()
        return self.vectorizer.transform([' '.join(tokens)]).nnz > 0


def ml_classify(tokens: list, model, vectorizer) -> dict:
    """Naive Bayes prediction over raw tokens; confidence is the top class probability."""
    features = vectorizer.transform([' '.join(tokens)])
    probabilities = model.predict_proba(features)[0]
    best = int(np.argmax(probabilities))

    return {
        'label': str(model.classes_[best]),
        'confidence': float(probabilities[best]),
        'probabilities': {
            str(label): float(prob)
            for label, prob in zip(model.classes_, probabilities)
        },
    }
