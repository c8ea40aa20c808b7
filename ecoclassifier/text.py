"""
Tokenization and stemming shared by the extractor, the Bayesian model
and the modern-data comparator.
"""

import re

from nltk.stem import PorterStemmer
from sklearn.feature_extraction.text import ENGLISH_STOP_WORDS

_WORD_PATTERN = re.compile(r'\w+')
_stemmer = PorterStemmer()


def tokenize(text: str) -> list:
    """Split text into lowercase word tokens (hyphens and punctuation separate words)."""
    if not text:
        return []
    return _WORD_PATTERN.findall(text.lower())


def stem(token: str) -> str:
    return _stemmer.stem(token)


def stemmed_terms(doc: str) -> list:
    """Vectorizer analyzer: tokenize, drop English stop words, stem.

    Module level so fitted vectorizers can be pickled with joblib.
    """
    return [stem(t) for t in tokenize(doc) if t not in ENGLISH_STOP_WORDS]
