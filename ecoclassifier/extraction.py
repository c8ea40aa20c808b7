"""
Indicator extraction and light parsing of historical passages.
"""

from ecoclassifier.keywords import TEMPORAL_WORDS, VEGETATION_WORDS
from ecoclassifier.models import HistoricalText, ParsedText
from ecoclassifier.scoring import classify_indicators
from ecoclassifier.text import tokenize


def extract_indicators(text: str) -> list:
    """
    Return the ecological vocabulary found in text.

    Duplicates are dropped; the first occurrence fixes the order.
    """
    indicators = []
    seen = set()
    for token in tokenize(text):
        if token in VEGETATION_WORDS and token not in seen:
            seen.add(token)
            indicators.append(token)
    return indicators


def analyze_temporal_context(text: str) -> str:
    if any(token in TEMPORAL_WORDS for token in tokenize(text)):
        return 'historical'
    return 'modern'


def parse_text(text: HistoricalText) -> ParsedText:
    indicators = extract_indicators(text.content)
    return ParsedText(
        indicators=indicators,
        ecosystem_type=classify_indicators(indicators)['type'],
        temporal_context=analyze_temporal_context(text.content),
    )
