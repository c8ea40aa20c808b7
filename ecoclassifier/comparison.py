"""
Historical vs modern comparison.

A historical result "matches" when enough of its description terms,
after stemming, also occur in the modern text sample. Matching is per
term, not per phrase.
"""

from ecoclassifier.constants import MATCH_THRESHOLD
from ecoclassifier.exceptions import DecodingError
from ecoclassifier.models import ComparisonResult, EcosystemResult
from ecoclassifier.text import stem, tokenize


def decode_modern_data(modern_data: bytes) -> str:
    try:
        return modern_data.decode('utf-8')
    except UnicodeDecodeError as e:
        raise DecodingError(f"Modern data is not valid UTF-8: {e}") from e


def term_overlap(description: str, modern_stems: set) -> float:
    terms = description.lower().split()
    match_count = sum(1 for term in terms if stem(term) in modern_stems)
    return match_count / max(len(terms), 1)


def compare(historical: list, modern_data: bytes, threshold: float = MATCH_THRESHOLD) -> ComparisonResult:
    modern_text = decode_modern_data(modern_data)
    modern_stems = {stem(token) for token in tokenize(modern_text)}

    matches = []
    discrepancies = []
    for hist in historical:
        confidence = term_overlap(hist.description, modern_stems)
        if confidence > threshold:
            matches.append(hist.model_copy(update={'confidence': confidence}))
        else:
            discrepancies.append(f"Discrepancy found for {hist.ecosystem_type}: {hist.description}")

    overall = sum(m.confidence for m in matches) / len(matches) if matches else 0.0
    return ComparisonResult(matches=matches, confidence=overall, discrepancies=discrepancies)
