"""
Final decision helpers: confidence levels, threshold filtering and
conservation recommendations.
"""

from collections import Counter

from ecoclassifier.constants import (
    CONFIDENCE_THRESHOLD_HIGH,
    CONFIDENCE_THRESHOLD_MEDIUM,
    NO_DATA_RECOMMENDATION,
)


def dominant_ecosystem(ecosystem_types: list) -> str:
    """
    Most frequent ecosystem type.

    Ties go to the type that appears first in the input among those
    sharing the maximum count.
    """
    counts = Counter(ecosystem_types)
    max_count = max(counts.values())
    return next(t for t in ecosystem_types if counts[t] == max_count)


def generate_recommendation(analysis: list) -> str:
    if not analysis:
        return NO_DATA_RECOMMENDATION

    ecosystem_types = [result.ecosystem_type for result in analysis]
    unique_ecosystems = set(ecosystem_types)

    if len(unique_ecosystems) == 1:
        ecosystem = ecosystem_types[0]
        return (
            f"Conservation focus should be on maintaining {ecosystem} ecosystem integrity. "
            "Historical data confirms this landscape type's natural occurrence."
        )

    dominant = dominant_ecosystem(ecosystem_types)
    return (
        f"Mixed ecosystem detected. Primary focus should be on preserving the {dominant} ecosystem "
        "while considering historical landscape transitions between different ecosystem types."
    )


def filter_by_confidence(results: list, threshold: float) -> list:
    """Keep results at or above the caller's confidence threshold, in input order."""
    return [r for r in results if r.confidence >= threshold]


def get_confidence_level(confidence: float) -> str:
    """Determine confidence level string."""
    if confidence >= CONFIDENCE_THRESHOLD_HIGH:
        return 'high'
    elif confidence >= CONFIDENCE_THRESHOLD_MEDIUM:
        return 'medium'
    return 'low'
