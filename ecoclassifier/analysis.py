"""
Batch analysis: per-text classification, temporal aggregation and the
configured end-to-end run.
"""

from ecoclassifier.classification import filter_by_confidence, generate_recommendation
from ecoclassifier.comparison import compare
from ecoclassifier.exceptions import InvalidInputError
from ecoclassifier.models import (
    AnalysisConfig,
    AnalysisReport,
    EcosystemTrend,
    TemporalAnalysis,
    TimelineEntry,
)
from ecoclassifier.scoring import ModelManager
from ecoclassifier.strategies import KeywordScoringStrategy, build_strategy


def build_timeline(results: list) -> dict:
    """
    Group results into timeline entries per ecosystem type.

    A result joins an existing entry only when that entry already lists
    the exact same timestamp; anything else opens a new entry.
    """
    timeline = {}
    for result in results:
        entries = timeline.setdefault(result.ecosystem_type, [])
        existing = next((e for e in entries if result.timestamp in e.timestamps), None)
        if existing is not None:
            existing.count += 1
        else:
            entries.append(TimelineEntry(timestamps=[result.timestamp], count=1))
    return timeline


def infer_trend(entries: list) -> str:
    """Compare only the first and last entries of a sorted timeline."""
    if len(entries) < 2:
        return 'stable'
    first_count = entries[0].count
    last_count = entries[-1].count
    if first_count < last_count:
        return 'increasing'
    elif first_count > last_count:
        return 'decreasing'
    return 'stable'


def summarize_timeline(results: list) -> TemporalAnalysis:
    timeline = build_timeline(results)

    trends = []
    distribution = {}
    for ecosystem, entries in timeline.items():
        sorted_entries = sorted(entries, key=lambda e: min(e.timestamps))
        trends.append(EcosystemTrend(
            ecosystem_type=ecosystem,
            trend=infer_trend(sorted_entries),
            timeline=sorted_entries,
        ))
        distribution[ecosystem] = sum(e.count for e in sorted_entries)

    return TemporalAnalysis(
        trends=trends,
        total_analyses=len(results),
        ecosystem_distribution=distribution,
    )


class EcosystemAnalyzer:
    """Runs one classifier strategy over batches of historical texts."""

    def __init__(self, strategy=None):
        self.strategy = strategy or KeywordScoringStrategy()

    def analyze(self, texts: list) -> list:
        return [self.strategy.classify(text) for text in texts]

    def analyze_temporal(self, texts: list) -> TemporalAnalysis:
        return summarize_timeline(self.analyze(texts))


def run_analysis(texts: list, config: AnalysisConfig = None, modern_data: bytes = None,
                 model_manager: ModelManager = None) -> AnalysisReport:
    """
    Classify texts and assemble the report the config asks for.

    Trends and the recommendation see every result; the confidence
    threshold only trims the per-text result list and the set of
    results compared against modern data.
    """
    config = config or AnalysisConfig()
    analyzer = EcosystemAnalyzer(build_strategy(config.strategy, model_manager))

    results = analyzer.analyze(texts)
    kept = filter_by_confidence(results, config.confidence_threshold)

    temporal = summarize_timeline(results) if config.include_temporal_analysis else None

    comparison = None
    if config.include_comparative_analysis:
        if modern_data is None:
            raise InvalidInputError("Comparative analysis requested without modern data")
        comparison = compare(kept, modern_data)

    return AnalysisReport(
        strategy=analyzer.strategy.name,
        results=kept,
        temporal=temporal,
        comparison=comparison,
        recommendation=generate_recommendation(results),
    )
