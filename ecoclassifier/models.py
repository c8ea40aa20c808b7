"""
Data model for historical ecosystem analysis.
"""

from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

EcosystemType = Literal['savanna', 'forest', 'grassland', 'thorn_scrub', 'wetland', 'desert', 'unknown']
StrategyName = Literal['keyword', 'trained_model']
TrendLabel = Literal['increasing', 'decreasing', 'stable']
TemporalContext = Literal['historical', 'modern']


class HistoricalText(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    content: str = ''
    timestamp: float
    author: Optional[str] = None
    date: Optional[str] = None
    source: Optional[str] = None
    location: Optional[str] = None


class EcosystemResult(BaseModel):
    text_id: str
    ecosystem_type: EcosystemType
    confidence: float = Field(ge=0.0, le=1.0)
    extracted_features: List[str] = []
    timestamp: float
    description: str = ''
    strategy: StrategyName = 'keyword'


class TimelineEntry(BaseModel):
    timestamps: List[float]
    count: int = Field(default=1, ge=1)


class EcosystemTrend(BaseModel):
    ecosystem_type: EcosystemType
    trend: TrendLabel
    timeline: List[TimelineEntry]


class TemporalAnalysis(BaseModel):
    trends: List[EcosystemTrend]
    total_analyses: int
    ecosystem_distribution: Dict[str, int]


class ComparisonResult(BaseModel):
    matches: List[EcosystemResult]
    confidence: float
    discrepancies: List[str]


class ParsedText(BaseModel):
    indicators: List[str]
    ecosystem_type: EcosystemType
    temporal_context: TemporalContext


class AnalysisConfig(BaseModel):
    include_temporal_analysis: bool = False
    # Applied by callers to the per-text results, never by the classifier
    confidence_threshold: float = Field(default=0.0, ge=0.0, le=1.0)
    include_comparative_analysis: bool = False
    strategy: StrategyName = 'keyword'


class AnalysisReport(BaseModel):
    strategy: StrategyName
    results: List[EcosystemResult]
    temporal: Optional[TemporalAnalysis] = None
    comparison: Optional[ComparisonResult] = None
    recommendation: str
