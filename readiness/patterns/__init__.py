"""
Patterns Module for AI Readiness

Reusable analytical patterns shared by the assessment engine and the web host.
"""

from .maturity_classification import (
    ReadinessLevel,
    PillarStatus,
    PillarBreakdown,
    classify_score,
    classify_pillar,
    breakdown_pillars,
    score_distribution
)

from .weighted_scoring import (
    WeightProfile,
    WeightedScoreResult,
    WEIGHT_PROFILES,
    DEFAULT_PILLAR_WEIGHT,
    validate_weights,
    normalize_weights,
    get_profile,
    get_profiles_for_assessment_type,
    compute_weighted_score
)

from .benchmark_engine import (
    IndustryBenchmark,
    INDUSTRY_BENCHMARKS,
    get_benchmark_for_industry,
    compare_to_industry,
    build_radar_series
)

__all__ = [
    # Maturity Classification
    'ReadinessLevel',
    'PillarStatus',
    'PillarBreakdown',
    'classify_score',
    'classify_pillar',
    'breakdown_pillars',
    'score_distribution',
    # Weighted Scoring
    'WeightProfile',
    'WeightedScoreResult',
    'WEIGHT_PROFILES',
    'DEFAULT_PILLAR_WEIGHT',
    'validate_weights',
    'normalize_weights',
    'get_profile',
    'get_profiles_for_assessment_type',
    'compute_weighted_score',
    # Benchmarking
    'IndustryBenchmark',
    'INDUSTRY_BENCHMARKS',
    'get_benchmark_for_industry',
    'compare_to_industry',
    'build_radar_series',
]
