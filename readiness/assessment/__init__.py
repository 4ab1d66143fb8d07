"""
AI Readiness Assessment Module

Multi-step readiness self-assessment with:
- Eight-pillar questionnaire on a 1-5 Likert scale
- Pure scoring functions (overall, pillar, gap, live)
- Weighted scoring, insights and submission payload
"""

from .assessment_engine import AssessmentEngine, AssessmentResult, ScoringConfig, get_assessment_engine
from .questions import ASSESSMENT_QUESTIONS, ASSESSMENT_TYPES, PILLARS, LIKERT_OPTIONS
from .scoring import (
    BEST_PRACTICE_BENCHMARK,
    DEFAULT_PILLAR_NAMES,
    Gap,
    InvalidResponseError,
    LikertPolicy,
    LiveScoreTracker,
    PillarAssignment,
    PillarScore,
    compute_gap_analysis,
    compute_live_score,
    compute_overall_score,
    compute_pillar_scores
)

__all__ = [
    'AssessmentEngine',
    'AssessmentResult',
    'ScoringConfig',
    'get_assessment_engine',
    'ASSESSMENT_QUESTIONS',
    'ASSESSMENT_TYPES',
    'PILLARS',
    'LIKERT_OPTIONS',
    'BEST_PRACTICE_BENCHMARK',
    'DEFAULT_PILLAR_NAMES',
    'Gap',
    'InvalidResponseError',
    'LikertPolicy',
    'LiveScoreTracker',
    'PillarAssignment',
    'PillarScore',
    'compute_gap_analysis',
    'compute_live_score',
    'compute_overall_score',
    'compute_pillar_scores',
]
