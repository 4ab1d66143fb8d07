"""
Weighted Scoring Pattern - AI Readiness

Pillar weight profiles and weighted aggregation of pillar scores.

A profile assigns each pillar a percentage weight (summing to 100) so the
overall score can reflect a strategic focus or an industry's priorities.

Use cases:
- Balanced readiness scoring
- Compliance- or innovation-led scoring
- Industry-specific scoring (healthcare, financial services, ...)
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Any, Sequence
import logging

from .rounding import round_half_up

logger = logging.getLogger(__name__)

DEFAULT_PILLAR_WEIGHT = 12.5
WEIGHT_TOLERANCE = 0.01


@dataclass
class WeightProfile:
    """Preset pillar weights for a strategic focus."""
    profile_id: str
    name: str
    description: str
    applicable_to: List[str]
    weights: Dict[str, float]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "profile_id": self.profile_id,
            "name": self.name,
            "description": self.description,
            "applicable_to": self.applicable_to,
            "weights": self.weights
        }


@dataclass
class WeightedScoreResult:
    """Overall score after applying pillar weights."""
    overall_score: int
    dimension_scores: List[Dict[str, Any]]
    weights_applied: bool
    metadata: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "overall_score": self.overall_score,
            "dimension_scores": self.dimension_scores,
            "weights_applied": self.weights_applied
        }


WEIGHT_PROFILES: Dict[str, WeightProfile] = {
    "balanced": WeightProfile(
        "balanced", "Balanced",
        "Equal weight across all pillars for comprehensive assessment",
        ["CORE", "ADVANCED", "FRONTIER"],
        {
            "Strategy": 12.5, "Architecture": 12.5, "Foundation": 12.5, "Ethics": 12.5,
            "Culture": 12.5, "Capability": 12.5, "Governance": 12.5, "Performance": 12.5
        }
    ),
    "strategy_first": WeightProfile(
        "strategy_first", "Strategy-First",
        "Emphasizes strategic alignment and governance",
        ["CORE", "ADVANCED"],
        {
            "Strategy": 25.0, "Governance": 20.0, "Foundation": 12.0, "Architecture": 12.0,
            "Ethics": 10.0, "Capability": 10.0, "Culture": 6.0, "Performance": 5.0
        }
    ),
    "compliance_focused": WeightProfile(
        "compliance_focused", "Compliance-Focused",
        "Prioritizes ethics, governance, and security",
        ["CORE", "ADVANCED"],
        {
            "Governance": 25.0, "Ethics": 25.0, "Foundation": 15.0, "Architecture": 12.0,
            "Strategy": 10.0, "Culture": 8.0, "Capability": 3.0, "Performance": 2.0
        }
    ),
    "innovation_driven": WeightProfile(
        "innovation_driven", "Innovation-Driven",
        "Focuses on innovation, technology, and capability",
        ["ADVANCED", "FRONTIER"],
        {
            "Architecture": 22.0, "Strategy": 20.0, "Foundation": 15.0, "Capability": 15.0,
            "Governance": 10.0, "Ethics": 8.0, "Culture": 7.0, "Performance": 3.0
        }
    ),
    "healthcare": WeightProfile(
        "healthcare", "Healthcare",
        "Healthcare industry focus: compliance, ethics, and data quality",
        ["CORE", "ADVANCED"],
        {
            "Ethics": 22.0, "Governance": 20.0, "Foundation": 18.0, "Architecture": 12.0,
            "Strategy": 10.0, "Culture": 8.0, "Performance": 6.0, "Capability": 4.0
        }
    ),
    "financial_services": WeightProfile(
        "financial_services", "Financial Services",
        "Banking and finance: governance, security, and performance",
        ["CORE", "ADVANCED"],
        {
            "Governance": 25.0, "Ethics": 20.0, "Foundation": 15.0, "Architecture": 15.0,
            "Performance": 10.0, "Strategy": 8.0, "Culture": 5.0, "Capability": 2.0
        }
    ),
    "technology": WeightProfile(
        "technology", "Technology",
        "Tech sector: innovation, architecture, and talent",
        ["ADVANCED", "FRONTIER"],
        {
            "Architecture": 22.0, "Capability": 20.0, "Foundation": 18.0, "Strategy": 15.0,
            "Governance": 10.0, "Ethics": 8.0, "Culture": 5.0, "Performance": 2.0
        }
    ),
    "manufacturing": WeightProfile(
        "manufacturing", "Manufacturing",
        "Manufacturing industry: process, technology, and performance",
        ["CORE", "ADVANCED"],
        {
            "Architecture": 22.0, "Foundation": 20.0, "Performance": 15.0, "Strategy": 12.0,
            "Capability": 12.0, "Culture": 8.0, "Ethics": 6.0, "Governance": 5.0
        }
    ),
}


def validate_weights(weights: Dict[str, float]) -> Dict[str, Any]:
    """
    Check that weights sum to 100 (within 0.01).

    Returns dict with:
    - valid: bool
    - total: float
    - difference: total - 100 (only when invalid)
    - message: str
    """
    total = sum(weights.values())

    if abs(total - 100) > WEIGHT_TOLERANCE:
        return {
            "valid": False,
            "total": total,
            "difference": total - 100,
            "message": f"Weights sum to {total:.2f}% instead of 100%"
        }

    return {
        "valid": True,
        "total": total,
        "message": "Weights are valid"
    }


def normalize_weights(weights: Dict[str, float]) -> Dict[str, float]:
    """Scale weights to sum to exactly 100, correcting drift on the largest."""
    total = sum(weights.values())
    if total <= 0:
        raise ValueError("Weights must have a positive total")

    normalized = {key: round(value / total * 100, 2) for key, value in weights.items()}

    new_total = sum(normalized.values())
    if new_total != 100:
        largest_key = max(normalized, key=normalized.get)
        normalized[largest_key] = round(normalized[largest_key] + 100 - new_total, 2)

    return normalized


def get_profile(profile_id: str) -> Optional[WeightProfile]:
    """Get a weight profile by id."""
    return WEIGHT_PROFILES.get(profile_id)


def get_profiles_for_assessment_type(assessment_type: str) -> List[WeightProfile]:
    """Get the profiles that apply to an assessment type."""
    assessment_type = assessment_type.upper()
    return [p for p in WEIGHT_PROFILES.values() if assessment_type in p.applicable_to]


def compute_weighted_score(
    pillar_scores: Sequence[Any],
    weights: Optional[Dict[str, float]] = None,
    default_weight: float = DEFAULT_PILLAR_WEIGHT
) -> WeightedScoreResult:
    """
    Weighted overall score from pillar scores.

    Args:
        pillar_scores: Scores from compute_pillar_scores()
        weights: pillar name -> percentage weight; pillars without an entry
            use default_weight
        default_weight: Weight for unlisted pillars

    Returns:
        WeightedScoreResult with the rounded weighted mean and, per pillar,
        the weight used and its weighted contribution
    """
    weights = weights or {}

    weighted_sum = 0.0
    total_weight = 0.0
    dimension_scores = []

    for ps in pillar_scores:
        weight = weights.get(ps.pillar_name, default_weight)
        weighted_sum += ps.score * weight
        total_weight += weight
        dimension_scores.append({
            "pillar_name": ps.pillar_name,
            "dimension_name": ps.pillar_name,
            "score": ps.score,
            "weight": weight,
            "weighted_contribution": round_half_up(ps.score * weight / 100)
        })

    overall_score = round_half_up(weighted_sum / total_weight) if total_weight > 0 else 0

    return WeightedScoreResult(
        overall_score=overall_score,
        dimension_scores=dimension_scores,
        weights_applied=bool(weights)
    )
