"""
Maturity Classification Pattern - AI Readiness

Converts readiness scores into discrete maturity levels and pillar status
buckets for the results report and dashboard.

Use cases:
- Overall readiness category (AI Leader ... AI Starter)
- Pillar performance breakdown (excellent / good / needs work)
- Score distribution on the user dashboard
"""

from dataclasses import dataclass, field
from typing import Dict, List, Any, Sequence
from enum import Enum
import logging

logger = logging.getLogger(__name__)


class ReadinessLevel(Enum):
    """Readiness maturity levels with associated properties."""
    LEADER = "AI Leader"
    ADOPTER = "AI Adopter"
    EXPLORER = "AI Explorer"
    STARTER = "AI Starter"

    @property
    def min_score(self) -> int:
        return {
            ReadinessLevel.LEADER: 80,
            ReadinessLevel.ADOPTER: 60,
            ReadinessLevel.EXPLORER: 40,
            ReadinessLevel.STARTER: 0
        }[self]

    @property
    def status(self) -> str:
        """Status line shown under the overall score."""
        return {
            ReadinessLevel.LEADER: "AI Leader - Advanced capabilities with strong foundations across pillars",
            ReadinessLevel.ADOPTER: "AI Adopter - Solid foundations with clear opportunities to scale",
            ReadinessLevel.EXPLORER: "AI Explorer - Building capabilities with significant gaps to address",
            ReadinessLevel.STARTER: "AI Starter - Early stage with substantial room for growth"
        }[self]

    @property
    def overall_assessment(self) -> str:
        return {
            ReadinessLevel.LEADER: "Excellent AI maturity with strong capabilities across dimensions",
            ReadinessLevel.ADOPTER: "Good AI maturity with opportunities for strategic enhancement",
            ReadinessLevel.EXPLORER: "Developing AI maturity with clear areas for improvement",
            ReadinessLevel.STARTER: "Early-stage AI maturity requiring foundational development"
        }[self]

    @property
    def color(self) -> str:
        """Standard color for visualization."""
        return {
            ReadinessLevel.LEADER: "#198754",    # Green
            ReadinessLevel.ADOPTER: "#0d6efd",   # Blue
            ReadinessLevel.EXPLORER: "#fd7e14",  # Orange
            ReadinessLevel.STARTER: "#dc3545"    # Red
        }[self]


class PillarStatus(Enum):
    """Pillar performance buckets used in the breakdown."""
    EXCELLENT = "excellent"
    GOOD = "good"
    NEEDS_WORK = "needs_work"


def classify_score(score: float) -> ReadinessLevel:
    """Readiness level for an overall score."""
    for level in ReadinessLevel:
        if score >= level.min_score:
            return level
    return ReadinessLevel.STARTER


def classify_pillar(score: float) -> PillarStatus:
    if score >= 80:
        return PillarStatus.EXCELLENT
    if score >= 60:
        return PillarStatus.GOOD
    return PillarStatus.NEEDS_WORK


@dataclass
class PillarBreakdown:
    """Pillar status counts for the results report."""
    excellent: List[str] = field(default_factory=list)
    good: List[str] = field(default_factory=list)
    needs_work: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "excellent": len(self.excellent),
            "good": len(self.good),
            "needs_work": len(self.needs_work),
            "pillars": {
                "excellent": self.excellent,
                "good": self.good,
                "needs_work": self.needs_work
            }
        }


def breakdown_pillars(pillar_scores: Sequence[Any]) -> PillarBreakdown:
    """Group pillar names by status."""
    breakdown = PillarBreakdown()
    for ps in pillar_scores:
        status = classify_pillar(ps.score)
        getattr(breakdown, status.value).append(ps.pillar_name)
    return breakdown


def score_distribution(scores: Sequence[float]) -> Dict[str, int]:
    """Dashboard distribution of overall scores."""
    return {
        "excellent": sum(1 for s in scores if s >= 80),
        "good": sum(1 for s in scores if 60 <= s < 80),
        "needs_improvement": sum(1 for s in scores if s < 60)
    }
