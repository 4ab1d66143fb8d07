"""
Assessment history and dashboard summaries.

Pagination metadata for a lead's assessment history, and summary statistics
with an improvement trend from the first to the latest completed assessment.
"""

import logging
import math
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Dict, List, Any, Optional, Sequence, Tuple

from .scoring import round_half_up
from ..patterns.maturity_classification import score_distribution

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100


class TrendDirection(Enum):
    """Direction of score change across assessments"""
    IMPROVING = "improving"
    DECLINING = "declining"
    STABLE = "stable"


@dataclass
class Pagination:
    """Page window over a lead's assessments"""
    current_page: int
    per_page: int
    total_count: int

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total_count / self.per_page) if self.per_page else 0

    @property
    def offset(self) -> int:
        return (self.current_page - 1) * self.per_page

    @property
    def has_next(self) -> bool:
        return self.current_page < self.total_pages

    @property
    def has_prev(self) -> bool:
        return self.current_page > 1

    @classmethod
    def from_args(cls, page: Any, limit: Any, total_count: int) -> 'Pagination':
        """Build from query-string values, clamping to sane bounds."""
        try:
            page = int(page)
        except (TypeError, ValueError):
            page = 1
        try:
            limit = int(limit)
        except (TypeError, ValueError):
            limit = DEFAULT_PAGE_SIZE
        return cls(
            current_page=max(page, 1),
            per_page=min(max(limit, 1), MAX_PAGE_SIZE),
            total_count=total_count
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "current_page": self.current_page,
            "total_pages": self.total_pages,
            "total_count": self.total_count,
            "per_page": self.per_page,
            "has_next": self.has_next,
            "has_prev": self.has_prev
        }


def improvement_trend(scores: Sequence[float]) -> Dict[str, Any]:
    """
    Change from the first to the latest score.

    Args:
        scores: Overall scores in chronological order

    Returns:
        Dict with improvement_percentage (relative to the first score) and
        trend_direction
    """
    if len(scores) < 2:
        return {"improvement_percentage": 0, "trend_direction": TrendDirection.STABLE.value}

    first, latest = scores[0], scores[-1]
    if latest > first:
        direction = TrendDirection.IMPROVING
    elif latest < first:
        direction = TrendDirection.DECLINING
    else:
        direction = TrendDirection.STABLE

    percentage = round_half_up((latest - first) / first * 100) if first > 0 else 0
    return {"improvement_percentage": percentage, "trend_direction": direction.value}


def summarize_assessments(history: Sequence[Tuple[float, Optional[datetime]]]) -> Dict[str, Any]:
    """
    Summary statistics for the dashboard.

    Args:
        history: (overall_score, completed_at) pairs in chronological order

    Returns:
        Dict with totals, average/highest/lowest score, latest date,
        score distribution and improvement trend
    """
    scores: List[float] = [score for score, _ in history]
    dates = [completed_at for _, completed_at in history if completed_at is not None]

    if not scores:
        return {
            "total_assessments": 0,
            "average_score": 0,
            "highest_score": 0,
            "lowest_score": 0,
            "latest_assessment_date": None,
            "score_distribution": score_distribution([]),
            "improvement_trend": improvement_trend([])
        }

    latest = max(dates) if dates else None
    return {
        "total_assessments": len(scores),
        "average_score": round_half_up(sum(scores) / len(scores)),
        "highest_score": max(scores),
        "lowest_score": min(scores),
        "latest_assessment_date": latest.isoformat() if latest else None,
        "score_distribution": score_distribution(scores),
        "improvement_trend": improvement_trend(scores)
    }
