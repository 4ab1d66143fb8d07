"""
Benchmark Engine Pattern - AI Readiness

Compares pillar scores against industry averages and best practice.
Feeds the results radar chart and the industry benchmark stored with each
completed assessment.

Use cases:
- Industry comparison on the results report
- Radar chart series (your score, industry average, best practice)
"""

from dataclasses import dataclass
from typing import Dict, List, Optional, Any, Sequence
import logging
import re

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class IndustryBenchmark:
    """Average and best-practice readiness for an industry."""
    industry: str
    average: int
    best_practice: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "average": self.average,
            "best_practice": self.best_practice
        }


INDUSTRY_BENCHMARKS: Dict[str, IndustryBenchmark] = {
    "technology": IndustryBenchmark("technology", 75, 90),
    "financial-services": IndustryBenchmark("financial-services", 65, 85),
    "healthcare": IndustryBenchmark("healthcare", 55, 78),
    "manufacturing": IndustryBenchmark("manufacturing", 60, 82),
    "retail": IndustryBenchmark("retail", 62, 80),
    "default": IndustryBenchmark("default", 60, 80),
}


# Industry labels offered on the lead form that share a benchmark row
INDUSTRY_ALIASES: Dict[str, str] = {
    "retail-e-commerce": "retail",
    "e-commerce": "retail",
    "finance": "financial-services",
    "banking": "financial-services",
}


def industry_key(industry: Optional[str]) -> str:
    """Lower-case, hyphenated lookup key for an industry label."""
    if not industry:
        return "default"
    key = re.sub(r"[^a-z0-9]+", "-", industry.strip().lower()).strip("-")
    return INDUSTRY_ALIASES.get(key, key) or "default"


def get_benchmark_for_industry(industry: Optional[str]) -> IndustryBenchmark:
    """Benchmark for an industry, falling back to the default."""
    key = industry_key(industry)
    benchmark = INDUSTRY_BENCHMARKS.get(key)
    if benchmark is None:
        logger.debug(f"No benchmark for industry '{industry}', using default")
        return INDUSTRY_BENCHMARKS["default"]
    return benchmark


def _rating(score: float, benchmark: IndustryBenchmark) -> str:
    if score >= benchmark.best_practice:
        return "Best Practice"
    if score >= benchmark.average:
        return "Above Average"
    return "Below Average"


def compare_to_industry(
    pillar_scores: Sequence[Any],
    industry: Optional[str] = None
) -> List[Dict[str, Any]]:
    """Per-pillar comparison against the industry benchmark."""
    benchmark = get_benchmark_for_industry(industry)
    return [
        {
            "pillar_name": ps.pillar_name,
            "score": ps.score,
            "industry_average": benchmark.average,
            "best_practice": benchmark.best_practice,
            "vs_average": ps.score - benchmark.average,
            "vs_best_practice": ps.score - benchmark.best_practice,
            "rating": _rating(ps.score, benchmark)
        }
        for ps in pillar_scores
    ]


def build_radar_series(
    pillar_scores: Sequence[Any],
    industry_average: int = 60,
    best_practice: int = 80
) -> Dict[str, Any]:
    """
    Series for the results radar chart.

    The report draws the user's pillar scores against flat industry-average
    and best-practice rings.
    """
    labels = [ps.pillar_name for ps in pillar_scores]
    return {
        "labels": labels,
        "datasets": [
            {"label": "Your Score", "data": [ps.score for ps in pillar_scores]},
            {"label": "Best Practice", "data": [best_practice] * len(labels)},
            {"label": "Industry Average", "data": [industry_average] * len(labels)}
        ]
    }
