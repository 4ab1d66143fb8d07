"""
AI Readiness Assessment Engine

Scores assessment responses and generates insights:
- Overall readiness score (0-100)
- Pillar scores, plain and weighted
- Gap analysis against best practice
- Prioritized insights and recommendations
- The submission payload stored by the backend
"""

from dataclasses import dataclass, field
from typing import Dict, List, Any, Hashable, Mapping, Optional, Sequence
from datetime import datetime
import logging
import uuid

from .questions import get_pillar_info, get_pillar_names, get_questions_for_type
from .scoring import (
    BEST_PRACTICE_BENCHMARK,
    LikertPolicy,
    PillarAssignment,
    PillarScore,
    Gap,
    answered_values,
    compute_completion,
    compute_gap_analysis,
    compute_live_score,
    compute_overall_score,
    compute_pillar_scores,
    normalize_response,
    question_id,
    round_half_up
)
from ..patterns.benchmark_engine import build_radar_series, get_benchmark_for_industry
from ..patterns.maturity_classification import breakdown_pillars, classify_score
from ..patterns.weighted_scoring import (
    DEFAULT_PILLAR_WEIGHT,
    WeightedScoreResult,
    compute_weighted_score,
    get_profile
)

logger = logging.getLogger(__name__)


@dataclass
class ScoringConfig:
    """Engine settings; see config.settings for the matching keys."""
    pillar_names: List[str] = field(default_factory=get_pillar_names)
    benchmark: float = BEST_PRACTICE_BENCHMARK
    likert_policy: LikertPolicy = LikertPolicy.REJECT
    pillar_assignment: PillarAssignment = PillarAssignment.POSITIONAL
    weight_profile: Optional[str] = "balanced"

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> 'ScoringConfig':
        """Create config from a Flask config or any mapping of settings"""
        return cls(
            pillar_names=list(mapping.get("PILLAR_NAMES") or get_pillar_names()),
            benchmark=mapping.get("BEST_PRACTICE_BENCHMARK", BEST_PRACTICE_BENCHMARK),
            likert_policy=LikertPolicy(str(mapping.get("LIKERT_POLICY", "reject")).lower()),
            pillar_assignment=PillarAssignment(str(mapping.get("PILLAR_ASSIGNMENT", "positional")).lower()),
            weight_profile=mapping.get("WEIGHT_PROFILE", "balanced") or None
        )


@dataclass
class AssessmentResult:
    """Complete assessment result"""
    assessment_id: str
    lead_id: Optional[str]
    assessment_type: str
    industry: Optional[str]
    completed_at: datetime
    overall_score: int  # 0-100
    pillar_scores: List[PillarScore]
    gaps: List[Gap]
    weighted: WeightedScoreResult
    insights: Dict[str, Any]
    responses: Dict[Hashable, int]  # question_id -> answer value
    completion_time_ms: int = 0
    metadata: Dict[str, Any] = field(default_factory=dict)

    def to_submission_payload(self) -> Dict[str, Any]:
        """Body for the backend's submit-complete endpoint"""
        return {
            "lead_id": self.lead_id,
            "assessment_type": self.assessment_type,
            "industry": self.industry,
            "overall_score": self.overall_score,
            "responses": {str(k): v for k, v in self.responses.items()},
            "pillar_scores": [ps.to_dict() for ps in self.pillar_scores],
            "risk_assessment": [],
            "service_recommendations": [],
            "gap_analysis": [g.to_dict() for g in self.gaps],
            "completion_time_ms": self.completion_time_ms,
            "metadata": self.metadata
        }

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization"""
        level = classify_score(self.overall_score)
        return {
            **self.to_submission_payload(),
            "assessment_id": self.assessment_id,
            "completed_at": self.completed_at.isoformat(),
            "score_category": level.value,
            "status": level.status,
            "weighted_score": self.weighted.overall_score,
            "weights_applied": self.weighted.weights_applied,
            "dimension_scores": self.weighted.dimension_scores,
            "pillar_breakdown": breakdown_pillars(self.pillar_scores).to_dict(),
            "insights": self.insights
        }


class AssessmentEngine:
    """
    Engine for scoring AI readiness assessments.

    Stateless apart from its configuration: every call works only on the
    questions and responses passed in.

    Example:
        engine = AssessmentEngine()

        questions = get_questions_for_type("CORE")
        responses = {"core_01": 4, "core_02": 5, "core_06": 2}

        result = engine.calculate_score(questions, responses, lead_id="lead-42")
        print(f"Overall Score: {result.overall_score}")
        print(f"Gaps: {[g.pillar for g in result.gaps]}")
    """

    def __init__(self, config: Optional[ScoringConfig] = None):
        """Initialize the assessment engine"""
        self.config = config or ScoringConfig()

    def live_score(self, responses: Mapping[Hashable, Any]) -> int:
        """Running score during an in-progress assessment"""
        return compute_live_score(responses, self.config.likert_policy)

    def pillar_scores(
        self,
        questions: Sequence[Any],
        responses: Mapping[Hashable, Any]
    ) -> List[PillarScore]:
        return compute_pillar_scores(
            questions,
            responses,
            self.config.pillar_names,
            policy=self.config.likert_policy,
            assignment=self.config.pillar_assignment
        )

    def completion(
        self,
        questions: Sequence[Any],
        responses: Mapping[Hashable, Any]
    ) -> Dict[str, Any]:
        """Score and progress for a question set"""
        return compute_completion(questions, responses, self.config.likert_policy)

    def resolve_weights(self, weight_profile: Optional[str] = None) -> Dict[str, float]:
        """Pillar weights for a profile id; unknown or empty profile means none"""
        profile_id = weight_profile or self.config.weight_profile
        if not profile_id:
            return {}

        profile = get_profile(profile_id)
        if profile is None:
            logger.warning(f"Unknown weight profile '{profile_id}', scoring without weights")
            return {}
        return dict(profile.weights)

    def calculate_score(
        self,
        questions: Sequence[Any],
        responses: Mapping[Hashable, Any],
        lead_id: Optional[str] = None,
        assessment_type: str = "CORE",
        industry: Optional[str] = None,
        weight_profile: Optional[str] = None,
        assessment_id: Optional[str] = None,
        completion_time_ms: int = 0,
        metadata: Optional[Dict[str, Any]] = None
    ) -> AssessmentResult:
        """
        Calculate assessment score from responses.

        Args:
            questions: Ordered question list for the assessment type
            responses: Dict mapping question_id to answer value (1-5)
            lead_id: Lead who took the assessment
            assessment_type: CORE, ADVANCED or FRONTIER
            industry: Lead's industry, used for benchmarks
            weight_profile: Overrides the configured weight profile
            assessment_id: Optional ID for this assessment

        Returns:
            AssessmentResult with scores, gaps and insights

        Raises:
            InvalidResponseError: a value is out of range under the reject policy
        """
        if assessment_id is None:
            assessment_id = str(uuid.uuid4())

        answered = answered_values(responses, self.config.likert_policy)

        overall_score = compute_overall_score(answered)
        pillar_scores = self.pillar_scores(questions, answered)
        gaps = compute_gap_analysis(pillar_scores, self.config.benchmark)
        weighted = compute_weighted_score(pillar_scores, self.resolve_weights(weight_profile))

        insights = self.generate_insights(overall_score, weighted.dimension_scores)
        insights["industry_benchmark"] = get_benchmark_for_industry(industry).to_dict()
        insights["weighted_score"] = weighted.overall_score
        insights["radar"] = build_radar_series(pillar_scores, best_practice=int(self.config.benchmark))

        logger.info(
            f"Scored {assessment_type} assessment for lead {lead_id}: "
            f"{overall_score}% overall, {len(gaps)} gaps"
        )

        return AssessmentResult(
            assessment_id=assessment_id,
            lead_id=lead_id,
            assessment_type=assessment_type.upper(),
            industry=industry,
            completed_at=datetime.utcnow(),
            overall_score=overall_score,
            pillar_scores=pillar_scores,
            gaps=gaps,
            weighted=weighted,
            insights=insights,
            responses=answered,
            completion_time_ms=completion_time_ms,
            metadata=metadata or {}
        )

    def generate_insights(
        self,
        overall_score: float,
        dimension_scores: List[Dict[str, Any]]
    ) -> Dict[str, Any]:
        """
        Strengths, weighted priorities and recommendations.

        dimension_scores are the weighted entries from compute_weighted_score(),
        each with pillar_name, score and weight.
        """
        level = classify_score(overall_score)
        insights = {
            "overall_assessment": level.overall_assessment,
            "score_category": level.value,
            "strengths": [],
            "improvement_areas": [],
            "weighted_priorities": [],
            "critical_impact_areas": [],
            "recommendations": []
        }

        for dim in dimension_scores:
            if dim["score"] >= 70:
                insights["strengths"].append({
                    "area": dim["pillar_name"],
                    "score": dim["score"],
                    "weight": dim.get("weight", DEFAULT_PILLAR_WEIGHT),
                    "description": f"Strong performance in {dim['pillar_name']}"
                })

        impacts = self._impact_scores(dimension_scores)

        insights["weighted_priorities"] = [
            {
                "area": item["area"],
                "score": item["score"],
                "weight": item["weight"],
                "impact_score": round_half_up(item["impact_score"] * 10) / 10,
                "priority": item["priority"],
                "description": f"{item['area']} ({item['weight']}% weight) has {item['gap']}% improvement potential"
            }
            for item in impacts[:3]
        ]

        insights["critical_impact_areas"] = [
            {
                "area": item["area"],
                "score": item["score"],
                "weight": item["weight"],
                "impact_score": round_half_up(item["impact_score"] * 10) / 10,
                "description": f"High-impact improvement needed in {item['area']}"
            }
            for item in impacts if item["impact_score"] > 15
        ]

        for dim in dimension_scores:
            if dim["score"] < 60:
                insights["improvement_areas"].append({
                    "area": dim["pillar_name"],
                    "score": dim["score"],
                    "weight": dim.get("weight", DEFAULT_PILLAR_WEIGHT),
                    "priority": "High" if dim["score"] < 40 else "Medium",
                    "description": f"{dim['pillar_name']} requires focused attention"
                })

        insights["recommendations"] = self._recommendations(overall_score, dimension_scores, impacts)
        return insights

    def _impact_scores(self, dimension_scores: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        """Improvement potential scaled by pillar weight, highest first"""
        impacts = []
        for dim in dimension_scores:
            weight = dim.get("weight", DEFAULT_PILLAR_WEIGHT)
            gap = 100 - dim["score"]
            impact_score = gap * weight / 100

            if impact_score > 15:
                priority = "Critical"
            elif impact_score > 8:
                priority = "High"
            elif impact_score > 4:
                priority = "Medium"
            else:
                priority = "Low"

            impacts.append({
                "area": dim["pillar_name"],
                "short_name": get_pillar_info(dim["pillar_name"]).get("short_name"),
                "score": dim["score"],
                "weight": weight,
                "gap": gap,
                "impact_score": impact_score,
                "priority": priority
            })

        impacts.sort(key=lambda x: x["impact_score"], reverse=True)
        return impacts

    def _recommendations(
        self,
        overall_score: float,
        dimension_scores: List[Dict[str, Any]],
        impacts: List[Dict[str, Any]]
    ) -> List[str]:
        recommendations = []

        if overall_score < 50:
            recommendations.append("Focus on building foundational AI capabilities and governance")
            recommendations.append("Develop a comprehensive AI strategy aligned with business objectives")

        if impacts and impacts[0]["impact_score"] > 12:
            top = impacts[0]
            recommendations.append(
                f"Prioritize improvements in {top['area']} - highest impact opportunity "
                f"({top['weight']}% of overall score)"
            )

        by_short_name = {
            get_pillar_info(dim["pillar_name"]).get("short_name"): dim["score"]
            for dim in dimension_scores
        }
        if by_short_name.get("DATA", 100) < 60:
            recommendations.append("Invest in data quality and governance infrastructure")
        if by_short_name.get("SECURITY", 100) < 70:
            recommendations.append("Strengthen security and compliance frameworks for AI")
        if by_short_name.get("STRATEGY", 100) < 60:
            recommendations.append("Develop clear AI strategy and vision aligned with business goals")

        recommendations.append("Consider engaging AI readiness experts for detailed transformation planning")
        return recommendations

    def validate_answers(
        self,
        questions: Sequence[Any],
        responses: Mapping[Hashable, Any]
    ) -> Dict[str, Any]:
        """
        Validate answer set.

        Returns dict with:
        - valid: bool
        - missing_questions: list of missing question IDs
        - invalid_values: list of questions with invalid values
        - completion_percentage: float
        """
        missing = []
        invalid = []

        for q_id in map(question_id, questions):
            value = responses.get(q_id)
            if value is None:
                missing.append(q_id)
                continue
            try:
                normalize_response(q_id, value, LikertPolicy.REJECT)
            except ValueError:
                invalid.append(q_id)

        total = len(questions)
        answered = total - len(missing)

        return {
            "valid": len(missing) == 0 and len(invalid) == 0,
            "missing_questions": missing,
            "invalid_values": invalid,
            "completion_percentage": (answered / total * 100) if total > 0 else 0,
            "answered_count": answered,
            "total_count": total
        }

    def get_questions(self, assessment_type: str) -> List[Dict]:
        """Get the seeded questions for an assessment type"""
        return get_questions_for_type(assessment_type)


# Singleton instance
_engine: Optional[AssessmentEngine] = None


def get_assessment_engine(config: Optional[ScoringConfig] = None) -> AssessmentEngine:
    """Get or create singleton assessment engine"""
    global _engine
    if _engine is None or config is not None:
        _engine = AssessmentEngine(config)
    return _engine
