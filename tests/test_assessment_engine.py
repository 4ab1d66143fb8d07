"""
Tests for the assessment engine: scoring results, insights and payload.
"""

import pytest

from readiness.assessment import (
    AssessmentEngine,
    InvalidResponseError,
    LikertPolicy,
    PillarAssignment,
    ScoringConfig,
    get_assessment_engine,
)
from readiness.assessment.questions import get_questions_for_type
from readiness.assessment.history import Pagination, improvement_trend, summarize_assessments

# One Likert value per pillar, applied to all five CORE questions of that pillar
PILLAR_ANSWERS = {
    "Strategy": 5,       # 100
    "Architecture": 4,   # 80
    "Foundation": 2,     # 40
    "Ethics": 3,         # 60
    "Culture": 4,        # 80
    "Capability": 1,     # 20
    "Governance": 3,     # 60
    "Performance": 5,    # 100
}


@pytest.fixture
def core_questions():
    return get_questions_for_type("CORE")


@pytest.fixture
def core_responses(core_questions):
    return {q["id"]: PILLAR_ANSWERS[q["pillar"]] for q in core_questions}


@pytest.fixture
def engine():
    return AssessmentEngine()


@pytest.fixture
def result(engine, core_questions, core_responses):
    return engine.calculate_score(
        core_questions,
        core_responses,
        lead_id="lead-1",
        assessment_type="core",
        industry="Financial Services",
        completion_time_ms=420000
    )


class TestCalculateScore:

    def test_overall_and_pillar_scores(self, result):
        assert result.overall_score == 68
        assert [ps.score for ps in result.pillar_scores] == [100, 80, 40, 60, 80, 20, 60, 100]
        assert result.assessment_type == "CORE"

    def test_gaps_sorted_with_tiers(self, result):
        assert [(g.pillar, g.gap, g.severity) for g in result.gaps] == [
            ("Capability", 60, "Critical"),
            ("Foundation", 40, "Critical"),
            ("Ethics", 20, "High"),
            ("Governance", 20, "High"),
        ]

    def test_weighted_score_balanced(self, result):
        assert result.weighted.overall_score == 68
        assert result.weighted.weights_applied is True
        assert all(d["weight"] == 12.5 for d in result.weighted.dimension_scores)

    def test_submission_payload_fields(self, result):
        payload = result.to_submission_payload()

        assert payload["overall_score"] == 68
        assert payload["risk_assessment"] == []
        assert payload["service_recommendations"] == []
        assert payload["pillar_scores"][0] == {
            "pillar_name": "Strategy",
            "dimension_name": "Strategy",
            "score": 100
        }
        assert payload["gap_analysis"][0] == {
            "pillar": "Capability",
            "score": 20,
            "gap": 60,
            "severity": "Critical",
            "priority": "high"
        }
        assert payload["lead_id"] == "lead-1"
        assert payload["completion_time_ms"] == 420000
        assert len(payload["responses"]) == 40

    def test_to_dict_adds_report_fields(self, result):
        data = result.to_dict()

        assert data["score_category"] == "AI Adopter"
        assert data["assessment_id"] == result.assessment_id
        assert data["pillar_breakdown"]["excellent"] == 4
        assert data["pillar_breakdown"]["needs_work"] == 2
        assert data["insights"]["industry_benchmark"] == {"average": 65, "best_practice": 85}

    def test_given_assessment_id_is_kept(self, engine, core_questions):
        result = engine.calculate_score(core_questions, {}, assessment_id="a-1")
        assert result.assessment_id == "a-1"
        assert result.overall_score == 0
        assert len(result.gaps) == 8

    def test_out_of_range_rejected_by_default(self, engine, core_questions):
        with pytest.raises(InvalidResponseError):
            engine.calculate_score(core_questions, {"core_01": 6})

    def test_clamp_policy_from_config(self, core_questions):
        engine = AssessmentEngine(ScoringConfig(likert_policy=LikertPolicy.CLAMP))
        result = engine.calculate_score(core_questions, {"core_01": 6})
        assert result.overall_score == 100

    def test_unknown_weight_profile_scores_unweighted(self, engine, core_questions, core_responses):
        result = engine.calculate_score(core_questions, core_responses, weight_profile="nope")
        assert result.weighted.weights_applied is False
        assert result.weighted.overall_score == 68

    def test_strategy_first_profile(self, engine, core_questions, core_responses):
        result = engine.calculate_score(core_questions, core_responses, weight_profile="strategy_first")
        # 25*100 + 12*80 + 12*40 + 10*60 + 6*80 + 10*20 + 20*60 + 5*100 = 6920
        assert result.weighted.overall_score == 69


class TestInsights:

    def test_strengths_and_improvement_areas(self, result):
        insights = result.insights

        assert [s["area"] for s in insights["strengths"]] == [
            "Strategy", "Architecture", "Culture", "Performance"
        ]
        assert [(a["area"], a["priority"]) for a in insights["improvement_areas"]] == [
            ("Foundation", "Medium"),
            ("Capability", "High"),
        ]

    def test_weighted_priorities(self, result):
        priorities = result.insights["weighted_priorities"]

        assert [(p["area"], p["impact_score"], p["priority"]) for p in priorities] == [
            ("Capability", 10.0, "High"),
            ("Foundation", 7.5, "Medium"),
            ("Ethics", 5.0, "Medium"),
        ]
        assert priorities[0]["description"] == "Capability (12.5% weight) has 80% improvement potential"
        assert result.insights["critical_impact_areas"] == []

    def test_recommendations(self, result):
        assert result.insights["recommendations"] == [
            "Invest in data quality and governance infrastructure",
            "Strengthen security and compliance frameworks for AI",
            "Consider engaging AI readiness experts for detailed transformation planning",
        ]

    def test_low_score_recommendations(self, engine):
        dims = [
            {"pillar_name": "Strategy", "score": 10, "weight": 25.0},
            {"pillar_name": "Governance", "score": 90, "weight": 75.0},
        ]

        insights = engine.generate_insights(45, dims)

        assert insights["score_category"] == "AI Explorer"
        assert insights["recommendations"][:2] == [
            "Focus on building foundational AI capabilities and governance",
            "Develop a comprehensive AI strategy aligned with business objectives",
        ]
        assert insights["recommendations"][2].startswith("Prioritize improvements in Strategy")
        assert "Develop clear AI strategy and vision aligned with business goals" in insights["recommendations"]
        assert insights["critical_impact_areas"][0]["area"] == "Strategy"
        assert insights["weighted_priorities"][0]["priority"] == "Critical"


class TestEngineHelpers:

    def test_validate_answers(self, engine, core_questions):
        validation = engine.validate_answers(core_questions[:4], {"core_01": 3, "core_02": 9})

        assert validation["valid"] is False
        assert validation["missing_questions"] == ["core_03", "core_04"]
        assert validation["invalid_values"] == ["core_02"]
        assert validation["completion_percentage"] == 50

    def test_live_score_and_completion(self, engine, core_questions):
        assert engine.live_score({"core_01": 4, "core_02": 2}) == 60
        assert engine.completion(core_questions, {"core_01": 4})["completion_rate"] == 3

    def test_config_from_mapping(self):
        config = ScoringConfig.from_mapping({
            "PILLAR_NAMES": ["A", "B"],
            "BEST_PRACTICE_BENCHMARK": 70,
            "LIKERT_POLICY": "IGNORE",
            "PILLAR_ASSIGNMENT": "explicit",
            "WEIGHT_PROFILE": ""
        })

        assert config.pillar_names == ["A", "B"]
        assert config.benchmark == 70
        assert config.likert_policy is LikertPolicy.IGNORE
        assert config.pillar_assignment is PillarAssignment.EXPLICIT
        assert config.weight_profile is None

    def test_singleton(self):
        first = get_assessment_engine()
        assert get_assessment_engine() is first
        replaced = get_assessment_engine(ScoringConfig(benchmark=70))
        assert replaced is not first
        assert get_assessment_engine().config.benchmark == 70


class TestHistory:

    def test_pagination(self):
        pagination = Pagination.from_args("2", "10", 25)
        assert pagination.to_dict() == {
            "current_page": 2,
            "total_pages": 3,
            "total_count": 25,
            "per_page": 10,
            "has_next": True,
            "has_prev": True
        }
        assert pagination.offset == 10

    def test_pagination_bad_args(self):
        pagination = Pagination.from_args("x", "0", 3)
        assert (pagination.current_page, pagination.per_page) == (1, 1)

    def test_improvement_trend(self):
        assert improvement_trend([50, 40, 75]) == {
            "improvement_percentage": 50,
            "trend_direction": "improving"
        }
        assert improvement_trend([80, 60])["trend_direction"] == "declining"
        assert improvement_trend([70])["trend_direction"] == "stable"

    def test_summary(self):
        summary = summarize_assessments([(45, None), (72, None), (85, None)])

        assert summary["total_assessments"] == 3
        assert summary["average_score"] == 67
        assert (summary["highest_score"], summary["lowest_score"]) == (85, 45)
        assert summary["score_distribution"] == {"excellent": 1, "good": 1, "needs_improvement": 1}

    def test_empty_summary(self):
        summary = summarize_assessments([])
        assert summary["total_assessments"] == 0
        assert summary["improvement_trend"]["trend_direction"] == "stable"
