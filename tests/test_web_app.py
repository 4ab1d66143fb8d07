"""Tests for the Flask API against an in-memory database."""

import pytest

from readiness.database.models import Assessment, UserActivity, db


def answer_all(client, lead_id, value_for):
    """Answer every CORE question; value_for(position) -> Likert value."""
    questions = client.get("/api/questions/CORE").get_json()["questions"]
    for q in questions:
        response = client.post("/api/assessment-response/response", json={
            "leadId": lead_id,
            "questionId": q["id"],
            "responseValue": value_for(q["position"])
        })
        assert response.status_code == 200
    return questions


class TestHealthAndErrors:

    def test_health(self, client):
        data = client.get("/api/health").get_json()
        assert data["status"] == "healthy"
        assert data["app"] == "AI Readiness Assessment"

    def test_unknown_route_is_json_404(self, client):
        response = client.get("/api/does-not-exist")
        assert response.status_code == 404
        assert response.get_json() == {"success": False, "message": "Not found"}


class TestLeads:

    def test_create_then_update_by_email(self, client, lead_payload, app):
        created = client.post("/api/lead/create", json=lead_payload)
        assert created.status_code == 201
        lead_id = created.get_json()["leadId"]
        assert created.get_json()["lead"]["email"] == "ada@example.com"

        updated = client.post("/api/lead/create", json={**lead_payload, "jobTitle": "CEO"})
        assert updated.status_code == 200
        assert updated.get_json()["leadId"] == lead_id
        assert updated.get_json()["lead"]["job_title"] == "CEO"

        with app.app_context():
            actions = [a.action_type for a in UserActivity.query.filter_by(lead_id=lead_id).all()]
        assert sorted(actions) == ["LEAD_CREATED", "LEAD_UPDATED"]

    def test_missing_fields(self, client):
        response = client.post("/api/lead/create", json={"email": "x@example.com"})
        assert response.status_code == 400
        assert response.get_json()["success"] is False
        assert "contactName" in response.get_json()["message"]
        assert "companyName" in response.get_json()["message"]

    def test_non_string_fields_rejected(self, client, lead_payload):
        response = client.post("/api/lead/create", json={**lead_payload, "email": 12345})

        assert response.status_code == 400
        assert response.get_json()["success"] is False
        assert "email" in response.get_json()["message"]

    def test_non_string_optional_field_rejected(self, client, lead_payload):
        response = client.post("/api/lead/create", json={**lead_payload, "country": ["UK"]})
        assert response.status_code == 400
        assert "country" in response.get_json()["message"]

    def test_non_object_body(self, client):
        response = client.post("/api/lead/create", json=["ada@example.com"])
        assert response.status_code == 400

    def test_get_lead(self, client, lead_id):
        assert client.get(f"/api/lead/{lead_id}").get_json()["lead"]["id"] == lead_id

    def test_missing_lead(self, client):
        response = client.get("/api/lead/nope")
        assert response.status_code == 404
        assert response.get_json()["message"] == "Lead not found"


class TestQuestionsAndResponses:

    def test_questions_ordered(self, client):
        data = client.get("/api/questions/core").get_json()
        assert data["count"] == 40
        assert [q["position"] for q in data["questions"]] == list(range(1, 41))

    def test_unknown_type(self, client):
        assert client.get("/api/questions/BASIC").status_code == 404

    def test_out_of_range_value_rejected(self, client, lead_id):
        response = client.post("/api/assessment-response/response", json={
            "leadId": lead_id, "questionId": "core_01", "responseValue": 6
        })
        assert response.status_code == 400
        assert response.get_json()["success"] is False

    def test_missing_response_fields(self, client, lead_id):
        response = client.post("/api/assessment-response/response", json={"leadId": lead_id})
        assert response.status_code == 400

    def test_non_string_question_id_rejected(self, client, lead_id):
        response = client.post("/api/assessment-response/response", json={
            "leadId": lead_id, "questionId": 1, "responseValue": 3
        })
        assert response.status_code == 400

    def test_upsert_and_live_score(self, client, lead_id):
        for value in (2, 4):
            client.post("/api/assessment-response/response", json={
                "leadId": lead_id, "questionId": "core_01", "responseValue": value
            })
        client.post("/api/assessment-response/response", json={
            "leadId": lead_id, "questionId": "core_02", "responseValue": 5
        })

        stored = client.get(f"/api/assessment-response/responses/{lead_id}/CORE").get_json()
        assert stored["count"] == 2

        score = client.get(f"/api/assessment-response/score/{lead_id}/CORE").get_json()
        assert score["live_score"] == 90
        assert score["answered_questions"] == 2
        assert score["completion_rate"] == 5

    def test_reset_responses(self, client, lead_id, app):
        client.post("/api/assessment-response/response", json={
            "leadId": lead_id, "questionId": "core_01", "responseValue": 3
        })

        response = client.delete(f"/api/assessment-response/responses/{lead_id}/CORE")

        assert response.get_json()["deleted"] == 1
        score = client.get(f"/api/assessment-response/score/{lead_id}/CORE").get_json()
        assert score["live_score"] == 0
        with app.app_context():
            actions = {a.action_type for a in UserActivity.query.filter_by(lead_id=lead_id).all()}
        assert {"ASSESSMENT_START", "RESPONSES_RESET"} <= actions


class TestSubmission:

    def test_submit_without_responses(self, client, lead_id):
        response = client.post("/api/assessments/submit-complete", json={"leadId": lead_id})
        assert response.status_code == 400

    def test_submit_scores_stored_responses(self, client, lead_id):
        # first pillar (positions 1-5) strongly agrees, the rest answer 3
        answer_all(client, lead_id, lambda position: 5 if position <= 5 else 3)

        response = client.post("/api/assessments/submit-complete", json={
            "leadId": lead_id, "assessmentType": "CORE", "completionTimeMs": 1000
        })

        assert response.status_code == 201
        data = response.get_json()
        # (25 + 35 * 3) / 200 = 65%
        assert data["overall_score"] == 65
        assert [p["score"] for p in data["pillar_scores"]] == [100, 60, 60, 60, 60, 60, 60, 60]
        assert data["risk_assessment"] == []
        assert [g["pillar"] for g in data["gap_analysis"]] == [
            "Architecture", "Foundation", "Ethics", "Culture",
            "Capability", "Governance", "Performance"
        ]
        assert data["gap_analysis"][0]["severity"] == "High"
        assert data["insights"]["industry_benchmark"] == {"average": 75, "best_practice": 90}

        detail = client.get(f"/api/assessments/{data['assessment_id']}").get_json()["assessment"]
        assert detail["overall_score"] == 65
        assert detail["pillar_scores"][0]["dimension_name"] == "Strategy"

    @pytest.mark.parametrize("completion_time", ["abc", [1000], {"ms": 1}])
    def test_bad_completion_time_rejected(self, client, lead_id, completion_time):
        answer_all(client, lead_id, lambda position: 3)

        response = client.post("/api/assessments/submit-complete", json={
            "leadId": lead_id, "completionTimeMs": completion_time
        })

        assert response.status_code == 400
        assert response.get_json() == {
            "success": False,
            "message": "completionTimeMs must be an integer"
        }

    def test_numeric_string_completion_time(self, client, lead_id):
        answer_all(client, lead_id, lambda position: 3)

        response = client.post("/api/assessments/submit-complete", json={
            "leadId": lead_id, "completionTimeMs": "1500"
        })

        assert response.status_code == 201
        assert response.get_json()["completion_time_ms"] == 1500

    def test_non_string_lead_id_rejected(self, client):
        response = client.post("/api/assessments/submit-complete", json={"leadId": {"id": 1}})
        assert response.status_code == 400

    def test_resubmit_updates_same_assessment(self, client, lead_id, app):
        answer_all(client, lead_id, lambda position: 2)
        first = client.post("/api/assessments/submit-complete", json={"leadId": lead_id}).get_json()

        answer_all(client, lead_id, lambda position: 4)
        second = client.post("/api/assessments/submit-complete", json={"leadId": lead_id})

        assert second.status_code == 200
        assert second.get_json()["assessment_id"] == first["assessment_id"]
        assert second.get_json()["overall_score"] == 80
        with app.app_context():
            assert Assessment.query.filter_by(lead_id=lead_id).count() == 1
            actions = [a.action_type for a in UserActivity.query.filter_by(lead_id=lead_id).all()]
        assert "ASSESSMENT_COMPLETE" in actions
        assert "ASSESSMENT_UPDATE" in actions


class TestDashboard:

    def _submit(self, client, lead_id, assessment_type, value):
        questions = client.get(f"/api/questions/{assessment_type}").get_json()["questions"]
        for q in questions:
            client.post("/api/assessment-response/response", json={
                "leadId": lead_id, "questionId": q["id"], "responseValue": value
            })
        return client.post("/api/assessments/submit-complete", json={
            "leadId": lead_id, "assessmentType": assessment_type
        }).get_json()

    def test_history_and_summary(self, client, lead_id):
        self._submit(client, lead_id, "CORE", 2)
        self._submit(client, lead_id, "ADVANCED", 3)
        self._submit(client, lead_id, "FRONTIER", 5)

        history = client.get(f"/api/assessments/user/{lead_id}/history?page=1&limit=2").get_json()
        assert len(history["assessments"]) == 2
        assert history["pagination"]["total_count"] == 3
        assert history["pagination"]["has_next"] is True

        filtered = client.get(f"/api/assessments/user/{lead_id}/history?filter=advanced").get_json()
        assert [a["assessment_type"] for a in filtered["assessments"]] == ["ADVANCED"]

        summary = client.get(f"/api/assessments/user/{lead_id}/summary").get_json()
        assert summary["total_assessments"] == 3
        assert summary["highest_score"] == 100
        assert summary["lowest_score"] == 40
        assert summary["average_score"] == 67
        assert summary["score_distribution"] == {"excellent": 1, "good": 1, "needs_improvement": 1}
        assert summary["improvement_trend"]["trend_direction"] == "improving"

    def test_empty_summary(self, client, lead_id):
        summary = client.get(f"/api/assessments/user/{lead_id}/summary").get_json()
        assert summary["total_assessments"] == 0
        assert summary["latest_assessment_date"] is None

    def test_activity_feed(self, client, lead_id):
        data = client.get(f"/api/user-engagement/activity/{lead_id}").get_json()
        assert data["count"] == 1
        assert data["activities"][0]["action_type"] == "LEAD_CREATED"


def test_log_activity_failure_does_not_raise(app):
    from unittest.mock import patch
    from sqlalchemy.exc import SQLAlchemyError
    from readiness.database.models import log_activity

    with app.app_context():
        with patch.object(db.session, "commit", side_effect=SQLAlchemyError("down")):
            assert log_activity(None, UserActivity.LEAD_CREATED) is None
