"""
Demo Data Generator for AI Readiness

Seeds the question bank and generates demo leads for demonstrations and
testing. Each demo lead gets a full set of CORE responses and a scored,
completed assessment.
"""

import random
import uuid
from datetime import datetime, timedelta
from typing import Dict, List, Optional, Any
from dataclasses import dataclass

from .assessment.assessment_engine import AssessmentEngine
from .assessment.questions import ASSESSMENT_QUESTIONS, get_questions_for_type

# Answer distributions by maturity: (low, high) Likert range per answer
MATURITY_PROFILES = {
    "leader": {
        "name": "AI Leader",
        "response_range": (4, 5),
        "weak_pillars": []
    },
    "adopter": {
        "name": "AI Adopter",
        "response_range": (3, 5),
        "weak_pillars": ["Ethics"]
    },
    "explorer": {
        "name": "AI Explorer",
        "response_range": (2, 4),
        "weak_pillars": ["Foundation", "Governance"]
    },
    "starter": {
        "name": "AI Starter",
        "response_range": (1, 3),
        "weak_pillars": ["Strategy", "Foundation", "Capability"]
    }
}

DEMO_LEADS = [
    ("Technology", "Northwind Analytics", "201-1,000 employees", "leader"),
    ("Financial Services", "Harbor Trust Bank", "1,001-10,000 employees", "adopter"),
    ("Manufacturing", "Precision Parts Inc", "51-200 employees", "explorer"),
    ("Healthcare", "Riverside Health Partners", "1,001-10,000 employees", "starter"),
    ("Retail & E-commerce", "Urban Home Furnishings", "51-200 employees", "explorer"),
    ("Professional Services", "Apex Consulting Group", "1-50 employees", "adopter"),
]


@dataclass
class GeneratedLead:
    """Container for a generated demo lead"""
    lead: Dict[str, Any]
    responses: Dict[str, int]
    assessment: Dict[str, Any]


class DemoDataGenerator:
    """
    Generate demo leads with scored assessments.

    Example:
        generator = DemoDataGenerator(seed=42)

        lead = generator.generate_lead(industry="Technology", maturity="leader")
        print(lead.assessment["overall_score"])

        leads = generator.generate_demo_set(count=4)
    """

    def __init__(self, seed: Optional[int] = None, engine: Optional[AssessmentEngine] = None):
        """Initialize generator with optional random seed for reproducibility"""
        if seed is not None:
            random.seed(seed)
        self.engine = engine or AssessmentEngine()

    def generate_lead(
        self,
        industry: str = "Technology",
        maturity: str = "adopter",
        company_name: Optional[str] = None,
        company_size: str = "51-200 employees",
        assessment_type: str = "CORE"
    ) -> GeneratedLead:
        """
        Generate a lead with responses and a completed assessment.

        Args:
            industry: Lead's industry
            maturity: Maturity profile (see MATURITY_PROFILES)
            company_name: Optional custom name
            company_size: Company size band
            assessment_type: Question set to answer

        Returns:
            GeneratedLead with all data populated
        """
        profile = MATURITY_PROFILES.get(maturity, MATURITY_PROFILES["adopter"])
        contact_name = self._generate_contact_name()
        company_name = company_name or f"{industry} Demo Co"
        domain = company_name.lower().replace(" ", "").replace("&", "")[:20]

        lead = {
            "id": str(uuid.uuid4()),
            "email": f"{contact_name.split()[0].lower()}.{uuid.uuid4().hex[:6]}@{domain}.example.com",
            "contact_name": contact_name,
            "company_name": company_name,
            "job_title": random.choice(["CTO", "Head of Data", "COO", "VP Digital", "CEO"]),
            "company_size": company_size,
            "country": "United States",
            "industry": industry
        }

        questions = get_questions_for_type(assessment_type)
        responses = {q["id"]: self._answer(q["pillar"], profile) for q in questions}

        result = self.engine.calculate_score(
            questions,
            responses,
            lead_id=lead["id"],
            assessment_type=assessment_type,
            industry=industry,
            completion_time_ms=random.randint(240, 900) * 1000
        )

        assessment = result.to_dict()
        assessment["completed_at"] = (
            datetime.utcnow() - timedelta(days=random.randint(0, 60))
        ).isoformat()

        return GeneratedLead(lead=lead, responses=responses, assessment=assessment)

    def _answer(self, pillar: str, profile: Dict[str, Any]) -> int:
        low, high = profile["response_range"]
        if pillar in profile["weak_pillars"]:
            low, high = max(1, low - 1), max(1, high - 2)
        return random.randint(low, high)

    def _generate_contact_name(self) -> str:
        """Generate a realistic contact name"""
        first_names = ["Michael", "Sarah", "David", "Jennifer", "Robert", "Lisa",
                       "James", "Patricia", "John", "Elizabeth"]
        last_names = ["Johnson", "Williams", "Brown", "Jones", "Garcia", "Miller",
                      "Davis", "Rodriguez", "Martinez", "Anderson"]
        return f"{random.choice(first_names)} {random.choice(last_names)}"

    def generate_demo_set(self, count: int = 4) -> List[GeneratedLead]:
        """
        Generate a set of demo leads across industries and maturity levels.
        """
        return [
            self.generate_lead(industry=industry, maturity=maturity,
                               company_name=name, company_size=size)
            for industry, name, size, maturity in DEMO_LEADS[:count]
        ]


def seed_question_bank(db_session) -> int:
    """
    Insert the built-in questions when the question table is empty.

    Returns:
        Number of questions inserted
    """
    from .database.models import Question

    if db_session.query(Question).count() > 0:
        return 0

    inserted = 0
    for questions in ASSESSMENT_QUESTIONS.values():
        for q in questions:
            db_session.add(Question(
                id=q["id"],
                assessment_type=q["assessment_type"],
                pillar=q["pillar"],
                text=q["question"],
                help_text=q["help_text"],
                position=q["position"],
                is_active=True
            ))
            inserted += 1

    db_session.commit()
    return inserted


def load_demo_data_to_db(db_session, count: int = 3) -> List[str]:
    """
    Load demo data directly into the database.

    Args:
        db_session: SQLAlchemy database session
        count: Number of demo leads to create

    Returns:
        List of created lead IDs
    """
    from .database.models import Lead, Response, Assessment, UserActivity

    seed_question_bank(db_session)

    generator = DemoDataGenerator(seed=42)  # Reproducible demos
    leads = generator.generate_demo_set(count=count)
    lead_ids = []

    for gen in leads:
        db_session.add(Lead(
            id=gen.lead["id"],
            email=gen.lead["email"],
            contact_name=gen.lead["contact_name"],
            company_name=gen.lead["company_name"],
            job_title=gen.lead["job_title"],
            company_size=gen.lead["company_size"],
            country=gen.lead["country"],
            industry=gen.lead["industry"]
        ))

        for question_id, value in gen.responses.items():
            db_session.add(Response(
                lead_id=gen.lead["id"],
                question_id=question_id,
                response_value=value
            ))

        a = gen.assessment
        db_session.add(Assessment(
            id=a["assessment_id"],
            lead_id=gen.lead["id"],
            assessment_type=a["assessment_type"],
            industry=a["industry"],
            overall_score=a["overall_score"],
            weighted_score=a["weighted_score"],
            dimension_scores=a["pillar_scores"],
            gap_analysis=a["gap_analysis"],
            responses=a["responses"],
            insights=a["insights"],
            completion_time_ms=a["completion_time_ms"],
            completed_at=datetime.fromisoformat(a["completed_at"])
        ))

        db_session.add(UserActivity(
            lead_id=gen.lead["id"],
            action_type=UserActivity.ASSESSMENT_COMPLETE,
            entity_type="assessment",
            entity_id=a["assessment_id"],
            description=f"Completed {a['assessment_type']} assessment with score {a['overall_score']}%"
        ))

        lead_ids.append(gen.lead["id"])

    db_session.commit()
    return lead_ids


# Quick test function
if __name__ == "__main__":
    generator = DemoDataGenerator(seed=42)
    demo = generator.generate_lead(industry="Technology", maturity="explorer")

    print(f"Generated: {demo.lead['company_name']}")
    print(f"Industry: {demo.lead['industry']}")
    print(f"Overall Score: {demo.assessment['overall_score']}")
    print(f"Category: {demo.assessment['score_category']}")
    print(f"Gaps: {[g['pillar'] for g in demo.assessment['gap_analysis']]}")
