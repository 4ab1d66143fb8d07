"""
AI Readiness Assessment Questions

Questionnaire organized by pillar:
1. Strategy
2. Architecture
3. Foundation
4. Ethics
5. Culture
6. Capability
7. Governance
8. Performance

Each question has:
- ID, assessment type and pillar assignment
- Question text and help text
- Display position within its assessment type

Every question uses the same five-point agreement scale. Questions are listed
in pillar order so that positional chunking and explicit pillar grouping
produce the same breakdown for the seeded sets.
"""

from typing import Dict, List, Any

# Pillar definitions
PILLARS = {
    "Strategy": {
        "name": "Strategy",
        "short_name": "STRATEGY",
        "description": "Is AI tied to business goals with executive sponsorship and funding?",
        "default_weight": 12.5,
        "color": "#0d6efd"
    },
    "Architecture": {
        "name": "Architecture",
        "short_name": "ARCHITECTURE",
        "description": "Can your technology platform build, deploy and scale AI workloads?",
        "default_weight": 12.5,
        "color": "#6610f2"
    },
    "Foundation": {
        "name": "Foundation",
        "short_name": "DATA",
        "description": "Is your data accessible, trustworthy and governed for AI use?",
        "default_weight": 12.5,
        "color": "#6f42c1"
    },
    "Ethics": {
        "name": "Ethics",
        "short_name": "ETHICS",
        "description": "Do you design AI to be fair, transparent and accountable?",
        "default_weight": 12.5,
        "color": "#d63384"
    },
    "Culture": {
        "name": "Culture",
        "short_name": "CULTURE",
        "description": "Are people ready and willing to work alongside AI?",
        "default_weight": 12.5,
        "color": "#fd7e14"
    },
    "Capability": {
        "name": "Capability",
        "short_name": "SKILLS",
        "description": "Do you have the skills and partners to deliver AI?",
        "default_weight": 12.5,
        "color": "#ffc107"
    },
    "Governance": {
        "name": "Governance",
        "short_name": "SECURITY",
        "description": "Are AI risk, security and compliance actively managed?",
        "default_weight": 12.5,
        "color": "#198754"
    },
    "Performance": {
        "name": "Performance",
        "short_name": "VALUE",
        "description": "Do you measure the value AI delivers and act on it?",
        "default_weight": 12.5,
        "color": "#20c997"
    }
}

ASSESSMENT_TYPES = {
    "CORE": {
        "id": "CORE",
        "name": "Core AI Readiness",
        "description": "Baseline readiness across all eight pillars",
        "estimated_minutes": 10
    },
    "ADVANCED": {
        "id": "ADVANCED",
        "name": "Advanced AI Maturity",
        "description": "Scaling AI beyond pilots into production",
        "estimated_minutes": 8
    },
    "FRONTIER": {
        "id": "FRONTIER",
        "name": "Frontier AI Leadership",
        "description": "Generative and autonomous AI at enterprise scale",
        "estimated_minutes": 5
    }
}

LIKERT_OPTIONS = [
    {"value": 1, "label": "Strongly Disagree", "description": "Not at all true for us"},
    {"value": 2, "label": "Disagree", "description": "Mostly untrue"},
    {"value": 3, "label": "Neutral", "description": "Partly true"},
    {"value": 4, "label": "Agree", "description": "Mostly true"},
    {"value": 5, "label": "Strongly Agree", "description": "Completely true"}
]

# (pillar, question, help text) per assessment type, in display order
_CORE_QUESTIONS = [
    # =========================================================================
    # STRATEGY
    # =========================================================================
    ("Strategy", "Our organization has a documented AI strategy linked to business objectives.",
     "A written plan that names the outcomes AI should deliver."),
    ("Strategy", "Senior leadership actively sponsors AI initiatives.",
     "An executive owns AI outcomes and removes blockers."),
    ("Strategy", "AI initiatives have dedicated, multi-year funding.",
     "Budget is allocated beyond one-off experiments."),
    ("Strategy", "We have a prioritized portfolio of AI use cases.",
     "Use cases are ranked by value and feasibility."),
    ("Strategy", "AI goals are reviewed regularly at board or executive level.",
     "Progress is tracked in leadership forums."),
    # =========================================================================
    # ARCHITECTURE
    # =========================================================================
    ("Architecture", "Our infrastructure can scale compute for AI workloads on demand.",
     "Cloud or on-premise capacity that grows with training and inference needs."),
    ("Architecture", "We have standard tooling for building and deploying models.",
     "A shared platform rather than one-off scripts per team."),
    ("Architecture", "AI models integrate cleanly with our core business systems.",
     "Predictions reach the applications where decisions are made."),
    ("Architecture", "We monitor models in production for drift and failures.",
     "Automated alerts when model behaviour changes."),
    ("Architecture", "Our architecture supports real-time data for AI use cases.",
     "Streaming or low-latency pipelines where the use case needs them."),
    # =========================================================================
    # FOUNDATION
    # =========================================================================
    ("Foundation", "Our data is accurate, complete and trusted by the business.",
     "Data quality is measured and issues are fixed at the source."),
    ("Foundation", "Teams can find and access the data they need for AI.",
     "A catalog or platform makes data discoverable."),
    ("Foundation", "Data ownership and stewardship are clearly defined.",
     "Each critical dataset has an accountable owner."),
    ("Foundation", "We can combine data across departments without manual effort.",
     "Integrated data rather than disconnected silos."),
    ("Foundation", "Sensitive data is classified and protected before AI use.",
     "Personal and confidential data is labelled and controlled."),
    # =========================================================================
    # ETHICS
    # =========================================================================
    ("Ethics", "We have published principles for responsible AI.",
     "Fairness, transparency and accountability commitments."),
    ("Ethics", "AI systems are tested for bias before release.",
     "Outcomes are compared across customer and employee groups."),
    ("Ethics", "We can explain how our AI systems reach their decisions.",
     "Explanations suitable for customers and regulators."),
    ("Ethics", "People affected by AI decisions can request a human review.",
     "A clear route to challenge automated outcomes."),
    ("Ethics", "Ethical risks are assessed for every new AI use case.",
     "An impact assessment is part of project approval."),
    # =========================================================================
    # CULTURE
    # =========================================================================
    ("Culture", "Employees see AI as an opportunity rather than a threat.",
     "Open attitudes toward working alongside AI."),
    ("Culture", "Teams are encouraged to experiment with AI.",
     "Safe spaces and time to try new ideas."),
    ("Culture", "Business and technical teams collaborate on AI projects.",
     "Joint ownership rather than hand-offs."),
    ("Culture", "We communicate openly about how AI will change roles.",
     "Change management accompanies AI rollouts."),
    ("Culture", "Data-driven decision making is the norm.",
     "Decisions are backed by evidence, not only intuition."),
    # =========================================================================
    # CAPABILITY
    # =========================================================================
    ("Capability", "We have in-house data science and ML engineering skills.",
     "People who can build and maintain models."),
    ("Capability", "Employees receive AI literacy training.",
     "Non-specialists understand what AI can and cannot do."),
    ("Capability", "We can attract and retain AI talent.",
     "Competitive roles, career paths and culture for specialists."),
    ("Capability", "We have trusted partners to fill AI capability gaps.",
     "Vendors or consultancies with proven AI delivery."),
    ("Capability", "Product teams know how to turn AI into working features.",
     "Skills to move from prototype to product."),
    # =========================================================================
    # GOVERNANCE
    # =========================================================================
    ("Governance", "A governance body oversees AI risk and approvals.",
     "A committee or function with clear decision rights."),
    ("Governance", "AI systems follow our security standards.",
     "Threat modelling and access control cover models and data."),
    ("Governance", "We track regulatory requirements that apply to AI.",
     "Awareness of current and upcoming AI regulation."),
    ("Governance", "We keep an inventory of AI systems in use.",
     "Including third-party and embedded AI."),
    ("Governance", "Model changes go through a documented approval process.",
     "Versioning, review and sign-off before release."),
    # =========================================================================
    # PERFORMANCE
    # =========================================================================
    ("Performance", "Each AI initiative has defined success metrics.",
     "KPIs agreed before work starts."),
    ("Performance", "We measure the financial return of AI investments.",
     "Costs and benefits are tracked after launch."),
    ("Performance", "Successful AI pilots are scaled across the business.",
     "A path from pilot to enterprise rollout."),
    ("Performance", "Underperforming AI initiatives are stopped or redirected.",
     "Portfolio decisions are made on results."),
    ("Performance", "AI results are reported to stakeholders regularly.",
     "Dashboards or reviews that show delivered value."),
]

_ADVANCED_QUESTIONS = [
    ("Strategy", "AI is embedded in our business unit plans, not run as a side program.", ""),
    ("Strategy", "We have a clear build, buy or partner stance for AI.", ""),
    ("Strategy", "AI investment decisions use a consistent value framework.", ""),
    ("Architecture", "We run MLOps pipelines with automated testing and deployment.", ""),
    ("Architecture", "Feature stores or shared data products serve multiple models.", ""),
    ("Architecture", "Our platform supports large language model workloads.", ""),
    ("Foundation", "Data lineage is tracked from source to model output.", ""),
    ("Foundation", "Data quality checks run automatically in our pipelines.", ""),
    ("Foundation", "We license or generate external data where internal data falls short.", ""),
    ("Ethics", "Fairness metrics are monitored continuously in production.", ""),
    ("Ethics", "Model cards or equivalent documentation exist for production models.", ""),
    ("Ethics", "External stakeholders are consulted on high-impact AI uses.", ""),
    ("Culture", "Leaders model the use of AI in their own work.", ""),
    ("Culture", "Teams share AI learnings through a community of practice.", ""),
    ("Culture", "Incentives reward adoption of AI-enabled processes.", ""),
    ("Capability", "We have specialist roles for ML engineering and AI product management.", ""),
    ("Capability", "Reskilling programs move staff into AI-augmented roles.", ""),
    ("Capability", "We run an AI center of excellence or equivalent.", ""),
    ("Governance", "AI risks are part of the enterprise risk register.", ""),
    ("Governance", "Third-party AI vendors are assessed against our AI policies.", ""),
    ("Governance", "We red-team high-risk AI systems before release.", ""),
    ("Performance", "AI value is attributed in financial reporting.", ""),
    ("Performance", "We benchmark AI outcomes against industry peers.", ""),
    ("Performance", "Operational metrics show AI reducing cost or cycle time.", ""),
]

_FRONTIER_QUESTIONS = [
    ("Strategy", "Generative AI is part of our competitive strategy.", ""),
    ("Strategy", "We are prepared for AI-driven changes to our business model.", ""),
    ("Architecture", "We operate agentic or autonomous AI workflows in production.", ""),
    ("Architecture", "Our platform can swap foundation models without major rework.", ""),
    ("Foundation", "Proprietary data gives our AI a defensible advantage.", ""),
    ("Foundation", "Retrieval and knowledge systems ground our generative AI.", ""),
    ("Ethics", "We evaluate generative AI outputs for harmful content.", ""),
    ("Ethics", "We disclose AI-generated content to customers.", ""),
    ("Culture", "Most employees use AI assistants daily.", ""),
    ("Culture", "Teams redesign processes around AI rather than bolting it on.", ""),
    ("Capability", "We fine-tune or build models tailored to our domain.", ""),
    ("Capability", "We contribute to AI research or open-source communities.", ""),
    ("Governance", "Autonomous AI actions have enforced guardrails and audit trails.", ""),
    ("Governance", "We are ready for AI-specific regulation such as the EU AI Act.", ""),
    ("Performance", "AI creates new revenue streams for the business.", ""),
    ("Performance", "We track AI productivity gains at enterprise level.", ""),
]


def _build_questions(assessment_type: str, rows: List[tuple], prefix: str) -> List[Dict[str, Any]]:
    return [
        {
            "id": f"{prefix}_{index:02d}",
            "assessment_type": assessment_type,
            "pillar": pillar,
            "question": text,
            "help_text": help_text,
            "position": index,
            "options": LIKERT_OPTIONS
        }
        for index, (pillar, text, help_text) in enumerate(rows, start=1)
    ]


# Assessment questions keyed by assessment type, in display order
ASSESSMENT_QUESTIONS: Dict[str, List[Dict[str, Any]]] = {
    "CORE": _build_questions("CORE", _CORE_QUESTIONS, "core"),
    "ADVANCED": _build_questions("ADVANCED", _ADVANCED_QUESTIONS, "adv"),
    "FRONTIER": _build_questions("FRONTIER", _FRONTIER_QUESTIONS, "fro"),
}


def get_questions_for_type(assessment_type: str) -> List[Dict]:
    """Get all questions for an assessment type, in display order."""
    return ASSESSMENT_QUESTIONS.get(assessment_type.upper(), [])


def get_pillar_names() -> List[str]:
    """Get pillar names in report order."""
    return list(PILLARS.keys())


def get_pillar_info(pillar_name: str) -> Dict:
    """Get pillar metadata."""
    return PILLARS.get(pillar_name, {})


def get_question_count(assessment_type: str) -> int:
    """Get number of questions for an assessment type."""
    return len(get_questions_for_type(assessment_type))
