"""
Database Models for AI Readiness

SQLAlchemy models for leads, the question bank, in-progress responses,
completed assessments, and the user activity log.
"""

import logging
import uuid
from datetime import datetime
from typing import Optional

from flask_sqlalchemy import SQLAlchemy
from sqlalchemy import JSON
from sqlalchemy.exc import SQLAlchemyError

logger = logging.getLogger(__name__)

db = SQLAlchemy()


def generate_uuid():
    return str(uuid.uuid4())


class Lead(db.Model):
    """
    Prospect who took the assessment.

    Captured before the first question; one row per email address.
    """
    __tablename__ = 'leads'

    id = db.Column(db.String(36), primary_key=True, default=generate_uuid)
    email = db.Column(db.String(200), nullable=False, unique=True, index=True)
    contact_name = db.Column(db.String(200), nullable=False)
    company_name = db.Column(db.String(200), nullable=False)

    # Contact details
    job_title = db.Column(db.String(200))
    phone_number = db.Column(db.String(50))
    company_size = db.Column(db.String(50))
    country = db.Column(db.String(100))
    industry = db.Column(db.String(100))

    # Timestamps
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    # Relationships
    responses = db.relationship('Response', backref='lead', lazy='dynamic',
                                cascade='all, delete-orphan')
    assessments = db.relationship('Assessment', backref='lead', lazy='dynamic',
                                  cascade='all, delete-orphan')

    def to_dict(self):
        return {
            'id': self.id,
            'email': self.email,
            'contact_name': self.contact_name,
            'company_name': self.company_name,
            'job_title': self.job_title,
            'phone_number': self.phone_number,
            'company_size': self.company_size,
            'country': self.country,
            'industry': self.industry,
            'created_at': self.created_at.isoformat() if self.created_at else None,
            'updated_at': self.updated_at.isoformat() if self.updated_at else None
        }


class Question(db.Model):
    """
    Question bank entry.

    Position orders questions within an assessment type; the pillar column is
    only consulted under explicit pillar assignment.
    """
    __tablename__ = 'questions'

    id = db.Column(db.String(36), primary_key=True, default=generate_uuid)
    assessment_type = db.Column(db.String(20), nullable=False, index=True)  # CORE, ADVANCED, FRONTIER
    pillar = db.Column(db.String(100))
    text = db.Column(db.Text, nullable=False)
    help_text = db.Column(db.Text)
    position = db.Column(db.Integer, default=0)
    is_active = db.Column(db.Boolean, default=True)

    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    def to_dict(self):
        return {
            'id': self.id,
            'assessment_type': self.assessment_type,
            'pillar': self.pillar,
            'question': self.text,
            'help_text': self.help_text,
            'position': self.position,
            'is_active': self.is_active
        }


class Response(db.Model):
    """
    One answer in an in-progress assessment.

    Saved as the user moves through the questionnaire; at most one per
    lead and question.
    """
    __tablename__ = 'responses'
    __table_args__ = (
        db.UniqueConstraint('lead_id', 'question_id', name='uq_response_lead_question'),
    )

    id = db.Column(db.String(36), primary_key=True, default=generate_uuid)
    lead_id = db.Column(db.String(36), db.ForeignKey('leads.id'), nullable=False, index=True)
    question_id = db.Column(db.String(36), db.ForeignKey('questions.id'), nullable=False)
    response_value = db.Column(db.Integer, nullable=False)  # 1-5

    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    question = db.relationship('Question')

    def to_dict(self):
        return {
            'id': self.id,
            'lead_id': self.lead_id,
            'question_id': self.question_id,
            'response_value': self.response_value,
            'updated_at': self.updated_at.isoformat() if self.updated_at else None
        }


class Assessment(db.Model):
    """
    Completed assessment.

    One row per lead and assessment type; retaking overwrites it.
    """
    __tablename__ = 'assessments'
    __table_args__ = (
        db.UniqueConstraint('lead_id', 'assessment_type', name='uq_assessment_lead_type'),
    )

    id = db.Column(db.String(36), primary_key=True, default=generate_uuid)
    lead_id = db.Column(db.String(36), db.ForeignKey('leads.id'), nullable=False, index=True)
    assessment_type = db.Column(db.String(20), nullable=False)
    industry = db.Column(db.String(100))

    # Scores
    overall_score = db.Column(db.Integer, nullable=False)
    weighted_score = db.Column(db.Integer)
    dimension_scores = db.Column(JSON)  # pillar_scores from the payload
    gap_analysis = db.Column(JSON)

    # Raw answers and generated insights
    responses = db.Column(JSON)
    insights = db.Column(JSON)

    completion_time_ms = db.Column(db.Integer, default=0)
    completed_at = db.Column(db.DateTime, default=datetime.utcnow)

    def to_dict(self):
        return {
            'id': self.id,
            'lead_id': self.lead_id,
            'assessment_type': self.assessment_type,
            'industry': self.industry,
            'overall_score': self.overall_score,
            'weighted_score': self.weighted_score,
            'pillar_scores': self.dimension_scores or [],
            'gap_analysis': self.gap_analysis or [],
            'risk_assessment': [],
            'responses': self.responses or {},
            'insights': self.insights or {},
            'completion_time_ms': self.completion_time_ms,
            'completed_at': self.completed_at.isoformat() if self.completed_at else None
        }

    def to_summary_dict(self):
        """Row shape for the history list"""
        return {
            'id': self.id,
            'assessment_type': self.assessment_type,
            'industry': self.industry,
            'overall_score': self.overall_score,
            'completed_at': self.completed_at.isoformat() if self.completed_at else None
        }


class UserActivity(db.Model):
    """
    User engagement log.

    Records lead and assessment lifecycle events for the dashboard.
    """
    __tablename__ = 'user_activities'

    LEAD_CREATED = 'LEAD_CREATED'
    LEAD_UPDATED = 'LEAD_UPDATED'
    ASSESSMENT_START = 'ASSESSMENT_START'
    ASSESSMENT_COMPLETE = 'ASSESSMENT_COMPLETE'
    ASSESSMENT_UPDATE = 'ASSESSMENT_UPDATE'
    RESPONSES_RESET = 'RESPONSES_RESET'

    id = db.Column(db.String(36), primary_key=True, default=generate_uuid)
    lead_id = db.Column(db.String(36), db.ForeignKey('leads.id'), nullable=True, index=True)
    action_type = db.Column(db.String(50), nullable=False)
    entity_type = db.Column(db.String(50))  # lead, assessment, response
    entity_id = db.Column(db.String(36))
    description = db.Column(db.Text)
    ip_address = db.Column(db.String(64))
    user_agent = db.Column(db.String(500))

    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    def to_dict(self):
        return {
            'id': self.id,
            'lead_id': self.lead_id,
            'action_type': self.action_type,
            'entity_type': self.entity_type,
            'entity_id': self.entity_id,
            'description': self.description,
            'ip_address': self.ip_address,
            'created_at': self.created_at.isoformat() if self.created_at else None
        }


def log_activity(
    lead_id: Optional[str],
    action_type: str,
    entity_type: Optional[str] = None,
    entity_id: Optional[str] = None,
    description: Optional[str] = None,
    ip_address: Optional[str] = None,
    user_agent: Optional[str] = None
) -> Optional[UserActivity]:
    """
    Record a user activity.

    A failed write is logged and rolled back; it never fails the request
    that triggered it.
    """
    activity = UserActivity(
        lead_id=lead_id,
        action_type=action_type,
        entity_type=entity_type,
        entity_id=entity_id,
        description=description,
        ip_address=ip_address,
        user_agent=(user_agent or '')[:500] or None
    )
    try:
        db.session.add(activity)
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.warning(f"Failed to log activity {action_type} for lead {lead_id}: {e}")
        return None
    return activity
