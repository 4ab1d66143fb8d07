"""
Database Module for AI Readiness

SQLAlchemy models and database utilities.
"""

from .models import (
    db,
    Lead,
    Question,
    Response,
    Assessment,
    UserActivity,
    log_activity
)

__all__ = [
    'db',
    'Lead',
    'Question',
    'Response',
    'Assessment',
    'UserActivity',
    'log_activity',
]
