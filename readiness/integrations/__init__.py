"""
Backend Integrations for AI Readiness

Provides a client for the assessment REST API.
"""

from .api_client import ReadinessApiClient, ApiClientConfig, ApiError, AuthenticationRequired

__all__ = [
    'ReadinessApiClient',
    'ApiClientConfig',
    'ApiError',
    'AuthenticationRequired'
]
