"""
AI Readiness REST API Client

Thin client over the assessment backend:
- Lead capture
- Question retrieval
- Per-question response saving and live score
- Assessment submission, history and summary
- Admin login and authenticated admin reads
"""

import os
import logging
from dataclasses import dataclass
from typing import Optional, Dict, List, Any

import requests

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """Backend request failed"""

    def __init__(self, message: str, status_code: Optional[int] = None, payload: Optional[Dict] = None):
        super().__init__(message)
        self.status_code = status_code
        self.payload = payload or {}


class AuthenticationRequired(ApiError):
    """Admin token missing, expired or rejected; log in again"""


@dataclass
class ApiClientConfig:
    """Configuration for backend access"""
    base_url: str = "http://localhost:5000"
    timeout: float = 10.0
    admin_token: Optional[str] = None

    @classmethod
    def from_env(cls) -> 'ApiClientConfig':
        """Create config from environment variables"""
        return cls(
            base_url=os.getenv('API_BASE_URL', 'http://localhost:5000'),
            timeout=float(os.getenv('API_TIMEOUT', 10)),
            admin_token=os.getenv('ADMIN_API_TOKEN') or None
        )

    @classmethod
    def from_mapping(cls, mapping: Dict[str, Any]) -> 'ApiClientConfig':
        """Create config from a Flask config or any mapping of settings"""
        return cls(
            base_url=mapping.get('API_BASE_URL', 'http://localhost:5000'),
            timeout=float(mapping.get('API_TIMEOUT', 10)),
            admin_token=mapping.get('ADMIN_API_TOKEN') or None
        )


class ReadinessApiClient:
    """
    AI Readiness backend client

    Sends JSON to the backend and adds the admin bearer token to admin paths
    only. A 401 from an admin path drops the stored token.

    Example:
        client = ReadinessApiClient(ApiClientConfig.from_env())
        lead = client.create_lead({"contactName": "Ada", "email": "ada@example.com",
                                   "companyName": "Acme"})
        questions = client.get_questions("CORE")
    """

    def __init__(self, config: Optional[ApiClientConfig] = None):
        self.config = config or ApiClientConfig()
        self.admin_token: Optional[str] = self.config.admin_token
        self._session = requests.Session()
        self._session.headers.update({
            'Accept': 'application/json',
            'Content-Type': 'application/json'
        })

    @staticmethod
    def _is_admin_path(path: str) -> bool:
        return '/admin/' in path

    def _make_request(self, method: str, path: str, **kwargs) -> Dict[str, Any]:
        """Make API request, adding the admin token on admin paths"""
        url = f"{self.config.base_url.rstrip('/')}{path}"
        headers = kwargs.pop('headers', {})
        admin_path = self._is_admin_path(path)

        if admin_path and self.admin_token:
            headers['Authorization'] = f'Bearer {self.admin_token}'

        try:
            response = self._session.request(
                method, url, headers=headers, timeout=self.config.timeout, **kwargs
            )
        except requests.RequestException as e:
            logger.error(f"{method} {path} failed: {e}")
            raise ApiError(f"Request to {path} failed: {e}") from e

        if response.status_code == 401 and admin_path:
            logger.warning(f"Admin session rejected for {path}, clearing token")
            self.admin_token = None
            raise AuthenticationRequired("Admin login required", status_code=401,
                                         payload=self._json(response))

        if not response.ok:
            payload = self._json(response)
            message = payload.get('message') or response.reason or 'Request failed'
            logger.warning(f"{method} {path} returned {response.status_code}: {message}")
            raise ApiError(message, status_code=response.status_code, payload=payload)

        return self._json(response)

    @staticmethod
    def _json(response: requests.Response) -> Dict[str, Any]:
        try:
            data = response.json()
        except ValueError:
            return {}
        return data if isinstance(data, dict) else {'data': data}

    # ========== Leads ==========

    def create_lead(self, lead: Dict[str, Any]) -> Dict[str, Any]:
        """Create or update a lead (matched by email)"""
        return self._make_request('POST', '/api/lead/create', json=lead)

    # ========== Questions & Responses ==========

    def get_questions(self, assessment_type: str) -> List[Dict[str, Any]]:
        """Active questions for an assessment type, in display order"""
        data = self._make_request('GET', f'/api/questions/{assessment_type.upper()}')
        return data.get('questions', [])

    def save_response(self, lead_id: str, question_id: str, value: int) -> Dict[str, Any]:
        """Save one answer for an in-progress assessment"""
        return self._make_request('POST', '/api/assessment-response/response', json={
            'leadId': lead_id,
            'questionId': question_id,
            'responseValue': value
        })

    def get_score(self, lead_id: str, assessment_type: str) -> Dict[str, Any]:
        """Live score and completion for an in-progress assessment"""
        return self._make_request(
            'GET', f'/api/assessment-response/score/{lead_id}/{assessment_type.upper()}'
        )

    # ========== Assessments ==========

    def submit_assessment(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        """Submit a completed assessment payload"""
        return self._make_request('POST', '/api/assessments/submit-complete', json=payload)

    def get_assessment(self, assessment_id: str) -> Dict[str, Any]:
        return self._make_request('GET', f'/api/assessments/{assessment_id}')

    def get_history(self, lead_id: str, page: int = 1, limit: int = 10,
                    filter: Optional[str] = None) -> Dict[str, Any]:
        """Paginated assessment history, optionally for one assessment type"""
        params = {'page': page, 'limit': limit}
        if filter:
            params['filter'] = filter
        return self._make_request('GET', f'/api/assessments/user/{lead_id}/history', params=params)

    def get_summary(self, lead_id: str) -> Dict[str, Any]:
        return self._make_request('GET', f'/api/assessments/user/{lead_id}/summary')

    # ========== Admin ==========

    def admin_login(self, username: str, password: str) -> Dict[str, Any]:
        """Log in as admin and keep the session token for admin requests"""
        data = self._make_request('POST', '/api/admin/login', json={
            'username': username,
            'password': password
        })
        if data.get('success') and data.get('sessionToken'):
            self.admin_token = data['sessionToken']
            logger.info(f"Admin {username} logged in")
        return data

    def admin_get(self, path: str, **params) -> Dict[str, Any]:
        """GET an admin resource, e.g. admin_get('dashboard')"""
        if not self._is_admin_path(path):
            path = f"/api/admin/{path.lstrip('/')}"
        return self._make_request('GET', path, params=params or None)
