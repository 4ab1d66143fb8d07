"""
AI Readiness Assessment - Flask Web Application

Backend for the AI readiness self-assessment: lead capture, question
retrieval, per-question responses with a live score, scored submissions,
and the per-user dashboard.
"""

import os
import sys
import logging
from datetime import datetime
from flask import Flask, request, jsonify
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address
from werkzeug.exceptions import HTTPException

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from config.settings import get_config
from readiness.assessment.assessment_engine import ScoringConfig, get_assessment_engine
from readiness.assessment.history import Pagination, summarize_assessments
from readiness.assessment.questions import ASSESSMENT_TYPES
from readiness.assessment.scoring import InvalidResponseError, LikertPolicy, normalize_response
from readiness.database.models import db, Lead, Question, Response, Assessment, UserActivity, log_activity
from readiness.demo_data import seed_question_bank

# Configure logging
logging.basicConfig(level=os.environ.get('LOG_LEVEL', 'INFO').upper())
logger = logging.getLogger(__name__)

# camelCase request field -> Lead column
LEAD_FIELDS = {
    'contactName': 'contact_name',
    'email': 'email',
    'companyName': 'company_name',
    'jobTitle': 'job_title',
    'phoneNumber': 'phone_number',
    'companySize': 'company_size',
    'country': 'country',
    'industry': 'industry'
}
REQUIRED_LEAD_FIELDS = ['contactName', 'email', 'companyName']


def _error(message, status):
    return jsonify({'success': False, 'message': message}), status


def _json_body():
    """Request JSON object, or an empty dict for a missing or non-object body"""
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def _field(data, camel, snake):
    """Accept both camelCase and snake_case request fields"""
    value = data.get(camel)
    return data.get(snake) if value is None else value


# =============================================================================
# App Factory
# =============================================================================

def create_app(config_class=None):
    """Create Flask application"""
    app = Flask(__name__)

    # Load configuration
    if config_class is None:
        config_class = get_config()
    app.config.from_object(config_class)

    if not app.config.get('SECRET_KEY'):
        raise ValueError("SECRET_KEY must be set in production")

    # Initialize extensions
    db.init_app(app)

    # Rate limiting
    limiter = Limiter(
        key_func=get_remote_address,
        app=app,
        default_limits=[app.config['RATELIMIT_DEFAULT']],
        storage_uri=app.config['RATELIMIT_STORAGE_URI']
    )

    engine = get_assessment_engine(ScoringConfig.from_mapping(app.config))

    # Create tables and seed the question bank
    with app.app_context():
        db.create_all()
        seeded = seed_question_bank(db.session)
        logger.info(f"Database tables created, {seeded} questions seeded")

    def _log(lead_id, action_type, entity_type=None, entity_id=None, description=None):
        log_activity(
            lead_id,
            action_type,
            entity_type=entity_type,
            entity_id=entity_id,
            description=description,
            ip_address=request.remote_addr,
            user_agent=request.headers.get('User-Agent')
        )

    def _questions_for(assessment_type):
        return Question.query.filter_by(assessment_type=assessment_type, is_active=True)\
                             .order_by(Question.position.asc())\
                             .all()

    def _stored_responses(lead_id, questions):
        question_ids = [q.id for q in questions]
        if not question_ids:
            return []
        return Response.query.filter(Response.lead_id == lead_id,
                                     Response.question_id.in_(question_ids))\
                             .all()

    # =============================================================================
    # API Routes - Health
    # =============================================================================

    @app.route('/api/health', methods=['GET'])
    @limiter.exempt
    def api_health():
        return jsonify({
            'status': 'healthy',
            'app': app.config['APP_NAME'],
            'timestamp': datetime.utcnow().isoformat()
        })

    # =============================================================================
    # API Routes - Leads
    # =============================================================================

    @app.route('/api/lead/create', methods=['POST'])
    def api_create_lead():
        """Create a lead, or update the existing one with the same email"""
        data = _json_body()

        missing = [f for f in REQUIRED_LEAD_FIELDS if not str(data.get(f) or '').strip()]
        if missing:
            return _error(f"Missing required fields: {', '.join(missing)}", 400)

        not_text = [f for f in LEAD_FIELDS if data.get(f) is not None and not isinstance(data[f], str)]
        if not_text:
            return _error(f"Fields must be strings: {', '.join(not_text)}", 400)

        email = data['email'].strip().lower()
        values = {
            column: data[camel].strip()
            for camel, column in LEAD_FIELDS.items()
            if data.get(camel) is not None
        }
        values['email'] = email

        lead = Lead.query.filter_by(email=email).first()
        is_new = lead is None

        if is_new:
            lead = Lead(**values)
            db.session.add(lead)
        else:
            for column, value in values.items():
                setattr(lead, column, value)
        db.session.commit()

        if is_new:
            logger.info(f"Created lead {lead.id} for {lead.company_name}")
            _log(lead.id, UserActivity.LEAD_CREATED, 'lead', lead.id,
                 f"Lead created for {lead.company_name}")
        else:
            logger.info(f"Updated lead {lead.id} for {lead.company_name}")
            _log(lead.id, UserActivity.LEAD_UPDATED, 'lead', lead.id,
                 f"Lead details updated for {lead.company_name}")

        return jsonify({
            'success': True,
            'leadId': lead.id,
            'isNew': is_new,
            'lead': lead.to_dict()
        }), 201 if is_new else 200

    @app.route('/api/lead/<lead_id>', methods=['GET'])
    def api_get_lead(lead_id):
        lead = db.get_or_404(Lead, lead_id, description='Lead not found')
        return jsonify({'success': True, 'lead': lead.to_dict()})

    # =============================================================================
    # API Routes - Questions & Responses
    # =============================================================================

    @app.route('/api/questions/<assessment_type>', methods=['GET'])
    def api_get_questions(assessment_type):
        """Active questions for an assessment type, in display order"""
        assessment_type = assessment_type.upper()
        if assessment_type not in ASSESSMENT_TYPES:
            return _error(f"Unknown assessment type: {assessment_type}", 404)

        questions = _questions_for(assessment_type)
        return jsonify({
            'success': True,
            'assessment_type': assessment_type,
            'count': len(questions),
            'questions': [q.to_dict() for q in questions]
        })

    @app.route('/api/assessment-response/response', methods=['POST'])
    def api_save_response():
        """Save or replace one answer"""
        data = _json_body()
        lead_id = _field(data, 'leadId', 'lead_id')
        question_id = _field(data, 'questionId', 'question_id')
        value = _field(data, 'responseValue', 'response_value')

        if lead_id is None or question_id is None or value is None:
            return _error("leadId, questionId and responseValue are required", 400)
        if not isinstance(lead_id, str) or not isinstance(question_id, str):
            return _error("leadId and questionId must be strings", 400)

        value = normalize_response(question_id, value, LikertPolicy.REJECT)

        db.get_or_404(Lead, lead_id, description='Lead not found')
        question = db.get_or_404(Question, question_id, description='Question not found')

        response = Response.query.filter_by(lead_id=lead_id, question_id=question_id).first()
        if response is None:
            started = not _stored_responses(lead_id, _questions_for(question.assessment_type))
            response = Response(lead_id=lead_id, question_id=question_id, response_value=value)
            db.session.add(response)
        else:
            started = False
            response.response_value = value
        db.session.commit()

        if started:
            _log(lead_id, UserActivity.ASSESSMENT_START, 'assessment', None,
                 f"Started {question.assessment_type} assessment")

        return jsonify({'success': True, 'response': response.to_dict()})

    @app.route('/api/assessment-response/responses/<lead_id>/<assessment_type>', methods=['GET'])
    def api_get_responses(lead_id, assessment_type):
        responses = _stored_responses(lead_id, _questions_for(assessment_type.upper()))
        return jsonify({
            'success': True,
            'count': len(responses),
            'responses': [r.to_dict() for r in responses]
        })

    @app.route('/api/assessment-response/score/<lead_id>/<assessment_type>', methods=['GET'])
    def api_live_score(lead_id, assessment_type):
        """Live score and completion for an in-progress assessment"""
        assessment_type = assessment_type.upper()
        questions = _questions_for(assessment_type)
        responses = {r.question_id: r.response_value for r in _stored_responses(lead_id, questions)}

        completion = engine.completion(questions, responses)
        return jsonify({
            'success': True,
            'lead_id': lead_id,
            'assessment_type': assessment_type,
            'live_score': completion['score'],
            **completion
        })

    @app.route('/api/assessment-response/responses/<lead_id>/<assessment_type>', methods=['DELETE'])
    def api_reset_responses(lead_id, assessment_type):
        """Clear answers so the assessment can be retaken"""
        assessment_type = assessment_type.upper()
        responses = _stored_responses(lead_id, _questions_for(assessment_type))
        for response in responses:
            db.session.delete(response)
        db.session.commit()

        logger.info(f"Reset {len(responses)} {assessment_type} responses for lead {lead_id}")
        _log(lead_id, UserActivity.RESPONSES_RESET, 'response', None,
             f"Cleared {len(responses)} {assessment_type} responses")

        return jsonify({'success': True, 'deleted': len(responses)})

    # =============================================================================
    # API Routes - Assessments
    # =============================================================================

    @app.route('/api/assessments/submit-complete', methods=['POST'])
    def api_submit_assessment():
        """Score stored responses and save the completed assessment"""
        data = _json_body()
        lead_id = _field(data, 'leadId', 'lead_id')
        assessment_type = str(_field(data, 'assessmentType', 'assessment_type')
                              or app.config['DEFAULT_ASSESSMENT_TYPE']).upper()

        if not isinstance(lead_id, str):
            return _error("leadId is required", 400)
        if assessment_type not in ASSESSMENT_TYPES:
            return _error(f"Unknown assessment type: {assessment_type}", 400)

        try:
            completion_time_ms = int(_field(data, 'completionTimeMs', 'completion_time_ms') or 0)
        except (TypeError, ValueError):
            return _error("completionTimeMs must be an integer", 400)

        lead = db.get_or_404(Lead, lead_id, description='Lead not found')
        questions = _questions_for(assessment_type)
        responses = {r.question_id: r.response_value for r in _stored_responses(lead_id, questions)}

        if not responses:
            return _error("No responses found for this assessment", 400)

        existing = Assessment.query.filter_by(lead_id=lead_id, assessment_type=assessment_type).first()

        result = engine.calculate_score(
            [q.to_dict() for q in questions],
            responses,
            lead_id=lead_id,
            assessment_type=assessment_type,
            industry=data.get('industry') or lead.industry,
            weight_profile=_field(data, 'weightProfile', 'weight_profile'),
            assessment_id=existing.id if existing else None,
            completion_time_ms=completion_time_ms,
            metadata=data.get('metadata') or {}
        )
        payload = result.to_dict()

        assessment = existing or Assessment(id=result.assessment_id, lead_id=lead_id,
                                            assessment_type=assessment_type)
        assessment.industry = result.industry
        assessment.overall_score = result.overall_score
        assessment.weighted_score = result.weighted.overall_score
        assessment.dimension_scores = payload['pillar_scores']
        assessment.gap_analysis = payload['gap_analysis']
        assessment.responses = payload['responses']
        assessment.insights = payload['insights']
        assessment.completion_time_ms = result.completion_time_ms
        assessment.completed_at = result.completed_at
        if existing is None:
            db.session.add(assessment)
        db.session.commit()

        action = UserActivity.ASSESSMENT_UPDATE if existing else UserActivity.ASSESSMENT_COMPLETE
        logger.info(f"Saved {assessment_type} assessment {assessment.id} for lead {lead_id}: "
                    f"{result.overall_score}%")
        _log(lead_id, action, 'assessment', assessment.id,
             f"Completed {assessment_type} assessment with score {result.overall_score}%")

        return jsonify({'success': True, **payload}), 200 if existing else 201

    @app.route('/api/assessments/user/<lead_id>/history', methods=['GET'])
    def api_assessment_history(lead_id):
        """Paginated history, newest first"""
        query = Assessment.query.filter_by(lead_id=lead_id)

        type_filter = request.args.get('filter')
        if type_filter and type_filter.lower() != 'all':
            query = query.filter_by(assessment_type=type_filter.upper())

        pagination = Pagination.from_args(
            request.args.get('page', 1),
            request.args.get('limit', 10),
            query.count()
        )
        assessments = query.order_by(Assessment.completed_at.desc())\
                           .offset(pagination.offset)\
                           .limit(pagination.per_page)\
                           .all()

        return jsonify({
            'assessments': [a.to_summary_dict() for a in assessments],
            'pagination': pagination.to_dict()
        })

    @app.route('/api/assessments/user/<lead_id>/summary', methods=['GET'])
    def api_assessment_summary(lead_id):
        assessments = Assessment.query.filter_by(lead_id=lead_id)\
                                      .order_by(Assessment.completed_at.asc())\
                                      .all()
        return jsonify(summarize_assessments([(a.overall_score, a.completed_at) for a in assessments]))

    @app.route('/api/assessments/<assessment_id>', methods=['GET'])
    def api_get_assessment(assessment_id):
        assessment = db.get_or_404(Assessment, assessment_id, description='Assessment not found')
        return jsonify({'success': True, 'assessment': assessment.to_dict()})

    # =============================================================================
    # API Routes - User Engagement
    # =============================================================================

    @app.route('/api/user-engagement/activity/<lead_id>', methods=['GET'])
    def api_user_activity(lead_id):
        """Recent activity for a lead, newest first"""
        limit = min(request.args.get('limit', 20, type=int), 100)
        activities = UserActivity.query.filter_by(lead_id=lead_id)\
                                       .order_by(UserActivity.created_at.desc())\
                                       .limit(limit)\
                                       .all()
        return jsonify({
            'success': True,
            'count': len(activities),
            'activities': [a.to_dict() for a in activities]
        })

    # =============================================================================
    # Error Handlers
    # =============================================================================

    @app.errorhandler(InvalidResponseError)
    def invalid_response(e):
        logger.warning(f"Rejected response: {e}")
        return _error(str(e), 400)

    @app.errorhandler(404)
    def not_found(e):
        message = e.description if isinstance(e, HTTPException) and e.description else 'Not found'
        if not request.path.startswith('/api/') or 'requested URL was not found' in message:
            message = 'Not found'
        return _error(message, 404)

    @app.errorhandler(429)
    def rate_limited(e):
        return _error('Too many requests, please try again later', 429)

    @app.errorhandler(500)
    def server_error(e):
        logger.error(f"Server error: {e}")
        db.session.rollback()
        return _error('Internal server error', 500)

    return app


# =============================================================================
# Main
# =============================================================================

if __name__ == '__main__':
    app = create_app()
    port = int(os.environ.get('PORT', 5000))
    debug = os.environ.get('FLASK_DEBUG', 'True').lower() == 'true'
    app.run(debug=debug, port=port, host='0.0.0.0')
