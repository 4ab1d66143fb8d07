#!/usr/bin/env python3
"""
AI Readiness Assessment - Development Server Launcher

Builds a development config from the command line, seeds the question bank,
optionally loads demo leads, reports what the scorer will run with, and
starts the Flask development server.

Usage:
    python start_dev.py                              # Defaults from the environment
    python start_dev.py --demo 4                     # Load four scored demo leads
    python start_dev.py --weight-profile healthcare  # Score with industry weights
    python start_dev.py --check                      # Report and exit
"""

import argparse
import logging
import sys
from pathlib import Path

from config.settings import get_config
from readiness.assessment.questions import ASSESSMENT_TYPES, get_question_count
from readiness.assessment.scoring import LikertPolicy, PillarAssignment
from readiness.database.models import db, Lead, Question
from readiness.demo_data import DEMO_LEADS, load_demo_data_to_db
from readiness.patterns import WEIGHT_PROFILES, get_profiles_for_assessment_type
from web.app import create_app

logger = logging.getLogger('start_dev')

PROJECT_DIR = Path(__file__).parent


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description='AI Readiness Assessment development server'
    )
    parser.add_argument('--host', default='127.0.0.1',
                        help='Host to bind to (default: 127.0.0.1)')
    parser.add_argument('--port', type=int, default=5101,
                        help='Port to run server on (default: 5101)')
    parser.add_argument('--database',
                        help='SQLAlchemy URL (default: instance/ai_readiness.db)')
    parser.add_argument('--demo', type=int, default=0, metavar='COUNT',
                        help=f'Load up to {len(DEMO_LEADS)} scored demo leads')
    parser.add_argument('--assessment-type', type=str.upper, choices=sorted(ASSESSMENT_TYPES),
                        help='Assessment type scored when a submission names none')
    parser.add_argument('--weight-profile', choices=sorted(WEIGHT_PROFILES),
                        help='Pillar weight profile for the weighted score')
    parser.add_argument('--likert-policy', choices=[p.value for p in LikertPolicy],
                        help='Handling of out-of-range answers outside the HTTP API')
    parser.add_argument('--pillar-assignment', choices=[p.value for p in PillarAssignment],
                        help='Map questions to pillars by position or by their own tag')
    parser.add_argument('--check', action='store_true',
                        help='Prepare the database, print the report and exit')
    return parser.parse_args(argv)


def build_config(args):
    """Development config class with the command-line overrides applied"""
    base = get_config()

    database = args.database
    if database is None:
        db_path = PROJECT_DIR / 'instance' / 'ai_readiness.db'
        db_path.parent.mkdir(exist_ok=True)
        database = f'sqlite:///{db_path}'

    overrides = {
        'SQLALCHEMY_DATABASE_URI': database,
        'DEFAULT_ASSESSMENT_TYPE': args.assessment_type,
        'WEIGHT_PROFILE': args.weight_profile,
        'LIKERT_POLICY': args.likert_policy,
        'PILLAR_ASSIGNMENT': args.pillar_assignment,
    }
    # Pool tuning is for the PostgreSQL deployment
    if database.startswith('sqlite'):
        overrides['SQLALCHEMY_ENGINE_OPTIONS'] = {}

    return type('DevServerConfig', (base,), {k: v for k, v in overrides.items() if v is not None})


def profile_warnings(config_class):
    """Problems with the configured weight profile for the default assessment type"""
    profile_id = config_class.WEIGHT_PROFILE
    assessment_type = config_class.DEFAULT_ASSESSMENT_TYPE.upper()

    if profile_id not in WEIGHT_PROFILES:
        return [f"Unknown weight profile '{profile_id}', scores will be unweighted"]

    applicable = {p.profile_id for p in get_profiles_for_assessment_type(assessment_type)}
    if profile_id not in applicable:
        return [f"Weight profile '{profile_id}' is not meant for {assessment_type} "
                f"assessments (use one of: {', '.join(sorted(applicable))})"]
    return []


def question_bank_report(app):
    """Active seeded questions per assessment type, checked against the bank"""
    report = {}
    with app.app_context():
        for type_id in ASSESSMENT_TYPES:
            seeded = Question.query.filter_by(assessment_type=type_id, is_active=True).count()
            expected = get_question_count(type_id)
            if seeded != expected:
                logger.warning(f"{type_id}: {seeded} active questions seeded, bank has {expected}")
            report[type_id] = seeded
    return report


def load_demo_leads(app, count):
    """Load demo leads unless the database already has leads"""
    with app.app_context():
        existing = Lead.query.count()
        if existing:
            logger.info(f"Database has {existing} leads, skipping demo data")
            return 0
        return len(load_demo_data_to_db(db.session, count=min(count, len(DEMO_LEADS))))


def print_report(app, questions, demo_loaded):
    config = app.config
    profile = WEIGHT_PROFILES.get(config['WEIGHT_PROFILE'])

    print(f"\n  {config['APP_NAME']}")
    print(f"  database          {config['SQLALCHEMY_DATABASE_URI']}")
    print("  questions         " + ", ".join(f"{t} {n}" for t, n in questions.items()))
    print(f"  default type      {config['DEFAULT_ASSESSMENT_TYPE']}")
    print(f"  weight profile    {profile.name if profile else config['WEIGHT_PROFILE']}")
    print(f"  likert policy     {config['LIKERT_POLICY']}")
    print(f"  pillar assignment {config['PILLAR_ASSIGNMENT']}")
    print(f"  benchmark         {config['BEST_PRACTICE_BENCHMARK']}%")
    if demo_loaded:
        print(f"  demo leads        {demo_loaded}")
    print()


def main(argv=None):
    args = parse_args(argv)
    config_class = build_config(args)

    for warning in profile_warnings(config_class):
        logger.warning(warning)

    app = create_app(config_class)
    questions = question_bank_report(app)
    demo_loaded = load_demo_leads(app, args.demo) if args.demo > 0 else 0

    print_report(app, questions, demo_loaded)

    if args.check:
        return 0

    print(f"  Serving on http://{args.host}:{args.port}/api\n")
    app.run(debug=True, host=args.host, port=args.port, use_reloader=False)
    return 0


if __name__ == '__main__':
    sys.exit(main())
