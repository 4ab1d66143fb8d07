"""
Configuration settings for AI Readiness Assessment
"""

import os
from datetime import timedelta


def _env_list(name, default):
    value = os.environ.get(name)
    if not value:
        return list(default)
    return [item.strip() for item in value.split(',') if item.strip()]


class Config:
    """Base configuration"""
    # App
    APP_NAME = "AI Readiness Assessment"
    SECRET_KEY = os.environ.get('SECRET_KEY', 'dev-secret-key-change-in-production')
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')

    # Database
    SQLALCHEMY_DATABASE_URI = os.environ.get(
        'DATABASE_URL',
        'sqlite:///ai_readiness.db'
    )
    # Fix for Render PostgreSQL URLs
    if SQLALCHEMY_DATABASE_URI and SQLALCHEMY_DATABASE_URI.startswith('postgres://'):
        SQLALCHEMY_DATABASE_URI = SQLALCHEMY_DATABASE_URI.replace('postgres://', 'postgresql://', 1)

    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SQLALCHEMY_ENGINE_OPTIONS = {
        'pool_pre_ping': True,
        'pool_recycle': 300,
    }

    # Scoring
    PILLAR_NAMES = _env_list('PILLAR_NAMES', [
        'Strategy', 'Architecture', 'Foundation', 'Ethics',
        'Culture', 'Capability', 'Governance', 'Performance'
    ])
    BEST_PRACTICE_BENCHMARK = int(os.environ.get('BEST_PRACTICE_BENCHMARK', 80))
    LIKERT_POLICY = os.environ.get('LIKERT_POLICY', 'reject')  # reject, clamp, ignore
    PILLAR_ASSIGNMENT = os.environ.get('PILLAR_ASSIGNMENT', 'positional')  # positional, explicit
    WEIGHT_PROFILE = os.environ.get('WEIGHT_PROFILE', 'balanced')
    DEFAULT_ASSESSMENT_TYPE = os.environ.get('DEFAULT_ASSESSMENT_TYPE', 'CORE')

    # REST client
    API_BASE_URL = os.environ.get('API_BASE_URL', 'http://localhost:5000')
    API_TIMEOUT = float(os.environ.get('API_TIMEOUT', 10))
    ADMIN_API_TOKEN = os.environ.get('ADMIN_API_TOKEN')

    # Rate limiting
    RATELIMIT_ENABLED = True
    RATELIMIT_DEFAULT = "100 per minute"
    RATELIMIT_STORAGE_URI = os.environ.get('REDIS_URL', 'memory://')

    # Session
    PERMANENT_SESSION_LIFETIME = timedelta(days=7)


class DevelopmentConfig(Config):
    """Development configuration"""
    DEBUG = True
    SQLALCHEMY_DATABASE_URI = os.environ.get(
        'DATABASE_URL',
        'sqlite:///ai_readiness_dev.db'
    )


class ProductionConfig(Config):
    """Production configuration"""
    DEBUG = False

    # Checked by create_app(); production refuses to start without it
    SECRET_KEY = os.environ.get('SECRET_KEY')


class TestingConfig(Config):
    """Testing configuration"""
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    SQLALCHEMY_ENGINE_OPTIONS = {}
    RATELIMIT_ENABLED = False
    WEIGHT_PROFILE = 'balanced'
    LIKERT_POLICY = 'reject'
    PILLAR_ASSIGNMENT = 'positional'


# Config mapping
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}


def get_config():
    """Get config based on environment"""
    env = os.environ.get('FLASK_ENV', 'development')
    return config.get(env, config['default'])
