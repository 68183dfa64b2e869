import os
from dotenv import load_dotenv

# Load .env file
dotenv_path = os.path.join(os.path.dirname(os.path.dirname(__file__)), '.env')
if os.path.exists(dotenv_path):
    load_dotenv(dotenv_path)
else:
    print("Warning: .env file not found. Using defaults or environment variables.")

DEVELOPMENT_SECRET_KEY = 'a_default_fallback_secret_key_for_development_only'

class Config:
    """Base configuration."""
    SECRET_KEY = os.environ.get('SECRET_KEY') or DEVELOPMENT_SECRET_KEY
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    LOG_LEVEL = os.environ.get('LOG_LEVEL', "INFO")

    # Sentry Configuration
    SENTRY_DSN = os.environ.get('SENTRY_DSN')

    # Storage backend: 'sql' uses SQLAlchemy (SQLite or PostgreSQL),
    # 'memory' keeps everything in the process (demo mode).
    DATA_BACKEND = os.environ.get('DATA_BACKEND', 'sql')
    SEED_DEMO_DATA = os.environ.get('SEED_DEMO_DATA', 'false').lower() == 'true'

    # Access tokens
    JWT_EXPIRES_SECONDS = int(os.environ.get('JWT_EXPIRES_SECONDS', 8 * 3600))
    JWT_AUDIENCE = 'masjid-manager'

    # CORS and rate limiting
    CORS_ORIGINS = os.environ.get('CORS_ORIGINS', '*')
    LOGIN_RATE_LIMIT = os.environ.get('LOGIN_RATE_LIMIT', '10 per minute')
    RATELIMIT_ENABLED = True

class DevelopmentConfig(Config):
    FLASK_ENV = 'development'
    DEBUG = True
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or 'sqlite:///masjid.db'
    LOG_LEVEL = "DEBUG"

class ProductionConfig(Config):
    FLASK_ENV = 'production'
    DEBUG = False
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL')

    # Checked when the class is selected, see create_app
    @classmethod
    def validate(cls):
        if not cls.SECRET_KEY or cls.SECRET_KEY == DEVELOPMENT_SECRET_KEY:
            raise ValueError("CRITICAL: SECRET_KEY not found in environment!")
        if cls.DATA_BACKEND == 'sql' and not cls.SQLALCHEMY_DATABASE_URI:
            raise ValueError("CRITICAL: DATABASE_URL for production is not set!")
        if not cls.SENTRY_DSN:
            print("Warning: SENTRY_DSN not found. Error tracking will be disabled.")

class TestingConfig(Config):
    TESTING = True
    # Use an in-memory SQLite database for tests to ensure speed and isolation.
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    DATA_BACKEND = 'sql'
    SEED_DEMO_DATA = False
    RATELIMIT_ENABLED = False # Disable rate limiting for tests
    SECRET_KEY = 'test-secret-key-that-is-long-enough-for-hs256'

config_by_name = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}
