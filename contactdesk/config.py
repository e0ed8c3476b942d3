import os
from dotenv import load_dotenv

load_dotenv()


def _env_flag(name, default):
    return os.environ.get(name, default).lower() == 'true'


class Config:
    """Base configuration."""
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'dev-secret-key-change-in-production'

    # CSRF Configuration
    WTF_CSRF_ENABLED = True
    WTF_CSRF_TIME_LIMIT = 3600  # 1 hour

    # Database - storage is disabled when DB_URI is absent
    SQLALCHEMY_DATABASE_URI = os.environ.get('DB_URI')
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Mail Configuration
    MAIL_SERVER = os.environ.get('SMTP_HOST', 'localhost')
    MAIL_PORT = int(os.environ.get('SMTP_PORT', 587))
    MAIL_USE_TLS = _env_flag('SMTP_USE_TLS', 'True')
    MAIL_USERNAME = os.environ.get('SMTP_USERNAME')
    MAIL_PASSWORD = os.environ.get('SMTP_PASSWORD')
    MAIL_DEFAULT_SENDER = (
        os.environ.get('MAIL_FROM_NAME', 'ContactDesk'),
        os.environ.get('MAIL_FROM_ADDRESS', 'no-reply@localhost'),
    )

    # Where new contact requests are announced
    ADMIN_EMAIL = os.environ.get('ADMIN_EMAIL')

    PORT = int(os.environ.get('PORT', 8000))
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True
    SQLALCHEMY_ECHO = False


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False


class TestingConfig(Config):
    """Testing configuration."""
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    WTF_CSRF_ENABLED = False
    MAIL_SUPPRESS_SEND = True
    MAIL_DEFAULT_SENDER = ('ContactDesk', 'no-reply@example.com')
    ADMIN_EMAIL = 'admin@example.com'


config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}
