"""Flask application factory."""

import os
from flask import Flask, render_template
from flask_wtf.csrf import CSRFError
from sqlalchemy.exc import SQLAlchemyError
from .config import config
from .extensions import db, mail, csrf
from .services import ContactStore, Notifier
from .utils.decorators import failure_response


def create_app(config_name=None):
    """Create and configure the Flask application."""
    if config_name is None:
        config_name = os.environ.get('FLASK_CONFIG', 'development')

    app = Flask(__name__)
    app.config.from_object(config[config_name])
    app.logger.setLevel(app.config['LOG_LEVEL'])

    # Initialize extensions
    mail.init_app(app)
    csrf.init_app(app)

    storage_enabled = bool(app.config.get('SQLALCHEMY_DATABASE_URI'))
    if storage_enabled:
        db.init_app(app)
        init_database(app)
    else:
        app.logger.warning('DB_URI not found. Database features will be disabled.')

    app.extensions['contact_store'] = ContactStore(db, enabled=storage_enabled)
    app.extensions['notifier'] = Notifier(mail, admin_email=app.config.get('ADMIN_EMAIL'))

    # Register blueprints
    from .routes import register_blueprints
    register_blueprints(app)

    # Error handlers
    @app.errorhandler(404)
    def not_found_error(error):
        return render_template('errors/404.html'), 404

    @app.errorhandler(CSRFError)
    def csrf_error(error):
        app.logger.info('CSRF check failed: %s', error.description)
        return failure_response(400)

    @app.errorhandler(500)
    def internal_error(error):
        if storage_enabled:
            db.session.rollback()
        return render_template('errors/500.html'), 500

    return app


def init_database(app):
    """Create missing tables. A failure is logged and the app keeps booting."""
    from . import models  # noqa: F401  registers the tables on db.metadata

    with app.app_context():
        try:
            db.create_all()
        except SQLAlchemyError:
            app.logger.exception('Database connection error')
        else:
            app.logger.info('Database connected')
