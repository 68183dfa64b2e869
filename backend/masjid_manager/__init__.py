import sentry_sdk
from sentry_sdk.integrations.flask import FlaskIntegration

# Import extensions from the central extensions file
from .extensions import db, migrate, limiter
import logging
import os
from flask import Flask, jsonify
from flask_cors import CORS
from flask_smorest import Api
from sqlalchemy.exc import SQLAlchemyError

cors = CORS()

def create_app(config_name=None):
    """
    Flask Application Factory function. Without a config name FLASK_CONFIG
    is used, so `flask --app masjid_manager db upgrade` works.
    """
    app = Flask(__name__,
                instance_relative_config=False)

    # 1. Load Config
    from .config import config_by_name
    config_name = config_name or os.environ.get('FLASK_CONFIG', 'default')
    config_obj = config_by_name.get(config_name, config_by_name['default'])
    if hasattr(config_obj, 'validate'):
        config_obj.validate()
    app.config.from_object(config_obj)
    app.logger.info(f"App configured with: {config_obj.__name__}")

    # Flask-Smorest API documentation configuration
    app.config["API_TITLE"] = "Masjid Manager API"
    app.config["API_VERSION"] = "v1"
    app.config["OPENAPI_VERSION"] = "3.0.2"
    app.config["OPENAPI_URL_PREFIX"] = "/api/docs"
    app.config["OPENAPI_SWAGGER_UI_PATH"] = "/swagger-ui"
    app.config["OPENAPI_SWAGGER_UI_URL"] = "https://cdn.jsdelivr.net/npm/swagger-ui-dist/"
    app.config["API_SPEC_OPTIONS"] = {
        "components": {
            "securitySchemes": {
                "Bearer": {"type": "http", "scheme": "bearer", "bearerFormat": "JWT"}
            }
        }
    }

    # 2. Sentry SDK initialization - for error and performance tracking
    if app.config.get('SENTRY_DSN'):
        sentry_sdk.init(
            dsn=app.config['SENTRY_DSN'],
            integrations=[FlaskIntegration()],
            send_default_pii=False,
            traces_sample_rate=1.0
        )
        app.logger.info("Sentry initialized for error tracking.")

    # 3. Initialize Extensions
    if app.config['DATA_BACKEND'] == 'memory' and not app.config.get('SQLALCHEMY_DATABASE_URI'):
        # SQLAlchemy still wants an engine even when nothing is stored in it
        app.config['SQLALCHEMY_DATABASE_URI'] = 'sqlite://'
    db.init_app(app)
    migrate.init_app(app, db)
    cors.init_app(app, resources={r"/api/*": {"origins": app.config['CORS_ORIGINS']}})
    limiter.init_app(app)

    # 4. Initialize Flask-Smorest API
    api = Api()
    api.init_app(app)

    with app.app_context():
        # 5. Storage backend, owned by this app instance
        from .repositories import create_repository, EXTENSION_KEY
        backend = app.config['DATA_BACKEND']
        repository = create_repository(backend)
        app.extensions[EXTENSION_KEY] = repository
        if backend == 'sql':
            db.create_all()
        app.logger.info(f"SQLALCHEMY_DATABASE_URI: {app.config.get('SQLALCHEMY_DATABASE_URI')}, backend: {backend}")

        # 6. Register Blueprints with Flask-Smorest API
        from .routes.main_routes import main_bp
        from .routes.auth_routes import auth_bp
        from .routes.mosque_routes import mosque_bp
        from .routes.collection_routes import collection_bp

        api.register_blueprint(main_bp)
        api.register_blueprint(auth_bp)
        api.register_blueprint(mosque_bp)
        api.register_blueprint(collection_bp)

        # 7. Set up Logging
        log_level_str = app.config.get('LOG_LEVEL', 'INFO').upper()
        log_level = getattr(logging, log_level_str, logging.INFO)
        app.logger.setLevel(log_level)

        # 8. Demo data
        if app.config.get('SEED_DEMO_DATA'):
            from .services.seed_service import seed_demo_data
            seed_demo_data(repository)

        app.logger.info(f"Application initialized with environment: {app.config.get('FLASK_ENV')}, Debug: {app.config.get('DEBUG')}")

    # 9. Storage failures become a generic 500; details only go to the log
    @app.errorhandler(SQLAlchemyError)
    def handle_database_error(error):
        db.session.rollback()
        app.logger.error(f"Database error: {error}", exc_info=True)
        return jsonify({"error": "An internal database error occurred."}), 500

    # 10. Finally, return the app
    return app
