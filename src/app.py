from flask import Flask, jsonify, request
from flask_cors import CORS
from werkzeug.exceptions import HTTPException
from werkzeug.middleware.proxy_fix import ProxyFix
import logging
from config.config import Config
from models import db, init_db, bcrypt
from service.errors import ServiceError
from controllers.auth_controller import auth_bp
from controllers.photo_controller import photo_bp
from controllers.user_controller import user_bp
from controllers.section_controller import section_bp
from controllers.admin_controller import admin_bp
from controllers.system_controller import system_bp


def configure_logging(app):
    options = {
        "level": getattr(logging, str(app.config["LOG_LEVEL"]).upper(), logging.INFO),
        "format": "%(asctime)s - %(levelname)s - %(message)s",
    }
    if app.config.get("LOG_FILE"):
        options["filename"] = app.config["LOG_FILE"]
    logging.basicConfig(**options)


def register_error_handlers(app):
    @app.errorhandler(ServiceError)
    def handle_service_error(e):
        db.session.rollback()
        return jsonify({"error": e.message}), e.status_code

    @app.errorhandler(HTTPException)
    def handle_http_error(e):
        return jsonify({"error": e.description}), e.code

    @app.errorhandler(Exception)
    def handle_unexpected_error(e):
        db.session.rollback()
        logging.exception(f"Unhandled error on {request.method} {request.path}")
        return jsonify({"error": "Internal server error"}), 500


def create_app(test_config=None):
    app = Flask(__name__)
    app.config.from_object(Config)
    if test_config:
        app.config.update(test_config)

    configure_logging(app)
    app.wsgi_app = ProxyFix(app.wsgi_app, x_proto=1, x_host=1)
    CORS(
        app,
        supports_credentials=True,
        origins=app.config["CORS_ORIGINS"],
        methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )
    bcrypt.init_app(app)
    init_db(app)

    @app.before_request
    def log_request():
        logging.info(f"{request.method} {request.path}")

    register_error_handlers(app)

    # mount blueprints
    app.register_blueprint(auth_bp)
    app.register_blueprint(photo_bp)
    app.register_blueprint(user_bp)
    app.register_blueprint(section_bp)
    app.register_blueprint(admin_bp)
    app.register_blueprint(system_bp)
    return app


if __name__ == '__main__':
    app = create_app()
    app.run(debug=True, host='0.0.0.0', port=app.config["PORT"])
