import logging

from flask import Flask
from .config import config_by_name
from .extensions import db
from .api.v1 import v1_bp
from .middleware.session_middleware import session_middleware
from .errors import register_error_handlers
from .application.editor.persistence import load_document
from .application.editor.session import EditorSession


def create_app(config_name: str = "development") -> Flask:
    app = Flask(__name__)
    app.config.from_object(config_by_name[config_name])

    # -------------------------------------------------
    # Logging
    # -------------------------------------------------
    level = app.config["LOG_LEVEL"]
    app.logger.setLevel(level)
    logging.getLogger("pageweaver").setLevel(level)

    # -------------------------------------------------
    # Extensions
    # -------------------------------------------------
    db.init_app(app)

    # -------------------------------------------------
    # Document store + editing session
    # -------------------------------------------------
    with app.app_context():
        db.create_all()
        document = load_document(
            pages_key=app.config["PAGES_STORAGE_KEY"],
            navigation_key=app.config["NAVIGATION_STORAGE_KEY"],
        )

    app.extensions["editor_session"] = EditorSession.start(
        document.pages,
        document.navigation,
        app.config["DEFAULT_ROLE"],
        reject_duplicate_slugs=app.config["REJECT_DUPLICATE_SLUGS"],
    )
    app.logger.info(
        "Editor session started (pages restored=%s, navigation restored=%s)",
        document.pages_restored,
        document.navigation_restored,
    )

    # -------------------------------------------------
    # Middleware
    # -------------------------------------------------
    session_middleware(app)

    # -------------------------------------------------
    # API Blueprints
    # -------------------------------------------------
    app.register_blueprint(v1_bp, url_prefix="/api/v1")
    register_error_handlers(app)

    return app
