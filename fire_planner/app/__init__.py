"""Application factory and app-wide configuration."""

from typing import Optional

from flask import Flask
from flask_cors import CORS
from loguru import logger

from fire_planner.app.api.routes import api_bp
from fire_planner.config import Settings, load_settings
from fire_planner.utils import configure_logging


def create_app(settings: Optional[Settings] = None) -> Flask:
    """Build the Flask app instance."""
    settings = settings or load_settings()
    configure_logging(settings.log_level, settings.log_file)

    app = Flask(__name__)
    app.config["SETTINGS"] = settings

    CORS(
        app,
        resources={r"/api/*": {"origins": settings.cors_origins}},
        supports_credentials=True,
    )

    app.register_blueprint(api_bp, url_prefix="/api")
    logger.info(f"FIRE planner API ready (CORS origins: {', '.join(settings.cors_origins)})")
    return app
