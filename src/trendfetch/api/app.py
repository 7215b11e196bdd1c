"""
Flask application factory for TrendFetch.
"""
from typing import Optional

from flask import Flask
from flask_cors import CORS

from .. import __version__
from ..config import Config
from ..logger import get_logger
from ..services.product_scraper import ProductScraper
from .routes import SCRAPER_KEY, api_bp

logger = get_logger(__name__)


def create_app(scraper: Optional[ProductScraper] = None) -> Flask:
    """
    Create and configure Flask application.

    Args:
        scraper: Product scraper used by the API (a default one backed by
            the shared product store is created if omitted)

    Returns:
        Configured Flask app instance
    """
    app = Flask(__name__)

    app.config['SECRET_KEY'] = Config.SECRET_KEY
    app.config['ENV'] = Config.FLASK_ENV
    app.json.sort_keys = False
    app.config[SCRAPER_KEY] = scraper or ProductScraper()

    # Enable CORS with configured origins
    cors_origins = Config.get_cors_origins()
    if cors_origins == ["*"]:
        CORS(app)
    else:
        CORS(app, origins=cors_origins)

    # Register blueprints
    app.register_blueprint(api_bp)

    # Health check
    @app.route('/health')
    def health():
        """Health check endpoint."""
        return {'status': 'healthy', 'version': __version__}

    logger.info("Flask app created")
    logger.info(f"Configuration: {Config.get_summary()}")

    errors = Config.validate()
    if errors:
        logger.warning(f"Configuration warnings: {errors}")

    return app
