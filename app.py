# app.py
"""
Main Flask application entry point.
Initializes app, logging, CORS, the portfolio store, the prediction service and routes.
"""

import os
import logging
from flask import Flask
from dotenv import load_dotenv

# Load environment variables from .env file before config reads them
load_dotenv()

from config import get_config
from constants import DEFAULT_PORT
from extensions import cors
from providers import MarketDataService
from services import PredictionService
from store import PortfolioStore

logger = logging.getLogger(__name__)


def configure_logging(level):
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


def create_app(config_name=None, store_path=None):
    """Application factory pattern"""

    app = Flask(__name__)

    # Load configuration
    if config_name is None:
        config_name = os.environ.get('FLASK_ENV', 'development')

    app.config.from_object(get_config(config_name))
    if store_path is not None:
        app.config['PORTFOLIO_DB_PATH'] = store_path

    configure_logging(app.config['LOG_LEVEL'])

    # Portfolios are echoed back with their keys in client order
    app.json.sort_keys = False

    cors.init_app(app)

    # Single authoritative portfolio collection for this process
    app.portfolio_store = PortfolioStore(app=app)

    provider = MarketDataService.create_provider(app.config)
    app.prediction_service = PredictionService(
        provider,
        prediction_url=app.config['PREDICTION_SERVICE_URL'],
        history_days=app.config['HISTORY_DAYS'],
        timeout=app.config['UPSTREAM_TIMEOUT']
    )

    # Register blueprints
    from routes.views import views_bp
    from routes.portfolios import portfolios_bp
    from routes.api import api_bp

    app.register_blueprint(views_bp)
    app.register_blueprint(portfolios_bp, url_prefix='/portfolios')
    app.register_blueprint(api_bp, url_prefix='/api')

    logger.info(
        f"App initialized (env={config_name}, store={app.config['PORTFOLIO_DB_PATH']}, "
        f"portfolios={len(app.portfolio_store)}, provider={provider.get_provider_name()}, "
        f"prediction_service={app.config['PREDICTION_SERVICE_URL']})"
    )

    return app


if __name__ == '__main__':
    app = create_app()

    port = int(os.environ.get('PORT', DEFAULT_PORT))
    logger.info(f"Server running on port {port}")

    app.run(
        host='0.0.0.0',
        port=port,
        debug=app.config['DEBUG']
    )
