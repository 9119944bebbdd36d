# config.py
"""
Configuration settings for the Flask application.
Handles the portfolio file location, upstream service endpoints, and environment-specific settings.
"""

import os

BASE_DIR = os.path.abspath(os.path.dirname(__file__))


def _optional_float(value):
    if value in (None, ''):
        return None
    return float(value)


class Config:
    """Base configuration"""

    # Portfolio storage
    PORTFOLIO_DB_PATH = os.environ.get('PORTFOLIO_DB_PATH') or os.path.join(BASE_DIR, 'db.json')

    # Market data (CryptoCompare)
    CRYPTOCOMPARE_API_KEY = (
        os.environ.get('CRYPTOCOMPARE_API_KEY')
        or os.environ.get('REACT_APP_CRYPTOCOMPARE_API_KEY', '')
    )
    CRYPTOCOMPARE_BASE_URL = 'https://min-api.cryptocompare.com/data/v2/histoday'
    HISTORY_DAYS = 365
    QUOTE_CURRENCY = 'USD'

    # Prediction service
    PREDICTION_SERVICE_URL = os.environ.get('PREDICTION_SERVICE_URL') or 'http://localhost:5000/api/predict'

    # None means no timeout (requests default)
    UPSTREAM_TIMEOUT = _optional_float(os.environ.get('UPSTREAM_TIMEOUT'))

    # Logging
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')


class DevelopmentConfig(Config):
    """Development configuration"""
    DEBUG = True
    TESTING = False


class ProductionConfig(Config):
    """Production configuration"""
    DEBUG = False
    TESTING = False


class TestingConfig(Config):
    """Testing configuration"""
    DEBUG = False
    TESTING = True
    CRYPTOCOMPARE_API_KEY = 'test-key'
    PREDICTION_SERVICE_URL = 'http://prediction.test/api/predict'


# Configuration dictionary
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}


def get_config(config_name=None):
    """Get configuration by name, falling back to the FLASK_ENV environment variable"""
    env = config_name or os.environ.get('FLASK_ENV', 'development')
    return config.get(env, config['default'])
