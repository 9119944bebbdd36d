"""
Pytest fixtures for Crypto Portfolio API tests.
"""

import os
import json
import pytest

# Set testing environment before importing app
os.environ['FLASK_ENV'] = 'testing'

from app import create_app
from store import PortfolioStore


SAMPLE_PORTFOLIOS = [
    {
        'id': 'p1',
        'name': 'Long term',
        'coins': ['BTC', 'ETH'],
        'values': [1000, 500],
        'analysis': [{'coin': 'BTC', 'trend': 'up'}]
    },
    {
        'id': 'p2',
        'name': 'Speculative',
        'coins': ['DOGE'],
        'values': [50]
    },
]


def write_db(path, portfolios):
    with open(path, 'w', encoding='utf-8') as f:
        json.dump({'portfolios': portfolios}, f, indent=2)


def read_db(path):
    with open(path, 'r', encoding='utf-8') as f:
        return json.load(f)


@pytest.fixture(scope='function')
def db_path(tmp_path):
    """Path to an isolated portfolio file (not created)."""
    return str(tmp_path / 'db.json')


@pytest.fixture(scope='function')
def seeded_db_path(db_path):
    """Portfolio file pre-populated with sample portfolios."""
    write_db(db_path, SAMPLE_PORTFOLIOS)
    return db_path


@pytest.fixture(scope='function')
def store(db_path):
    """Empty store backed by a temp file."""
    return PortfolioStore(db_path)


@pytest.fixture(scope='function')
def app(db_path):
    """Create application for testing."""
    application = create_app('testing', store_path=db_path)
    application.config['TESTING'] = True
    yield application


@pytest.fixture(scope='function')
def seeded_app(seeded_db_path):
    """Application whose store was loaded from sample portfolios."""
    application = create_app('testing', store_path=seeded_db_path)
    application.config['TESTING'] = True
    yield application


@pytest.fixture(scope='function')
def client(app):
    """Create test client."""
    return app.test_client()


@pytest.fixture(scope='function')
def seeded_client(seeded_app):
    """Test client over the seeded store."""
    return seeded_app.test_client()
