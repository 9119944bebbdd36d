# routes/views.py
"""
Root routes.
Serves the welcome message and the deployment health check.
"""

from flask import Blueprint, jsonify

from constants import WELCOME_MESSAGE

views_bp = Blueprint('views', __name__)


@views_bp.route('/')
def index():
    """API welcome message"""
    return jsonify(WELCOME_MESSAGE)


@views_bp.route('/health')
def health():
    """Health check endpoint for deployment platforms"""
    return {'status': 'healthy'}, 200
