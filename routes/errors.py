# routes/errors.py

import logging
from functools import wraps
from flask import jsonify, request

logger = logging.getLogger(__name__)


def api_error_handler(f):
    @wraps(f)
    def wrapper(*args, **kwargs):
        try:
            return f(*args, **kwargs)
        except ValueError as e:
            return jsonify({'error': str(e)}), 400
        except Exception:
            logger.exception(f"Error in {f.__name__}")
            return jsonify({'error': 'An error occurred'}), 500
    return wrapper


def get_json_object():
    """Request body as a dict; anything else is a client error."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValueError('Request body must be a JSON object')
    return data
