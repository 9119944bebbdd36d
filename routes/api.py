# routes/api.py

import logging
from flask import Blueprint, jsonify, request, current_app

from constants import MSG_PREDICTIONS_FAILED, MSG_FORWARD_FAILED, MSG_INVALID_HISTORY
from routes.errors import api_error_handler
from services import UpstreamError, log_preview

logger = logging.getLogger(__name__)
api_bp = Blueprint('api', __name__)


@api_bp.route('/predictions/<coin_id>', methods=['GET'])
@api_error_handler
def get_predictions(coin_id):
    service = current_app.prediction_service

    try:
        predictions = service.predict(coin_id)
    except (UpstreamError, ValueError) as e:
        logger.error(f"Error fetching predictions for {coin_id}: {e}")
        return jsonify({'error': MSG_PREDICTIONS_FAILED}), 500

    return jsonify(predictions)


@api_bp.route('/predictions/<coin_id>', methods=['POST'])
@api_error_handler
def forward_predictions(coin_id):
    data = request.get_json(silent=True)
    history = data.get('historical_data') if isinstance(data, dict) else None

    if not isinstance(history, list):
        return jsonify({'error': MSG_INVALID_HISTORY}), 400

    service = current_app.prediction_service

    try:
        predictions = service.forward_for_prediction(history)
    except UpstreamError as e:
        logger.error(f"Error posting to prediction service for {coin_id}: {e}")
        return jsonify({'error': MSG_FORWARD_FAILED}), 500

    log_preview(coin_id, predictions, include_last=True)
    return jsonify(predictions)
