# routes/portfolios.py

import logging
from flask import Blueprint, jsonify, current_app

from constants import (
    MSG_NOT_FOUND, MSG_UPDATED, MSG_DELETED,
    MSG_SAVE_FAILED, MSG_UPDATE_FAILED, MSG_DELETE_FAILED
)
from routes.errors import api_error_handler, get_json_object
from store import PersistenceError

logger = logging.getLogger(__name__)
portfolios_bp = Blueprint('portfolios', __name__)


def not_found():
    return jsonify({'error': MSG_NOT_FOUND}), 404


@portfolios_bp.route('', methods=['GET'])
@api_error_handler
def list_portfolios():
    return jsonify(current_app.portfolio_store.get_all())


@portfolios_bp.route('/<portfolio_id>', methods=['GET'])
@api_error_handler
def get_portfolio(portfolio_id):
    portfolio = current_app.portfolio_store.get_by_id(portfolio_id)
    if portfolio is None:
        return not_found()
    return jsonify(portfolio)


@portfolios_bp.route('', methods=['POST'])
@api_error_handler
def create_portfolio():
    portfolio = get_json_object()

    try:
        current_app.portfolio_store.insert(portfolio)
    except PersistenceError:
        return jsonify({'error': MSG_SAVE_FAILED}), 500

    logger.info(f"Created portfolio {portfolio.get('id')!r}")
    return jsonify(portfolio), 201


@portfolios_bp.route('/<portfolio_id>', methods=['PUT'])
@api_error_handler
def replace_portfolio(portfolio_id):
    patch = get_json_object()

    try:
        portfolio = current_app.portfolio_store.replace(portfolio_id, patch)
    except PersistenceError:
        return jsonify({'error': MSG_UPDATE_FAILED}), 500

    if portfolio is None:
        return not_found()
    return jsonify({'message': MSG_UPDATED, 'portfolio': portfolio})


@portfolios_bp.route('/<portfolio_id>', methods=['PATCH'])
@api_error_handler
def update_portfolio(portfolio_id):
    patch = get_json_object()

    try:
        portfolio = current_app.portfolio_store.update_fields(portfolio_id, patch)
    except PersistenceError:
        return jsonify({'error': MSG_UPDATE_FAILED}), 500

    if portfolio is None:
        return not_found()
    return jsonify({'message': MSG_UPDATED, 'portfolio': portfolio})


@portfolios_bp.route('/<portfolio_id>', methods=['DELETE'])
@api_error_handler
def delete_portfolio(portfolio_id):
    try:
        removed = current_app.portfolio_store.remove(portfolio_id)
    except PersistenceError:
        return jsonify({'error': MSG_DELETE_FAILED}), 500

    if removed is None:
        return not_found()

    logger.info(f"Deleted portfolio {portfolio_id!r}")
    return jsonify({'message': MSG_DELETED})
