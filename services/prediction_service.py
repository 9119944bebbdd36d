# services/prediction_service.py
"""
Prediction forwarding service.
Builds daily close histories from the market data provider and relays them to the prediction service.
"""

import logging
from typing import Any, Dict, List, Optional

import requests

from constants import PREDICTION_LOG_PREVIEW, UPSTREAM_BODY_LOG_LIMIT
from providers import CryptoCompareError

logger = logging.getLogger(__name__)


class UpstreamError(Exception):
    """Raised when the market data or prediction service fails."""


class PredictionService:
    """Fetches price history and forwards it to the external prediction service."""

    def __init__(self, provider, prediction_url: str, history_days: int = 365,
                 timeout: Optional[float] = None):
        self.provider = provider
        self.prediction_url = prediction_url
        self.history_days = history_days
        self.timeout = timeout

    def fetch_history(self, symbol: str) -> List[Dict[str, Any]]:
        """
        Get trailing daily closes for symbol as [{'ds': 'YYYY-MM-DD', 'y': close}, ...].
        """
        try:
            df = self.provider.get_daily_history(symbol, limit=self.history_days)
        except (CryptoCompareError, ValueError) as e:
            logger.error(f"Error fetching historical data for {symbol}: {e}")
            raise UpstreamError(f"Market data unavailable for {symbol}") from e

        return [
            {'ds': row.timestamp.strftime('%Y-%m-%d'), 'y': float(row.close)}
            for row in df.itertuples(index=False)
        ]

    def forward_for_prediction(self, history: List[Dict[str, Any]]) -> Any:
        """POST the history to the prediction service and return its JSON body unmodified."""
        try:
            response = requests.post(
                self.prediction_url,
                json={'historical_data': history},
                timeout=self.timeout
            )
        except requests.RequestException as e:
            logger.error(f"Prediction service request failed: {e}")
            raise UpstreamError("Prediction service unreachable") from e

        if not response.ok:
            logger.error(
                f"Prediction service error response ({response.status_code}): "
                f"{response.text[:UPSTREAM_BODY_LOG_LIMIT]}"
            )
            raise UpstreamError(f"Prediction service returned {response.status_code}")

        try:
            return response.json()
        except ValueError as e:
            logger.error(f"Prediction service returned non-JSON body: {response.text[:UPSTREAM_BODY_LOG_LIMIT]}")
            raise UpstreamError("Prediction service returned an invalid body") from e

    def predict(self, symbol: str) -> Any:
        """Fetch history for symbol and forward it for prediction."""
        history = self.fetch_history(symbol)
        predictions = self.forward_for_prediction(history)
        log_preview(symbol, predictions)
        return predictions


def log_preview(symbol: str, predictions: Any, include_last: bool = False) -> None:
    """Log the first few (and optionally the last) predictions returned for symbol."""
    if not isinstance(predictions, list):
        logger.info(f"Prediction response for {symbol}: {type(predictions).__name__}")
        return
    logger.info(f"First {PREDICTION_LOG_PREVIEW} predictions for {symbol}: {predictions[:PREDICTION_LOG_PREVIEW]}")
    if include_last:
        logger.info(f"Last prediction for {symbol}: {predictions[-1:]}")
