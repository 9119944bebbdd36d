"""
Tests for the prediction service.
"""

import pytest
import requests
import pandas as pd
from unittest.mock import MagicMock, patch

from providers import CryptoCompareError
from services import PredictionService, UpstreamError


PREDICT_URL = 'http://prediction.test/api/predict'


def history_frame():
    return pd.DataFrame({
        'timestamp': pd.to_datetime([1704067200, 1704153600], unit='s', utc=True),
        'close': [42000.5, 43000.0],
    })


def make_response(payload=None, status_code=200, text=''):
    response = MagicMock()
    response.status_code = status_code
    response.ok = status_code < 400
    response.text = text
    if isinstance(payload, Exception):
        response.json.side_effect = payload
    else:
        response.json.return_value = payload
    return response


@pytest.fixture
def provider():
    mock_provider = MagicMock()
    mock_provider.get_daily_history.return_value = history_frame()
    return mock_provider


@pytest.fixture
def service(provider):
    return PredictionService(provider, prediction_url=PREDICT_URL, history_days=365)


class TestFetchHistory:
    """Test PredictionService.fetch_history."""

    def test_formats_points(self, service, provider):
        history = service.fetch_history('btc')

        assert history == [
            {'ds': '2024-01-01', 'y': 42000.5},
            {'ds': '2024-01-02', 'y': 43000.0},
        ]
        provider.get_daily_history.assert_called_once_with('btc', limit=365)

    def test_empty_history(self, service, provider):
        provider.get_daily_history.return_value = pd.DataFrame(columns=['timestamp', 'close'])
        assert service.fetch_history('btc') == []

    def test_provider_failure(self, service, provider):
        provider.get_daily_history.side_effect = CryptoCompareError('down')

        with pytest.raises(UpstreamError):
            service.fetch_history('btc')

    def test_invalid_symbol(self, service, provider):
        provider.get_daily_history.side_effect = ValueError('Invalid symbol')

        with pytest.raises(UpstreamError):
            service.fetch_history('')


class TestForwardForPrediction:
    """Test PredictionService.forward_for_prediction."""

    def test_returns_body_unmodified(self, service):
        payload = [{'ds': '2024-01-03', 'yhat': 1.0, 'yhat_lower': 0.5}]
        history = [{'ds': '2024-01-01', 'y': 1.0}]

        with patch('services.prediction_service.requests.post',
                   return_value=make_response(payload)) as mock_post:
            result = service.forward_for_prediction(history)

        assert result == payload
        mock_post.assert_called_once_with(PREDICT_URL, json={'historical_data': history}, timeout=None)

    def test_non_2xx(self, service, caplog):
        with patch('services.prediction_service.requests.post',
                   return_value=make_response(status_code=500, text='Traceback: model failed')):
            with caplog.at_level('ERROR'):
                with pytest.raises(UpstreamError, match="500"):
                    service.forward_for_prediction([])

        assert 'model failed' in caplog.text

    def test_connection_error(self, service):
        with patch('services.prediction_service.requests.post',
                   side_effect=requests.exceptions.ConnectionError('refused')):
            with pytest.raises(UpstreamError):
                service.forward_for_prediction([])

    def test_non_json_body(self, service):
        with patch('services.prediction_service.requests.post',
                   return_value=make_response(ValueError('no json'), text='<html>')):
            with pytest.raises(UpstreamError):
                service.forward_for_prediction([])


class TestPredict:
    """Test the fetch-then-forward flow."""

    def test_predict_forwards_history(self, service):
        predictions = [{'ds': '2024-01-03', 'yhat': 44000.0}]

        with patch('services.prediction_service.requests.post',
                   return_value=make_response(predictions)) as mock_post:
            result = service.predict('btc')

        assert result == predictions
        sent = mock_post.call_args.kwargs['json']['historical_data']
        assert sent[0] == {'ds': '2024-01-01', 'y': 42000.5}

    def test_predict_stops_on_history_failure(self, service, provider):
        provider.get_daily_history.side_effect = CryptoCompareError('down')

        with patch('services.prediction_service.requests.post') as mock_post:
            with pytest.raises(UpstreamError):
                service.predict('btc')

        mock_post.assert_not_called()

    def test_predict_logs_preview(self, service, caplog):
        predictions = [{'yhat': i} for i in range(10)]

        with patch('services.prediction_service.requests.post',
                   return_value=make_response(predictions)):
            with caplog.at_level('INFO'):
                service.predict('btc')

        assert 'First 5 predictions for btc' in caplog.text
