# services/__init__.py
"""
Service layer for upstream integrations.
"""

from services.prediction_service import PredictionService, UpstreamError, log_preview

__all__ = ['PredictionService', 'UpstreamError', 'log_preview']
