# providers/__init__.py
"""
Provider factory and exports.
Builds the market data provider from application configuration.
"""

from typing import Dict
from .base_provider import BaseHistoryProvider
from .cryptocompare_provider import (
    CryptoCompareProvider,
    CryptoCompareError,
    CryptoCompareQuotaError,
    CryptoCompareInvalidKeyError
)


class MarketDataService:
    """
    Factory for creating the market data provider.
    """

    @staticmethod
    def create_provider(config: Dict) -> BaseHistoryProvider:
        """
        Create price history provider based on configuration.

        Args:
            config: Application configuration

        Returns:
            Configured provider instance
        """
        provider_config = {
            'api_key': config.get('CRYPTOCOMPARE_API_KEY', ''),
            'base_url': config.get('CRYPTOCOMPARE_BASE_URL', 'https://min-api.cryptocompare.com/data/v2/histoday'),
            'quote_currency': config.get('QUOTE_CURRENCY', 'USD'),
            'timeout': config.get('UPSTREAM_TIMEOUT'),
        }
        return CryptoCompareProvider(provider_config)


# Exports
__all__ = [
    'BaseHistoryProvider',
    'CryptoCompareProvider',
    'CryptoCompareError',
    'CryptoCompareQuotaError',
    'CryptoCompareInvalidKeyError',
    'MarketDataService'
]
