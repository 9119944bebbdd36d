# providers/base_provider.py
"""
Abstract base class for market data providers.
Enforces a consistent daily-history interface across data sources.
"""

from abc import ABC, abstractmethod
from typing import Dict
from datetime import datetime, date, timedelta, timezone
import pandas as pd


class BaseHistoryProvider(ABC):
    """
    Abstract base class for crypto price history providers.
    All providers must implement these methods with consistent validation.
    """

    def __init__(self, config: Dict):
        """
        Initialize provider with configuration.

        Args:
            config: Dictionary containing provider-specific settings
        """
        self.config = config
        self.timeout = config.get('timeout')
        self.quote_currency = config.get('quote_currency', 'USD')

    # ========================================
    # VALIDATION METHODS
    # ========================================

    def _validate_symbol(self, symbol: str) -> str:
        """Validate and normalize a coin symbol"""
        if not isinstance(symbol, str) or not symbol.strip():
            raise ValueError(f"Invalid symbol: {symbol!r}")
        return symbol.strip().upper()

    def _assert_price(self, price: float, symbol: str, context: str) -> None:
        """Validate a price is a non-negative number"""
        if price is None or pd.isna(price):
            raise ValueError(f"[{symbol}] price is NaN in {context}")
        try:
            p = float(price)
        except (TypeError, ValueError):
            raise ValueError(f"[{symbol}] invalid price in {context}")
        if p < 0:
            raise ValueError(f"[{symbol}] price cannot be negative in {context}")

    def _assert_date(self, dt: datetime, symbol: str, context: str) -> None:
        """Validate date/timestamp"""
        if not isinstance(dt, (datetime, date)):
            raise ValueError(f"[{symbol}] invalid date type in {context}")
        now = datetime.now(timezone.utc)
        if dt > now + timedelta(days=1):
            raise ValueError(f"[{symbol}] date cannot be in future in {context}")

    # ========================================
    # ABSTRACT METHODS (must be implemented)
    # ========================================

    @abstractmethod
    def get_daily_history(self, symbol: str, limit: int) -> pd.DataFrame:
        """
        Get trailing daily OHLCV history for a single symbol.

        Args:
            symbol: Coin symbol, e.g. BTC
            limit: Number of trailing days to request

        Returns:
            DataFrame with columns: timestamp (UTC), close, and optionally open, high, low, volume

        Raises:
            ValueError: If the symbol is invalid or data cannot be validated
            ConnectionError: If provider unavailable
        """
        pass

    @abstractmethod
    def get_provider_name(self) -> str:
        """Return human-readable provider name"""
        pass

    # ========================================
    # COMMON HELPER METHODS
    # ========================================

    def validate_price_data(self, df: pd.DataFrame, symbol: str) -> pd.DataFrame:
        """
        Validate DataFrame of historical prices.
        Ensures required columns exist and every row has a valid timestamp and close.
        """
        for col in ('timestamp', 'close'):
            if col not in df.columns:
                raise ValueError(f"Missing required column: {col}")

        for idx, row in df.iterrows():
            self._assert_date(row['timestamp'], symbol, f"row {idx}")
            self._assert_price(row['close'], symbol, f"row {idx} close")

        return df

    def __repr__(self):
        return f"<{self.__class__.__name__}(provider={self.get_provider_name()})>"
