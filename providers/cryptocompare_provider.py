# providers/cryptocompare_provider.py

import logging
import requests
import pandas as pd
from typing import Dict

from .base_provider import BaseHistoryProvider

logger = logging.getLogger(__name__)

HISTORY_COLUMNS = ['timestamp', 'open', 'high', 'low', 'close', 'volume']


class CryptoCompareError(Exception):
    pass


class CryptoCompareQuotaError(CryptoCompareError):
    pass


class CryptoCompareInvalidKeyError(CryptoCompareError):
    pass


class CryptoCompareProvider(BaseHistoryProvider):
    def __init__(self, config: Dict):
        super().__init__(config)
        self.api_key = config.get('api_key') or ''
        self.base_url = config.get('base_url', 'https://min-api.cryptocompare.com/data/v2/histoday')

        if self.api_key:
            logger.info("CryptoCompare provider initialized (API key)")
        else:
            logger.warning("CryptoCompare provider initialized without an API key, anonymous rate limits apply")

    def get_provider_name(self) -> str:
        return "CryptoCompare"

    def _make_request(self, params: Dict) -> Dict:
        if self.api_key:
            params['api_key'] = self.api_key

        try:
            response = requests.get(self.base_url, params=params, timeout=self.timeout)
            response.raise_for_status()
            data = response.json()
        except requests.exceptions.HTTPError as e:
            body = e.response.text[:500] if e.response is not None else ''
            logger.error(f"CryptoCompare HTTP error: {e} {body}")
            raise CryptoCompareError(f"HTTP error: {e}") from e
        except requests.RequestException as e:
            raise CryptoCompareError(f"Request failed: {e}") from e
        except ValueError as e:
            raise CryptoCompareError("Response is not valid JSON") from e

        if not isinstance(data, dict):
            raise CryptoCompareError("Unexpected response shape")

        if data.get('Response') == 'Error':
            msg = data.get('Message', 'unknown error')
            lowered = msg.lower()
            if 'rate limit' in lowered:
                raise CryptoCompareQuotaError(f"Rate limit exceeded: {msg}")
            if ('api key' in lowered or 'api_key' in lowered) and ('invalid' in lowered or 'not valid' in lowered):
                raise CryptoCompareInvalidKeyError("Invalid CryptoCompare API key")
            raise CryptoCompareError(f"API Error: {msg}")

        return data

    def get_daily_history(self, symbol: str, limit: int = 365) -> pd.DataFrame:
        symbol = self._validate_symbol(symbol)

        logger.info(f"Fetching {symbol}/{self.quote_currency} daily history ({limit} days)...")

        data = self._make_request({
            'fsym': symbol,
            'tsym': self.quote_currency,
            'limit': limit,
        })

        payload = data.get('Data')
        rows = payload.get('Data') if isinstance(payload, dict) else None
        if not isinstance(rows, list):
            raise CryptoCompareError(f"Unexpected response shape for {symbol}: missing Data.Data")

        if not rows:
            logger.warning(f"No history returned for {symbol}")
            return pd.DataFrame(columns=HISTORY_COLUMNS)

        try:
            df = pd.DataFrame([{
                'timestamp': pd.to_datetime(item['time'], unit='s', utc=True),
                'open': item.get('open'),
                'high': item.get('high'),
                'low': item.get('low'),
                'close': item['close'],
                'volume': item.get('volumefrom'),
            } for item in rows])
        except (KeyError, TypeError, ValueError) as e:
            raise CryptoCompareError(f"Unexpected history entry for {symbol}: {e}") from e

        df = df.sort_values('timestamp').reset_index(drop=True)
        try:
            df = self.validate_price_data(df, symbol)
        except ValueError as e:
            raise CryptoCompareError(str(e)) from e

        logger.info(f"Retrieved {len(df)} days of data for {symbol}")
        return df
