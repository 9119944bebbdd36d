# store.py
"""
Portfolio record storage.
Owns the in-memory portfolio collection and mirrors it to a single JSON file.
"""

import contextlib
import json
import logging
import os
import tempfile
import threading
from typing import Dict, List, Optional

from constants import JSON_INDENT, PATCHABLE_FIELDS, PORTFOLIOS_KEY

logger = logging.getLogger(__name__)


class PersistenceError(Exception):
    """Raised when the portfolio file cannot be written."""


def _is_given(value) -> bool:
    """
    Whether a PATCH value should be applied.
    null, false, 0 and "" are skipped; empty lists and objects still count.
    """
    if isinstance(value, (list, dict)):
        return True
    return bool(value)


class PortfolioStore:
    """
    Authoritative in-memory collection of portfolio records.

    The file is read once (load_all) and rewritten wholesale after every
    mutation. Records are matched by their 'id' key; when several records
    share an id the first one in collection order wins.
    """

    def __init__(self, path: Optional[str] = None, app=None):
        self.path = path
        self._portfolios: List[Dict] = []
        self._lock = threading.Lock()
        if app:
            self.init_app(app)

    def init_app(self, app):
        """Initialize with Flask app configuration and load the file"""
        if self.path is None:
            self.path = app.config['PORTFOLIO_DB_PATH']
        self.load_all()

    # ========================================
    # LOADING / SAVING
    # ========================================

    def load_all(self) -> List[Dict]:
        """
        Read the persisted file into memory.
        A missing or unreadable file leaves the store empty instead of failing.
        """
        self._portfolios = self._read_file()
        logger.info(f"Loaded {len(self._portfolios)} portfolios from {self.path}")
        return self._portfolios

    def _read_file(self) -> List[Dict]:
        if not os.path.exists(self.path):
            logger.warning(f"Portfolio file {self.path} not found, starting with empty state")
            return []

        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.error(f"Error reading portfolio file {self.path}: {e}")
            return []

        portfolios = data.get(PORTFOLIOS_KEY) if isinstance(data, dict) else None
        if not isinstance(portfolios, list):
            logger.error(f"Portfolio file {self.path} has no '{PORTFOLIOS_KEY}' list, starting with empty state")
            return []
        return portfolios

    def save(self) -> None:
        """
        Serialize the whole collection and replace the file.
        Writes to a temporary file in the same directory, then renames it over the target.
        """
        directory = os.path.dirname(os.path.abspath(self.path))
        tmp_path = None
        try:
            fd, tmp_path = tempfile.mkstemp(prefix='.portfolios-', suffix='.json', dir=directory)
            with os.fdopen(fd, 'w', encoding='utf-8') as f:
                json.dump({PORTFOLIOS_KEY: self._portfolios}, f, indent=JSON_INDENT, ensure_ascii=False)
            os.replace(tmp_path, self.path)
        except (OSError, TypeError, ValueError) as e:
            logger.error(f"Error writing portfolio file {self.path}: {e}")
            if tmp_path:
                with contextlib.suppress(OSError):
                    os.remove(tmp_path)
            raise PersistenceError(f"Could not write {self.path}") from e

    # ========================================
    # QUERIES
    # ========================================

    def get_all(self) -> List[Dict]:
        return self._portfolios

    def get_by_id(self, portfolio_id: str) -> Optional[Dict]:
        index = self._find_index(portfolio_id)
        return self._portfolios[index] if index is not None else None

    def _find_index(self, portfolio_id: str) -> Optional[int]:
        for index, portfolio in enumerate(self._portfolios):
            if portfolio.get('id') == portfolio_id:
                return index
        return None

    # ========================================
    # MUTATIONS
    # ========================================

    def insert(self, portfolio: Dict) -> Dict:
        """
        Append a portfolio and persist.
        The record stays in memory even if the write fails.
        """
        with self._lock:
            self._portfolios.append(portfolio)
            self.save()
        return portfolio

    def replace(self, portfolio_id: str, patch: Dict) -> Optional[Dict]:
        """Overwrite every top-level key present in patch. Returns None if not found."""
        with self._lock:
            index = self._find_index(portfolio_id)
            if index is None:
                return None
            self._portfolios[index] = {**self._portfolios[index], **patch}
            self.save()
            return self._portfolios[index]

    def update_fields(self, portfolio_id: str, patch: Dict) -> Optional[Dict]:
        """Replace only analysis, coins and values when given. Returns None if not found."""
        with self._lock:
            index = self._find_index(portfolio_id)
            if index is None:
                return None
            portfolio = self._portfolios[index]
            for field in PATCHABLE_FIELDS:
                if _is_given(patch.get(field)):
                    portfolio[field] = patch[field]
            self.save()
            return portfolio

    def remove(self, portfolio_id: str) -> Optional[Dict]:
        """Delete the first portfolio with this id. Returns None if not found."""
        with self._lock:
            index = self._find_index(portfolio_id)
            if index is None:
                return None
            removed = self._portfolios.pop(index)
            self.save()
            return removed

    def __len__(self):
        return len(self._portfolios)

    def __repr__(self):
        return f"<PortfolioStore(path={self.path!r}, portfolios={len(self._portfolios)})>"
