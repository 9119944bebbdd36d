# constants.py
"""
Application constants and response messages.
These are hardcoded values that control application behavior.
"""

# =============================================================================
# SERVER
# =============================================================================

DEFAULT_PORT = 8888

WELCOME_MESSAGE = 'Welcome to My Crypto Portfolio API'

# =============================================================================
# PORTFOLIO RECORDS
# =============================================================================

# Top-level key of the persisted JSON document
PORTFOLIOS_KEY = 'portfolios'

# Fields a PATCH request is allowed to replace
PATCHABLE_FIELDS = ('analysis', 'coins', 'values')

# Indentation of the persisted JSON document
JSON_INDENT = 2

# =============================================================================
# PREDICTIONS
# =============================================================================

# Number of predictions echoed to the log after a forward
PREDICTION_LOG_PREVIEW = 5

# Upstream error bodies are truncated to this many characters in the log
UPSTREAM_BODY_LOG_LIMIT = 500

# =============================================================================
# RESPONSE MESSAGES
# =============================================================================

MSG_NOT_FOUND = 'Portfolio not found'
MSG_UPDATED = 'Portfolio updated successfully'
MSG_DELETED = 'Portfolio deleted successfully'
MSG_SAVE_FAILED = 'Failed to save new portfolio'
MSG_UPDATE_FAILED = 'Failed to update portfolio'
MSG_DELETE_FAILED = 'Failed to delete portfolio'
MSG_PREDICTIONS_FAILED = 'Failed to fetch predictions'
MSG_FORWARD_FAILED = 'Failed to fetch predictions from prediction service'
MSG_INVALID_HISTORY = 'Invalid or missing historical_data'
