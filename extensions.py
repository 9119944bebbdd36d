# extensions.py
"""
Flask extensions initialization.
Centralized to avoid circular imports.
"""

from flask_cors import CORS

# Initialize extensions without app; any origin may call the API
cors = CORS()
