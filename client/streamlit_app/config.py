"""Configuration for the Streamlit user-management client."""
from __future__ import annotations

import os

API_BASE_URL = os.getenv("API_BASE_URL", "http://localhost:8000")
API_TIMEOUT_SECONDS = int(os.getenv("API_TIMEOUT_SECONDS", "30"))

# Mirrors the server-side column bounds so the form rejects overlong input early.
NAME_MAX_LENGTH = 50
EMAIL_MAX_LENGTH = 20
