"""Session state helpers for Streamlit."""
from __future__ import annotations

from typing import Any, Dict

import streamlit as st

DEFAULTS: Dict[str, Any] = {
    "users": [],
    "loading": False,
    "error": None,
    "editing": None,
    "form_name": "",
    "form_email": "",
    "pending_delete": None,
    "mounted": False,
}


def init_session_state() -> None:
    for key, value in DEFAULTS.items():
        if key not in st.session_state:
            st.session_state[key] = list(value) if isinstance(value, list) else value
