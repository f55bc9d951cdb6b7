"""State transitions for the user-management page.

Each function takes the API client and a mutable mapping holding the page
state (``st.session_state`` in the running app). A failed HTTP call stores
its message under ``error`` and leaves the other keys untouched.
"""
from __future__ import annotations

from typing import Any, Dict, MutableMapping, Optional

import requests

State = MutableMapping[str, Any]


def _fail(state: State, exc: requests.RequestException) -> None:
    state["error"] = str(exc)


def clear_form(state: State) -> None:
    state["form_name"] = ""
    state["form_email"] = ""
    state["editing"] = None


def refresh_users(client, state: State) -> bool:
    state["loading"] = True
    state["error"] = None
    try:
        state["users"] = client.list_users()
        return True
    except requests.RequestException as exc:
        _fail(state, exc)
        return False
    finally:
        state["loading"] = False


def submit_form(client, state: State) -> bool:
    """Create, or update the row being edited, then reload the list."""
    state["error"] = None
    name, email = state["form_name"], state["form_email"]
    editing: Optional[Dict[str, Any]] = state.get("editing")
    try:
        if editing:
            client.update_user(editing["id"], name, email)
        else:
            client.create_user(name, email)
    except requests.RequestException as exc:
        _fail(state, exc)
        return False
    clear_form(state)
    return refresh_users(client, state)


def start_edit(state: State, user: Dict[str, Any]) -> None:
    state["editing"] = user
    state["form_name"] = user["name"]
    state["form_email"] = user["email"]


def cancel_edit(state: State) -> None:
    clear_form(state)


def request_delete(state: State, user_id: str) -> None:
    state["pending_delete"] = user_id


def cancel_delete(state: State) -> None:
    state["pending_delete"] = None


def confirm_delete(client, state: State) -> bool:
    user_id = state.get("pending_delete")
    if not user_id:
        return False
    state["pending_delete"] = None
    state["error"] = None
    try:
        client.delete_user(user_id)
    except requests.RequestException as exc:
        _fail(state, exc)
        return False
    return refresh_users(client, state)
