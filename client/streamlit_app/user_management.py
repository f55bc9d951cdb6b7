"""Streamlit page for creating, editing and deleting users."""
from __future__ import annotations

import streamlit as st

import actions
from api_client import get_client
from config import EMAIL_MAX_LENGTH, NAME_MAX_LENGTH
from state import init_session_state


def render_form(client) -> None:
    editing = st.session_state.editing
    st.header("Edit User" if editing else "Create New User")
    with st.form("user_form"):
        st.text_input(
            "Name",
            key="form_name",
            max_chars=NAME_MAX_LENGTH,
            placeholder=f"Enter name (max {NAME_MAX_LENGTH} characters)",
        )
        st.text_input(
            "Email",
            key="form_email",
            max_chars=EMAIL_MAX_LENGTH,
            placeholder=f"Enter email (max {EMAIL_MAX_LENGTH} characters)",
        )
        st.form_submit_button(
            "Update User" if editing else "Create User",
            type="primary",
            on_click=actions.submit_form,
            args=(client, st.session_state),
        )
    if editing:
        st.button("Cancel", on_click=actions.cancel_edit, args=(st.session_state,))


def render_delete_confirmation(client) -> None:
    pending = st.session_state.pending_delete
    if not pending:
        return
    user = next((u for u in st.session_state.users if u["id"] == pending), None)
    label = user["name"] if user else pending
    st.warning(f"Are you sure you want to delete {label}?")
    col1, col2 = st.columns(2)
    col1.button("Confirm delete", on_click=actions.confirm_delete, args=(client, st.session_state))
    col2.button("Keep user", on_click=actions.cancel_delete, args=(st.session_state,))


def render_users() -> None:
    st.header("Users List")
    if st.session_state.loading:
        st.info("Loading users...")
        return
    users = st.session_state.users
    if not users:
        st.info("No users found. Create one above!")
        return

    header = st.columns([3, 3, 2])
    header[0].markdown("**Name**")
    header[1].markdown("**Email**")
    header[2].markdown("**Actions**")
    for user in users:
        row = st.columns([3, 3, 2])
        row[0].write(user["name"])
        row[1].write(user["email"])
        edit_col, delete_col = row[2].columns(2)
        edit_col.button("Edit", key=f"edit_{user['id']}", on_click=actions.start_edit, args=(st.session_state, user))
        delete_col.button(
            "Delete",
            key=f"delete_{user['id']}",
            on_click=actions.request_delete,
            args=(st.session_state, user["id"]),
        )


def main():
    st.set_page_config(page_title="User Management", layout="wide")
    init_session_state()
    client = get_client()

    if not st.session_state.mounted:
        st.session_state.mounted = True
        actions.refresh_users(client, st.session_state)

    st.title("User Management")
    if st.session_state.error:
        st.error(f"Error: {st.session_state.error}")

    render_form(client)
    render_delete_confirmation(client)
    render_users()


if __name__ == "__main__":
    main()
