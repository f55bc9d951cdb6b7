"""The Streamlit page rendered headlessly against the in-process application."""
from __future__ import annotations

from pathlib import Path

import pytest
from streamlit.testing.v1 import AppTest

PAGE = Path(__file__).resolve().parents[2] / "client" / "streamlit_app" / "user_management.py"


@pytest.fixture
def page(routed_calls: list, create_user):
    create_user("Jane Smith", "jane@example.com")
    at = AppTest.from_file(str(PAGE), default_timeout=10)
    at.run()
    assert not at.exception
    return at


def test_each_row_puts_both_actions_under_one_header(page: AppTest):
    # Header and one user row split Name | Email | Actions, the row nesting an Edit | Delete pair.
    assert len(page.columns) == 3 + 3 + 2
    name_w, email_w, actions_w = (c.weight for c in page.columns[:3])
    assert name_w == pytest.approx(email_w)
    assert actions_w == pytest.approx(name_w * 2 / 3)
    assert any(m.value == "**Actions**" for m in page.markdown)
    assert [b.label for b in page.button if b.key and b.key.startswith(("edit_", "delete_"))] == ["Edit", "Delete"]


def test_lists_once_on_mount(page: AppTest, routed_calls: list):
    page.run()

    assert [call[0] for call in routed_calls] == ["GET"]
    assert [u["name"] for u in page.session_state["users"]] == ["Jane Smith"]


def test_edit_loads_row_into_form(page: AppTest):
    user = page.session_state["users"][0]

    page.button(key=f"edit_{user['id']}").click().run()

    assert page.session_state["editing"] == user
    assert page.text_input(key="form_name").value == "Jane Smith"
    assert page.text_input(key="form_email").value == "jane@example.com"
