"""Unit tests for the conditional render wrapper."""

import pytest

from src.domain.authorization import filter_visible, render_if_permitted
from src.domain.enums import Action, Subject
from src.domain.value_objects import Permission

DELETE_CANDIDATES = Permission(Action.DELETE, Subject.CANDIDATES)
CREATE_CANDIDATES = Permission(Action.CREATE, Subject.CANDIDATES)


@pytest.mark.unit
class TestRenderIfPermitted:
    """Test branch selection."""

    def test_recruiter_delete_button_renders_fallback(self, recruiter_session):
        result = render_if_permitted(
            recruiter_session,
            "Delete",
            required=DELETE_CANDIDATES,
            fallback="",
        )

        assert result == ""

    def test_default_fallback_is_none(self, recruiter_session):
        assert render_if_permitted(recruiter_session, "Delete", required=DELETE_CANDIDATES) is None

    def test_granted_requirement_renders_content(self, recruiter_session):
        assert (
            render_if_permitted(recruiter_session, "Add", required=CREATE_CANDIDATES)
            == "Add"
        )

    def test_no_requirement_always_renders_content(self):
        """Test ungated content renders even without a session."""
        assert render_if_permitted(None, "Help") == "Help"

    def test_no_session_with_requirement_renders_fallback(self):
        assert (
            render_if_permitted(None, "Add", required=CREATE_CANDIDATES, fallback="-")
            == "-"
        )

    def test_admin_renders_delete(self, admin_session):
        assert render_if_permitted(admin_session, "Delete", required=DELETE_CANDIDATES) == "Delete"


@pytest.mark.unit
class TestFilterVisible:
    """Test filtering several gated items at once."""

    def test_keeps_order_and_drops_denied_items(self, recruiter_session):
        items = [
            ("add", CREATE_CANDIDATES),
            ("delete", DELETE_CANDIDATES),
            ("help", None),
        ]

        assert filter_visible(recruiter_session, items) == ["add", "help"]

    def test_without_session_only_ungated_items_remain(self):
        items = [("add", CREATE_CANDIDATES), ("help", None)]

        assert filter_visible(None, items) == ["help"]
