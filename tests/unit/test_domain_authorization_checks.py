"""Unit tests for has_permission."""

import pytest

from src.domain.authorization import (
    DEFAULT_PERMISSION_TABLE,
    PermissionTable,
    has_permission,
    is_granted,
)
from src.domain.enums import Action, Subject, UserRole
from src.domain.value_objects import Permission
from tests.conftest import make_session


@pytest.mark.unit
class TestHasPermission:
    """Test the authorization check against the default table."""

    def test_viewer_cannot_update_candidates(self, viewer_session):
        assert has_permission(viewer_session, Action.UPDATE, Subject.CANDIDATES) is False

    def test_viewer_can_read_jobs(self, viewer_session):
        assert has_permission(viewer_session, Action.READ, Subject.JOBS) is True

    @pytest.mark.parametrize("action", list(Action))
    @pytest.mark.parametrize("subject", list(Subject))
    def test_no_session_is_always_denied(self, action, subject):
        assert has_permission(None, action, subject) is False

    @pytest.mark.parametrize("role", list(UserRole))
    def test_matches_table_membership_for_every_pair(self, role):
        """Test the check is true exactly for pairs in the role's entry."""
        session = make_session(role)
        grants = DEFAULT_PERMISSION_TABLE[role]

        for subject in Subject:
            for action in Action:
                expected = Permission(action, subject) in grants
                assert has_permission(session, action, subject) is expected

    def test_uses_supplied_table(self, viewer_session):
        table = PermissionTable({UserRole.VIEWER: [Permission(Action.DELETE, Subject.JOBS)]})

        assert has_permission(viewer_session, Action.DELETE, Subject.JOBS, table=table)
        assert not has_permission(viewer_session, Action.READ, Subject.JOBS, table=table)

    def test_role_with_empty_entry_is_denied(self, admin_session):
        table = PermissionTable({})

        assert has_permission(admin_session, Action.READ, Subject.USERS, table=table) is False

    def test_is_granted_takes_a_pair(self, recruiter_session):
        assert is_granted(recruiter_session, Permission(Action.CREATE, Subject.JOBS))
        assert not is_granted(None, Permission(Action.CREATE, Subject.JOBS))
