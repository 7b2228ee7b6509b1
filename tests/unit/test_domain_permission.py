"""Unit tests for the Permission value object."""

from dataclasses import FrozenInstanceError

import pytest

from src.domain.enums import Action, Subject
from src.domain.value_objects import Permission


@pytest.mark.unit
class TestPermission:
    """Test Permission construction and equality."""

    def test_equal_pairs_are_equal_and_hash_alike(self):
        a = Permission(Action.READ, Subject.CANDIDATES)
        b = Permission(Action.READ, Subject.CANDIDATES)

        assert a == b
        assert len({a, b}) == 1

    def test_different_components_are_not_equal(self):
        assert Permission(Action.READ, Subject.JOBS) != Permission(
            Action.UPDATE, Subject.JOBS
        )
        assert Permission(Action.READ, Subject.JOBS) != Permission(
            Action.READ, Subject.CANDIDATES
        )

    def test_str_is_action_colon_subject(self):
        assert str(Permission(Action.DELETE, Subject.CANDIDATES)) == "delete:candidates"

    def test_is_immutable(self):
        permission = Permission(Action.READ, Subject.USERS)

        with pytest.raises(FrozenInstanceError):
            permission.action = Action.DELETE  # type: ignore[misc]

    def test_rejects_raw_strings(self):
        """Test components must be enum members, not plain strings."""
        with pytest.raises(TypeError):
            Permission("read", Subject.USERS)  # type: ignore[arg-type]
        with pytest.raises(TypeError):
            Permission(Action.READ, "users")  # type: ignore[arg-type]

