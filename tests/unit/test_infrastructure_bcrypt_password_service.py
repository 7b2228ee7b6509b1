"""Unit tests for BcryptPasswordService."""

import pytest

from src.infrastructure.security import BcryptPasswordService


@pytest.mark.unit
class TestBcryptPasswordService:
    """Test hashing and verification with a cheap cost factor."""

    def test_hash_and_verify(self):
        service = BcryptPasswordService(cost_factor=4)

        password_hash = service.hash_password("talenttrack")

        assert password_hash.startswith("$2b$04$")
        assert service.verify_password("talenttrack", password_hash) is True
        assert service.verify_password("wrong", password_hash) is False

    def test_malformed_hash_does_not_raise(self):
        service = BcryptPasswordService(cost_factor=4)

        assert service.verify_password("talenttrack", "not-a-hash") is False

    @pytest.mark.parametrize("cost", [3, 32])
    def test_rejects_out_of_range_cost(self, cost):
        with pytest.raises(ValueError, match="Cost factor"):
            BcryptPasswordService(cost_factor=cost)

    def test_cost_factor_property(self):
        assert BcryptPasswordService(cost_factor=5).cost_factor == 5
