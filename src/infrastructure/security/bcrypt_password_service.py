"""bcrypt implementation of PasswordHashingProtocol.

The container passes ``settings.bcrypt_rounds`` as the cost factor; tests
run with the minimum so demo users seed quickly.
"""

import bcrypt

MIN_COST_FACTOR = 4
MAX_COST_FACTOR = 31
_ENCODING = "utf-8"


class BcryptPasswordService:
    """Hash and verify passwords with bcrypt.

    Args:
        cost_factor: log2 of the bcrypt work factor.

    Raises:
        ValueError: If `cost_factor` is outside 4..31.

    Example:
        >>> service = BcryptPasswordService(cost_factor=4)
        >>> service.verify_password("talenttrack", service.hash_password("talenttrack"))
        True
    """

    def __init__(self, cost_factor: int = 12) -> None:
        if cost_factor < MIN_COST_FACTOR or cost_factor > MAX_COST_FACTOR:
            raise ValueError(
                f"Cost factor must be between {MIN_COST_FACTOR} and {MAX_COST_FACTOR}, "
                f"got {cost_factor}"
            )
        self._cost_factor = cost_factor

    @property
    def cost_factor(self) -> int:
        return self._cost_factor

    def hash_password(self, password: str) -> str:
        salt = bcrypt.gensalt(rounds=self._cost_factor)
        return bcrypt.hashpw(password.encode(_ENCODING), salt).decode(_ENCODING)

    def verify_password(self, password: str, password_hash: str) -> bool:
        """Compare in constant time; unusable hashes and over-long inputs return False."""
        try:
            return bcrypt.checkpw(password.encode(_ENCODING), password_hash.encode(_ENCODING))
        except (ValueError, AttributeError):
            return False
