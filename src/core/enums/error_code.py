"""Machine-readable codes carried by DomainError values.

The value doubles as the last segment of the problem type URI
(``{api_base_url}/errors/invalid_credentials``), so values never change once
published.
"""

from enum import Enum


class ErrorCode(Enum):
    """Failure reasons returned by application handlers."""

    # Login
    INVALID_CREDENTIALS = "invalid_credentials"
    ACCOUNT_INACTIVE = "account_inactive"

    # Logout
    SESSION_NOT_FOUND = "session_not_found"

    # Startup
    PERMISSION_TABLE_INVALID = "permission_table_invalid"
