"""Permission table loader.

Reads a role permission table from JSON in the audit format:

    {
        "admin": [{"action": "read", "subject": "candidates"}, ...],
        "viewer": [...]
    }

Every role, action and subject is validated with Pydantic before a
PermissionTable is built, so malformed values never reach the authorization
check. Roles missing from the file get an empty entry.
"""

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from src.core.enums import ErrorCode
from src.domain.authorization import PermissionTable
from src.domain.enums import Action, Subject, UserRole
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.value_objects import Permission


class PermissionTableError(ValueError):
    """Raised when a permission table source cannot be loaded.

    Attributes:
        code: Always ErrorCode.PERMISSION_TABLE_INVALID.
        source: File path or "<mapping>".
    """

    code = ErrorCode.PERMISSION_TABLE_INVALID

    def __init__(self, message: str, *, source: str) -> None:
        super().__init__(f"{source}: {message}")
        self.source = source


class PermissionEntry(BaseModel):
    """One grant in the audit format."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    action: Action
    subject: Subject

    def to_permission(self) -> Permission:
        return Permission(self.action, self.subject)


_TABLE_ADAPTER = TypeAdapter(dict[UserRole, list[PermissionEntry]])


def parse_permission_table(
    data: Mapping[str, Any],
    *,
    source: str = "<mapping>",
) -> PermissionTable:
    """Validate audit-format data and build a PermissionTable.

    Args:
        data: Decoded JSON object.
        source: Label used in error messages.

    Returns:
        PermissionTable: Validated table.

    Raises:
        PermissionTableError: If a role, action or subject is unknown, or the
            structure does not match the audit format.
    """
    try:
        entries = _TABLE_ADAPTER.validate_python(data)
    except PydanticValidationError as e:
        raise PermissionTableError(_summarize(e), source=source) from e
    return PermissionTable(
        {role: [entry.to_permission() for entry in grants] for role, grants in entries.items()}
    )


def load_permission_table(
    path: str | Path,
    *,
    logger: LoggerProtocol | None = None,
) -> PermissionTable:
    """Load and validate a permission table JSON file.

    Args:
        path: File path.
        logger: Optional logger for a load summary.

    Returns:
        PermissionTable: Validated table.

    Raises:
        PermissionTableError: If the file is missing or unreadable, is not
            UTF-8 JSON, or does not describe a valid table.
    """
    source = str(path)
    try:
        raw = json.loads(Path(path).read_text(encoding="utf-8"))
    except FileNotFoundError as e:
        raise PermissionTableError("file not found", source=source) from e
    except OSError as e:
        reason = e.strerror or type(e).__name__
        raise PermissionTableError(f"unreadable ({reason})", source=source) from e
    except UnicodeDecodeError as e:
        raise PermissionTableError("file is not UTF-8 text", source=source) from e
    except json.JSONDecodeError as e:
        raise PermissionTableError(f"invalid JSON ({e.msg})", source=source) from e

    if not isinstance(raw, dict):
        raise PermissionTableError("top-level value must be an object", source=source)

    table = parse_permission_table(raw, source=source)
    if logger is not None:
        logger.info(
            "permission_table_loaded",
            source=source,
            grants={role.value: len(grants) for role, grants in table.items()},
        )
    return table


def _summarize(error: PydanticValidationError) -> str:
    """Render the first few validation errors as 'loc: msg' pairs."""
    parts = []
    for item in error.errors()[:3]:
        loc = ".".join(str(part) for part in item["loc"])
        parts.append(f"{loc}: {item['msg']}")
    return "; ".join(parts)
