"""Session authentication dependencies.

FastAPI dependencies that resolve the opaque session token to a Session.
The token is read from the ``Authorization: Bearer`` header first, then from
the session cookie set at login.

Usage:
    # Protected API route (401 without a session)
    @router.get("/protected")
    async def protected_route(session: CurrentSession):
        return {"role": session.role.value}

    # Optional auth route
    @router.get("/optional")
    async def optional_route(session: OptionalSession):
        ...
"""

from typing import Annotated

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from src.core.config import settings
from src.core.container import get_session_store
from src.domain.entities import Session
from src.domain.protocols import SessionStoreProtocol

# auto_error=False: missing credentials resolve to None and routes decide
bearer_scheme_optional = HTTPBearer(auto_error=False)


def extract_session_token(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None,
) -> str | None:
    """Return the session token carried by a request, if any.

    Args:
        request: Incoming request (cookie source).
        credentials: Parsed Bearer credentials, or None.

    Returns:
        Token string, or None when neither header nor cookie is present.
    """
    if credentials is not None and credentials.credentials:
        return credentials.credentials
    return request.cookies.get(settings.session_cookie_name) or None


async def get_current_session(
    request: Request,
    credentials: Annotated[
        HTTPAuthorizationCredentials | None, Depends(bearer_scheme_optional)
    ],
    session_store: Annotated[SessionStoreProtocol, Depends(get_session_store)],
) -> Session | None:
    """Get the current session if the request is authenticated.

    Unknown or missing tokens resolve to None; this dependency never raises.

    Returns:
        Session if a live token was presented, None otherwise.
    """
    token = extract_session_token(request, credentials)
    if token is None:
        return None
    return await session_store.get(token)


async def require_session(
    session: Annotated[Session | None, Depends(get_current_session)],
) -> Session:
    """Get the current session or fail with 401.

    Raises:
        HTTPException 401: If no live session token was presented.
    """
    if session is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return session


OptionalSession = Annotated[Session | None, Depends(get_current_session)]
CurrentSession = Annotated[Session, Depends(require_session)]
