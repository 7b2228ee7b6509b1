"""Route guard decisions.

The route guard never navigates by itself; it returns one of these outcomes
and the presentation layer turns it into a page render or a redirect.
"""

from enum import Enum


class GuardOutcome(str, Enum):
    """Result of evaluating a route guard.

    Attributes:
        RENDER: Identity present and every required permission granted.
        REDIRECT_LOGIN: No authenticated identity.
        REDIRECT_UNAUTHORIZED: Identity present but a required permission is missing.
    """

    RENDER = "render"
    REDIRECT_LOGIN = "redirect_login"
    REDIRECT_UNAUTHORIZED = "redirect_unauthorized"
