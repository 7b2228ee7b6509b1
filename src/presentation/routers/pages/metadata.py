"""Page metadata types for the page registry.

The registry is the single source of truth for application pages: their
paths, titles, the permissions the route guard requires, and the controls
(affordances) each page shows only to roles holding a grant.

Core types:
    AffordanceSpec: Gated page control (button, menu item)
    PageMetadata: Complete page specification
    NavigationItemSpec: Gated navigation link
    NavigationSectionSpec: Titled group of navigation links

Usage:
    from src.presentation.routers.pages.metadata import PageMetadata

    PageMetadata(
        path="/jobs",
        title="Jobs",
        required=(Permission(Action.READ, Subject.JOBS),),
    )
"""

from collections.abc import Sequence
from dataclasses import dataclass, field

from src.domain.value_objects import Permission


@dataclass(frozen=True, kw_only=True)
class AffordanceSpec:
    """A page control gated by the render wrapper.

    Attributes:
        id: Stable identifier used by clients.
        label: Display label.
        required: Permission gating the control. None means always shown.
    """

    id: str
    label: str
    required: Permission | None = None


@dataclass(frozen=True, kw_only=True)
class PageMetadata:
    """Page specification.

    Attributes:
        path: URL path of the page.
        title: Page title.
        required: Permissions the route guard checks (all must hold). Empty
            means any signed-in identity may view the page.
        public: Page is served without a session (login, unauthorized).
        affordances: Gated controls, in display order.
    """

    path: str
    title: str
    required: Sequence[Permission] = ()
    public: bool = False
    affordances: Sequence[AffordanceSpec] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        """Validate metadata consistency.

        Raises:
            ValueError: If the path is not absolute or a public page
                declares required permissions.
        """
        if not self.path.startswith("/"):
            raise ValueError(f"Page path must start with '/': {self.path!r}")
        if self.public and self.required:
            raise ValueError(f"Public page {self.path} cannot require permissions")


@dataclass(frozen=True, kw_only=True)
class NavigationItemSpec:
    """Navigation link, shown only when `required` is granted (or None)."""

    path: str
    label: str
    required: Permission | None = None


@dataclass(frozen=True, kw_only=True)
class NavigationSectionSpec:
    """Titled group of links. Hidden when none of its items is visible."""

    title: str
    items: Sequence[NavigationItemSpec]
