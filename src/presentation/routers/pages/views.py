"""Build page and navigation views for a session.

Every gated element goes through the render wrapper, so the same permission
table decides pages, controls and links.
"""

from collections.abc import Sequence

from src.domain.authorization import PermissionTable, filter_visible
from src.domain.entities import Session
from src.presentation.routers.pages.metadata import (
    NavigationItemSpec,
    NavigationSectionSpec,
    PageMetadata,
)
from src.schemas import (
    AffordanceResponse,
    NavigationItemResponse,
    NavigationResponse,
    NavigationSectionResponse,
    PageViewResponse,
)


def build_page_view(
    page: PageMetadata,
    session: Session | None,
    table: PermissionTable,
) -> PageViewResponse:
    """Describe a page with only the affordances the session may use."""
    visible = filter_visible(
        session,
        ((spec, spec.required) for spec in page.affordances),
        table=table,
    )
    return PageViewResponse(
        path=page.path,
        title=page.title,
        affordances=[AffordanceResponse(id=spec.id, label=spec.label) for spec in visible],
    )


def _visible_items(
    session: Session | None,
    items: Sequence[NavigationItemSpec],
    table: PermissionTable,
) -> list[NavigationItemResponse]:
    return [
        NavigationItemResponse(path=item.path, label=item.label)
        for item in filter_visible(session, ((i, i.required) for i in items), table=table)
    ]


def build_navigation(
    session: Session | None,
    sections: Sequence[NavigationSectionSpec],
    user_menu: Sequence[NavigationItemSpec],
    table: PermissionTable,
) -> NavigationResponse:
    """Build the sidebar and user menu for a session.

    Sections left without any visible item are dropped entirely.
    """
    visible_sections: list[NavigationSectionResponse] = []
    for section in sections:
        items = _visible_items(session, section.items, table)
        if items:
            visible_sections.append(NavigationSectionResponse(title=section.title, items=items))

    return NavigationResponse(
        sections=visible_sections,
        user_menu=_visible_items(session, user_menu, table),
    )
