"""Page view and navigation response schemas."""

from pydantic import BaseModel, Field


class AffordanceResponse(BaseModel):
    """A control the current role may use on a page."""

    id: str = Field(..., description="Stable control id", examples=["add_candidate"])
    label: str = Field(..., description="Display label", examples=["Add Candidate"])


class PageViewResponse(BaseModel):
    """Rendered page description.

    Affordances the role lacks a grant for are omitted.
    """

    path: str = Field(..., description="Page path", examples=["/candidates"])
    title: str = Field(..., description="Page title", examples=["Candidates"])
    affordances: list[AffordanceResponse] = Field(
        default_factory=list,
        description="Visible controls",
    )


class NavigationItemResponse(BaseModel):
    """Single navigation link."""

    path: str = Field(..., description="Target page path")
    label: str = Field(..., description="Link label")


class NavigationSectionResponse(BaseModel):
    """Group of navigation links. Only sections with visible items are sent."""

    title: str = Field(..., description="Section title")
    items: list[NavigationItemResponse] = Field(..., description="Visible links")


class NavigationResponse(BaseModel):
    """Navigation visible to the current session."""

    sections: list[NavigationSectionResponse] = Field(
        ..., description="Visible sections in display order"
    )
    user_menu: list[NavigationItemResponse] = Field(
        default_factory=list,
        description="Visible items of the user menu",
    )
